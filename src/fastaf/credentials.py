"""Interactive acquisition of the OpenAI API key.

The key is asked for on every run. It is never read from the environment,
never written to disk and never logged; it only lives in memory long enough
to build the generation client.
"""

from typing import Callable, Optional

import click

from fastaf.exceptions import CredentialRejected
from fastaf.logging_config import get_logger

logger = get_logger(__name__)

API_KEY_PREFIX = "sk-"
API_KEY_MIN_LENGTH = 20
API_KEY_URL = "https://platform.openai.com/account/api-keys"


class Credential:
    """Opaque wrapper around a secret API key.

    ``str()`` and ``repr()`` only show a masked form so the key cannot leak
    through logging or tracebacks.
    """

    __slots__ = ("_secret",)

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def reveal(self) -> str:
        """Return the raw secret."""
        return self._secret

    @property
    def masked(self) -> str:
        return f"{self._secret[:3]}...{self._secret[-4:]}"

    def __repr__(self) -> str:
        return f"Credential({self.masked!r})"

    def __str__(self) -> str:
        return self.masked

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Credential):
            return NotImplemented
        return self._secret == other._secret

    def __hash__(self) -> int:
        return hash(self._secret)


def validate_api_key(value: Optional[str]) -> Optional[str]:
    """Check an API key against the expected shape.

    Args:
        value: Raw input from the operator

    Returns:
        The first validation message that applies, or None if the key is acceptable
    """
    if not value or not value.strip():
        return "API key is required"
    if not value.startswith(API_KEY_PREFIX):
        return f'API key should start with "{API_KEY_PREFIX}"'
    if len(value) < API_KEY_MIN_LENGTH:
        return "API key appears to be too short"
    return None


def _prompt_hidden(text: str) -> str:
    return click.prompt(text, hide_input=True, default="", show_default=False)


def _echo_rejection(message: str) -> None:
    click.secho(f">> {message}", fg="red", err=True)


def acquire_credential(
    prompt: Callable[[str], str] = _prompt_hidden,
    on_rejected: Callable[[str], None] = _echo_rejection,
    max_attempts: int = 3,
) -> Credential:
    """Prompt for the API key until a well-formed one is entered.

    Args:
        prompt: Callable that shows a masked prompt and returns the input
        on_rejected: Callable that shows a validation message to the operator
        max_attempts: Number of prompts before giving up

    Returns:
        The accepted Credential

    Raises:
        CredentialRejected: If every attempt was rejected or the prompt was aborted
    """
    for attempt in range(1, max_attempts + 1):
        try:
            value = prompt("OpenAI API Key")
        except (click.Abort, EOFError, KeyboardInterrupt) as e:
            raise CredentialRejected("Failed to get API key from user input") from e

        problem = validate_api_key(value)
        if problem is None:
            logger.info("API key accepted", extra={"attempt": attempt})
            return Credential(value)

        logger.info("API key rejected", extra={"attempt": attempt, "reason": problem})
        on_rejected(problem)

    raise CredentialRejected(
        f"No valid API key entered after {max_attempts} attempt(s)"
    )
