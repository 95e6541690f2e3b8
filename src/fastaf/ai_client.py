"""AI client for generating commit messages using OpenAI-compatible APIs.

The client is built once per run, after the API key has been entered, and
handed to the message synthesizer. Requests are sent once: there are no
retries and no client-side timeout.
"""
from __future__ import annotations

from typing import Optional

from openai import OpenAI, OpenAIError

from .config import FastafConfig
from .credentials import Credential
from .exceptions import GenerationFailed
from .logging_config import get_logger

logger = get_logger(__name__)


class AIClient:
    """Thin wrapper around the chat completions endpoint."""

    def __init__(self, config: FastafConfig, credential: Credential) -> None:
        kwargs = {}
        if config.ai_base_url:
            kwargs["base_url"] = config.ai_base_url
        self._client = OpenAI(
            api_key=credential.reveal(),
            max_retries=0,
            timeout=None,
            **kwargs,
        )
        self._model = config.ai_model
        self._temperature = float(config.ai_temperature)
        self._max_tokens = int(config.ai_max_tokens)

    @property
    def model(self) -> str:
        return self._model

    def complete(self, system_prompt: str, user_prompt: str) -> Optional[str]:
        """Send a two-turn chat exchange and return the first choice's text.

        Returns None when the response carries no choices or no content.

        Raises:
            GenerationFailed: If the request fails (transport, auth, rate limit, ...)
        """
        try:
            resp = self._client.chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except OpenAIError as e:
            logger.warning(
                "Chat completion request failed",
                extra={"model": self._model, "error_type": type(e).__name__},
            )
            raise GenerationFailed(f"Failed to generate commit message: {e}") from e

        if not resp.choices:
            return None
        return resp.choices[0].message.content
