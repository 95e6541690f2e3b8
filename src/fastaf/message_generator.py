"""Commit message synthesis following the Conventional Commits specification."""

from typing import Sequence

from fastaf.ai_client import AIClient
from fastaf.exceptions import GenerationFailed
from fastaf.logging_config import get_logger
from fastaf.prompts import SYSTEM_PROMPT, build_user_prompt

logger = get_logger(__name__)


class CommitMessageSynthesizer:
    """Asks the language model for a commit message describing staged changes.

    The model is steered by SYSTEM_PROMPT only. Its answer is accepted as-is
    once trimmed, without checking it against the Conventional Commits
    grammar; an empty answer is the only rejection.
    """

    def __init__(self, client: AIClient) -> None:
        """Initialize the synthesizer.

        Args:
            client: Generation client built for this run
        """
        self.client = client

    def synthesize(self, changed_paths: Sequence[str], staged_diff: str) -> str:
        """Generate a commit message for the staged changes.

        Args:
            changed_paths: Changed files in detection order
            staged_diff: Diff of the index against the last commit, read
                after staging so it matches what will be committed

        Returns:
            The trimmed commit message

        Raises:
            GenerationFailed: If the service errors or returns no text
        """
        prompt = build_user_prompt(changed_paths, staged_diff)
        logger.debug(
            "Requesting commit message",
            extra={"files": len(changed_paths), "prompt_chars": len(prompt)}
        )

        content = self.client.complete(SYSTEM_PROMPT, prompt)
        message = (content or "").strip()
        if not message:
            raise GenerationFailed("Failed to generate commit message")

        logger.info("Commit message generated", extra={"subject": message.splitlines()[0]})
        return message
