"""Error types raised by the fastaf pipeline stages."""

from typing import Optional


class FastafError(Exception):
    """Base class for every stage-level failure.

    Attributes:
        stage: Name of the pipeline stage that failed
    """

    stage: str = "pipeline"

    def __init__(self, message: str, stage: Optional[str] = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class NotARepository(FastafError):
    """The working directory is not inside a git repository."""

    stage = "repository"


class CredentialRejected(FastafError):
    """The API key was not provided or failed format validation."""

    stage = "credential"


class StatusQueryFailed(FastafError):
    """Reading the repository status failed."""

    stage = "status"


class StageFailed(FastafError):
    """Staging the changes or reading the staged diff failed."""

    stage = "add"


class GenerationFailed(FastafError):
    """The text-generation service returned nothing usable or errored."""

    stage = "generate"


class CommitFailed(FastafError):
    """Creating the commit failed."""

    stage = "commit"


class PushFailed(FastafError):
    """Pushing to the remote failed."""

    stage = "push"
