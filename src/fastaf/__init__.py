"""fastaf - stage, commit with an AI-written message, and push."""

__version__ = "1.0.0"

from fastaf.models import PipelineOutcome, RepositoryStatus

__all__ = ["PipelineOutcome", "RepositoryStatus", "__version__"]
