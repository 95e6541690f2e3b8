"""The add / generate / commit / push pipeline.

The run is an ordered list of stage functions. Each stage reads and updates a
shared RunContext; the runner calls them in order and stops at the first one
that raises a FastafError (the run is aborted) or returns False (the run is
finished early, e.g. on a clean working tree). A later stage is never
attempted after an earlier one failed, and nothing is rolled back: a failed
push leaves the commit in place.
"""

import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from git import Repo
from rich.markup import escape

from fastaf.ai_client import AIClient
from fastaf.change_tracker import ChangeInspector
from fastaf.config import FastafConfig
from fastaf.console import Reporter
from fastaf.credentials import API_KEY_URL, Credential, acquire_credential
from fastaf.exceptions import FastafError
from fastaf.git_operations import GitOperationsManager
from fastaf.logging_config import get_logger
from fastaf.message_generator import CommitMessageSynthesizer
from fastaf.models import PipelineOutcome, RepositoryStatus

logger = get_logger(__name__)


@dataclass
class RunContext:
    """State handed from one stage to the next during a single run."""
    repo: Repo
    credential: Optional[Credential] = None
    client: Optional[AIClient] = None
    status: Optional[RepositoryStatus] = None
    staged_diff: str = ""
    commit_message: Optional[str] = None
    commit_hash: Optional[str] = None
    pushed: bool = False


# A stage returns False to end the run successfully without running the rest
Stage = Callable[[RunContext], Optional[bool]]


class CommitPipeline:
    """Runs the credential, status, add, generate, commit and push stages.

    Collaborators are injectable so the pipeline can be exercised without a
    terminal or network access.

    Args:
        config: Settings for this run
        reporter: Terminal renderer
        credential_provider: Callable returning the API key credential; it
            receives ``max_attempts``
        client_factory: Callable building the generation client from the
            config and credential
        inspector: Change inspector
        git_ops: Git operations manager
    """

    def __init__(
        self,
        config: FastafConfig,
        reporter: Optional[Reporter] = None,
        credential_provider: Optional[Callable[..., Credential]] = None,
        client_factory: Optional[Callable[[FastafConfig, Credential], AIClient]] = None,
        inspector: Optional[ChangeInspector] = None,
        git_ops: Optional[GitOperationsManager] = None,
    ) -> None:
        self.config = config
        self.reporter = reporter or Reporter()
        self.credential_provider = credential_provider or acquire_credential
        self.client_factory = client_factory or AIClient
        self.inspector = inspector or ChangeInspector()
        self.git_ops = git_ops or GitOperationsManager()

    def stages(self) -> List[Tuple[str, Stage]]:
        """Ordered (name, stage) pairs making up a run."""
        return [
            ("credential", self.acquire_credential),
            ("status", self.inspect_changes),
            ("add", self.stage_changes),
            ("generate", self.generate_message),
            ("commit", self.commit),
            ("push", self.push),
        ]

    def run(self, repo: Repo) -> PipelineOutcome:
        """Execute every stage in order against ``repo``.

        Returns:
            PipelineOutcome describing how the run ended
        """
        ctx = RunContext(repo=repo)
        start = time.time()

        for name, stage in self.stages():
            try:
                keep_going = stage(ctx)
            except FastafError as e:
                logger.warning(
                    "Pipeline aborted",
                    extra={"stage": name, "error": str(e),
                           "duration_seconds": round(time.time() - start, 3)}
                )
                self.reporter.failure(f"Error: {e}")
                return self._outcome(ctx, completed=False, failed_stage=name, error=e)

            if keep_going is False:
                logger.info("Pipeline finished early", extra={"stage": name})
                return self._outcome(ctx, completed=True, clean=True)

        logger.info(
            "Pipeline completed",
            extra={"commit_hash": ctx.commit_hash,
                   "duration_seconds": round(time.time() - start, 3)}
        )
        self.reporter.success(
            "All done! Your changes have been added, committed, and pushed."
        )
        return self._outcome(ctx, completed=True)

    @staticmethod
    def _outcome(ctx: RunContext, **kwargs) -> PipelineOutcome:
        return PipelineOutcome(
            changed_paths=ctx.status.changed_paths if ctx.status else (),
            commit_message=ctx.commit_message,
            commit_hash=ctx.commit_hash,
            pushed=ctx.pushed,
            **kwargs,
        )

    # Stages

    def acquire_credential(self, ctx: RunContext) -> None:
        self.reporter.info(
            "🤖 Please enter your OpenAI API key to generate AI commit messages:"
        )
        self.reporter.hint(f"(Get your key from {API_KEY_URL})")

        ctx.credential = self.credential_provider(
            max_attempts=self.config.max_key_attempts
        )
        self.reporter.success("API key received (temporarily stored for this session)")
        ctx.client = self.client_factory(self.config, ctx.credential)

    def inspect_changes(self, ctx: RunContext) -> bool:
        ctx.status = self.inspector.inspect(ctx.repo)
        if ctx.status.is_clean:
            self.reporter.notice("✨ Working directory is clean. Nothing to commit.")
            return False
        self.reporter.file_list(ctx.status.changed_paths)
        return True

    def stage_changes(self, ctx: RunContext) -> None:
        with self.reporter.step("Adding files to git...", "Files added to git",
                                "Failed to add files"):
            self.git_ops.stage_all(ctx.repo)

    def generate_message(self, ctx: RunContext) -> None:
        synthesizer = CommitMessageSynthesizer(ctx.client)
        with self.reporter.step("Generating AI commit message...",
                                "AI commit message generated",
                                "Failed to generate commit message"):
            ctx.staged_diff = self.git_ops.staged_diff(ctx.repo)
            ctx.commit_message = synthesizer.synthesize(
                ctx.status.changed_paths, ctx.staged_diff
            )
        self.reporter.message(ctx.commit_message)

    def commit(self, ctx: RunContext) -> None:
        with self.reporter.step(
            "Committing changes...",
            f"Committed: [green]{escape(ctx.commit_message)}[/green]",
            "Failed to commit",
        ):
            ctx.commit_hash = self.git_ops.create_commit(ctx.repo, ctx.commit_message)

    def push(self, ctx: RunContext) -> None:
        with self.reporter.step("Pushing to remote...", "Pushed to remote repository",
                                "Failed to push"):
            self.git_ops.push_to_remote(ctx.repo)
        ctx.pushed = True
