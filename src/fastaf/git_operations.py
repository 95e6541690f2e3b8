"""Git operations manager for staging, committing and pushing."""

import time
from typing import Optional

from git import Repo
from git.exc import GitCommandError

from fastaf.exceptions import CommitFailed, PushFailed, StageFailed
from fastaf.logging_config import get_logger, log_git_operation

logger = get_logger(__name__)


def git_error_detail(error: GitCommandError) -> str:
    """Extract the readable part of a GitCommandError.

    GitPython stores stderr as ``"\\n  stderr: '...'"``; this returns the text
    inside the quotes, falling back to the full exception text.
    """
    stderr = (error.stderr or "").strip()
    if stderr.startswith("stderr:"):
        stderr = stderr[len("stderr:"):].strip().strip("'").strip()
    return stderr or str(error)


class GitOperationsManager:
    """Manages git operations including staging, committing, and pushing.

    This component wraps GitPython's command interface and converts git
    failures into the matching fastaf errors. Every operation acts on the
    whole repository and the configured default remote; there is no dry-run,
    no force and no partial staging.
    """

    def _log(self, repo: Repo, operation: str, start: float,
             error: Optional[str] = None, **details) -> None:
        log_git_operation(
            operation=operation,
            repository=str(repo.working_dir),
            success=error is None,
            duration=time.time() - start,
            details=details or None,
            error=error,
        )

    def stage_all(self, repo: Repo) -> None:
        """Stage every change in the working tree (``git add --all``).

        Args:
            repo: GitPython Repo object representing the repository

        Raises:
            StageFailed: If staging fails
        """
        start = time.time()
        try:
            repo.git.add("--all")
        except GitCommandError as e:
            detail = git_error_detail(e)
            self._log(repo, "add", start, error=detail)
            raise StageFailed(f"Git add failed: {detail}") from e
        self._log(repo, "add", start)

    def staged_diff(self, repo: Repo) -> str:
        """Return the diff of the index against the last commit.

        Args:
            repo: GitPython Repo object representing the repository

        Returns:
            Text of ``git diff --cached``; bytes that are not valid UTF-8
            are replaced with U+FFFD

        Raises:
            StageFailed: If the diff cannot be read
        """
        try:
            raw = repo.git.diff("--cached", stdout_as_string=False)
        except GitCommandError as e:
            raise StageFailed(
                f"Failed to read staged diff: {git_error_detail(e)}",
                stage="generate",
            ) from e
        return raw.decode("utf-8", errors="replace")

    def create_commit(self, repo: Repo, message: str) -> str:
        """Create a commit with the given message.

        Args:
            repo: GitPython Repo object representing the repository
            message: Commit message to use

        Returns:
            The SHA hash of the created commit

        Raises:
            CommitFailed: If commit creation fails
        """
        start = time.time()
        try:
            repo.git.commit("-m", message)
            commit_hash = repo.head.commit.hexsha
        except (GitCommandError, ValueError) as e:
            detail = git_error_detail(e) if isinstance(e, GitCommandError) else str(e)
            self._log(repo, "commit", start, error=detail)
            raise CommitFailed(f"Git commit failed: {detail}") from e
        self._log(repo, "commit", start, commit_hash=commit_hash)
        return commit_hash

    def get_current_branch(self, repo: Repo) -> Optional[str]:
        """Name of the current branch, or None when HEAD is detached."""
        if repo.head.is_detached:
            return None
        return repo.active_branch.name

    def push_to_remote(self, repo: Repo) -> Optional[str]:
        """Push the current branch to its configured upstream (``git push``).

        A failed push leaves the local commit in place.

        Args:
            repo: GitPython Repo object representing the repository

        Returns:
            Name of the branch that was pushed (None when HEAD is detached)

        Raises:
            PushFailed: If the push fails or no remote is configured
        """
        start = time.time()
        if not repo.remotes:
            self._log(repo, "push", start, error="No remote repository configured")
            raise PushFailed("Git push failed: No remote repository configured")

        branch = self.get_current_branch(repo)
        try:
            repo.git.push()
        except GitCommandError as e:
            detail = git_error_detail(e)
            self._log(repo, "push", start, error=detail, branch=branch)
            raise PushFailed(f"Git push failed: {detail}") from e
        self._log(repo, "push", start, branch=branch)
        return branch
