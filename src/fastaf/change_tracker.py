"""Change inspection component for detecting git repository changes."""

from typing import List, Tuple

from git import Repo
from git.exc import GitCommandError

from fastaf.exceptions import StatusQueryFailed
from fastaf.git_operations import git_error_detail
from fastaf.logging_config import get_logger
from fastaf.models import RepositoryStatus

logger = get_logger(__name__)


class ChangeInspector:
    """Reads the repository status since the last commit.

    This component asks git for its machine-readable status
    (``git status --porcelain -z``) and sorts every entry into exactly one
    of the modified, untracked, created, deleted or renamed categories.
    """

    STATUS_ARGS = ("--porcelain", "-z", "--untracked-files=all")

    def inspect(self, repo: Repo) -> RepositoryStatus:
        """Detect all changes in the working directory since the last commit.

        Args:
            repo: GitPython Repo object representing the repository

        Returns:
            RepositoryStatus with categorised changes

        Raises:
            StatusQueryFailed: If git status cannot be read
        """
        try:
            output = repo.git.status(*self.STATUS_ARGS)
        except GitCommandError as e:
            raise StatusQueryFailed(
                f"Failed to get git status: {git_error_detail(e)}"
            ) from e

        status = self.parse_porcelain(output)
        logger.debug(
            "Repository status read",
            extra={"changed_files": status.total_files()}
        )
        return status

    def parse_porcelain(self, output: str) -> RepositoryStatus:
        """Build a RepositoryStatus from ``git status --porcelain -z`` output.

        Args:
            output: Raw status output

        Returns:
            RepositoryStatus with one category per path
        """
        modified: List[str] = []
        untracked: List[str] = []
        created: List[str] = []
        deleted: List[str] = []
        renamed: List[Tuple[str, str]] = []

        fields = output.split("\0")
        index = 0
        while index < len(fields):
            entry = fields[index]
            index += 1
            if len(entry) < 4:
                continue

            x, y, path = entry[0], entry[1], entry[3:]

            if x == "?" and y == "?":
                untracked.append(path)
            elif x == "!" and y == "!":
                continue
            elif "R" in (x, y):
                # Index or worktree rename; the source path is the next field
                old_path = fields[index] if index < len(fields) else path
                index += 1
                renamed.append((old_path, path))
            elif "C" in (x, y):
                # Copy source stays untouched; only the destination is new
                index += 1
                created.append(path)
            elif x == "A":
                created.append(path)
            elif "D" in (x, y):
                deleted.append(path)
            else:
                modified.append(path)

        return RepositoryStatus(
            modified=tuple(modified),
            untracked=tuple(untracked),
            created=tuple(created),
            deleted=tuple(deleted),
            renamed=tuple(renamed),
        )
