"""Repository guard: locate the git repository for the working directory."""

from pathlib import Path
from typing import Optional, Union

from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError

from fastaf.exceptions import NotARepository
from fastaf.logging_config import get_logger

logger = get_logger(__name__)


def find_git_repository(start_path: Union[str, Path]) -> Optional[Path]:
    """Find the nearest git repository by walking up the directory tree.

    This function searches for a .git directory (or a .git file, as used by
    worktrees and submodules) starting from the given path and walking up to
    the filesystem root, similar to how git itself works.

    Args:
        start_path: Starting directory path to search from

    Returns:
        Path to the git repository root, or None if not found
    """
    current = Path(start_path).resolve()

    for path in [current] + list(current.parents):
        git_dir = path / ".git"
        if git_dir.exists() and (git_dir.is_dir() or git_dir.is_file()):
            return path

    return None


def ensure_repository(path: Union[str, Path] = ".") -> Repo:
    """Open the git repository that contains ``path``.

    Args:
        path: Directory to start from (default: current directory)

    Returns:
        GitPython Repo for the enclosing repository

    Raises:
        NotARepository: If ``path`` is not inside a git repository
    """
    repo_root = find_git_repository(path)
    if repo_root is None:
        raise NotARepository(
            "Not a git repository. Please run this command in a git repository."
        )

    try:
        repo = Repo(repo_root)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise NotARepository(
            f"Not a git repository: {repo_root} ({e})"
        ) from e

    logger.debug("Using repository", extra={"repository": str(repo_root)})
    return repo
