"""Data models for fastaf."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from fastaf.exceptions import FastafError


@dataclass(frozen=True)
class RepositoryStatus:
    """Snapshot of the working tree changes relative to the last commit.

    Each changed path belongs to exactly one category.

    Attributes:
        modified: Tracked files with modifications (staged or not)
        untracked: Files git does not know about yet
        created: Files newly added to the index
        deleted: Tracked files that were removed
        renamed: Tuples of (old_path, new_path) for renamed files
    """
    modified: Tuple[str, ...] = ()
    untracked: Tuple[str, ...] = ()
    created: Tuple[str, ...] = ()
    deleted: Tuple[str, ...] = ()
    renamed: Tuple[Tuple[str, str], ...] = ()

    @property
    def changed_paths(self) -> Tuple[str, ...]:
        """All changed paths in detection order.

        Modified first, then untracked, created, deleted and finally the
        destination of each rename.
        """
        return (
            self.modified
            + self.untracked
            + self.created
            + self.deleted
            + tuple(new_path for _, new_path in self.renamed)
        )

    @property
    def is_clean(self) -> bool:
        """True when there is nothing to commit."""
        return len(self.changed_paths) == 0

    def total_files(self) -> int:
        """Number of changed paths."""
        return len(self.changed_paths)


@dataclass
class PipelineOutcome:
    """Result of one pipeline run.

    Attributes:
        completed: Whether every stage succeeded or the run short-circuited
            on a clean working tree
        clean: Whether the run stopped early because there was nothing to commit
        failed_stage: Name of the stage that aborted the run, if any
        error: The error that aborted the run, if any
        changed_paths: Paths that were detected as changed
        commit_message: The generated commit message (if one was produced)
        commit_hash: SHA of the created commit (if one was created)
        pushed: Whether the commit reached the remote
    """
    completed: bool
    clean: bool = False
    failed_stage: Optional[str] = None
    error: Optional[FastafError] = None
    changed_paths: Tuple[str, ...] = field(default_factory=tuple)
    commit_message: Optional[str] = None
    commit_hash: Optional[str] = None
    pushed: bool = False

    @property
    def exit_code(self) -> int:
        """Process exit status for this outcome."""
        return 0 if self.completed else 1
