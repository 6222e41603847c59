"""Data models for collected repository changes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiffSummary:
    """Bounded, human-readable summary of the changes between two branches.

    Attributes:
        commit_messages: One "- subject (author, age)" line per commit.
        file_changes: `git diff --name-status` output, capped in lines.
        diff_statistics: `git diff --stat` output.
        code_sample: Unified diff, capped in lines.
    """

    commit_messages: str
    file_changes: str
    diff_statistics: str
    code_sample: str

    def is_empty(self) -> bool:
        """True when there are neither commits nor file changes."""
        return not self.commit_messages and not self.file_changes
