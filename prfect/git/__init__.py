"""Repository diff collection for prfect.

This package provides modular branch comparison with:
- exceptions: GitError, RepositoryUnavailableError, NoChangesDetectedError
- runner: _run_git_command, is_git_repo
- branch: get_current_branch, detect_default_branch, branch_exists
- diff: get_merge_base, summarize and the per-field helpers
- models: DiffSummary
"""

# Exceptions
from prfect.git.exceptions import (
    GitError,
    NoChangesDetectedError,
    RepositoryUnavailableError,
)

# Runner utilities
from prfect.git.runner import (
    _run_git_command,
    is_git_repo,
)

# Branch utilities
from prfect.git.branch import (
    branch_exists,
    detect_default_branch,
    get_current_branch,
)

# Diff utilities
from prfect.git.diff import (
    get_code_sample,
    get_commit_messages,
    get_diff_stats,
    get_file_changes,
    get_merge_base,
    summarize,
)

from prfect.git.models import DiffSummary


__all__ = [
    # Exceptions
    "GitError",
    "RepositoryUnavailableError",
    "NoChangesDetectedError",
    # Runner
    "_run_git_command",
    "is_git_repo",
    # Branch
    "get_current_branch",
    "detect_default_branch",
    "branch_exists",
    # Diff
    "get_merge_base",
    "get_commit_messages",
    "get_file_changes",
    "get_diff_stats",
    "get_code_sample",
    "summarize",
    # Models
    "DiffSummary",
]
