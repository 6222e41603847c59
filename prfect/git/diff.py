"""Branch comparison utilities.

Contains:
- get_merge_base: Find the common ancestor of two branches
- get_commit_messages: Commit subjects on the source branch since the merge base
- get_file_changes: Name/status list of changed files (line-capped)
- get_diff_stats: Diff statistics since the merge base
- get_code_sample: Unified diff since the merge base (line-capped)
- summarize: Build a DiffSummary for two branches

Every field helper falls back to a fixed message when its git command fails,
so a single broken command never aborts the whole summary.
"""

from prfect.config import PrfectConfig
from prfect.formatters import limit_lines
from prfect.git.exceptions import GitError
from prfect.git.models import DiffSummary
from prfect.git.runner import _run_git_command


NO_COMMIT_MESSAGES = "No commit messages available"
NO_FILE_CHANGES = "No file changes detected"
NO_DIFF_STATS = "No diff statistics available"
NO_CODE_CHANGES = "No code changes available"

COMMIT_FORMAT = "--pretty=format:- %s (%an, %ar)"


def get_merge_base(target_branch: str, source_branch: str) -> str:
    """Find the merge base of two branches.

    Args:
        target_branch: The branch the pull request targets.
        source_branch: The branch with the changes.

    Returns:
        The merge base commit hash.

    Raises:
        GitError: If the branches share no common ancestor.
    """
    try:
        merge_base = _run_git_command(["merge-base", target_branch, source_branch])
    except GitError as e:
        raise GitError(
            f"No common ancestor found between '{target_branch}' and '{source_branch}'.\n{e}"
        )
    if not merge_base:
        raise GitError(
            f"No common ancestor found between '{target_branch}' and '{source_branch}'."
        )
    return merge_base


def get_commit_messages(merge_base: str, source_branch: str) -> str:
    """Get non-merge commit subjects on source_branch since merge_base."""
    try:
        return _run_git_command(
            ["log", "--no-merges", f"{merge_base}..{source_branch}", COMMIT_FORMAT]
        )
    except GitError:
        return NO_COMMIT_MESSAGES


def get_file_changes(merge_base: str, source_branch: str, limit: int = 20) -> str:
    """Get the name/status list of changed files, capped at `limit` lines."""
    try:
        changes = _run_git_command(
            ["diff", "--name-status", f"{merge_base}..{source_branch}"]
        )
    except GitError:
        return NO_FILE_CHANGES
    return limit_lines(changes, limit)


def get_diff_stats(merge_base: str, source_branch: str) -> str:
    """Get `git diff --stat` output since merge_base."""
    try:
        return _run_git_command(["diff", "--stat", f"{merge_base}..{source_branch}"])
    except GitError:
        return NO_DIFF_STATS


def get_code_sample(merge_base: str, source_branch: str, limit: int = 100) -> str:
    """Get the unified diff since merge_base, capped at `limit` lines."""
    try:
        diff = _run_git_command(
            ["diff", f"{merge_base}..{source_branch}", "--unified=3"]
        )
    except GitError:
        return NO_CODE_CHANGES
    return limit_lines(diff, limit)


def summarize(source_branch: str, target_branch: str, config: PrfectConfig) -> DiffSummary:
    """Summarize the changes on source_branch relative to target_branch.

    Everything is computed from the merge base, not from the branch tips.

    Args:
        source_branch: The branch with the changes.
        target_branch: The branch the pull request targets.
        config: Supplies the line caps.

    Returns:
        The bounded DiffSummary.

    Raises:
        GitError: If the branches share no common ancestor.
    """
    merge_base = get_merge_base(target_branch, source_branch)

    return DiffSummary(
        commit_messages=get_commit_messages(merge_base, source_branch),
        file_changes=get_file_changes(merge_base, source_branch, config.max_file_changes),
        diff_statistics=get_diff_stats(merge_base, source_branch),
        code_sample=get_code_sample(merge_base, source_branch, config.max_code_sample_lines),
    )
