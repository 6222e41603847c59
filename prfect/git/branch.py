"""Git branch utilities.

Contains:
- get_current_branch: Get the current branch name
- detect_default_branch: Find the branch a pull request would target
- branch_exists: Check whether a branch exists locally or on the remote
"""

from typing import Optional

from prfect.config import PrfectConfig
from prfect.git.exceptions import GitError
from prfect.git.runner import _ref_exists, _run_git_command


def get_current_branch() -> Optional[str]:
    """Get the current branch name.

    Returns:
        The branch name, or None in detached HEAD state or on failure.
    """
    try:
        branch = _run_git_command(["branch", "--show-current"])
    except GitError:
        return None
    return branch or None


def detect_default_branch(config: PrfectConfig) -> Optional[str]:
    """Detect the default target branch.

    Checks, in order:
    1. The remote HEAD (refs/remotes/<remote>/HEAD)
    2. Each configured candidate name, locally first and then on the remote

    Args:
        config: Supplies the remote name and candidate branch names.

    Returns:
        The detected branch name, or None if nothing matches.
    """
    remote_prefix = f"refs/remotes/{config.remote_name}/"
    try:
        remote_default = _run_git_command(["symbolic-ref", f"{remote_prefix}HEAD"])
        if remote_default:
            return remote_default.replace(remote_prefix, "", 1)
    except GitError:
        # No remote HEAD configured, try the candidates
        pass

    for branch in config.default_branch_candidates:
        if branch_exists(branch, config):
            return branch

    return None


def branch_exists(branch: str, config: PrfectConfig) -> bool:
    """Check whether a branch exists locally or as a remote-tracking branch.

    Args:
        branch: Branch name without any refs/ prefix.
        config: Supplies the remote name.

    Returns:
        True if either ref exists.
    """
    if _ref_exists(f"refs/heads/{branch}"):
        return True
    return _ref_exists(f"refs/remotes/{config.remote_name}/{branch}")
