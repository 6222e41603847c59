"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- _ref_exists: Check whether a fully qualified ref exists
- is_git_repo: Check if the working directory is inside a git repository
"""

import subprocess

from prfect.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def _ref_exists(ref: str) -> bool:
    """Check whether a fully qualified ref (e.g. refs/heads/main) exists."""
    try:
        _run_git_command(["show-ref", "--verify", "--quiet", ref])
        return True
    except GitError:
        return False


def is_git_repo() -> bool:
    """Check if the current directory is inside a git repository."""
    try:
        _run_git_command(["rev-parse", "--git-dir"])
        return True
    except GitError:
        return False
