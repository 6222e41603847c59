"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- RepositoryUnavailableError: Not in a repository, or a branch cannot be resolved
- NoChangesDetectedError: No commits and no file changes between two branches
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class RepositoryUnavailableError(GitError):
    """Raised when the repository or a required branch is unavailable."""

    pass


class NoChangesDetectedError(GitError):
    """Raised when there is nothing to describe between two branches."""

    pass
