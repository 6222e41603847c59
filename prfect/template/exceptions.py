"""Template-related exception classes.

- TemplateError: Base exception for template errors
- TemplateNotFoundError: Raised when an explicit template path cannot be read
"""


class TemplateError(Exception):
    """Base exception for template-related errors."""

    pass


class TemplateNotFoundError(TemplateError):
    """Raised when an explicitly requested template file is missing or unreadable."""

    pass
