"""LLM-related exception classes.

Contains all exception classes for generation backend operations:
- LLMError: Base exception for LLM-related errors
- BackendUnreachableError: Raised when the backend cannot be reached
- BackendTimeoutError: Raised when the backend does not answer in time
- ModelUnavailableError: Raised when the requested model is not installed
- EmptyGenerationError: Raised when the backend returns no usable text
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class BackendUnreachableError(LLMError):
    """Raised when the connection to the generation backend fails."""

    pass


class BackendTimeoutError(BackendUnreachableError):
    """Raised when a backend request exceeds its timeout."""

    pass


class ModelUnavailableError(LLMError):
    """Raised when the requested model is not in the backend's model list."""

    def __init__(self, model: str, available: list[str]):
        self.model = model
        self.available = list(available)
        listing = ", ".join(self.available) if self.available else "(none)"
        super().__init__(
            f"Model '{model}' not found. Available models: {listing}\n"
            f"To install a model: ollama pull {model}"
        )


class EmptyGenerationError(LLMError):
    """Raised when the backend responds without any generated text."""

    pass
