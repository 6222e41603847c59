"""Base classes shared by generation backends."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from prfect.llm.exceptions import LLMError, ModelUnavailableError


@dataclass
class GenerationResult:
    """Raw text returned by a generation backend."""

    text: str
    done: bool
    model: str


class BaseGenerationClient(ABC):
    """Abstract base class for text generation backends."""

    @abstractmethod
    def list_models(self) -> list[str]:
        """Return the names of the models the backend can serve.

        Raises:
            BackendTimeoutError: If the backend does not answer in time.
            BackendUnreachableError: For other connection failures.
        """
        pass

    @abstractmethod
    def generate(self, prompt: str, model: str) -> GenerationResult:
        """Generate text for a prompt.

        Raises:
            BackendTimeoutError: If the request times out.
            BackendUnreachableError: For other connection failures.
            EmptyGenerationError: If the backend returns no text.
        """
        pass

    def is_model_available(self, model: str) -> bool:
        """Check if a model is available, treating backend errors as absent."""
        try:
            return model in self.list_models()
        except LLMError:
            return False

    def test_connection(self) -> bool:
        """Return True if the backend answers a model listing."""
        try:
            self.list_models()
            return True
        except LLMError:
            return False

    def ensure_model(self, model: str) -> list[str]:
        """Make sure model is installed on the backend.

        Returns:
            The backend's model list.

        Raises:
            ModelUnavailableError: If the model is not listed.
            BackendUnreachableError: If the backend cannot be reached.
        """
        available = self.list_models()
        if model not in available:
            raise ModelUnavailableError(model, available)
        return available
