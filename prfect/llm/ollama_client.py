"""Ollama backend implementation."""

from typing import Optional

import requests

from prfect.config import (
    DEFAULT_GENERATE_TIMEOUT,
    DEFAULT_LIST_TIMEOUT,
    DEFAULT_NUM_PREDICT,
    DEFAULT_OLLAMA_HOST,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
    PrfectConfig,
)
from prfect.llm.base import BaseGenerationClient, GenerationResult
from prfect.llm.exceptions import (
    BackendTimeoutError,
    BackendUnreachableError,
    EmptyGenerationError,
)


class OllamaClient(BaseGenerationClient):
    """Client for a locally hosted Ollama server.

    Requests are non-streaming and never retried.
    """

    def __init__(
        self,
        host: str = DEFAULT_OLLAMA_HOST,
        list_timeout: float = DEFAULT_LIST_TIMEOUT,
        generate_timeout: float = DEFAULT_GENERATE_TIMEOUT,
        options: Optional[dict] = None,
    ):
        """Initialize the Ollama client.

        Args:
            host: Base URL of the Ollama server.
            list_timeout: Seconds to wait for /api/tags.
            generate_timeout: Seconds to wait for /api/generate.
            options: Sampling options sent with every generation request.
        """
        self.host = host.rstrip("/")
        self.list_timeout = list_timeout
        self.generate_timeout = generate_timeout
        self.options = options or {
            "temperature": DEFAULT_TEMPERATURE,
            "top_p": DEFAULT_TOP_P,
            "num_predict": DEFAULT_NUM_PREDICT,
        }

    @classmethod
    def from_config(cls, config: PrfectConfig) -> "OllamaClient":
        return cls(
            host=config.ollama_host,
            list_timeout=config.list_timeout,
            generate_timeout=config.generate_timeout,
            options=config.generation_options,
        )

    def list_models(self) -> list[str]:
        """Return the model names reported by /api/tags, in order.

        Raises:
            BackendTimeoutError: If the server does not answer in time.
            BackendUnreachableError: For any other connection or HTTP failure.
        """
        try:
            response = requests.get(f"{self.host}/api/tags", timeout=self.list_timeout)
            response.raise_for_status()
            data = response.json()
        except requests.Timeout:
            raise BackendTimeoutError("Connection to Ollama timed out")
        except (requests.RequestException, ValueError) as e:
            raise BackendUnreachableError(f"Failed to connect to Ollama at {self.host}: {e}")

        models = data.get("models") if isinstance(data, dict) else None
        if not isinstance(models, list):
            return []
        return [model["name"] for model in models if isinstance(model, dict) and model.get("name")]

    def generate(self, prompt: str, model: str) -> GenerationResult:
        """Generate text with /api/generate.

        Args:
            prompt: The full prompt.
            model: Name of the model to use.

        Returns:
            The GenerationResult.

        Raises:
            BackendTimeoutError: If the request times out.
            BackendUnreachableError: For other connection or HTTP failures.
            EmptyGenerationError: If the response carries no text.
        """
        payload = {
            "model": model,
            "prompt": prompt,
            "stream": False,
            "options": dict(self.options),
        }

        try:
            response = requests.post(
                f"{self.host}/api/generate",
                json=payload,
                timeout=self.generate_timeout,
            )
            response.raise_for_status()
        except requests.Timeout:
            raise BackendTimeoutError(
                "Request timed out. The model might be taking too long to respond."
            )
        except requests.RequestException as e:
            raise BackendUnreachableError(f"Failed to generate response: {e}")

        try:
            data = response.json()
        except ValueError as e:
            raise EmptyGenerationError(f"Ollama returned a malformed response: {e}")

        text = data.get("response") if isinstance(data, dict) else None
        if not text:
            raise EmptyGenerationError("No response field in Ollama output")

        return GenerationResult(text=text, done=bool(data.get("done", False)), model=model)
