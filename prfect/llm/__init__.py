"""Generation backend module for prfect.

This module provides the backend client interface, the Ollama
implementation and the PR description prompt.
"""

from typing import Optional

from prfect.config import PrfectConfig
from prfect.llm.base import BaseGenerationClient, GenerationResult
from prfect.llm.exceptions import (
    BackendTimeoutError,
    BackendUnreachableError,
    EmptyGenerationError,
    LLMError,
    ModelUnavailableError,
)
from prfect.llm.ollama_client import OllamaClient
from prfect.llm.prompts import compose_prompt


def get_client(
    config: PrfectConfig,
    client: Optional[BaseGenerationClient] = None,
) -> BaseGenerationClient:
    """Get a generation client.

    Args:
        config: Supplies host, timeouts and sampling options.
        client: An already constructed client to use instead.

    Returns:
        The injected client, or an OllamaClient built from config.
    """
    if client is not None:
        return client
    return OllamaClient.from_config(config)


# Export commonly used items
__all__ = [
    "BaseGenerationClient",
    "GenerationResult",
    "OllamaClient",
    "LLMError",
    "BackendUnreachableError",
    "BackendTimeoutError",
    "ModelUnavailableError",
    "EmptyGenerationError",
    "compose_prompt",
    "get_client",
]
