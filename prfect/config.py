"""Configuration for prfect.

All settings live on an explicit PrfectConfig instance that is passed into
each component. Values are layered by load_config():

1. Built-in defaults (the dataclass field defaults below)
2. ~/.prfect/config.yaml (see prfect.global_config)
3. Environment variables (PRFECT_MODEL, OLLAMA_HOST; a .env file is honored)
4. Explicit overrides, typically CLI flags
"""

import os
from dataclasses import dataclass, field, fields, replace
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_MODEL = "qwen3:latest"
DEFAULT_OLLAMA_HOST = "http://localhost:11434"
DEFAULT_LIST_TIMEOUT = 5
DEFAULT_GENERATE_TIMEOUT = 120
DEFAULT_TEMPERATURE = 0.3
DEFAULT_TOP_P = 0.9
DEFAULT_NUM_PREDICT = 1000
DEFAULT_BRANCH_CANDIDATES = ("main", "master", "develop", "dev")
DEFAULT_REMOTE = "origin"
DEFAULT_MAX_FILE_CHANGES = 20
DEFAULT_MAX_CODE_SAMPLE_LINES = 100

# Environment variable names
MODEL_ENV_VAR = "PRFECT_MODEL"
HOST_ENV_VAR = "OLLAMA_HOST"


@dataclass(frozen=True)
class PrfectConfig:
    """Settings consumed by the collector, the client and the composer.

    Attributes:
        model: Ollama model used for generation.
        ollama_host: Base URL of the Ollama server.
        list_timeout: Seconds to wait for the model list.
        generate_timeout: Seconds to wait for a generation request.
        temperature: Sampling temperature sent with each request.
        top_p: Nucleus sampling value sent with each request.
        num_predict: Maximum number of tokens the model may produce.
        default_branch_candidates: Target branch names tried in order.
        remote_name: Remote consulted for remote-tracked branches.
        max_file_changes: Line cap for the file change summary.
        max_code_sample_lines: Line cap for the code sample.
        no_emojis: Ask the model not to use emojis.
        template_path: Template file used when none is given explicitly.
    """

    model: str = DEFAULT_MODEL
    ollama_host: str = DEFAULT_OLLAMA_HOST
    list_timeout: float = DEFAULT_LIST_TIMEOUT
    generate_timeout: float = DEFAULT_GENERATE_TIMEOUT
    temperature: float = DEFAULT_TEMPERATURE
    top_p: float = DEFAULT_TOP_P
    num_predict: int = DEFAULT_NUM_PREDICT
    default_branch_candidates: tuple[str, ...] = field(default=DEFAULT_BRANCH_CANDIDATES)
    remote_name: str = DEFAULT_REMOTE
    max_file_changes: int = DEFAULT_MAX_FILE_CHANGES
    max_code_sample_lines: int = DEFAULT_MAX_CODE_SAMPLE_LINES
    no_emojis: bool = False
    template_path: Optional[str] = None

    @property
    def generation_options(self) -> dict:
        """Sampling options sent to the backend with every request."""
        return {
            "temperature": self.temperature,
            "top_p": self.top_p,
            "num_predict": self.num_predict,
        }


def validate_host(host: str) -> bool:
    """Check that a host URL uses http(s) and names a server.

    Args:
        host: The URL to check.

    Returns:
        True if the URL is usable as an Ollama host.
    """
    try:
        parsed = urlparse(host)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _from_global_config() -> dict:
    """Collect values stored in ~/.prfect/config.yaml.

    Raises:
        GlobalConfigError: If the file cannot be read or holds a value of the wrong type.
    """
    # Import here to avoid circular dependency
    from prfect import global_config

    values = {}

    model = global_config.get_model()
    if model:
        values["model"] = model
    host = global_config.get_ollama_host()
    if host:
        values["ollama_host"] = host
    if global_config.get_no_emojis():
        values["no_emojis"] = True
    template = global_config.get_template_path()
    if template:
        values["template_path"] = template
    temperature = global_config.get_temperature()
    if temperature is not None:
        values["temperature"] = temperature

    return values


def _from_environment() -> dict:
    """Collect values from environment variables."""
    values = {}
    model = os.getenv(MODEL_ENV_VAR)
    if model:
        values["model"] = model
    host = os.getenv(HOST_ENV_VAR)
    if host:
        values["ollama_host"] = host
    return values


def load_config(**overrides) -> PrfectConfig:
    """Build the effective configuration.

    Args:
        **overrides: Field values that take precedence over everything else.
            None values are ignored so CLI options can be passed straight through.

    Returns:
        The merged PrfectConfig.

    Raises:
        GlobalConfigError: If ~/.prfect/config.yaml cannot be read.
        ValueError: If an override names an unknown field.
    """
    # Load environment variables from .env file
    load_dotenv()

    known = {f.name for f in fields(PrfectConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")

    config = PrfectConfig()
    config = replace(config, **_from_global_config())
    config = replace(config, **_from_environment())
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
    return config
