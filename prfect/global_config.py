"""Global configuration management for prfect.

Handles user-level configuration stored in ~/.prfect/config.yaml:
model, Ollama host, emoji preference and a default template path.
"""

from pathlib import Path
from typing import Dict, Optional, Any

import yaml


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".prfect"


def get_global_config_dir() -> Path:
    """Get the global prfect configuration directory.

    Returns:
        Path to ~/.prfect/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists.

    Returns:
        Path to ~/.prfect/
    """
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.prfect/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.prfect/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: expected a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.prfect/config.yaml.

    Args:
        config: Configuration dictionary to save.
    """
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _set_value(key: str, value: Any) -> None:
    config = load_global_config()
    config[key] = value
    save_global_config(config)


def _get_string(key: str) -> Optional[str]:
    value = load_global_config().get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise GlobalConfigError(
            f"Invalid {key} in {get_config_file_path()}: expected a string, got {value!r}"
        )
    return value


def get_model() -> Optional[str]:
    """Get the configured model name, or None if not set."""
    return _get_string("model")


def set_model(model: str) -> None:
    """Set the default model in global config.

    Args:
        model: Ollama model name (e.g., "qwen3:latest").
    """
    _set_value("model", model)


def get_ollama_host() -> Optional[str]:
    """Get the configured Ollama host URL, or None if not set."""
    return _get_string("ollama_host")


def set_ollama_host(host: str) -> None:
    """Set the Ollama host URL in global config.

    Args:
        host: Base URL of the Ollama server.
    """
    _set_value("ollama_host", host)


def get_no_emojis() -> bool:
    """Get the emoji suppression preference (False when unset)."""
    value = load_global_config().get("no_emojis", False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise GlobalConfigError(
            f"Invalid no_emojis in {get_config_file_path()}: expected true or false, got {value!r}"
        )
    return value


def set_no_emojis(enabled: bool) -> None:
    """Set the emoji suppression preference in global config."""
    _set_value("no_emojis", enabled)


def get_temperature() -> Optional[float]:
    """Get the configured sampling temperature, or None if not set."""
    value = load_global_config().get("temperature")
    if value is None:
        return None
    # bool is an int subclass, but `temperature: true` is not a number
    if isinstance(value, bool):
        raise GlobalConfigError(
            f"Invalid temperature in {get_config_file_path()}: {value!r} is not a number"
        )
    try:
        return float(value)
    except (TypeError, ValueError):
        raise GlobalConfigError(
            f"Invalid temperature in {get_config_file_path()}: {value!r} is not a number"
        )


def get_template_path() -> Optional[str]:
    """Get the default template path, or None if not set."""
    return _get_string("template")


def set_template_path(path: Optional[str]) -> None:
    """Set or clear the default template path in global config.

    Args:
        path: Template file path, or None to clear it.
    """
    config = load_global_config()
    if path:
        config["template"] = path
    else:
        config.pop("template", None)
    save_global_config(config)


def is_configured() -> bool:
    """Check if prfect has been configured.

    Returns:
        True if config.yaml exists, False otherwise.
    """
    return get_config_file_path().exists()
