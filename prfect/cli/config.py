"""CLI commands for global configuration management."""

import typer

from prfect import global_config
from prfect.config import load_config, validate_host
from prfect.llm import LLMError, get_client
from prfect.cli.utils import log_error, log_info, log_success

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global prfect configuration in ~/.prfect/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        config = load_config()
    except global_config.GlobalConfigError as e:
        log_error(f"Error reading configuration: {e}")
        raise typer.Exit(1)

    if global_config.is_configured():
        typer.echo(f"Configuration file: {global_config.get_config_file_path()}")
    else:
        typer.echo("No configuration file found, using defaults.")
    typer.echo()
    typer.echo(f"  Model: {config.model}")
    typer.echo(f"  Ollama host: {config.ollama_host}")
    typer.echo(f"  Temperature: {config.temperature}")
    typer.echo(f"  No emojis: {config.no_emojis}")
    typer.echo(f"  Template: {config.template_path or 'auto-detect'}")


@config_app.command("set-model")
def config_set_model(
    model: str = typer.Argument(..., help="Ollama model name (e.g., qwen3:latest)"),
) -> None:
    """Set the default model."""
    try:
        global_config.set_model(model)
    except global_config.GlobalConfigError as e:
        log_error(str(e))
        raise typer.Exit(1)
    log_success(f"Default model set to {model}")


@config_app.command("set-host")
def config_set_host(
    host: str = typer.Argument(..., help="Ollama host URL (e.g., http://localhost:11434)"),
) -> None:
    """Set the Ollama host URL."""
    if not validate_host(host):
        log_error(f"Invalid Ollama host URL: {host}")
        raise typer.Exit(1)
    try:
        global_config.set_ollama_host(host)
    except global_config.GlobalConfigError as e:
        log_error(str(e))
        raise typer.Exit(1)
    log_success(f"Ollama host set to {host}")


@config_app.command("set-template")
def config_set_template(
    path: str = typer.Argument("", help="Default template path (empty to clear)"),
) -> None:
    """Set or clear the default PR template path."""
    try:
        global_config.set_template_path(path or None)
    except global_config.GlobalConfigError as e:
        log_error(str(e))
        raise typer.Exit(1)
    if path:
        log_success(f"Default template set to {path}")
    else:
        log_success("Default template cleared")


@config_app.command("set-emojis")
def config_set_emojis(
    enabled: bool = typer.Option(
        True,
        "--enable/--disable",
        help="Allow emojis in generated descriptions",
    ),
) -> None:
    """Allow or forbid emojis in generated descriptions by default."""
    try:
        global_config.set_no_emojis(not enabled)
    except global_config.GlobalConfigError as e:
        log_error(str(e))
        raise typer.Exit(1)
    log_success(f"Emojis {'enabled' if enabled else 'disabled'}")


@config_app.command("models")
def config_models() -> None:
    """List the models available on the Ollama server."""
    try:
        config = load_config()
        models = get_client(config).list_models()
    except (global_config.GlobalConfigError, LLMError) as e:
        log_error(str(e))
        log_info("Make sure Ollama is running: ollama serve")
        raise typer.Exit(1)

    if not models:
        typer.echo("No models installed. To install a model: ollama pull <model-name>")
        return

    for name in models:
        marker = "*" if name == config.model else " "
        typer.echo(f" {marker} {name}")
