"""Main CLI command for generating PR descriptions."""

from pathlib import Path
from typing import Optional

import typer

from prfect import __version__
from prfect.config import load_config, validate_host
from prfect.formatters import save_message, validate_file_extension
from prfect.generator import generate_pr_description
from prfect.git import GitError
from prfect.global_config import GlobalConfigError
from prfect.llm import LLMError, ModelUnavailableError
from prfect.template import TemplateError
from prfect.cli.utils import (
    confirm_save,
    display_message,
    log_error,
    log_info,
    log_success,
    log_warn,
    process_context_options,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"prfect {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    source: Optional[str] = typer.Option(
        None,
        "--source",
        "-s",
        help="Source branch with changes (default: current branch)",
    ),
    target: Optional[str] = typer.Option(
        None,
        "--target",
        "-t",
        help="Target branch (default: auto-detect main/master)",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Ollama model name (default: qwen3:latest)",
    ),
    ollama_host: Optional[str] = typer.Option(
        None,
        "--ollama-host",
        help="Ollama host URL (default: http://localhost:11434)",
    ),
    template: Optional[str] = typer.Option(
        None,
        "--template",
        help="Path to a PR template file (relative paths resolve from the repo root)",
    ),
    template_text: Optional[str] = typer.Option(
        None,
        "--template-text",
        help="PR template content given directly on the command line",
    ),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        "-c",
        help="Additional context for the PR description",
    ),
    context_file: Optional[Path] = typer.Option(
        None,
        "--context-file",
        help="Load additional context from a file",
    ),
    save: bool = typer.Option(
        False,
        "--save",
        help="Save PR message to file",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Filename used with --save (default: pr_message_<timestamp>.md)",
    ),
    interactive: bool = typer.Option(
        True,
        "--interactive/--no-interactive",
        help="Ask before saving the PR message",
    ),
    no_emojis: bool = typer.Option(
        False,
        "--no-emojis",
        help="Generate PR message without emojis",
    ),
    show_thinking: bool = typer.Option(
        False,
        "--show-thinking",
        help="Show AI thinking process (useful for debugging)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print title, body and branches as JSON (for CI)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate a pull request description from git changes using Ollama."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    if ollama_host and not validate_host(ollama_host):
        log_error(f"Invalid Ollama host URL: {ollama_host}")
        raise typer.Exit(1)

    if output and not validate_file_extension(output):
        log_error(f"Unsupported output file extension: {output} (use .md or .txt)")
        raise typer.Exit(1)

    context_content = process_context_options(context, context_file)

    try:
        config = load_config(
            model=model,
            ollama_host=ollama_host,
            no_emojis=True if no_emojis else None,
        )

        result = generate_pr_description(
            config,
            source=source,
            target=target,
            context=context_content,
            template_path=template,
            template_content=template_text,
            show_thinking=show_thinking,
            on_step=log_info,
        )
    except ModelUnavailableError as e:
        log_warn(f"Model '{e.model}' not found. Available models:")
        for name in e.available:
            typer.echo(f"  - {name}", err=True)
        log_info(f"To install a model: ollama pull {e.model}")
        log_error("Ollama setup check failed")
        raise typer.Exit(1)
    except (GitError, TemplateError, LLMError, GlobalConfigError) as e:
        log_error(str(e))
        raise typer.Exit(1)

    if json_output:
        typer.echo(result.to_json())
    else:
        display_message(result.message)
        log_success("PR message generated successfully!")

    # In JSON mode stdout belongs to the document, so only save on request
    should_save = save or (
        interactive
        and not json_output
        and confirm_save()
    )
    if should_save:
        try:
            path = save_message(result.message, output)
        except OSError as e:
            log_error(f"Failed to save PR message: {e}")
            raise typer.Exit(1)
        log_success(f"PR message saved to: {path}")
