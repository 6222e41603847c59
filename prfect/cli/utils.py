"""Shared utility functions for CLI commands."""

from pathlib import Path
from typing import Optional

import typer


def log_info(message: str) -> None:
    """Print an informational status line to stderr."""
    typer.echo(f"{typer.style('[INFO]', fg=typer.colors.GREEN)} {message}", err=True)


def log_warn(message: str) -> None:
    """Print a warning status line to stderr."""
    typer.echo(f"{typer.style('[WARN]', fg=typer.colors.YELLOW)} {message}", err=True)


def log_error(message: str) -> None:
    """Print an error status line to stderr."""
    typer.echo(f"{typer.style('[ERROR]', fg=typer.colors.RED)} {message}", err=True)


def log_success(message: str) -> None:
    """Print a success status line to stderr."""
    typer.echo(f"{typer.style('✓', fg=typer.colors.GREEN)} {message}", err=True)


def process_context_options(context: Optional[str], context_file: Optional[Path]) -> Optional[str]:
    """Process --context and --context-file options.

    Args:
        context: Direct context text from --context option.
        context_file: Path to a file containing extra context.

    Returns:
        Combined context, or None if no context provided.

    Raises:
        typer.Exit: If context_file cannot be read.
    """
    parts = []

    if context:
        trimmed = context.strip()
        if trimmed:
            parts.append(trimmed)

    if context_file:
        if not context_file.exists():
            log_error(f"Context file not found: {context_file}")
            raise typer.Exit(1)
        try:
            file_content = context_file.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            log_error(f"Error reading context file: {e}")
            raise typer.Exit(1)
        if file_content:
            parts.append(file_content)

    # Combine with blank line if both provided
    if not parts:
        return None

    return "\n\n".join(parts)


def display_message(message: str) -> None:
    """Print the generated PR message to stdout between banners."""
    typer.echo("")
    typer.secho("=== GENERATED PR MESSAGE ===", fg=typer.colors.BLUE, bold=True)
    typer.echo("=" * 50)
    typer.echo(message)
    typer.echo("=" * 50)


def confirm_save() -> bool:
    """Ask whether to save the message; end of input counts as no."""
    try:
        return typer.confirm("Save PR message to file?", default=False, err=True)
    except typer.Abort:
        typer.echo("", err=True)
        return False
