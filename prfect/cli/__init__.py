"""CLI entry point for prfect.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from prfect.cli.config import config_app
from prfect.cli.template import template_app
from prfect.cli.main import main_command

# Main application
app = typer.Typer(
    name="prfect",
    help="prfect: AI-powered pull request descriptions with local Ollama models",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")
app.add_typer(template_app, name="template")

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "template_app",
    "main_command",
]
