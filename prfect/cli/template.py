"""CLI commands for inspecting PR templates."""

from typing import Optional

import typer

from prfect.config import load_config
from prfect.global_config import GlobalConfigError
from prfect.template import TemplateError, resolve_template_source, validate_template
from prfect.cli.utils import log_error, log_success, log_warn

# Subcommand group for template inspection
template_app = typer.Typer(
    name="template",
    help="Inspect and validate PR templates",
    add_completion=False,
)


def _resolve(path: Optional[str]):
    try:
        if path is None:
            path = load_config().template_path
        return resolve_template_source(path)
    except (TemplateError, GlobalConfigError) as e:
        log_error(str(e))
        raise typer.Exit(1)


@template_app.command("show")
def template_show(
    path: Optional[str] = typer.Argument(None, help="Template file (default: auto-detect)"),
) -> None:
    """Print the template that would be used and where it came from."""
    source = _resolve(path)
    typer.echo(f"Template source: {source.describe()}", err=True)
    typer.echo(source.text)


@template_app.command("validate")
def template_validate(
    path: Optional[str] = typer.Argument(None, help="Template file (default: auto-detect)"),
) -> None:
    """Check a template for common problems."""
    source = _resolve(path)
    result = validate_template(source.text)

    if result.valid:
        log_success(f"Template is valid ({source.describe()})")
        return

    log_warn(f"Template has {len(result.issues)} issue(s) ({source.describe()}):")
    for issue in result.issues:
        typer.echo(f"  - {issue}", err=True)
    raise typer.Exit(1)
