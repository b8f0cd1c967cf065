"""simplecontent CLI -- typer-based command interface.

Commands:
    simplecontent project <path>   Project a content document to JSON/YAML
    simplecontent options          Show resolved projection options
"""

from __future__ import annotations

import typer

from simplecontent.cli import options_cmd, project
from simplecontent.cli._errors import handle_error
from simplecontent.observability import ObservabilityConfig, setup_logging

app = typer.Typer(
    name="simplecontent",
    help="Project CMS content trees into minimal JSON-ready nodes.",
    no_args_is_help=True,
)

app.command("project")(project.project)
app.command("options")(options_cmd.options)


@app.callback()
def _configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Wire structured logging before any command runs."""
    config = ObservabilityConfig()
    if verbose:
        config.log_level = "DEBUG"
    try:
        setup_logging(config)
    except ValueError as e:
        handle_error(str(e))


def main() -> None:
    """Entry point for the simplecontent CLI."""
    app()
