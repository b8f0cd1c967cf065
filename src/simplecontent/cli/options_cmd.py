"""CLI command for showing the resolved projection options."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml

from simplecontent.cli._errors import handle_error


def options(
    options_file: Optional[Path] = typer.Option(None, "--options", help="Options YAML file"),
) -> None:
    """Print the projection options after file and env var overrides."""
    from simplecontent.projectors.options import ProjectionOptions

    try:
        resolved = ProjectionOptions.load(options_file)
    except ValueError as e:
        handle_error(str(e))
    typer.echo(yaml.dump(resolved.to_dict(), default_flow_style=False, sort_keys=False).rstrip())
