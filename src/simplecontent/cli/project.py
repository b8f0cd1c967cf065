"""CLI command for projecting a content document to JSON or YAML."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from simplecontent.cli._config import get_config
from simplecontent.cli._errors import handle_error
from simplecontent.observability import get_logger

logger = get_logger(__name__)


def _write_output(result: str, output: Path | None) -> None:
    """Write string result to file or stdout."""
    if output:
        output.write_text(result, encoding="utf-8")
        typer.echo(f"Wrote projection to {output}")
    else:
        typer.echo(result)


def project(
    path: Path = typer.Argument(..., help="YAML or JSON content document"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: json or yaml"),
    children: Optional[bool] = typer.Option(
        None, "--children/--no-children", help="Include projected children"
    ),
    content_types: Optional[bool] = typer.Option(
        None, "--content-types/--no-content-types", help="Expand parent content types"
    ),
    templates: Optional[bool] = typer.Option(
        None, "--templates/--no-templates", help="Expand master templates"
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", help="Stop recursing below this depth"
    ),
    options_file: Optional[Path] = typer.Option(None, "--options", help="Options YAML file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
) -> None:
    """Project a content document and print the serialized tree.

    Flags left unset fall back to SIMPLECONTENT_* env vars, then the
    options file, then defaults (everything on).
    """
    from simplecontent.projectors import ProjectionOptions, TreeProjector
    from simplecontent.projectors.registry import available_targets, get_target
    from simplecontent.sources.loader import ContentSourceError, load_document

    config = get_config()
    fmt = fmt or config.output_format
    if fmt not in available_targets():
        handle_error(f"Unknown format {fmt!r}. Available: {', '.join(available_targets())}")
    if not path.exists():
        handle_error(f"File not found: {path}")

    try:
        options = ProjectionOptions.load(options_file).with_overrides(
            recurse_children=children,
            recurse_content_types=content_types,
            recurse_templates=templates,
            max_depth=max_depth,
        )
    except ValueError as e:
        handle_error(str(e))

    try:
        document = load_document(path)
    except ContentSourceError as e:
        handle_error(str(e))

    projector = TreeProjector(content_types=document.content_types, templates=document.templates)
    projected = projector.project_all(document.roots, options)
    logger.debug("cli.project", path=str(path), roots=len(projected), format=fmt)

    target = get_target(fmt, **config.target_kwargs(fmt))
    result = target.serialize(projected if document.is_collection else projected[0])
    _write_output(result, output)
