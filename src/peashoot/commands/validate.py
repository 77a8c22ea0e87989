"""Command: validate a YAML/JSON document against a named schema."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import click

from peashoot.commands._base import PeashootCommand
from peashoot.domain.registry import SCHEMA_REGISTRY
from peashoot.services.catalog import CatalogService

if TYPE_CHECKING:
    from peashoot.commands._context import AppContext


@click.command(
    cls=PeashootCommand,
    examples="""\
  peashoot validate plant my-plant.yaml
  peashoot validate garden garden.json
  peashoot --json validate calculate-date-request request.json""",
)
@click.argument("kind", type=click.Choice(sorted(SCHEMA_REGISTRY)))
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_obj
def validate(app: AppContext, kind: str, file: Path) -> None:
    """Check FILE against the schema named KIND and report every issue."""
    service = CatalogService(app.repository, app.settings)
    app.emit(asyncio.run(service.validate_document(kind, file)))
