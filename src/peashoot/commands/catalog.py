"""Commands: list catalog items and seed packets."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from peashoot.commands._base import PeashootCommand
from peashoot.services.catalog import CatalogService

if TYPE_CHECKING:
    from peashoot.commands._context import AppContext


@click.command(
    cls=PeashootCommand,
    examples="""\
  peashoot items
  peashoot -q items
  peashoot --json items""",
)
@click.pass_obj
def items(app: AppContext) -> None:
    """List plants as placeable items."""
    app.emit(CatalogService(app.repository, app.settings).list_items())


@click.command(
    cls=PeashootCommand,
    examples="""\
  peashoot packets
  peashoot --json packets""",
)
@click.pass_obj
def packets(app: AppContext) -> None:
    """List seed packets."""
    app.emit(CatalogService(app.repository, app.settings).list_packets())
