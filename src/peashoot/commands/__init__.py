"""Subcommand modules for peashoot.

:func:`register_commands` imports command modules lazily so that
``peashoot --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every command and group to the root CLI group."""
    from peashoot.commands.catalog import items, packets
    from peashoot.commands.locations import locations
    from peashoot.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(items)
    cli.add_command(packets)
    cli.add_command(locations)
