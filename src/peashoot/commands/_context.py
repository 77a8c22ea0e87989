"""AppContext: shared Click context for all commands.

Created once by the root group and passed to subcommands via
``@click.pass_obj``.  The fixture repository is built lazily so
``--help`` never touches data files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from peashoot.config.logging import configure_logging
from peashoot.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from peashoot.config.settings import PeashootSettings
    from peashoot.infrastructure.fixtures import FixtureRepository
    from peashoot.services.result import ServiceResult


class AppContext:
    """Settings, lazily-built repository and result emission."""

    def __init__(self, settings: PeashootSettings) -> None:
        self.settings = settings
        self._repository: FixtureRepository | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def repository(self) -> FixtureRepository:
        if self._repository is None:
            from peashoot.infrastructure.fixtures import FixtureRepository

            self._repository = FixtureRepository.from_settings(self.settings)
        return self._repository

    def emit(self, result: ServiceResult) -> None:
        """Write a result with the CLI's exit semantics.

        Success goes to stdout (warnings to stderr).  Failure goes to
        stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
