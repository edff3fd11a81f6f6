"""Per-invocation state shared by every regform command."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regform.config.logging import configure_logging
from regform.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from regform.config.settings import RegformSettings
    from regform.infrastructure.storage import LocalStore
    from regform.services.result import ServiceResult


class AppContext:
    """Settings, the store, and result emission for one command run.

    Built by the root group and handed to commands with ``@click.pass_obj``.
    Constructing it configures logging, and telemetry under ``--verbose``.
    """

    def __init__(self, settings: RegformSettings) -> None:
        self.settings = settings
        self._store: LocalStore | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            from regform.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> LocalStore:
        """Opened on first use; ``validate``, ``age`` and ``counter`` never touch it."""
        if self._store is None:
            from regform.infrastructure.storage import LocalStore

            self._store = LocalStore(self.settings.storage_path)
        return self._store

    @property
    def interactive(self) -> bool:
        """Whether missing form fields may be prompted for."""
        return not (self.settings.no_interact or self.settings.json_output)

    @property
    def output(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and set the exit status.

        Successes go to stdout, with warnings on stderr outside JSON mode
        (the JSON payload already lists them).  Failures go to stderr and
        exit with status 1.
        """
        output = self.output
        text = format_result(result, settings=output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
