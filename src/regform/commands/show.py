"""Command: show the last submitted registration record."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regform.commands._base import RegformCommand

if TYPE_CHECKING:
    from regform.commands._context import AppContext


@click.command(
    cls=RegformCommand,
    examples="""\
  regform show
  regform --json show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the record stored by the last successful submission."""
    from regform.services.records import RecordService

    app.emit(RecordService(app.store, storage_key=app.settings.storage.key).last_submitted())
