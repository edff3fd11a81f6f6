"""Command: compute an age in whole years."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

import click

from regform.commands._base import RegformCommand, parse_date_option

if TYPE_CHECKING:
    from regform.commands._context import AppContext


@click.command(
    cls=RegformCommand,
    examples="""\
  regform age 1991-11-07
  regform age 1991-11-07 --on 2026-12-01
  regform -q age 1995-05-15""",
)
@click.argument("birth")
@click.option(
    "--on",
    "reference",
    default=None,
    callback=parse_date_option,
    help="Reference date (YYYY-MM-DD). Defaults to now.",
)
@click.pass_obj
def age(app: AppContext, birth: str, reference: date | None) -> None:
    """Compute the age in whole years of someone born on BIRTH."""
    from regform.services.fields import FieldService

    app.emit(FieldService().age(birth, on=reference))
