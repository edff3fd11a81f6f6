"""Command: run one field validator."""

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
  regform validate email test@gmail.com
  regform validate lastname Jean-Michel
  regform validate postCode 75001
  regform validate birth 2008-02-29 --on 2026-02-28
  regform --json validate town 'Saint-Étienne'""",
)
@click.argument("field")
@click.argument("value")
@click.option(
    "--on",
    "reference",
    default=None,
    callback=parse_date_option,
    help="Reference date for the birth field (YYYY-MM-DD). Defaults to now.",
)
@click.pass_obj
def validate(app: AppContext, field: str, value: str, reference: date | None) -> None:
    """Validate VALUE as the registration field FIELD.

    FIELD is one of lastname, firstname, email, birth, postCode, town.
    """
    from regform.services.fields import FieldService

    service = FieldService(minimum_age=app.settings.form.minimum_age)
    app.emit(service.validate(field, value, now=reference))
