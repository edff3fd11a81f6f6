"""Command: click counter demo."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regform.commands._base import RegformCommand

if TYPE_CHECKING:
    from regform.commands._context import AppContext


@click.command(
    cls=RegformCommand,
    examples="""\
  regform counter
  regform counter --clicks 3""",
)
@click.option(
    "--clicks",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Number of clicks.",
)
@click.pass_obj
def counter(app: AppContext, clicks: int) -> None:
    """Click the counter CLICKS times and show the count."""
    from regform.services.counter import Counter
    from regform.services.result import ServiceResult

    c = Counter()
    for _ in range(clicks):
        c.click()
    app.emit(ServiceResult(ok=True, op="counter", data={"count": c.count, "label": c.label}))
