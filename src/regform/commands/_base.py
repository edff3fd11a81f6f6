"""Shared Click pieces for regform commands.

``RegformCommand`` and ``RegformGroup`` take an ``examples`` string and
expose it as ``--examples``, which prints it and exits before arguments
are validated.  ``parse_date_option`` converts ``--on`` values.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value and not ctx.resilient_parsing:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=show,
        help="Show usage examples and exit.",
    )


class RegformCommand(click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class RegformGroup(click.Group):
    command_class = RegformCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


def parse_date_option(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> date | datetime | None:
    """``--on`` callback: ISO date, or ISO datetime when it contains ``T``."""
    from regform.services._helpers import parse_reference

    try:
        return parse_reference(value)
    except ValueError as exc:
        raise click.BadParameter(f"{value!r} is not an ISO date (YYYY-MM-DD)") from exc
