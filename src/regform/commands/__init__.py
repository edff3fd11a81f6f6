"""Subcommand modules for regform.

Provides register_commands() which uses deferred imports to keep
``regform --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from regform.commands.age import age
    from regform.commands.counter import counter
    from regform.commands.register import register
    from regform.commands.show import show
    from regform.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(age)
    cli.add_command(register)
    cli.add_command(show)
    cli.add_command(counter)
