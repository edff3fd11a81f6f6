"""Entry point: the ``regform`` command group."""

from __future__ import annotations

from pathlib import Path

import click

from regform import __version__
from regform.commands import register_commands
from regform.commands._base import RegformGroup
from regform.commands._context import AppContext
from regform.config.settings import RegformSettings

_CLI_EXAMPLES = """\
  regform validate email test@gmail.com
  regform age 1991-11-07 --on 2026-12-01
  regform register
  regform --json show
  regform --no-interact --store /tmp/forms.json register --lastname Jean ...
  regform counter --clicks 3"""


@click.group(cls=RegformGroup, examples=_CLI_EXAMPLES, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="regform")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the essential value.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and timing spans.")
@click.option("--log-json", is_flag=True, help="Log JSON lines to stderr.")
@click.option("--no-interact", is_flag=True, help="Never prompt for missing fields.")
@click.option("-c", "--config", "config_path", default=None, help="Use this regform.toml.")
@click.option(
    "--store",
    "store_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Store file, overriding [storage] path.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    store_path: Path | None,
) -> None:
    """regform: validate, submit and store registration forms."""
    settings = RegformSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    if store_path is not None:
        storage = settings.storage.model_copy(update={"path": store_path.resolve()})
        settings = settings.model_copy(update={"storage": storage})
    ctx.obj = AppContext(settings)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
