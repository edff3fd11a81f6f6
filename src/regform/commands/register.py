"""Command: fill in and submit the registration form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regform.commands._base import RegformCommand
from regform.domain.types import FIELD_ORDER, FieldName
from regform.services.notify import NotificationKind

if TYPE_CHECKING:
    from regform.commands._context import AppContext
    from regform.services.form import RegistrationForm

_REGISTER_EXAMPLES = """\
  regform register
  regform register --lastname Jean --firstname Pierre --email jean@example.com \\
      --birth 1995-05-15 --post-code 75001 --town Paris
  regform --json --no-interact register --lastname Jean ..."""


class ConsoleNotifier:
    """Notifier printing transient indications to stderr."""

    def __init__(self, *, silent: bool = False) -> None:
        self._silent = silent
        self._count = 0

    def loading(self, message: str) -> str:
        self._count += 1
        if not self._silent:
            click.echo(f"... {message}", err=True)
        return f"cli-{self._count}"

    def update(self, handle: str, message: str, *, kind: NotificationKind) -> None:
        if not self._silent:
            marker = "OK" if kind is NotificationKind.SUCCESS else str(kind).upper()
            click.echo(f"{marker}: {message}", err=True)


def _prompt_field(form: RegistrationForm, field: FieldName) -> None:
    """Prompt until the field validates; inline errors go to stderr."""
    while True:
        value = click.prompt(field.value, default="", show_default=False)
        form.change(field, value)
        error = form.blur(field)
        if error is None:
            return
        click.echo(f"  {field.value}: {error}", err=True)


@click.command(cls=RegformCommand, examples=_REGISTER_EXAMPLES)
@click.option("--lastname", default=None, help="Last name.")
@click.option("--firstname", default=None, help="First name.")
@click.option("--email", default=None, help="Email address.")
@click.option("--birth", default=None, help="Birth date (YYYY-MM-DD).")
@click.option("--post-code", "post_code", default=None, help="Five-digit post code.")
@click.option("--town", default=None, help="Town.")
@click.pass_obj
def register(
    app: AppContext,
    lastname: str | None,
    firstname: str | None,
    email: str | None,
    birth: str | None,
    post_code: str | None,
    town: str | None,
) -> None:
    """Fill in the registration form, submit it, and store the record.

    Missing fields are prompted for unless --no-interact or --json is set.
    """
    from regform.services.form import RegistrationForm
    from regform.services.scheduling import TimerScheduler

    settings = app.settings
    scheduler = TimerScheduler()
    form = RegistrationForm(
        app.store,
        notifier=ConsoleNotifier(silent=settings.quiet or settings.json_output),
        scheduler=scheduler,
        submit_delay=settings.form.submit_delay,
        minimum_age=settings.form.minimum_age,
        storage_key=settings.storage.key,
    )

    provided = {
        FieldName.LASTNAME: lastname,
        FieldName.FIRSTNAME: firstname,
        FieldName.EMAIL: email,
        FieldName.BIRTH: birth,
        FieldName.POST_CODE: post_code,
        FieldName.TOWN: town,
    }
    for field in FIELD_ORDER:
        value = provided[field]
        if value is not None:
            form.change(field, value)
            form.blur(field)
        elif app.interactive:
            _prompt_field(form, field)

    result = form.submit()
    if result.ok:
        scheduler.wait()
        result = result.model_copy(
            update={"data": {**result.data, "status": "submitted", "can_submit": form.can_submit}}
        )
    app.emit(result.model_copy(update={"op": "register"}))
