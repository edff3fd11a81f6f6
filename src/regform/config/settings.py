"""RegformSettings: one frozen object for CLI flags, env vars and regform.toml.

Highest priority first:

1. keyword arguments (the CLI flags)
2. ``REGFORM_*`` env vars, ``__`` for nesting (``REGFORM_FORM__MINIMUM_AGE``)
3. the discovered or explicit ``regform.toml``
4. section defaults from :mod:`regform.config.models`
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from regform.config.discovery import find_config
from regform.config.models import FormConfig, StorageConfig

# settings_customise_sources is a classmethod with no per-call arguments,
# so from_cli hands it the chosen file through this variable.
_active_toml: ContextVar[Path | None] = ContextVar("regform_active_toml", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single TOML file (absent file: no values)."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self.path = path
        self.data = self._read(path) if path is not None and path.is_file() else {}

    @staticmethod
    def _read(path: Path) -> dict[str, Any]:
        try:
            with path.open("rb") as fh:
                return tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {path}: {exc}"
            raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self.data.get(field_name), field_name, field_name in self.data

    def __call__(self) -> dict[str, Any]:
        return self.data


class RegformSettings(BaseSettings):
    """Resolved configuration for one CLI invocation.

    Attributes:
        root: Base for relative paths; the config file's directory, or the
            working directory when there is no config file.
        config_path: The TOML file that was read, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "REGFORM_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    storage: StorageConfig = Field(default_factory=StorageConfig)
    form: FormConfig = Field(default_factory=FormConfig)

    @property
    def storage_path(self) -> Path:
        """The store file, with a relative ``[storage] path`` anchored at root."""
        if self.storage.path.is_absolute():
            return self.storage.path
        return self.root / self.storage.path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No .env or secrets directory support.
        return init_settings, env_settings, TomlSettingsSource(settings_cls, _active_toml.get())

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> RegformSettings:
        """Build settings for a command run.

        An explicit *config_path* that does not exist means "no config
        file"; otherwise ``regform.toml`` is looked up from *root* (or the
        working directory) upwards.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(root)

        if root is None:
            root = toml_path.parent if toml_path is not None else Path.cwd()

        token = _active_toml.set(toml_path)
        try:
            return cls(root=root, config_path=toml_path, **cli_flags)
        finally:
            _active_toml.reset(token)
