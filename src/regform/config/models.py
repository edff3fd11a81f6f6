"""Sections of regform.toml as frozen models.

Every setting has a default here; a config file lists only what it changes.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, PositiveFloat, PositiveInt


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    path: Path = Path(".regform/storage.json")
    key: str = Field(default="user", min_length=1)


class FormConfig(BaseModel):
    """[form] section."""

    model_config = {"frozen": True}

    submit_delay: PositiveFloat = 0.3
    minimum_age: PositiveInt = 18
