"""Pydantic configuration models for nativepath."""

import codecs
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


def _check_codec(v: str) -> str:
    try:
        return codecs.lookup(v).name
    except LookupError as e:
        raise ValueError(f"unknown encoding: {v}") from e


class PathsConfig(BaseModel):
    """Path flavour and encoding configuration."""

    flavour: Literal["auto", "windows", "posix"] = "auto"
    posix_encoding: str = "utf-8"
    locale_encoding: str | None = None
    max_path: int = Field(default=260, ge=1, le=32767)

    @field_validator("posix_encoding")
    @classmethod
    def validate_posix_encoding(cls, v: str) -> str:
        """Normalize the codec name and reject unknown codecs."""
        return _check_codec(v)

    @field_validator("locale_encoding")
    @classmethod
    def validate_locale_encoding(cls, v: str | None) -> str | None:
        """Normalize the codec name if one is given."""
        if v is None:
            return None
        return _check_codec(v)


class TempConfig(BaseModel):
    """Temporary pathname configuration."""

    directory: Path | None = None
    prefix: str = ""
    seed: int | None = None

    @field_validator("directory", mode="before")
    @classmethod
    def expand_directory(cls, v: Path | str | None) -> Path | None:
        """Expand user path and resolve to absolute."""
        if v is None or v == "":
            return None
        if isinstance(v, str):
            v = Path(v)
        return v.expanduser().resolve()


class LoggingConfig(BaseModel):
    """Logging configuration for loguru."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["console", "json"] = "console"
    file: Path | None = None
    rotation: str = "10 MB"
    retention: str = "7 days"


class Config(BaseSettings):
    """Root configuration for nativepath."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    temp: TempConfig = Field(default_factory=TempConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "NATIVEPATH_",
        "env_nested_delimiter": "__",
    }
