"""Server configuration model and loader."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

ENV_PREFIX = "FILEVAULT_"
_ENV_KEYS = ("storage_root", "host", "port", "log_path", "log_level")


class ConfigError(RuntimeError):
    """Raised when configuration cannot be loaded or validated."""


class ServerConfig(BaseModel):
    """Immutable process configuration handed to every component."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    storage_root: Path = Field(default=Path("file_storage"), validate_default=True)
    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)
    log_path: Optional[Path] = None
    log_level: str = "INFO"

    @field_validator("storage_root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        return Path(value).expanduser().resolve()

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> ServerConfig:
    """Build a ``ServerConfig`` from a file, the environment and overrides.

    Later sources win: file, then ``FILEVAULT_*`` environment variables,
    then ``overrides``. ``None`` values in ``overrides`` are ignored so CLI
    flags that were not given fall through.
    """

    merged: dict[str, Any] = {}
    if path is not None:
        merged.update(_expect_mapping(_read_structured_file(Path(path)), Path(path)))

    for key in _ENV_KEYS:
        value = os.getenv(ENV_PREFIX + key.upper())
        if value:
            merged[key] = value

    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ServerConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text) or {}
    if suffix == ".json":
        return json.loads(text)

    raise ConfigError(f"Unsupported config format for {path}")


__all__ = ["ConfigError", "ServerConfig", "load_config"]
