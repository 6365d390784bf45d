"""Configuration loader for keychain-store."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

BACKENDS = {"keyring", "memory"}
VALUE_ENCODINGS = {"base64", "utf-8"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class StoreSettings:
    backend: str
    delete_missing_ok: bool


@dataclass(frozen=True)
class KeyringSettings:
    value_encoding: str


@dataclass(frozen=True)
class LoggingSettings:
    level: str


@dataclass(frozen=True)
class AppConfig:
    version: str
    store: StoreSettings
    keyring: KeyringSettings
    logging: LoggingSettings


class ConfigLoadError(RuntimeError):
    """Raised when configuration cannot be loaded."""


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ConfigLoadError(f"missing required config key: {key}")
    return data[key]


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigLoadError(f"{name} must be an object")
    return value


def default_config() -> AppConfig:
    return parse_config({"version": "1"})


def load_config(path: Path) -> AppConfig:
    if not path.exists():
        raise ConfigLoadError(f"config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigLoadError("config root must be an object")
    return parse_config(raw)


def parse_config(raw: dict[str, Any]) -> AppConfig:
    store_raw = _section(raw, "store")
    keyring_raw = _section(raw, "keyring")
    logging_raw = _section(raw, "logging")

    backend = str(store_raw.get("backend", "keyring")).strip().lower()
    if backend not in BACKENDS:
        raise ConfigLoadError(f"invalid store.backend: {backend}")

    delete_missing_ok = store_raw.get("delete_missing_ok", True)
    if not isinstance(delete_missing_ok, bool):
        raise ConfigLoadError("store.delete_missing_ok must be a boolean")

    value_encoding = str(keyring_raw.get("value_encoding", "base64")).strip().lower()
    if value_encoding == "utf8":
        value_encoding = "utf-8"
    if value_encoding not in VALUE_ENCODINGS:
        raise ConfigLoadError(f"invalid keyring.value_encoding: {value_encoding}")

    level = str(logging_raw.get("level", "INFO")).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigLoadError(f"invalid logging.level: {level}")

    return AppConfig(
        version=str(_require(raw, "version")),
        store=StoreSettings(backend=backend, delete_missing_ok=delete_missing_ok),
        keyring=KeyringSettings(value_encoding=value_encoding),
        logging=LoggingSettings(level=level),
    )
