from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Final

from translate_core.http import DEFAULT_TIMEOUT_SECONDS
from translate_core.providers.mymemory import MYMEMORY_URL

APP_DIR_NAME: Final[str] = "text-translator"
CONFIG_FILE_NAME: Final[str] = "config.json"
STORAGE_FILE_NAME: Final[str] = "storage.json"
CONFIG_HOME_ENV: Final[str] = "TRANSLATOR_CONFIG_HOME"
DEFAULT_SOURCE_LANG: Final[str] = "en"
DEFAULT_TARGET_LANG: Final[str] = "hi"


@dataclass(frozen=True, slots=True)
class LanguageConfig:
    source: str
    target: str


@dataclass(frozen=True, slots=True)
class ServiceConfig:
    endpoint: str
    timeout_seconds: float
    contact_email: str


@dataclass(frozen=True, slots=True)
class StorageConfig:
    path: Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    languages: LanguageConfig
    service: ServiceConfig
    storage: StorageConfig


def config_path() -> Path:
    override = os.environ.get(CONFIG_HOME_ENV, "").strip()
    if override:
        return Path(override) / CONFIG_FILE_NAME
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_home) if xdg_home else Path.home() / ".config"
    return base / APP_DIR_NAME / CONFIG_FILE_NAME


def default_storage_path() -> Path:
    xdg_data = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data) if xdg_data else Path.home() / ".local" / "share"
    return base / APP_DIR_NAME / STORAGE_FILE_NAME


def load_config() -> AppConfig:
    path = config_path()
    if not path.exists():
        return _default_config()
    try:
        raw_data = path.read_text(encoding="utf-8")
        payload: object = json.loads(raw_data)
    except (OSError, json.JSONDecodeError):
        return _default_config()
    return _parse_config(payload)


def save_config(config: AppConfig) -> None:
    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = _config_to_dict(config)
    data = json.dumps(payload, ensure_ascii=True, indent=2)
    path.write_text(data, encoding="utf-8")


def _default_config() -> AppConfig:
    return AppConfig(
        languages=LanguageConfig(
            source=DEFAULT_SOURCE_LANG,
            target=DEFAULT_TARGET_LANG,
        ),
        service=ServiceConfig(
            endpoint=MYMEMORY_URL,
            timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
            contact_email="",
        ),
        storage=StorageConfig(path=default_storage_path()),
    )


def _parse_config(payload: object) -> AppConfig:
    payload_dict = _get_dict(payload)
    if payload_dict is None:
        return _default_config()
    language_data = _get_dict(payload_dict.get("languages")) or {}
    service_data = _get_dict(payload_dict.get("service")) or {}
    storage_data = _get_dict(payload_dict.get("storage")) or {}

    storage_path = _get_str(storage_data.get("path"), "")
    return AppConfig(
        languages=LanguageConfig(
            source=_get_str(language_data.get("source"), DEFAULT_SOURCE_LANG),
            target=_get_str(language_data.get("target"), DEFAULT_TARGET_LANG),
        ),
        service=ServiceConfig(
            endpoint=_get_str(service_data.get("endpoint"), MYMEMORY_URL),
            timeout_seconds=_get_positive_float(
                service_data.get("timeout_seconds"), DEFAULT_TIMEOUT_SECONDS
            ),
            contact_email=_get_str(service_data.get("contact_email"), ""),
        ),
        storage=StorageConfig(
            path=Path(storage_path).expanduser()
            if storage_path
            else default_storage_path()
        ),
    )


def _config_to_dict(config: AppConfig) -> dict[str, object]:
    return {
        "languages": {
            "source": config.languages.source,
            "target": config.languages.target,
        },
        "service": {
            "endpoint": config.service.endpoint,
            "timeout_seconds": config.service.timeout_seconds,
            "contact_email": config.service.contact_email,
        },
        "storage": {
            "path": str(config.storage.path),
        },
    }


def _get_dict(value: object | None) -> dict[str, object] | None:
    if isinstance(value, dict):
        output: dict[str, object] = {}
        for raw_key, raw_item in value.items():
            if isinstance(raw_key, str):
                output[raw_key] = raw_item
        return output
    return None


def _get_str(value: object | None, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def _get_positive_float(value: object | None, default: float) -> float:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)) and value > 0:
        return float(value)
    return default
