"""Environment aware configuration loader for the Polygon client."""

from __future__ import annotations

import copy
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SETTINGS: Dict[str, Any] = {
    "api_key": "",
    "base_url": "https://api.polygon.io",
    "timeout_seconds": 30.0,
    "max_retry_attempts": 3,
    "retry_delay_seconds": 1.0,
    "retry_jitter_seconds": 0.25,
}

CONFIG_DIR = Path(__file__).resolve().parent
ENVIRONMENT_VARIABLE = "POLYGON_ENV"
API_KEY_VARIABLE = "POLYGON_API_KEY"
BASE_URL_VARIABLE = "POLYGON_BASE_URL"


class PolygonSettings(BaseModel):
    """Fully resolved client settings."""

    model_config = ConfigDict(frozen=True)

    env: str = "dev"
    api_key: str = ""
    base_url: str = DEFAULT_SETTINGS["base_url"]
    timeout_seconds: float = Field(default=30.0, gt=0)
    max_retry_attempts: int = Field(default=3, ge=1)
    retry_delay_seconds: float = Field(default=1.0, ge=0)
    retry_jitter_seconds: float = Field(default=0.25, ge=0)

    @field_validator("env")
    @classmethod
    def _normalize_env(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("api_key", mode="before")
    @classmethod
    def _strip_api_key(cls, value: Any) -> str:
        return str(value or "").strip()

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {value!r}")
        return value

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def __repr__(self) -> str:
        masked = "***" if self.api_key else "''"
        return (
            f"PolygonSettings(env={self.env!r}, api_key={masked}, base_url={self.base_url!r}, "
            f"timeout_seconds={self.timeout_seconds}, max_retry_attempts={self.max_retry_attempts})"
        )


def _deep_merge(base: MutableMapping[str, Any], overrides: Mapping[str, Any]) -> MutableMapping[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, Mapping):
            existing = base.get(key)
            if isinstance(existing, MutableMapping):
                base[key] = _deep_merge(copy.deepcopy(existing), value)
            else:
                base[key] = copy.deepcopy(value)
        else:
            base[key] = copy.deepcopy(value)
    return base


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle.read()) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration file {path} must contain a mapping at the root.")
        return data


def _environment_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    api_key = os.getenv(API_KEY_VARIABLE)
    if api_key:
        overrides["api_key"] = api_key
    base_url = os.getenv(BASE_URL_VARIABLE)
    if base_url:
        overrides["base_url"] = base_url
    return overrides


def _build_settings(env: str, config_dir: Path) -> PolygonSettings:
    config_path = config_dir / f"{env}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file for environment '{env}' not found at {config_path}")

    merged = copy.deepcopy(DEFAULT_SETTINGS)
    merged = _deep_merge(merged, _load_yaml(config_path))
    merged = _deep_merge(merged, _environment_overrides())
    merged["env"] = env
    return PolygonSettings.model_validate(merged)


@lru_cache(maxsize=None)
def _cached_settings(env: str) -> PolygonSettings:
    return _build_settings(env, CONFIG_DIR)


def _resolve_env(env: Optional[str]) -> str:
    return (env or os.getenv(ENVIRONMENT_VARIABLE, "dev")).strip().lower()


def get_settings(env: Optional[str] = None) -> PolygonSettings:
    """Load settings for the requested environment (default: POLYGON_ENV or 'dev')."""

    return _cached_settings(_resolve_env(env))


def load_settings(
    env: Optional[str] = None,
    config_dir: Optional[Path] = None,
    **overrides: Any,
) -> PolygonSettings:
    """Build settings without the cache, applying keyword overrides last."""

    resolved_env = _resolve_env(env)
    settings = _build_settings(resolved_env, Path(config_dir) if config_dir else CONFIG_DIR)
    if not overrides:
        return settings
    merged = _deep_merge(settings.model_dump(), overrides)
    return PolygonSettings.model_validate(merged)


def reset_settings_cache() -> None:
    """Clear the cached settings, primarily used during tests."""

    _cached_settings.cache_clear()


__all__ = [
    "API_KEY_VARIABLE",
    "BASE_URL_VARIABLE",
    "ENVIRONMENT_VARIABLE",
    "PolygonSettings",
    "get_settings",
    "load_settings",
    "reset_settings_cache",
]
