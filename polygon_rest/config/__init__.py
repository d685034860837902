"""Configuration helpers for the Polygon client."""

from __future__ import annotations

from .loader import (
    API_KEY_VARIABLE,
    BASE_URL_VARIABLE,
    ENVIRONMENT_VARIABLE,
    PolygonSettings,
    get_settings,
    load_settings,
    reset_settings_cache,
)

__all__ = [
    "API_KEY_VARIABLE",
    "BASE_URL_VARIABLE",
    "ENVIRONMENT_VARIABLE",
    "PolygonSettings",
    "get_settings",
    "load_settings",
    "reset_settings_cache",
]
