"""Polygon.io REST client with an OCC options ticker codec."""

from __future__ import annotations

from .config import PolygonSettings, get_settings, load_settings
from .exceptions import (
    IncompleteBuilderError,
    OptionsTickerFormatError,
    PolygonApiError,
    PolygonError,
    PolygonHttpError,
    PolygonResponseError,
    PolygonValidationError,
    ValidationIssue,
    ValidationSeverity,
)
from .models.tickers import OptionType, OptionsTicker, OptionsTickerBuilder
from .services.client import PolygonClient

__version__ = "0.1.0"

__all__ = [
    "IncompleteBuilderError",
    "OptionType",
    "OptionsTicker",
    "OptionsTickerBuilder",
    "OptionsTickerFormatError",
    "PolygonApiError",
    "PolygonClient",
    "PolygonError",
    "PolygonHttpError",
    "PolygonResponseError",
    "PolygonSettings",
    "PolygonValidationError",
    "ValidationIssue",
    "ValidationSeverity",
    "get_settings",
    "load_settings",
]
