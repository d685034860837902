"""Thin descriptions of the Polygon.io REST routes."""

from __future__ import annotations

from .base import PolygonApi
from .options import PolygonOptionsApi
from .reference import PolygonReferenceApi
from .stocks import PolygonStocksApi
from .transport import RETRYABLE_STATUS_CODES, PolygonTransport, path_segment, render_params

__all__ = [
    "PolygonApi",
    "PolygonOptionsApi",
    "PolygonReferenceApi",
    "PolygonStocksApi",
    "PolygonTransport",
    "RETRYABLE_STATUS_CODES",
    "path_segment",
    "render_params",
]
