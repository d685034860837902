"""Validated service layer over the Polygon REST routes."""

from __future__ import annotations

from .base import BaseService
from .client import PolygonClient
from .options import OptionsService
from .reference import ReferenceDataService
from .stocks import StocksService

__all__ = [
    "BaseService",
    "OptionsService",
    "PolygonClient",
    "ReferenceDataService",
    "StocksService",
]
