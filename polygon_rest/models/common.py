"""Shared response envelope, enumerations and parsing helpers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PolygonModel(BaseModel):
    """Base class for every model deserialized from Polygon JSON."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Timespan(str, Enum):
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class AssetClass(str, Enum):
    STOCKS = "stocks"
    OPTIONS = "options"
    CRYPTO = "crypto"
    FX = "fx"


class DataType(str, Enum):
    TRADE = "trade"
    QUOTE = "quote"


class Locale(str, Enum):
    US = "us"
    GLOBAL = "global"


class Market(str, Enum):
    STOCKS = "stocks"
    CRYPTO = "crypto"
    FX = "fx"


class SipMappingType(str, Enum):
    CTA = "CTA"
    UTP = "UTP"
    FINRA_TDDS = "FINRA_TDDS"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PolygonResponse(PolygonModel, Generic[T]):
    """Standard Polygon.io response envelope."""

    ticker: Optional[str] = None
    query_count: Optional[int] = Field(default=None, alias="queryCount")
    results_count: Optional[int] = Field(default=None, alias="resultsCount")
    adjusted: Optional[bool] = None
    results: Optional[T] = None
    status: str = ""
    request_id: str = ""
    count: Optional[int] = None
    next_url: Optional[str] = None


class PolygonErrorResponse(PolygonModel):
    status: str = ""
    error: str = ""
    message: str = ""
    request_id: str = ""


def parse_scientific_int(value: Any) -> Optional[int]:
    """Coerce integers that Polygon sometimes sends in scientific notation.

    Accepts ints, floats (``1.5e6``) and numeric strings (``"2E+3"``).
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("Expected a number, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return int(float(text))
        except ValueError as exc:
            raise ValueError(f"Unable to convert {value!r} to an integer") from exc
    raise ValueError(f"Unable to convert {value!r} to an integer")


__all__ = [
    "AssetClass",
    "DataType",
    "Locale",
    "Market",
    "PolygonErrorResponse",
    "PolygonModel",
    "PolygonResponse",
    "SipMappingType",
    "SortOrder",
    "Timespan",
    "parse_scientific_int",
]
