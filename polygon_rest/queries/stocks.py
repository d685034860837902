"""Request models for the stock market data routes."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, field_validator

from ..models.common import SortOrder, Timespan
from .base import (
    BaseRequest,
    TimestampWindow,
    check_date,
    check_limit,
    check_multiplier,
    check_ticker,
)

MAX_BARS_LIMIT = 50000


class _TickerRequest(BaseRequest):
    ticker: str

    @field_validator("ticker", mode="before")
    @classmethod
    def validate_ticker(cls, value: Any) -> str:
        return check_ticker(value)


class StockBarsRequest(_TickerRequest):
    """Aggregate bars for a ticker over a date range."""

    multiplier: int
    timespan: Timespan
    from_date: str = Field(alias="from")
    to_date: str = Field(alias="to")
    adjusted: Optional[bool] = None
    sort: Optional[SortOrder] = None
    limit: Optional[int] = None

    @field_validator("multiplier", mode="before")
    @classmethod
    def validate_multiplier(cls, value: Any) -> int:
        return check_multiplier(value)

    @field_validator("from_date", mode="before")
    @classmethod
    def validate_from(cls, value: Any) -> str:
        return check_date(value, "From date")

    @field_validator("to_date", mode="before")
    @classmethod
    def validate_to(cls, value: Any) -> str:
        return check_date(value, "To date")

    @field_validator("limit", mode="before")
    @classmethod
    def validate_limit(cls, value: Any) -> Optional[int]:
        return check_limit(value, MAX_BARS_LIMIT)


class PreviousCloseRequest(_TickerRequest):
    adjusted: Optional[bool] = None


class GroupedDailyRequest(BaseRequest):
    date: str
    adjusted: Optional[bool] = None
    include_otc: Optional[bool] = None

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> str:
        return check_date(value)


class StockDailyOpenCloseRequest(_TickerRequest):
    date: str
    adjusted: Optional[bool] = None

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> str:
        return check_date(value)


class StockTradesRequest(TimestampWindow):
    ticker: str

    @field_validator("ticker", mode="before")
    @classmethod
    def validate_ticker(cls, value: Any) -> str:
        return check_ticker(value)


class StockQuotesRequest(StockTradesRequest):
    pass


class LastTradeRequest(_TickerRequest):
    pass


class LastQuoteRequest(_TickerRequest):
    pass


class MarketSnapshotRequest(BaseRequest):
    include_otc: Optional[bool] = None


class StockSnapshotRequest(_TickerRequest):
    pass


__all__ = [
    "GroupedDailyRequest",
    "LastQuoteRequest",
    "LastTradeRequest",
    "MarketSnapshotRequest",
    "PreviousCloseRequest",
    "StockBarsRequest",
    "StockDailyOpenCloseRequest",
    "StockQuotesRequest",
    "StockSnapshotRequest",
    "StockTradesRequest",
]
