"""Stock market data models."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable, List, Optional

import pandas as pd
from pydantic import Field, field_validator

from .common import PolygonModel, parse_scientific_int
from .timestamps import from_unix_millis, from_unix_nanos


class Bar(PolygonModel):
    """OHLC aggregate bar, shared by stock and options aggregates."""

    ticker: Optional[str] = Field(default=None, alias="T")
    volume: Optional[int] = Field(default=None, alias="v")
    vwap: Optional[float] = Field(default=None, alias="vw")
    open: Optional[float] = Field(default=None, alias="o")
    close: Optional[float] = Field(default=None, alias="c")
    high: Optional[float] = Field(default=None, alias="h")
    low: Optional[float] = Field(default=None, alias="l")
    timestamp: Optional[int] = Field(default=None, alias="t")
    transactions: Optional[int] = Field(default=None, alias="n")

    @field_validator("volume", "timestamp", "transactions", mode="before")
    @classmethod
    def coerce_int(cls, value: Any) -> Optional[int]:
        return parse_scientific_int(value)

    @property
    def market_timestamp(self) -> Optional[datetime]:
        """Start of the aggregate window in market time."""

        return from_unix_millis(self.timestamp)


class DailyOpenClose(PolygonModel):
    """Open, close and extended-hours prices for one ticker on one day."""

    status: Optional[str] = None
    from_date: Optional[str] = Field(default=None, alias="from")
    symbol: Optional[str] = None
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    volume: Optional[int] = None
    after_hours: Optional[float] = Field(default=None, alias="afterHours")
    pre_market: Optional[float] = Field(default=None, alias="preMarket")

    @field_validator("volume", mode="before")
    @classmethod
    def coerce_volume(cls, value: Any) -> Optional[int]:
        return parse_scientific_int(value)


class _NanosecondStamped(PolygonModel):
    timestamp: Optional[int] = Field(default=None, alias="t")
    timeframe_start: Optional[int] = Field(default=None, alias="f")
    sequence: Optional[int] = Field(default=None, alias="q")
    participant_timestamp: Optional[int] = Field(default=None, alias="y")

    @property
    def market_timestamp(self) -> Optional[datetime]:
        """SIP timestamp in market time."""

        return from_unix_nanos(self.timestamp)

    @property
    def market_timeframe_start(self) -> Optional[datetime]:
        return from_unix_nanos(self.timeframe_start)

    @property
    def market_participant_timestamp(self) -> Optional[datetime]:
        """Time the exchange generated the event, in market time."""

        return from_unix_nanos(self.participant_timestamp)


class StockTrade(_NanosecondStamped):
    ticker: Optional[str] = Field(default=None, alias="T")
    conditions: Optional[List[int]] = Field(default=None, alias="c")
    id: Optional[str] = Field(default=None, alias="i")
    exchange: Optional[int] = Field(default=None, alias="x")
    price: Optional[float] = Field(default=None, alias="p")
    size: Optional[int] = Field(default=None, alias="s")
    tape: Optional[int] = Field(default=None, alias="r")

    @field_validator("size", mode="before")
    @classmethod
    def coerce_size(cls, value: Any) -> Optional[int]:
        return parse_scientific_int(value)


class StockQuote(_NanosecondStamped):
    ticker: Optional[str] = Field(default=None, alias="T")
    conditions: Optional[List[int]] = Field(default=None, alias="c")
    indicators: Optional[List[int]] = Field(default=None, alias="i")
    bid_price: Optional[float] = Field(default=None, alias="P")
    bid_size: Optional[int] = Field(default=None, alias="S")
    ask_price: Optional[float] = Field(default=None, alias="p")
    ask_size: Optional[int] = Field(default=None, alias="s")
    bid_exchange: Optional[int] = Field(default=None, alias="x")
    ask_exchange: Optional[int] = Field(default=None, alias="X")
    tape: Optional[int] = Field(default=None, alias="z")


class LastQuoteResult(_NanosecondStamped):
    """Most recent NBBO quote for a stock."""

    ticker: Optional[str] = Field(default=None, alias="T")
    bid_price: Optional[float] = Field(default=None, alias="P")
    ask_price: Optional[float] = Field(default=None, alias="p")
    bid_size: Optional[int] = Field(default=None, alias="S")
    ask_size: Optional[int] = Field(default=None, alias="s")
    bid_exchange: Optional[int] = Field(default=None, alias="X")
    ask_exchange: Optional[int] = Field(default=None, alias="x")
    tape: Optional[int] = Field(default=None, alias="z")
    indicators: Optional[List[int]] = Field(default=None, alias="i")

    @property
    def spread(self) -> Optional[float]:
        if self.bid_price is None or self.ask_price is None:
            return None
        return round(self.ask_price - self.bid_price, 6)


class SnapshotDay(PolygonModel):
    close: Optional[float] = Field(default=None, alias="c")
    high: Optional[float] = Field(default=None, alias="h")
    low: Optional[float] = Field(default=None, alias="l")
    open: Optional[float] = Field(default=None, alias="o")
    volume: Optional[int] = Field(default=None, alias="v")
    vwap: Optional[float] = Field(default=None, alias="vw")

    @field_validator("volume", mode="before")
    @classmethod
    def coerce_volume(cls, value: Any) -> Optional[int]:
        return parse_scientific_int(value)


class SnapshotLastQuote(PolygonModel):
    bid_price: Optional[float] = Field(default=None, alias="P")
    bid_size: Optional[int] = Field(default=None, alias="S")
    ask_price: Optional[float] = Field(default=None, alias="p")
    ask_size: Optional[int] = Field(default=None, alias="s")
    timestamp: Optional[int] = Field(default=None, alias="t")

    @property
    def market_timestamp(self) -> Optional[datetime]:
        return from_unix_nanos(self.timestamp)


class SnapshotLastTrade(PolygonModel):
    conditions: Optional[List[int]] = Field(default=None, alias="c")
    id: Optional[str] = Field(default=None, alias="i")
    price: Optional[float] = Field(default=None, alias="p")
    size: Optional[int] = Field(default=None, alias="s")
    timestamp: Optional[int] = Field(default=None, alias="t")
    exchange: Optional[int] = Field(default=None, alias="x")

    @property
    def market_timestamp(self) -> Optional[datetime]:
        return from_unix_nanos(self.timestamp)


class SnapshotMinute(SnapshotDay):
    accumulated_volume: Optional[int] = Field(default=None, alias="av")
    timestamp: Optional[int] = Field(default=None, alias="t")
    transactions: Optional[int] = Field(default=None, alias="n")

    @field_validator("accumulated_volume", mode="before")
    @classmethod
    def coerce_accumulated(cls, value: Any) -> Optional[int]:
        return parse_scientific_int(value)

    @property
    def market_timestamp(self) -> Optional[datetime]:
        return from_unix_nanos(self.timestamp)


class StockSnapshot(PolygonModel):
    ticker: Optional[str] = None
    value: Optional[float] = None
    day: Optional[SnapshotDay] = None
    last_quote: Optional[SnapshotLastQuote] = Field(default=None, alias="lastQuote")
    last_trade: Optional[SnapshotLastTrade] = Field(default=None, alias="lastTrade")
    min: Optional[SnapshotMinute] = None
    prev_day: Optional[SnapshotDay] = Field(default=None, alias="prevDay")
    updated: Optional[int] = None
    todays_change_percent: Optional[float] = Field(default=None, alias="todaysChangePerc")
    todays_change: Optional[float] = Field(default=None, alias="todaysChange")

    @property
    def market_updated(self) -> Optional[datetime]:
        """Last update time of the snapshot in market time."""

        return from_unix_nanos(self.updated)


class StockSnapshotResponse(PolygonModel):
    """Single-ticker snapshot envelope, which nests the snapshot under ``ticker``."""

    ticker: Optional[StockSnapshot] = None
    status: Optional[str] = None
    request_id: Optional[str] = None


def bars_to_dataframe(bars: Optional[Iterable[Bar]]) -> pd.DataFrame:
    """Render aggregate bars into a DataFrame indexed by position.

    Columns follow the model field names with an extra ``market_timestamp``
    column holding the converted window start.
    """

    rows = []
    for bar in bars or []:
        row = bar.model_dump()
        row["market_timestamp"] = bar.market_timestamp
        rows.append(row)
    if not rows:
        return pd.DataFrame()
    return pd.DataFrame(rows)


__all__ = [
    "Bar",
    "DailyOpenClose",
    "LastQuoteResult",
    "SnapshotDay",
    "SnapshotLastQuote",
    "SnapshotLastTrade",
    "SnapshotMinute",
    "StockQuote",
    "StockSnapshot",
    "StockSnapshotResponse",
    "StockTrade",
    "bars_to_dataframe",
]
