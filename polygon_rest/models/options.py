"""Options market data models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator

from .common import PolygonModel, parse_scientific_int
from .tickers import OptionsTicker
from .timestamps import from_unix_nanos


def _parse_iso_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


class OptionsContract(PolygonModel):
    """Reference data for a single options contract."""

    cfi: Optional[str] = None
    contract_type: Optional[str] = None
    exercise_style: Optional[str] = None
    expiration_date: Optional[str] = None
    primary_exchange: Optional[str] = None
    shares_per_contract: Optional[int] = None
    strike_price: Optional[float] = None
    ticker: Optional[str] = None
    underlying_ticker: Optional[str] = None

    @property
    def expiration(self) -> Optional[date]:
        return _parse_iso_date(self.expiration_date)

    @property
    def options_ticker(self) -> Optional[OptionsTicker]:
        """The parsed OCC ticker, or ``None`` when Polygon returned something else."""

        return OptionsTicker.try_parse(self.ticker)


class OptionDayData(PolygonModel):
    change: Optional[float] = None
    change_percent: Optional[float] = None
    close: Optional[float] = None
    high: Optional[float] = None
    last_updated: Optional[int] = None
    low: Optional[float] = None
    open: Optional[float] = None
    previous_close: Optional[float] = None
    volume: Optional[int] = None
    vwap: Optional[float] = None

    @field_validator("volume", mode="before")
    @classmethod
    def coerce_volume(cls, value: Any) -> Optional[int]:
        return parse_scientific_int(value)

    @property
    def market_last_updated(self) -> Optional[datetime]:
        return from_unix_nanos(self.last_updated)


class OptionContractDetails(PolygonModel):
    contract_type: Optional[str] = None
    exercise_style: Optional[str] = None
    expiration_date: Optional[str] = None
    shares_per_contract: Optional[int] = None
    strike_price: Optional[float] = None
    ticker: Optional[str] = None

    @property
    def expiration(self) -> Optional[date]:
        return _parse_iso_date(self.expiration_date)


class OptionGreeks(PolygonModel):
    delta: Optional[float] = None
    gamma: Optional[float] = None
    theta: Optional[float] = None
    vega: Optional[float] = None


class OptionLastQuote(PolygonModel):
    ask: Optional[float] = None
    ask_size: Optional[int] = None
    ask_exchange: Optional[int] = None
    bid: Optional[float] = None
    bid_size: Optional[int] = None
    bid_exchange: Optional[int] = None
    last_updated: Optional[int] = None
    midpoint: Optional[float] = None
    timeframe: Optional[str] = None

    @property
    def market_last_updated(self) -> Optional[datetime]:
        return from_unix_nanos(self.last_updated)


class OptionLastTrade(PolygonModel):
    sip_timestamp: Optional[int] = None
    conditions: Optional[List[int]] = None
    price: Optional[float] = None
    size: Optional[int] = None
    exchange: Optional[int] = None
    timeframe: Optional[str] = None

    @property
    def market_timestamp(self) -> Optional[datetime]:
        return from_unix_nanos(self.sip_timestamp)


class OptionUnderlyingAsset(PolygonModel):
    change_to_break_even: Optional[float] = None
    last_updated: Optional[int] = None
    price: Optional[float] = None
    ticker: Optional[str] = None
    timeframe: Optional[str] = None


class OptionSnapshot(PolygonModel):
    """Point-in-time view of an options contract and its underlying."""

    break_even_price: Optional[float] = None
    day: Optional[OptionDayData] = None
    details: Optional[OptionContractDetails] = None
    greeks: Optional[OptionGreeks] = None
    implied_volatility: Optional[float] = None
    last_quote: Optional[OptionLastQuote] = None
    last_trade: Optional[OptionLastTrade] = None
    open_interest: Optional[int] = None
    underlying_asset: Optional[OptionUnderlyingAsset] = None

    @field_validator("open_interest", mode="before")
    @classmethod
    def coerce_open_interest(cls, value: Any) -> Optional[int]:
        return parse_scientific_int(value)


class OptionTrade(PolygonModel):
    """Last trade for an options contract (``/v2/last/trade``)."""

    ticker: Optional[str] = Field(default=None, alias="T")
    conditions: Optional[List[int]] = Field(default=None, alias="c")
    id: Optional[str] = Field(default=None, alias="i")
    price: Optional[float] = Field(default=None, alias="p")
    sequence: Optional[int] = Field(default=None, alias="q")
    size: Optional[int] = Field(default=None, alias="s")
    timestamp: Optional[int] = Field(default=None, alias="t")
    exchange: Optional[int] = Field(default=None, alias="x")

    @property
    def market_timestamp(self) -> Optional[datetime]:
        return from_unix_nanos(self.timestamp)


class OptionTradeV3(PolygonModel):
    """Historical trade for an options contract (``/v3/trades``)."""

    conditions: Optional[List[int]] = None
    exchange: Optional[int] = None
    id: Optional[str] = None
    participant_timestamp: Optional[int] = None
    price: Optional[float] = None
    sequence_number: Optional[int] = None
    sip_timestamp: Optional[int] = None
    size: Optional[int] = None

    @property
    def market_timestamp(self) -> Optional[datetime]:
        return from_unix_nanos(self.sip_timestamp)

    @property
    def market_participant_timestamp(self) -> Optional[datetime]:
        return from_unix_nanos(self.participant_timestamp)


class OptionQuote(PolygonModel):
    ask_exchange: Optional[int] = None
    ask_price: Optional[float] = None
    ask_size: Optional[int] = None
    bid_exchange: Optional[int] = None
    bid_price: Optional[float] = None
    bid_size: Optional[int] = None
    sequence_number: Optional[int] = None
    sip_timestamp: Optional[int] = None

    @property
    def market_timestamp(self) -> Optional[datetime]:
        return from_unix_nanos(self.sip_timestamp)

    @property
    def midpoint(self) -> Optional[float]:
        if self.bid_price is None or self.ask_price is None:
            return None
        return round((self.bid_price + self.ask_price) / 2, 4)


__all__ = [
    "OptionContractDetails",
    "OptionDayData",
    "OptionGreeks",
    "OptionLastQuote",
    "OptionLastTrade",
    "OptionQuote",
    "OptionSnapshot",
    "OptionTrade",
    "OptionTradeV3",
    "OptionUnderlyingAsset",
    "OptionsContract",
]
