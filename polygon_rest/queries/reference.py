"""Request models for the reference data routes."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, field_validator

from ..models.common import AssetClass, DataType, Locale, Market, SipMappingType
from .base import BaseRequest, check_limit, check_optional_date, check_optional_ticker, check_order, check_ticker

MAX_REFERENCE_LIMIT = 1000


class TickersRequest(BaseRequest):
    """Filters for ``/v3/reference/tickers``; every field is optional."""

    ticker: Optional[str] = None
    ticker_gt: Optional[str] = Field(default=None, alias="ticker.gt")
    ticker_gte: Optional[str] = Field(default=None, alias="ticker.gte")
    ticker_lt: Optional[str] = Field(default=None, alias="ticker.lt")
    ticker_lte: Optional[str] = Field(default=None, alias="ticker.lte")
    type: Optional[str] = None
    market: Optional[Market] = None
    exchange: Optional[str] = None
    cusip: Optional[str] = None
    cik: Optional[str] = None
    date: Optional[str] = None
    search: Optional[str] = None
    active: Optional[bool] = None
    sort: Optional[str] = None
    order: Optional[str] = None
    limit: Optional[int] = None

    @field_validator("ticker", "ticker_gt", "ticker_gte", "ticker_lt", "ticker_lte", mode="before")
    @classmethod
    def validate_ticker(cls, value: Any) -> Optional[str]:
        return check_optional_ticker(value)

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> Optional[str]:
        return check_optional_date(value)

    @field_validator("order", mode="before")
    @classmethod
    def validate_order(cls, value: Any) -> Optional[str]:
        return check_order(value)

    @field_validator("limit", mode="before")
    @classmethod
    def validate_limit(cls, value: Any) -> Optional[int]:
        return check_limit(value, MAX_REFERENCE_LIMIT)


class TickerDetailsRequest(BaseRequest):
    ticker: str
    date: Optional[str] = None

    @field_validator("ticker", mode="before")
    @classmethod
    def validate_ticker(cls, value: Any) -> str:
        return check_ticker(value)

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> Optional[str]:
        return check_optional_date(value)


class TickerTypesRequest(BaseRequest):
    asset_class: Optional[AssetClass] = None
    locale: Optional[Locale] = None


class ConditionCodesRequest(BaseRequest):
    asset_class: Optional[AssetClass] = None
    data_type: Optional[DataType] = None
    id: Optional[int] = None
    sip_mapping: Optional[SipMappingType] = None
    order: Optional[str] = None
    limit: Optional[int] = None
    sort: Optional[str] = None

    @field_validator("order", mode="before")
    @classmethod
    def validate_order(cls, value: Any) -> Optional[str]:
        return check_order(value)

    @field_validator("limit", mode="before")
    @classmethod
    def validate_limit(cls, value: Any) -> Optional[int]:
        return check_limit(value, MAX_REFERENCE_LIMIT)


class ExchangesRequest(BaseRequest):
    asset_class: Optional[AssetClass] = None
    locale: Optional[Locale] = None


__all__ = [
    "ConditionCodesRequest",
    "ExchangesRequest",
    "TickerDetailsRequest",
    "TickerTypesRequest",
    "TickersRequest",
]
