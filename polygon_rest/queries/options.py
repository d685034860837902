"""Request models for the options routes.

Fields holding an options ticker accept either an OCC string or an
:class:`~polygon_rest.models.tickers.OptionsTicker`; both are stored as the
canonical ``O:`` string.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import Field, field_validator

from ..models.common import SortOrder, Timespan
from .base import (
    BaseRequest,
    TimestampWindow,
    check_contract_type,
    check_date,
    check_limit,
    check_multiplier,
    check_option_contract,
    check_optional_date,
    check_options_ticker,
    check_order,
    check_strike_price,
    check_ticker,
)

UNDERLYING_LABEL = "Underlying asset ticker"


class _OptionsTickerRequest(BaseRequest):
    options_ticker: str

    @field_validator("options_ticker", mode="before")
    @classmethod
    def validate_options_ticker(cls, value: Any) -> str:
        return check_options_ticker(value)


class ContractDetailsRequest(_OptionsTickerRequest):
    as_of: Optional[str] = None

    @field_validator("as_of", mode="before")
    @classmethod
    def validate_as_of(cls, value: Any) -> Optional[str]:
        return check_optional_date(value, "As of date")


class OptionsBarsRequest(_OptionsTickerRequest):
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
        return check_limit(value)


class PreviousDayBarRequest(_OptionsTickerRequest):
    adjusted: Optional[bool] = None


class OptionsDailyOpenCloseRequest(_OptionsTickerRequest):
    date: str
    adjusted: Optional[bool] = None

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value: Any) -> str:
        return check_date(value)


class OptionsLastTradeRequest(_OptionsTickerRequest):
    pass


class OptionsQuotesRequest(TimestampWindow):
    options_ticker: str

    @field_validator("options_ticker", mode="before")
    @classmethod
    def validate_options_ticker(cls, value: Any) -> str:
        return check_options_ticker(value)


class OptionsTradesRequest(OptionsQuotesRequest):
    pass


class OptionsSnapshotRequest(BaseRequest):
    """Snapshot of one contract; ``option_contract`` is the OCC symbol without ``O:``."""

    underlying_asset: str
    option_contract: str

    @field_validator("underlying_asset", mode="before")
    @classmethod
    def validate_underlying(cls, value: Any) -> str:
        return check_ticker(value, UNDERLYING_LABEL)

    @field_validator("option_contract", mode="before")
    @classmethod
    def validate_contract(cls, value: Any) -> str:
        return check_option_contract(value)


class ChainSnapshotRequest(BaseRequest):
    underlying_asset: str
    strike_price: Optional[Decimal] = None
    contract_type: Optional[str] = None
    expiration_date_gte: Optional[str] = Field(default=None, alias="expiration_date.gte")
    expiration_date_lte: Optional[str] = Field(default=None, alias="expiration_date.lte")
    limit: Optional[int] = None
    order: Optional[str] = None
    sort: Optional[str] = None
    cursor: Optional[str] = None

    @field_validator("underlying_asset", mode="before")
    @classmethod
    def validate_underlying(cls, value: Any) -> str:
        return check_ticker(value, UNDERLYING_LABEL)

    @field_validator("strike_price", mode="before")
    @classmethod
    def validate_strike(cls, value: Any) -> Optional[Decimal]:
        return check_strike_price(value)

    @field_validator("contract_type", mode="before")
    @classmethod
    def validate_contract_type(cls, value: Any) -> Optional[str]:
        return check_contract_type(value)

    @field_validator("expiration_date_gte", mode="before")
    @classmethod
    def validate_expiration_gte(cls, value: Any) -> Optional[str]:
        return check_optional_date(value, "Expiration date (gte)")

    @field_validator("expiration_date_lte", mode="before")
    @classmethod
    def validate_expiration_lte(cls, value: Any) -> Optional[str]:
        return check_optional_date(value, "Expiration date (lte)")

    @field_validator("limit", mode="before")
    @classmethod
    def validate_limit(cls, value: Any) -> Optional[int]:
        return check_limit(value)

    @field_validator("order", mode="before")
    @classmethod
    def validate_order(cls, value: Any) -> Optional[str]:
        return check_order(value)


__all__ = [
    "ChainSnapshotRequest",
    "ContractDetailsRequest",
    "OptionsBarsRequest",
    "OptionsDailyOpenCloseRequest",
    "OptionsLastTradeRequest",
    "OptionsQuotesRequest",
    "OptionsSnapshotRequest",
    "OptionsTradesRequest",
    "PreviousDayBarRequest",
]
