"""Shared request model and the field checks reused across endpoints."""

from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.tickers import OptionsTicker, OptionType

DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
MAX_TICKER_LENGTH = 10
MIN_OPTION_CONTRACT_LENGTH = 15
OCC_EXAMPLE = "O:SPY251219C00650000"


class BaseRequest(BaseModel):
    """Base for request models; unknown keyword arguments are rejected."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        revalidate_instances="always",
    )

    def query_params(self, exclude: Iterable[str] = ()) -> Dict[str, Any]:
        """Render the non-path fields as Polygon query parameters."""

        return self.model_dump(by_alias=True, exclude_none=True, exclude=set(exclude))


class TimestampWindow(BaseRequest):
    """Timestamp filters shared by the tick-level trade and quote routes.

    Polygon accepts either a ``YYYY-MM-DD`` date or a nanosecond epoch for
    each bound; ``datetime.date`` values are rendered to the former.
    """

    timestamp: Optional[str] = None
    timestamp_gt: Optional[str] = Field(default=None, alias="timestamp.gt")
    timestamp_gte: Optional[str] = Field(default=None, alias="timestamp.gte")
    timestamp_lt: Optional[str] = Field(default=None, alias="timestamp.lt")
    timestamp_lte: Optional[str] = Field(default=None, alias="timestamp.lte")
    order: Optional[str] = None
    limit: Optional[int] = None
    sort: Optional[str] = None
    cursor: Optional[str] = None

    @field_validator("timestamp", "timestamp_gt", "timestamp_gte", "timestamp_lt", "timestamp_lte", mode="before")
    @classmethod
    def render_timestamp(cls, value: Any) -> Optional[str]:
        if value is None or value == "":
            return None
        if isinstance(value, (date, datetime)):
            return check_date(value)
        return str(value)

    @field_validator("order", mode="before")
    @classmethod
    def validate_order(cls, value: Any) -> Optional[str]:
        return check_order(value)

    @field_validator("limit", mode="before")
    @classmethod
    def validate_limit(cls, value: Any) -> Optional[int]:
        return check_limit(value)


def check_ticker(value: Any, label: str = "Ticker") -> str:
    if value is None or not str(value):
        raise ValueError(f"{label} must not be empty.")
    text = str(value)
    if len(text) > MAX_TICKER_LENGTH:
        raise ValueError(f"{label} must not exceed {MAX_TICKER_LENGTH} characters.")
    return text


def check_optional_ticker(value: Any, label: str = "Ticker") -> Optional[str]:
    if value is None or value == "":
        return None
    return check_ticker(value, label)


def check_date(value: Any, label: str = "Date") -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if value is None or value == "":
        raise ValueError(f"{label} must not be empty.")
    text = str(value)
    if not DATE_PATTERN.match(text):
        raise ValueError(f"{label} must be in YYYY-MM-DD format.")
    return text


def check_optional_date(value: Any, label: str = "Date") -> Optional[str]:
    if value is None or value == "":
        return None
    return check_date(value, label)


def check_limit(value: Any, maximum: Optional[int] = None) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("Limit must be an integer.")
    try:
        limit = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("Limit must be an integer.") from exc
    if maximum is not None and not 0 < limit <= maximum:
        raise ValueError(f"Limit must be between 1 and {maximum}.")
    if limit <= 0:
        raise ValueError("Limit must be greater than 0.")
    return limit


def check_order(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, Enum):
        value = value.value
    if value not in ("asc", "desc"):
        raise ValueError("Order must be 'asc' or 'desc'.")
    return value


def check_contract_type(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, OptionType):
        return value.value
    if value not in ("call", "put"):
        raise ValueError("Contract type must be 'call' or 'put'.")
    return value


def check_strike_price(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        strike = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError("Strike price must be a number.") from exc
    if not strike.is_finite():
        raise ValueError("Strike price must be a finite number.")
    if strike <= 0:
        raise ValueError("Strike price must be greater than 0.")
    return strike


def check_multiplier(value: Any) -> int:
    try:
        multiplier = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("Multiplier must be an integer.") from exc
    if multiplier <= 0:
        raise ValueError("Multiplier must be greater than 0.")
    return multiplier


def check_options_ticker(value: Any) -> str:
    """Accept an :class:`OptionsTicker` or a string that parses as one."""

    if isinstance(value, OptionsTicker):
        return value.serialize()
    if value is None or not str(value):
        raise ValueError("Options ticker must not be empty.")
    text = str(value)
    if OptionsTicker.try_parse(text) is None:
        raise ValueError(f"Options ticker must be in valid OCC format (e.g., '{OCC_EXAMPLE}').")
    return text


def check_option_contract(value: Any) -> str:
    if value is None or not str(value):
        raise ValueError("Option contract must not be empty.")
    text = str(value)
    if len(text) < MIN_OPTION_CONTRACT_LENGTH:
        raise ValueError(
            f"Option contract must be at least {MIN_OPTION_CONTRACT_LENGTH} characters "
            "(OCC format without 'O:' prefix)."
        )
    return text


__all__ = [
    "BaseRequest",
    "TimestampWindow",
    "DATE_PATTERN",
    "check_contract_type",
    "check_date",
    "check_limit",
    "check_multiplier",
    "check_option_contract",
    "check_options_ticker",
    "check_optional_date",
    "check_optional_ticker",
    "check_order",
    "check_strike_price",
    "check_ticker",
]
