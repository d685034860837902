"""OCC options ticker value type, codec and fluent builder.

The OCC ticker format used by Polygon.io is::

    O:[UNDERLYING][YYMMDD][C/P][STRIKE * 1000, zero padded to 8 digits]

``O:SPY251219C00650000`` is a call on SPY expiring 2025-12-19 with a 650.00
strike. The suffix after the underlying is always 15 characters wide, so the
underlying is whatever remains once the suffix has been read from the right.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any, List, Optional, Union

from ..exceptions import IncompleteBuilderError, OptionsTickerFormatError

OCC_PREFIX = "O:"
SUFFIX_WIDTH = 15
STRIKE_WIDTH = 8
MAX_STRIKE_THOUSANDTHS = 10**STRIKE_WIDTH - 1

_UNDERLYING_PATTERN = re.compile(r"[A-Z][A-Z0-9]{0,5}")
_DIGITS_PATTERN = re.compile(r"[0-9]+")
_THOUSAND = Decimal(1000)

StrikeLike = Union[Decimal, int, float, str]


class OptionType(str, Enum):
    """Type of an options contract."""

    CALL = "call"
    PUT = "put"

    @property
    def code(self) -> str:
        """Single letter used in OCC tickers."""

        return "C" if self is OptionType.CALL else "P"

    @classmethod
    def from_code(cls, code: str) -> "OptionType":
        if code == "C":
            return cls.CALL
        if code == "P":
            return cls.PUT
        raise ValueError(f"Option type code must be 'C' or 'P', got {code!r}")


def _to_decimal(value: StrikeLike) -> Decimal:
    if isinstance(value, bool):
        raise ValueError("Strike price must be a number.")
    if isinstance(value, Decimal):
        return value
    try:
        # str() keeps floats like 14.1 from dragging binary noise along
        return Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ValueError(f"Strike price must be a number, got {value!r}") from exc


def _strike_thousandths(strike: Decimal) -> int:
    return int((strike * _THOUSAND).quantize(Decimal(1), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class OptionsTicker:
    """Immutable view of an OCC options ticker.

    ``strike`` is held as a :class:`~decimal.Decimal` rounded to the three
    implied decimals the OCC encoding can carry.
    """

    underlying: str
    expiration: date
    option_type: OptionType
    strike: Decimal

    def __post_init__(self) -> None:
        underlying = self.underlying
        if not isinstance(underlying, str) or not underlying.strip():
            raise ValueError("Underlying ticker symbol cannot be empty.")
        underlying = underlying.strip().upper()
        if not _UNDERLYING_PATTERN.fullmatch(underlying):
            raise ValueError(
                "Underlying ticker symbol must be 1-6 characters, start with a letter "
                f"and contain only letters or digits, got {self.underlying!r}"
            )

        expiration = self.expiration
        if isinstance(expiration, datetime):
            expiration = expiration.date()
        elif not isinstance(expiration, date):
            raise ValueError(f"Expiration must be a date, got {expiration!r}")

        option_type = self.option_type
        if not isinstance(option_type, OptionType):
            option_type = OptionType(option_type)

        strike = _to_decimal(self.strike)
        if strike.is_nan() or strike.is_infinite():
            raise ValueError("Strike price must be a finite number.")
        if strike < 0:
            raise ValueError("Strike price cannot be negative.")
        thousandths = _strike_thousandths(strike)
        if thousandths > MAX_STRIKE_THOUSANDTHS:
            raise ValueError("Strike price must be below 100000 to fit the OCC encoding.")

        object.__setattr__(self, "underlying", underlying)
        object.__setattr__(self, "expiration", expiration)
        object.__setattr__(self, "option_type", option_type)
        object.__setattr__(self, "strike", Decimal(thousandths) / _THOUSAND)

    @classmethod
    def parse(cls, ticker: str) -> "OptionsTicker":
        """Parse an OCC ticker such as ``O:UBER220121C00050000``.

        Raises:
            OptionsTickerFormatError: If ``ticker`` is not a canonical OCC ticker.
        """

        if not isinstance(ticker, str) or not ticker.startswith(OCC_PREFIX):
            raise OptionsTickerFormatError(ticker, "missing 'O:' prefix")

        body = ticker[len(OCC_PREFIX):]
        if len(body) <= SUFFIX_WIDTH:
            raise OptionsTickerFormatError(ticker, "too short")

        strike_digits = body[-STRIKE_WIDTH:]
        type_code = body[-STRIKE_WIDTH - 1]
        date_digits = body[-SUFFIX_WIDTH:-STRIKE_WIDTH - 1]
        underlying = body[:-SUFFIX_WIDTH]

        if not _DIGITS_PATTERN.fullmatch(strike_digits):
            raise OptionsTickerFormatError(ticker, "strike is not numeric")
        if not _DIGITS_PATTERN.fullmatch(date_digits):
            raise OptionsTickerFormatError(ticker, "expiration is not numeric")
        if not _UNDERLYING_PATTERN.fullmatch(underlying):
            raise OptionsTickerFormatError(ticker, "invalid underlying symbol")

        try:
            option_type = OptionType.from_code(type_code)
        except ValueError as exc:
            raise OptionsTickerFormatError(ticker, "type must be 'C' or 'P'") from exc

        try:
            expiration = date(
                2000 + int(date_digits[0:2]),
                int(date_digits[2:4]),
                int(date_digits[4:6]),
            )
        except ValueError as exc:
            raise OptionsTickerFormatError(ticker, "expiration is not a calendar date") from exc

        strike = Decimal(int(strike_digits)) / _THOUSAND
        return cls(underlying, expiration, option_type, strike)

    @classmethod
    def try_parse(cls, ticker: Any) -> Optional["OptionsTicker"]:
        """Return the parsed ticker, or ``None`` when it is not valid."""

        try:
            return cls.parse(ticker)
        except OptionsTickerFormatError:
            return None

    @classmethod
    def create(
        cls,
        underlying: str,
        expiration: date,
        option_type: OptionType,
        strike: StrikeLike,
    ) -> str:
        """Return the canonical ticker string for the given components."""

        return cls(underlying, expiration, option_type, strike).serialize()

    def serialize(self) -> str:
        return f"{OCC_PREFIX}{self.contract_symbol}"

    @property
    def contract_symbol(self) -> str:
        """The ticker without its ``O:`` prefix, as used by snapshot endpoints."""

        thousandths = _strike_thousandths(self.strike)
        return (
            f"{self.underlying}{self.expiration:%y%m%d}"
            f"{self.option_type.code}{thousandths:0{STRIKE_WIDTH}d}"
        )

    def __str__(self) -> str:
        return self.serialize()


class OptionsTickerBuilder:
    """Fluent accumulator for :class:`OptionsTicker` values.

    >>> (
    ...     OptionsTickerBuilder()
    ...     .with_underlying("SPY")
    ...     .with_expiration(2025, 12, 19)
    ...     .as_call()
    ...     .with_strike(650)
    ...     .build()
    ... )
    'O:SPY251219C00650000'
    """

    def __init__(self) -> None:
        self._underlying: Optional[str] = None
        self._expiration: Optional[date] = None
        self._option_type: Optional[OptionType] = None
        self._strike: Optional[Decimal] = None

    def with_underlying(self, underlying: str) -> "OptionsTickerBuilder":
        if not isinstance(underlying, str) or not underlying.strip():
            raise ValueError("Underlying ticker symbol cannot be empty.")
        self._underlying = underlying
        return self

    def with_expiration(
        self,
        expiration: Union[date, int],
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> "OptionsTickerBuilder":
        """Set the expiration from a ``date`` or from ``year, month, day``."""

        if isinstance(expiration, date):
            if month is not None or day is not None:
                raise TypeError("Pass either a date or year, month and day, not both.")
            self._expiration = expiration.date() if isinstance(expiration, datetime) else expiration
            return self
        if month is None or day is None:
            raise TypeError("with_expiration() needs month and day when given a year.")
        self._expiration = date(expiration, month, day)
        return self

    def as_call(self) -> "OptionsTickerBuilder":
        self._option_type = OptionType.CALL
        return self

    def as_put(self) -> "OptionsTickerBuilder":
        self._option_type = OptionType.PUT
        return self

    def with_type(self, option_type: OptionType) -> "OptionsTickerBuilder":
        self._option_type = OptionType(option_type)
        return self

    def with_strike(self, strike: StrikeLike) -> "OptionsTickerBuilder":
        value = _to_decimal(strike)
        if not value.is_finite():
            raise ValueError("Strike price must be a finite number.")
        if value < 0:
            raise ValueError("Strike price cannot be negative.")
        self._strike = value
        return self

    def build_ticker(self) -> OptionsTicker:
        missing: List[str] = []
        if self._underlying is None:
            missing.append("underlying")
        if self._expiration is None:
            missing.append("expiration")
        if self._option_type is None:
            missing.append("option_type")
        if self._strike is None:
            missing.append("strike")
        if missing:
            raise IncompleteBuilderError(missing)
        return OptionsTicker(self._underlying, self._expiration, self._option_type, self._strike)

    def build(self) -> str:
        return self.build_ticker().serialize()

    def reset(self) -> "OptionsTickerBuilder":
        self._underlying = None
        self._expiration = None
        self._option_type = None
        self._strike = None
        return self


__all__ = [
    "OCC_PREFIX",
    "OptionType",
    "OptionsTicker",
    "OptionsTickerBuilder",
]
