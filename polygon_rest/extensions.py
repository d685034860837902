"""Convenience helpers layered over :class:`~polygon_rest.services.options.OptionsService`.

These work from contract components or a parsed :class:`OptionsTicker`
instead of pre-formatted OCC strings, and add two discovery helpers that
summarize an options chain snapshot.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, List, Optional, Union

from .models.common import PolygonResponse, SortOrder, Timespan
from .models.options import OptionQuote, OptionsContract, OptionSnapshot, OptionTrade, OptionTradeV3
from .models.stocks import Bar, DailyOpenClose
from .models.tickers import OptionsTicker, OptionType, StrikeLike
from .services.options import OptionsService

DISCOVERY_LIMIT = 1000

DateLike = Union[str, date]


def get_contract_by_components(
    service: OptionsService,
    underlying: str,
    expiration: date,
    option_type: OptionType,
    strike: StrikeLike,
) -> PolygonResponse[OptionsContract]:
    ticker = OptionsTicker.create(underlying, expiration, option_type, strike)
    return service.get_contract_details(options_ticker=ticker)


def get_snapshot_by_components(
    service: OptionsService,
    underlying: str,
    expiration: date,
    option_type: OptionType,
    strike: StrikeLike,
) -> PolygonResponse[OptionSnapshot]:
    ticker = OptionsTicker(underlying, expiration, option_type, strike)
    return get_snapshot(service, ticker)


def get_last_trade_by_components(
    service: OptionsService,
    underlying: str,
    expiration: date,
    option_type: OptionType,
    strike: StrikeLike,
) -> PolygonResponse[OptionTrade]:
    ticker = OptionsTicker.create(underlying, expiration, option_type, strike)
    return service.get_last_trade(options_ticker=ticker)


def get_bars_by_components(
    service: OptionsService,
    underlying: str,
    expiration: date,
    option_type: OptionType,
    strike: StrikeLike,
    multiplier: int,
    timespan: Timespan,
    from_date: DateLike,
    to_date: DateLike,
    adjusted: Optional[bool] = None,
    sort: Optional[SortOrder] = None,
    limit: Optional[int] = None,
) -> PolygonResponse[List[Bar]]:
    ticker = OptionsTicker.create(underlying, expiration, option_type, strike)
    return service.get_bars(
        options_ticker=ticker,
        multiplier=multiplier,
        timespan=timespan,
        from_date=from_date,
        to_date=to_date,
        adjusted=adjusted,
        sort=sort,
        limit=limit,
    )


def get_available_strikes(
    service: OptionsService,
    underlying: str,
    option_type: Optional[OptionType] = None,
    expiration_gte: Optional[DateLike] = None,
    expiration_lte: Optional[DateLike] = None,
) -> List[Decimal]:
    """Sorted, de-duplicated strike prices found in one page of the chain snapshot."""

    response = service.get_chain_snapshot(
        underlying_asset=underlying,
        contract_type=option_type,
        expiration_date_gte=expiration_gte,
        expiration_date_lte=expiration_lte,
        limit=DISCOVERY_LIMIT,
        sort="strike_price",
        order="asc",
    )
    strikes = {
        Decimal(str(snapshot.details.strike_price))
        for snapshot in response.results or []
        if snapshot.details is not None and snapshot.details.strike_price is not None
    }
    return sorted(strikes)


def get_expiration_dates(
    service: OptionsService,
    underlying: str,
    option_type: Optional[OptionType] = None,
    strike: Optional[StrikeLike] = None,
) -> List[date]:
    """Sorted, de-duplicated expiration dates found in one page of the chain snapshot."""

    response = service.get_chain_snapshot(
        underlying_asset=underlying,
        strike_price=strike,
        contract_type=option_type,
        limit=DISCOVERY_LIMIT,
        sort="expiration_date",
        order="asc",
    )
    expirations = set()
    for snapshot in response.results or []:
        expiration = snapshot.details.expiration if snapshot.details is not None else None
        if expiration is not None:
            expirations.add(expiration)
    return sorted(expirations)


def get_contract_details(service: OptionsService, ticker: OptionsTicker) -> PolygonResponse[OptionsContract]:
    return service.get_contract_details(options_ticker=ticker)


def get_snapshot(service: OptionsService, ticker: OptionsTicker) -> PolygonResponse[OptionSnapshot]:
    return service.get_snapshot(underlying_asset=ticker.underlying, option_contract=ticker.contract_symbol)


def get_last_trade(service: OptionsService, ticker: OptionsTicker) -> PolygonResponse[OptionTrade]:
    return service.get_last_trade(options_ticker=ticker)


def get_quotes(service: OptionsService, ticker: OptionsTicker, **filters: Any) -> PolygonResponse[List[OptionQuote]]:
    """``filters`` are the quote request fields, e.g. ``timestamp_gte`` or ``limit``."""

    return service.get_quotes(options_ticker=ticker, **filters)


def get_trades(service: OptionsService, ticker: OptionsTicker, **filters: Any) -> PolygonResponse[List[OptionTradeV3]]:
    return service.get_trades(options_ticker=ticker, **filters)


def get_bars(
    service: OptionsService,
    ticker: OptionsTicker,
    multiplier: int,
    timespan: Timespan,
    from_date: DateLike,
    to_date: DateLike,
    adjusted: Optional[bool] = None,
    sort: Optional[SortOrder] = None,
    limit: Optional[int] = None,
) -> PolygonResponse[List[Bar]]:
    return service.get_bars(
        options_ticker=ticker,
        multiplier=multiplier,
        timespan=timespan,
        from_date=from_date,
        to_date=to_date,
        adjusted=adjusted,
        sort=sort,
        limit=limit,
    )


def get_daily_open_close(service: OptionsService, ticker: OptionsTicker, day: DateLike) -> DailyOpenClose:
    return service.get_daily_open_close(options_ticker=ticker, date=day)


def get_previous_day_bar(service: OptionsService, ticker: OptionsTicker) -> PolygonResponse[List[Bar]]:
    return service.get_previous_day_bar(options_ticker=ticker)


__all__ = [
    "get_available_strikes",
    "get_bars",
    "get_bars_by_components",
    "get_contract_by_components",
    "get_contract_details",
    "get_daily_open_close",
    "get_expiration_dates",
    "get_last_trade",
    "get_last_trade_by_components",
    "get_previous_day_bar",
    "get_quotes",
    "get_snapshot",
    "get_snapshot_by_components",
    "get_trades",
]
