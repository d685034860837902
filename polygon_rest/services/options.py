"""Options market data service."""

from __future__ import annotations

from typing import Any, List

from ..api.options import PolygonOptionsApi
from ..models.common import PolygonResponse
from ..models.options import OptionQuote, OptionsContract, OptionSnapshot, OptionTrade, OptionTradeV3
from ..models.stocks import Bar, DailyOpenClose
from ..queries.options import (
    ChainSnapshotRequest,
    ContractDetailsRequest,
    OptionsBarsRequest,
    OptionsDailyOpenCloseRequest,
    OptionsLastTradeRequest,
    OptionsQuotesRequest,
    OptionsSnapshotRequest,
    OptionsTradesRequest,
    PreviousDayBarRequest,
)
from .base import BaseService, RequestInput


class OptionsService(BaseService):
    _api: PolygonOptionsApi

    def get_contract_details(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[OptionsContract]:
        return self._execute(
            "get_contract_details",
            ContractDetailsRequest,
            request,
            kwargs,
            lambda r: self._api.get_contract_details(r.options_ticker, r.as_of),
        )

    def get_bars(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[Bar]]:
        return self._execute(
            "get_bars",
            OptionsBarsRequest,
            request,
            kwargs,
            lambda r: self._api.get_bars(
                r.options_ticker, r.multiplier, r.timespan, r.from_date, r.to_date, r.adjusted, r.sort, r.limit
            ),
        )

    def get_previous_day_bar(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[Bar]]:
        return self._execute(
            "get_previous_day_bar",
            PreviousDayBarRequest,
            request,
            kwargs,
            lambda r: self._api.get_previous_day_bar(r.options_ticker, r.adjusted),
        )

    def get_daily_open_close(self, request: RequestInput = None, **kwargs: Any) -> DailyOpenClose:
        return self._execute(
            "get_daily_open_close",
            OptionsDailyOpenCloseRequest,
            request,
            kwargs,
            lambda r: self._api.get_daily_open_close(r.options_ticker, r.date, r.adjusted),
        )

    def get_last_trade(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[OptionTrade]:
        return self._execute(
            "get_last_trade",
            OptionsLastTradeRequest,
            request,
            kwargs,
            lambda r: self._api.get_last_trade(r.options_ticker),
        )

    def get_quotes(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[OptionQuote]]:
        return self._execute(
            "get_quotes",
            OptionsQuotesRequest,
            request,
            kwargs,
            lambda r: self._api.get_quotes(r.options_ticker, **r.query_params(exclude={"options_ticker"})),
        )

    def get_trades(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[OptionTradeV3]]:
        return self._execute(
            "get_trades",
            OptionsTradesRequest,
            request,
            kwargs,
            lambda r: self._api.get_trades(r.options_ticker, **r.query_params(exclude={"options_ticker"})),
        )

    def get_snapshot(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[OptionSnapshot]:
        return self._execute(
            "get_snapshot",
            OptionsSnapshotRequest,
            request,
            kwargs,
            lambda r: self._api.get_snapshot(r.underlying_asset, r.option_contract),
        )

    def get_chain_snapshot(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[OptionSnapshot]]:
        return self._execute(
            "get_chain_snapshot",
            ChainSnapshotRequest,
            request,
            kwargs,
            lambda r: self._api.get_chain_snapshot(
                r.underlying_asset, **r.query_params(exclude={"underlying_asset"})
            ),
        )


__all__ = ["OptionsService"]
