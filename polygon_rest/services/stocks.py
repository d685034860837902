"""Stock market data service."""

from __future__ import annotations

from typing import Any, List

from ..api.stocks import PolygonStocksApi
from ..models.common import PolygonResponse
from ..models.stocks import (
    Bar,
    DailyOpenClose,
    LastQuoteResult,
    StockQuote,
    StockSnapshot,
    StockSnapshotResponse,
    StockTrade,
)
from ..queries.stocks import (
    GroupedDailyRequest,
    LastQuoteRequest,
    LastTradeRequest,
    MarketSnapshotRequest,
    PreviousCloseRequest,
    StockBarsRequest,
    StockDailyOpenCloseRequest,
    StockQuotesRequest,
    StockSnapshotRequest,
    StockTradesRequest,
)
from .base import BaseService, RequestInput


class StocksService(BaseService):
    """Aggregates, ticks, last trade/quote and snapshots for US equities.

    >>> client.stocks.get_bars(ticker="AAPL", multiplier=1, timespan="day",
    ...                        from_date="2025-09-01", to_date="2025-09-15")  # doctest: +SKIP
    """

    _api: PolygonStocksApi

    def get_bars(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[Bar]]:
        return self._execute(
            "get_bars",
            StockBarsRequest,
            request,
            kwargs,
            lambda r: self._api.get_bars(
                r.ticker, r.multiplier, r.timespan, r.from_date, r.to_date, r.adjusted, r.sort, r.limit
            ),
        )

    def get_previous_close(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[Bar]]:
        return self._execute(
            "get_previous_close",
            PreviousCloseRequest,
            request,
            kwargs,
            lambda r: self._api.get_previous_close(r.ticker, r.adjusted),
        )

    def get_grouped_daily(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[Bar]]:
        return self._execute(
            "get_grouped_daily",
            GroupedDailyRequest,
            request,
            kwargs,
            lambda r: self._api.get_grouped_daily(r.date, r.adjusted, r.include_otc),
        )

    def get_daily_open_close(self, request: RequestInput = None, **kwargs: Any) -> DailyOpenClose:
        return self._execute(
            "get_daily_open_close",
            StockDailyOpenCloseRequest,
            request,
            kwargs,
            lambda r: self._api.get_daily_open_close(r.ticker, r.date, r.adjusted),
        )

    def get_trades(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[StockTrade]]:
        return self._execute(
            "get_trades",
            StockTradesRequest,
            request,
            kwargs,
            lambda r: self._api.get_trades(r.ticker, **r.query_params(exclude={"ticker"})),
        )

    def get_quotes(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[StockQuote]]:
        return self._execute(
            "get_quotes",
            StockQuotesRequest,
            request,
            kwargs,
            lambda r: self._api.get_quotes(r.ticker, **r.query_params(exclude={"ticker"})),
        )

    def get_last_trade(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[StockTrade]:
        return self._execute(
            "get_last_trade", LastTradeRequest, request, kwargs, lambda r: self._api.get_last_trade(r.ticker)
        )

    def get_last_quote(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[LastQuoteResult]:
        return self._execute(
            "get_last_quote", LastQuoteRequest, request, kwargs, lambda r: self._api.get_last_quote(r.ticker)
        )

    def get_market_snapshot(
        self, request: RequestInput = None, **kwargs: Any
    ) -> PolygonResponse[List[StockSnapshot]]:
        return self._execute(
            "get_market_snapshot",
            MarketSnapshotRequest,
            request,
            kwargs,
            lambda r: self._api.get_market_snapshot(r.include_otc),
        )

    def get_snapshot(self, request: RequestInput = None, **kwargs: Any) -> StockSnapshotResponse:
        return self._execute(
            "get_snapshot", StockSnapshotRequest, request, kwargs, lambda r: self._api.get_snapshot(r.ticker)
        )


__all__ = ["StocksService"]
