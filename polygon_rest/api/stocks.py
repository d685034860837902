"""Stock market data routes."""

from __future__ import annotations

from typing import List, Optional

from ..models.common import PolygonResponse, SortOrder, Timespan
from ..models.stocks import (
    Bar,
    DailyOpenClose,
    LastQuoteResult,
    StockQuote,
    StockSnapshot,
    StockSnapshotResponse,
    StockTrade,
)
from .base import PolygonApi
from .transport import path_segment as seg


class PolygonStocksApi(PolygonApi):
    def get_bars(
        self,
        ticker: str,
        multiplier: int,
        timespan: Timespan,
        from_date: str,
        to_date: str,
        adjusted: Optional[bool] = None,
        sort: Optional[SortOrder] = None,
        limit: Optional[int] = None,
    ) -> PolygonResponse[List[Bar]]:
        path = (
            f"/v2/aggs/ticker/{seg(ticker)}/range/{multiplier}/{seg(timespan)}"
            f"/{seg(from_date)}/{seg(to_date)}"
        )
        params = {"adjusted": adjusted, "sort": sort, "limit": limit}
        return self._get(path, PolygonResponse[List[Bar]], params)

    def get_previous_close(self, ticker: str, adjusted: Optional[bool] = None) -> PolygonResponse[List[Bar]]:
        return self._get(
            f"/v2/aggs/ticker/{seg(ticker)}/prev", PolygonResponse[List[Bar]], {"adjusted": adjusted}
        )

    def get_grouped_daily(
        self,
        date: str,
        adjusted: Optional[bool] = None,
        include_otc: Optional[bool] = None,
    ) -> PolygonResponse[List[Bar]]:
        return self._get(
            f"/v2/aggs/grouped/locale/us/market/stocks/{seg(date)}",
            PolygonResponse[List[Bar]],
            {"adjusted": adjusted, "include_otc": include_otc},
        )

    def get_daily_open_close(self, ticker: str, date: str, adjusted: Optional[bool] = None) -> DailyOpenClose:
        return self._get(f"/v1/open-close/{seg(ticker)}/{seg(date)}", DailyOpenClose, {"adjusted": adjusted})

    def get_trades(self, ticker: str, **filters: object) -> PolygonResponse[List[StockTrade]]:
        """``filters`` are query parameters such as ``timestamp.gte`` or ``limit``."""

        return self._get(f"/v3/trades/{seg(ticker)}", PolygonResponse[List[StockTrade]], filters)

    def get_quotes(self, ticker: str, **filters: object) -> PolygonResponse[List[StockQuote]]:
        return self._get(f"/v3/quotes/{seg(ticker)}", PolygonResponse[List[StockQuote]], filters)

    def get_last_trade(self, ticker: str) -> PolygonResponse[StockTrade]:
        return self._get(f"/v2/last/trade/{seg(ticker)}", PolygonResponse[StockTrade])

    def get_last_quote(self, ticker: str) -> PolygonResponse[LastQuoteResult]:
        return self._get(f"/v2/last/nbbo/{seg(ticker)}", PolygonResponse[LastQuoteResult])

    def get_market_snapshot(self, include_otc: Optional[bool] = None) -> PolygonResponse[List[StockSnapshot]]:
        # the market-wide snapshot lists tickers under "tickers" rather than "results"
        envelope = self._get(
            "/v2/snapshot/locale/us/markets/stocks/tickers", _MarketSnapshotEnvelope, {"include_otc": include_otc}
        )
        return envelope.as_response()

    def get_snapshot(self, ticker: str) -> StockSnapshotResponse:
        return self._get(f"/v2/snapshot/locale/us/markets/stocks/tickers/{seg(ticker)}", StockSnapshotResponse)


class _MarketSnapshotEnvelope(PolygonResponse[List[StockSnapshot]]):
    tickers: Optional[List[StockSnapshot]] = None

    def as_response(self) -> PolygonResponse[List[StockSnapshot]]:
        results = self.results if self.results is not None else self.tickers
        data = self.model_dump(exclude={"tickers", "results"})
        return PolygonResponse[List[StockSnapshot]](results=results, **data)


__all__ = ["PolygonStocksApi"]
