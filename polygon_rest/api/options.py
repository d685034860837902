"""Options market data routes."""

from __future__ import annotations

from typing import List, Optional

from ..models.common import PolygonResponse, SortOrder, Timespan
from ..models.options import OptionQuote, OptionsContract, OptionSnapshot, OptionTrade, OptionTradeV3
from ..models.stocks import Bar, DailyOpenClose
from .base import PolygonApi
from .transport import path_segment as seg


class PolygonOptionsApi(PolygonApi):
    """Routes keyed by an OCC options ticker such as ``O:SPY251219C00650000``."""

    def get_contract_details(self, options_ticker: str, as_of: Optional[str] = None) -> PolygonResponse[OptionsContract]:
        return self._get(
            f"/v3/reference/options/contracts/{seg(options_ticker)}",
            PolygonResponse[OptionsContract],
            {"as_of": as_of},
        )

    def get_bars(
        self,
        options_ticker: str,
        multiplier: int,
        timespan: Timespan,
        from_date: str,
        to_date: str,
        adjusted: Optional[bool] = None,
        sort: Optional[SortOrder] = None,
        limit: Optional[int] = None,
    ) -> PolygonResponse[List[Bar]]:
        path = (
            f"/v2/aggs/ticker/{seg(options_ticker)}/range/{multiplier}/{seg(timespan)}"
            f"/{seg(from_date)}/{seg(to_date)}"
        )
        return self._get(path, PolygonResponse[List[Bar]], {"adjusted": adjusted, "sort": sort, "limit": limit})

    def get_previous_day_bar(self, options_ticker: str, adjusted: Optional[bool] = None) -> PolygonResponse[List[Bar]]:
        return self._get(
            f"/v2/aggs/ticker/{seg(options_ticker)}/prev", PolygonResponse[List[Bar]], {"adjusted": adjusted}
        )

    def get_daily_open_close(self, options_ticker: str, date: str, adjusted: Optional[bool] = None) -> DailyOpenClose:
        return self._get(
            f"/v1/open-close/{seg(options_ticker)}/{seg(date)}", DailyOpenClose, {"adjusted": adjusted}
        )

    def get_last_trade(self, options_ticker: str) -> PolygonResponse[OptionTrade]:
        return self._get(f"/v2/last/trade/{seg(options_ticker)}", PolygonResponse[OptionTrade])

    def get_quotes(self, options_ticker: str, **filters: object) -> PolygonResponse[List[OptionQuote]]:
        return self._get(f"/v3/quotes/{seg(options_ticker)}", PolygonResponse[List[OptionQuote]], filters)

    def get_trades(self, options_ticker: str, **filters: object) -> PolygonResponse[List[OptionTradeV3]]:
        return self._get(f"/v3/trades/{seg(options_ticker)}", PolygonResponse[List[OptionTradeV3]], filters)

    def get_snapshot(self, underlying_asset: str, option_contract: str) -> PolygonResponse[OptionSnapshot]:
        return self._get(
            f"/v3/snapshot/options/{seg(underlying_asset)}/{seg(option_contract)}",
            PolygonResponse[OptionSnapshot],
        )

    def get_chain_snapshot(self, underlying_asset: str, **filters: object) -> PolygonResponse[List[OptionSnapshot]]:
        """``filters`` include ``strike_price``, ``contract_type`` and ``expiration_date.gte``."""

        return self._get(
            f"/v3/snapshot/options/{seg(underlying_asset)}", PolygonResponse[List[OptionSnapshot]], filters
        )


__all__ = ["PolygonOptionsApi"]
