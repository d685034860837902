"""Reference data routes."""

from __future__ import annotations

from typing import List, Optional

from ..models.common import AssetClass, Locale, PolygonResponse
from ..models.reference import (
    ConditionCode,
    Exchange,
    MarketHoliday,
    MarketStatus,
    StockTicker,
    TickerTypesResponse,
)
from .base import PolygonApi
from .transport import path_segment as seg


class PolygonReferenceApi(PolygonApi):
    def get_tickers(self, **filters: object) -> PolygonResponse[List[StockTicker]]:
        return self._get("/v3/reference/tickers", PolygonResponse[List[StockTicker]], filters)

    def get_ticker_details(self, ticker: str, date: Optional[str] = None) -> PolygonResponse[StockTicker]:
        return self._get(f"/v3/reference/tickers/{seg(ticker)}", PolygonResponse[StockTicker], {"date": date})

    def get_ticker_types(
        self,
        asset_class: Optional[AssetClass] = None,
        locale: Optional[Locale] = None,
    ) -> TickerTypesResponse:
        return self._get(
            "/v3/reference/tickers/types", TickerTypesResponse, {"asset_class": asset_class, "locale": locale}
        )

    def get_market_status(self) -> MarketStatus:
        return self._get("/v1/marketstatus/now", MarketStatus)

    def get_market_holidays(self) -> List[MarketHoliday]:
        # Polygon returns a bare JSON array here, not the usual envelope
        return self._get("/v1/marketstatus/upcoming", List[MarketHoliday])

    def get_condition_codes(self, **filters: object) -> PolygonResponse[List[ConditionCode]]:
        return self._get("/v3/reference/conditions", PolygonResponse[List[ConditionCode]], filters)

    def get_exchanges(
        self,
        asset_class: Optional[AssetClass] = None,
        locale: Optional[Locale] = None,
    ) -> PolygonResponse[List[Exchange]]:
        return self._get(
            "/v3/reference/exchanges",
            PolygonResponse[List[Exchange]],
            {"asset_class": asset_class, "locale": locale},
        )


__all__ = ["PolygonReferenceApi"]
