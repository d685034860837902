"""Reference data service."""

from __future__ import annotations

from typing import Any, List

from ..api.reference import PolygonReferenceApi
from ..models.common import PolygonResponse
from ..models.reference import (
    ConditionCode,
    Exchange,
    MarketHoliday,
    MarketStatus,
    StockTicker,
    TickerTypesResponse,
)
from ..queries.reference import (
    ConditionCodesRequest,
    ExchangesRequest,
    TickerDetailsRequest,
    TickersRequest,
    TickerTypesRequest,
)
from .base import BaseService, RequestInput


class ReferenceDataService(BaseService):
    _api: PolygonReferenceApi

    def get_tickers(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[StockTicker]]:
        return self._execute(
            "get_tickers", TickersRequest, request, kwargs, lambda r: self._api.get_tickers(**r.query_params())
        )

    def get_ticker_details(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[StockTicker]:
        return self._execute(
            "get_ticker_details",
            TickerDetailsRequest,
            request,
            kwargs,
            lambda r: self._api.get_ticker_details(r.ticker, r.date),
        )

    def get_ticker_types(self, request: RequestInput = None, **kwargs: Any) -> TickerTypesResponse:
        return self._execute(
            "get_ticker_types",
            TickerTypesRequest,
            request,
            kwargs,
            lambda r: self._api.get_ticker_types(r.asset_class, r.locale),
        )

    def get_market_status(self) -> MarketStatus:
        return self._call("get_market_status", "-", self._api.get_market_status)

    def get_market_holidays(self) -> List[MarketHoliday]:
        return self._call("get_market_holidays", "-", self._api.get_market_holidays)

    def get_condition_codes(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[ConditionCode]]:
        return self._execute(
            "get_condition_codes",
            ConditionCodesRequest,
            request,
            kwargs,
            lambda r: self._api.get_condition_codes(**r.query_params()),
        )

    def get_exchanges(self, request: RequestInput = None, **kwargs: Any) -> PolygonResponse[List[Exchange]]:
        return self._execute(
            "get_exchanges",
            ExchangesRequest,
            request,
            kwargs,
            lambda r: self._api.get_exchanges(r.asset_class, r.locale),
        )


__all__ = ["ReferenceDataService"]
