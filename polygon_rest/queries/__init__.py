"""Validated request models, one per REST operation."""

from __future__ import annotations

from .base import BaseRequest, TimestampWindow
from .options import (
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
from .reference import (
    ConditionCodesRequest,
    ExchangesRequest,
    TickerDetailsRequest,
    TickersRequest,
    TickerTypesRequest,
)
from .stocks import (
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

__all__ = [
    "BaseRequest",
    "ChainSnapshotRequest",
    "ConditionCodesRequest",
    "ContractDetailsRequest",
    "ExchangesRequest",
    "GroupedDailyRequest",
    "LastQuoteRequest",
    "LastTradeRequest",
    "MarketSnapshotRequest",
    "OptionsBarsRequest",
    "OptionsDailyOpenCloseRequest",
    "OptionsLastTradeRequest",
    "OptionsQuotesRequest",
    "OptionsSnapshotRequest",
    "OptionsTradesRequest",
    "PreviousCloseRequest",
    "PreviousDayBarRequest",
    "StockBarsRequest",
    "StockDailyOpenCloseRequest",
    "StockQuotesRequest",
    "StockSnapshotRequest",
    "StockTradesRequest",
    "TickerDetailsRequest",
    "TickerTypesRequest",
    "TickersRequest",
    "TimestampWindow",
]
