from .common import (
    AssetClass,
    DataType,
    Locale,
    Market,
    PolygonErrorResponse,
    PolygonResponse,
    SipMappingType,
    SortOrder,
    Timespan,
)
from .options import (
    OptionContractDetails,
    OptionGreeks,
    OptionQuote,
    OptionSnapshot,
    OptionTrade,
    OptionTradeV3,
    OptionsContract,
)
from .reference import (
    ConditionCode,
    Exchange,
    MarketHoliday,
    MarketStatus,
    StockTicker,
    TickerType,
    TickerTypesResponse,
)
from .stocks import (
    Bar,
    DailyOpenClose,
    LastQuoteResult,
    StockQuote,
    StockSnapshot,
    StockSnapshotResponse,
    StockTrade,
    bars_to_dataframe,
)
from .tickers import OptionType, OptionsTicker, OptionsTickerBuilder
from .timestamps import MARKET_TIMEZONE

__all__ = [
    "AssetClass",
    "Bar",
    "ConditionCode",
    "DailyOpenClose",
    "DataType",
    "Exchange",
    "LastQuoteResult",
    "Locale",
    "MARKET_TIMEZONE",
    "Market",
    "MarketHoliday",
    "MarketStatus",
    "OptionContractDetails",
    "OptionGreeks",
    "OptionQuote",
    "OptionSnapshot",
    "OptionTrade",
    "OptionTradeV3",
    "OptionType",
    "OptionsContract",
    "OptionsTicker",
    "OptionsTickerBuilder",
    "PolygonErrorResponse",
    "PolygonResponse",
    "SipMappingType",
    "SortOrder",
    "StockQuote",
    "StockSnapshot",
    "StockSnapshotResponse",
    "StockTicker",
    "StockTrade",
    "TickerType",
    "TickerTypesResponse",
    "Timespan",
    "bars_to_dataframe",
]
