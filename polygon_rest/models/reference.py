"""Reference data models: tickers, exchanges, conditions and market status."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import PolygonModel
from .timestamps import from_iso_string


class StockTicker(PolygonModel):
    symbol: Optional[str] = Field(default=None, alias="ticker")
    name: Optional[str] = None
    market: Optional[str] = None
    locale: Optional[str] = None
    primary_exchange: Optional[str] = None
    type: Optional[str] = None
    active: Optional[bool] = None
    currency_name: Optional[str] = None
    cik: Optional[str] = None
    composite_figi: Optional[str] = None
    share_class_figi: Optional[str] = None
    last_updated_utc: Optional[str] = None
    delisted_utc: Optional[str] = None

    @property
    def market_last_updated(self) -> Optional[datetime]:
        return from_iso_string(self.last_updated_utc)


class TickerType(PolygonModel):
    code: str = ""
    description: str = ""
    asset_class: str = ""
    locale: str = ""


class TickerTypesResponse(PolygonModel):
    results: List[TickerType] = Field(default_factory=list)
    count: int = 0
    status: str = ""
    request_id: str = ""


class CurrencyMarketsStatus(PolygonModel):
    forex: Optional[str] = Field(default=None, alias="fx")
    crypto: Optional[str] = None


class ExchangesStatus(PolygonModel):
    nyse: Optional[str] = None
    nasdaq: Optional[str] = None
    otc: Optional[str] = None


class IndicesGroupsStatus(PolygonModel):
    s_and_p: Optional[str] = None
    societe_generale: Optional[str] = None
    msci: Optional[str] = None
    ftse_russell: Optional[str] = None
    mstar: Optional[str] = None
    ice: Optional[str] = None
    dow_jones: Optional[str] = None


class MarketStatus(PolygonModel):
    """Current trading status of the exchanges and overall market."""

    after_hours: bool = Field(default=False, alias="afterHours")
    currencies: Optional[CurrencyMarketsStatus] = None
    early_hours: bool = Field(default=False, alias="earlyHours")
    exchanges: Optional[ExchangesStatus] = None
    indices_groups: Optional[IndicesGroupsStatus] = Field(default=None, alias="indicesGroups")
    market: Optional[str] = None
    server_time: Optional[str] = Field(default=None, alias="serverTime")

    @property
    def market_server_time(self) -> Optional[datetime]:
        return from_iso_string(self.server_time)

    @property
    def is_open(self) -> bool:
        return self.market == "open"


class MarketHoliday(PolygonModel):
    """An upcoming market holiday or early close."""

    date: Optional[str] = None
    exchange: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    open: Optional[str] = None
    close: Optional[str] = None

    @property
    def open_time(self) -> Optional[datetime]:
        return from_iso_string(self.open)

    @property
    def close_time(self) -> Optional[datetime]:
        return from_iso_string(self.close)


class Exchange(PolygonModel):
    id: int
    type: str = ""
    asset_class: str = ""
    locale: str = ""
    name: str = ""
    acronym: Optional[str] = None
    mic: Optional[str] = None
    operating_mic: str = ""
    participant_id: Optional[str] = None
    url: Optional[str] = None


class SipMapping(PolygonModel):
    cta: Optional[str] = Field(default=None, alias="CTA")
    utp: Optional[str] = Field(default=None, alias="UTP")
    finra_tdds: Optional[str] = Field(default=None, alias="FINRA_TDDS")


class UpdateRule(PolygonModel):
    updates_high_low: bool = False
    updates_open_close: bool = False
    updates_volume: bool = False


class UpdateRules(PolygonModel):
    consolidated: UpdateRule = Field(default_factory=UpdateRule)
    market_center: UpdateRule = Field(default_factory=UpdateRule)


class ConditionCode(PolygonModel):
    id: int
    type: str = ""
    name: str = ""
    asset_class: str = ""
    sip_mapping: SipMapping = Field(default_factory=SipMapping)
    update_rules: UpdateRules = Field(default_factory=UpdateRules)
    data_types: List[str] = Field(default_factory=list)
    legacy: Optional[bool] = None


__all__ = [
    "ConditionCode",
    "CurrencyMarketsStatus",
    "Exchange",
    "ExchangesStatus",
    "IndicesGroupsStatus",
    "MarketHoliday",
    "MarketStatus",
    "SipMapping",
    "StockTicker",
    "TickerType",
    "TickerTypesResponse",
    "UpdateRule",
    "UpdateRules",
]
