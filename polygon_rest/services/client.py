"""Entry point that wires settings, transport and services together."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from ..api.options import PolygonOptionsApi
from ..api.reference import PolygonReferenceApi
from ..api.stocks import PolygonStocksApi
from ..api.transport import PolygonTransport
from ..config import PolygonSettings, get_settings
from .options import OptionsService
from .reference import ReferenceDataService
from .stocks import StocksService

logger = logging.getLogger(__name__)


class PolygonClient:
    """Polygon.io REST client exposing ``stocks``, ``options`` and ``reference``.

    Build one from the layered configuration with :meth:`from_settings` or
    directly from a key with :meth:`from_api_key`. The client owns its HTTP
    session unless one is passed in, and closes it on :meth:`close` or when
    used as a context manager.
    """

    def __init__(self, settings: PolygonSettings, session: Optional[requests.Session] = None) -> None:
        self._transport = PolygonTransport(settings, session=session)
        self.stocks = StocksService(PolygonStocksApi(self._transport))
        self.options = OptionsService(PolygonOptionsApi(self._transport))
        self.reference = ReferenceDataService(PolygonReferenceApi(self._transport))
        if not settings.has_api_key:
            logger.warning("Polygon client created for env '%s' without an API key", settings.env)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[PolygonSettings] = None,
        env: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> "PolygonClient":
        return cls(settings or get_settings(env), session=session)

    @classmethod
    def from_api_key(
        cls,
        api_key: str,
        session: Optional[requests.Session] = None,
        **overrides: Any,
    ) -> "PolygonClient":
        """Client using built-in defaults plus ``api_key``; no YAML files are read."""

        settings = PolygonSettings(api_key=api_key, **overrides)
        return cls(settings, session=session)

    @property
    def settings(self) -> PolygonSettings:
        return self._transport.settings

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "PolygonClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["PolygonClient"]
