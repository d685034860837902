"""HTTP transport shared by the endpoint descriptions."""

from __future__ import annotations

import logging
import random
import time
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional
from urllib.parse import quote

import requests

from ..config import PolygonSettings
from ..exceptions import PolygonError, PolygonResponseError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})
MAX_RETRY_DELAY_SECONDS = 30.0


def path_segment(value: Any) -> str:
    """Quote a value for use as a URL path segment, keeping OCC colons readable."""

    if isinstance(value, Enum):
        value = value.value
    elif isinstance(value, date):
        value = value.isoformat()
    return quote(str(value), safe=":")


def render_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop unset parameters and render the rest the way Polygon expects."""

    rendered: Dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            rendered[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            rendered[key] = str(value.value)
        elif isinstance(value, date):
            rendered[key] = value.isoformat()
        elif isinstance(value, Decimal):
            rendered[key] = format(value, "f")
        else:
            rendered[key] = str(value)
    return rendered


class PolygonTransport:
    """Authenticated ``GET`` requests against the Polygon REST API.

    Timeouts, connection failures, HTTP 429 and 5xx responses are retried
    with a linear backoff. Other HTTP errors surface immediately as
    :class:`requests.HTTPError` with the response attached.
    """

    def __init__(self, settings: PolygonSettings, session: Optional[requests.Session] = None) -> None:
        self._settings = settings
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    @property
    def settings(self) -> PolygonSettings:
        return self._settings

    def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        if not self._settings.api_key:
            raise PolygonError("Polygon API key is not configured.")

        url = f"{self._settings.base_url}{path}"
        query = render_params(params)
        headers = {
            "Authorization": f"Bearer {self._settings.api_key}",
            "Accept": "application/json",
        }
        response = self._retry(lambda: self._send(url, query, headers), context=f"GET {path}")
        try:
            return response.json()
        except ValueError as exc:
            raise PolygonResponseError(f"Polygon.io returned a non-JSON body for {path}") from exc

    def _send(self, url: str, query: Dict[str, str], headers: Dict[str, str]) -> requests.Response:
        response = self._session.get(
            url,
            params=query,
            headers=headers,
            timeout=self._settings.timeout_seconds,
        )
        response.raise_for_status()
        return response

    def _retry(self, operation: Callable[[], requests.Response], context: str) -> requests.Response:
        attempts = self._settings.max_retry_attempts
        for attempt in range(attempts):
            try:
                return operation()
            except requests.HTTPError as exc:
                status = exc.response.status_code if exc.response is not None else None
                if status not in RETRYABLE_STATUS_CODES or attempt == attempts - 1:
                    raise
                logger.warning(
                    "Polygon returned %s for %s (attempt %d/%d), retrying", status, context, attempt + 1, attempts
                )
            except (requests.Timeout, requests.ConnectionError) as exc:
                if attempt == attempts - 1:
                    raise
                logger.warning(
                    "%s while trying %s (attempt %d/%d), retrying",
                    type(exc).__name__,
                    context,
                    attempt + 1,
                    attempts,
                )
            self._apply_backoff(attempt)
        raise PolygonError(f"Failed to {context}: no attempts were made")  # pragma: no cover

    def _apply_backoff(self, attempt: int) -> None:
        delay = min(MAX_RETRY_DELAY_SECONDS, self._settings.retry_delay_seconds * (1 + attempt))
        delay += random.uniform(0, self._settings.retry_jitter_seconds)
        time.sleep(delay)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "PolygonTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["PolygonTransport", "RETRYABLE_STATUS_CODES", "path_segment", "render_params"]
