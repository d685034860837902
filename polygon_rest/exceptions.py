"""Exception hierarchy raised by the Polygon REST client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence, Tuple
from urllib.parse import urlsplit

import requests
from pydantic import ValidationError


class PolygonError(Exception):
    """Base exception for every failure raised by this package."""


class OptionsTickerFormatError(PolygonError, ValueError):
    """Raised when a string is not a valid OCC options ticker."""

    def __init__(self, ticker: Any, reason: str | None = None) -> None:
        message = (
            f"The ticker '{ticker}' is not in valid OCC format. "
            "Expected format: O:[UNDERLYING][YYMMDD][C/P][STRIKE_PRICE_PADDED] "
            "Example: O:UBER220121C00050000"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.ticker = ticker
        self.reason = reason


class IncompleteBuilderError(PolygonError):
    """Raised when an options ticker builder is finished before all fields are set."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__(
            "Options ticker builder is missing required fields: " + ", ".join(self.missing)
        )


class ValidationSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ValidationIssue:
    """A single failed rule on a request model."""

    property_name: str
    error_message: str
    attempted_value: Any = None
    severity: ValidationSeverity = ValidationSeverity.ERROR

    def __str__(self) -> str:
        return f"{self.property_name}: {self.error_message}"


class PolygonValidationError(PolygonError, ValueError):
    """Raised when a request fails validation before it is sent."""

    def __init__(self, errors: Iterable[ValidationIssue]) -> None:
        self.errors: List[ValidationIssue] = list(errors)
        super().__init__(self._build_message(self.errors))

    @staticmethod
    def _build_message(errors: Sequence[ValidationIssue]) -> str:
        if not errors:
            return "Request validation failed."
        joined = "; ".join(str(error) for error in errors)
        if len(errors) == 1:
            return f"Request validation failed: {joined}"
        return f"Request validation failed with {len(errors)} errors: {joined}"

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "PolygonValidationError":
        issues = []
        for error in exc.errors():
            location = ".".join(str(part) for part in error.get("loc", ())) or "request"
            message = str(error.get("msg", "Invalid value."))
            # pydantic prefixes messages raised from validators
            if message.startswith("Value error, "):
                message = message[len("Value error, "):]
            issues.append(ValidationIssue(location, message, error.get("input")))
        return cls(issues)


class PolygonApiError(PolygonError):
    """Raised when Polygon.io answers with a non-success HTTP status."""

    def __init__(
        self,
        status_code: int,
        request_url: str,
        reason: Optional[str] = None,
        response_content: Optional[str] = None,
        error_message: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.request_url = request_url
        self.reason = reason
        self.response_content = response_content
        self.error_message = error_message
        super().__init__(self._build_message(status_code, reason, request_url))

    @staticmethod
    def _build_message(status_code: int, reason: Optional[str], request_url: str) -> str:
        endpoint = _path_and_query(request_url) or "unknown endpoint"
        reason = reason or "Unknown error"
        if status_code == 401:
            return (
                "API authentication failed (401 Unauthorized). "
                f"Please verify your API key is valid. Endpoint: {endpoint}"
            )
        if status_code == 403:
            return (
                "API access forbidden (403 Forbidden). Your API key may not have "
                f"permission to access this data. Endpoint: {endpoint}"
            )
        if status_code == 404:
            return (
                "API resource not found (404 Not Found). The requested ticker or "
                f"endpoint may be invalid. Endpoint: {endpoint}"
            )
        if status_code == 429:
            return (
                "API rate limit exceeded (429 Too Many Requests). "
                f"Please reduce request frequency. Endpoint: {endpoint}"
            )
        if status_code >= 500:
            return f"Polygon.io API server error ({status_code} {reason}). Endpoint: {endpoint}"
        return f"Polygon.io API error ({status_code} {reason}). Endpoint: {endpoint}"

    @classmethod
    def from_http_error(cls, exc: requests.HTTPError, error_message: Optional[str] = None) -> "PolygonApiError":
        """``error_message`` is the ``message`` Polygon put in the error body, if any."""

        response = exc.response
        if response is None:
            return cls(0, "", str(exc))
        return cls(
            status_code=response.status_code,
            request_url=response.url or "",
            reason=response.reason,
            response_content=response.text,
            error_message=error_message,
        )

    @property
    def is_unauthorized(self) -> bool:
        return self.status_code == 401

    @property
    def is_forbidden(self) -> bool:
        return self.status_code == 403

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600


class PolygonHttpError(PolygonError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str, is_timeout: bool = False) -> None:
        super().__init__(message)
        self.is_timeout = is_timeout

    @classmethod
    def from_request_exception(cls, exc: requests.RequestException) -> "PolygonHttpError":
        return cls(
            "Network error occurred while communicating with Polygon.io API. "
            "Please check your internet connection and try again. "
            f"Details: {exc}"
        )

    @classmethod
    def from_timeout(cls, exc: requests.Timeout) -> "PolygonHttpError":
        return cls(
            "Request to Polygon.io API timed out. "
            "The server may be experiencing high load or your connection may be slow. "
            "Please try again later or increase the timeout configuration.",
            is_timeout=True,
        )


class PolygonResponseError(PolygonError):
    """Raised when a response body does not match the expected model."""


def _path_and_query(url: str) -> str:
    if not url:
        return ""
    parts = urlsplit(url)
    if parts.query:
        return f"{parts.path}?{parts.query}"
    return parts.path


__all__ = [
    "IncompleteBuilderError",
    "OptionsTickerFormatError",
    "PolygonApiError",
    "PolygonError",
    "PolygonHttpError",
    "PolygonResponseError",
    "PolygonValidationError",
    "ValidationIssue",
    "ValidationSeverity",
]
