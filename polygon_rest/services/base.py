"""Validation and error translation shared by the service classes."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Type, TypeVar, Union

import requests
from pydantic import ValidationError

from ..exceptions import PolygonApiError, PolygonHttpError, PolygonResponseError, PolygonValidationError
from ..models.common import PolygonErrorResponse
from ..queries.base import BaseRequest

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseRequest)
T = TypeVar("T")

RequestInput = Union[BaseRequest, Mapping[str, Any], None]

_IDENTITY_FIELDS = ("options_ticker", "ticker", "underlying_asset", "date")


def _error_body_message(exc: requests.HTTPError) -> Optional[str]:
    if exc.response is None:
        return None
    try:
        body = PolygonErrorResponse.model_validate(exc.response.json())
    except (ValueError, ValidationError):
        return None
    return body.message or body.error or None


def _identify(request: Any) -> str:
    if request is None:
        return "-"
    for name in _IDENTITY_FIELDS:
        if isinstance(request, Mapping):
            value = request.get(name)
        else:
            value = getattr(request, name, None)
        if value:
            return f"{name}={value}"
    return "-"


class BaseService:
    """Validates requests, calls the endpoint description and maps failures.

    Every public service method accepts either a request model, a mapping of
    its fields, or plain keyword arguments (which override the first two).
    """

    def __init__(self, api: Any) -> None:
        self._api = api

    def _validate(self, operation: str, request_cls: Type[R], request: RequestInput, overrides: Mapping[str, Any]) -> R:
        if isinstance(request, BaseRequest):
            data = request.model_dump()
        else:
            data = dict(request or {})
        data.update(overrides)
        try:
            return request_cls.model_validate(data)
        except ValidationError as exc:
            error = PolygonValidationError.from_pydantic(exc)
            logger.warning("Invalid %s request (%s): %s", operation, _identify(data), error)
            raise error from exc

    def _call(self, operation: str, identifier: str, func: Callable[[], T]) -> T:
        try:
            return func()
        except requests.HTTPError as exc:
            error = PolygonApiError.from_http_error(exc, _error_body_message(exc))
            if error.error_message:
                logger.error("%s failed for %s: %s (%s)", operation, identifier, error, error.error_message)
            else:
                logger.error("%s failed for %s: %s", operation, identifier, error)
            raise error from exc
        except requests.Timeout as exc:
            error = PolygonHttpError.from_timeout(exc)
            logger.error("%s timed out for %s", operation, identifier)
            raise error from exc
        except requests.RequestException as exc:
            error = PolygonHttpError.from_request_exception(exc)
            logger.error("%s failed for %s: %s", operation, identifier, exc)
            raise error from exc
        except PolygonResponseError as exc:
            logger.error("%s returned an unreadable payload for %s: %s", operation, identifier, exc)
            raise

    def _execute(
        self,
        operation: str,
        request_cls: Type[R],
        request: RequestInput,
        overrides: Mapping[str, Any],
        call: Callable[[R], T],
    ) -> T:
        validated = self._validate(operation, request_cls, request, overrides)
        identifier = _identify(validated)
        logger.debug("%s (%s)", operation, identifier)
        return self._call(operation, identifier, lambda: call(validated))


__all__ = ["BaseService", "RequestInput"]
