"""Common plumbing for the endpoint descriptions."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..exceptions import PolygonResponseError
from .transport import PolygonTransport

M = TypeVar("M")


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


class PolygonApi:
    """One group of Polygon REST routes bound to a transport."""

    def __init__(self, transport: PolygonTransport) -> None:
        self._transport = transport

    def _get(self, path: str, model: Type[M], params: Optional[Mapping[str, Any]] = None) -> M:
        payload = self._transport.get(path, params)
        try:
            return _adapter(model).validate_python(payload)
        except ValidationError as exc:
            raise PolygonResponseError(
                f"Unexpected response payload from {path}: {exc.error_count()} validation error(s)"
            ) from exc


__all__ = ["PolygonApi"]
