from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest
import requests

from polygon_rest.config import PolygonSettings, reset_settings_cache
from polygon_rest.services.client import PolygonClient

TEST_BASE_URL = "https://api.test.polygon.io"


class FakeSession:
    """Stands in for ``requests.Session``; replays queued responses or exceptions."""

    def __init__(self) -> None:
        self.outcomes: List[Any] = []
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def queue(self, *outcomes: Any) -> "FakeSession":
        self.outcomes.extend(outcomes)
        return self

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if not self.outcomes:
            raise AssertionError(f"Unexpected request to {url}")
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True

    @property
    def last_call(self) -> Dict[str, Any]:
        return self.calls[-1]


def build_response(payload: Any = None, status: int = 200, path: str = "/", reason: str = "OK") -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response.reason = reason
    response.url = f"{TEST_BASE_URL}{path}"
    response.headers["Content-Type"] = "application/json"
    response._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    return response


@pytest.fixture(autouse=True)
def clear_settings_cache():
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture
def settings() -> PolygonSettings:
    return PolygonSettings(
        env="test",
        api_key="test-key",
        base_url=TEST_BASE_URL,
        timeout_seconds=5,
        max_retry_attempts=2,
        retry_delay_seconds=0,
        retry_jitter_seconds=0,
    )


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def client(settings, fake_session) -> PolygonClient:
    return PolygonClient(settings, session=fake_session)
