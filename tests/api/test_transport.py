from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest.mock import patch

import pytest
import requests

from polygon_rest.api.transport import PolygonTransport, path_segment, render_params
from polygon_rest.exceptions import PolygonError, PolygonResponseError
from polygon_rest.models.common import SortOrder


def test_render_params_drops_none_and_formats_values():
    rendered = render_params(
        {
            "adjusted": True,
            "include_otc": False,
            "sort": SortOrder.DESC,
            "date": date(2024, 1, 2),
            "strike_price": Decimal("650.0"),
            "limit": 10,
            "cursor": None,
        }
    )

    assert rendered == {
        "adjusted": "true",
        "include_otc": "false",
        "sort": "desc",
        "date": "2024-01-02",
        "strike_price": "650.0",
        "limit": "10",
    }


def test_path_segment_keeps_occ_colon():
    assert path_segment("O:SPY251219C00650000") == "O:SPY251219C00650000"
    assert path_segment("BRK/A") == "BRK%2FA"
    assert path_segment(date(2024, 1, 2)) == "2024-01-02"


def test_get_sends_bearer_token_and_timeout(settings, fake_session, make_response):
    fake_session.queue(make_response({"status": "OK"}))
    transport = PolygonTransport(settings, session=fake_session)

    payload = transport.get("/v1/marketstatus/now", {"limit": 5, "cursor": None})

    assert payload == {"status": "OK"}
    call = fake_session.last_call
    assert call["url"] == "https://api.test.polygon.io/v1/marketstatus/now"
    assert call["params"] == {"limit": "5"}
    assert call["headers"]["Authorization"] == "Bearer test-key"
    assert call["timeout"] == settings.timeout_seconds


def test_get_without_api_key_fails_fast(settings, fake_session):
    transport = PolygonTransport(settings.model_copy(update={"api_key": ""}), session=fake_session)

    with pytest.raises(PolygonError, match="API key is not configured"):
        transport.get("/v1/marketstatus/now")
    assert fake_session.calls == []


def test_retries_rate_limit_then_succeeds(settings, fake_session, make_response):
    fake_session.queue(make_response({}, status=429, reason="Too Many Requests"), make_response({"ok": 1}))
    transport = PolygonTransport(settings, session=fake_session)

    with patch("polygon_rest.api.transport.random.uniform", return_value=0), patch(
        "polygon_rest.api.transport.time.sleep"
    ) as sleep_mock:
        payload = transport.get("/v2/last/trade/AAPL")

    assert payload == {"ok": 1}
    assert len(fake_session.calls) == 2
    sleep_mock.assert_called_once()


def test_retries_timeouts_until_attempts_exhausted(settings, fake_session):
    fake_session.queue(requests.Timeout("slow"), requests.Timeout("still slow"))
    transport = PolygonTransport(settings, session=fake_session)

    with patch("polygon_rest.api.transport.time.sleep") as sleep_mock:
        with pytest.raises(requests.Timeout):
            transport.get("/v2/last/trade/AAPL")

    assert len(fake_session.calls) == settings.max_retry_attempts
    assert sleep_mock.call_count == settings.max_retry_attempts - 1


def test_client_errors_are_not_retried(settings, fake_session, make_response):
    fake_session.queue(make_response({"status": "NOT_FOUND"}, status=404, reason="Not Found"))
    transport = PolygonTransport(settings, session=fake_session)

    with patch("polygon_rest.api.transport.time.sleep") as sleep_mock:
        with pytest.raises(requests.HTTPError) as excinfo:
            transport.get("/v3/reference/tickers/NOPE")

    assert excinfo.value.response.status_code == 404
    assert len(fake_session.calls) == 1
    sleep_mock.assert_not_called()


def test_backoff_grows_linearly_and_is_capped(settings):
    transport = PolygonTransport(
        settings.model_copy(update={"retry_delay_seconds": 12.0, "retry_jitter_seconds": 0.5}),
        session=None,
    )

    with patch("polygon_rest.api.transport.random.uniform", return_value=0.25) as uniform_mock, patch(
        "polygon_rest.api.transport.time.sleep"
    ) as sleep_mock:
        transport._apply_backoff(0)
        transport._apply_backoff(1)
        transport._apply_backoff(5)

    assert [call.args[0] for call in sleep_mock.call_args_list] == [12.25, 24.25, 30.25]
    uniform_mock.assert_called_with(0, 0.5)
    transport.close()


def test_non_json_body_raises_response_error(settings, fake_session):
    response = requests.Response()
    response.status_code = 200
    response._content = b"<html>oops</html>"
    fake_session.queue(response)
    transport = PolygonTransport(settings, session=fake_session)

    with pytest.raises(PolygonResponseError):
        transport.get("/v1/marketstatus/now")


def test_close_only_closes_owned_sessions(settings, fake_session):
    PolygonTransport(settings, session=fake_session).close()
    assert not fake_session.closed

    with patch("polygon_rest.api.transport.requests.Session") as session_cls:
        with PolygonTransport(settings):
            pass
    session_cls.return_value.close.assert_called_once()
