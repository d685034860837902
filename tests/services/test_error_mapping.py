from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
import requests

from polygon_rest.exceptions import (
    PolygonApiError,
    PolygonHttpError,
    PolygonResponseError,
    PolygonValidationError,
)
from polygon_rest.services.client import PolygonClient


@pytest.fixture(autouse=True)
def no_sleep():
    with patch("polygon_rest.api.transport.time.sleep"):
        yield


@pytest.mark.parametrize(
    "status, flag, fragment",
    [
        (401, "is_unauthorized", "401 Unauthorized"),
        (403, "is_forbidden", "403 Forbidden"),
        (404, "is_not_found", "404 Not Found"),
        (429, "is_rate_limited", "429 Too Many Requests"),
        (503, "is_server_error", "server error (503"),
    ],
)
def test_http_status_becomes_api_error(client, fake_session, make_response, status, flag, fragment):
    failure = make_response({"status": "ERROR"}, status=status, path="/v2/last/trade/AAPL?x=1", reason="Failure")
    fake_session.queue(*[failure] * client.settings.max_retry_attempts)

    with pytest.raises(PolygonApiError) as excinfo:
        client.stocks.get_last_trade(ticker="AAPL")

    error = excinfo.value
    assert error.status_code == status
    assert getattr(error, flag)
    assert fragment in str(error)
    assert "/v2/last/trade/AAPL?x=1" in str(error)
    assert error.response_content == '{"status": "ERROR"}'
    assert isinstance(error.__cause__, requests.HTTPError)


def test_other_client_errors_use_generic_message(client, fake_session, make_response):
    fake_session.queue(make_response({}, status=400, path="/v3/reference/tickers", reason="Bad Request"))

    with pytest.raises(PolygonApiError) as excinfo:
        client.reference.get_tickers()

    assert str(excinfo.value) == "Polygon.io API error (400 Bad Request). Endpoint: /v3/reference/tickers"
    assert not excinfo.value.is_server_error


def test_api_error_carries_polygon_message(client, fake_session, make_response, caplog):
    body = {"status": "ERROR", "request_id": "r1", "message": "Your plan doesn't include this data timeframe."}
    fake_session.queue(make_response(body, status=403, path="/v2/aggs/ticker/AAPL/prev", reason="Forbidden"))

    with caplog.at_level(logging.ERROR, logger="polygon_rest.services.base"):
        with pytest.raises(PolygonApiError) as excinfo:
            client.stocks.get_previous_close(ticker="AAPL")

    assert excinfo.value.error_message == "Your plan doesn't include this data timeframe."
    assert str(excinfo.value).startswith("API access forbidden (403 Forbidden).")
    assert any("data timeframe" in record.getMessage() for record in caplog.records)


def test_api_error_without_json_body_has_no_message(client, fake_session):
    response = requests.Response()
    response.status_code = 404
    response.reason = "Not Found"
    response.url = "https://api.test.polygon.io/v2/last/nbbo/AAPL"
    response._content = b"<html>not found</html>"
    fake_session.queue(response)

    with pytest.raises(PolygonApiError) as excinfo:
        client.stocks.get_last_quote(ticker="AAPL")

    assert excinfo.value.error_message is None
    assert excinfo.value.is_not_found


def test_timeout_becomes_http_error(client, fake_session, caplog):
    fake_session.queue(*[requests.Timeout("slow")] * client.settings.max_retry_attempts)

    with caplog.at_level(logging.ERROR, logger="polygon_rest.services.base"):
        with pytest.raises(PolygonHttpError) as excinfo:
            client.options.get_last_trade(options_ticker="O:SPY251219C00650000")

    assert excinfo.value.is_timeout
    assert "timed out" in str(excinfo.value)
    assert any("O:SPY251219C00650000" in record.getMessage() for record in caplog.records)


def test_connection_failure_becomes_http_error(client, fake_session):
    fake_session.queue(*[requests.ConnectionError("refused")] * client.settings.max_retry_attempts)

    with pytest.raises(PolygonHttpError) as excinfo:
        client.reference.get_market_status()

    assert not excinfo.value.is_timeout
    assert "refused" in str(excinfo.value)


def test_bad_payload_is_not_reported_as_validation_error(client, fake_session, make_response):
    fake_session.queue(make_response({"status": "OK", "results": [{"id": "x"}]}))

    with pytest.raises(PolygonResponseError) as excinfo:
        client.reference.get_condition_codes()

    assert not isinstance(excinfo.value, PolygonValidationError)


def test_missing_api_key_is_reported_before_sending(fake_session):
    client = PolygonClient.from_api_key("", session=fake_session)

    with pytest.raises(Exception, match="API key is not configured"):
        client.stocks.get_last_quote(ticker="AAPL")
    assert fake_session.calls == []
