from __future__ import annotations

import logging
from datetime import date

import pytest

from polygon_rest.exceptions import PolygonValidationError, ValidationSeverity
from polygon_rest.models.tickers import OptionsTicker, OptionType
from polygon_rest.queries import StockBarsRequest


def _messages(excinfo) -> list:
    return [issue.error_message for issue in excinfo.value.errors]


@pytest.mark.parametrize(
    "ticker, message",
    [("", "Ticker must not be empty."), ("ABCDEFGHIJK", "Ticker must not exceed 10 characters.")],
)
def test_stock_ticker_rules(client, fake_session, ticker, message):
    with pytest.raises(PolygonValidationError) as excinfo:
        client.stocks.get_last_trade(ticker=ticker)

    assert _messages(excinfo) == [message]
    assert excinfo.value.errors[0].property_name == "ticker"
    assert excinfo.value.errors[0].attempted_value == ticker
    assert excinfo.value.errors[0].severity is ValidationSeverity.ERROR
    assert str(excinfo.value) == f"Request validation failed: ticker: {message}"
    assert fake_session.calls == []


def test_bars_collects_every_failure(client, fake_session):
    with pytest.raises(PolygonValidationError) as excinfo:
        client.stocks.get_bars(
            ticker="AAPL", multiplier=0, timespan="day", from_date="01/02/2024", to_date="2024-1-3", limit=50001
        )

    assert sorted(_messages(excinfo)) == [
        "From date must be in YYYY-MM-DD format.",
        "Limit must be between 1 and 50000.",
        "Multiplier must be greater than 0.",
        "To date must be in YYYY-MM-DD format.",
    ]
    assert str(excinfo.value).startswith("Request validation failed with 4 errors: ")
    assert fake_session.calls == []


def test_validation_failure_is_logged_as_warning(client, caplog):
    with caplog.at_level(logging.WARNING, logger="polygon_rest.services.base"):
        with pytest.raises(PolygonValidationError):
            client.stocks.get_snapshot(ticker="")

    assert any(record.levelno == logging.WARNING for record in caplog.records)


def test_dates_accept_date_objects(client, fake_session, make_response):
    fake_session.queue(make_response({"status": "OK", "results": []}))

    client.stocks.get_bars(
        ticker="AAPL", multiplier=1, timespan="day", from_date=date(2024, 1, 2), to_date=date(2024, 1, 31)
    )

    assert fake_session.last_call["url"].endswith("/range/1/day/2024-01-02/2024-01-31")


def test_request_model_and_overrides_are_merged(client, fake_session, make_response):
    fake_session.queue(make_response({"status": "OK", "results": []}))
    request = StockBarsRequest(ticker="AAPL", multiplier=1, timespan="day", from_date="2024-01-02", to_date="2024-01-03")

    client.stocks.get_bars(request, ticker="MSFT", limit=10)

    assert "/v2/aggs/ticker/MSFT/" in fake_session.last_call["url"]
    assert fake_session.last_call["params"] == {"limit": "10"}


def test_request_mapping_accepts_aliases(client, fake_session, make_response):
    fake_session.queue(make_response({"status": "OK", "results": []}))

    client.stocks.get_bars({"ticker": "AAPL", "multiplier": 1, "timespan": "hour", "from": "2024-01-02", "to": "2024-01-03"})

    assert fake_session.last_call["url"].endswith("/range/1/hour/2024-01-02/2024-01-03")


def test_unknown_fields_are_rejected(client):
    with pytest.raises(PolygonValidationError):
        client.stocks.get_last_quote(ticker="AAPL", tickr="typo")


def test_options_ticker_must_be_occ(client, fake_session):
    with pytest.raises(PolygonValidationError) as excinfo:
        client.options.get_last_trade(options_ticker="SPY251219C00650000")

    assert _messages(excinfo) == ["Options ticker must be in valid OCC format (e.g., 'O:SPY251219C00650000')."]

    with pytest.raises(PolygonValidationError) as excinfo:
        client.options.get_last_trade(options_ticker="")

    assert _messages(excinfo) == ["Options ticker must not be empty."]
    assert fake_session.calls == []


def test_options_ticker_instance_is_rendered(client, fake_session, make_response):
    fake_session.queue(make_response({"status": "OK"}))
    ticker = OptionsTicker("SPY", date(2025, 12, 19), OptionType.CALL, 650)

    client.options.get_contract_details(options_ticker=ticker, as_of=date(2025, 1, 2))

    assert fake_session.last_call["url"].endswith("/v3/reference/options/contracts/O:SPY251219C00650000")
    assert fake_session.last_call["params"] == {"as_of": "2025-01-02"}


def test_snapshot_contract_rules(client):
    with pytest.raises(PolygonValidationError) as excinfo:
        client.options.get_snapshot(underlying_asset="", option_contract="SPY2512")

    assert sorted(_messages(excinfo)) == [
        "Option contract must be at least 15 characters (OCC format without 'O:' prefix).",
        "Underlying asset ticker must not be empty.",
    ]


def test_chain_snapshot_rules(client):
    with pytest.raises(PolygonValidationError) as excinfo:
        client.options.get_chain_snapshot(
            underlying_asset="SPY",
            strike_price=0,
            contract_type="straddle",
            expiration_date_gte="2025/01/01",
            order="up",
            limit=0,
        )

    assert sorted(_messages(excinfo)) == [
        "Contract type must be 'call' or 'put'.",
        "Expiration date (gte) must be in YYYY-MM-DD format.",
        "Limit must be greater than 0.",
        "Order must be 'asc' or 'desc'.",
        "Strike price must be greater than 0.",
    ]


@pytest.mark.parametrize("strike", ["NaN", "Infinity"])
def test_chain_snapshot_rejects_non_finite_strike(client, fake_session, strike):
    with pytest.raises(PolygonValidationError) as excinfo:
        client.options.get_chain_snapshot(underlying_asset="SPY", strike_price=strike)

    assert _messages(excinfo) == ["Strike price must be a finite number."]
    assert fake_session.calls == []


def test_chain_snapshot_renders_filters(client, fake_session, make_response):
    fake_session.queue(make_response({"status": "OK", "results": []}))

    client.options.get_chain_snapshot(
        underlying_asset="SPY",
        strike_price=650,
        contract_type=OptionType.PUT,
        expiration_date_lte=date(2025, 12, 31),
        order="asc",
    )

    assert fake_session.last_call["params"] == {
        "strike_price": "650",
        "contract_type": "put",
        "expiration_date.lte": "2025-12-31",
        "order": "asc",
    }


def test_reference_limits(client):
    with pytest.raises(PolygonValidationError) as excinfo:
        client.reference.get_tickers(limit=1001, date="yesterday")

    assert sorted(_messages(excinfo)) == ["Date must be in YYYY-MM-DD format.", "Limit must be between 1 and 1000."]

    with pytest.raises(PolygonValidationError) as excinfo:
        client.reference.get_condition_codes(limit=0)

    assert _messages(excinfo) == ["Limit must be between 1 and 1000."]


def test_trade_timestamp_filters(client, fake_session, make_response):
    fake_session.queue(make_response({"status": "OK", "results": []}))

    client.stocks.get_trades(ticker="AAPL", timestamp_gte=date(2024, 1, 2), timestamp_lt=1704240000000000000, limit=5)

    assert fake_session.last_call["params"] == {
        "timestamp.gte": "2024-01-02",
        "timestamp.lt": "1704240000000000000",
        "limit": "5",
    }
