from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from polygon_rest.exceptions import IncompleteBuilderError, OptionsTickerFormatError
from polygon_rest.models.tickers import OptionsTicker, OptionsTickerBuilder, OptionType


def test_parse_reads_fields_from_canonical_ticker():
    ticker = OptionsTicker.parse("O:SPY251219C00650000")

    assert ticker.underlying == "SPY"
    assert ticker.expiration == date(2025, 12, 19)
    assert ticker.option_type is OptionType.CALL
    assert ticker.strike == Decimal("650")


def test_create_renders_canonical_string():
    assert OptionsTicker.create("TSLA", date(2026, 3, 20), OptionType.CALL, 700) == "O:TSLA260320C00700000"


@pytest.mark.parametrize(
    "raw",
    [
        "O:SPY251219C00650000",
        "O:F250117P00012500",
        "O:UBER220121C00050000",
        "O:BRKB250620C00450500",
        "O:GOOGL240315P00142000",
        "O:SPXW1251219C05000000",
    ],
)
def test_serialize_parse_round_trip(raw):
    assert OptionsTicker.parse(raw).serialize() == raw


def test_parse_serialize_round_trip_preserves_value():
    original = OptionsTicker("aapl", date(2025, 1, 17), OptionType.PUT, Decimal("187.5"))

    assert OptionsTicker.parse(original.serialize()) == original


@pytest.mark.parametrize("underlying", ["A", "QQ", "SPY", "AAPL", "GOOGL", "SPXW1"])
def test_suffix_fields_independent_of_underlying_length(underlying):
    ticker = OptionsTicker.parse(f"O:{underlying}240621P00012500")

    assert ticker.underlying == underlying
    assert ticker.expiration == date(2024, 6, 21)
    assert ticker.option_type is OptionType.PUT
    assert ticker.strike == Decimal("12.5")


@pytest.mark.parametrize(
    "raw, reason",
    [
        ("GARBAGE", "prefix"),
        ("O:SPY251219X00650000", "type"),
        ("O:251219C00650000", "short"),
        ("O:SPY25121AC00650000", "expiration"),
        ("O:SPY251219C0065000A", "strike"),
        ("O:SPY251332C00650000", "calendar"),
        ("O:spy251219C00650000", "underlying"),
    ],
)
def test_parse_rejects_malformed_tickers(raw, reason):
    with pytest.raises(OptionsTickerFormatError) as excinfo:
        OptionsTicker.parse(raw)

    assert excinfo.value.ticker == raw
    assert reason in excinfo.value.reason
    assert "O:UBER220121C00050000" in str(excinfo.value)


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        OptionsTicker.parse("GARBAGE")


def test_try_parse_returns_none_instead_of_raising():
    assert OptionsTicker.try_parse("GARBAGE") is None
    assert OptionsTicker.try_parse(None) is None
    assert OptionsTicker.try_parse("O:SPY251219P00650000").option_type is OptionType.PUT


def test_contract_symbol_drops_prefix():
    ticker = OptionsTicker.parse("O:SPY251219C00650000")

    assert ticker.contract_symbol == "SPY251219C00650000"
    assert str(ticker) == "O:SPY251219C00650000"


def test_constructor_normalizes_inputs():
    ticker = OptionsTicker(" msft ", datetime(2025, 6, 20, 16, 0), "put", 14.1)

    assert ticker.underlying == "MSFT"
    assert ticker.expiration == date(2025, 6, 20)
    assert ticker.option_type is OptionType.PUT
    assert ticker.strike == Decimal("14.1")
    assert ticker.serialize() == "O:MSFT250620P00014100"


def test_strike_rounds_to_three_decimals():
    ticker = OptionsTicker("SPY", date(2025, 12, 19), OptionType.CALL, Decimal("100.0005"))

    assert ticker.serialize().endswith("00100001")
    assert ticker.strike == Decimal("100.001")


@pytest.mark.parametrize("strike", [-1, Decimal("100000"), "abc", True])
def test_constructor_rejects_bad_strikes(strike):
    with pytest.raises(ValueError):
        OptionsTicker("SPY", date(2025, 12, 19), OptionType.CALL, strike)


@pytest.mark.parametrize("underlying", ["", "   ", "TOOLONGX", "1SPY", "SP-Y"])
def test_constructor_rejects_bad_underlying(underlying):
    with pytest.raises(ValueError):
        OptionsTicker(underlying, date(2025, 12, 19), OptionType.CALL, 100)


def test_option_type_codes():
    assert OptionType.CALL.code == "C"
    assert OptionType.from_code("P") is OptionType.PUT
    with pytest.raises(ValueError):
        OptionType.from_code("X")


def test_builder_produces_canonical_string():
    built = (
        OptionsTickerBuilder()
        .with_underlying("SPY")
        .with_expiration(2025, 12, 19)
        .as_call()
        .with_strike(650)
        .build()
    )

    assert built == "O:SPY251219C00650000"


def test_builder_accepts_date_and_explicit_type():
    ticker = (
        OptionsTickerBuilder()
        .with_underlying("qqq")
        .with_expiration(date(2024, 3, 15))
        .with_type(OptionType.PUT)
        .with_strike("425.5")
        .build_ticker()
    )

    assert ticker == OptionsTicker("QQQ", date(2024, 3, 15), OptionType.PUT, Decimal("425.5"))


def test_builder_reports_every_missing_field():
    with pytest.raises(IncompleteBuilderError) as excinfo:
        OptionsTickerBuilder().with_underlying("SPY").build_ticker()

    assert excinfo.value.missing == ("expiration", "option_type", "strike")
    assert "expiration" in str(excinfo.value)


def test_builder_reset_clears_fields():
    builder = OptionsTickerBuilder().with_underlying("SPY").as_put().with_strike(1)
    builder.reset()

    with pytest.raises(IncompleteBuilderError) as excinfo:
        builder.build()

    assert excinfo.value.missing == ("underlying", "expiration", "option_type", "strike")


def test_builder_rejects_invalid_setters():
    builder = OptionsTickerBuilder()

    with pytest.raises(ValueError):
        builder.with_underlying("  ")
    with pytest.raises(ValueError):
        builder.with_strike(-5)
    with pytest.raises(TypeError):
        builder.with_expiration(2025)
    with pytest.raises(TypeError):
        builder.with_expiration(date(2025, 1, 1), 2, 3)


@pytest.mark.parametrize("strike", ["NaN", "Infinity", Decimal("-Infinity")])
def test_builder_rejects_non_finite_strike(strike):
    with pytest.raises(ValueError, match="finite"):
        OptionsTickerBuilder().with_strike(strike)
