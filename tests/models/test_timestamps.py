from __future__ import annotations

from datetime import datetime

from polygon_rest.models.timestamps import MARKET_TIMEZONE, from_iso_string, from_unix_millis, from_unix_nanos


def test_millis_convert_to_eastern_time():
    # 2024-01-02 14:30:00 UTC is 09:30 EST
    converted = from_unix_millis(1704205800000)

    assert converted == datetime(2024, 1, 2, 9, 30, tzinfo=MARKET_TIMEZONE)
    assert converted.utcoffset().total_seconds() == -5 * 3600


def test_millis_respect_daylight_saving():
    # 2024-07-01 13:30:00 UTC is 09:30 EDT
    converted = from_unix_millis(1719840600000)

    assert (converted.hour, converted.minute) == (9, 30)
    assert converted.utcoffset().total_seconds() == -4 * 3600


def test_nanos_keep_microsecond_precision():
    converted = from_unix_nanos(1704205800123456789)

    assert converted.microsecond == 123456
    assert (converted.hour, converted.minute, converted.second) == (9, 30, 0)


def test_missing_epochs_return_none():
    assert from_unix_millis(None) is None
    assert from_unix_nanos(None) is None


def test_iso_strings_with_offsets_are_converted():
    assert from_iso_string("2024-07-01T13:30:00Z") == datetime(2024, 7, 1, 9, 30, tzinfo=MARKET_TIMEZONE)
    assert from_iso_string("2024-07-01T09:30:00-04:00").hour == 9


def test_unusable_iso_strings_return_none():
    assert from_iso_string(None) is None
    assert from_iso_string("") is None
    assert from_iso_string("not a date") is None
    assert from_iso_string("2024-07-01T09:30:00") is None
