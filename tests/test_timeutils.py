import time
from datetime import datetime, timedelta, timezone

import pytest

from trackomatic.timeutils import format_time, parse_utc_timestamp, to_utc_timestamp

UTC = timezone.utc


@pytest.fixture
def zurich_tz(monkeypatch):
    monkeypatch.setenv("TZ", "CET-1CEST,M3.5.0,M10.5.0/3")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_to_utc_timestamp_pins_format():
    moment = datetime(2025, 6, 14, 21, 17, 0, 440403, tzinfo=UTC)
    assert to_utc_timestamp(moment) == "2025-06-14T21:17:00.440403Z"


def test_to_utc_timestamp_pads_microseconds():
    moment = datetime(2025, 6, 14, 21, 16, 44, tzinfo=UTC)
    assert to_utc_timestamp(moment).endswith("44.000000Z")


def test_to_utc_timestamp_converts_other_zones():
    aware = datetime(2025, 6, 14, 21, 17, 0, 440403, tzinfo=UTC)
    shifted = aware.astimezone(timezone(timedelta(hours=5)))
    assert to_utc_timestamp(shifted) == to_utc_timestamp(aware)


def test_naive_datetime_is_taken_as_utc():
    naive = datetime(2025, 6, 14, 21, 17, 0, 440403)
    aware = naive.replace(tzinfo=UTC)
    assert to_utc_timestamp(naive) == to_utc_timestamp(aware)


def test_parse_with_microseconds():
    parsed = parse_utc_timestamp("2025-06-14T08:01:30.937796Z")
    assert parsed == datetime(2025, 6, 14, 8, 1, 30, 937796, tzinfo=UTC)


def test_parse_ignores_offset_suffix_without_fraction():
    parsed = parse_utc_timestamp("2025-06-14T05:30:00+00:00")
    assert parsed == datetime(2025, 6, 14, 5, 30, 0, tzinfo=UTC)


@pytest.mark.parametrize(
    "moment",
    [
        datetime(2025, 6, 14, 21, 17, 0, 440403, tzinfo=UTC),
        datetime(2016, 6, 17, 11, 50, 51, 896126, tzinfo=UTC),
        datetime(2000, 2, 29, 0, 0, 0, 1, tzinfo=UTC),
        datetime(1970, 1, 1, tzinfo=UTC),
    ],
)
def test_round_trip(moment):
    assert parse_utc_timestamp(to_utc_timestamp(moment)) == moment


@pytest.mark.parametrize("text", ["not a timestamp", "", "2025-06-14", "2025-13-01T00:00:00Z"])
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_utc_timestamp(text)


def test_parse_rejects_fraction_without_digits():
    with pytest.raises(ValueError):
        parse_utc_timestamp("2025-06-14T05:30:00.Z")


def test_format_time_utc():
    moment = datetime(2025, 6, 14, 21, 17, 0, 440403, tzinfo=UTC)
    assert format_time(moment, "%Y-%m-%d", True) == "2025-06-14"
    assert format_time(moment, "%H:%M:%S", True) == "21:17:00"


def test_format_time_local(zurich_tz):
    moment = datetime(2025, 6, 14, 21, 17, 0, tzinfo=UTC)
    assert format_time(moment, "%H:%M:%S", False) == "23:17:00"