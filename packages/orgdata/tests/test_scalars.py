"""Tests for scalar cell decoding and timestamp handling."""

import uuid
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from orgdata.errors import InvalidIdentifier, InvalidOwnerID, InvalidType, InvalidUserID, TimestampParseError
from orgdata.scalars import (
    format_timestamp,
    is_zero_timestamp,
    parse_identifier,
    parse_timestamp,
    scan_to_string,
)


class TestScanToString:

    def test_text(self):
        assert scan_to_string("(a,b)") == "(a,b)"

    def test_bytes(self):
        assert scan_to_string(b"(a,b)") == "(a,b)"
        assert scan_to_string(memoryview(b"(a,b)")) == "(a,b)"

    def test_invalid_utf8_bytes_rejected(self):
        with pytest.raises(InvalidType, match="not UTF-8"):
            scan_to_string(b"(a,\xff)")

    @pytest.mark.parametrize("value", [42, None, 1.5, ["(a,b)"]])
    def test_other_types_rejected(self, value):
        with pytest.raises(InvalidType):
            scan_to_string(value)


class TestParseIdentifier:

    def test_valid(self, nil_id):
        assert parse_identifier(nil_id) == uuid.UUID(int=0)

    def test_empty_rejected(self):
        with pytest.raises(InvalidOwnerID, match="owner_id"):
            parse_identifier("", InvalidOwnerID, "owner_id")

    def test_malformed_rejected(self):
        with pytest.raises(InvalidUserID) as exc_info:
            parse_identifier("not-a-uuid", InvalidUserID, "user_id")
        assert isinstance(exc_info.value, InvalidIdentifier)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestParseTimestamp:

    def test_without_offset_defaults_to_utc(self):
        assert parse_timestamp("2024-01-01 00:00:00") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_without_offset_uses_given_zone(self):
        berlin = ZoneInfo("Europe/Berlin")
        ts = parse_timestamp("2024-01-01 00:00:00", berlin)
        assert ts.tzinfo is berlin
        assert ts.astimezone(timezone.utc) == datetime(2023, 12, 31, 23, tzinfo=timezone.utc)

    def test_with_short_offset_and_fraction(self):
        ts = parse_timestamp("2024-01-01 12:30:45.123+02")
        assert ts.microsecond == 123000
        assert ts.utcoffset() == timedelta(hours=2)

    def test_with_negative_minute_offset(self):
        ts = parse_timestamp("2024-01-01 00:00:00-03:30")
        assert ts.utcoffset() == -timedelta(hours=3, minutes=30)

    def test_iso_separator(self):
        assert parse_timestamp("2024-01-01T00:00:00+00") == datetime(2024, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", [
        "",
        "infinity",
        "-infinity",
        "2024-13-01 00:00:00",
        "2024-01-01",
        "0044-03-15 00:00:00 BC",
        "12024-01-01 00:00:00",
    ])
    def test_invalid(self, value):
        with pytest.raises(TimestampParseError):
            parse_timestamp(value)

    @pytest.mark.parametrize("value", [
        "9999-12-31 23:00:00-05",
        "0001-01-01 01:00:00+05",
    ])
    def test_outside_utc_range(self, value):
        with pytest.raises(TimestampParseError, match="out of range in UTC"):
            parse_timestamp(value)

    def test_calendar_edges_in_utc(self):
        assert parse_timestamp("9999-12-31 23:59:59+00").year == 9999
        assert parse_timestamp("0001-01-01 05:00:00+05").year == 1

    def test_naive_edge_in_east_zone(self):
        with pytest.raises(TimestampParseError):
            parse_timestamp("0001-01-01 00:30:00", timezone(timedelta(hours=1)))


class TestFormatTimestamp:

    def test_utc_gets_z_suffix(self):
        assert format_timestamp(datetime(2024, 1, 1, tzinfo=timezone.utc)) == "2024-01-01T00:00:00Z"

    def test_offset_converted_to_utc(self):
        ts = parse_timestamp("2024-01-01 12:30:45.123+02")
        assert format_timestamp(ts) == "2024-01-01T10:30:45.123000Z"

    def test_naive_taken_as_utc(self):
        assert format_timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00Z"


def test_is_zero_timestamp():
    assert is_zero_timestamp(None)
    assert is_zero_timestamp(datetime(1, 1, 1, tzinfo=timezone.utc))
    assert not is_zero_timestamp(datetime(2024, 1, 1, tzinfo=timezone.utc))
