# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the PuppetDB wire timestamp codec."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest

from puppetdb_terminus.enums import EnumErrorCode
from puppetdb_terminus.errors import WireTimeFormatError
from puppetdb_terminus.utils.util_wire_time import (
    format_wire_time,
    parse_wire_time,
    truncate_to_wire_precision,
)


class TestFormatWireTime:
    """Canonical formatting."""

    def test_formats_utc_with_milliseconds_and_z(self) -> None:
        t = datetime(2015, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)

        assert format_wire_time(t) == "2015-01-02T03:04:05.678Z"

    def test_truncates_sub_millisecond_digits(self) -> None:
        t = datetime(2015, 1, 2, 3, 4, 5, 678999, tzinfo=UTC)

        assert format_wire_time(t) == "2015-01-02T03:04:05.678Z"

    def test_always_emits_three_fraction_digits(self) -> None:
        t = datetime(2015, 1, 2, 3, 4, 5, tzinfo=UTC)

        assert format_wire_time(t) == "2015-01-02T03:04:05.000Z"

    def test_converts_offsets_to_utc(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        t = datetime(2015, 1, 2, 1, 0, 0, 5000, tzinfo=plus_two)

        assert format_wire_time(t) == "2015-01-01T23:00:00.005Z"

    def test_naive_datetime_is_treated_as_utc(self) -> None:
        t = datetime(2015, 1, 2, 3, 4, 5, 6000)

        assert format_wire_time(t) == "2015-01-02T03:04:05.006Z"

    def test_pads_early_years(self) -> None:
        t = datetime(999, 1, 1, tzinfo=UTC)

        assert format_wire_time(t) == "0999-01-01T00:00:00.000Z"

    def test_instants_one_millisecond_apart_format_differently(self) -> None:
        t = datetime(2015, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)

        assert format_wire_time(t) != format_wire_time(t + timedelta(milliseconds=1))


class TestParseWireTime:
    """Parsing, including non-canonical but valid inputs."""

    def test_parses_canonical_form(self) -> None:
        parsed = parse_wire_time("2015-01-02T03:04:05.678Z")

        assert parsed == datetime(2015, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
        assert parsed.tzinfo == UTC

    def test_parses_explicit_offset(self) -> None:
        parsed = parse_wire_time("2015-01-02T05:04:05.678+02:00")

        assert parsed == datetime(2015, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)

    def test_parses_negative_offset(self) -> None:
        parsed = parse_wire_time("2015-01-01T22:04:05-05:00")

        assert parsed == datetime(2015, 1, 2, 3, 4, 5, tzinfo=UTC)

    def test_missing_fraction_means_zero(self) -> None:
        assert parse_wire_time("2015-01-02T03:04:05Z").microsecond == 0

    @pytest.mark.parametrize(
        ("fraction", "expected_microsecond"),
        [("6", 600000), ("67", 670000), ("678", 678000), ("678999999", 678000)],
    )
    def test_fraction_is_truncated_to_milliseconds(
        self, fraction: str, expected_microsecond: int
    ) -> None:
        parsed = parse_wire_time(f"2015-01-02T03:04:05.{fraction}Z")

        assert parsed.microsecond == expected_microsecond

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "not a time",
            "2015-01-02",
            "2015-01-02 03:04:05.678Z",
            "2015-01-02T03:04:05.678",
            "2015-01-02T03:04:05.678+0200",
            "2015-01-02T03:04:05.Z",
            "2015-01-02T03:04:05.678Z\n",
            "2015-13-02T03:04:05.678Z",
            "2015-02-30T03:04:05.678Z",
            "2015-01-02T24:04:05.678Z",
            "2015-01-02T03:04:05.678+24:00",
        ],
    )
    def test_rejects_malformed_strings(self, value: str) -> None:
        with pytest.raises(WireTimeFormatError) as exc_info:
            parse_wire_time(value)

        assert exc_info.value.error_code == EnumErrorCode.WIRE_TIME_FORMAT_ERROR

    def test_rejects_non_strings(self) -> None:
        with pytest.raises(WireTimeFormatError):
            parse_wire_time(1420167845)  # type: ignore[arg-type]


class TestRoundTrip:
    """parse(format(t)) == truncate(t)."""

    @pytest.mark.parametrize(
        "instant",
        [
            datetime(2015, 1, 2, 3, 4, 5, 678901, tzinfo=UTC),
            datetime(1970, 1, 1, tzinfo=UTC),
            datetime(2038, 1, 19, 3, 14, 7, 999999, tzinfo=UTC),
            datetime(2024, 2, 29, 23, 59, 59, 1, tzinfo=timezone(timedelta(hours=-7))),
        ],
    )
    def test_round_trip_matches_truncation(self, instant: datetime) -> None:
        assert parse_wire_time(format_wire_time(instant)) == truncate_to_wire_precision(
            instant
        )

    def test_formatted_time_is_never_later_than_source(self) -> None:
        instant = datetime(2015, 1, 2, 3, 4, 5, 678999, tzinfo=UTC)

        assert parse_wire_time(format_wire_time(instant)) <= instant
