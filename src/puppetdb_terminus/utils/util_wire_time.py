# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Wire timestamp codec for PuppetDB commands.

PuppetDB expects timestamps such as ``producer_timestamp`` as ISO-8601
strings. The canonical form produced here is UTC with millisecond
precision and a ``Z`` suffix::

    2015-01-02T03:04:05.678Z

Anything finer than a millisecond is truncated, never rounded, so a
formatted timestamp is never later than the instant it was produced from.

Parsing accepts the canonical form plus any explicit offset and one to
nine fractional digits, and always returns an aware UTC datetime at
millisecond precision. For every datetime ``t``::

    parse_wire_time(format_wire_time(t)) == truncate_to_wire_precision(t)

Both functions are pure; the current time is always supplied by the caller.

Example:
    >>> from datetime import UTC, datetime
    >>> t = datetime(2015, 1, 2, 3, 4, 5, 678901, tzinfo=UTC)
    >>> format_wire_time(t)
    '2015-01-02T03:04:05.678Z'
    >>> parse_wire_time("2015-01-02T03:04:05.678Z") == truncate_to_wire_precision(t)
    True
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime, timedelta

from puppetdb_terminus.errors import ModelErrorContext, WireTimeFormatError

logger = logging.getLogger(__name__)

_WIRE_TIME_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})T(?P<time>\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})$",
    re.ASCII,
)


def ensure_utc(dt: datetime) -> datetime:
    """Return ``dt`` converted to UTC, treating naive datetimes as UTC."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        logger.debug(
            "Naive datetime interpreted as UTC for wire encoding",
            extra={"naive_datetime": dt.isoformat()},
        )
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def truncate_to_wire_precision(dt: datetime) -> datetime:
    """Drop sub-millisecond digits from ``dt`` and normalize it to UTC."""
    utc = ensure_utc(dt)
    return utc.replace(microsecond=utc.microsecond - utc.microsecond % 1000)


def format_wire_time(dt: datetime) -> str:
    """Format ``dt`` as a canonical PuppetDB wire timestamp.

    Args:
        dt: The instant to encode. Naive values are interpreted as UTC.

    Returns:
        ISO-8601 UTC string with exactly three fractional digits and ``Z``.
    """
    utc = truncate_to_wire_precision(dt)
    return "%04d-%02d-%02dT%02d:%02d:%02d.%03dZ" % (
        utc.year,
        utc.month,
        utc.day,
        utc.hour,
        utc.minute,
        utc.second,
        utc.microsecond // 1000,
    )


def parse_wire_time(value: str) -> datetime:
    """Parse a PuppetDB wire timestamp.

    Args:
        value: ISO-8601 timestamp with date, time and an explicit offset.

    Returns:
        Aware UTC datetime truncated to millisecond precision.

    Raises:
        WireTimeFormatError: If ``value`` does not match the wire grammar or
            names an impossible date or time.
    """
    context = ModelErrorContext(operation="parse_wire_time")
    if not isinstance(value, str):
        raise WireTimeFormatError(
            f"Wire time must be a string, got {type(value).__name__}",
            context=context,
        )

    match = _WIRE_TIME_PATTERN.fullmatch(value)
    if match is None:
        raise WireTimeFormatError(
            f"Invalid wire time {value!r}: expected YYYY-MM-DDTHH:MM:SS[.fff](Z|+HH:MM)",
            context=context,
            value=value,
        )

    # Only the first three fractional digits survive truncation.
    fraction = (match.group("fraction") or "").ljust(3, "0")[:3]
    offset = match.group("offset")
    try:
        naive = datetime.strptime(
            f"{match.group('date')}T{match.group('time')}", "%Y-%m-%dT%H:%M:%S"
        )
        if offset == "Z":
            shift = timedelta(0)
        else:
            sign = -1 if offset[0] == "-" else 1
            hours, minutes = int(offset[1:3]), int(offset[4:6])
            if hours > 23 or minutes > 59:
                raise ValueError(f"offset out of range: {offset}")
            shift = sign * timedelta(hours=hours, minutes=minutes)
        utc = (naive - shift).replace(tzinfo=UTC)
    except (ValueError, OverflowError) as exc:
        raise WireTimeFormatError(
            f"Invalid wire time {value!r}: {exc}",
            context=context,
            value=value,
        ) from exc

    return utc.replace(microsecond=int(fraction) * 1000)


__all__: list[str] = [
    "ensure_utc",
    "format_wire_time",
    "parse_wire_time",
    "truncate_to_wire_precision",
]
