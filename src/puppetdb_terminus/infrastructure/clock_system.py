# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Process clock backed by the system time."""

from __future__ import annotations

from datetime import UTC, datetime


class ClockSystem:
    """Returns the current UTC time."""

    def now(self) -> datetime:
        return datetime.now(UTC)


__all__: list[str] = ["ClockSystem"]
