# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the process clock collaborator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime


@runtime_checkable
class ProtocolClock(Protocol):
    """Supplies the current instant, so command timestamps can be pinned in tests."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


__all__ = ["ProtocolClock"]
