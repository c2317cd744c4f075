# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the deprecation notifier collaborator.

PuppetDB signals use of a deprecated API surface through a response
header. The command handler forwards the header value to a notifier once
per response. Notifications are advisory: an implementation must return
promptly and must not raise.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolDeprecationNotifier(Protocol):
    """Receives deprecation notices reported by PuppetDB."""

    def notify_deprecation(self, message: str) -> None:
        """Report a deprecation notice.

        Args:
            message: Human-readable notice taken from the response header.
        """
        ...


__all__ = ["ProtocolDeprecationNotifier"]
