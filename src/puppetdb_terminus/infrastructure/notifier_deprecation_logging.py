# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Deprecation notifier that writes PuppetDB notices to the log."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)


class NotifierDeprecationLogging:
    """Logs each PuppetDB deprecation notice at WARNING level.

    With ``deduplicate=True`` a given message is logged only the first time
    it is seen by this instance, which keeps long-running processes that
    submit many commands from repeating the same notice. The default logs
    every notice.
    """

    def __init__(
        self,
        target_logger: logging.Logger | None = None,
        deduplicate: bool = False,
    ) -> None:
        self._logger = target_logger or logger
        self._deduplicate = deduplicate
        self._seen: set[str] = set()
        self._seen_lock = threading.Lock()

    def notify_deprecation(self, message: str) -> None:
        if self._deduplicate:
            with self._seen_lock:
                if message in self._seen:
                    return
                self._seen.add(message)
        self._logger.warning(
            "Deprecation warning from PuppetDB: %s",
            message,
            extra={"deprecation_message": message},
        )


__all__: list[str] = ["NotifierDeprecationLogging"]
