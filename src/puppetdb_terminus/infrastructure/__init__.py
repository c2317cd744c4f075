# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Default collaborator implementations.

Exports:
    ClockSystem: System clock in UTC
    HttpConnectionPool: Keep-alive httpx clients keyed by target
    NotifierDeprecationLogging: Logs PuppetDB deprecation notices
"""

from puppetdb_terminus.infrastructure.clock_system import ClockSystem
from puppetdb_terminus.infrastructure.http_connection_pool import (
    HttpConnectionPool,
    build_ssl_context,
)
from puppetdb_terminus.infrastructure.notifier_deprecation_logging import (
    NotifierDeprecationLogging,
)

__all__: list[str] = [
    "ClockSystem",
    "HttpConnectionPool",
    "NotifierDeprecationLogging",
    "build_ssl_context",
]
