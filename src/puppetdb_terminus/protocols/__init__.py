# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Collaborator protocols injected into the PuppetDB terminus.

Exports:
    ProtocolClock: Source of the current instant
    ProtocolConnectionPool: Provider of pooled HTTP clients
    ProtocolDeprecationNotifier: Sink for PuppetDB deprecation notices
"""

from puppetdb_terminus.protocols.protocol_clock import ProtocolClock
from puppetdb_terminus.protocols.protocol_connection_pool import (
    ProtocolConnectionPool,
)
from puppetdb_terminus.protocols.protocol_deprecation_notifier import (
    ProtocolDeprecationNotifier,
)

__all__: list[str] = [
    "ProtocolClock",
    "ProtocolConnectionPool",
    "ProtocolDeprecationNotifier",
]
