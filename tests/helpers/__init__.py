# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Test helpers for puppetdb_terminus unit tests.

Available Utilities:
    Deterministic:
        - DeterministicClock: Controllable clock for reproducible timestamps
        - DeterministicIdGenerator: Predictable correlation IDs

    PuppetDB fakes:
        - MockConnectionPool: httpx.MockTransport-backed connection pool
        - FailingConnectionPool: Pool that must never be used
        - RecordingNotifier: Deprecation notifier that records notices
        - json_response / text_response: Canned httpx responses
        - corrupt_gzip_response: Response whose body fails to decode
"""

from tests.helpers.deterministic import DeterministicClock, DeterministicIdGenerator
from tests.helpers.mock_puppetdb import (
    FailingConnectionPool,
    MockConnectionPool,
    PoolFactory,
    RecordingNotifier,
    corrupt_gzip_response,
    json_response,
    text_response,
)

__all__ = [
    "DeterministicClock",
    "DeterministicIdGenerator",
    "FailingConnectionPool",
    "MockConnectionPool",
    "PoolFactory",
    "RecordingNotifier",
    "corrupt_gzip_response",
    "json_response",
    "text_response",
]
