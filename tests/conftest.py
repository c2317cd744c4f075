# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for puppetdb_terminus tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID

import pytest

from puppetdb_terminus.models import ModelPuppetDBConfig
from tests.helpers.deterministic import DeterministicClock, DeterministicIdGenerator
from tests.helpers.mock_puppetdb import (
    Handler,
    MockConnectionPool,
    PoolFactory,
    RecordingNotifier,
)

SERVER_URL = "https://puppetdb.example.com:8081"

PUPPETDB_ENV_VARS = (
    "PUPPETDB_SERVER_URL",
    "PUPPETDB_COMMAND_PATH",
    "PUPPETDB_TIMEOUT_SECONDS",
    "PUPPETDB_MAX_TIMEOUT_SECONDS",
    "PUPPETDB_VERIFY_TLS",
    "PUPPETDB_SSL_CA_FILE",
    "PUPPETDB_SSL_CERT_FILE",
    "PUPPETDB_SSL_KEY_FILE",
)


@pytest.fixture(autouse=True)
def _clear_puppetdb_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PUPPETDB_* variables from the developer's shell out of tests."""
    for name in PUPPETDB_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def clock() -> DeterministicClock:
    return DeterministicClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def correlation_id() -> UUID:
    """Provide a stable correlation ID for tests."""
    return DeterministicIdGenerator(seed=0).next_uuid()


@pytest.fixture
def puppetdb_config() -> ModelPuppetDBConfig:
    return ModelPuppetDBConfig(server_url=SERVER_URL)


@pytest.fixture
async def make_pool() -> AsyncIterator[PoolFactory]:
    """Create MockConnectionPools whose clients are closed after the test."""
    pools: list[MockConnectionPool] = []

    def factory(handler: Handler) -> MockConnectionPool:
        pool = MockConnectionPool(handler)
        pools.append(pool)
        return pool

    yield factory

    for pool in pools:
        await pool.aclose()
