# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ServiceNodeDeactivation."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

import httpx
import pytest

from puppetdb_terminus.enums import EnumErrorCode
from puppetdb_terminus.errors import (
    CommandSubmissionError,
    CommandValidationError,
    PuppetDBConnectionError,
)
from puppetdb_terminus.handlers import DEPRECATION_HEADER, HandlerCommandSubmission
from puppetdb_terminus.infrastructure import ClockSystem
from puppetdb_terminus.models import ModelPuppetDBConfig
from puppetdb_terminus.services import ServiceNodeDeactivation
from puppetdb_terminus.utils import parse_wire_time
from tests.helpers.deterministic import DeterministicClock
from tests.helpers.mock_puppetdb import (
    FailingConnectionPool,
    MockConnectionPool,
    PoolFactory,
    RecordingNotifier,
    json_response,
    text_response,
)

CERTNAME = "something.example.com"


def _service(
    pool: MockConnectionPool | FailingConnectionPool,
    notifier: RecordingNotifier,
    config: ModelPuppetDBConfig,
    clock: DeterministicClock | ClockSystem,
) -> ServiceNodeDeactivation:
    return ServiceNodeDeactivation(
        HandlerCommandSubmission(pool, notifier, config), clock=clock
    )


class TestDeactivate:
    async def test_returns_command_uuid(
        self,
        make_pool: PoolFactory,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
        clock: DeterministicClock,
    ) -> None:
        pool = make_pool(lambda request: json_response({"uuid": "a UUID"}))

        result = await _service(pool, notifier, puppetdb_config, clock).deactivate(
            CERTNAME
        )

        assert result.uuid == "a UUID"
        assert result.certname == CERTNAME

    async def test_submits_deactivate_node_version_3(
        self,
        make_pool: PoolFactory,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
        clock: DeterministicClock,
    ) -> None:
        pool = make_pool(lambda request: json_response({"uuid": "a UUID"}))

        await _service(pool, notifier, puppetdb_config, clock).deactivate(CERTNAME)

        body = pool.last_body()
        assert body["command"] == "deactivate node"
        assert body["version"] == 3
        assert body["payload"]["certname"] == CERTNAME
        assert pool.last_request.url.params["command"] == "deactivate_node"

    async def test_producer_timestamp_comes_from_clock(
        self,
        make_pool: PoolFactory,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
        clock: DeterministicClock,
    ) -> None:
        pool = make_pool(lambda request: json_response({"uuid": "a UUID"}))

        await _service(pool, notifier, puppetdb_config, clock).deactivate(CERTNAME)

        assert pool.last_body()["payload"]["producer_timestamp"] == (
            "2015-01-02T03:04:05.678Z"
        )
        assert clock.calls == 1

    async def test_each_call_is_stamped_afresh(
        self,
        make_pool: PoolFactory,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
        clock: DeterministicClock,
    ) -> None:
        pool = make_pool(lambda request: json_response({"uuid": "a UUID"}))
        service = _service(pool, notifier, puppetdb_config, clock)

        await service.deactivate(CERTNAME)
        clock.advance(60)
        await service.deactivate(CERTNAME)

        stamps = [
            request.url.params["producer-timestamp"] for request in pool.requests
        ]
        assert stamps == ["2015-01-02T03:04:05.678Z", "2015-01-02T03:05:05.678Z"]

    async def test_producer_timestamp_with_system_clock(
        self,
        make_pool: PoolFactory,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
    ) -> None:
        pool = make_pool(lambda request: json_response({"uuid": "a UUID"}))

        await _service(pool, notifier, puppetdb_config, ClockSystem()).deactivate(
            CERTNAME
        )
        after = datetime.now(UTC)

        produced = parse_wire_time(pool.last_body()["payload"]["producer_timestamp"])
        assert produced <= after
        assert (after - produced).total_seconds() < 5

    async def test_defaults_to_system_clock(
        self,
        make_pool: PoolFactory,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
    ) -> None:
        pool = make_pool(lambda request: json_response({"uuid": "a UUID"}))
        service = ServiceNodeDeactivation(
            HandlerCommandSubmission(pool, notifier, puppetdb_config)
        )

        result = await service.deactivate(CERTNAME)

        assert result.uuid == "a UUID"

    async def test_deprecation_is_reported(
        self,
        make_pool: PoolFactory,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
        clock: DeterministicClock,
    ) -> None:
        pool = make_pool(
            lambda request: json_response(
                {"uuid": "a UUID"},
                headers={DEPRECATION_HEADER: "A horrible deprecation warning!"},
            )
        )

        await _service(pool, notifier, puppetdb_config, clock).deactivate(CERTNAME)

        assert notifier.messages == ["A horrible deprecation warning!"]

    async def test_forwards_correlation_id(
        self,
        make_pool: PoolFactory,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
        clock: DeterministicClock,
        correlation_id: UUID,
    ) -> None:
        pool = make_pool(lambda request: text_response("nope", status_code=503))

        with pytest.raises(CommandSubmissionError) as exc_info:
            await _service(pool, notifier, puppetdb_config, clock).deactivate(
                CERTNAME, correlation_id=correlation_id
            )

        assert exc_info.value.correlation_id == correlation_id
        assert exc_info.value.status_code == 503

    async def test_transport_failure_propagates(
        self,
        make_pool: PoolFactory,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
        clock: DeterministicClock,
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        pool = make_pool(handler)

        with pytest.raises(PuppetDBConnectionError):
            await _service(pool, notifier, puppetdb_config, clock).deactivate(CERTNAME)

        assert len(pool.requests) == 1


class TestCertnameValidation:
    @pytest.mark.parametrize("certname", ["", " ", "\t\n"])
    async def test_blank_certname_never_reaches_the_pool(
        self,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
        clock: DeterministicClock,
        certname: str,
    ) -> None:
        pool = FailingConnectionPool()

        with pytest.raises(CommandValidationError) as exc_info:
            await _service(pool, notifier, puppetdb_config, clock).deactivate(certname)

        assert exc_info.value.error_code == EnumErrorCode.VALIDATION_ERROR
        assert exc_info.value.model.context["operation"] == "deactivate_node"
        assert pool.connect_calls == 0
        assert clock.calls == 0
        assert notifier.messages == []

    async def test_non_string_certname(
        self,
        notifier: RecordingNotifier,
        puppetdb_config: ModelPuppetDBConfig,
        clock: DeterministicClock,
    ) -> None:
        pool = FailingConnectionPool()

        with pytest.raises(CommandValidationError):
            await _service(pool, notifier, puppetdb_config, clock).deactivate(
                None  # type: ignore[arg-type]
            )

        assert pool.connect_calls == 0
