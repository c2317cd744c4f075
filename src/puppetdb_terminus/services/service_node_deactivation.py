# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Node Deactivation Service.

Entry point of the terminus: deactivates a node in PuppetDB by building a
``deactivate node`` command stamped with the current time and submitting
it through HandlerCommandSubmission.

Invalid certnames are rejected before the connection pool is touched, so
a structurally invalid command never reaches the wire.

Example:
    >>> service = ServiceNodeDeactivation(handler, clock=ClockSystem())
    >>> result = await service.deactivate("something.example.com")
    >>> result.uuid
    'a UUID'
"""

from __future__ import annotations

import logging
from uuid import UUID, uuid4

from puppetdb_terminus.enums import COMMAND_VERSIONS, EnumCommandName
from puppetdb_terminus.errors import CommandValidationError, ModelErrorContext
from puppetdb_terminus.handlers.handler_command_submission import (
    HandlerCommandSubmission,
)
from puppetdb_terminus.infrastructure.clock_system import ClockSystem
from puppetdb_terminus.models.model_command_envelope import ModelCommandEnvelope
from puppetdb_terminus.models.model_submission_result import ModelSubmissionResult
from puppetdb_terminus.protocols import ProtocolClock

logger = logging.getLogger(__name__)


class ServiceNodeDeactivation:
    """Deactivates nodes in PuppetDB."""

    command = EnumCommandName.DEACTIVATE_NODE

    def __init__(
        self,
        handler: HandlerCommandSubmission,
        clock: ProtocolClock | None = None,
    ) -> None:
        self._handler = handler
        self._clock = clock or ClockSystem()

    async def deactivate(
        self,
        certname: str,
        correlation_id: UUID | None = None,
        timeout_seconds: float | None = None,
    ) -> ModelSubmissionResult:
        """Submit a ``deactivate node`` command for ``certname``.

        Args:
            certname: Certificate name of the node to deactivate.
            correlation_id: Correlation ID for logs and errors; generated
                when absent.
            timeout_seconds: Per-request timeout forwarded to the handler.

        Returns:
            Result with the UUID PuppetDB assigned to the command.

        Raises:
            CommandValidationError: ``certname`` is empty or whitespace-only.
            PuppetDBConnectionError: Transport failure (PuppetDBTimeoutError on timeout).
            CommandSubmissionError: PuppetDB answered with a non-2xx status.
            ResponseFormatError: A 2xx response did not contain a command UUID.
        """
        correlation_id = correlation_id or uuid4()

        if not isinstance(certname, str) or not certname.strip():
            raise CommandValidationError(
                f"Cannot submit '{self.command.value}' command: "
                "certname must be a non-empty string",
                context=ModelErrorContext(
                    operation="deactivate_node",
                    correlation_id=correlation_id,
                ),
                certname=certname,
            )

        envelope = ModelCommandEnvelope.build(
            command=self.command,
            version=COMMAND_VERSIONS[self.command],
            certname=certname,
            now=self._clock.now(),
        )
        logger.debug(
            "Deactivating node",
            extra={
                "certname": certname,
                "producer_timestamp": envelope.payload.producer_timestamp,
                "correlation_id": str(correlation_id),
            },
        )
        return await self._handler.submit(
            envelope,
            correlation_id=correlation_id,
            timeout_seconds=timeout_seconds,
        )


__all__: list[str] = ["ServiceNodeDeactivation"]
