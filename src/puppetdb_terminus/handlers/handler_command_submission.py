# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB Command Submission Handler.

Serializes a command envelope, POSTs it to the PuppetDB command endpoint
over a client borrowed from the connection pool, and turns the response
into either a ModelSubmissionResult or a typed error.

Request:
    ``POST {server_url}/pdb/cmd/v1?command=deactivate_node&version=3
    &certname=...&producer-timestamp=...&checksum=<sha1 of body>``
    with the JSON envelope as body.

Error Mapping:
    - httpx timeout               -> PuppetDBTimeoutError
    - any other httpx error       -> PuppetDBConnectionError
    - non-2xx status              -> CommandSubmissionError (status code, sanitized body)
    - 2xx, undecodable body       -> ResponseFormatError
    - 2xx, non-JSON / no uuid     -> ResponseFormatError

Deprecation Header:
    The response is streamed so its headers are seen before the body is
    read. When it carries ``X-Deprecation`` the notifier is called exactly
    once with its value, before the body is read or the status evaluated,
    so the notice is reported whatever the outcome. The value is also
    returned on the result (or attached to the raised error).

Nothing here retries. A failed submission surfaces to the caller, which
owns any retry or backoff policy.
"""

from __future__ import annotations

import hashlib
import logging
from json import JSONDecodeError
from uuid import UUID, uuid4

import httpx
from pydantic import ValidationError

from puppetdb_terminus.errors import (
    CommandSubmissionError,
    ModelErrorContext,
    PuppetDBConnectionError,
    PuppetDBTimeoutError,
    ResponseFormatError,
)
from puppetdb_terminus.models.model_command_envelope import ModelCommandEnvelope
from puppetdb_terminus.models.model_puppetdb_config import ModelPuppetDBConfig
from puppetdb_terminus.models.model_submission_result import (
    ModelCommandAcknowledgment,
    ModelSubmissionResult,
)
from puppetdb_terminus.protocols import (
    ProtocolConnectionPool,
    ProtocolDeprecationNotifier,
)
from puppetdb_terminus.utils.util_error_sanitization import sanitize_error_string

logger = logging.getLogger(__name__)

DEPRECATION_HEADER = "X-Deprecation"

REQUEST_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json; charset=utf-8",
}

_MIN_TIMEOUT_SECONDS = 0.1


class HandlerCommandSubmission:
    """Submits command envelopes to PuppetDB.

    The handler holds no per-request state and may be shared by concurrent
    callers. The connection pool decides how clients are reused.

    Example:
        >>> handler = HandlerCommandSubmission(pool, notifier, config)
        >>> result = await handler.submit(envelope)
        >>> result.uuid
        'a UUID'
    """

    def __init__(
        self,
        connection_pool: ProtocolConnectionPool,
        notifier: ProtocolDeprecationNotifier,
        config: ModelPuppetDBConfig | None = None,
    ) -> None:
        self._pool = connection_pool
        self._notifier = notifier
        self._config = config or ModelPuppetDBConfig()
        self._target = self._config.to_target()
        self._url = self._config.server_url + self._config.command_path

    @property
    def config(self) -> ModelPuppetDBConfig:
        return self._config

    def _build_error_context(
        self, operation: str, correlation_id: UUID
    ) -> ModelErrorContext:
        return ModelErrorContext(
            operation=operation,
            target_name=self._target.name,
            correlation_id=correlation_id,
        )

    def _effective_timeout(self, timeout_seconds: float | None) -> float:
        requested = (
            self._config.timeout_seconds if timeout_seconds is None else timeout_seconds
        )
        return max(min(requested, self._config.max_timeout_seconds), _MIN_TIMEOUT_SECONDS)

    @staticmethod
    def build_query_params(
        envelope: ModelCommandEnvelope, body: bytes
    ) -> dict[str, str]:
        """Return the query parameters PuppetDB expects alongside the body."""
        return {
            "command": envelope.command.query_value,
            "version": str(envelope.version),
            "certname": envelope.certname,
            "producer-timestamp": envelope.payload.producer_timestamp,
            "checksum": hashlib.sha1(body).hexdigest(),
        }

    async def submit(
        self,
        envelope: ModelCommandEnvelope,
        correlation_id: UUID | None = None,
        timeout_seconds: float | None = None,
    ) -> ModelSubmissionResult:
        """Submit ``envelope`` and return PuppetDB's acknowledgment.

        Args:
            envelope: Command to submit.
            correlation_id: Correlation ID for logs and errors; generated
                when absent.
            timeout_seconds: Per-request timeout. Defaults to the configured
                timeout and is clamped to ``[0.1, max_timeout_seconds]``.

        Returns:
            Result carrying the command UUID and any deprecation notice.

        Raises:
            PuppetDBTimeoutError: The request did not complete in time.
            PuppetDBConnectionError: The request failed at the transport level.
            CommandSubmissionError: PuppetDB answered with a non-2xx status.
            ResponseFormatError: A 2xx response body could not be decoded or did
                not contain a command UUID.
        """
        correlation_id = correlation_id or uuid4()
        command = envelope.command.value
        operation = f"submit_command:{envelope.command.query_value}"
        body = envelope.to_json_bytes()
        effective_timeout = self._effective_timeout(timeout_seconds)

        client = await self._pool.connect(self._target)

        logger.debug(
            "Submitting command to PuppetDB",
            extra={
                "command": command,
                "version": envelope.version,
                "certname": envelope.certname,
                "correlation_id": str(correlation_id),
                "target": self._target.name,
                "timeout_seconds": effective_timeout,
            },
        )

        request = client.build_request(
            "POST",
            self._url,
            params=self.build_query_params(envelope, body),
            content=body,
            headers=REQUEST_HEADERS,
            timeout=effective_timeout,
        )
        ctx = self._build_error_context(operation, correlation_id)

        try:
            response = await client.send(request, stream=True)
        except httpx.HTTPError as exc:
            raise self._transport_error(exc, envelope, effective_timeout, ctx) from exc

        try:
            deprecation_warning = self._report_deprecation(response, correlation_id)
            try:
                await response.aread()
            except httpx.DecodingError as exc:
                raise self._undecodable_body_error(
                    exc, envelope, response, deprecation_warning, ctx
                ) from exc
            except httpx.HTTPError as exc:
                raise self._transport_error(
                    exc, envelope, effective_timeout, ctx
                ) from exc
            return self._interpret_response(
                envelope, response, deprecation_warning, ctx, correlation_id
            )
        finally:
            await response.aclose()

    def _transport_error(
        self,
        exc: httpx.HTTPError,
        envelope: ModelCommandEnvelope,
        timeout_seconds: float,
        ctx: ModelErrorContext,
    ) -> PuppetDBConnectionError:
        command = envelope.command.value
        if isinstance(exc, httpx.TimeoutException):
            return PuppetDBTimeoutError(
                f"'{command}' command for {envelope.certname} timed out after "
                f"{timeout_seconds}s",
                context=ctx,
                timeout_seconds=timeout_seconds,
            )
        return PuppetDBConnectionError(
            f"Failed to submit '{command}' command for {envelope.certname} "
            f"to {self._target.name}: {type(exc).__name__}: {exc}",
            context=ctx,
        )

    def _undecodable_body_error(
        self,
        exc: httpx.DecodingError,
        envelope: ModelCommandEnvelope,
        response: httpx.Response,
        deprecation_warning: str | None,
        ctx: ModelErrorContext,
    ) -> CommandSubmissionError | ResponseFormatError:
        """Map a body that cannot be decoded (e.g. corrupt gzip) to a typed error.

        A rejected command stays a CommandSubmissionError; only the body is lost.
        """
        command = envelope.command.value
        if not response.is_success:
            return CommandSubmissionError(
                f"PuppetDB rejected '{command}' command for {envelope.certname}: "
                f"[{response.status_code} {response.reason_phrase}] "
                f"(undecodable body: {exc})",
                status_code=response.status_code,
                deprecation_warning=deprecation_warning,
                context=ctx,
            )
        return ResponseFormatError(
            f"Undecodable acknowledgment for '{command}' command from "
            f"{self._target.name}: {type(exc).__name__}: {exc}",
            status_code=response.status_code,
            deprecation_warning=deprecation_warning,
            context=ctx,
            content_encoding=response.headers.get("content-encoding", ""),
        )

    def _interpret_response(
        self,
        envelope: ModelCommandEnvelope,
        response: httpx.Response,
        deprecation_warning: str | None,
        ctx: ModelErrorContext,
        correlation_id: UUID,
    ) -> ModelSubmissionResult:
        """Turn a fully read response into a result or a typed error."""
        command = envelope.command.value
        body_snippet = sanitize_error_string(response.text) if response.content else ""

        if not response.is_success:
            raise CommandSubmissionError(
                f"PuppetDB rejected '{command}' command for {envelope.certname}: "
                f"[{response.status_code} {response.reason_phrase}] {body_snippet}",
                status_code=response.status_code,
                response_body=body_snippet,
                deprecation_warning=deprecation_warning,
                context=ctx,
            )

        # Missing content-type falls through to JSON parsing.
        content_type = response.headers.get("content-type", "")
        if content_type and "json" not in content_type.lower():
            raise ResponseFormatError(
                f"Expected JSON acknowledgment from {self._target.name}, "
                f"got content-type: {content_type}",
                status_code=response.status_code,
                response_body=body_snippet,
                deprecation_warning=deprecation_warning,
                context=ctx,
                content_type=content_type,
            )

        try:
            acknowledgment = ModelCommandAcknowledgment.model_validate(response.json())
        except (JSONDecodeError, ValueError, ValidationError) as exc:
            raise ResponseFormatError(
                f"Unreadable acknowledgment for '{command}' command from "
                f"{self._target.name}: {exc}",
                status_code=response.status_code,
                response_body=body_snippet,
                deprecation_warning=deprecation_warning,
                context=ctx,
            ) from exc

        logger.info(
            "'%s' command for %s submitted to PuppetDB with UUID %s",
            command,
            envelope.certname,
            acknowledgment.uuid,
            extra={
                "command": command,
                "certname": envelope.certname,
                "uuid": acknowledgment.uuid,
                "status_code": response.status_code,
                "correlation_id": str(correlation_id),
                "target": self._target.name,
            },
        )

        return ModelSubmissionResult(
            uuid=acknowledgment.uuid,
            deprecation_warning=deprecation_warning,
            command=envelope.command,
            certname=envelope.certname,
        )

    def _report_deprecation(
        self, response: httpx.Response, correlation_id: UUID
    ) -> str | None:
        """Forward the deprecation header, if any, to the notifier.

        A failing notifier is logged and otherwise ignored; it must not
        change the outcome of the submission.
        """
        message = response.headers.get(DEPRECATION_HEADER)
        if message is None:
            return None
        try:
            self._notifier.notify_deprecation(message)
        except Exception:
            logger.warning(
                "Deprecation notifier raised; submission outcome unaffected",
                exc_info=True,
                extra={"correlation_id": str(correlation_id)},
            )
        return message


__all__: list[str] = [
    "DEPRECATION_HEADER",
    "REQUEST_HEADERS",
    "HandlerCommandSubmission",
]
