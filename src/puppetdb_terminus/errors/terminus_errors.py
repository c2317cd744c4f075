# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB Terminus Error Classes.

Every failure on the command-submission path surfaces to the immediate
caller as one of these typed errors. None of them is retried or
suppressed inside the terminus.

Error Hierarchy:
    PuppetDBTerminusError (base terminus error)
    ├── CommandValidationError
    ├── PuppetDBConnectionError
    │   └── PuppetDBTimeoutError
    ├── CommandSubmissionError
    ├── ResponseFormatError
    ├── WireTimeFormatError
    └── ConfigurationError

All errors:
    - Carry a frozen ModelErrorDetails on ``.model``
    - Use EnumErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Accept ModelErrorContext for bundled context parameters
"""

from uuid import UUID

from puppetdb_terminus.enums import EnumErrorCode
from puppetdb_terminus.errors.model_error_context import ModelErrorContext
from puppetdb_terminus.errors.model_error_details import ModelErrorDetails


class PuppetDBTerminusError(Exception):
    """Base error class for the PuppetDB terminus.

    Structured Fields (via ModelErrorContext):
        operation: Operation being performed
        target_name: PuppetDB endpoint
        correlation_id: Request correlation ID for tracking

    Example:
        >>> context = ModelErrorContext(
        ...     operation="submit_command",
        ...     target_name="https://puppetdb:8081",
        ... )
        >>> raise PuppetDBTerminusError("Operation failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: EnumErrorCode | None = None,
        context: ModelErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize PuppetDBTerminusError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to OPERATION_FAILED)
            context: Bundled terminus context (operation, target_name, etc.)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            correlation_id = context.correlation_id

        super().__init__(message)
        self.model = ModelErrorDetails(
            message=message,
            error_code=error_code or EnumErrorCode.OPERATION_FAILED,
            correlation_id=correlation_id,
            context=structured_context,
        )

    @property
    def error_code(self) -> EnumErrorCode:
        return self.model.error_code

    @property
    def correlation_id(self) -> UUID | None:
        return self.model.correlation_id


class CommandValidationError(PuppetDBTerminusError):
    """Raised when a command is rejected before anything is sent.

    Example:
        >>> raise CommandValidationError(
        ...     "certname must not be empty",
        ...     context=context,
        ...     certname="",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.VALIDATION_ERROR,
            context=context,
            **extra_context,
        )


class PuppetDBConnectionError(PuppetDBTerminusError):
    """Raised when the HTTP exchange with PuppetDB fails at the transport level.

    Covers refused connections, DNS failures, TLS handshake failures and
    broken connections. Timeouts raise the PuppetDBTimeoutError subclass.
    """

    def __init__(
        self,
        message: str,
        context: ModelErrorContext | None = None,
        error_code: EnumErrorCode | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or EnumErrorCode.CONNECTION_ERROR,
            context=context,
            **extra_context,
        )


class PuppetDBTimeoutError(PuppetDBConnectionError):
    """Raised when a command submission exceeds its timeout.

    Example:
        >>> raise PuppetDBTimeoutError(
        ...     "Command submission timed out after 30.0s",
        ...     context=context,
        ...     timeout_seconds=30.0,
        ... )
    """

    def __init__(
        self,
        message: str,
        context: ModelErrorContext | None = None,
        timeout_seconds: float | None = None,
        **extra_context: object,
    ) -> None:
        if timeout_seconds is not None:
            extra_context["timeout_seconds"] = timeout_seconds
        super().__init__(
            message=message,
            context=context,
            error_code=EnumErrorCode.TIMEOUT,
            **extra_context,
        )
        self.timeout_seconds = timeout_seconds


class CommandSubmissionError(PuppetDBTerminusError):
    """Raised when PuppetDB answers a command with a non-success status.

    The status code and the (sanitized) response body are kept for
    diagnostics. A deprecation notice returned on the same response is
    attached as ``deprecation_warning``; it never changes the failure.

    Example:
        >>> raise CommandSubmissionError(
        ...     "PuppetDB rejected 'deactivate node' command",
        ...     status_code=503,
        ...     response_body="Service Unavailable",
        ...     context=context,
        ... )
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response_body: str = "",
        deprecation_warning: str | None = None,
        context: ModelErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.SUBMISSION_FAILED,
            context=context,
            status_code=status_code,
            response_body=response_body,
            **extra_context,
        )
        self.status_code = status_code
        self.response_body = response_body
        self.deprecation_warning = deprecation_warning


class ResponseFormatError(PuppetDBTerminusError):
    """Raised when a success response cannot be read as a command acknowledgment."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str = "",
        deprecation_warning: str | None = None,
        context: ModelErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.RESPONSE_FORMAT_ERROR,
            context=context,
            status_code=status_code,
            response_body=response_body,
            **extra_context,
        )
        self.status_code = status_code
        self.response_body = response_body
        self.deprecation_warning = deprecation_warning


class WireTimeFormatError(PuppetDBTerminusError):
    """Raised when a string does not match the wire timestamp grammar."""

    def __init__(
        self,
        message: str,
        context: ModelErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.WIRE_TIME_FORMAT_ERROR,
            context=context,
            **extra_context,
        )


class ConfigurationError(PuppetDBTerminusError):
    """Raised when terminus configuration cannot be loaded or validated.

    Used for unreadable config files, invalid YAML, malformed environment
    variables and schema violations.
    """

    def __init__(
        self,
        message: str,
        context: ModelErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


__all__: list[str] = [
    "CommandSubmissionError",
    "CommandValidationError",
    "ConfigurationError",
    "PuppetDBConnectionError",
    "PuppetDBTerminusError",
    "PuppetDBTimeoutError",
    "ResponseFormatError",
    "WireTimeFormatError",
]
