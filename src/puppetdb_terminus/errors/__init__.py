# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB Terminus Errors Module.

Exports:
    ModelErrorContext: Configuration model for bundled error context
    ModelErrorDetails: Structured details exposed as ``error.model``
    PuppetDBTerminusError: Base terminus error class
    CommandValidationError: Command rejected before submission
    PuppetDBConnectionError: Transport-level failure
    PuppetDBTimeoutError: Submission exceeded its timeout
    CommandSubmissionError: Non-success HTTP status from PuppetDB
    ResponseFormatError: Success status with an unparsable body
    WireTimeFormatError: Wire timestamp parse failure
    ConfigurationError: Configuration loading or validation failure

Correlation ID Assignment:
    Errors raised on the submission path carry the correlation_id of the
    deactivation call that produced them. Callers that supply their own
    correlation_id get it back on ``error.correlation_id``.

Error Sanitization Guidelines:
    Response bodies returned by PuppetDB are passed through
    ``sanitize_error_string`` before they are attached to an error, so a
    misbehaving proxy echoing credentials cannot leak them into logs.
"""

from puppetdb_terminus.errors.model_error_context import ModelErrorContext
from puppetdb_terminus.errors.model_error_details import ModelErrorDetails
from puppetdb_terminus.errors.terminus_errors import (
    CommandSubmissionError,
    CommandValidationError,
    ConfigurationError,
    PuppetDBConnectionError,
    PuppetDBTerminusError,
    PuppetDBTimeoutError,
    ResponseFormatError,
    WireTimeFormatError,
)

__all__: list[str] = [
    # Configuration models
    "ModelErrorContext",
    "ModelErrorDetails",
    # Error classes
    "PuppetDBTerminusError",
    "CommandValidationError",
    "PuppetDBConnectionError",
    "PuppetDBTimeoutError",
    "CommandSubmissionError",
    "ResponseFormatError",
    "WireTimeFormatError",
    "ConfigurationError",
]
