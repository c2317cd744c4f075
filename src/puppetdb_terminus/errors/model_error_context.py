# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Terminus Error Context Configuration Model.

This module defines the configuration model for terminus error context,
bundling the structured fields shared by every error raised on the
command-submission path.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ModelErrorContext(BaseModel):
    """Configuration model for terminus error context.

    Attributes:
        operation: Operation being performed (submit_command, parse_wire_time, etc.)
        target_name: PuppetDB endpoint the operation was aimed at
        correlation_id: Request correlation ID for distributed tracing

    Example:
        >>> context = ModelErrorContext(
        ...     operation="submit_command",
        ...     target_name="https://puppetdb:8081",
        ...     correlation_id=uuid4(),
        ... )
        >>> raise PuppetDBConnectionError("Connection refused", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (submit_command, parse_wire_time, etc.)",
    )
    target_name: str | None = Field(
        default=None,
        description="PuppetDB endpoint the operation was aimed at",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Request correlation ID for distributed tracing",
    )


__all__ = ["ModelErrorContext"]
