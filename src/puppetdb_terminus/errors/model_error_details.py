# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Structured error details carried by every terminus error."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from puppetdb_terminus.enums import EnumErrorCode


class ModelErrorDetails(BaseModel):
    """Immutable snapshot of an error, exposed as ``error.model``.

    Attributes:
        message: Human-readable error message
        error_code: Classification of the failure
        correlation_id: Request correlation ID, if one was known
        context: Flattened structured context (operation, target_name, extras)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    message: str
    error_code: EnumErrorCode = EnumErrorCode.OPERATION_FAILED
    correlation_id: UUID | None = None
    context: dict[str, object] = Field(default_factory=dict)


__all__ = ["ModelErrorDetails"]
