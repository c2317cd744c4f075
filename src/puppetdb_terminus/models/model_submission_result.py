# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Command submission acknowledgment and result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from puppetdb_terminus.enums import EnumCommandName


class ModelCommandAcknowledgment(BaseModel):
    """Body PuppetDB returns after accepting a command.

    Only ``uuid`` is required; PuppetDB may add fields in later versions,
    so unknown keys are ignored rather than rejected.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    uuid: str = Field(min_length=1, description="Identifier PuppetDB assigned to the command")


class ModelSubmissionResult(BaseModel):
    """Outcome of a successful command submission.

    Attributes:
        uuid: Identifier PuppetDB assigned to the queued command.
        deprecation_warning: Value of the deprecation header, if PuppetDB sent one.
        command: Command that was submitted.
        certname: Node the command applied to.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    uuid: str = Field(min_length=1)
    deprecation_warning: str | None = None
    command: EnumCommandName | None = None
    certname: str | None = None


__all__ = ["ModelCommandAcknowledgment", "ModelSubmissionResult"]
