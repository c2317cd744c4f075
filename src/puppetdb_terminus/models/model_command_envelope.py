# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB command envelope models.

A command envelope is built fresh for every submission, serialized into the
request body and discarded once the request completes. Its wire shape is::

    {
      "command": "deactivate node",
      "version": 3,
      "payload": {
        "certname": "something.example.com",
        "producer_timestamp": "2015-01-02T03:04:05.678Z"
      }
    }
"""

from __future__ import annotations

import json
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from puppetdb_terminus.enums import EnumCommandName
from puppetdb_terminus.errors import WireTimeFormatError
from puppetdb_terminus.utils.util_wire_time import format_wire_time, parse_wire_time


class ModelCommandPayload(BaseModel):
    """Payload of a node-scoped PuppetDB command.

    Attributes:
        certname: Certificate name of the node the command applies to.
        producer_timestamp: Wire time at which the command was produced.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    certname: str = Field(min_length=1, description="Node certificate name")
    producer_timestamp: str = Field(
        description="Wire-encoded instant the command was produced",
    )

    @field_validator("certname", mode="after")
    @classmethod
    def validate_certname(cls, v: str) -> str:
        """Reject whitespace-only certnames.

        Raises:
            ValueError: If the certname contains no visible characters.
        """
        if not v.strip():
            raise ValueError("certname must not be blank")
        return v

    @field_validator("producer_timestamp", mode="after")
    @classmethod
    def validate_producer_timestamp(cls, v: str) -> str:
        """Ensure the producer timestamp follows the wire grammar.

        Raises:
            ValueError: If the value cannot be parsed as wire time.
        """
        try:
            parse_wire_time(v)
        except WireTimeFormatError as exc:
            raise ValueError(str(exc)) from exc
        return v

    @property
    def produced_at(self) -> datetime:
        """Producer timestamp decoded back to an aware UTC datetime."""
        return parse_wire_time(self.producer_timestamp)


class ModelCommandEnvelope(BaseModel):
    """A complete PuppetDB command ready for submission."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    command: EnumCommandName = Field(description="Command name")
    version: int = Field(gt=0, description="Command wire version")
    payload: ModelCommandPayload

    @classmethod
    def build(
        cls,
        command: EnumCommandName,
        version: int,
        certname: str,
        now: datetime,
    ) -> ModelCommandEnvelope:
        """Assemble an envelope stamped with ``now``.

        ``now`` is always supplied by the caller so the result is fully
        determined by the arguments.

        Args:
            command: Command to submit.
            version: Wire version of ``command``.
            certname: Node the command applies to.
            now: Instant the command is produced at.

        Returns:
            Envelope whose ``payload.producer_timestamp`` equals
            ``format_wire_time(now)``.
        """
        return cls(
            command=command,
            version=version,
            payload=ModelCommandPayload(
                certname=certname,
                producer_timestamp=format_wire_time(now),
            ),
        )

    @property
    def certname(self) -> str:
        return self.payload.certname

    def to_wire(self) -> dict[str, object]:
        """Return the JSON-ready request body."""
        return self.model_dump(mode="json")

    def to_json_bytes(self) -> bytes:
        """Serialize the request body as compact UTF-8 JSON."""
        return json.dumps(
            self.to_wire(), separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")


__all__ = ["ModelCommandEnvelope", "ModelCommandPayload"]
