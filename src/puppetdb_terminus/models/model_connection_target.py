# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Connection target model used as the connection pool key."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ModelConnectionTarget(BaseModel):
    """Where and how to connect to a PuppetDB server.

    Instances are frozen and hashable, so two targets with identical
    settings share one pooled client.

    Attributes:
        scheme: ``http`` or ``https``.
        host: Server hostname or IP literal.
        port: TCP port.
        verify_tls: Verify the server certificate (https only).
        ssl_ca_file: CA bundle used to verify the server.
        ssl_cert_file: Client certificate presented to the server.
        ssl_key_file: Private key for ``ssl_cert_file``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    scheme: Literal["http", "https"] = "https"
    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)
    verify_tls: bool = True
    ssl_ca_file: str | None = None
    ssl_cert_file: str | None = None
    ssl_key_file: str | None = None

    @property
    def base_url(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{self.scheme}://{host}:{self.port}"

    @property
    def name(self) -> str:
        """Short identifier used in logs and error context."""
        return self.base_url


__all__ = ["ModelConnectionTarget"]
