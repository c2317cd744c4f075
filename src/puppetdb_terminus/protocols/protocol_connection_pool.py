# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the HTTP connection pool collaborator.

The command handler borrows a ready-to-use client per request and never
closes it; the pool owns client lifetime, keep-alive and TLS setup.

Example:
    >>> class HandlerCommandSubmission:
    ...     def __init__(self, pool: ProtocolConnectionPool, ...):
    ...         self._pool = pool
    ...
    ...     async def submit(self, envelope):
    ...         client = await self._pool.connect(self._target)
    ...         return await client.post(...)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import httpx

    from puppetdb_terminus.models.model_connection_target import ModelConnectionTarget


@runtime_checkable
class ProtocolConnectionPool(Protocol):
    """Provides pooled HTTP clients keyed by connection target."""

    async def connect(self, target: ModelConnectionTarget) -> httpx.AsyncClient:
        """Return a client ready to send requests to ``target``.

        Args:
            target: Host, port, scheme and TLS settings to connect with.

        Returns:
            An open ``httpx.AsyncClient`` owned by the pool.
        """
        ...


__all__ = ["ProtocolConnectionPool"]
