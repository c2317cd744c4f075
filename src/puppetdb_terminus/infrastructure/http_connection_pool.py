# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP Connection Pool for PuppetDB.

Keeps one keep-alive ``httpx.AsyncClient`` per connection target. Clients
are created lazily on first use and shared by every concurrent submission
to the same target; httpx multiplexes requests over its own connection
pool, so callers never hold a client exclusively.

The pool owns every client it creates. Borrowers must not close them;
call ``aclose()`` (or use the pool as an async context manager) on
shutdown instead.
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from types import TracebackType

import httpx

from puppetdb_terminus.errors import ConfigurationError, ModelErrorContext
from puppetdb_terminus.models.model_connection_target import ModelConnectionTarget

logger = logging.getLogger(__name__)


def build_ssl_context(target: ModelConnectionTarget) -> ssl.SSLContext:
    """Create the TLS context for an https target.

    Raises:
        ConfigurationError: If the CA bundle or client certificate cannot be loaded.
    """
    try:
        context = ssl.create_default_context(cafile=target.ssl_ca_file)
        if not target.verify_tls:
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        if target.ssl_cert_file:
            context.load_cert_chain(target.ssl_cert_file, target.ssl_key_file)
    except (OSError, ssl.SSLError) as exc:
        raise ConfigurationError(
            f"Cannot load TLS material for {target.name}: {exc}",
            context=ModelErrorContext(operation="build_ssl_context", target_name=target.name),
        ) from exc
    return context


class HttpConnectionPool:
    """Lazily created, shared ``httpx.AsyncClient`` instances keyed by target.

    Example:
        >>> async with HttpConnectionPool() as pool:
        ...     client = await pool.connect(config.to_target())
        ...     response = await client.post("/pdb/cmd/v1", content=body)
    """

    def __init__(
        self,
        max_connections: int = 20,
        max_keepalive_connections: int = 10,
        keepalive_expiry: float = 30.0,
        default_timeout_seconds: float = 30.0,
    ) -> None:
        """Initialize an empty pool.

        Args:
            max_connections: Connection limit per target.
            max_keepalive_connections: Idle keep-alive connections kept per target.
            keepalive_expiry: Seconds an idle connection is kept open.
            default_timeout_seconds: Timeout for requests that do not pass one.
        """
        self._limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
            keepalive_expiry=keepalive_expiry,
        )
        self._default_timeout = httpx.Timeout(default_timeout_seconds)
        self._clients: dict[ModelConnectionTarget, httpx.AsyncClient] = {}
        self._lock = asyncio.Lock()

    async def connect(self, target: ModelConnectionTarget) -> httpx.AsyncClient:
        """Return the shared client for ``target``, creating it on first use.

        Uses double-checked locking so concurrent first requests for the same
        target do not create (and leak) duplicate clients.
        """
        client = self._clients.get(target)
        if client is not None:
            return client

        async with self._lock:
            client = self._clients.get(target)
            if client is not None:
                return client

            verify: ssl.SSLContext | bool = (
                build_ssl_context(target) if target.scheme == "https" else True
            )
            client = httpx.AsyncClient(
                base_url=target.base_url,
                verify=verify,
                limits=self._limits,
                timeout=self._default_timeout,
            )
            self._clients[target] = client
            logger.debug(
                "Created pooled HTTP client",
                extra={"target": target.name, "pool_size": len(self._clients)},
            )
            return client

    def __len__(self) -> int:
        return len(self._clients)

    async def aclose(self) -> None:
        """Close every client this pool created."""
        async with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        for client in clients:
            await client.aclose()

    async def __aenter__(self) -> HttpConnectionPool:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__: list[str] = ["HttpConnectionPool", "build_ssl_context"]
