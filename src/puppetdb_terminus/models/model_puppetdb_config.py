# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB terminus configuration.

Configuration can be built directly, read from ``PUPPETDB_*`` environment
variables, or loaded from a YAML file::

    server_url: https://puppetdb.example.com:8081
    timeout_seconds: 30
    ssl_ca_file: /etc/puppetlabs/puppet/ssl/certs/ca.pem
    ssl_cert_file: /etc/puppetlabs/puppet/ssl/certs/agent.pem
    ssl_key_file: /etc/puppetlabs/puppet/ssl/private_keys/agent.pem
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import urlsplit

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from puppetdb_terminus.errors import ConfigurationError, ModelErrorContext
from puppetdb_terminus.models.model_connection_target import ModelConnectionTarget
from puppetdb_terminus.utils.util_env_parsing import (
    parse_env_bool,
    parse_env_float,
    parse_env_str,
)

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "https://puppetdb:8081"
DEFAULT_COMMAND_PATH = "/pdb/cmd/v1"
DEFAULT_PORTS = {"http": 80, "https": 443}


class ModelPuppetDBConfig(BaseModel):
    """Settings for submitting commands to PuppetDB.

    Attributes:
        server_url: Base URL of the PuppetDB server.
        command_path: Path of the command submission endpoint.
        timeout_seconds: Default per-request timeout.
        max_timeout_seconds: Upper bound applied to any per-call timeout.
        verify_tls: Verify the server certificate.
        ssl_ca_file: CA bundle for server verification.
        ssl_cert_file: Client certificate.
        ssl_key_file: Client private key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    server_url: str = DEFAULT_SERVER_URL
    command_path: str = DEFAULT_COMMAND_PATH
    timeout_seconds: float = Field(default=30.0, gt=0)
    max_timeout_seconds: float = Field(default=120.0, gt=0)
    verify_tls: bool = True
    ssl_ca_file: str | None = None
    ssl_cert_file: str | None = None
    ssl_key_file: str | None = None

    @field_validator("server_url", mode="after")
    @classmethod
    def validate_server_url(cls, v: str) -> str:
        """Require an absolute http(s) URL with a host.

        Raises:
            ValueError: If the URL has another scheme or no host.
        """
        parts = urlsplit(v)
        if parts.scheme not in DEFAULT_PORTS or not parts.hostname:
            raise ValueError(f"server_url must be an absolute http(s) URL, got {v!r}")
        # urlsplit only range-checks the port when .port is read.
        if parts.port == 0:
            raise ValueError(f"server_url port must be non-zero, got {v!r}")
        return v.rstrip("/")

    @field_validator("command_path", mode="after")
    @classmethod
    def validate_command_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"command_path must start with '/', got {v!r}")
        return v

    @model_validator(mode="after")
    def validate_timeouts(self) -> ModelPuppetDBConfig:
        if self.timeout_seconds > self.max_timeout_seconds:
            raise ValueError(
                f"timeout_seconds ({self.timeout_seconds}) exceeds "
                f"max_timeout_seconds ({self.max_timeout_seconds})"
            )
        if self.ssl_key_file and not self.ssl_cert_file:
            raise ValueError("ssl_key_file requires ssl_cert_file")
        return self

    def to_target(self) -> ModelConnectionTarget:
        """Return the connection pool key for this server."""
        parts = urlsplit(self.server_url)
        return ModelConnectionTarget(
            scheme=parts.scheme,
            host=parts.hostname,
            port=parts.port or DEFAULT_PORTS[parts.scheme],
            verify_tls=self.verify_tls,
            ssl_ca_file=self.ssl_ca_file,
            ssl_cert_file=self.ssl_cert_file,
            ssl_key_file=self.ssl_key_file,
        )

    @classmethod
    def from_environment(cls) -> ModelPuppetDBConfig:
        """Create configuration from ``PUPPETDB_*`` environment variables.

        Raises:
            ConfigurationError: If a variable is malformed or the resulting
                configuration is invalid.
        """
        values = {
            "server_url": parse_env_str("PUPPETDB_SERVER_URL", DEFAULT_SERVER_URL),
            "command_path": parse_env_str("PUPPETDB_COMMAND_PATH", DEFAULT_COMMAND_PATH),
            "timeout_seconds": parse_env_float(
                "PUPPETDB_TIMEOUT_SECONDS", 30.0, min_value=0.1
            ),
            "max_timeout_seconds": parse_env_float(
                "PUPPETDB_MAX_TIMEOUT_SECONDS", 120.0, min_value=0.1
            ),
            "verify_tls": parse_env_bool("PUPPETDB_VERIFY_TLS", True),
            "ssl_ca_file": parse_env_str("PUPPETDB_SSL_CA_FILE"),
            "ssl_cert_file": parse_env_str("PUPPETDB_SSL_CERT_FILE"),
            "ssl_key_file": parse_env_str("PUPPETDB_SSL_KEY_FILE"),
        }
        return cls._validated(values, source="environment")

    @classmethod
    def from_yaml(cls, path: str | Path) -> ModelPuppetDBConfig:
        """Load configuration from a YAML mapping.

        Args:
            path: Path to the YAML file.

        Raises:
            ConfigurationError: If the file cannot be read, is not valid
                YAML, is not a mapping, or fails validation.
        """
        config_path = Path(path)
        context = ModelErrorContext(operation="load_config", target_name=str(config_path))
        try:
            with config_path.open(encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot read PuppetDB config file {config_path}: {exc}",
                context=context,
            ) from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"Invalid YAML in PuppetDB config file {config_path}: {exc}",
                context=context,
            ) from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"PuppetDB config file {config_path} must contain a mapping, "
                f"got {type(raw).__name__}",
                context=context,
            )
        return cls._validated(raw, source=str(config_path))

    @classmethod
    def _validated(cls, values: dict[str, object], source: str) -> ModelPuppetDBConfig:
        try:
            config = cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid PuppetDB configuration from {source}: {exc}",
                context=ModelErrorContext(operation="load_config", target_name=source),
            ) from exc
        logger.debug(
            "Loaded PuppetDB configuration",
            extra={"source": source, "server_url": config.server_url},
        )
        return config


__all__ = ["DEFAULT_COMMAND_PATH", "DEFAULT_SERVER_URL", "ModelPuppetDBConfig"]
