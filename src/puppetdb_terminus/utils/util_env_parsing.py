# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type-safe environment variable parsing.

Used by ``ModelPuppetDBConfig.from_environment``. Malformed values raise
ConfigurationError naming the variable instead of a bare ValueError from
deep inside a constructor.
"""

from __future__ import annotations

import math
import os

from puppetdb_terminus.errors import ConfigurationError, ModelErrorContext

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _context(name: str) -> ModelErrorContext:
    return ModelErrorContext(operation=f"parse_env:{name}")


def parse_env_str(name: str, default: str | None = None) -> str | None:
    """Return the stripped value of ``name``, or ``default`` when unset or blank."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def parse_env_float(
    name: str,
    default: float,
    *,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """Parse ``name`` as a float within optional bounds.

    Raises:
        ConfigurationError: If the value is not a finite number or is out of bounds.
    """
    raw = parse_env_str(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"Environment variable {name} must be a number, got {raw!r}",
            context=_context(name),
        ) from exc
    if not math.isfinite(value):
        raise ConfigurationError(
            f"Environment variable {name} must be finite, got {raw!r}",
            context=_context(name),
        )
    if min_value is not None and value < min_value:
        raise ConfigurationError(
            f"Environment variable {name} must be >= {min_value}, got {value}",
            context=_context(name),
        )
    if max_value is not None and value > max_value:
        raise ConfigurationError(
            f"Environment variable {name} must be <= {max_value}, got {value}",
            context=_context(name),
        )
    return value


def parse_env_bool(name: str, default: bool) -> bool:
    """Parse ``name`` as a boolean flag (1/0, true/false, yes/no, on/off).

    Raises:
        ConfigurationError: If the value is not a recognised flag.
    """
    raw = parse_env_str(name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Environment variable {name} must be a boolean flag, got {raw!r}",
        context=_context(name),
    )


__all__: list[str] = [
    "parse_env_bool",
    "parse_env_float",
    "parse_env_str",
]
