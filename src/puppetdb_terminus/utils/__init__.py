# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the PuppetDB terminus.

This package provides common utilities used across the terminus:
    - util_wire_time: PuppetDB wire timestamp formatting and parsing
    - util_env_parsing: Type-safe environment variable parsing with validation
    - util_error_sanitization: Response body sanitization for errors and logs
"""

from puppetdb_terminus.utils.util_env_parsing import (
    parse_env_bool,
    parse_env_float,
    parse_env_str,
)
from puppetdb_terminus.utils.util_error_sanitization import (
    SENSITIVE_PATTERNS,
    sanitize_error_string,
)
from puppetdb_terminus.utils.util_wire_time import (
    ensure_utc,
    format_wire_time,
    parse_wire_time,
    truncate_to_wire_precision,
)

__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "ensure_utc",
    "format_wire_time",
    "parse_env_bool",
    "parse_env_float",
    "parse_env_str",
    "parse_wire_time",
    "sanitize_error_string",
    "truncate_to_wire_precision",
]
