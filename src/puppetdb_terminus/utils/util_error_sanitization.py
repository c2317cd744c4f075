# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization utilities.

PuppetDB error responses are attached to CommandSubmissionError and
ResponseFormatError for diagnostics. Before that happens they pass through
``sanitize_error_string`` so that bodies echoing credentials (a proxy
returning its own config, a stack trace containing a connection string)
are redacted, and long HTML error pages are truncated.

Example:
    >>> sanitize_error_string("Connection failed: postgres://user:pass@db:5432")
    '[REDACTED - potentially sensitive data]'
    >>> sanitize_error_string("Service Unavailable")
    'Service Unavailable'
"""

from __future__ import annotations

# Patterns that may indicate sensitive data in error messages.
# These patterns are checked case-insensitively against the error message.
SENSITIVE_PATTERNS: tuple[str, ...] = (
    # Credentials
    "password",
    "passwd",
    # Secrets and keys
    "secret",
    "token",
    "api_key",
    "apikey",
    "api-key",
    "private_key",
    "privatekey",
    "private-key",
    # Authentication
    "credential",
    "bearer",
    "authorization",
    # Connection strings (often contain credentials)
    "connection_string",
    "user:pass",
    "username:password",
    # Certificate and key material
    "-----begin",
    "-----end",
    # Database connection URI schemes (PuppetDB talks to PostgreSQL)
    "postgres://",
    "postgresql://",
    "jdbc:",
)


def sanitize_error_string(error_str: str, max_length: int = 500) -> str:
    """Sanitize a raw error string for safe inclusion in logs and errors.

    Sanitization rules:
        1. If a sensitive pattern is present, return a generic redacted message
        2. Truncate long messages to ``max_length`` characters

    Args:
        error_str: The error string to sanitize
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        Sanitized error message safe for storage and logging.
    """
    if not error_str:
        return ""

    error_lower = error_str.lower()
    for pattern in SENSITIVE_PATTERNS:
        if pattern in error_lower:
            return "[REDACTED - potentially sensitive data]"

    if len(error_str) > max_length:
        return error_str[:max_length] + "... [truncated]"

    return error_str


__all__: list[str] = [
    "SENSITIVE_PATTERNS",
    "sanitize_error_string",
]
