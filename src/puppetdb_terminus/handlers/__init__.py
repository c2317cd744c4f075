# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB terminus handlers.

Exports:
    HandlerCommandSubmission: Submits command envelopes over HTTP
    DEPRECATION_HEADER: Response header carrying deprecation notices
"""

from puppetdb_terminus.handlers.handler_command_submission import (
    DEPRECATION_HEADER,
    REQUEST_HEADERS,
    HandlerCommandSubmission,
)

__all__: list[str] = [
    "DEPRECATION_HEADER",
    "REQUEST_HEADERS",
    "HandlerCommandSubmission",
]
