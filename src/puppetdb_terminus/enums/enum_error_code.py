# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Terminus Error Code Enumeration.

Stable error codes attached to every terminus error, so callers can branch
on the failure kind without matching exception messages.
"""

from enum import Enum


class EnumErrorCode(str, Enum):
    """Error codes for PuppetDB terminus failures.

    Attributes:
        OPERATION_FAILED: Generic failure (base error default)
        VALIDATION_ERROR: Caller input rejected before any network call
        CONNECTION_ERROR: Transport-level failure talking to PuppetDB
        TIMEOUT: Request did not complete within the timeout
        SUBMISSION_FAILED: PuppetDB answered with a non-success status
        RESPONSE_FORMAT_ERROR: Success status with an unusable body
        WIRE_TIME_FORMAT_ERROR: Timestamp string does not match the wire grammar
        INVALID_CONFIGURATION: Configuration could not be loaded or validated
    """

    OPERATION_FAILED = "PUPPETDB_TERMINUS_001_OPERATION_FAILED"
    VALIDATION_ERROR = "PUPPETDB_TERMINUS_002_VALIDATION_ERROR"
    CONNECTION_ERROR = "PUPPETDB_TERMINUS_003_CONNECTION_ERROR"
    TIMEOUT = "PUPPETDB_TERMINUS_004_TIMEOUT"
    SUBMISSION_FAILED = "PUPPETDB_TERMINUS_005_SUBMISSION_FAILED"
    RESPONSE_FORMAT_ERROR = "PUPPETDB_TERMINUS_006_RESPONSE_FORMAT_ERROR"
    WIRE_TIME_FORMAT_ERROR = "PUPPETDB_TERMINUS_007_WIRE_TIME_FORMAT_ERROR"
    INVALID_CONFIGURATION = "PUPPETDB_TERMINUS_008_INVALID_CONFIGURATION"


__all__ = ["EnumErrorCode"]
