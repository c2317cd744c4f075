# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB terminus models.

Exports:
    ModelCommandEnvelope: Command ready for submission
    ModelCommandPayload: Node-scoped command payload
    ModelCommandAcknowledgment: Body PuppetDB returns on acceptance
    ModelSubmissionResult: Outcome handed back to the caller
    ModelConnectionTarget: Connection pool key
    ModelPuppetDBConfig: Terminus configuration
"""

from puppetdb_terminus.models.model_command_envelope import (
    ModelCommandEnvelope,
    ModelCommandPayload,
)
from puppetdb_terminus.models.model_connection_target import ModelConnectionTarget
from puppetdb_terminus.models.model_puppetdb_config import ModelPuppetDBConfig
from puppetdb_terminus.models.model_submission_result import (
    ModelCommandAcknowledgment,
    ModelSubmissionResult,
)

__all__: list[str] = [
    "ModelCommandAcknowledgment",
    "ModelCommandEnvelope",
    "ModelCommandPayload",
    "ModelConnectionTarget",
    "ModelPuppetDBConfig",
    "ModelSubmissionResult",
]
