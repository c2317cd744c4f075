# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB terminus services."""

from puppetdb_terminus.services.service_node_deactivation import (
    ServiceNodeDeactivation,
)

__all__: list[str] = ["ServiceNodeDeactivation"]
