# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB Command Name Enumeration.

Defines the command names this terminus submits to the PuppetDB command
endpoint, together with the wire version each command is sent at.
"""

from enum import Enum


class EnumCommandName(str, Enum):
    """Command names understood by the PuppetDB command endpoint.

    Attributes:
        DEACTIVATE_NODE: Mark a node as deactivated in PuppetDB.
    """

    DEACTIVATE_NODE = "deactivate node"

    @property
    def query_value(self) -> str:
        """Command name as sent in the ``command`` query parameter."""
        return self.value.replace(" ", "_")


#: Wire version each command is submitted at. Version 3 of
#: ``deactivate node`` is the first to carry ``producer_timestamp``.
COMMAND_VERSIONS: dict[EnumCommandName, int] = {
    EnumCommandName.DEACTIVATE_NODE: 3,
}


__all__ = ["COMMAND_VERSIONS", "EnumCommandName"]
