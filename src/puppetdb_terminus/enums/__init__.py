# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB Terminus Enumerations Module.

Exports:
    COMMAND_VERSIONS: Wire version per command name
    EnumCommandName: Command names submitted to PuppetDB
    EnumErrorCode: Error codes carried by terminus errors
"""

from puppetdb_terminus.enums.enum_command_name import (
    COMMAND_VERSIONS,
    EnumCommandName,
)
from puppetdb_terminus.enums.enum_error_code import EnumErrorCode

__all__: list[str] = [
    "COMMAND_VERSIONS",
    "EnumCommandName",
    "EnumErrorCode",
]
