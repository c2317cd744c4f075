# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""PuppetDB Node Terminus - command submission to PuppetDB.

This package deactivates nodes in PuppetDB by submitting ``deactivate
node`` commands over HTTP, and surfaces PuppetDB deprecation notices
without treating them as failures.

Key Components:
    - ServiceNodeDeactivation: entry point, validates and builds the command
    - HandlerCommandSubmission: HTTP submission and response interpretation
    - ModelCommandEnvelope: typed command body with wire timestamp
    - HttpConnectionPool, ClockSystem, NotifierDeprecationLogging:
      default collaborators
    - Typed errors rooted at PuppetDBTerminusError
"""

__all__: list[str] = []
