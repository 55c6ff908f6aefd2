#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Version information for AzkabanTool
"""

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history
VERSION_HISTORY = [
    "0.2.0 - Structured response parsing, request timeouts, atomic scaffolding",
    "0.1.0 - Initial release with collection/flow scaffolding and upload/execute",
]
