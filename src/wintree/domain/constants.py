from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the connector glyph tables, the depth
sentinel and the process exit codes shared by the CLI and the service layer.
"""

from typing import Dict

# Sentinel for "no depth limit"
UNLIMITED_DEPTH = -1

DIRECTORY_SUFFIX = "/"

# -----------------------------------------------------------------------------
# CONNECTOR GLYPHS
# -----------------------------------------------------------------------------
UNICODE_GLYPHS: Dict[str, str] = {
    "vertical": "│   ",
    "branch": "├── ",
    "corner": "└── ",
    "space": "    ",
}

ASCII_GLYPHS: Dict[str, str] = {
    "vertical": "|   ",
    "branch": "|-- ",
    "corner": "\\-- ",
    "space": "    ",
}

# -----------------------------------------------------------------------------
# PROCESS EXIT CODES
# -----------------------------------------------------------------------------
EXIT_OK = 0
EXIT_ROOT_INVALID = 1
EXIT_USAGE = 2
EXIT_OUTPUT_FAILURE = 3
EXIT_INTERRUPTED = 130

# Error kinds reported by the orchestration layer
ERROR_ROOT_INVALID = "root_invalid"
ERROR_OUTPUT_FAILURE = "output_failure"
