from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path normalization, root directory validation and
the display form of paths used in the tree header.
"""

import os
from typing import Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "wintree"
UNIX_APP_DIR_NAME = ".wintree"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for user preferences.

    The directory is not created; it only needs to exist when the user
    places a configuration file there.
    Standards:
    - Windows: %LOCALAPPDATA%/wintree
    - Linux/Mac: ~/.wintree

    Returns:
        str: Absolute path to the application data directory.
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.abspath(os.path.join(base, APP_DIR_NAME))

    return os.path.abspath(os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME))


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def to_display_path(path: str) -> str:
    """Render a path with forward slashes regardless of the host separator."""
    return path.replace("\\", "/")

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def check_root_directory(path: str) -> Tuple[bool, Optional[str]]:
    """
    Verify that a path exists and is a directory.

    Args:
        path: Absolute path to inspect.

    Returns:
        Tuple[bool, Optional[str]]: (Valid flag, Error message if invalid).
    """
    if not os.path.exists(path):
        return False, f"Path not found: {path}"
    if not os.path.isdir(path):
        return False, f"Specified path is not a directory: {path}"
    return True, None
