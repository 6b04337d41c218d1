from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures that materialize directory trees under tmp_path.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
def _materialize(base: Path, layout: Dict[str, Any]) -> None:
    """Create directories for dict values and files for string values."""
    for name, value in layout.items():
        target = base / name
        if isinstance(value, dict):
            target.mkdir()
            _materialize(target, value)
        else:
            target.write_text(value, encoding="utf-8")


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, Any], str], Path]:
    """
    Return a factory that builds a directory layout and returns its root.

    Layout dicts map names to nested dicts (directories) or strings
    (file contents).
    """
    def _factory(layout: Dict[str, Any], root_name: str = "root") -> Path:
        root = tmp_path / root_name
        root.mkdir()
        _materialize(root, layout)
        return root

    return _factory


@pytest.fixture
def my_app(make_tree: Callable[..., Path]) -> Path:
    """
    Sample web project.

    Structure:
    /my-app
      /src
        /components
          Header.js
          Footer.js
        /utils
        index.js
      /public
      package.json
      README.md
    """
    return make_tree(
        {
            "src": {
                "components": {"Header.js": "", "Footer.js": ""},
                "utils": {},
                "index.js": "",
            },
            "public": {},
            "package.json": "{}",
            "README.md": "# my-app",
        },
        root_name="my-app",
    )
