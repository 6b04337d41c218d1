from __future__ import annotations

"""
wintree: Windows-style directory tree rendering for the terminal.
"""

__version__ = "1.0.0"
