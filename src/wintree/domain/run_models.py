from __future__ import annotations

"""
Tree Run Domain Data Models.

Defines the result object and factory functions used to communicate the
outcome of a complete tree run between the service layer and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from wintree.domain.tree_models import SubtreeFailure

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeRunResult:
    """
    Unified result object of a tree run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Machine-readable failure category, empty on success.
        root_path: Normalized root directory.
        header: Header line written before the tree body.
        lines: Rendered tree body lines.
        failures: Subtrees skipped because they could not be read.
        output_file: Destination file, empty when writing to the console.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    root_path: str

    error_kind: str = ""
    header: str = ""
    lines: List[str] = field(default_factory=list)
    failures: List[SubtreeFailure] = field(default_factory=list)
    output_file: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        error_kind: str,
        root_path: str,
        output_file: str = "",
) -> TreeRunResult:
    """
    Create a failed run result.

    Args:
        error: Detailed error description.
        error_kind: Failure category (see domain.constants).
        root_path: The target directory.
        output_file: Destination file, if any.
    """
    return TreeRunResult(
        ok=False,
        error=error,
        error_kind=error_kind,
        root_path=root_path,
        output_file=output_file,
    )


def create_success_result(
        root_path: str,
        header: str,
        lines: List[str],
        failures: List[SubtreeFailure],
        output_file: str = "",
) -> TreeRunResult:
    """
    Create a successful run result with computed statistics.

    Unreadable subtrees do not make a run fail; they are listed in
    'failures' and counted in the summary.
    """
    directories = sum(1 for line in lines if line.endswith("/"))
    summary = {
        "lines": len(lines),
        "directories": directories,
        "files": len(lines) - directories,
        "failures": len(failures),
    }

    return TreeRunResult(
        ok=True,
        error="",
        root_path=root_path,
        header=header,
        lines=list(lines),
        failures=list(failures),
        output_file=output_file,
        summary=summary,
    )
