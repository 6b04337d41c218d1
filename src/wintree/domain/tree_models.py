from __future__ import annotations

"""
Directory Tree Data Models.

Provides the immutable value objects exchanged by the tree renderer:
render options, the connector glyph set, ephemeral directory entries and
the tagged per-subtree results used to carry partial failures as data.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from wintree.domain.constants import ASCII_GLYPHS, UNICODE_GLYPHS, UNLIMITED_DEPTH

# -----------------------------------------------------------------------------
# RENDER CONFIGURATION
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderOptions:
    """
    Options governing a single render call.

    Attributes:
        show_files: Include file entries (directories are always listed).
        use_ascii: Draw connectors with ASCII-only glyphs.
        max_depth: Deepest recursion level to render, -1 for unlimited.
    """
    show_files: bool = False
    use_ascii: bool = False
    max_depth: int = UNLIMITED_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < UNLIMITED_DEPTH:
            raise ValueError(
                f"max_depth must be >= {UNLIMITED_DEPTH}, received {self.max_depth}."
            )

    @property
    def depth_limited(self) -> bool:
        return self.max_depth != UNLIMITED_DEPTH


@dataclass(frozen=True)
class GlyphSet:
    """
    The four connector strings used to draw one tree.

    Attributes:
        vertical: Continuation under a non-last ancestor.
        branch: Connector for a non-last sibling.
        corner: Connector for the last sibling.
        space: Continuation under a last ancestor.
    """
    vertical: str
    branch: str
    corner: str
    space: str

    @classmethod
    def for_options(cls, options: RenderOptions) -> GlyphSet:
        table = ASCII_GLYPHS if options.use_ascii else UNICODE_GLYPHS
        return cls(**table)

# -----------------------------------------------------------------------------
# FILESYSTEM ENTRIES
# -----------------------------------------------------------------------------

class EntryKind(Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    A single child of a directory, read fresh during traversal.

    Attributes:
        name: Entry name as returned by the filesystem.
        kind: Directory or file.
        path: Absolute filesystem path of the entry.
    """
    name: str
    kind: EntryKind
    path: str

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

# -----------------------------------------------------------------------------
# TAGGED RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SubtreeFailure:
    """
    A directory that could not be listed during traversal.

    Attributes:
        path: Absolute path of the unreadable directory.
        reason: Human-readable cause reported by the operating system.
    """
    path: str
    reason: str


@dataclass(frozen=True)
class SubtreeResult:
    """Lines and failures contributed by one recursive subtree call."""
    lines: List[str] = field(default_factory=list)
    failures: List[SubtreeFailure] = field(default_factory=list)

    @classmethod
    def failed(cls, path: str, reason: str) -> SubtreeResult:
        return cls(lines=[], failures=[SubtreeFailure(path=path, reason=reason)])


@dataclass(frozen=True)
class TreeRender:
    """
    Final output of a render call.

    Attributes:
        lines: Rendered lines in depth-first pre-order.
        failures: Unreadable subtrees skipped during the walk.
    """
    lines: List[str] = field(default_factory=list)
    failures: List[SubtreeFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
