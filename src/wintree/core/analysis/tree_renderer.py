from __future__ import annotations

"""
Tree Renderer.

Walks a directory hierarchy and converts it into the visual line format of
the Windows 'tree' utility. Owns the entry ordering and filtering policy,
the connector prefix propagation and the depth limit. Unreadable
directories are reported as data so that the rest of the tree still renders.
"""

import functools
import logging
import os
from typing import List, Tuple

from pyuca import Collator

from wintree.domain.constants import DIRECTORY_SUFFIX
from wintree.domain.tree_models import (
    DirectoryEntry,
    EntryKind,
    GlyphSet,
    RenderOptions,
    SubtreeFailure,
    SubtreeResult,
    TreeRender,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root_path: str, options: RenderOptions | None = None) -> TreeRender:
    """
    Render the children of a directory as connector-prefixed lines.

    The root itself is not emitted; callers print their own header line.
    The caller is responsible for checking that root_path exists and is a
    directory.

    Args:
        root_path: Absolute path of the directory to render.
        options: Render options. Defaults to directories only, Unicode glyphs
                 and unlimited depth.

    Returns:
        TreeRender: Lines in depth-first pre-order plus any skipped subtrees.
    """
    opts = options or RenderOptions()
    glyphs = GlyphSet.for_options(opts)

    logger.debug(
        f"Rendering tree for {root_path} "
        f"(files={opts.show_files}, ascii={opts.use_ascii}, max_depth={opts.max_depth})"
    )

    result = _render_subtree(root_path, "", 0, opts, glyphs)
    return TreeRender(lines=result.lines, failures=result.failures)


def list_entries(dir_path: str, show_files: bool) -> List[DirectoryEntry]:
    """
    Read, filter and sort the direct children of a directory.

    Directories come first, then files; within a kind, names follow the
    Unicode collation order used for English.

    Args:
        dir_path: Directory to enumerate.
        show_files: Keep file entries when True.

    Returns:
        List[DirectoryEntry]: Ordered entries.

    Raises:
        OSError: If the directory cannot be listed.
    """
    entries: List[DirectoryEntry] = []

    with os.scandir(dir_path) as it:
        for item in it:
            kind = EntryKind.DIRECTORY if _is_directory(item) else EntryKind.FILE
            if kind is EntryKind.FILE and not show_files:
                continue
            entries.append(DirectoryEntry(name=item.name, kind=kind, path=item.path))

    entries.sort(key=entry_sort_key)
    return entries


def entry_sort_key(entry: DirectoryEntry) -> Tuple[int, Tuple[int, ...], str]:
    """Total ordering key: kind, collation key, then the raw name."""
    kind_rank = 0 if entry.is_dir else 1
    return kind_rank, _collator().sort_key(entry.name), entry.name

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_subtree(
        path: str,
        prefix: str,
        depth: int,
        options: RenderOptions,
        glyphs: GlyphSet,
) -> SubtreeResult:
    """
    Recursively render one directory level.

    Each call builds its own local line list; the prefix is a fresh string
    per branch so siblings never observe each other's state.
    """
    if options.depth_limited and depth > options.max_depth:
        return SubtreeResult()

    try:
        entries = list_entries(path, options.show_files)
    except OSError as e:
        reason = e.strerror or str(e)
        logger.debug(f"Subtree unreadable, skipping: {path} ({reason})")
        return SubtreeResult.failed(path, reason)

    lines: List[str] = []
    failures: List[SubtreeFailure] = []
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = glyphs.corner if is_last else glyphs.branch

        if not entry.is_dir:
            lines.append(f"{prefix}{connector}{entry.name}")
            continue

        lines.append(f"{prefix}{connector}{entry.name}{DIRECTORY_SUFFIX}")
        child_prefix = prefix + (glyphs.space if is_last else glyphs.vertical)
        child = _render_subtree(entry.path, child_prefix, depth + 1, options, glyphs)
        lines.extend(child.lines)
        failures.extend(child.failures)

    return SubtreeResult(lines=lines, failures=failures)


def _is_directory(item: os.DirEntry) -> bool:
    """Resolve the entry kind following symlinks; undeterminable kinds are files."""
    try:
        return item.is_dir()
    except OSError:
        return False


@functools.lru_cache(maxsize=1)
def _collator() -> Collator:
    """Lazily build the shared collator (loads the DUCET table once)."""
    return Collator()
