from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies entry ordering and filtering, connector and prefix propagation,
depth limiting, glyph selection and the handling of unreadable subtrees.
"""

import os
import sys
from pathlib import Path

import pytest

from wintree.core.analysis import tree_renderer
from wintree.core.analysis.tree_renderer import list_entries, render_tree
from wintree.domain.constants import ASCII_GLYPHS, UNICODE_GLYPHS
from wintree.domain.tree_models import EntryKind, RenderOptions

ALL = RenderOptions(show_files=True)


def _count_visible(path: Path, show_files: bool) -> int:
    """Independent line count: visible entries plus each child directory's count."""
    total = 0
    for child in path.iterdir():
        if child.is_dir():
            total += 1 + _count_visible(child, show_files)
        elif show_files:
            total += 1
    return total


# -----------------------------------------------------------------------------
# Ordering and Filtering
# -----------------------------------------------------------------------------

def test_directories_first_then_collated_names(make_tree):
    root = make_tree({"b.txt": "", "A": {}, "a.txt": "", "B": {}})

    assert render_tree(str(root), ALL).lines == [
        "├── A/",
        "├── B/",
        "├── a.txt",
        "└── b.txt",
    ]


@pytest.mark.skipif(sys.platform in ("darwin", "win32"), reason="Case-insensitive filesystem.")
def test_collation_is_case_aware_not_byte_order(make_tree):
    root = make_tree({"beta": {}, "Alpha": {}, "alpha": {}, "Beta": {}, "gamma": {}})

    names = [line[4:] for line in render_tree(str(root)).lines]

    assert names == ["alpha/", "Alpha/", "beta/", "Beta/", "gamma/"]


def test_list_entries_reports_kinds_and_paths(make_tree):
    root = make_tree({"docs": {}, "setup.cfg": ""})

    entries = list_entries(str(root), show_files=True)

    assert [(e.name, e.kind) for e in entries] == [
        ("docs", EntryKind.DIRECTORY),
        ("setup.cfg", EntryKind.FILE),
    ]
    assert entries[0].path == os.path.join(str(root), "docs")


def test_files_hidden_by_default(make_tree):
    root = make_tree({"lib": {"core.py": ""}, "main.py": ""})

    assert render_tree(str(root)).lines == ["└── lib/"]


def test_files_only_directory_without_show_files_is_empty(make_tree):
    root = make_tree({"a.txt": "", "b.txt": "", "c.md": ""})

    result = render_tree(str(root), RenderOptions(show_files=False))

    assert result.lines == []
    assert result.ok


def test_empty_directory_contributes_no_marker(make_tree):
    root = make_tree({"empty": {}, "full": {"x": {}}})

    assert render_tree(str(root)).lines == [
        "├── empty/",
        "└── full/",
        "    └── x/",
    ]

# -----------------------------------------------------------------------------
# Connectors and Prefixes
# -----------------------------------------------------------------------------

def test_my_app_sample_layout(my_app):
    assert render_tree(str(my_app), ALL).lines == [
        "├── public/",
        "├── src/",
        "│   ├── components/",
        "│   │   ├── Footer.js",
        "│   │   └── Header.js",
        "│   ├── utils/",
        "│   └── index.js",
        "├── package.json",
        "└── README.md",
    ]


def test_last_sibling_uses_corner_at_every_level(make_tree):
    root = make_tree({
        "a": {"a1": {"deep1": {}, "deep2": {}}, "a2": {}},
        "b": {"b1": {}},
    })

    lines = render_tree(str(root)).lines

    assert lines == [
        "├── a/",
        "│   ├── a1/",
        "│   │   ├── deep1/",
        "│   │   └── deep2/",
        "│   └── a2/",
        "└── b/",
        "    └── b1/",
    ]


def test_line_count_matches_recursive_entry_count(make_tree):
    root = make_tree({
        "pkg": {"mod.py": "", "sub": {"x.py": "", "y": {}}},
        "docs": {"index.md": ""},
        "README": "",
    })

    for show_files in (False, True):
        lines = render_tree(str(root), RenderOptions(show_files=show_files)).lines
        assert len(lines) == _count_visible(root, show_files)


def test_rendering_is_idempotent(my_app):
    first = render_tree(str(my_app), ALL)
    second = render_tree(str(my_app), ALL)

    assert "\n".join(first.lines).encode("utf-8") == "\n".join(second.lines).encode("utf-8")

# -----------------------------------------------------------------------------
# Glyph Sets
# -----------------------------------------------------------------------------

def test_ascii_glyphs(my_app):
    lines = render_tree(str(my_app), RenderOptions(show_files=True, use_ascii=True)).lines

    assert lines[:5] == [
        "|-- public/",
        "|-- src/",
        "|   |-- components/",
        "|   |   |-- Footer.js",
        "|   |   \\-- Header.js",
    ]
    assert lines[-1] == "\\-- README.md"


@pytest.mark.parametrize("use_ascii", [False, True])
def test_glyph_sets_never_mix(my_app, use_ascii):
    text = "\n".join(render_tree(str(my_app), RenderOptions(show_files=True, use_ascii=use_ascii)).lines)
    foreign = UNICODE_GLYPHS if use_ascii else ASCII_GLYPHS

    assert foreign["branch"] not in text
    assert foreign["corner"] not in text

# -----------------------------------------------------------------------------
# Depth Limit
# -----------------------------------------------------------------------------

def test_max_depth_zero_lists_only_root_children(make_tree):
    root = make_tree({"child": {"grand": {"leaf.txt": ""}}})

    lines = render_tree(str(root), RenderOptions(show_files=True, max_depth=0)).lines

    assert lines == ["└── child/"]


def test_max_depth_one_prunes_below_grandchildren(make_tree):
    root = make_tree({"child": {"grand": {"deep": {}}, "note.txt": ""}})

    lines = render_tree(str(root), RenderOptions(show_files=True, max_depth=1)).lines

    assert lines == [
        "└── child/",
        "    ├── grand/",
        "    └── note.txt",
    ]


def test_unlimited_depth_reaches_leaves(make_tree):
    root = make_tree({"a": {"b": {"c": {"d": {}}}}})

    assert len(render_tree(str(root)).lines) == 4


def test_negative_depth_below_sentinel_rejected():
    with pytest.raises(ValueError):
        RenderOptions(max_depth=-2)

# -----------------------------------------------------------------------------
# Partial Failures
# -----------------------------------------------------------------------------

def test_unreadable_subdirectory_does_not_abort(make_tree, monkeypatch):
    root = make_tree({
        "alpha": {"inner": {}},
        "locked": {"secret": {}},
        "zeta": {},
    })
    real_scandir = os.scandir

    def fake_scandir(path):
        if os.path.basename(path) == "locked":
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    monkeypatch.setattr(tree_renderer.os, "scandir", fake_scandir)

    result = render_tree(str(root))

    assert result.lines == [
        "├── alpha/",
        "│   └── inner/",
        "├── locked/",
        "└── zeta/",
    ]
    assert not result.ok
    assert len(result.failures) == 1
    assert result.failures[0].path == os.path.join(str(root), "locked")
    assert result.failures[0].reason == "Permission denied"


def test_directory_removed_mid_walk_is_reported(make_tree, monkeypatch):
    root = make_tree({"gone": {}, "kept": {"x": {}}})
    real_scandir = os.scandir

    def fake_scandir(path):
        if os.path.basename(path) == "gone":
            raise FileNotFoundError(2, "No such file or directory", path)
        return real_scandir(path)

    monkeypatch.setattr(tree_renderer.os, "scandir", fake_scandir)

    result = render_tree(str(root))

    assert result.lines == ["├── gone/", "└── kept/", "    └── x/"]
    assert [f.reason for f in result.failures] == ["No such file or directory"]


@pytest.mark.skipif(
    os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="Permission bits are not enforced for this user/platform.",
)
def test_real_permission_denied_directory(make_tree):
    root = make_tree({"open": {"a": {}}, "private": {"b": {}}, "public": {}})
    private = root / "private"
    private.chmod(0)
    try:
        result = render_tree(str(root))
    finally:
        private.chmod(0o755)

    assert "├── open/" in result.lines
    assert "└── public/" in result.lines
    assert [f.path for f in result.failures] == [str(private)]

# -----------------------------------------------------------------------------
# Symbolic Links
# -----------------------------------------------------------------------------

symlinks_supported = pytest.mark.skipif(
    not hasattr(os, "symlink") or sys.platform == "win32",
    reason="Creating symlinks needs extra privileges on this platform.",
)


@symlinks_supported
def test_broken_symlink_is_listed_as_file(make_tree):
    root = make_tree({"docs": {}, "notes.txt": ""})
    os.symlink(str(root / "missing-target"), str(root / "dangling"))

    result = render_tree(str(root), ALL)

    assert result.lines == ["├── docs/", "├── dangling", "└── notes.txt"]
    assert result.ok


@symlinks_supported
def test_broken_symlink_hidden_without_show_files(make_tree):
    root = make_tree({"docs": {}})
    os.symlink(str(root / "missing-target"), str(root / "dangling"))

    assert render_tree(str(root)).lines == ["└── docs/"]


@symlinks_supported
def test_symlink_to_directory_is_listed_as_directory(make_tree):
    root = make_tree({"real": {"inner": {}}})
    os.symlink(str(root / "real"), str(root / "alias"))

    assert render_tree(str(root)).lines == [
        "├── alias/",
        "│   └── inner/",
        "└── real/",
        "    └── inner/",
    ]
