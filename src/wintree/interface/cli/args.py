from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Sequence

from wintree.utils.i18n import i18n

# Help switches accepted in addition to argparse's own -h/--help
HELP_ALIASES = ("/?", "/h", "-?", "-h", "--help")

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the wintree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="wintree",
        description=i18n.t("app.description"),
        epilog=i18n.t("app.epilog"),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # --- Target ---
    p.add_argument(
        "directory",
        nargs="?",
        default=None,
        help=i18n.t("cli.args.directory"),
    )

    # --- Rendering ---
    p.add_argument("-f", "--files", dest="show_files", action="store_true", help=i18n.t("cli.args.files"))
    p.add_argument("-a", "--ascii", dest="use_ascii", action="store_true", help=i18n.t("cli.args.ascii"))
    p.add_argument(
        "-d", "--max-depth",
        dest="max_depth",
        type=int,
        default=None,
        metavar="N",
        help=i18n.t("cli.args.max_depth"),
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_file",
        default=None,
        metavar="FILE",
        help=i18n.t("cli.args.output"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument("--config", dest="config_file", default=None, metavar="FILE", help=i18n.t("cli.args.config"))
    p.add_argument("--use-defaults", action="store_true", help=i18n.t("cli.args.defaults"))
    p.add_argument("--dump-config", action="store_true", help=i18n.t("cli.args.dump"))
    p.add_argument("--debug", action="store_true", help=i18n.t("cli.args.debug"))
    p.add_argument("--log-file", dest="log_file", default=None, metavar="FILE", help=i18n.t("cli.args.log_file"))

    return p


def wants_help(argv: Sequence[str]) -> bool:
    """True when no arguments were given or any help alias is present."""
    if not argv:
        return True
    return any(arg.lower() in HELP_ALIASES for arg in argv)

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Flags that were not given map to None (or are omitted) so that they do
    not mask values coming from the configuration file.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.directory
    overrides["output_file"] = args.output_file
    overrides["max_depth"] = args.max_depth

    if args.show_files:
        overrides["show_files"] = True
    if args.use_ascii:
        overrides["use_ascii"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge non-None overrides for known keys into the base config.
    """
    out = dict(base)
    for k in _MERGEABLE_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


_MERGEABLE_KEYS: List[str] = [
    "input_path", "show_files", "use_ascii", "max_depth", "output_file", "log_level",
]
