from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: help handling, logging bootstrap, merging
of configuration sources (defaults, JSON file, command-line overrides),
tree execution and the mapping of run results to process exit codes.
"""

import json
import sys
from typing import List, Optional

from wintree.core.service import run_tree
from wintree.core.validator import validate_config
from wintree.domain.config import get_default_config, load_config
from wintree.domain.constants import (
    ERROR_OUTPUT_FAILURE,
    ERROR_ROOT_INVALID,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_OUTPUT_FAILURE,
    EXIT_ROOT_INVALID,
)
from wintree.domain.run_models import TreeRunResult
from wintree.infra.logging import LoggingConfig, configure_logging, get_logger
from wintree.interface.cli import args as cli_args
from wintree.utils.i18n import i18n

logger = get_logger(__name__)

_EXIT_CODES = {
    ERROR_ROOT_INVALID: EXIT_ROOT_INVALID,
    ERROR_OUTPUT_FAILURE: EXIT_OUTPUT_FAILURE,
}

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    argv = list(sys.argv[1:] if argv is None else argv)
    parser = cli_args.build_parser()

    # 1. Help short-circuit (also on empty invocation)
    if cli_args.wants_help(argv):
        parser.print_help()
        return EXIT_OK

    # 2. Argument parsing phase (unknown options exit with status 2)
    args = parser.parse_args(argv)

    # 3. Resolve configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_file)
    raw_conf = cli_args.merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 4. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        console=True,
        log_file=args.log_file,
    ))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 5. Execution phase
    logger.debug(f"Targeting directory: {clean_conf['input_path']}")
    try:
        result = run_tree(clean_conf)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED

    return _report(result)

# -----------------------------------------------------------------------------
# RESULT REPORTING
# -----------------------------------------------------------------------------

def _report(result: TreeRunResult) -> int:
    """
    Print diagnostics for a finished run and pick the exit code.

    Unreadable subtrees are reported one per line but do not fail the run.
    """
    if not result.ok:
        msg = i18n.t(f"cli.errors.{result.error_kind}", default="{error}", error=result.error)
        logger.debug(f"Run failed ({result.error_kind}): {result.error}")
        print(msg, file=sys.stderr)
        return _EXIT_CODES.get(result.error_kind, EXIT_ROOT_INVALID)

    for failure in result.failures:
        print(i18n.t("cli.errors.subtree", path=failure.path, reason=failure.reason), file=sys.stderr)

    logger.debug(f"Run summary: {result.summary}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
