from __future__ import annotations

"""
Tree Run Orchestration.

Coordinates a complete run:
1. Validates configuration and normalizes the root path.
2. Rejects missing or non-directory roots before any output is produced.
3. Opens the output sink (console or file).
4. Writes the header line and the rendered tree body.
"""

import logging
import os
from typing import Any, Dict, Optional, TextIO

from wintree.core.analysis.tree_renderer import render_tree
from wintree.core.validator import to_render_options, validate_config
from wintree.domain.constants import ERROR_OUTPUT_FAILURE, ERROR_ROOT_INVALID
from wintree.domain.run_models import (
    TreeRunResult,
    create_error_result,
    create_success_result,
)
from wintree.infra.fs import check_root_directory, normalize_path, to_display_path
from wintree.infra.output import open_sink

logger = logging.getLogger(__name__)


def run_tree(
        config: Optional[Dict[str, Any]],
        *,
        stream: Optional[TextIO] = None,
) -> TreeRunResult:
    """
    Render a directory tree and deliver it to the configured sink.

    Args:
        config: The configuration dictionary (raw or partial).
        stream: Console stream override, ignored when an output file is set.

    Returns:
        TreeRunResult: Status, rendered lines, skipped subtrees and statistics.
    """
    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config or {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    root_path = normalize_path(cfg["input_path"], os.getcwd())
    output_file = cfg["output_file"]

    is_valid, error = check_root_directory(root_path)
    if not is_valid:
        logger.debug(f"Root rejected: {error}")
        return create_error_result(error or "", ERROR_ROOT_INVALID, root_path, output_file)

    # -------------------------------------------------------------------------
    # 2) Rendering
    # -------------------------------------------------------------------------
    header = to_display_path(root_path)
    rendered = render_tree(root_path, to_render_options(cfg))

    # -------------------------------------------------------------------------
    # 3) Delivery
    # -------------------------------------------------------------------------
    sink = open_sink(output_file, stream)
    try:
        with sink:
            sink.write_line(header)
            for line in rendered.lines:
                sink.write_line(line)
    except OSError as e:
        msg = f"Failed to write output to {sink.target}: {e.strerror or e}"
        logger.debug(msg)
        return create_error_result(msg, ERROR_OUTPUT_FAILURE, root_path, output_file)

    if output_file:
        logger.info(f"Tree saved to file: {sink.target}")

    logger.debug(
        f"Rendered {len(rendered.lines)} lines for {root_path} "
        f"({len(rendered.failures)} unreadable subtrees)"
    )

    return create_success_result(
        root_path=root_path,
        header=header,
        lines=rendered.lines,
        failures=rendered.failures,
        output_file=sink.target if output_file else "",
    )
