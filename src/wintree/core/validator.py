from __future__ import annotations

"""
Configuration Validation Service.

Ensures that the configuration dictionary handed to the tree service
conforms to the expected schema. Handles type coercion and default value
injection; strict mode turns every coercion into an exception instead.
"""

import logging
from typing import Any, Dict, List, Tuple

from wintree.domain.config import get_default_config
from wintree.domain.constants import UNLIMITED_DEPTH
from wintree.domain.tree_models import RenderOptions

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    unknown = sorted(k for k in config if k not in defaults)
    if unknown:
        msg = f"Unknown config keys: {', '.join(map(str, unknown))}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Ignored.")

    for field in ("input_path", "output_file"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in ("show_files", "use_ascii"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["max_depth"] = _as_depth(merged.get("max_depth"), warnings, strict)
    merged["log_level"] = _as_level(merged.get("log_level"), defaults["log_level"], warnings, strict)

    return merged, warnings


def to_render_options(config: Dict[str, Any]) -> RenderOptions:
    """Build RenderOptions from a validated configuration."""
    return RenderOptions(
        show_files=config["show_files"],
        use_ascii=config["use_ascii"],
        max_depth=config["max_depth"],
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_depth(value: Any, warnings: List[str], strict: bool) -> int:
    """Accept integers >= -1; anything else falls back to unlimited depth."""
    if value is None:
        return UNLIMITED_DEPTH

    depth: Any = value
    if isinstance(value, bool):
        depth = None
    elif isinstance(value, str) and not strict:
        try:
            depth = int(value.strip())
            warnings.append(f"Field 'max_depth' converted from '{value}' to {depth}.")
        except ValueError:
            depth = None

    if isinstance(depth, int) and depth >= UNLIMITED_DEPTH:
        return depth

    msg = f"Invalid field 'max_depth': expected int >= {UNLIMITED_DEPTH}, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using unlimited depth.")
    return UNLIMITED_DEPTH


def _as_level(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
        return value.strip().upper()

    msg = f"Invalid field 'log_level': {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using {fallback}.")
    return fallback
