"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
All parsing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vita.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[parse]"


def setup_parsing_logger(log_dir: Path, template_path: Path = None) -> Path:
    """
    Setup logger for parsing context.

    Args:
        log_dir: Directory for this parsing session
        template_path: Template being parsed (recorded in the session header)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="parse",
        log_dir=log_dir,
        session_details={"Template": template_path} if template_path else None,
    )


# Wrapper functions with automatic [parse] prefix


def _log_info(message: str) -> None:
    """Log info message with [parse] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [parse] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [parse] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [parse] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level parsing-specific logging helpers


def log_parse_start(template_path: Path) -> None:
    """Log start of a template parse."""
    _log_info(f"Parsing {template_path}")


def log_parse_result(endpoints: list, warnings: list, elapsed_time: float) -> None:
    """
    Log the outcome of a template parse.

    Args:
        endpoints: Endpoints that ended up with data
        warnings: Parser warnings (missing or unrecognized sections)
        elapsed_time: Time taken
    """
    for warning in warnings:
        _log_warning(warning)

    if endpoints:
        _log_success(f"Extracted {len(endpoints)} non-empty records ({elapsed_time:.3f}s)")
        _log_debug(f"  Endpoints: {', '.join(endpoints)}")
    else:
        _log_warning(f"No usable content found in template ({elapsed_time:.3f}s)")
