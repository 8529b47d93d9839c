"""
Collection context logger.

Provides logging interface for collection context with automatic [collect] prefix.
All collection modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vita.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[collect]"


def setup_collection_logger(log_dir: Path, answers_path: Path = None) -> Path:
    """
    Setup logger for collection context.

    Args:
        log_dir: Directory for this session
        answers_path: Answers file used to pre-fill the template, if any

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="collect",
        log_dir=log_dir,
        session_details={"Answers": answers_path or "(none, blank template)"},
    )


# Wrapper functions with automatic [collect] prefix


def _log_info(message: str) -> None:
    """Log info message with [collect] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [collect] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [collect] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [collect] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [collect] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_template_written(output_path: Path, filled_endpoints: list) -> None:
    """Log a generated template and which sections were pre-filled."""
    _log_success(f"Template written to {output_path}")
    if filled_endpoints:
        _log_info(f"  Pre-filled: {', '.join(filled_endpoints)}")
    else:
        _log_info("  Blank template (every value is a placeholder)")
