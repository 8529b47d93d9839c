"""
Publishing context logger.

Provides logging interface for publishing context with automatic [publish] prefix.
All publishing modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vita.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[publish]"


def setup_publishing_logger(log_dir: Path, template_path: Path = None, output_dir: Path = None) -> Path:
    """
    Setup logger for publishing context.

    Args:
        log_dir: Directory for this publishing session
        template_path: Template being published
        output_dir: Destination of endpoint files

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="publish",
        log_dir=log_dir,
        session_details={"Template": template_path, "Output directory": output_dir},
    )


# Wrapper functions with automatic [publish] prefix


def _log_info(message: str) -> None:
    """Log info message with [publish] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [publish] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [publish] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [publish] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [publish] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level publishing-specific logging helpers


def log_endpoint_written(endpoint: str, file_path: Path) -> None:
    _log_info(f"  /{endpoint} -> {file_path.name}")


def log_endpoint_skipped(endpoint: str) -> None:
    _log_debug(f"  /{endpoint} skipped (no data)")


def log_stale_file_removed(file_path: Path) -> None:
    _log_warning(f"Removed stale endpoint file {file_path.name}")


def log_publish_result(output_dir: Path, file_count: int, skipped: list) -> None:
    """
    Log the outcome of a publish.

    Args:
        output_dir: Directory that received the files
        file_count: Endpoint files plus root.json
        skipped: Endpoints left out because their records were empty
    """
    _log_success(f"Generated {file_count} files in {output_dir}")
    if skipped:
        _log_info(f"Skipped empty endpoints: {', '.join(skipped)}")
