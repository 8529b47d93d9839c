"""
Session logging for VITA scripts.

Every build, validate or scaffold run gets its own log directory. The log
file records the full DEBUG trail; the console shows INFO and above.
Context modules wrap this with their own prefix ([parse], [publish],
[collect]) in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

from vita import __version__

load_dotenv()

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
HEADER_RULE = "-" * 60


def setup_logger(
    context_name: str,
    log_dir: Path,
    session_details: Optional[dict] = None,
) -> Path:
    """
    Route loguru output for one session to "<log_dir>/<context_name>.log".

    Replaces any sinks already installed, so calling it twice in one
    process starts a fresh session.

    Args:
        context_name: Log file stem ("parse", "publish", "collect")
        log_dir: Session directory, created if needed
        session_details: Run settings written to the session header,
            e.g. {"Template": "TEMPLATE.md", "Output directory": "data"}

    Returns:
        Path to the session log file
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_session_header(context_name, session_details)

    return log_file


def log_session_header(context_name: str, session_details: Optional[dict] = None) -> None:
    """Write the invocation and run settings at the top of a session log."""
    logger.info(HEADER_RULE)
    logger.info(f"VITA {__version__} ({context_name})")
    logger.info(f"Invocation: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")

    for key, value in (session_details or {}).items():
        logger.info(f"{key}: {value}")

    logger.info(HEADER_RULE)
