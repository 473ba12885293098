"""Unified logging for localdisk with console and file output."""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Diagnostics go to stderr so table and detail output stay clean
console = Console(stderr=True)

ROOT_LOGGER_NAME = "localdisk"
FALLBACK_LOG_FILE = Path("/tmp/localdisk.log")

# Track if file logging has been set up
_file_logging_configured = False


def _root_logger() -> logging.Logger:
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)

    # Only add console handler if not already present
    if not any(isinstance(h, RichHandler) for h in root_logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the localdisk hierarchy.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger whose records reach the Rich console handler

    Note:
        File logging must be enabled separately via setup_file_logging()
    """
    _root_logger()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between INFO and DEBUG."""
    _root_logger().setLevel(logging.DEBUG if verbose else logging.INFO)


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Set up file logging for localdisk.

    Args:
        log_file: Path to log file (defaults to /tmp/localdisk.log)
        verbose: Enable debug-level logging

    Returns:
        Path of the log file actually in use

    Note:
        Creates the log directory if it doesn't exist.
        Falls back to /tmp if the requested directory is not writable.
    """
    global _file_logging_configured

    target_log_file = Path(log_file) if log_file else FALLBACK_LOG_FILE

    if _file_logging_configured:
        return target_log_file

    try:
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target_log_file)
    except OSError:
        target_log_file = FALLBACK_LOG_FILE
        target_log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target_log_file)

    root_logger = _root_logger()
    file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Detailed format for file logs
    file_formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(file_formatter)
    root_logger.addHandler(file_handler)

    set_verbose(verbose)

    _file_logging_configured = True

    root_logger.debug(f"localdisk logging initialized: {target_log_file}")
    return target_log_file
