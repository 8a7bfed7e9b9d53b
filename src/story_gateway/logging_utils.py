"""
Logging for Story Gateway.

Library calls only emit records on the "story_gateway" logger, which carries
a NullHandler (see package __init__). Handlers are attached by setup_logging(),
which only the command line calls: a log file under $STORY_GATEWAY_LOG_DIR
(or ./logs) plus an INFO console stream.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from .config import APP_NAME, APP_VERSION

LOGGER_NAME = "story_gateway"
LOG_FILENAME = "story_gateway.log"


def get_logger() -> logging.Logger:
    """Return the package logger. Never configures handlers."""
    return logging.getLogger(LOGGER_NAME)


def setup_logging(log_dir: Optional[Path] = None, console_level: int = logging.INFO) -> Path:
    """
    Attach file and console handlers to the package logger.

    Meant for the command line, once per process. The log file is overwritten
    on each run.

    Args:
        log_dir: Directory for the log file. Defaults to $STORY_GATEWAY_LOG_DIR,
            then ./logs.
        console_level: Level for the stderr handler.

    Returns:
        Path of the log file.
    """
    if log_dir is None:
        log_dir = Path(os.environ.get("STORY_GATEWAY_LOG_DIR") or Path.cwd() / "logs")
    log_file = Path(log_dir) / LOG_FILENAME

    logger = get_logger()
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"[WARN] Could not set up file logging: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    logger.debug(f"{APP_NAME} v{APP_VERSION}, log file {log_file}")
    return log_file


def log_debug(message: str) -> None:
    get_logger().debug(message)


def log_info(message: str) -> None:
    get_logger().info(message)


def log_warning(message: str) -> None:
    get_logger().warning(message)


def log_exception(message: str) -> None:
    """Log an error with the current exception's traceback."""
    get_logger().exception(message)


def log_api_call(endpoint: str, success: bool, details: str = "") -> None:
    """
    Record the outcome of one Gemini request.

    Args:
        endpoint: Operation label (e.g. "storyboard")
        success: Whether the HTTP call succeeded
        details: Status text, finish reason or error body
    """
    msg = f"API [{'SUCCESS' if success else 'FAILED'}] {endpoint}"
    if details:
        msg += f" - {details}"
    get_logger().log(logging.INFO if success else logging.ERROR, msg)


def log_generation_start(gen_type: str) -> None:
    get_logger().info(f"Generation started: {gen_type}")


def log_generation_complete(gen_type: str, success: bool, details: str = "") -> None:
    """Record the end of an operation; failures are logged at ERROR before re-raising."""
    msg = f"Generation {'completed' if success else 'failed'}: {gen_type}"
    if details:
        msg += f" - {details}"
    get_logger().log(logging.INFO if success else logging.ERROR, msg)
