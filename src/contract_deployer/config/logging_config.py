"""
Logging Configuration for contract deployments

Provides structured logging with:
- Timestamps
- Log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- File rotation (1 file per day)
- Separate error log
- Console and file handlers
"""

import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from typing import Optional


# Package logger; module loggers (logging.getLogger(__name__)) propagate into it
PACKAGE_LOGGER = "contract_deployer"

# Log formats
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_dir(log_dir: Optional[str] = None) -> Path:
    """Resolve the log directory: argument > DEPLOY_LOG_DIR > ./logs."""
    return Path(log_dir or os.getenv("DEPLOY_LOG_DIR") or "logs")


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    console: bool = True,
    detailed: bool = False,
    to_file: bool = True,
) -> logging.Logger:
    """
    Setup a logger with console and file handlers.

    Args:
        name: Logger name (typically the package name)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name (defaults to name.log)
        log_dir: Optional directory for log files (defaults to DEPLOY_LOG_DIR or ./logs)
        console: Whether to log to console
        detailed: Whether to use detailed format (includes file/line)
        to_file: Whether to write the rotating log files at all

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("contract_deployer", level=logging.DEBUG)
        >>> logger.info("Submitting deployment")
        >>> logger.error("Deployment failed", exc_info=True)
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    # Choose format
    log_format = DETAILED_FORMAT if detailed else SIMPLE_FORMAT
    formatter = logging.Formatter(log_format, datefmt=DATE_FORMAT)

    # Console handler
    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not to_file:
        return logger

    directory = get_log_dir(log_dir)
    directory.mkdir(parents=True, exist_ok=True)

    # File handler with daily rotation
    if log_file is None:
        log_file = f"{name}.log"

    file_handler = TimedRotatingFileHandler(
        directory / log_file,
        when="midnight",
        interval=1,
        backupCount=30,  # Keep 30 days of logs
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    # Separate error log
    error_handler = RotatingFileHandler(
        directory / f"{name}_errors.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(error_handler)

    return logger


def reset_logger(name: str = PACKAGE_LOGGER) -> None:
    """Close and detach every handler on a logger so it can be set up again."""
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def get_deploy_logger(debug: bool = False, log_dir: Optional[str] = None, to_file: bool = True) -> logging.Logger:
    """Get the package logger used by deployment runs."""
    level = logging.DEBUG if debug else logging.INFO
    return setup_logger(PACKAGE_LOGGER, level=level, log_dir=log_dir, detailed=debug, to_file=to_file)
