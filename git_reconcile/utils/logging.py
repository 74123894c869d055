"""Logging configuration for git-reconcile"""
import logging
import sys
from pathlib import Path
from typing import Optional

from git_reconcile.constants import LOG_DIR_NAME, LOG_FILE_NAME

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Colours the level name when stderr is a terminal."""

    COLORS = {
        logging.DEBUG: '\033[36m',
        logging.WARNING: '\033[33m',
        logging.ERROR: '\033[31m',
        logging.CRITICAL: '\033[35m',
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelno)
        if color and sys.stderr.isatty():
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> None:
    """
    Configure logging for the application.

    Warnings and errors always go to stderr. With debug enabled the full
    trace goes to stderr and to ~/.git-reconcile/git-reconcile.log, which
    is overwritten on every run.

    Args:
        debug: Enable DEBUG level tracing and the log file
        log_dir: Directory for the log file (defaults to ~/.git-reconcile)
    """
    level = logging.DEBUG if debug else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        ColoredFormatter(DETAILED_FORMAT, DATE_FORMAT) if debug else ColoredFormatter('%(levelname)s: %(message)s')
    )
    root_logger.addHandler(console_handler)

    if debug:
        log_dir = log_dir or Path.home() / LOG_DIR_NAME
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, mode='w')
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)

    # GitPython logs every command at DEBUG
    logging.getLogger('git').setLevel(logging.DEBUG if debug else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    # 'services.' stays so that services.git.* never lands under GitPython's 'git' logger
    if name.startswith('git_reconcile.'):
        name = name[len('git_reconcile.'):]
    return logging.getLogger(name)
