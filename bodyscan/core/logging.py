"""Logging setup for the bodyscan namespace.

Console output is colored when it goes to a terminal; the optional log file
is always plain text.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


ROOT_LOGGER_NAME = "bodyscan"

CONSOLE_FORMAT = "%(asctime)s │ %(levelname)-8s │ %(name)-24s │ %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-24s | %(message)s"


class ColoredFormatter(logging.Formatter):
    """Level-colored terminal output."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    NAME_COLOR = "\033[34m"
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers see the same record object
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelno, self.RESET)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        colored.name = f"{self.NAME_COLOR}{record.name}{self.RESET}"
        return super().format(colored)


def _parse_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    log_dir: str = "logs",
    color: Optional[bool] = None,
) -> logging.Logger:
    """
    Configure the bodyscan logger tree.

    Calling it again only updates the level; handlers are installed once.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or logging constant
        log_file: Prefix for a timestamped log file under log_dir
        log_dir: Directory for log files, created if missing
        color: Force console colors on or off; default is on for a TTY

    Returns:
        The "bodyscan" logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(_parse_level(level))

    if root_logger.handlers:
        return root_logger

    stream = sys.stderr
    if color is None:
        color = hasattr(stream, "isatty") and stream.isatty()

    console_handler = logging.StreamHandler(stream)
    if color:
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    else:
        console_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        file_path = log_path / f"{log_file}_{timestamp}.log"

        file_handler = logging.FileHandler(file_path)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(file_handler)

        root_logger.info(f"Logging to file: {file_path}")

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a bodyscan module, e.g. get_logger("measure.engine")."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
