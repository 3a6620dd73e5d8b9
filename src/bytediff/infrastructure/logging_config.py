"""
Logging configuration module.

Provides structured logging with colored console output and file output.
"""

import logging
import sys
from pathlib import Path


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors the level name and dims the logger name.

    Colors are only applied when the stream is a terminal.
    """

    RESET = "\033[0m"
    DIM = "\033[2m"

    LEVEL_COLORS = {
        logging.DEBUG: "\033[2m\033[37m",
        logging.INFO: "\033[36m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[91m",
        logging.CRITICAL: "\033[1m\033[37m\033[41m",
    }

    def __init__(self, fmt: str, datefmt: str = None, use_colors: bool = True):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        original_levelname = record.levelname
        original_name = record.name

        color = self.LEVEL_COLORS.get(record.levelno, "")
        record.levelname = f"{color}{record.levelname:8}{self.RESET}"
        record.name = f"{self.DIM}{record.name}{self.RESET}"
        try:
            return super().format(record)
        finally:
            # Other handlers (file) must see the plain values
            record.levelname = original_levelname
            record.name = original_name


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """
    Configure application-wide logging with colored output.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.)
        log_file: Optional path to log file
    """
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        ColoredFormatter(
            fmt='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
            datefmt='%H:%M:%S',
            use_colors=sys.stdout.isatty(),
        )
    )
    console_handler.setLevel(level)

    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setFormatter(
            logging.Formatter(
                fmt='[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        file_handler.setLevel(logging.DEBUG)  # Always debug to file
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG,  # Capture all levels, handlers filter
        handlers=handlers,
        force=True
    )

    # Request lines from the development server are noise at INFO
    logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.debug("Log level: %s", logging.getLevelName(level))
    if log_file:
        logger.debug("Log file: %s", log_file)
