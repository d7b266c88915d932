"""Simple logging configuration for seed-deploy."""

import logging
import os
import sys

# Define TRACE level (lower than DEBUG)
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class ColoredFormatter(logging.Formatter):
    """Formatter that highlights the level name with ANSI colors.

    Colors are only applied when ``use_color`` is set, so logs redirected
    to a file stay plain text.
    """

    COLORS = {
        "TRACE": "\033[90m",  # Dark gray
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"

    def __init__(self, fmt: str, datefmt: str, use_color: bool = True):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if not self.use_color or levelname not in self.COLORS:
            return super().format(record)

        record.levelname = f"{self.COLORS[levelname]}{self.BOLD}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the deployment run.

    The level comes from ``log_level`` or the LOG_LEVEL environment variable
    (defaults to INFO). Progress goes to stderr so that stdout only carries
    the deployment summary. Level names are colored only when stderr is a
    terminal.

    At DEBUG, web3 and urllib3 loggers are held at WARNING to reduce noise.
    Use TRACE to see all web3/urllib3 logs.
    """
    level_name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = TRACE if level_name == "TRACE" else getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ColoredFormatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            use_color=sys.stderr.isatty(),
        )
    )

    logging.basicConfig(
        level=level,
        handlers=[handler],
        force=True,
    )

    if level_name == "DEBUG":
        logging.getLogger("web3").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)
    elif level_name == "TRACE":
        logging.getLogger("web3").setLevel(TRACE)
        logging.getLogger("urllib3").setLevel(TRACE)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
