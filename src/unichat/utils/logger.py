import logging
import sys

RESET = "\x1b[0m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s: %(message)s"


class ColorFormatter(logging.Formatter):
    """Wrap each formatted line in an ANSI color picked by level."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        if record.levelno >= logging.ERROR:
            color = RED
        elif record.levelno >= logging.WARNING:
            color = YELLOW
        elif record.levelno >= logging.INFO:
            color = GREEN
        else:
            return line
        return f"{color}{line}{RESET}"


def setup_logger(name: str = "unichat", level: str = "INFO", color: bool = True) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.propagate = False
    if logger.handlers:
        return logger  # avoid duplicate handlers

    handler = logging.StreamHandler(sys.stdout)
    formatter = ColorFormatter(LOG_FORMAT) if color else logging.Formatter(LOG_FORMAT)
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
