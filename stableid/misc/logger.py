import logging
import sys
from typing import TextIO

from colorlog import ColoredFormatter

TRACE_LEVEL = 15  # ... info - trace - debug
logging.addLevelName(TRACE_LEVEL, "TRACE")

LOG_COLORS = {
    "TRACE": "white",
    "DEBUG": "blue",
    "INFO": "white",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


class LoggerEx(logging.Logger):
    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE_LEVEL):
            kwargs.setdefault("stacklevel", 2)
            self._log(TRACE_LEVEL, msg, args, **kwargs)


def _coloured_handler(stream: TextIO | None) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        ColoredFormatter(
            "%(log_color)s[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s",
            datefmt="%d/%m/%y %H:%M:%S",
            log_colors=LOG_COLORS,
        )
    )
    return handler


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


logger = LoggerEx("stableid")


def set_level(level: str | int, stream: TextIO | None = None) -> None:
    """Configure the package logger.

    level is a name ("TRACE", "debug", ...) or a number. Passing stream
    replaces the output stream (stderr by default); otherwise the existing
    handler is kept.
    """
    resolved = _resolve_level(level)
    if stream is not None or not logger.handlers:
        for old in list(logger.handlers):
            logger.removeHandler(old)
        logger.addHandler(_coloured_handler(sys.stderr if stream is None else stream))
    logger.setLevel(resolved)


set_level(logging.WARNING)
