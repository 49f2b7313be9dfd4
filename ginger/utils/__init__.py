"""
Utility modules for ginger
"""

import logging
import sys
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output"""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'SUCCESS': '\033[92m',  # Bright Green
        'RESET': '\033[0m'
    }

    def __init__(self, fmt=None, datefmt=None, stream=None):
        super().__init__(fmt, datefmt)
        self.stream = stream or sys.stderr

    def format(self, record):
        if not self.stream.isatty():
            return super().format(record)

        # Colour a copy so other handlers see the plain record
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']
        record.levelname = f"{color}{record.levelname}{reset}"
        record.msg = f"{color}{record.msg}{reset}"
        return super().format(record)


class Logger:
    """Configures the ``ginger`` logger namespace"""

    SUCCESS = 25  # Between INFO and WARNING
    NAME = "ginger"

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None):
        """
        Initialize logger

        Args:
            verbose: Enable debug output on the console
            log_file: Optional log file path
        """
        self.verbose = verbose

        logging.addLevelName(self.SUCCESS, "SUCCESS")

        self.logger = logging.getLogger(self.NAME)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        # Remove handlers left by a previous run in the same process
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        # Console handler on stderr, quiet unless something needs attention
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

        if verbose:
            fmt = "%(asctime)s [%(levelname)s] %(message)s"
        else:
            fmt = "[%(levelname)s] %(message)s"

        console_handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S", stream=sys.stderr))
        self.logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            self.logger.addHandler(file_handler)

    def debug(self, msg: str):
        """Log debug message"""
        self.logger.debug(msg)

    def success(self, msg: str):
        """Log success message"""
        self.logger.log(self.SUCCESS, msg)


__all__ = ["Logger", "ColoredFormatter"]
