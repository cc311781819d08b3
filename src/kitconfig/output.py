"""Log level names, progress styles and terminal output."""
import logging
import sys
from enum import Enum

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class LogLevel(str, Enum):
    """Log levels as they are written to the config file."""

    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"

    def __str__(self) -> str:
        return self.value

    def to_logging(self) -> int:
        # No TRACE in stdlib logging, DEBUG is the closest
        return {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.TRACE: logging.DEBUG,
        }[self]


class ProgressStyle(str, Enum):
    PLAIN = "plain"
    FANCY = "fancy"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


def setup_logging(level: int = logging.WARNING):
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def print_line(text: str):
    """Print text verbatim, without Rich markup or highlighting."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_error(message: str):
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
