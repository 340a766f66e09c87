"""
Structured console logger

One process-wide Logger instance. Modules bind it to their category at
import time:

    log = get_logger().for_category(LogCategory.CLOCK)
    log.info("Interval changed", speed=80, interval_ms=20)

    [14:23:45] CLOCK     ✓ Interval changed
               ├─ speed: 80
               └─ interval_ms: 20

configure_logger() mutates the singleton, so bound loggers created before
configuration pick up the new level and color settings.
"""

from datetime import datetime
from typing import IO, Iterable, List, Optional

from models.enums import LogLevel, LogCategory

RESET = '\033[0m'
DIM = '\033[2m'

CATEGORY_COLORS = {
    LogCategory.CONFIG: '\033[36m',      # cyan
    LogCategory.PATTERN: '\033[93m',     # bright yellow
    LogCategory.CLOCK: '\033[96m',       # bright cyan
    LogCategory.CODEGEN: '\033[95m',     # bright magenta
    LogCategory.SESSION: '\033[92m',     # bright green
    LogCategory.API: '\033[94m',         # bright blue
    LogCategory.SYSTEM: '\033[97m',      # bright white
}
DEFAULT_CATEGORY_COLOR = '\033[37m'

# (priority, symbol, color)
LEVELS = {
    LogLevel.DEBUG: (0, '·', DIM),
    LogLevel.INFO: (1, '✓', '\033[32m'),
    LogLevel.WARN: (2, '⚠', '\033[33m'),
    LogLevel.ERROR: (3, '✗', '\033[31m'),
}

CATEGORY_WIDTH = 9
DETAIL_INDENT = " " * 11


class Logger:
    """
    Structured logger with compact tree output

    Args:
        min_level: Messages below this level are dropped
        use_colors: ANSI colors (disable when output is piped to a file)
        stream: Output stream; None writes to the current sys.stdout
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.INFO,
        use_colors: bool = True,
        stream: Optional[IO[str]] = None,
    ):
        self.min_level = min_level
        self.use_colors = use_colors
        self.stream = stream

    def is_enabled(self, level: LogLevel) -> bool:
        return LEVELS[level][0] >= LEVELS[self.min_level][0]

    def _paint(self, text: str, color: str) -> str:
        return f"{color}{text}{RESET}" if self.use_colors else text

    def format(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel,
        details: Iterable[str] = (),
    ) -> List[str]:
        """Render one record as output lines (header + detail tree)"""
        _, symbol, level_color = LEVELS[level]
        timestamp = datetime.now().strftime('[%H:%M:%S]')
        cat = self._paint(category.name.ljust(CATEGORY_WIDTH),
                          CATEGORY_COLORS.get(category, DEFAULT_CATEGORY_COLOR))

        lines = [f"{timestamp} {cat} {self._paint(symbol, level_color)} {self._paint(message, level_color)}"]

        details = list(details)
        for i, detail in enumerate(details):
            branch = "└─" if i == len(details) - 1 else "├─"
            lines.append(f"{DETAIL_INDENT}{self._paint(branch, DIM)} {detail}")
        return lines

    def log(
        self,
        category: LogCategory,
        message: str,
        level: LogLevel = LogLevel.INFO,
        details: Optional[list] = None,
        **kwargs
    ):
        """
        Log a message; kwargs become "key: value" detail lines

        Example:
            logger.log(LogCategory.SESSION, "Pattern changed", pattern="rainbow → police")
        """
        if not self.is_enabled(level):
            return

        all_details = list(details or [])
        all_details.extend(f"{k}: {v}" for k, v in kwargs.items())

        for line in self.format(category, message, level, all_details):
            print(line, file=self.stream)

    def debug(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.DEBUG, **kw)
    def info(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.INFO, **kw)
    def warn(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.WARN, **kw)
    def error(self, category: LogCategory, message: str, **kw): self.log(category, message, LogLevel.ERROR, **kw)

    def for_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self, category)


class BoundLogger:
    """Logger bound to a default category"""

    def __init__(self, base: Logger, category: LogCategory):
        self._base = base
        self.category = category

    def log(self, message: str, level: LogLevel = LogLevel.INFO, **kw):
        self._base.log(self.category, message, level, **kw)

    def debug(self, message: str, **kw): self.log(message, LogLevel.DEBUG, **kw)
    def info(self, message: str, **kw): self.log(message, LogLevel.INFO, **kw)
    def warn(self, message: str, **kw): self.log(message, LogLevel.WARN, **kw)
    def error(self, message: str, **kw): self.log(message, LogLevel.ERROR, **kw)

    def with_category(self, category: LogCategory) -> 'BoundLogger':
        return BoundLogger(self._base, category)


_logger = Logger()


def get_logger() -> Logger:
    return _logger


def get_category_logger(category: LogCategory) -> BoundLogger:
    return _logger.for_category(category)


def configure_logger(
    min_level: LogLevel = LogLevel.INFO,
    use_colors: bool = True,
    stream: Optional[IO[str]] = None,
) -> Logger:
    """Reconfigure the singleton in place and return it"""
    _logger.min_level = min_level
    _logger.use_colors = use_colors
    _logger.stream = stream
    return _logger
