"""Logging for guardlint.
A small leveled logger that writes human-readable lines to a stream and keeps
every entry in memory so callers (and tests) can inspect what the analysis
did. Python's ``logging`` module can be routed into it with
``setup_python_logging``.
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, TextIO


class LogLevel(IntEnum):
    """Verbosity levels, from silent to per-fact tracing."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3
    TRACE = 4


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    GRAY = "\033[90m"


def supports_color(stream: TextIO) -> bool:
    """Check if the stream is a terminal that understands ANSI colors."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    return sys.platform != "win32"


@dataclass
class LogEntry:
    """A single log record."""

    level: LogLevel
    message: str
    category: str = "general"
    timestamp: float = field(default_factory=time.time)
    context: dict[str, Any] = field(default_factory=dict)

    def format(self, color: bool = False) -> str:
        stamp = time.strftime("%H:%M:%S", time.localtime(self.timestamp))
        marker = {
            LogLevel.QUIET: ("!", Colors.RED),
            LogLevel.NORMAL: ("*", Colors.RESET),
            LogLevel.VERBOSE: ("->", Colors.BLUE),
            LogLevel.DEBUG: ("#", Colors.MAGENTA),
            LogLevel.TRACE: ("..", Colors.GRAY),
        }[self.level]
        parts = [stamp, marker[0]]
        if self.category != "general":
            parts.append(f"[{self.category}]")
        parts.append(self.message)
        if self.context:
            parts.append(" ".join(f"{k}={v}" for k, v in sorted(self.context.items())))
        line = " ".join(parts)
        if color:
            return f"{marker[1]}{line}{Colors.RESET}"
        return line


class GuardlintLogger:
    """Leveled logger used throughout guardlint.
    Entries are recorded (unless ``keep_entries`` is off); only those at or below the level
    are written to the stream. Safe to share between the worker threads of
    ``analyze_files``.
    """

    def __init__(
        self,
        level: LogLevel = LogLevel.NORMAL,
        color: bool = True,
        stream: TextIO | None = None,
        keep_entries: bool = True,
    ):
        self.level = level
        self._stream = stream or sys.stderr
        self._color = color and supports_color(self._stream)
        self._keep_entries = keep_entries
        self._entries: list[LogEntry] = []
        self._lock = threading.Lock()

    def enabled_for(self, level: LogLevel) -> bool:
        return level <= self.level

    def _emit(self, entry: LogEntry) -> None:
        with self._lock:
            if self._keep_entries:
                self._entries.append(entry)
            if not self.enabled_for(entry.level):
                return
            self._stream.write(entry.format(color=self._color) + "\n")
            self._stream.flush()

    def log(
        self,
        level: LogLevel,
        message: str,
        category: str = "general",
        **context: Any,
    ) -> None:
        self._emit(LogEntry(level=level, message=message, category=category, context=context))

    def info(self, message: str, category: str = "general", **context: Any) -> None:
        self.log(LogLevel.NORMAL, message, category, **context)

    def verbose(self, message: str, category: str = "general", **context: Any) -> None:
        self.log(LogLevel.VERBOSE, message, category, **context)

    def debug(self, message: str, category: str = "general", **context: Any) -> None:
        self.log(LogLevel.DEBUG, message, category, **context)

    def trace(self, message: str, category: str = "general", **context: Any) -> None:
        self.log(LogLevel.TRACE, message, category, **context)

    def warning(self, message: str, category: str = "general", **context: Any) -> None:
        """Log a warning; shown at every level except QUIET."""
        self.log(LogLevel.NORMAL, f"warning: {message}", category, **context)

    def error(self, message: str, category: str = "general", **context: Any) -> None:
        """Log an error; always shown."""
        self.log(LogLevel.QUIET, f"error: {message}", category, **context)

    @contextmanager
    def timer(self, name: str, category: str = "timing"):
        """Log the wall time of the ``with`` body at VERBOSE."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.verbose(f"{name}: {time.perf_counter() - start:.3f}s", category=category)

    def get_entries(
        self,
        level: LogLevel | None = None,
        category: str | None = None,
    ) -> list[LogEntry]:
        entries = list(self._entries)
        if level is not None:
            entries = [e for e in entries if e.level == level]
        if category is not None:
            entries = [e for e in entries if e.category == category]
        return entries


_logger: GuardlintLogger | None = None


def get_logger() -> GuardlintLogger:
    """Get the global logger instance."""
    global _logger
    if _logger is None:
        _logger = GuardlintLogger(keep_entries=False)
    return _logger


def set_logger(logger: GuardlintLogger) -> None:
    global _logger
    _logger = logger


class PythonLoggingBridge(logging.Handler):
    """Forward records of the stdlib ``guardlint`` logger to a GuardlintLogger."""

    LEVELS = {
        logging.DEBUG: LogLevel.DEBUG,
        logging.INFO: LogLevel.VERBOSE,
        logging.WARNING: LogLevel.NORMAL,
        logging.ERROR: LogLevel.QUIET,
        logging.CRITICAL: LogLevel.QUIET,
    }

    def __init__(self, target: GuardlintLogger):
        super().__init__()
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        message = self.format(record)
        if record.levelno >= logging.ERROR:
            self.target.error(message, category="python")
        elif record.levelno >= logging.WARNING:
            self.target.warning(message, category="python")
        else:
            level = self.LEVELS.get(record.levelno, LogLevel.DEBUG)
            self.target.log(level, message, category="python")


def setup_python_logging(level: int = logging.INFO) -> logging.Logger:
    """Route Python's ``guardlint`` logger into the global GuardlintLogger."""
    logger = logging.getLogger("guardlint")
    logger.setLevel(level)
    if not any(isinstance(h, PythonLoggingBridge) for h in logger.handlers):
        logger.addHandler(PythonLoggingBridge(get_logger()))
    return logger


__all__ = [
    "LogLevel",
    "LogEntry",
    "Colors",
    "GuardlintLogger",
    "PythonLoggingBridge",
    "get_logger",
    "set_logger",
    "setup_python_logging",
    "supports_color",
]
