"""Process-wide logging for the decoder CLI.

Module loggers (``logging.getLogger(__name__)``) propagate to the root logger,
which this module equips with a human-readable stderr handler and optional
rotating log files (plain text and JSON lines).
"""

from typing import List, Optional
import logging
import logging.handlers
import json
import sys
from pathlib import Path

APP_NAME = "pokesave-decoder"

# LogRecord attributes that are not caller-supplied extras
_STANDARD_FIELDS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'exc_info', 'exc_text', 'stack_info', 'lineno', 'funcName',
    'created', 'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'message', 'asctime', 'taskName',
}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, extras included."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.default_time_format),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # extra= fields end up as plain attributes on the record
        for key, value in record.__dict__.items():
            if key not in _STANDARD_FIELDS:
                entry[key] = value

        return json.dumps(entry, ensure_ascii=False, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Timestamp, logger, level, message."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )


class LoggerSetup:
    """Root logger configuration for one CLI run."""

    def __init__(
        self,
        log_dir: Optional[str] = None,
        log_level: str = "INFO",
        enable_json: bool = False,
        enable_console: bool = True,
        max_bytes: int = 1024 * 1024,
        backup_count: int = 3,
        app_name: str = APP_NAME,
    ):
        """Initialize logger setup.

        Args:
            log_dir: Directory for log files; no file logging when None
            log_level: Logging level name (DEBUG..CRITICAL)
            enable_json: Also write a JSON-lines file (requires log_dir)
            enable_console: Write human-readable records to stderr
            max_bytes: Size at which a log file rotates
            backup_count: Rotated files kept per log
            app_name: Base name of the log files

        Raises:
            OSError: If log_dir cannot be created
        """
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
        self.log_level = getattr(logging, log_level.upper(), logging.INFO)
        self.enable_json = enable_json
        self.enable_console = enable_console
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.app_name = app_name
        self._handlers: List[logging.Handler] = []

    def _rotating_file(self, suffix: str, formatter: logging.Formatter) -> logging.Handler:
        handler = logging.handlers.RotatingFileHandler(
            self.log_dir / f"{self.app_name}.{suffix}",
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding='utf-8'
        )
        handler.setFormatter(formatter)
        return handler

    def _build_handlers(self) -> List[logging.Handler]:
        handlers: List[logging.Handler] = []

        if self.log_dir is not None:
            if self.enable_json:
                handlers.append(self._rotating_file("jsonl", JSONFormatter()))
            handlers.append(self._rotating_file("log", HumanReadableFormatter()))

        # stderr keeps stdout free for decoded output
        if self.enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(HumanReadableFormatter())
            handlers.append(console_handler)

        if not handlers:
            # Without any handler, logging.lastResort would still print warnings
            handlers.append(logging.NullHandler())

        for handler in handlers:
            handler.setLevel(self.log_level)
        return handlers

    def configure_root_logger(self) -> None:
        """Replace the root logger's handlers with this setup's handlers."""
        handlers = self._build_handlers()
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level)

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
        self._handlers = handlers
        for handler in self._handlers:
            root_logger.addHandler(handler)

    def shutdown(self) -> None:
        """Flush, close and detach the handlers this setup installed."""
        root_logger = logging.getLogger()
        for handler in self._handlers:
            handler.flush()
            handler.close()
            root_logger.removeHandler(handler)
        self._handlers = []


_logger_setup: Optional[LoggerSetup] = None


def setup_logging(
    log_dir: Optional[str] = None,
    log_level: str = "INFO",
    enable_json: bool = False,
    enable_console: bool = True,
    app_name: str = APP_NAME,
) -> LoggerSetup:
    """Configure process-wide logging and return the setup instance.

    Raises:
        OSError: If log_dir or a log file cannot be created
    """
    global _logger_setup
    shutdown_logging()
    setup = LoggerSetup(
        log_dir=log_dir,
        log_level=log_level,
        enable_json=enable_json,
        enable_console=enable_console,
        app_name=app_name,
    )
    setup.configure_root_logger()
    _logger_setup = setup
    return setup


def shutdown_logging() -> None:
    """Shutdown the global logger setup and close all file handles."""
    global _logger_setup
    if _logger_setup is not None:
        _logger_setup.shutdown()
        _logger_setup = None
