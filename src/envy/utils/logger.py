# envy/utils/logger.py
"""
Logging system for Envy.

Standard output is reserved for the rendered environment, so console logging
goes to stderr. A rotating log file is added only when ENVY_LOG_FILE is set.
"""

import logging
import logging.handlers
import os
import sys
import threading
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

LOG_FILE_ENV = "ENVY_LOG_FILE"
DEBUG_ENV = "ENVY_DEBUG"


class LogLevel(Enum):
    """Log levels for the application."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LoggerConfig:
    """Configuration for the logging system."""

    def __init__(self):
        log_file = os.environ.get(LOG_FILE_ENV)
        self.log_file: Optional[Path] = Path(log_file).expanduser() if log_file else None
        self.log_file_error: Optional[str] = None
        self.log_file_warned = False
        if self.log_file is not None:
            try:
                self.log_file.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                self.disable_log_file(e)

        self.max_file_size = 1024 * 1024  # 1MB
        self.backup_count = 3
        self.console_level = LogLevel.WARNING
        self.file_level = LogLevel.DEBUG
        if os.environ.get(DEBUG_ENV, '').lower() in ('1', 'true', 'yes'):
            self.console_level = LogLevel.DEBUG

    def disable_log_file(self, error: OSError):
        """Drop the log file after it could not be opened; console logging goes on."""
        self.log_file_error = f"Cannot log to {self.log_file}: {error}"
        self.log_file = None


class ColoredFormatter(logging.Formatter):
    """Colored formatter for console output."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'       # Reset
    }

    def __init__(self, *args, use_color: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.use_color = use_color

    def format(self, record):
        levelname = record.levelname
        if self.use_color and levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"

        formatted = super().format(record)

        # Restore for other handlers
        record.levelname = levelname

        return formatted


class EnvyLogger:
    """Thin wrapper around a configured stdlib logger."""

    def __init__(self, name: str, config: LoggerConfig):
        self.name = name
        self.config = config
        self._logger = logging.getLogger(name)
        self._lock = threading.Lock()
        self._setup_logger()

    def _setup_logger(self):
        """Set up the logger with handlers and formatters."""
        with self._lock:
            if getattr(self._logger, "_envy_configured", False):
                return

            self._logger.propagate = False
            self._logger.setLevel(logging.DEBUG)

            stream = sys.stderr
            console_handler = logging.StreamHandler(stream)
            console_handler.setLevel(self.config.console_level.value)
            console_handler.setFormatter(ColoredFormatter(
                fmt='%(name)s | %(levelname)s | %(message)s',
                use_color=hasattr(stream, "isatty") and stream.isatty(),
            ))
            self._logger.addHandler(console_handler)

            if self.config.log_file is not None:
                try:
                    file_handler = logging.handlers.RotatingFileHandler(
                        self.config.log_file,
                        maxBytes=self.config.max_file_size,
                        backupCount=self.config.backup_count,
                        encoding='utf-8'
                    )
                except OSError as e:
                    self.config.disable_log_file(e)
                else:
                    file_handler.setLevel(self.config.file_level.value)
                    file_handler.setFormatter(logging.Formatter(
                        fmt='%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S'
                    ))
                    self._logger.addHandler(file_handler)

            self._logger._envy_configured = True

        if self.config.log_file_error and not self.config.log_file_warned:
            self.config.log_file_warned = True
            self._logger.warning(self.config.log_file_error)

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self._logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self._logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self._logger.warning(message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs):
        """Log error message."""
        self._logger.error(message, exc_info=exc_info, **kwargs)

    def critical(self, message: str, exc_info: bool = True, **kwargs):
        """Log critical message."""
        self._logger.critical(message, exc_info=exc_info, **kwargs)


class LoggerManager:
    """Centralized logger manager."""

    _instance: Optional['LoggerManager'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'LoggerManager':
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if hasattr(self, '_initialized'):
            return

        self._initialized = True
        self.config = LoggerConfig()
        self._loggers: Dict[str, EnvyLogger] = {}

    def get_logger(self, name: str) -> EnvyLogger:
        """
        Get or create a logger with the given name.

        Args:
            name: Logger name (usually "envy.<area>")

        Returns:
            EnvyLogger instance
        """
        if name not in self._loggers:
            with self._lock:
                if name not in self._loggers:
                    self._loggers[name] = EnvyLogger(name, self.config)

        return self._loggers[name]

    def set_console_level(self, level: LogLevel):
        """Set console logging level for all loggers."""
        with self._lock:
            self.config.console_level = level
            for logger in self._loggers.values():
                for handler in logger._logger.handlers:
                    if not isinstance(handler, logging.FileHandler):
                        handler.setLevel(level.value)


_logger_manager = LoggerManager()


def get_logger(name: str = None) -> EnvyLogger:
    """
    Get a logger instance.

    Args:
        name: Logger name (defaults to "envy")

    Returns:
        EnvyLogger instance
    """
    return _logger_manager.get_logger(name or "envy")


def set_console_level(level: Union[LogLevel, str]):
    """
    Set console logging level globally.

    Args:
        level: LogLevel enum or string ('DEBUG', 'INFO', etc.)

    Raises:
        KeyError: If the string is not a known level name.
    """
    if isinstance(level, str):
        level = LogLevel[level.upper()]
    _logger_manager.set_console_level(level)


def enable_debug_mode():
    """Enable debug mode for all loggers."""
    _logger_manager.set_console_level(LogLevel.DEBUG)


def log_error_with_context(error: Exception, context: str, logger_name: str = None):
    """
    Log an error with context information.

    Args:
        error: Exception that occurred
        context: Context where the error occurred
        logger_name: Name of logger to use
    """
    logger = get_logger(logger_name)
    logger.error(f"Error in {context}: {error}", exc_info=True)
