# envy/utils/exceptions.py
"""
Custom exceptions for Envy.

Only configuration problems are errors in Envy: everything that happens after
options are resolved (matching, splitting, highlighting, path checks) is a
total function. Configuration errors abort the run before any output.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories for classification."""
    CONFIG = "config"
    PATTERN = "pattern"
    SYSTEM = "system"


class EnvyError(Exception):
    """Base exception class for all Envy errors."""

    def __init__(self,
                 message: str,
                 category: ErrorCategory = ErrorCategory.SYSTEM,
                 severity: ErrorSeverity = ErrorSeverity.MEDIUM,
                 details: Optional[Dict[str, Any]] = None,
                 user_message: Optional[str] = None):
        """
        Initialize base exception.

        Args:
            message: Technical error message for logging
            category: Error category for classification
            severity: Error severity level
            details: Additional details for debugging
            user_message: User-friendly message for display
        """
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.details = details or {}
        self.user_message = user_message or self._generate_user_message()

    def _generate_user_message(self) -> str:
        """Generate a user-friendly message based on the category."""
        category_messages = {
            ErrorCategory.CONFIG: "A configuration error occurred",
            ErrorCategory.PATTERN: "Invalid pattern",
            ErrorCategory.SYSTEM: "A system error occurred",
        }
        return category_messages.get(self.category, "An unexpected error occurred")

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'category': self.category.value,
            'severity': self.severity.value,
            'details': self.details,
            'user_message': self.user_message
        }

    def __str__(self) -> str:
        return f"[{self.category.value.upper()}:{self.severity.value.upper()}] {self.message}"


class ConfigError(EnvyError):
    """Base class for configuration-related errors."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault('category', ErrorCategory.CONFIG)
        kwargs.setdefault('severity', ErrorSeverity.CRITICAL)
        super().__init__(message, **kwargs)


class PatternError(ConfigError):
    """Raised when a name or search pattern does not compile."""

    def __init__(self, pattern: str, reason: str, role: str = "name", **kwargs):
        message = f"Failed to compile {role} pattern '{pattern}': {reason}"
        kwargs.setdefault('category', ErrorCategory.PATTERN)
        kwargs.setdefault('details', {'pattern': pattern, 'reason': reason, 'role': role})
        kwargs.setdefault('user_message', f"Invalid {role} pattern '{pattern}': {reason}")
        super().__init__(message, **kwargs)
        self.pattern = pattern
        self.role = role


class SeparatorError(ConfigError):
    """Raised when the separator character set cannot be used."""

    def __init__(self, separators: str, reason: str, **kwargs):
        message = f"Unusable separator set {separators!r}: {reason}"
        kwargs.setdefault('details', {'separators': separators, 'reason': reason})
        kwargs.setdefault('user_message', f"Invalid separator set {separators!r}: {reason}")
        super().__init__(message, **kwargs)
        self.separators = separators


def handle_exception(exception: Exception,
                     context: str = "",
                     logger_name: str = None) -> EnvyError:
    """
    Log an exception and convert it to an EnvyError.

    Args:
        exception: Exception to handle
        context: Context where the exception occurred
        logger_name: Logger name to use

    Returns:
        The exception itself when it already is an EnvyError, otherwise a
        generic EnvyError wrapping it.
    """
    from .logger import log_error_with_context

    log_error_with_context(exception, context, logger_name)

    if isinstance(exception, EnvyError):
        return exception
    return EnvyError(
        message=str(exception),
        details={'original_type': type(exception).__name__, 'context': context}
    )
