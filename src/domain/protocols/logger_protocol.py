"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logs (event name + key-value context).

Security:
    - NEVER log passwords or raw token secrets
    - Log identifiers (account_id, token_id) instead

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("account_registered", account_id=str(account.id))

    request_logger = logger.bind(trace_id=trace_id)
    request_logger.warning("login_failed", reason="invalid_password")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Five standard levels plus context binding for request-scoped loggers.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message.

        Args:
            message: Event name (snake_case, no f-strings).
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for failures needing attention."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with permanently bound context.

        The original logger is unchanged.
        """
        ...
