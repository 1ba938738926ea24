"""Logging event handler for domain events.

Structured logging for every credential lifecycle event. Raw secrets carried
by outbound events are never logged here.

Structured Fields:
    - event_type: Wire name (e.g., "USER_REGISTERED")
    - event_id: UUID for correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - account_id: Account the event concerns
"""

from src.domain.events.auth_events import (
    AuthTokensRefreshed,
    EmailVerificationResent,
    EmailVerified,
    PasswordResetCompleted,
    PasswordResetRequested,
    UserLoggedIn,
    UserLoggedOut,
    UserRegistered,
)
from src.domain.events.base_event import DomainEvent
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def _log(self, message: str, event: DomainEvent, **context: object) -> None:
        self._logger.info(
            message,
            event_type=event.event_type,
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            **context,
        )

    # =========================================================================
    # Outbound events
    # =========================================================================

    async def handle_user_registered(self, event: UserRegistered) -> None:
        """Log registration (verification token issued)."""
        self._log("user_registered", event, account_id=str(event.account_id), email=event.email)

    async def handle_email_verification_resent(
        self,
        event: EmailVerificationResent,
    ) -> None:
        """Log verification resend."""
        self._log(
            "email_verification_resent",
            event,
            account_id=str(event.account_id),
            email=event.email,
        )

    async def handle_password_reset_requested(
        self,
        event: PasswordResetRequested,
    ) -> None:
        """Log password reset request."""
        self._log(
            "password_reset_requested",
            event,
            account_id=str(event.account_id),
            email=event.email,
        )

    async def handle_user_logged_in(self, event: UserLoggedIn) -> None:
        """Log successful login."""
        self._log("user_logged_in", event, account_id=str(event.account_id), email=event.email)

    # =========================================================================
    # Internal events
    # =========================================================================

    async def handle_email_verified(self, event: EmailVerified) -> None:
        """Log account activation."""
        self._log("email_verified", event, account_id=str(event.account_id))

    async def handle_password_reset_completed(
        self,
        event: PasswordResetCompleted,
    ) -> None:
        """Log password reset (WARNING when sessions were cut)."""
        if event.revoked_refresh_tokens:
            self._logger.warning(
                "password_reset_completed",
                event_type=event.event_type,
                event_id=str(event.event_id),
                account_id=str(event.account_id),
                revoked_refresh_tokens=event.revoked_refresh_tokens,
            )
            return
        self._log("password_reset_completed", event, account_id=str(event.account_id))

    async def handle_auth_tokens_refreshed(self, event: AuthTokensRefreshed) -> None:
        """Log refresh token rotation."""
        self._log(
            "auth_tokens_refreshed",
            event,
            account_id=str(event.account_id),
            old_token_id=str(event.old_token_id),
            new_token_id=str(event.new_token_id),
        )

    async def handle_user_logged_out(self, event: UserLoggedOut) -> None:
        """Log logout."""
        self._log(
            "user_logged_out",
            event,
            account_id=str(event.account_id),
            revoked=event.revoked,
        )
