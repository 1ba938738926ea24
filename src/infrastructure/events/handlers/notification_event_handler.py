"""Notification event handler stub.

Turns outbound lifecycle events into the email the notification
collaborator would send. The collaborator lives outside this service, so the
handler only logs ``email_would_be_sent``.

Templates:
    - verification_email: UserRegistered
    - verification_resend_email: EmailVerificationResent
    - password_reset_email: PasswordResetRequested

Raw tokens are never logged, not even inside a link. Only the link base
(the frontend page the token would be appended to) is recorded.
"""

from src.core.config import Settings
from src.domain.events.auth_events import (
    EmailVerificationResent,
    PasswordResetRequested,
    UserRegistered,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class NotificationEventHandler:
    """Event handler stub for outbound email notifications.

    Attributes:
        _logger: Logger protocol implementation (from container).
        _settings: Provides verification_url_base for links.

    Example:
        >>> handler = NotificationEventHandler(logger=get_logger(), settings=get_settings())
        >>> event_bus.subscribe(UserRegistered, handler.handle_user_registered)
    """

    def __init__(self, logger: LoggerProtocol, settings: Settings) -> None:
        self._logger = logger
        self._settings = settings

    @property
    def verification_link_base(self) -> str:
        """Frontend page that submits a verification token (?token= appended)."""
        return f"{self._settings.verification_url_base}/verify-email"

    @property
    def reset_link_base(self) -> str:
        """Frontend page that opens the reset-password form (?token= appended)."""
        return f"{self._settings.verification_url_base}/reset-password"

    async def handle_user_registered(self, event: UserRegistered) -> None:
        """Send the verification email (STUB)."""
        self._logger.info(
            "email_would_be_sent",
            template="verification_email",
            event_type=event.event_type,
            recipient=event.email,
            account_id=str(event.account_id),
            event_id=str(event.event_id),
            link_base=self.verification_link_base,
        )

    async def handle_email_verification_resent(
        self,
        event: EmailVerificationResent,
    ) -> None:
        """Send a fresh verification email (STUB)."""
        self._logger.info(
            "email_would_be_sent",
            template="verification_resend_email",
            event_type=event.event_type,
            recipient=event.email,
            account_id=str(event.account_id),
            event_id=str(event.event_id),
            link_base=self.verification_link_base,
        )

    async def handle_password_reset_requested(
        self,
        event: PasswordResetRequested,
    ) -> None:
        """Send the password reset email (STUB).

        Notes:
            - Link expires after RESET_TOKEN_EXPIRE_MINUTES
            - Sent only for existing, non-blocked accounts
        """
        self._logger.info(
            "email_would_be_sent",
            template="password_reset_email",
            event_type=event.event_type,
            recipient=event.email,
            account_id=str(event.account_id),
            event_id=str(event.event_id),
            link_base=self.reset_link_base,
            expires_in_minutes=self._settings.reset_token_expire_minutes,
        )
