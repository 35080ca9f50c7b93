"""
app/services/email_service.py

Purpose: Email delivery for the forgot-password flow

- Sends reset OTPs and password-changed notices over SMTP
- Best effort: failures are logged and reported as False, never raised
- When SMTP is not configured nothing is sent and a notice is logged
"""

import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Any, Dict

from app.core.config import Settings
from app.core.logging import get_logger
from utils.constants import (
    EMAIL_SUBJECT_RESET_OTP,
    EMAIL_BODY_RESET_OTP,
    EMAIL_SUBJECT_PASSWORD_CHANGED,
    EMAIL_BODY_PASSWORD_CHANGED,
)

logger = get_logger(__name__)


class EmailService:
    """Service for sending account emails via SMTP"""

    def __init__(self, settings: Settings):
        self.host = settings.SMTP_HOST
        self.port = settings.SMTP_PORT
        self.user = settings.SMTP_USER
        self.password = settings.SMTP_PASSWORD
        self.from_addr = settings.EMAIL_FROM or settings.SMTP_USER

    def is_configured(self) -> bool:
        """Check if SMTP is properly configured"""
        return bool(self.host and self.user and self.password)

    async def send_reset_otp(self, user: Dict[str, Any], code: str, expire_minutes: int) -> bool:
        body = EMAIL_BODY_RESET_OTP.format(
            name=user.get("name") or user.get("username"),
            code=code,
            minutes=expire_minutes,
        )
        return await self.send(user["email"], EMAIL_SUBJECT_RESET_OTP, body)

    async def send_password_changed(self, user: Dict[str, Any]) -> bool:
        body = EMAIL_BODY_PASSWORD_CHANGED.format(
            name=user.get("name") or user.get("username"),
            username=user.get("username"),
        )
        return await self.send(user["email"], EMAIL_SUBJECT_PASSWORD_CHANGED, body)

    async def send(self, to_email: str, subject: str, body: str) -> bool:
        """
        Sends a plain-text email.

        Returns:
            True if the SMTP server accepted the message, False otherwise
        """
        if not self.is_configured():
            logger.info(f"SMTP not configured; email '{subject}' to {to_email} was not sent")
            return False

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.from_addr
        msg["To"] = to_email
        msg.attach(MIMEText(body, "plain"))

        try:
            # smtplib blocks, keep it off the event loop
            await asyncio.to_thread(self._deliver, to_email, msg.as_string())
            logger.info(f"Email '{subject}' sent to {to_email}")
            return True
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(f"Failed to send email '{subject}' to {to_email}: {e}")
            return False

    def _deliver(self, to_email: str, message: str) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=10) as server:
            server.starttls()
            server.login(self.user, self.password)
            server.sendmail(self.from_addr, [to_email], message)
