"""E-mail sender that writes messages to the log instead of an SMTP server."""

from __future__ import annotations

import structlog

from myshop.application.ports import EmailSender

logger = structlog.get_logger(__name__)


class LoggingEmailSender(EmailSender):

    def send(self, to: str, subject: str, body: str) -> None:
        logger.info("Email sent", to=to, subject=subject, body=body)
