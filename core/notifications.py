# core/notifications.py
import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import List, Optional
from core.config import settings
from core.logging_config import logger


def smtp_configured() -> bool:
    return all([settings.SMTP_HOST, settings.SMTP_PORT, settings.SMTP_USER, settings.SMTP_PASS])


def _open_smtp() -> smtplib.SMTP:
    """SMTP_SECURE → implicit TLS (465); otherwise plain + STARTTLS (587)."""
    if settings.SMTP_SECURE:
        return smtplib.SMTP_SSL(settings.SMTP_HOST, settings.SMTP_PORT)

    server = smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT)
    server.starttls()
    return server


def build_message(subject: str, body: str, recipients: List[str], html_body: Optional[str] = None) -> MIMEMultipart:
    msg = MIMEMultipart("alternative")
    msg["From"] = settings.EMAIL_FROM or settings.SMTP_USER
    msg["To"] = ", ".join(recipients)
    msg["Subject"] = subject

    # plain text first; clients show the last part they support
    msg.attach(MIMEText(body, "plain"))
    if html_body:
        msg.attach(MIMEText(html_body, "html"))
    return msg


# -----------------------------------------------------
# 📧 Send email (SMTP)
# -----------------------------------------------------
def send_email(
    subject: str,
    body: str,
    to: str = None,
    recipients: Optional[List[str]] = None,
    html_body: Optional[str] = None
) -> bool:
    """
    Send a church email via SMTP.

    `recipients` wins over `to`; with neither, SMTP_TO is used.

    Returns True when the message was handed to the SMTP server, False when
    sending was skipped (no recipients / SMTP not configured). Delivery
    errors are logged and re-raised; callers decide whether they are fatal.
    """
    if recipients:
        recipient_list = recipients
    elif to:
        recipient_list = [to]
    else:
        recipient_list = [settings.SMTP_TO] if settings.SMTP_TO else []

    if not recipient_list:
        logger.warning(f"No recipients for '{subject}'; skipping email.")
        return False

    if not smtp_configured():
        logger.warning(f"SMTP not configured; skipping email '{subject}'.")
        return False

    msg = build_message(subject, body, recipient_list, html_body)

    try:
        with _open_smtp() as server:
            server.login(settings.SMTP_USER, settings.SMTP_PASS)
            server.send_message(msg)
    except Exception as e:
        logger.error(f"Email '{subject}' to {', '.join(recipient_list)} failed: {e}")
        raise

    logger.info(f"Email '{subject}' sent to {', '.join(recipient_list)}")
    return True
