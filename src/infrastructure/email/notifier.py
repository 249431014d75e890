"""Best-effort email notification for new contact submissions."""

import asyncio
import smtplib
from email.message import EmailMessage
from html import escape
from typing import Optional

import structlog

from core.config import settings
from domain.entities.contact import ContactSubmission

logger = structlog.get_logger()


def render_text(submission: ContactSubmission) -> str:
    lines = [
        "New Contact Form Submission",
        "",
        f"Name: {submission.full_name}",
        f"Email: {submission.email}",
    ]
    if submission.company:
        lines.append(f"Company: {submission.company}")
    if submission.project_type:
        lines.append(f"Project Type: {submission.project_type}")
    lines += [
        "",
        "Message:",
        submission.message,
        "",
        f"Submitted: {submission.created_at.isoformat()}",
    ]
    return "\n".join(lines)


def render_html(submission: ContactSubmission) -> str:
    fields = [
        ("Name", escape(submission.full_name)),
        ("Email", f'<a href="mailto:{escape(submission.email)}">{escape(submission.email)}</a>'),
    ]
    if submission.company:
        fields.append(("Company", escape(submission.company)))
    if submission.project_type:
        fields.append(("Project Type", escape(submission.project_type)))
    fields.append(("Message", escape(submission.message).replace("\n", "<br>")))
    fields.append(("Submitted", escape(submission.created_at.isoformat())))

    rows = "\n".join(
        f'<div class="field"><div class="label">{label}:</div>'
        f'<div class="value">{value}</div></div>'
        for label, value in fields
    )
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        "<title>New Contact Form Submission</title></head>"
        f"<body><h2>New Contact Form Submission</h2>{rows}</body></html>"
    )


class ContactNotifier:
    """Sends a notification email to the site owner over SMTP."""

    def __init__(
        self,
        host: str = settings.smtp_host,
        port: int = settings.smtp_port,
        username: str = settings.smtp_user,
        password: str = settings.smtp_password,
        recipient: Optional[str] = None,
        timeout: float = 10.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._recipient = recipient or settings.contact_notification_email or username
        self._timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self._username and self._password and self._recipient)

    def build_message(self, submission: ContactSubmission) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = f"New contact form submission from {submission.full_name}"
        message["From"] = self._username
        message["To"] = self._recipient
        message["Reply-To"] = submission.email
        message.set_content(render_text(submission))
        message.add_alternative(render_html(submission), subtype="html")
        return message

    def _send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
            server.starttls()
            server.login(self._username, self._password)
            server.send_message(message)

    async def notify(self, submission: ContactSubmission) -> bool:
        """Send the notification; never raises.

        Returns True when the message was handed to the SMTP server.
        """
        if not self.enabled:
            logger.info("contact_notification_skipped", submission_id=submission.id)
            return False

        try:
            message = self.build_message(submission)
            await asyncio.to_thread(self._send, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(
                "contact_notification_failed",
                submission_id=submission.id,
                error=str(exc),
            )
            return False
        except Exception as exc:
            # Runs as a background task: nothing above us can handle it.
            logger.exception(
                "contact_notification_failed",
                submission_id=submission.id,
                error=str(exc),
            )
            return False

        logger.info("contact_notification_sent", submission_id=submission.id)
        return True
