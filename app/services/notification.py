"""Best-effort admin email notifications for new submissions, sent over SMTP."""

import html
import logging
import smtplib
from datetime import UTC, datetime
from email.message import EmailMessage
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.core.config import Settings

logger = logging.getLogger(__name__)

_LAYOUT = """
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto; padding: 20px; border: 1px solid #ff8c00; border-radius: 10px;">
  <h2 style="color: #ff8c00; text-align: center;">{title}</h2>
  <div style="background: #f5f5f5; padding: 20px; border-radius: 8px;">
    {rows}
    <p><strong style="color: #ff8c00;">Message:</strong></p>
    <p style="background: white; padding: 15px; border-radius: 5px;">{message}</p>
    <p><strong style="color: #ff8c00;">Received:</strong> {received}</p>
  </div>
  <p style="text-align: center; margin-top: 20px;">
    <a href="{dashboard_url}" style="background: #ff8c00; color: white; padding: 10px 20px; text-decoration: none; border-radius: 5px;">View in Dashboard</a>
  </p>
</div>
"""

_ROW = '<p><strong style="color: #ff8c00;">{label}:</strong> {value}</p>'

CONTACT_SUBJECT = "New Contact Message - Logic Spark"
SPONSOR_SUBJECT = "New Sponsorship Request - Logic Spark"


def render_alert(
    title: str,
    fields: list[tuple[str, Any]],
    message: str,
    dashboard_url: str,
    received: datetime | None = None,
) -> str:
    """Render the admin alert; every submitted value is HTML-escaped."""
    rows = "\n    ".join(
        _ROW.format(label=html.escape(label), value=html.escape(str(value)))
        for label, value in fields
    )
    return _LAYOUT.format(
        title=html.escape(title),
        rows=rows,
        message=html.escape(message),
        received=(received or datetime.now(UTC)).strftime("%Y-%m-%d %H:%M:%S %Z"),
        dashboard_url=html.escape(dashboard_url, quote=True),
    )


class NotificationSender:
    """
    Sends HTML email through the configured SMTP relay.

    send() never raises for delivery problems: failures are logged and
    reported as False so callers can fire and forget.
    """

    def __init__(self, settings: "Settings") -> None:
        self.settings = settings

    def is_configured(self) -> bool:
        return bool(self.settings.SMTP_HOST and self.settings.NOTIFY_FROM)

    def send(self, subject: str, html_body: str, recipient: str) -> bool:
        if not self.is_configured():
            logger.info("SMTP not configured; skipping notification %r", subject)
            return False

        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.settings.NOTIFY_FROM
        msg["To"] = recipient
        msg.set_content(html_body, subtype="html")

        try:
            with smtplib.SMTP(
                self.settings.SMTP_HOST,
                self.settings.SMTP_PORT,
                timeout=self.settings.SMTP_TIMEOUT_SEC,
            ) as smtp:
                if self.settings.SMTP_USE_TLS:
                    smtp.starttls()
                if self.settings.SMTP_USERNAME and self.settings.SMTP_PASSWORD is not None:
                    smtp.login(
                        self.settings.SMTP_USERNAME,
                        self.settings.SMTP_PASSWORD.get_secret_value(),
                    )
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.warning("Notification %r to %s failed: %s", subject, recipient, e)
            return False

        logger.info("Notification %r sent to %s", subject, recipient)
        return True

    def notify_contact(self, record: dict[str, Any]) -> bool:
        body = render_alert(
            "New Contact Message",
            [("Name", record["full_name"]), ("Email", record["email"])],
            record["message"],
            self.settings.DASHBOARD_URL,
            record.get("created_at"),
        )
        return self.send(CONTACT_SUBJECT, body, self.settings.ADMIN_EMAIL)

    def notify_sponsor(self, record: dict[str, Any]) -> bool:
        body = render_alert(
            "New Sponsorship Request",
            [
                ("Name/Organization", record["name"]),
                ("Email", record["email"]),
                ("Phone", record.get("phone") or "Not provided"),
                ("Support Type", record["support_type"]),
            ],
            record["message"],
            self.settings.DASHBOARD_URL,
            record.get("created_at"),
        )
        return self.send(SPONSOR_SUBJECT, body, self.settings.ADMIN_EMAIL)
