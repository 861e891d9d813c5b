"""Email relay for contact submissions (SMTP).

Two messages per submission: a notification to the site owner and an
auto-reply to the sender. ``EMAIL_SERVICE=gmail`` uses Gmail's SSL endpoint;
anything else uses ``SMTP_HOST``/``SMTP_PORT`` (implicit TLS when
``SMTP_SECURE`` is true, STARTTLS when the server offers it).
"""

from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage
from typing import Mapping, Optional

from .storage import ContactRecord

log = logging.getLogger(__name__)

GMAIL_HOST = "smtp.gmail.com"
GMAIL_PORT = 465


def _html_lines(text: str) -> str:
    return text.replace("\n", "<br>")


def notification_html(record: ContactRecord) -> str:
    return f"""
<h3>New Contact Form Submission</h3>
<p><strong>Name:</strong> {record.name}</p>
<p><strong>Email:</strong> {record.email}</p>
<p><strong>Subject:</strong> {record.subject}</p>
<p><strong>Message:</strong></p>
<p>{_html_lines(record.message)}</p>
<hr>
<p><small>Sent from your portfolio website</small></p>
"""


def auto_reply_html(record: ContactRecord, owner: str) -> str:
    return f"""
<h3>Thank you for your message, {record.name}!</h3>
<p>I have received your message and will get back to you as soon as possible.</p>
<p>Here's a copy of what you sent:</p>
<blockquote>
  <p><strong>Subject:</strong> {record.subject}</p>
  <p><strong>Message:</strong> {_html_lines(record.message)}</p>
</blockquote>
<p>Best regards,<br>{owner}</p>
"""


class Mailer:
    def __init__(
        self,
        user: str,
        password: str,
        service: Optional[str] = None,
        host: str = "localhost",
        port: int = 587,
        secure: bool = False,
        recipient: Optional[str] = None,
        owner: str = "",
        timeout: float = 10.0,
    ):
        self.user = user
        self.password = password
        self.service = (service or "").lower()
        self.host = host
        self.port = port
        self.secure = secure
        self.recipient = recipient or user
        self.owner = owner
        self.timeout = timeout

    @classmethod
    def from_config(cls, cfg: Mapping) -> Optional["Mailer"]:
        """Build from app config; None unless EMAIL_USER and EMAIL_PASS are both set."""
        if not (cfg.get("EMAIL_USER") and cfg.get("EMAIL_PASS")):
            return None
        return cls(
            user=cfg["EMAIL_USER"],
            password=cfg["EMAIL_PASS"],
            service=cfg.get("EMAIL_SERVICE"),
            host=cfg.get("SMTP_HOST") or "localhost",
            port=int(cfg.get("SMTP_PORT") or 587),
            secure=bool(cfg.get("SMTP_SECURE")),
            recipient=cfg.get("RECIPIENT_EMAIL"),
            owner=cfg.get("OWNER_NAME") or "",
        )

    def _open(self) -> smtplib.SMTP:
        if self.service == "gmail":
            smtp = smtplib.SMTP_SSL(GMAIL_HOST, GMAIL_PORT, timeout=self.timeout)
        elif self.secure:
            smtp = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        else:
            smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            smtp.ehlo()
            if smtp.has_extn("starttls"):
                smtp.starttls()
                smtp.ehlo()
        smtp.login(self.user, self.password)
        return smtp

    def _message(self, to: str, subject: str, html: str) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = self.user
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content("This message requires an HTML-capable mail client.")
        msg.add_alternative(html, subtype="html")
        return msg

    def send_contact(self, record: ContactRecord) -> None:
        """Send the owner notification, then the auto-reply. Raises on SMTP errors."""
        notification = self._message(
            self.recipient, f"Portfolio Contact: {record.subject}", notification_html(record)
        )
        reply = self._message(
            record.email, "Thank you for contacting me!", auto_reply_html(record, self.owner)
        )
        with self._open() as smtp:
            smtp.send_message(notification)
            smtp.send_message(reply)
        log.info("Contact emails sent to %s and %s", self.recipient, record.email)
