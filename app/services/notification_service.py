"""Lead notification e-mails sent through the Resend API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html import escape

import httpx
from sqlalchemy.engine import Engine
from sqlmodel import Session

from app.services import setting_service

logger = logging.getLogger(__name__)

RESEND_EMAILS_URL = "https://api.resend.com/emails"


@dataclass(frozen=True)
class LeadNotification:
    full_name: str
    email: str
    phone: str


class ResendMailer:
    """Minimal Resend client; ``send`` reports failures as ``False``."""

    def __init__(
        self,
        api_key: str,
        from_address: str,
        *,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.api_key = api_key
        self.from_address = from_address
        self.timeout = timeout
        self._client = client

    def send(self, *, to: list[str], subject: str, html: str) -> bool:
        request_kwargs = {
            "headers": {
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            "json": {
                "from": self.from_address,
                "to": to,
                "subject": subject,
                "html": html,
            },
            "timeout": self.timeout,
        }
        try:
            if self._client is not None:
                response = self._client.post(RESEND_EMAILS_URL, **request_kwargs)
            else:
                with httpx.Client() as client:
                    response = client.post(RESEND_EMAILS_URL, **request_kwargs)
        except httpx.HTTPError as exc:
            logger.error("HTTP error sending email to %s: %s", to, exc)
            return False

        if response.is_success:
            logger.info("Email sent successfully to %s", to)
            return True
        logger.error("Failed to send email to %s: %s %s", to, response.status_code, response.text)
        return False


def build_subject(lead: LeadNotification) -> str:
    return f"Yeni Form Başvurusu: {lead.full_name}"


def render_lead_email(lead: LeadNotification) -> str:
    """Render the notification body with every submitted value HTML-escaped."""

    full_name = escape(lead.full_name)
    email = escape(lead.email)
    phone = escape(lead.phone)
    cell = "padding: 10px; border: 1px solid #ddd;"
    label = f"{cell} background: #f9f9f9; font-weight: bold;"
    return f"""
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #0d9488; border-bottom: 2px solid #0d9488; padding-bottom: 10px;">
    Yeni Form Başvurusu
  </h2>
  <p style="font-size: 16px; color: #333;">
    Flow Temel Koçluk Okulu için yeni bir başvuru alındı:
  </p>
  <table style="width: 100%; border-collapse: collapse; margin: 20px 0;">
    <tr>
      <td style="{label} width: 120px;">Ad Soyad</td>
      <td style="{cell}">{full_name}</td>
    </tr>
    <tr>
      <td style="{label}">E-posta</td>
      <td style="{cell}"><a href="mailto:{email}" style="color: #0d9488;">{email}</a></td>
    </tr>
    <tr>
      <td style="{label}">Telefon</td>
      <td style="{cell}"><a href="tel:{phone}" style="color: #0d9488;">{phone}</a></td>
    </tr>
  </table>
  <p style="font-size: 14px; color: #666; margin-top: 20px;">
    Bu e-posta Flow Coaching &amp; Leadership Institute web sitesinden otomatik olarak gönderilmiştir.
  </p>
</div>
"""


def send_lead_notification(session: Session, mailer: ResendMailer | None, lead: LeadNotification) -> bool:
    """Notify the configured recipients about ``lead``; returns whether mail went out."""

    if mailer is None:
        logger.warning("RESEND_API_KEY is not configured. Skipping email notification.")
        return False

    recipients = setting_service.parse_recipients(setting_service.get_notification_emails(session))
    if not recipients:
        logger.info("No valid notification emails configured, skipping email")
        return False

    return mailer.send(to=recipients, subject=build_subject(lead), html=render_lead_email(lead))


def notify_lead_recipients(engine: Engine, mailer: ResendMailer | None, lead: LeadNotification) -> None:
    """Background entry point: opens its own session and never raises.

    The lead is already committed when this runs, so delivery problems are
    only logged.
    """

    try:
        with Session(engine) as session:
            send_lead_notification(session, mailer, lead)
    except Exception:
        logger.exception("Email notification failed")
