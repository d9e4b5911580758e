import logging
from dataclasses import dataclass
from typing import Optional

import requests

from opdesk.config import Settings
from opdesk.schemas.ticket_notification import TicketNotification
from opdesk.templates.ticket_email import render_ticket_email, ticket_email_subject

logger = logging.getLogger(__name__)


@dataclass
class DeliveryResult:
    delivered: bool
    error_detail: Optional[str] = None
    skipped: bool = False

    def to_response(self) -> dict:
        if self.skipped:
            return {"ok": True, "skipped": True}
        if self.delivered:
            return {"ok": True}
        return {"ok": False, "error": self.error_detail}


def build_email_payload(ticket: TicketNotification, settings: Settings) -> dict:
    return {
        "from": settings.notify_from,
        "to": list(settings.notify_to),
        "subject": ticket_email_subject(ticket),
        "html": render_ticket_email(ticket),
    }


def send_ticket_email(ticket: TicketNotification, settings: Settings) -> DeliveryResult:
    """
    Sends one notification email through Resend. Never raises: provider and
    network failures come back as an undelivered result so ticket submission
    is not blocked by email delivery. Makes a single attempt.
    """

    if not settings.resend_api_key:
        logger.info("RESEND_API_KEY not configured, skipping ticket notification")
        return DeliveryResult(delivered=False, skipped=True)

    headers = {
        "Authorization": f"Bearer {settings.resend_api_key}",
        "Content-Type": "application/json"
    }

    try:
        resp = requests.post(
            settings.resend_api_url,
            headers=headers,
            json=build_email_payload(ticket, settings)
        )
    except requests.RequestException as e:
        logger.exception("Notify ticket error: %s", e)
        return DeliveryResult(delivered=False, error_detail=str(e))

    if not resp.ok:
        logger.error("Resend error: %s", resp.text)
        return DeliveryResult(delivered=False, error_detail=resp.text)

    logger.info("Ticket notification sent for ticket %s", ticket.ticket_id or "N/A")
    return DeliveryResult(delivered=True)
