import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from opdesk.config import Settings, get_settings
from opdesk.resend import send_ticket_email
from opdesk.schemas.ticket_notification import TicketNotification

logger = logging.getLogger(__name__)

router = APIRouter()

NOTIFY_TICKET_PATH = "/notify-ticket"

ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def read_json_body(request: Request) -> dict:
    """Missing, empty or non-object bodies are read as an empty record."""
    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("Ignoring ticket body that is not valid JSON")
        return {}
    return data if isinstance(data, dict) else {}


@router.api_route(NOTIFY_TICKET_PATH, methods=ROUTE_METHODS)
async def notify_ticket(
    request: Request,
    settings: Settings = Depends(get_settings)
):
    if request.method != "POST":
        return JSONResponse(status_code=405, content={"error": "Method not allowed"})

    body = await read_json_body(request)

    try:
        ticket = TicketNotification.model_validate(body)
    except ValidationError:
        return JSONResponse(status_code=400, content={"error": "Missing required fields"})

    if not ticket.is_complete():
        return JSONResponse(status_code=400, content={"error": "Missing required fields"})

    # Delivery outcome never changes the status code.
    result = await run_in_threadpool(send_ticket_email, ticket, settings)

    return JSONResponse(status_code=200, content=result.to_response())
