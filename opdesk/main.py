import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from opdesk.api.notify_ticket_controller import NOTIFY_TICKET_PATH, router as notify_ticket_router

from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

API_PREFIX = "/api"

app = FastAPI(title="OpDesk")

app.include_router(prefix=API_PREFIX, router=notify_ticket_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    # Methods outside the route's list are rejected by the router before the handler runs.
    if exc.status_code == 405 and request.url.path == API_PREFIX + NOTIFY_TICKET_PATH:
        return JSONResponse(status_code=405, content={"error": "Method not allowed"})
    return await http_exception_handler(request, exc)
