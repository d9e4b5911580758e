import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

RESEND_API_URL = "https://api.resend.com/emails"

# TODO: switch to support@opdesk.app once the domain is verified in Resend
DEFAULT_NOTIFY_FROM = "OpDesk Support <onboarding@resend.dev>"
DEFAULT_NOTIFY_TO = ["relborg@outlook.com"]


class Settings(BaseModel):
    resend_api_key: Optional[str] = None
    resend_api_url: str = RESEND_API_URL
    notify_from: str = DEFAULT_NOTIFY_FROM
    notify_to: List[str] = DEFAULT_NOTIFY_TO


def get_settings() -> Settings:
    """
    Reads configuration from the environment on every call so the Resend key
    is picked up at invocation time. An empty key counts as unset.
    """
    notify_to = os.environ.get("NOTIFY_TO")
    recipients = [addr.strip() for addr in notify_to.split(",") if addr.strip()] if notify_to else []

    return Settings(
        resend_api_key=os.environ.get("RESEND_API_KEY") or None,
        notify_from=os.environ.get("NOTIFY_FROM") or DEFAULT_NOTIFY_FROM,
        notify_to=recipients or list(DEFAULT_NOTIFY_TO),
    )
