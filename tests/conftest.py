from unittest.mock import Mock, patch

import pytest
from fastapi.testclient import TestClient

from opdesk.config import Settings, get_settings
from opdesk.main import app


@pytest.fixture
def settings():
    return Settings(resend_api_key="re_test_key")


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def mock_post():
    with patch("opdesk.resend.requests.post") as mock:
        mock.return_value = Mock(ok=True, status_code=200, text='{"id": "email_123"}')
        yield mock


@pytest.fixture
def ticket_body():
    return {
        "category": "Billing",
        "subject": "Invoice issue",
        "description": "Wrong amount charged",
        "ticket_id": "T-42",
    }
