import os
import sys
from unittest.mock import MagicMock

import pytest

ROOT = os.path.join(os.path.dirname(__file__), "..")
FUNCTION_DIR = os.path.join(ROOT, "lambda", "api-book-power-hour")

# Lambda layers put common_lib and the function directory on the import path
sys.path.insert(0, os.path.join(ROOT, "lambda", "common_lib"))
sys.path.insert(0, FUNCTION_DIR)

from booking_manager import BookingManager
from calendar_utils import GoogleCalendarClient
from db_utils import BookingTable
from email_utils import SesMailer


VALID_BOOKING = {
    "selectedTimeSlot": "2025-06-01T18:00:00.000Z",
    "name": "Jane Doe",
    "email": "jane@example.com",
    "website": "https://example.com",
    "techLevel": "intermediate",
}


@pytest.fixture
def booking_data():
    return dict(VALID_BOOKING)


@pytest.fixture
def template_dir():
    return FUNCTION_DIR


@pytest.fixture
def dynamodb_client():
    client = MagicMock()
    client.get_item.return_value = {}
    client.put_item.return_value = {}
    return client


@pytest.fixture
def calendar_service():
    service = MagicMock()
    service.events.return_value.insert.return_value.execute.return_value = {
        "id": "evt123",
        "hangoutLink": "https://meet.google.com/abc-defg-hij",
        "htmlLink": "https://www.google.com/calendar/event?eid=evt123",
    }
    return service


@pytest.fixture
def ses_client():
    client = MagicMock()
    client.send_raw_email.return_value = {"MessageId": "msg-001"}
    return client


@pytest.fixture
def manager(dynamodb_client, calendar_service, ses_client, template_dir):
    """BookingManager wired to real collaborators over mocked AWS and Google clients"""
    return BookingManager(
        table=BookingTable(client=dynamodb_client, table_name="bookings-test"),
        calendar=GoogleCalendarClient(calendar_id="owner@example.com", service=calendar_service),
        mailer=SesMailer(
            client=ses_client,
            from_address="Innovation Bound <website@innovationbound.com>",
            reply_to="Costa Michailidis <costa@innovationbound.com>",
        ),
        template_dir=template_dir,
    )


@pytest.fixture
def handler(manager, monkeypatch):
    import main

    monkeypatch.setattr(main, "booking_manager", manager)
    return main.lambda_handler
