"""Tests for the DynamoDB booking table."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

from db_utils import BookingTable, build_booking_record
from validation_utils import BookingDataValidator


def test_get_booking_returns_none_when_absent():
    client = MagicMock()
    client.get_item.return_value = {}
    table = BookingTable(client=client, table_name="bookings")

    assert table.get_booking("2025-06-01T18:00:00.000Z#jane@example.com") is None
    client.get_item.assert_called_once_with(
        TableName="bookings",
        Key={
            "pk": {"S": "booking#ai-power-hour"},
            "sk": {"S": "2025-06-01T18:00:00.000Z#jane@example.com"},
        },
    )


def test_get_booking_deserializes_item():
    client = MagicMock()
    client.get_item.return_value = {"Item": {"name": {"S": "Jane Doe"}, "durationMinutes": {"N": "60"}}}
    table = BookingTable(client=client, table_name="bookings")

    record = table.get_booking("key")

    assert record["name"] == "Jane Doe"
    assert record["durationMinutes"] == 60


def test_build_and_put_booking_record(booking_data):
    booking = BookingDataValidator.validate_booking_data(booking_data)
    booked_at = datetime(2025, 5, 20, 12, 30, tzinfo=timezone.utc)

    record = build_booking_record(booking, "evt123", "https://meet.google.com/x", booked_at=booked_at)

    assert record == {
        "pk": "booking#ai-power-hour",
        "sk": "2025-06-01T18:00:00.000Z#jane@example.com",
        "name": "Jane Doe",
        "email": "jane@example.com",
        "website": "https://example.com",
        "techLevel": "intermediate",
        "specialRequests": "",
        "bookingTime": "2025-06-01T18:00:00.000Z",
        "durationMinutes": 60,
        "googleEventId": "evt123",
        "meetingLink": "https://meet.google.com/x",
        "bookedAt": "2025-05-20T12:30:00.000Z",
    }

    client = MagicMock()
    BookingTable(client=client, table_name="bookings").put_booking(record)

    item = client.put_item.call_args.kwargs["Item"]
    assert client.put_item.call_args.kwargs["TableName"] == "bookings"
    assert item["durationMinutes"] == {"N": "60"}
    assert item["specialRequests"] == {"S": ""}
    assert "ConditionExpression" not in client.put_item.call_args.kwargs
