import boto3, os
from datetime import datetime, timezone
from boto3.dynamodb.types import TypeDeserializer, TypeSerializer

from validation_utils import to_iso_string

deserializer = TypeDeserializer()
serializer = TypeSerializer()

# Environment variables
BOOKINGS_TABLE = os.environ.get('BOOKINGS_TABLE', 'www.innovationbound.com')
AWS_REGION_NAME = os.environ.get('AWS_REGION_NAME', 'us-east-1')

BOOKING_PARTITION_KEY = 'booking#ai-power-hour'
BOOKING_DURATION_MINUTES = 60


def deserialize_item(item):
    return {k: deserializer.deserialize(v) for k, v in item.items()} if item else None

def serialize_item(item):
    return {k: serializer.serialize(v) for k, v in item.items()}


# ------------------  Bookings Table Functions ------------------

class BookingTable:
    """Bookings stored under a single partition, sorted by '<timeslot>#<email>'"""

    def __init__(self, client=None, table_name=None):
        self.client = client or boto3.client('dynamodb', region_name=AWS_REGION_NAME)
        self.table_name = table_name or BOOKINGS_TABLE

    def _key(self, booking_key):
        return {
            'pk': {'S': BOOKING_PARTITION_KEY},
            'sk': {'S': booking_key}
        }

    def get_booking(self, booking_key):
        """
        Get an existing booking by its sort key

        Args:
            booking_key (str): '<selectedTimeSlot>#<email>'

        Returns:
            dict: The booking record, or None if there is none

        Raises:
            ClientError: If DynamoDB rejects the request
        """
        print(f"get_booking: Looking up '{booking_key}' in table '{self.table_name}'")
        result = self.client.get_item(
            TableName=self.table_name,
            Key=self._key(booking_key)
        )
        return deserialize_item(result.get('Item'))

    def put_booking(self, booking_record):
        """Write a booking record; does not check for an existing item"""
        self.client.put_item(
            TableName=self.table_name,
            Item=serialize_item(booking_record)
        )
        print(f"Booking {booking_record['sk']} stored in {self.table_name}")
        return True


def build_booking_record(booking, event_id, meeting_link, booked_at=None):
    """Build a booking record from a validated BookingRequest and the created calendar event"""
    booked_at = booked_at or datetime.now(timezone.utc)

    return {
        'pk': BOOKING_PARTITION_KEY,
        'sk': booking.booking_key,
        'name': booking.name,
        'email': booking.email,
        'website': booking.website,
        'techLevel': booking.tech_level or '',
        'specialRequests': booking.special_requests or '',
        'bookingTime': to_iso_string(booking.start),
        'durationMinutes': BOOKING_DURATION_MINUTES,
        'googleEventId': event_id,
        'meetingLink': meeting_link,
        'bookedAt': to_iso_string(booked_at)
    }
