"""
Validation utilities for the booking form
Centralizes validation of booking submissions before any side effects run
"""

from datetime import datetime, timedelta, timezone

from exceptions import ValidationError


MAX_FIELD_LENGTH = 2000
TECH_LEVELS = ('beginner', 'intermediate', 'advanced')
SLOT_DURATION = timedelta(hours=1)

# A day of headroom keeps the slot end and any local-time display within datetime's range
EARLIEST_SLOT = datetime.min.replace(tzinfo=timezone.utc) + timedelta(days=1)
LATEST_SLOT = datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)


def parse_timeslot(value):
    """
    Parse an ISO-8601 instant into an aware UTC datetime

    Args:
        value (str): Submitted time slot, e.g. '2025-06-01T18:00:00.000Z'

    Returns:
        datetime: Aware datetime in UTC, or None if the value is not a valid instant
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    if text[-1] in ('Z', 'z'):
        text = text[:-1] + '+00:00'

    try:
        parsed = datetime.fromisoformat(text)
        # Offset-less timestamps are taken as UTC, the Lambda runtime's local zone
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        parsed = parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None

    if not EARLIEST_SLOT <= parsed <= LATEST_SLOT:
        return None
    return parsed


def has_control_characters(value):
    """True if the value holds CR, LF or any other ASCII control character"""
    return any(ord(char) < 32 or ord(char) == 127 for char in value)


def to_iso_string(dt):
    """Format a datetime as a UTC ISO string with milliseconds ('2025-06-01T18:00:00.000Z')"""
    dt = dt.astimezone(timezone.utc)
    return dt.strftime('%Y-%m-%dT%H:%M:%S') + f'.{dt.microsecond // 1000:03d}Z'


class BookingRequest:
    """A validated booking form submission"""

    def __init__(self, selected_time_slot, start, name, email, website,
                 tech_level=None, special_requests=None):
        self.selected_time_slot = selected_time_slot
        self.start = start
        self.end = start + SLOT_DURATION
        self.name = name
        self.email = email
        self.website = website
        self.tech_level = tech_level
        self.special_requests = special_requests

    @property
    def booking_key(self):
        """Composite sort key: submitted time slot and lowercased email"""
        return f"{self.selected_time_slot}#{self.email}"

    @property
    def tech_level_display(self):
        return self.tech_level or 'Not specified'

    @property
    def special_requests_display(self):
        return self.special_requests or 'None'


class BookingDataValidator:
    """Validation rules for the AI Power Hour booking form"""

    HONEYPOT_FIELD = 'mobile'

    @staticmethod
    def is_spam(booking_data):
        """The hidden 'mobile' field is never filled in by people"""
        honeypot = booking_data.get(BookingDataValidator.HONEYPOT_FIELD)
        if honeypot is None:
            return False
        return str(honeypot).strip() != ''

    @staticmethod
    def _optional(booking_data, key):
        value = booking_data.get(key)
        if not value:
            return None
        return value

    @staticmethod
    def _require_text(value, label, field):
        if not isinstance(value, str):
            raise ValidationError(f"{label} must be text.", field)

    @staticmethod
    def _validate_length(value, message, field):
        if value is not None and len(value) > MAX_FIELD_LENGTH:
            raise ValidationError(message, field)

    @staticmethod
    def validate_booking_data(booking_data):
        """
        Validate a booking submission in form order

        Args:
            booking_data (dict): Raw booking fields from the request payload

        Returns:
            BookingRequest: The validated request

        Raises:
            ValidationError: On the first failing rule
        """
        optional = BookingDataValidator._optional
        require_text = BookingDataValidator._require_text
        validate_length = BookingDataValidator._validate_length

        selected_time_slot = optional(booking_data, 'selectedTimeSlot')
        name = optional(booking_data, 'name')
        email = optional(booking_data, 'email')
        website = optional(booking_data, 'website')
        tech_level = optional(booking_data, 'techLevel')
        special_requests = optional(booking_data, 'specialRequests')

        if not selected_time_slot:
            raise ValidationError("Please select a time slot.", 'selectedTimeSlot')

        if not name:
            raise ValidationError("Name is required.", 'name')
        require_text(name, "Name", 'name')

        if not email:
            raise ValidationError("Email is required.", 'email')
        require_text(email, "Email", 'email')
        email = email.lower()
        if '@' not in email or has_control_characters(email):
            raise ValidationError("Please provide a valid email.", 'email')

        if not website:
            raise ValidationError("Company Website is required.", 'website')
        require_text(website, "Company Website", 'website')

        if tech_level is not None and tech_level not in TECH_LEVELS:
            raise ValidationError("Tech level must be beginner, intermediate, or advanced.", 'techLevel')

        validate_length(name, "Name must be 2000 characters or less.", 'name')
        validate_length(email, "Email must be 2000 characters or less.", 'email')
        validate_length(website, "Company Website must be 2000 characters or less.", 'website')

        if special_requests is not None:
            require_text(special_requests, "Special requests", 'specialRequests')
        validate_length(special_requests, "Special requests must be 2000 characters or less.", 'specialRequests')

        start = parse_timeslot(selected_time_slot)
        if start is None:
            raise ValidationError("Invalid time slot format.", 'selectedTimeSlot')

        return BookingRequest(
            selected_time_slot=selected_time_slot,
            start=start,
            name=name,
            email=email,
            website=website,
            tech_level=tech_level,
            special_requests=special_requests
        )
