"""
Booking Management Module
Handles the AI Power Hour booking workflow: validation, duplicate check,
calendar event creation, persistence and confirmation email
"""

import os

import db_utils as db
import email_utils as email
from calendar_utils import GoogleCalendarClient, build_power_hour_event
from exceptions import BusinessLogicError
from validation_utils import BookingDataValidator

TEMPLATE_DIR = os.environ.get('TEMPLATE_DIR')

SPAM_MESSAGE = "Thank you for booking!"
DUPLICATE_MESSAGE = "You have already booked this time slot."


class BookingManager:
    """Books AI Power Hours against injected store, calendar and mail collaborators"""

    def __init__(self, table, calendar, mailer, template_dir):
        self.table = table
        self.calendar = calendar
        self.mailer = mailer
        self.template_dir = template_dir

    def book(self, booking_data):
        """
        Complete booking workflow

        Args:
            booking_data (dict): Raw booking fields from the request

        Returns:
            dict: Response data with a confirmation message

        Raises:
            ValidationError: If the submission is invalid
            BusinessLogicError: If the attendee already booked this slot
        """
        if BookingDataValidator.is_spam(booking_data):
            email_value = booking_data.get('email') or 'unknown'
            print(f"Spam detected from {email_value} - mobile field filled.")
            return {"message": SPAM_MESSAGE}

        print(f"Validating booking info for {booking_data.get('email') or '(no email provided)'}.")
        booking = BookingDataValidator.validate_booking_data(booking_data)

        # Check and write are separate calls, so concurrent submissions can both pass
        if self.table.get_booking(booking.booking_key):
            raise BusinessLogicError(DUPLICATE_MESSAGE)

        print(f"Creating calendar event for {booking.email} at {booking.selected_time_slot}")
        created = self.calendar.create_event(build_power_hour_event(booking))
        meeting_link = created['meeting_link']

        record = db.build_booking_record(booking, created['event_id'], meeting_link)
        self.table.put_booking(record)

        date_time = email.format_display_datetime(booking.start)
        print(f"Sending confirmation email to {booking.email}")
        self.mailer.send_booking_confirmation(booking, date_time, meeting_link, self.template_dir)

        return {"message": f"AI Power Hour booked for {booking.name} at {date_time}"}


def get_booking_manager(default_template_dir=None):
    """
    Build a BookingManager wired to DynamoDB, Google Calendar and SES

    TEMPLATE_DIR overrides the calling function's default template directory.
    """
    return BookingManager(
        table=db.BookingTable(),
        calendar=GoogleCalendarClient(),
        mailer=email.SesMailer(),
        template_dir=TEMPLATE_DIR or default_template_dir
    )
