"""
Google Calendar integration
Builds AI Power Hour events and inserts them with Calendar API v3 using
an OAuth refresh token provisioned for the owner's calendar
"""

import os
import time

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build

from exceptions import ConfigurationError
from validation_utils import to_iso_string

# Environment variables
GOOGLE_CALENDAR_ID = os.environ.get('GOOGLE_CALENDAR_ID', 'costa@innovationbound.com')
GOOGLE_CAL_OAUTH_REFRESH_TOKEN = os.environ.get('GOOGLE_CAL_OAUTH_REFRESH_TOKEN')
GOOGLE_CAL_OAUTH_CLIENT_ID = os.environ.get('GOOGLE_CAL_OAUTH_CLIENT_ID')
GOOGLE_CAL_OAUTH_CLIENT_SECRET = os.environ.get('GOOGLE_CAL_OAUTH_CLIENT_SECRET')

SCOPES = ['https://www.googleapis.com/auth/calendar']
TOKEN_URI = 'https://oauth2.googleapis.com/token'

CALENDAR_TIMEZONE = 'America/New_York'
OWNER_NAME = 'Costa Michailidis'
OWNER_EMAIL = 'costa@innovationbound.com'

EMAIL_REMINDER_MINUTES = 24 * 60
POPUP_REMINDER_MINUTES = 60

PREPARATION_QUESTIONS = (
    "Think On 3 Questions Before Your Workshop:\n\n"
    "1. What are the top 1-3 constraints to business growth for your company?\n"
    "2. What work takes up the largest amount of your time?\n"
    "3. What questions or complaints do you have about ChatGPT and other AI tools?"
)


class CalendarEvent:
    """Event details for a booked AI Power Hour"""

    def __init__(self, summary, description, start, end, attendees,
                 time_zone=CALENDAR_TIMEZONE, request_id=None):
        self.summary = summary
        self.description = description
        self.start = start
        self.end = end
        self.attendees = attendees
        self.time_zone = time_zone
        self.request_id = request_id or f"ai-power-hour-{int(time.time() * 1000)}"

    def to_body(self):
        """Calendar API v3 event resource"""
        return {
            'summary': self.summary,
            'description': self.description,
            'start': {'dateTime': to_iso_string(self.start), 'timeZone': self.time_zone},
            'end': {'dateTime': to_iso_string(self.end), 'timeZone': self.time_zone},
            'attendees': self.attendees,
            'reminders': {
                'useDefault': False,
                'overrides': [
                    {'method': 'email', 'minutes': EMAIL_REMINDER_MINUTES},
                    {'method': 'popup', 'minutes': POPUP_REMINDER_MINUTES}
                ]
            },
            'conferenceData': {
                'createRequest': {
                    'requestId': self.request_id,
                    'conferenceSolutionKey': {'type': 'hangoutsMeet'}
                }
            }
        }


def build_event_description(booking):
    return (
        f"{PREPARATION_QUESTIONS}\n\n---\n\n"
        "Business Owner AI Power Hour Training & Strategy Workshop\n\n"
        f"Attendee: {booking.name}\n"
        f"Email: {booking.email}\n"
        f"Website: {booking.website}\n"
        f"Tech Level: {booking.tech_level_display}\n\n"
        f"Special Requests:\n{booking.special_requests_display}"
    )


def build_power_hour_event(booking):
    """One-hour event with the attendee and the owner invited"""
    return CalendarEvent(
        summary=f"AI Power Hour for {booking.name} with Innovation Bound",
        description=build_event_description(booking),
        start=booking.start,
        end=booking.end,
        attendees=[
            {'email': booking.email, 'displayName': booking.name},
            {'email': OWNER_EMAIL, 'displayName': OWNER_NAME, 'responseStatus': 'accepted'}
        ]
    )


class GoogleCalendarClient:
    """Creates events on the owner's Google Calendar"""

    def __init__(self, calendar_id=None, refresh_token=None, client_id=None,
                 client_secret=None, service=None):
        self.calendar_id = calendar_id or GOOGLE_CALENDAR_ID
        self.refresh_token = refresh_token or GOOGLE_CAL_OAUTH_REFRESH_TOKEN
        self.client_id = client_id or GOOGLE_CAL_OAUTH_CLIENT_ID
        self.client_secret = client_secret or GOOGLE_CAL_OAUTH_CLIENT_SECRET
        self._service = service

    def _get_service(self):
        if self._service is not None:
            return self._service

        if not self.refresh_token or not self.client_id or not self.client_secret:
            raise ConfigurationError("Missing OAuth environment variables")

        credentials = Credentials(
            token=None,
            refresh_token=self.refresh_token,
            client_id=self.client_id,
            client_secret=self.client_secret,
            token_uri=TOKEN_URI,
            scopes=SCOPES
        )
        self._service = build('calendar', 'v3', credentials=credentials, cache_discovery=False)
        return self._service

    def create_event(self, event):
        """
        Insert an event, request a Meet link and email invites to all attendees

        Args:
            event (CalendarEvent): Event to create

        Returns:
            dict: 'event_id' and 'meeting_link' (Meet link, else the event page)

        Raises:
            ConfigurationError: If the OAuth credentials are not configured
            HttpError: If the Calendar API rejects the request
        """
        service = self._get_service()

        print(f"Creating calendar event on {self.calendar_id} starting {to_iso_string(event.start)}")
        created = service.events().insert(
            calendarId=self.calendar_id,
            body=event.to_body(),
            conferenceDataVersion=1,
            sendUpdates='all'
        ).execute()

        print(f"Calendar event created: {created['id']}")

        return {
            'event_id': created['id'],
            'meeting_link': created.get('hangoutLink') or created.get('htmlLink')
        }
