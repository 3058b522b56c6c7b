"""
Calendar invite (.ics) generation
Used when the confirmation email carries its own invite instead of relying
on Google Calendar's attendee notifications
"""

from datetime import datetime, timezone

from calendar_utils import OWNER_EMAIL, OWNER_NAME, build_event_description


def format_ics_timestamp(dt):
    """Basic-format UTC timestamp, e.g. 20250601T180000Z"""
    return dt.astimezone(timezone.utc).strftime('%Y%m%dT%H%M%SZ')


def create_ics(summary, description, location, start, end,
               organizer_name, organizer_email, attendee_name, attendee_email, now=None):
    """
    Create a METHOD:REQUEST calendar invite with a one-hour display reminder

    The UID is derived from the send time so repeated sends produce distinct invites.

    Returns:
        str: CRLF-delimited VCALENDAR document
    """
    stamp = format_ics_timestamp(now or datetime.now(timezone.utc))

    return '\r\n'.join([
        'BEGIN:VCALENDAR',
        'VERSION:2.0',
        'PRODID:-//Innovation Bound//AI Power Hour//EN',
        'METHOD:REQUEST',
        'BEGIN:VEVENT',
        f'UID:ai-power-hour-{stamp}@innovationbound.com',
        f'DTSTAMP:{stamp}',
        f'DTSTART:{format_ics_timestamp(start)}',
        f'DTEND:{format_ics_timestamp(end)}',
        f'SUMMARY:{summary}',
        f'DESCRIPTION:{description}',
        f'LOCATION:{location}',
        f'ORGANIZER;CN={organizer_name}:mailto:{organizer_email}',
        f'ATTENDEE;CN={attendee_name};PARTSTAT=ACCEPTED;RSVP=FALSE:mailto:{attendee_email}',
        'STATUS:CONFIRMED',
        'SEQUENCE:0',
        'BEGIN:VALARM',
        'TRIGGER:-PT1H',
        'ACTION:DISPLAY',
        'DESCRIPTION:AI Power Hour starts in 1 hour',
        'END:VALARM',
        'END:VEVENT',
        'END:VCALENDAR'
    ])


def create_power_hour_ics(booking, meeting_link, now=None):
    """Invite for a booked AI Power Hour, escaping newlines for the DESCRIPTION property"""
    description = build_event_description(booking) + f"\n\nJoin via Google Meet: {meeting_link}"
    return create_ics(
        summary=f"AI Power Hour for {booking.name} with Innovation Bound",
        description=description.replace('\n', '\\n'),
        location=meeting_link,
        start=booking.start,
        end=booking.end,
        organizer_name=OWNER_NAME,
        organizer_email=OWNER_EMAIL,
        attendee_name=booking.name,
        attendee_email=booking.email,
        now=now
    )
