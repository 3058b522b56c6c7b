import boto3
import html
import os
import random
import string
import time
from email.header import Header
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import parseaddr
from zoneinfo import ZoneInfo

# Environment variables
MAIL_FROM_ADDRESS = os.environ.get('MAIL_FROM_ADDRESS', 'Innovation Bound <website@innovationbound.com>')
REPLY_TO_ADDRESS = os.environ.get('REPLY_TO_ADDRESS', 'Costa Michailidis <costa@innovationbound.com>')
AWS_REGION_NAME = os.environ.get('AWS_REGION_NAME', 'us-east-1')

DISPLAY_TIMEZONE = ZoneInfo('America/New_York')
UNSUBSCRIBE_URL = 'https://www.innovationbound.com/unsubscribe'

HTML_TEMPLATE = 'booking-confirmation.html'
TEXT_TEMPLATE = 'booking-confirmation.txt'


class EmailTemplate:
    """Email template constants and configurations"""

    BOOKING_CONFIRMED = "🦾 AI Power Hour Confirmed - {date_time}"

    TRACKING_LIST = "ai-power-hour-bookings"
    TRACKING_EDITION = "booking-confirmation"

    ICS_FILENAME = "ai-power-hour.ics"


def format_display_datetime(dt):
    """Format an instant in Eastern time, e.g. 'Sunday, June 1, 2025 at 2:00 PM EDT'"""
    local = dt.astimezone(DISPLAY_TIMEZONE)
    hour = local.hour % 12 or 12
    return (
        f"{local.strftime('%A')}, {local.strftime('%B')} {local.day}, {local.year} "
        f"at {hour}:{local.strftime('%M')} {local.strftime('%p')} {local.tzname()}"
    )


def load_templates(template_dir):
    """Read the HTML and plain text confirmation templates from disk"""
    with open(os.path.join(template_dir, HTML_TEMPLATE), encoding='utf-8') as f:
        raw_html = f.read()
    with open(os.path.join(template_dir, TEXT_TEMPLATE), encoding='utf-8') as f:
        raw_text = f.read()
    return raw_html, raw_text


def build_template_values(booking, date_time, meeting_link):
    return {
        'tracking': f"email={booking.email}&list={EmailTemplate.TRACKING_LIST}&edition={EmailTemplate.TRACKING_EDITION}",
        'emailSettings': f"{UNSUBSCRIBE_URL}?email={booking.email}",
        'name': booking.name,
        'email': booking.email,
        'dateTime': date_time,
        'meetingLink': meeting_link,
        'website': booking.website,
        'techLevel': booking.tech_level_display,
        'specialRequests': booking.special_requests_display
    }


def render_template(template, values, escape_html=False):
    """Replace every {{key}} placeholder with its value, HTML-escaped for the HTML variant"""
    rendered = template
    for key, value in values.items():
        value = str(value)
        if escape_html:
            value = html.escape(value)
        rendered = rendered.replace('{{' + key + '}}', value)
    return rendered


def generate_boundary():
    suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"----=_Part_{int(time.time() * 1000)}_{suffix}"


def build_raw_message(from_address, to_address, reply_to, subject, text_body, html_body,
                      boundary=None, ics_content=None):
    """
    Assemble a multipart/alternative confirmation email

    When ics_content is given the message becomes multipart/mixed with the
    alternative part followed by a text/calendar invite attachment.

    Returns:
        MIMEMultipart: The composed message
    """
    boundary = boundary or generate_boundary()

    alternative = MIMEMultipart('alternative', boundary=boundary if not ics_content else f"{boundary}_alt")
    alternative.attach(MIMEText(text_body, 'plain', 'utf-8'))
    alternative.attach(MIMEText(html_body, 'html', 'utf-8'))

    if ics_content:
        msg = MIMEMultipart('mixed', boundary=boundary)
        msg.attach(alternative)
        invite = MIMEText(ics_content, 'calendar', 'utf-8')
        invite.set_param('method', 'REQUEST')
        invite['Content-Disposition'] = f'attachment; filename="{EmailTemplate.ICS_FILENAME}"'
        msg.attach(invite)
    else:
        msg = alternative

    msg['From'] = from_address
    msg['To'] = to_address
    msg['Reply-To'] = reply_to
    msg['Subject'] = Header(subject, 'utf-8')
    return msg


class SesMailer:
    """Sends fully composed messages through SES"""

    def __init__(self, client=None, from_address=None, reply_to=None):
        self.client = client or boto3.client('ses', region_name=AWS_REGION_NAME)
        self.from_address = from_address or MAIL_FROM_ADDRESS
        self.reply_to = reply_to or REPLY_TO_ADDRESS

    def send_raw(self, message, destinations):
        """
        Send a raw MIME message

        Args:
            message (MIMEMultipart): Composed message; Bcc recipients are not in its headers
            destinations (list): Every envelope recipient, including blind copies

        Returns:
            str: SES MessageId

        Raises:
            ClientError: If SES rejects the message
        """
        response = self.client.send_raw_email(
            Source=self.from_address,
            Destinations=destinations,
            RawMessage={'Data': message.as_bytes()}
        )
        message_id = response['MessageId']
        print(f"Email sent successfully to {', '.join(destinations)}. MessageId: {message_id}")
        return message_id

    def send_booking_confirmation(self, booking, date_time, meeting_link, template_dir, ics_content=None):
        """Render the confirmation templates and send them to the attendee, blind-copying the operator"""
        raw_html, raw_text = load_templates(template_dir)
        values = build_template_values(booking, date_time, meeting_link)

        message = build_raw_message(
            from_address=self.from_address,
            to_address=booking.email,
            reply_to=self.reply_to,
            subject=EmailTemplate.BOOKING_CONFIRMED.format(date_time=date_time),
            text_body=render_template(raw_text, values),
            html_body=render_template(raw_html, values, escape_html=True),
            ics_content=ics_content
        )

        operator_email = parseaddr(self.reply_to)[1]
        return self.send_raw(message, [booking.email, operator_email])
