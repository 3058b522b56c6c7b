import json

from exceptions import ValidationError

def get_http_method(event):
    return (event or {}).get('httpMethod') or ''

def is_preflight(event):
    return get_http_method(event).upper() == 'OPTIONS'

def get_payload(event):
    """
    Return the JSON payload of an API Gateway event

    Direct invocations carry no 'body' key, in which case the event itself
    is the payload.
    """
    body = event.get('body')
    if not body:
        return event
    if isinstance(body, dict):
        return body
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        raise ValidationError("Invalid request body.", 'body')
    if not isinstance(payload, dict):
        raise ValidationError("Invalid request body.", 'body')
    return payload

def get_booking_data(event):
    """Booking fields, either nested under 'booking' or at the top level"""
    payload = get_payload(event)
    booking = payload.get('booking')
    if isinstance(booking, dict):
        return booking
    return payload
