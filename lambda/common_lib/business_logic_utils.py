"""
Business logic utilities shared by the booking Lambda
Provides the single error boundary that turns exceptions into responses
"""

import functools
import traceback

import response_utils as resp
from exceptions import BusinessLogicError, ValidationError


GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again or contact costa@innovationbound.com"


def handle_booking_errors(func):
    """Decorator converting BusinessLogicError, ValidationError and unexpected failures into responses"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ValidationError as e:
            print(f"ValidationError in {func.__name__}: {e.message} (field: {e.field})")
            return resp.error_response(e.message, 400)
        except BusinessLogicError as e:
            print(f"BusinessLogicError in {func.__name__}: {e.message} (status: {e.status_code})")
            return resp.error_response(e.message, e.status_code)
        except Exception as e:
            print(f"Booking error in {func.__name__}: {str(e)}")
            print(f"Error type: {type(e).__name__}")
            traceback.print_exc()
            return resp.error_response(GENERIC_ERROR_MESSAGE, 500)
    return wrapper
