import json
import os

import response_utils as resp
import request_utils as req
import business_logic_utils as biz
from booking_manager import get_booking_manager

FUNCTION_DIR = os.path.dirname(os.path.abspath(__file__))

booking_manager = None


def get_manager():
    global booking_manager
    if booking_manager is None:
        booking_manager = get_booking_manager(default_template_dir=FUNCTION_DIR)
    return booking_manager


@biz.handle_booking_errors
def process_booking(event):
    booking_data = req.get_booking_data(event)
    result = get_manager().book(booking_data)
    return resp.success_response(result)


def lambda_handler(event, context):
    """Book an AI Power Hour: calendar event, booking record and confirmation email"""
    print(f"EVENT: {json.dumps(event, default=str)}")

    if req.is_preflight(event):
        return resp.preflight_response()

    return process_booking(event)
