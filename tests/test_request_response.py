"""Tests for request parsing and CORS responses."""

import json
from decimal import Decimal

import pytest

import request_utils as req
import response_utils as resp
from exceptions import ValidationError


class TestRequestParsing:
    def test_preflight_detection(self):
        assert req.is_preflight({"httpMethod": "OPTIONS"})
        assert req.is_preflight({"httpMethod": "options"})
        assert not req.is_preflight({"httpMethod": "POST"})
        assert not req.is_preflight({})

    def test_nested_booking(self):
        event = {"body": json.dumps({"booking": {"name": "Jane"}})}
        assert req.get_booking_data(event) == {"name": "Jane"}

    def test_flat_booking(self):
        event = {"body": json.dumps({"name": "Jane"})}
        assert req.get_booking_data(event) == {"name": "Jane"}

    def test_event_is_payload_without_body(self):
        assert req.get_booking_data({"name": "Jane"}) == {"name": "Jane"}

    @pytest.mark.parametrize("body", ["{oops", "[1, 2]", "\"text\""])
    def test_invalid_body(self, body):
        with pytest.raises(ValidationError):
            req.get_payload({"body": body})


class TestResponses:
    def test_cors_headers(self):
        response = resp.success_response({"message": "ok"})

        assert response["headers"] == {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "POST,OPTIONS",
            "Access-Control-Allow-Headers": "Accept, Content-Type, Authorization",
        }
        assert response["isBase64Encoded"] is False

    def test_error_response_body(self):
        response = resp.error_response("Name is required.")

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {"success": False, "error": "Name is required."}

    def test_preflight_response(self):
        response = resp.preflight_response()

        assert response["statusCode"] == 204
        assert response["body"] == ""

    def test_decimals_are_serialized(self):
        response = resp.success_response({"durationMinutes": Decimal("60")})

        assert json.loads(response["body"])["durationMinutes"] == 60
