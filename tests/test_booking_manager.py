"""Tests for wiring the booking manager to its collaborators."""

from unittest.mock import patch

import booking_manager
from booking_manager import get_booking_manager


@patch("email_utils.boto3")
@patch("db_utils.boto3")
def test_uses_function_template_dir_by_default(mock_db_boto3, mock_email_boto3, monkeypatch):
    monkeypatch.setattr(booking_manager, "TEMPLATE_DIR", None)

    manager = get_booking_manager(default_template_dir="/var/task")

    assert manager.template_dir == "/var/task"
    assert mock_db_boto3.client.call_args.args[0] == "dynamodb"
    assert mock_email_boto3.client.call_args.args[0] == "ses"


@patch("email_utils.boto3")
@patch("db_utils.boto3")
def test_template_dir_environment_override(mock_db_boto3, mock_email_boto3, monkeypatch):
    monkeypatch.setattr(booking_manager, "TEMPLATE_DIR", "/opt/templates")

    manager = get_booking_manager(default_template_dir="/var/task")

    assert manager.template_dir == "/opt/templates"
