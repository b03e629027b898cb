# tests/test_notifications.py

"""SMTP transport: recipient resolution, skip paths and SSL vs STARTTLS."""

import pytest
from unittest.mock import patch, MagicMock

from core.config import settings
from core import notifications
from core.notifications import send_email, build_message


@pytest.fixture
def smtp_settings(monkeypatch):
    monkeypatch.setattr(settings, "SMTP_HOST", "smtp.example.org")
    monkeypatch.setattr(settings, "SMTP_PORT", 465)
    monkeypatch.setattr(settings, "SMTP_USER", "mailer@example.org")
    monkeypatch.setattr(settings, "SMTP_PASS", "secret")
    monkeypatch.setattr(settings, "SMTP_TO", "office@example.org")
    monkeypatch.setattr(settings, "SMTP_SECURE", True)
    return settings


@pytest.fixture
def smtplib_mock():
    with patch.object(notifications, "smtplib") as mocked:
        yield mocked


def test_secure_transport_uses_smtp_ssl(smtp_settings, smtplib_mock):
    server = smtplib_mock.SMTP_SSL.return_value.__enter__.return_value

    assert send_email("Hello", "Body", to="member@example.org") is True

    smtplib_mock.SMTP_SSL.assert_called_once_with("smtp.example.org", 465)
    smtplib_mock.SMTP.assert_not_called()
    server.login.assert_called_once_with("mailer@example.org", "secret")
    assert server.send_message.call_args.args[0]["To"] == "member@example.org"


def test_insecure_transport_upgrades_with_starttls(smtp_settings, smtplib_mock, monkeypatch):
    monkeypatch.setattr(settings, "SMTP_SECURE", False)
    monkeypatch.setattr(settings, "SMTP_PORT", 587)
    plain = smtplib_mock.SMTP.return_value

    assert send_email("Hello", "Body", recipients=["a@example.org", "b@example.org"]) is True

    smtplib_mock.SMTP.assert_called_once_with("smtp.example.org", 587)
    plain.starttls.assert_called_once()
    sent = plain.__enter__.return_value.send_message.call_args.args[0]
    assert sent["To"] == "a@example.org, b@example.org"


def test_falls_back_to_office_inbox(smtp_settings, smtplib_mock):
    send_email("Weekly digest", "Body")
    server = smtplib_mock.SMTP_SSL.return_value.__enter__.return_value
    assert server.send_message.call_args.args[0]["To"] == "office@example.org"


def test_skips_without_recipients(smtp_settings, smtplib_mock, monkeypatch):
    monkeypatch.setattr(settings, "SMTP_TO", None)
    assert send_email("Hello", "Body") is False
    smtplib_mock.SMTP_SSL.assert_not_called()


def test_skips_when_smtp_not_configured(smtp_settings, smtplib_mock, monkeypatch):
    monkeypatch.setattr(settings, "SMTP_HOST", None)
    assert send_email("Hello", "Body", to="member@example.org") is False
    smtplib_mock.SMTP_SSL.assert_not_called()


def test_delivery_errors_are_raised(smtp_settings, smtplib_mock):
    server = smtplib_mock.SMTP_SSL.return_value.__enter__.return_value
    server.send_message.side_effect = ConnectionError("relay refused")

    with pytest.raises(ConnectionError):
        send_email("Hello", "Body", to="member@example.org")


def test_build_message_attaches_html_alternative(smtp_settings):
    msg = build_message("Subject", "plain text", ["x@example.org"], html_body="<p>html</p>")
    parts = msg.get_payload()
    assert [p.get_content_type() for p in parts] == ["text/plain", "text/html"]
    assert msg["From"] == settings.EMAIL_FROM


def test_build_message_plain_only(smtp_settings):
    msg = build_message("Subject", "plain text", ["x@example.org"])
    assert len(msg.get_payload()) == 1
