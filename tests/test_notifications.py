from __future__ import annotations

import asyncio

import pytest

from clinicbook import config, email_service
from clinicbook.email_templates import appointment_confirmed_template
from clinicbook.notifications import BookingNotifier

PAYLOAD = {
    "id": 7,
    "patient": "a@x.com",
    "patientName": "Alice",
    "treatment": "Cleaning",
    "date": "2024-01-01",
    "slot": "9am",
}


def test_notifier_sends_confirmation():
    calls = []

    async def fake_send(**kwargs):
        calls.append(kwargs)
        return {"id": "msg"}

    ok = asyncio.run(BookingNotifier(send_func=fake_send).notify_booking(PAYLOAD))

    assert ok is True
    assert calls == [
        {
            "to": "a@x.com",
            "patient_name": "Alice",
            "treatment": "Cleaning",
            "date": "2024-01-01",
            "slot": "9am",
        }
    ]


def test_notifier_logs_and_drops_failures(caplog):
    async def broken_send(**kwargs):
        raise RuntimeError("provider down")

    with caplog.at_level("ERROR"):
        ok = asyncio.run(BookingNotifier(send_func=broken_send).notify_booking(PAYLOAD))

    assert ok is False
    assert "provider down" in caplog.text


def test_notifier_skips_booking_without_patient():
    async def fail_if_called(**kwargs):
        raise AssertionError("should not send")

    ok = asyncio.run(
        BookingNotifier(send_func=fail_if_called).notify_booking({**PAYLOAD, "patient": None})
    )

    assert ok is False


def test_appointment_template_escapes_patient_input():
    mjml = appointment_confirmed_template("<b>Eve</b>", "Cleaning", "2024-01-01", "9am")

    assert "&lt;b&gt;Eve&lt;/b&gt;" in mjml
    assert "<b>Eve</b>" not in mjml
    assert "Cleaning" in mjml


def test_send_email_without_provider_raises(monkeypatch):
    monkeypatch.setattr(email_service, "compile_mjml_to_html", lambda content: "<html></html>")
    monkeypatch.setattr(config, "SMTP_HOST", None)
    monkeypatch.setattr(config, "RESEND_API_KEY", None)

    with pytest.raises(Exception, match="not configured"):
        asyncio.run(email_service.send_email("a@x.com", "Hi", "<mjml></mjml>"))


def test_send_email_uses_resend(monkeypatch):
    sent = []
    monkeypatch.setattr(email_service, "compile_mjml_to_html", lambda content: "<html>ok</html>")
    monkeypatch.setattr(config, "SMTP_HOST", None)
    monkeypatch.setattr(config, "RESEND_API_KEY", "re_test")
    monkeypatch.setattr(email_service.resend.Emails, "send", lambda params: sent.append(params) or {"id": "1"})

    result = asyncio.run(
        email_service.send_appointment_confirmation(
            to="a@x.com", patient_name="Alice", treatment="Cleaning", date="2024-01-01", slot="9am"
        )
    )

    assert result == {"id": "1"}
    assert sent[0]["to"] == ["a@x.com"]
    assert sent[0]["html"] == "<html>ok</html>"
    assert sent[0]["subject"] == "Your Appointment for Cleaning is on 2024-01-01 at 9am is Confirmed"


def test_send_email_prefers_smtp(monkeypatch):
    smtp_calls = []
    monkeypatch.setattr(email_service, "compile_mjml_to_html", lambda content: "<html></html>")
    monkeypatch.setattr(config, "SMTP_HOST", "smtp.clinic.test")
    monkeypatch.setattr(
        email_service,
        "send_via_smtp",
        lambda recipients, subject, html, sender: smtp_calls.append(recipients) or {"success": True},
    )

    result = asyncio.run(email_service.send_email("a@x.com", "Hi", "<mjml></mjml>"))

    assert result == {"success": True}
    assert smtp_calls == [["a@x.com"]]
