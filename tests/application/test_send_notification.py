"""Tests for NotificationService."""

import pytest

from store.application.send_notification import NotificationService
from store.domain.exceptions import ValidationError
from store.infrastructure.console.senders import EmailSender, SmsSender
from tests.fakes import FakeSender


class TestNotificationService:

    def test_delegates_to_sender(self):
        sender = FakeSender()
        NotificationService(sender).send_notification("Hello")
        assert sender.sent == ["Hello"]

    def test_blank_message_rejected(self):
        sender = FakeSender()
        with pytest.raises(ValidationError, match="must not be empty"):
            NotificationService(sender).send_notification("   ")
        assert sender.sent == []

    def test_email_sender(self):
        lines: list[str] = []
        NotificationService(EmailSender(echo=lines.append)).send_notification("Hi")
        assert lines == ["Email sent: Hi"]

    def test_sms_sender(self):
        lines: list[str] = []
        NotificationService(SmsSender(echo=lines.append)).send_notification("Hi")
        assert lines == ["SMS sent: Hi"]
