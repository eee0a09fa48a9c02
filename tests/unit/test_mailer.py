"""Tests for SMTPMailer message building and delivery."""

from unittest.mock import AsyncMock, patch

import aiosmtplib
import pytest

from meeting_summarizer.config import Settings
from meeting_summarizer.infrastructure.mailer import SMTPMailer, build_message


def _mailer() -> SMTPMailer:
    return SMTPMailer(
        host="smtp.test",
        port=587,
        username="notes@example.com",
        password="secret",
        sender="notes@example.com",
    )


class TestBuildMessage:
    """Tests for build_message."""

    def test_headers(self):
        message = build_message("from@example.com", "to@example.com", "Weekly sync", "Body")
        assert message["From"] == "from@example.com"
        assert message["To"] == "to@example.com"
        assert message["Subject"] == "Weekly sync"

    def test_plain_and_html_parts(self):
        message = build_message("a@example.com", "b@example.com", "S", "• Ship it\n• Test it")
        plain = message.get_body(preferencelist=("plain",)).get_content()
        html_body = message.get_body(preferencelist=("html",)).get_content()

        assert "• Ship it\n• Test it" in plain
        assert "<h2>Meeting Summary</h2>" in html_body
        assert "white-space: pre-wrap" in html_body

    def test_html_escapes_summary(self):
        message = build_message("a@example.com", "b@example.com", "S", "<script>x</script>")
        html_body = message.get_body(preferencelist=("html",)).get_content()
        assert "<script>" not in html_body
        assert "&lt;script&gt;" in html_body


class TestSend:
    """Tests for SMTPMailer.send and send_all."""

    @pytest.mark.asyncio
    async def test_successful_send(self):
        with patch("meeting_summarizer.infrastructure.mailer.aiosmtplib.send", new=AsyncMock()) as send:
            result = await _mailer().send("to@example.com", "Subject", "Summary")

        assert result.delivered is True
        assert result.error is None
        kwargs = send.call_args.kwargs
        assert kwargs["hostname"] == "smtp.test"
        assert kwargs["port"] == 587
        assert kwargs["start_tls"] is True
        assert kwargs["username"] == "notes@example.com"

    @pytest.mark.asyncio
    async def test_smtp_error_reported_not_raised(self):
        error = aiosmtplib.SMTPRecipientsRefused([])
        with patch(
            "meeting_summarizer.infrastructure.mailer.aiosmtplib.send",
            new=AsyncMock(side_effect=error),
        ):
            result = await _mailer().send("bad@example.com", "Subject", "Summary")

        assert result.delivered is False
        assert result.recipient == "bad@example.com"

    @pytest.mark.asyncio
    async def test_connection_error_reported(self):
        with patch(
            "meeting_summarizer.infrastructure.mailer.aiosmtplib.send",
            new=AsyncMock(side_effect=ConnectionRefusedError("refused")),
        ):
            result = await _mailer().send("to@example.com", "Subject", "Summary")

        assert result.delivered is False
        assert "refused" in result.error

    @pytest.mark.asyncio
    async def test_send_all_attempts_every_recipient(self):
        async def fake_send(message, **kwargs):
            if message["To"] == "bad@example.com":
                raise aiosmtplib.SMTPException("550 mailbox unavailable")

        recipients = ["a@example.com", "bad@example.com", "c@example.com"]
        with patch(
            "meeting_summarizer.infrastructure.mailer.aiosmtplib.send",
            new=AsyncMock(side_effect=fake_send),
        ) as send:
            results = await _mailer().send_all(recipients, "Subject", "Summary")

        assert send.await_count == 3
        assert [r.recipient for r in results] == recipients
        assert [r.delivered for r in results] == [True, False, True]

    @pytest.mark.asyncio
    async def test_header_injection_in_recipient_reported(self):
        with patch(
            "meeting_summarizer.infrastructure.mailer.aiosmtplib.send", new=AsyncMock()
        ) as send:
            result = await _mailer().send("bad@example.com\nBcc: x@y.z", "Subject", "Summary")

        assert result.delivered is False
        assert result.error
        send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_header_injection_in_subject_reported(self):
        with patch("meeting_summarizer.infrastructure.mailer.aiosmtplib.send", new=AsyncMock()):
            result = await _mailer().send("to@example.com", "Sync\r\nBcc: x@y.z", "Summary")

        assert result.delivered is False


class TestFromSettings:
    """Tests for SMTPMailer.from_settings."""

    def test_sender_defaults_to_username(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None, smtp_username="me@example.com")
        assert SMTPMailer.from_settings(settings).sender == "me@example.com"

    def test_explicit_sender(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(
                _env_file=None, smtp_username="me@example.com", email_from="team@example.com"
            )
        assert SMTPMailer.from_settings(settings).sender == "team@example.com"
