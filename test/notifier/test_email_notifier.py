from unittest.mock import patch

import pytest

from core.schema.notifier_schema import EmailNotifierConfig
from core.util.notifier.email_notifier import EmailNotifier

SUBJECT = "🚨 Cold store alarm"
BODY = "⚠️ The cold store temperature alarm was triggered!"


@pytest.fixture
def email_config() -> EmailNotifierConfig:
    return EmailNotifierConfig(
        smtp_host="smtp.coldstore.test",
        smtp_port=587,
        use_tls=True,
        username="alerts",
        password="secret",
        from_addr="alerts@coldstore.test",
    )


class TestEmailNotifier:
    def test_build_message_sets_headers_and_body(self, email_config):
        notifier = EmailNotifier(email_config)

        msg = notifier.build_message("ops@coldstore.test", SUBJECT, BODY)

        assert msg["Subject"] == SUBJECT
        assert msg["From"] == "alerts@coldstore.test"
        assert msg["To"] == "ops@coldstore.test"
        assert msg.get_content().strip() == BODY

    @pytest.mark.asyncio
    @patch("core.util.notifier.email_notifier.smtplib.SMTP")
    async def test_when_send_succeeds_then_uses_tls_and_login(self, mock_smtp, email_config):
        notifier = EmailNotifier(email_config)
        server = mock_smtp.return_value.__enter__.return_value

        result = await notifier.send("ops@coldstore.test", SUBJECT, BODY)

        assert result is True
        mock_smtp.assert_called_once_with("smtp.coldstore.test", 587, timeout=10.0)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("alerts", "secret")
        server.send_message.assert_called_once()
        sent = server.send_message.call_args.args[0]
        assert sent["To"] == "ops@coldstore.test"

    @pytest.mark.asyncio
    @patch("core.util.notifier.email_notifier.smtplib.SMTP")
    async def test_when_no_tls_and_no_username_then_plain_relay(self, mock_smtp):
        notifier = EmailNotifier(EmailNotifierConfig())
        server = mock_smtp.return_value.__enter__.return_value

        result = await notifier.send("ops@coldstore.test", SUBJECT, BODY)

        assert result is True
        mock_smtp.assert_called_once_with("localhost", 25, timeout=10.0)
        server.starttls.assert_not_called()
        server.login.assert_not_called()
        server.send_message.assert_called_once()

    @pytest.mark.asyncio
    @patch("core.util.notifier.email_notifier.smtplib.SMTP", side_effect=OSError("connection refused"))
    async def test_when_smtp_fails_then_returns_false(self, mock_smtp, email_config, caplog):
        notifier = EmailNotifier(email_config)

        result = await notifier.send("ops@coldstore.test", SUBJECT, BODY)

        assert result is False
        assert "connection refused" in caplog.text

    @pytest.mark.asyncio
    @patch("core.util.notifier.email_notifier.smtplib.SMTP")
    async def test_when_disabled_then_skips(self, mock_smtp):
        notifier = EmailNotifier(EmailNotifierConfig(enabled=False))

        result = await notifier.send("ops@coldstore.test", SUBJECT, BODY)

        assert result is False
        mock_smtp.assert_not_called()

    def test_notifier_type(self, email_config):
        assert EmailNotifier(email_config).notifier_type == "EmailNotifier"
