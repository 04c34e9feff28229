import asyncio
import logging
import smtplib
from email.message import EmailMessage

from core.schema.notifier_schema import EmailNotifierConfig
from core.util.notifier.base import BaseNotifier


class EmailNotifier(BaseNotifier):
    def __init__(self, config: EmailNotifierConfig):
        super().__init__(enabled=config.enabled)
        self.logger = logging.getLogger("EmailNotifier")

        self.smtp_host = config.smtp_host
        self.smtp_port = config.smtp_port
        self.use_tls = config.use_tls
        self.username = config.username
        self.password = config.password
        self.from_addr = config.from_addr
        self.timeout_sec = config.timeout_sec

    async def send(self, recipient: str, subject: str, body: str) -> bool:
        if not self.enabled:
            self.logger.debug("[EMAIL] Email notifier is disabled, skipping")
            return False

        self.logger.info(f"[EMAIL] Send Email to {recipient}: {body}")

        try:
            loop: asyncio.AbstractEventLoop = asyncio.get_running_loop()
            await loop.run_in_executor(None, self._send_email_sync, recipient, subject, body)
            self.logger.info(f"[EMAIL] Successfully sent to {recipient}")
            return True
        except Exception as e:
            self.logger.error(f"[EMAIL] Failed to send to {recipient}: {e}")
            return False

    def build_message(self, recipient: str, subject: str, body: str) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self.from_addr
        msg["To"] = recipient
        msg.set_content(body)
        return msg

    def _send_email_sync(self, recipient: str, subject: str, body: str):
        msg = self.build_message(recipient, subject, body)

        with smtplib.SMTP(self.smtp_host, int(self.smtp_port), timeout=self.timeout_sec) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password or "")
            server.send_message(msg)
