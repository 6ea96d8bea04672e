"""Tests de notificadores de alertas."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest
import requests

from common.config import Settings
from extraction_api.analytics.alerts import generate_alerts
from extraction_api.analytics.errors import NetworkError
from extraction_api.analytics.notifier import (
    EmailNotifier,
    NotificationOrchestrator,
    SlackNotifier,
    SmtpConfig,
    build_orchestrator,
)
from extraction_api.simulation import simulate_extraction


@pytest.fixture
def alert():
    return generate_alerts(simulate_extraction(100.0, 9.0, 25))[0]


@pytest.fixture
def smtp_config():
    return SmtpConfig(
        server="smtp.example.com",
        port=587,
        username="barista",
        password="secret",
        recipient="ops@example.com",
    )


def _settings(**overrides) -> Settings:
    values = dict(
        database_url="sqlite://",
        metrics_file="metrics.json",
        slack_webhook_url=None,
        smtp_server=None,
        smtp_port=587,
        smtp_username=None,
        smtp_password=None,
        alert_email_to=None,
        notify_timeout_seconds=5.0,
        log_level="INFO",
        api_host="127.0.0.1",
        api_port=3000,
    )
    values.update(overrides)
    return Settings(**values)


class TestSlackNotifier:

    def test_posts_alert_text(self, alert):
        notifier = SlackNotifier("https://hooks.example.com/T000", timeout=2.0)

        with patch("extraction_api.analytics.notifier.requests.post") as post:
            post.return_value = MagicMock(ok=True, status_code=200)
            notifier.send_alert(alert)

        post.assert_called_once()
        args, kwargs = post.call_args
        assert args[0] == "https://hooks.example.com/T000"
        assert "Temperature outside acceptable range" in kwargs["json"]["text"]
        assert kwargs["timeout"] == 2.0

    def test_error_status_raises_network_error(self, alert):
        notifier = SlackNotifier("https://hooks.example.com/T000")

        with patch("extraction_api.analytics.notifier.requests.post") as post:
            post.return_value = MagicMock(ok=False, status_code=500, text="boom")
            with pytest.raises(NetworkError):
                notifier.send_alert(alert)

    def test_transport_error_raises_network_error(self, alert):
        notifier = SlackNotifier("https://hooks.example.com/T000")

        with patch("extraction_api.analytics.notifier.requests.post") as post:
            post.side_effect = requests.ConnectionError("unreachable")
            with pytest.raises(NetworkError):
                notifier.send_alert(alert)


class TestEmailNotifier:

    def test_sends_message(self, alert, smtp_config):
        notifier = EmailNotifier(smtp_config)

        with patch("extraction_api.analytics.notifier.smtplib.SMTP") as smtp_cls:
            notifier.send_alert(alert)

        smtp = smtp_cls.return_value.__enter__.return_value
        smtp.login.assert_called_once_with("barista", "secret")
        smtp.send_message.assert_called_once()
        message = smtp.send_message.call_args[0][0]
        assert message["To"] == "ops@example.com"
        assert "Critical" in message["Subject"]

    def test_smtp_failure_raises_network_error(self, alert, smtp_config):
        notifier = EmailNotifier(smtp_config)

        with patch("extraction_api.analytics.notifier.smtplib.SMTP") as smtp_cls:
            smtp_cls.side_effect = smtplib.SMTPConnectError(421, "busy")
            with pytest.raises(NetworkError):
                notifier.send_alert(alert)

    def test_message_includes_metadata(self, alert, smtp_config):
        message = EmailNotifier(smtp_config).build_message(alert)

        assert "temperature: 100.0" in message.get_content()


class TestOrchestrator:

    def test_notifies_every_notifier(self, alert):
        first, second = MagicMock(), MagicMock()

        NotificationOrchestrator([first, second]).notify(alert)

        first.send_alert.assert_called_once_with(alert)
        second.send_alert.assert_called_once_with(alert)

    def test_stops_at_first_failure(self, alert):
        first, second = MagicMock(), MagicMock()
        first.send_alert.side_effect = NetworkError("down")

        with pytest.raises(NetworkError):
            NotificationOrchestrator([first, second]).notify(alert)
        second.send_alert.assert_not_called()

    def test_without_notifiers_is_noop(self, alert):
        NotificationOrchestrator().notify(alert)


class TestBuildOrchestrator:

    def test_nothing_configured(self):
        assert build_orchestrator(_settings()).notifiers == []

    def test_slack_and_email(self):
        orchestrator = build_orchestrator(
            _settings(
                slack_webhook_url="https://hooks.example.com/T000",
                smtp_server="smtp.example.com",
                alert_email_to="ops@example.com",
            )
        )

        kinds = [type(n) for n in orchestrator.notifiers]
        assert kinds == [SlackNotifier, EmailNotifier]

    def test_email_needs_recipient(self):
        orchestrator = build_orchestrator(_settings(smtp_server="smtp.example.com"))

        assert orchestrator.notifiers == []
