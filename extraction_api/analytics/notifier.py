"""Servicio de notificaciones para alertas de extracción.

Los notificadores solo transportan; qué alertas existen lo decide el
AlertGenerator.
"""

from __future__ import annotations

import logging
import smtplib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Iterable, List, Optional

import requests

from common.config import Settings
from .alerts.models import Alert
from .errors import NetworkError

logger = logging.getLogger(__name__)


def format_alert(alert: Alert) -> str:
    return f"[{alert.severity.value}] {alert.category.value}: {alert.message}"


class Notifier(ABC):
    """Canal de salida para alertas."""

    @abstractmethod
    def send_alert(self, alert: Alert) -> None:
        """Envía la alerta o lanza NotificationError."""


class SlackNotifier(Notifier):
    def __init__(self, webhook_url: str, timeout: float = 5.0):
        self.webhook_url = webhook_url
        self.timeout = timeout

    def send_alert(self, alert: Alert) -> None:
        payload = {"text": f"Alert: {format_alert(alert)}"}
        try:
            response = requests.post(self.webhook_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"Failed to send request: {e}") from e

        if not response.ok:
            raise NetworkError(f"Failed to send alert: {response.status_code} {response.text}")
        logger.info("[NOTIFY] Slack alert sent id=%s", alert.id)


@dataclass(frozen=True)
class SmtpConfig:
    server: str
    port: int
    username: Optional[str]
    password: Optional[str]
    recipient: str
    sender: Optional[str] = None


class EmailNotifier(Notifier):
    def __init__(self, smtp_config: SmtpConfig, timeout: float = 5.0):
        self.smtp_config = smtp_config
        self.timeout = timeout

    def build_message(self, alert: Alert) -> EmailMessage:
        cfg = self.smtp_config
        msg = EmailMessage()
        msg["Subject"] = f"Extraction alert: {alert.severity.value}"
        msg["From"] = cfg.sender or cfg.username or cfg.recipient
        msg["To"] = cfg.recipient
        body = [format_alert(alert), f"id: {alert.id}", f"timestamp: {alert.timestamp.isoformat()}"]
        if alert.metadata:
            body.extend(f"{k}: {v}" for k, v in alert.metadata.items())
        msg.set_content("\n".join(body))
        return msg

    def send_alert(self, alert: Alert) -> None:
        cfg = self.smtp_config
        try:
            with smtplib.SMTP(cfg.server, cfg.port, timeout=self.timeout) as smtp:
                if cfg.username and cfg.password:
                    smtp.starttls()
                    smtp.login(cfg.username, cfg.password)
                smtp.send_message(self.build_message(alert))
        except (smtplib.SMTPException, OSError) as e:
            raise NetworkError(f"Failed to send email alert: {e}") from e
        logger.info("[NOTIFY] Email alert sent id=%s to=%s", alert.id, cfg.recipient)


class NotificationOrchestrator:
    """Reparte cada alerta a todos los notificadores.

    Se detiene en el primer fallo y lo propaga.
    """

    def __init__(self, notifiers: Iterable[Notifier] = ()):
        self.notifiers: List[Notifier] = list(notifiers)

    def notify(self, alert: Alert) -> None:
        for notifier in self.notifiers:
            notifier.send_alert(alert)


def build_orchestrator(settings: Settings) -> NotificationOrchestrator:
    notifiers: List[Notifier] = []
    if settings.slack_webhook_url:
        notifiers.append(SlackNotifier(settings.slack_webhook_url, timeout=settings.notify_timeout_seconds))
    if settings.smtp_server and settings.alert_email_to:
        notifiers.append(
            EmailNotifier(
                SmtpConfig(
                    server=settings.smtp_server,
                    port=settings.smtp_port,
                    username=settings.smtp_username,
                    password=settings.smtp_password,
                    recipient=settings.alert_email_to,
                ),
                timeout=settings.notify_timeout_seconds,
            )
        )
    if not notifiers:
        logger.warning("[NOTIFY] No notifiers configured - alerts will only be stored")
    return NotificationOrchestrator(notifiers)
