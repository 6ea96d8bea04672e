from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _default_env_file() -> str:
    # .env en la raíz del repo; las variables reales del entorno tienen prioridad.
    repo_root = Path(__file__).resolve().parents[1]
    return str(repo_root / ".env")


@dataclass(frozen=True)
class Settings:
    database_url: str
    metrics_file: str

    slack_webhook_url: Optional[str]
    smtp_server: Optional[str]
    smtp_port: int
    smtp_username: Optional[str]
    smtp_password: Optional[str]
    alert_email_to: Optional[str]
    notify_timeout_seconds: float

    log_level: str
    api_host: str
    api_port: int


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name, "").strip()
    return value or None


def get_settings() -> Settings:
    env_file = os.getenv("EXTRACTION_ENV_FILE", _default_env_file())
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    database_url = os.getenv("DATABASE_URL", "sqlite:///extraction_analytics.db")
    metrics_file = os.getenv("METRICS_FILE", "metrics.json")

    # Notificadores: si no hay webhook / servidor SMTP, no se registran.
    slack_webhook_url = _optional("SLACK_WEBHOOK_URL")
    smtp_server = _optional("SMTP_SERVER")
    smtp_port = int(os.getenv("SMTP_PORT", "587"))
    smtp_username = _optional("SMTP_USERNAME")
    smtp_password = _optional("SMTP_PASSWORD")
    alert_email_to = _optional("ALERT_EMAIL_TO")
    notify_timeout_seconds = float(os.getenv("NOTIFY_TIMEOUT_SECONDS", "5"))

    return Settings(
        database_url=database_url,
        metrics_file=metrics_file,
        slack_webhook_url=slack_webhook_url,
        smtp_server=smtp_server,
        smtp_port=smtp_port,
        smtp_username=smtp_username,
        smtp_password=smtp_password,
        alert_email_to=alert_email_to,
        notify_timeout_seconds=notify_timeout_seconds,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        api_host=os.getenv("API_HOST", "127.0.0.1"),
        api_port=int(os.getenv("API_PORT", "3000")),
    )
