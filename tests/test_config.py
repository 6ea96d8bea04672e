"""Tests de configuración por entorno."""

import os
from unittest.mock import patch

from common.config import get_settings


def test_defaults(tmp_path):
    env = {"EXTRACTION_ENV_FILE": str(tmp_path / "missing.env")}
    with patch.dict(os.environ, env, clear=True):
        settings = get_settings()

    assert settings.database_url == "sqlite:///extraction_analytics.db"
    assert settings.metrics_file == "metrics.json"
    assert settings.slack_webhook_url is None
    assert settings.smtp_port == 587
    assert settings.api_port == 3000
    assert settings.log_level == "INFO"


def test_env_file_loaded_but_real_env_wins(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "METRICS_FILE=/data/metrics.json\nAPI_PORT=8080\nSLACK_WEBHOOK_URL=https://hooks.example.com/x\n",
        encoding="utf-8",
    )
    env = {"EXTRACTION_ENV_FILE": str(env_file), "API_PORT": "9000"}
    with patch.dict(os.environ, env, clear=True):
        settings = get_settings()

    assert settings.metrics_file == "/data/metrics.json"
    assert settings.api_port == 9000
    assert settings.slack_webhook_url == "https://hooks.example.com/x"


def test_blank_optional_values_are_none(tmp_path):
    env = {"EXTRACTION_ENV_FILE": str(tmp_path / "missing.env"), "SMTP_SERVER": "  "}
    with patch.dict(os.environ, env, clear=True):
        settings = get_settings()

    assert settings.smtp_server is None
