"""Unit tests for configuration loading."""

import pytest

from ovpn_notifier.config import load_config
from ovpn_notifier.exceptions import ConfigError

ENV_VARS = (
    "OPENVPN_HOST", "OPENVPN_PORT", "OPENVPN_TIMEOUT", "POLL_INTERVAL",
    "FAILURE_THRESHOLD", "REALERT_EVERY", "MALFORMED_LINES", "NOTIFIER",
    "PUSHOVER_TOKEN", "PUSHOVER_USER_KEY", "BOT_TOKEN", "CHAT_ID",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_with_pushover_flags():
    """Original command-line flags are accepted."""
    config = load_config(["-t", "app_token", "-u", "user_key"])

    assert config.host == "localhost"
    assert config.port == 5555
    assert config.failure_threshold == 3
    assert config.realert_every == 0
    assert config.malformed_lines == "abort"
    assert config.notifier == "pushover"
    assert config.pushover_token == "app_token"
    assert config.pushover_user_key == "user_key"


def test_environment_values(monkeypatch):
    """Environment configures the telegram notifier."""
    monkeypatch.setenv("NOTIFIER", "telegram")
    monkeypatch.setenv("BOT_TOKEN", "bot")
    monkeypatch.setenv("CHAT_ID", "-100123")
    monkeypatch.setenv("OPENVPN_HOST", "vpn.local")
    monkeypatch.setenv("OPENVPN_PORT", "7505")
    monkeypatch.setenv("REALERT_EVERY", "10")
    monkeypatch.setenv("MALFORMED_LINES", "SKIP")

    config = load_config([])

    assert config.notifier == "telegram"
    assert config.host == "vpn.local"
    assert config.port == 7505
    assert config.realert_every == 10
    assert config.malformed_lines == "skip"


def test_flags_override_environment(monkeypatch):
    """Command-line flags win over environment."""
    monkeypatch.setenv("OPENVPN_HOST", "vpn.local")
    monkeypatch.setenv("PUSHOVER_TOKEN", "env_token")
    monkeypatch.setenv("PUSHOVER_USER_KEY", "env_user")

    config = load_config(["--server", "10.0.0.1", "--token", "flag_token"])

    assert config.host == "10.0.0.1"
    assert config.pushover_token == "flag_token"
    assert config.pushover_user_key == "env_user"


def test_missing_pushover_credentials():
    """Pushover without token is rejected."""
    with pytest.raises(ConfigError, match="PUSHOVER_TOKEN"):
        load_config([])


def test_missing_telegram_chat(monkeypatch):
    """Telegram without chat id is rejected."""
    monkeypatch.setenv("BOT_TOKEN", "bot")

    with pytest.raises(ConfigError, match="CHAT_ID"):
        load_config(["--notifier", "telegram"])


def test_bad_port():
    """Non-numeric port is rejected."""
    with pytest.raises(ConfigError, match="port"):
        load_config(["-t", "a", "-u", "b", "-p", "http"])


def test_bad_malformed_policy(monkeypatch):
    monkeypatch.setenv("MALFORMED_LINES", "ignore")

    with pytest.raises(ConfigError, match="MALFORMED_LINES"):
        load_config(["-t", "a", "-u", "b"])


def test_zero_threshold_rejected(monkeypatch):
    monkeypatch.setenv("FAILURE_THRESHOLD", "0")

    with pytest.raises(ConfigError, match="FAILURE_THRESHOLD"):
        load_config(["-t", "a", "-u", "b"])


def test_summary_hides_secrets():
    config = load_config(["-t", "secret_token", "-u", "secret_user"])

    assert "secret" not in config.summary()
    assert "localhost:5555" in config.summary()
