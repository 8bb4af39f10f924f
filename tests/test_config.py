"""Tests for configuration loading."""

from __future__ import annotations

import os

import pytest

from inspector_bot.core import config as config_module
from inspector_bot.core.config import load_config
from inspector_bot.core.errors import ConfigError
from inspector_bot.core.models import DeliveryMode, TrendingPeriod


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("TELEGRAM_BOT_TOKEN", "GITHUB_BOT_TOKEN", "GITHUB_TOKEN", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_DIR", tmp_path / "missing-default")
    yield
    # load_dotenv writes straight into os.environ.
    for name in ("TELEGRAM_BOT_TOKEN", "GITHUB_BOT_TOKEN", "GITHUB_TOKEN"):
        os.environ.pop(name, None)


def _write(directory, name, content):
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadConfig:
    def test_defaults_from_environment_only(self, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot-token")

        config = load_config()

        assert config.telegram_bot_token == "bot-token"
        assert config.github_token is None
        assert config.config_dir is None
        assert config.webhook.port == 8080
        assert config.webhook.path == "/webhook"
        assert config.trending.cap == 5
        assert config.trending.period == TrendingPeriod.DAILY
        assert config.trending.delivery_mode == DeliveryMode.PER_ITEM
        assert config.trending.shuffle is True
        assert config.trending.seed is None

    def test_legacy_token_name(self, monkeypatch):
        monkeypatch.setenv("GITHUB_BOT_TOKEN", "legacy")
        assert load_config().telegram_bot_token == "legacy"

    def test_missing_token(self):
        with pytest.raises(ConfigError):
            load_config()

    def test_env_file_and_settings(self, tmp_path):
        _write(tmp_path, ".env", "TELEGRAM_BOT_TOKEN=from-file\nGITHUB_TOKEN=gh\n")
        _write(
            tmp_path,
            "settings.yaml",
            "webhook:\n  port: 9000\n  path: /hook\n"
            "trending:\n  cap: 10\n  period: weekly\n  delivery_mode: joined\n  seed: 3\n  shuffle: false\n"
            "template_path: repo.tmpl\n",
        )

        config = load_config(tmp_path)

        assert config.telegram_bot_token == "from-file"
        assert config.github_token == "gh"
        assert config.webhook.port == 9000
        assert config.webhook.path == "/hook"
        assert config.trending.cap == 10
        assert config.trending.period == TrendingPeriod.WEEKLY
        assert config.trending.delivery_mode == DeliveryMode.JOINED
        assert config.trending.seed == 3
        assert config.trending.shuffle is False
        assert config.template_path == (tmp_path / "repo.tmpl").resolve()

    def test_shell_environment_wins_over_env_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "from-shell")
        _write(tmp_path, ".env", "TELEGRAM_BOT_TOKEN=from-file\n")

        assert load_config(tmp_path).telegram_bot_token == "from-shell"

    def test_port_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "t")
        monkeypatch.setenv("PORT", "5000")
        _write(tmp_path, "settings.yaml", "webhook:\n  port: 9000\n")

        assert load_config(tmp_path).webhook.port == 5000

    def test_missing_explicit_directory(self, tmp_path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "nope")

    def test_empty_settings_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "t")
        _write(tmp_path, "settings.yaml", "")

        assert load_config(tmp_path).trending.cap == 5

    @pytest.mark.parametrize(
        "content",
        [
            "- not\n- a mapping\n",
            "trending: [1, 2]\n",
            "trending:\n  cap: 0\n",
            "trending:\n  cap: many\n",
            "trending:\n  period: hourly\n",
            "trending:\n  delivery_mode: carrier-pigeon\n",
            "trending:\n  seed: abc\n",
            "trending:\n  shuffle: \"false\"\n",
            "trending:\n  shuffle: 0\n",
            "webhook:\n  path: hook\n",
            "webhook:\n  port: true\n",
            "trending: {cap: [\n",
        ],
    )
    def test_invalid_settings(self, tmp_path, monkeypatch, content):
        monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "t")
        _write(tmp_path, "settings.yaml", content)

        with pytest.raises(ConfigError):
            load_config(tmp_path)
