"""Unit tests for configuration module."""

import tempfile
from pathlib import Path
from unittest import mock

import pytest

from src.config import ConfigurationError, ETradeConfig, load_config

ENV_KEYS = (
    "ETRADE_CONSUMER_KEY",
    "ETRADE_CONSUMER_SECRET",
    "ETRADE_PRODUCTION",
    "ETRADE_TOKEN_FILE",
    "ETRADE_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class TestETradeConfig:
    """Test suite for ETradeConfig class."""

    def test_defaults(self):
        config = ETradeConfig()

        assert config.consumer_key == ""
        assert config.production is False
        assert config.timeout == 30
        assert config.token_file.endswith("tokens.json")
        assert config.environment_name == "sandbox"

    def test_token_file_is_expanded(self):
        config = ETradeConfig(token_file="~/tokens.json")

        assert not config.token_file.startswith("~")

    def test_invalid_timeout(self):
        with pytest.raises(ConfigurationError, match="timeout"):
            ETradeConfig(timeout=0)

    def test_require_credentials(self):
        with pytest.raises(ConfigurationError, match="ETRADE_CONSUMER_KEY"):
            ETradeConfig(consumer_key="key").require_credentials()

        ETradeConfig(consumer_key="key", consumer_secret="secret").require_credentials()

    def test_to_dict_masks_secret(self):
        config = ETradeConfig(consumer_key="key", consumer_secret="secret", production=True)

        data = config.to_dict()

        assert data["oauth"]["consumer_key"] == "key"
        assert data["oauth"]["consumer_secret"] == "***"
        assert data["api"]["production"] is True
        assert "secret" not in repr(config)


class TestLoadFromFile:
    """Tests for YAML loading and environment precedence."""

    def test_missing_file_uses_defaults(self, config_dir):
        config = ETradeConfig.load_from_file(config_dir / "missing.yaml")

        assert config.production is False
        assert config.timeout == 30

    def test_file_values(self, config_dir):
        path = config_dir / "config.yaml"
        path.write_text(
            "api:\n"
            "  production: true\n"
            "  timeout: 15\n"
            "oauth:\n"
            "  consumer_key: file_key\n"
            "  consumer_secret: file_secret\n"
            f"  token_file: {config_dir / 'tokens.json'}\n"
        )

        config = load_config(path)

        assert config.production is True
        assert config.timeout == 15
        assert config.consumer_key == "file_key"
        assert config.consumer_secret == "file_secret"
        assert config.token_file == str(config_dir / "tokens.json")

    def test_environment_overrides_file(self, config_dir, monkeypatch):
        path = config_dir / "config.yaml"
        path.write_text("api:\n  production: true\noauth:\n  consumer_key: file_key\n")
        monkeypatch.setenv("ETRADE_CONSUMER_KEY", "env_key")
        monkeypatch.setenv("ETRADE_PRODUCTION", "false")
        monkeypatch.setenv("ETRADE_TIMEOUT", "5")

        config = ETradeConfig.load_from_file(path)

        assert config.consumer_key == "env_key"
        assert config.production is False
        assert config.timeout == 5

    def test_invalid_yaml(self, config_dir):
        path = config_dir / "config.yaml"
        path.write_text("api: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ETradeConfig.load_from_file(path)

    def test_non_mapping(self, config_dir):
        path = config_dir / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            ETradeConfig.load_from_file(path)

    def test_invalid_timeout_env(self, config_dir):
        with mock.patch.dict("os.environ", {"ETRADE_TIMEOUT": "soon"}):
            with pytest.raises(ConfigurationError, match="Invalid timeout"):
                ETradeConfig.load_from_file(config_dir / "missing.yaml")
