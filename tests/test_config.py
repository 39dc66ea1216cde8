"""Tests for environment-driven configuration."""

import pytest

from v0_mcp.config import DEFAULT_BASE_URL, V0Config, load_config
from v0_mcp.errors import ConfigError
from v0_mcp.schemas import V0Model


class TestLoadConfig:
    def test_defaults(self):
        config = load_config({"V0_API_KEY": "test-key"})

        assert config == V0Config(api_key="test-key")
        assert config.base_url == DEFAULT_BASE_URL == "https://api.v0.dev/v1"
        assert config.default_model is V0Model.V0_1_5_MD
        assert config.timeout == 60.0
        assert config.server_name == "v0-mcp"
        assert config.server_version == "1.0.0"
        assert config.log_level == "INFO"

    def test_custom_values(self):
        config = load_config(
            {
                "V0_API_KEY": "custom-key",
                "V0_BASE_URL": "https://custom.api.com/v1",
                "V0_DEFAULT_MODEL": "v0-1.5-lg",
                "V0_TIMEOUT": "45000",
                "V0_MAX_RETRIES": "0",
                "MCP_SERVER_NAME": "custom-server",
                "MCP_SERVER_VERSION": "2.0.0",
                "LOG_LEVEL": "warn",
            }
        )

        assert config.api_key == "custom-key"
        assert config.base_url == "https://custom.api.com/v1"
        assert config.default_model is V0Model.V0_1_5_LG
        assert config.timeout == 45.0
        assert config.max_retries == 0
        assert config.server_name == "custom-server"
        assert config.server_version == "2.0.0"
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("env", [{}, {"V0_API_KEY": ""}])
    def test_missing_api_key(self, env):
        with pytest.raises(ConfigError, match="Missing required environment variables: V0_API_KEY"):
            load_config(env)

    def test_invalid_timeout(self):
        with pytest.raises(ConfigError, match="V0_TIMEOUT"):
            load_config({"V0_API_KEY": "k", "V0_TIMEOUT": "invalid-number"})

    def test_unknown_model(self):
        with pytest.raises(ConfigError, match="V0_DEFAULT_MODEL"):
            load_config({"V0_API_KEY": "k", "V0_DEFAULT_MODEL": "gpt-4"})

    def test_unknown_log_level(self):
        with pytest.raises(ConfigError, match="LOG_LEVEL"):
            load_config({"V0_API_KEY": "k", "LOG_LEVEL": "loud"})

    def test_reads_process_environment(self, monkeypatch):
        for key in ("V0_BASE_URL", "V0_TIMEOUT", "V0_MAX_RETRIES", "LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)
        monkeypatch.setenv("V0_API_KEY", "from-env")
        monkeypatch.setenv("V0_DEFAULT_MODEL", "v0-1.0-md")

        config = load_config()

        assert config.api_key == "from-env"
        assert config.default_model is V0Model.V0_1_0_MD


def test_config_is_immutable():
    config = V0Config(api_key="k")
    with pytest.raises(AttributeError):
        config.api_key = "other"
