"""Tests for LLM configuration module."""

import json
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from code_assistant.llm.config import LLMConfig
from code_assistant.llm.exceptions import ConfigError


class TestLLMConfig:
    """Tests for LLMConfig model."""

    def test_openai_config_valid(self):
        config = LLMConfig(provider="openai", api_key="sk-test-key")
        assert config.provider == "openai"
        assert config.api_key.get_secret_value() == "sk-test-key"
        assert config.model == "gpt-3.5-turbo"

    def test_anthropic_default_model(self):
        config = LLMConfig(provider="anthropic", api_key="sk-test")
        assert config.model == "claude-3-sonnet-20240229"

    def test_custom_model(self):
        config = LLMConfig(provider="anthropic", api_key="sk-test", model="claude-opus-4-20250514")
        assert config.model == "claude-opus-4-20250514"

    def test_requires_api_key(self):
        with pytest.raises(ValidationError):
            LLMConfig(provider="openai")

    def test_rejects_blank_api_key(self):
        with pytest.raises(ValidationError, match="api_key must not be empty"):
            LLMConfig(provider="openai", api_key="   ")

    def test_api_key_whitespace_stripped(self):
        config = LLMConfig(provider="openai", api_key="  sk-pasted\n")
        assert config.api_key.get_secret_value() == "sk-pasted"

    @pytest.mark.parametrize("key", ["sk-a\nb", "sk-a\x00b", "sk-\tmid", "sk-café"])
    def test_rejects_api_key_unfit_for_header(self, key):
        with pytest.raises(ValidationError, match="printable ASCII"):
            LLMConfig(provider="openai", api_key=key)

    def test_unfit_env_key_not_echoed(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-SECRET\x07x"}, clear=False):
            with pytest.raises(ConfigError, match="printable ASCII") as exc_info:
                LLMConfig.from_env()
        assert "sk-SECRET" not in str(exc_info.value)

    def test_invalid_provider(self):
        with pytest.raises(ValidationError):
            LLMConfig(provider="azure_openai", api_key="sk-test")

    def test_defaults(self):
        config = LLMConfig(provider="openai", api_key="sk-test")
        assert config.max_tokens == 500
        assert config.temperature == 0.7
        assert config.timeout_seconds == 120
        assert config.base_url is None

    def test_temperature_out_of_range_is_accepted(self):
        config = LLMConfig(provider="openai", api_key="sk-test", temperature=1.5)
        assert config.temperature == 1.5

    def test_max_tokens_must_be_positive(self):
        with pytest.raises(ValidationError):
            LLMConfig(provider="openai", api_key="sk-test", max_tokens=0)

    def test_base_url_requires_https(self):
        with pytest.raises(ValidationError, match="must start with 'https://'"):
            LLMConfig(provider="openai", api_key="sk-test", base_url="http://localhost:8080")

    def test_base_url_trailing_slash_stripped(self):
        config = LLMConfig(provider="openai", api_key="sk-test", base_url="https://gw.example/v1/")
        assert config.base_url == "https://gw.example/v1"

    def test_repr_hides_api_key(self):
        config = LLMConfig(provider="openai", api_key="sk-very-secret")
        assert "sk-very-secret" not in repr(config)
        assert "sk-very-secret" not in str(config)


class TestFromEnv:
    def test_from_env_openai(self):
        env = {"LLM_PROVIDER": "openai", "OPENAI_API_KEY": "sk-env-key"}
        with patch.dict(os.environ, env, clear=False):
            config = LLMConfig.from_env()
            assert config.provider == "openai"
            assert config.api_key.get_secret_value() == "sk-env-key"

    def test_from_env_anthropic(self):
        env = {"LLM_PROVIDER": "anthropic", "ANTHROPIC_API_KEY": "sk-ant"}
        with patch.dict(os.environ, env, clear=False):
            config = LLMConfig.from_env()
            assert config.provider == "anthropic"
            assert config.model == "claude-3-sonnet-20240229"

    def test_default_provider_prefers_openai_key(self):
        env = {"OPENAI_API_KEY": "sk-openai", "ANTHROPIC_API_KEY": "sk-ant"}
        with patch.dict(os.environ, env, clear=False):
            assert LLMConfig.from_env().provider == "openai"

    def test_default_provider_falls_back_to_anthropic(self):
        with patch.dict(os.environ, {"ANTHROPIC_API_KEY": "sk-ant"}, clear=False):
            assert LLMConfig.from_env().provider == "anthropic"

    def test_provider_argument_overrides_env(self):
        env = {"LLM_PROVIDER": "openai", "ANTHROPIC_API_KEY": "sk-ant"}
        with patch.dict(os.environ, env, clear=False):
            assert LLMConfig.from_env(provider="anthropic").provider == "anthropic"

    def test_shared_settings(self):
        env = {
            "OPENAI_API_KEY": "sk-openai",
            "DEFAULT_AI_MODEL": "gpt-4o",
            "MAX_TOKENS": "256",
            "TEMPERATURE": "0.2",
            "LLM_TIMEOUT_SECONDS": "30",
            "LLM_BASE_URL": "https://gateway.example/v1",
        }
        with patch.dict(os.environ, env, clear=False):
            config = LLMConfig.from_env()
            assert config.model == "gpt-4o"
            assert config.max_tokens == 256
            assert config.temperature == 0.2
            assert config.timeout_seconds == 30
            assert config.base_url == "https://gateway.example/v1"

    def test_missing_key_raises_config_error(self):
        with patch.dict(os.environ, {"LLM_PROVIDER": "openai"}, clear=False):
            with pytest.raises(ConfigError, match="OPENAI_API_KEY"):
                LLMConfig.from_env()

    def test_unknown_provider(self):
        with patch.dict(os.environ, {"LLM_PROVIDER": "unknown"}, clear=False):
            with pytest.raises(ValueError, match="Unknown provider"):
                LLMConfig.from_env()

    def test_unparsable_value_raises_config_error(self):
        env = {"OPENAI_API_KEY": "sk-openai", "MAX_TOKENS": "lots"}
        with patch.dict(os.environ, env, clear=False):
            with pytest.raises(ConfigError, match="max_tokens"):
                LLMConfig.from_env()

    def test_config_error_does_not_echo_api_key(self):
        env = {"OPENAI_API_KEY": "sk-hidden", "TEMPERATURE": "warm"}
        with patch.dict(os.environ, env, clear=False):
            with pytest.raises(ConfigError) as exc_info:
                LLMConfig.from_env()
        assert "sk-hidden" not in str(exc_info.value)


class TestFromFile:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "assistant.yaml"
        path.write_text(
            "provider: anthropic\napi_key: sk-file\nmax_tokens: 300\ntemperature: 0.1\n"
        )
        config = LLMConfig.from_file(path)
        assert config.provider == "anthropic"
        assert config.api_key.get_secret_value() == "sk-file"
        assert config.max_tokens == 300
        assert config.temperature == 0.1

    def test_json_file(self, tmp_path):
        path = tmp_path / "assistant.json"
        path.write_text(json.dumps({"provider": "openai", "api_key": "sk-json", "model": "gpt-4o"}))
        config = LLMConfig.from_file(path)
        assert config.provider == "openai"
        assert config.model == "gpt-4o"

    def test_api_key_falls_back_to_env(self, tmp_path):
        path = tmp_path / "assistant.yaml"
        path.write_text("provider: openai\nmax_tokens: 100\n")
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-env"}, clear=False):
            config = LLMConfig.from_file(path)
        assert config.api_key.get_secret_value() == "sk-env"

    def test_api_key_missing_everywhere(self, tmp_path):
        path = tmp_path / "assistant.yaml"
        path.write_text("provider: openai\n")
        with pytest.raises(ConfigError, match="api_key missing"):
            LLMConfig.from_file(path)

    def test_provider_argument_overrides_file(self, tmp_path):
        path = tmp_path / "assistant.yaml"
        path.write_text("provider: openai\napi_key: sk-file\n")
        config = LLMConfig.from_file(path, provider="anthropic")
        assert config.provider == "anthropic"

    def test_provider_switch_drops_file_model(self, tmp_path):
        path = tmp_path / "assistant.yaml"
        path.write_text("provider: openai\napi_key: sk-file\nmodel: gpt-4o\n")
        config = LLMConfig.from_file(path, provider="anthropic")
        assert config.model == "claude-3-sonnet-20240229"

    def test_same_provider_keeps_file_model(self, tmp_path):
        path = tmp_path / "assistant.yaml"
        path.write_text("provider: openai\napi_key: sk-file\nmodel: gpt-4o\n")
        config = LLMConfig.from_file(path, provider="openai")
        assert config.model == "gpt-4o"

    def test_block_scalar_api_key_stripped(self, tmp_path):
        path = tmp_path / "assistant.yaml"
        path.write_text("provider: openai\napi_key: |\n  sk-block\n")
        config = LLMConfig.from_file(path)
        assert config.api_key.get_secret_value() == "sk-block"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot load config file"):
            LLMConfig.from_file(tmp_path / "nope.yaml")

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "assistant.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            LLMConfig.from_file(path)

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "assistant.yaml"
        path.write_text("provider: gemini\napi_key: sk-file\n")
        with pytest.raises(ConfigError, match="provider"):
            LLMConfig.from_file(path)
