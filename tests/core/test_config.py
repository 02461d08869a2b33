"""Tests for zklogin.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from zklogin.core.config import (
    DEFAULT_STORE_PATH,
    CoreSettings,
    ZkLoginConfig,
    clear_config_cache,
    get_config,
)
from zklogin.core.exceptions import ConfigException

# ============================================================================
# CoreSettings
# ============================================================================


class TestCoreSettingsDefaults:
    """Tests for default settings values."""

    def test_proving_defaults(self, clean_env):
        settings = CoreSettings()
        assert settings.proving_system == "mock"
        assert settings.wasm_url is None
        assert settings.zkey_url is None

    def test_storage_defaults(self, clean_env):
        settings = CoreSettings()
        assert settings.store_path == DEFAULT_STORE_PATH
        assert settings.namespace == "demo"

    def test_logging_defaults(self, clean_env):
        settings = CoreSettings()
        assert settings.log_level == "INFO"
        assert settings.log_format == ""
        assert settings.log_file is None


class TestCoreSettingsEnvOverrides:
    """Tests for ZKLOGIN_ environment overrides."""

    def test_proving_env_overrides(self, monkeypatch, clean_env):
        monkeypatch.setenv("ZKLOGIN_PROVING_SYSTEM", "plonk")
        monkeypatch.setenv("ZKLOGIN_WASM_URL", "https://example.com/circuit.wasm")
        monkeypatch.setenv("ZKLOGIN_ZKEY_URL", "https://example.com/circuit.zkey")
        settings = CoreSettings()
        assert settings.proving_system == "plonk"
        assert settings.wasm_url == "https://example.com/circuit.wasm"
        assert settings.zkey_url == "https://example.com/circuit.zkey"

    def test_storage_env_overrides(self, monkeypatch, clean_env, tmp_path):
        monkeypatch.setenv("ZKLOGIN_STORE_PATH", str(tmp_path / "w.json"))
        monkeypatch.setenv("ZKLOGIN_NAMESPACE", "live")
        settings = CoreSettings()
        assert settings.store_path == Path(tmp_path / "w.json")
        assert settings.namespace == "live"

    def test_logging_env_overrides(self, monkeypatch, clean_env):
        monkeypatch.setenv("ZKLOGIN_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("ZKLOGIN_LOG_FORMAT", "json")
        settings = CoreSettings()
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    def test_unknown_env_vars_ignored(self, monkeypatch, clean_env):
        monkeypatch.setenv("ZKLOGIN_NOT_A_SETTING", "x")
        assert CoreSettings().proving_system == "mock"


class TestGetConfigSingleton:
    """Tests for the lazy settings singleton."""

    def test_returns_same_instance(self, clean_env):
        assert get_config() is get_config()

    def test_clear_resets(self, monkeypatch, clean_env):
        first = get_config()
        monkeypatch.setenv("ZKLOGIN_NAMESPACE", "live")
        assert get_config().namespace == "demo"
        clear_config_cache()
        assert get_config() is not first
        assert get_config().namespace == "live"


# ============================================================================
# ZkLoginConfig
# ============================================================================


class TestZkLoginConfig:
    """Tests for the pipeline config value."""

    def test_defaults(self):
        config = ZkLoginConfig()
        assert config.proving_system == "mock"
        assert config.to_dict() == {"provingSystem": "mock", "wasmUrl": None, "zkeyUrl": None}

    def test_unknown_proving_system(self):
        with pytest.raises(ConfigException, match="Unknown proving system"):
            ZkLoginConfig(proving_system="groth16")

    def test_plonk_requires_artifacts(self):
        with pytest.raises(ConfigException) as exc_info:
            ZkLoginConfig(proving_system="plonk", wasm_url="circuit.wasm")
        assert exc_info.value.missing_vars == ["zkey_url"]

    def test_plonk_with_artifacts(self):
        config = ZkLoginConfig(proving_system="plonk", wasm_url="a.wasm", zkey_url="a.zkey")
        assert config.wasm_url == "a.wasm"

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ZkLoginConfig().proving_system = "plonk"

    def test_equality(self):
        assert ZkLoginConfig() == ZkLoginConfig(proving_system="mock")

    def test_from_dict_camel_case(self):
        config = ZkLoginConfig.from_dict({"provingSystem": "plonk", "wasmUrl": "a", "zkeyUrl": "b"})
        assert config == ZkLoginConfig("plonk", "a", "b")

    def test_from_dict_snake_case(self):
        config = ZkLoginConfig.from_dict({"proving_system": "plonk", "wasm_url": "a", "zkey_url": "b"})
        assert config == ZkLoginConfig("plonk", "a", "b")

    def test_from_dict_empty(self):
        assert ZkLoginConfig.from_dict({}) == ZkLoginConfig()

    def test_from_settings(self, monkeypatch, clean_env):
        monkeypatch.setenv("ZKLOGIN_PROVING_SYSTEM", "plonk")
        monkeypatch.setenv("ZKLOGIN_WASM_URL", "a")
        monkeypatch.setenv("ZKLOGIN_ZKEY_URL", "b")
        assert ZkLoginConfig.from_settings() == ZkLoginConfig("plonk", "a", "b")
