"""Core configuration - centralized settings for the zklogin package.

All environment-based configuration flows through this module. It also holds
:class:`ZkLoginConfig`, the immutable value a pipeline is initialized with.

Usage:
    from zklogin.core.config import get_config
    config = get_config()

    proving_system = config.proving_system
    log_level = config.log_level
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigException

DEFAULT_STORE_PATH = Path.home() / ".zklogin" / "wallets.json"


class CoreSettings(BaseSettings):
    """Core configuration settings for zklogin.

    Settings can be configured via ZKLOGIN_ environment variables or a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # PROVING SYSTEM SETTINGS
    # ==========================================================================

    proving_system: str = Field(
        default="mock",
        description="Proving system: 'mock' or 'plonk'",
        validation_alias="ZKLOGIN_PROVING_SYSTEM",
    )
    wasm_url: str | None = Field(
        default=None,
        description="Circuit WASM location (plonk only)",
        validation_alias="ZKLOGIN_WASM_URL",
    )
    zkey_url: str | None = Field(
        default=None,
        description="Proving key location (plonk only)",
        validation_alias="ZKLOGIN_ZKEY_URL",
    )

    # ==========================================================================
    # WALLET RECORD STORAGE
    # ==========================================================================

    store_path: Path = Field(
        default=DEFAULT_STORE_PATH,
        description="JSON file holding stored wallet records",
        validation_alias="ZKLOGIN_STORE_PATH",
    )
    namespace: str = Field(
        default="demo",
        description="Default record namespace ('demo' or 'live')",
        validation_alias="ZKLOGIN_NAMESPACE",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="ZKLOGIN_LOG_LEVEL",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
        validation_alias="ZKLOGIN_LOG_FORMAT",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
        validation_alias="ZKLOGIN_LOG_FILE",
    )


# ==========================================================================
# GLOBAL CONFIG INSTANCE (lazy loaded)
# ==========================================================================

_config: CoreSettings | None = None


def get_config() -> CoreSettings:
    """Get the global configuration instance.

    Returns:
        The singleton CoreSettings instance.
    """
    global _config
    if _config is None:
        _config = CoreSettings()
    return _config


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config
    _config = None


# ==========================================================================
# PIPELINE CONFIG
# ==========================================================================

PROVING_SYSTEMS = ("mock", "plonk")


@dataclass(frozen=True)
class ZkLoginConfig:
    """Configuration a zklogin pipeline is initialized with.

    Attributes:
        proving_system: ``"mock"`` (placeholder prover) or ``"plonk"``.
        wasm_url: Circuit WASM location, required for ``plonk``.
        zkey_url: Proving key location, required for ``plonk``.
    """

    proving_system: str = "mock"
    wasm_url: str | None = None
    zkey_url: str | None = None

    def __post_init__(self) -> None:
        if self.proving_system not in PROVING_SYSTEMS:
            raise ConfigException(
                f"Unknown proving system: {self.proving_system!r} (expected one of {', '.join(PROVING_SYSTEMS)})"
            )
        if self.proving_system == "plonk":
            missing = [
                name
                for name, value in (("wasm_url", self.wasm_url), ("zkey_url", self.zkey_url))
                if not value
            ]
            if missing:
                raise ConfigException("plonk proving system requires circuit artifacts", missing_vars=missing)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZkLoginConfig:
        """Create from the camelCase shape (``provingSystem``, ``wasmUrl``, ``zkeyUrl``)."""
        return cls(
            proving_system=data.get("provingSystem", data.get("proving_system", "mock")),
            wasm_url=data.get("wasmUrl", data.get("wasm_url")),
            zkey_url=data.get("zkeyUrl", data.get("zkey_url")),
        )

    @classmethod
    def from_settings(cls, settings: CoreSettings | None = None) -> ZkLoginConfig:
        settings = settings or get_config()
        return cls(
            proving_system=settings.proving_system,
            wasm_url=settings.wasm_url,
            zkey_url=settings.zkey_url,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "provingSystem": self.proving_system,
            "wasmUrl": self.wasm_url,
            "zkeyUrl": self.zkey_url,
        }
