"""zklogin core - shared configuration, error and logging primitives."""

from .config import CoreSettings, ZkLoginConfig, clear_config_cache, get_config
from .exceptions import (
    ConfigException,
    InsufficientIdentitiesError,
    InvalidIdentityTokenError,
    ProofError,
    ProofGenerationError,
    ProofVerificationError,
    RecordNotFoundError,
    ValidationException,
    WalletKeyError,
    ZkLoginAlreadyInitializedError,
    ZkLoginException,
    ZkLoginNotInitializedError,
)
from .logging import (
    configure_logging,
    correlation_context,
    redact,
)

__all__ = [
    # Config
    "CoreSettings",
    "ZkLoginConfig",
    "clear_config_cache",
    "get_config",
    # Exceptions
    "ConfigException",
    "InsufficientIdentitiesError",
    "InvalidIdentityTokenError",
    "ProofError",
    "ProofGenerationError",
    "ProofVerificationError",
    "RecordNotFoundError",
    "ValidationException",
    "WalletKeyError",
    "ZkLoginAlreadyInitializedError",
    "ZkLoginException",
    "ZkLoginNotInitializedError",
    # Logging
    "configure_logging",
    "correlation_context",
    "redact",
]
