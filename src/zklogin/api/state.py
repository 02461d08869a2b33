"""Process-wide zklogin pipeline, set once by :func:`init_zklogin`.

The module-level entry points in :mod:`zklogin.api` read the service held
here. Initialization is guarded by a lock: repeating it with an equal config is
a no-op, while a different config is rejected unless ``force=True``. Callers
that do not want a singleton can construct :class:`ZkLoginService` directly.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from ..core.config import ZkLoginConfig
from ..core.exceptions import ZkLoginAlreadyInitializedError, ZkLoginNotInitializedError
from .service import ZkLoginService

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_service: ZkLoginService | None = None


def init_zklogin(config: ZkLoginConfig | dict[str, Any] | None = None, force: bool = False) -> ZkLoginService:
    """Initialize the process-wide pipeline.

    Args:
        config: Pipeline config (or its camelCase dict form). Defaults to settings.
        force: Replace an existing pipeline initialized with a different config.

    Returns:
        The active service.

    Raises:
        ConfigException: If the config is invalid or has no registered backend.
        ZkLoginAlreadyInitializedError: If already initialized differently and not forced.
    """
    global _service
    if config is None:
        config = ZkLoginConfig.from_settings()
    elif isinstance(config, dict):
        config = ZkLoginConfig.from_dict(config)

    with _lock:
        if _service is not None:
            if _service.config == config:
                return _service
            if not force:
                raise ZkLoginAlreadyInitializedError(
                    current=_service.config.proving_system, requested=config.proving_system
                )
            logger.warning(f"Re-initializing zklogin: {_service.config.proving_system} -> {config.proving_system}")

        _service = ZkLoginService(config)
        logger.info(f"zklogin initialized with {config.proving_system} proving system")
        return _service


def get_service() -> ZkLoginService:
    """Return the active service.

    Raises:
        ZkLoginNotInitializedError: If :func:`init_zklogin` has not been called.
    """
    service = _service
    if service is None:
        raise ZkLoginNotInitializedError()
    return service


def get_zklogin_config() -> ZkLoginConfig:
    return get_service().config


def is_initialized() -> bool:
    return _service is not None


def reset_state() -> None:
    """Drop the active service. Primarily for testing."""
    global _service
    with _lock:
        _service = None
