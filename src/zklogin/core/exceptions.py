# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Custom exception hierarchy for zklogin.

Every failure in the identity -> commitment -> proof -> key pipeline maps to
one of these types. Nothing is retried internally; callers own messaging and
any retry policy (e.g. prompting the user for another identity).
"""

from __future__ import annotations

from typing import Any


class ZkLoginException(Exception):  # noqa: N818
    """Base exception for all zklogin errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(ZkLoginException):
    """Exception for invalid arguments to a pipeline operation.

    Raised when:
    - Threshold is lower than 1
    - A serialized identity or commitment has the wrong shape
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConfigException(ZkLoginException):
    """Exception for configuration errors.

    Raised when:
    - An unknown proving system is requested
    - A proving system is missing required artifacts (wasm/zkey URLs)
    - No backend is registered for the configured proving system
    """

    def __init__(self, message: str, missing_vars: list[str] | None = None):
        details = {}
        if missing_vars:
            details["missing_vars"] = missing_vars
        super().__init__(message, details)
        self.missing_vars = missing_vars or []


class InvalidIdentityTokenError(ZkLoginException):
    """A malformed or incomplete identity proof.

    Aborts the whole extraction batch; there is no best-effort mode.
    """

    def __init__(self, provider: str, reason: str | None = None):
        self.provider = provider
        self.reason = reason or "token validation failed"
        super().__init__(
            f"Invalid {provider} token: {self.reason}",
            {"provider": provider, "reason": self.reason},
        )


class InsufficientIdentitiesError(ZkLoginException):
    """Not enough matching identities were presented to meet the threshold."""

    def __init__(self, provided: int, required: int):
        self.provided = provided
        self.required = required
        super().__init__(
            f"Insufficient identities: provided {provided}, required {required}",
            {"provided": provided, "required": required},
        )


class ProofError(ZkLoginException):
    """Base exception for the proof stage."""


class ProofGenerationError(ProofError):
    """The prover failed to produce a proof."""

    def __init__(self, reason: str | None = None):
        self.reason = reason or "unknown error"
        super().__init__(f"Proof generation failed: {self.reason}", {"reason": self.reason})


class ProofVerificationError(ProofError):
    """A proof did not verify against its public inputs."""

    def __init__(self, reason: str | None = None):
        self.reason = reason or "invalid proof"
        super().__init__(f"Proof verification failed: {self.reason}", {"reason": self.reason})


class ZkLoginNotInitializedError(ZkLoginException):
    """A pipeline entry point was called before ``init_zklogin``."""

    def __init__(self) -> None:
        super().__init__("ZK Login system not initialized. Call init_zklogin() first.")


class ZkLoginAlreadyInitializedError(ZkLoginException):
    """``init_zklogin`` was called again with a different configuration."""

    def __init__(self, current: str, requested: str):
        super().__init__(
            "ZK Login system already initialized with a different configuration",
            {"current": current, "requested": requested},
        )


class WalletKeyError(ZkLoginException):
    """A private key is not a valid secp256k1 scalar."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid wallet key: {reason}", {"reason": reason})


class RecordNotFoundError(ZkLoginException):
    """No stored wallet record exists for a namespace."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        super().__init__(f"No wallet record stored for namespace: {namespace}", {"namespace": namespace})
