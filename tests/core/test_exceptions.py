"""Tests for zklogin.core.exceptions module."""

from __future__ import annotations

import pytest

from zklogin.core.exceptions import (
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

# ============================================================================
# ZkLoginException Tests
# ============================================================================


class TestZkLoginException:
    """Tests for base ZkLoginException."""

    def test_create_with_message(self):
        exc = ZkLoginException("Something went wrong")
        assert str(exc) == "Something went wrong"
        assert exc.message == "Something went wrong"
        assert exc.details == {}

    def test_to_dict(self):
        exc = ZkLoginException("Test error", details={"info": "extra"})
        assert exc.to_dict() == {"error": "ZkLoginException", "message": "Test error", "details": {"info": "extra"}}

    def test_to_dict_class_name(self):
        assert WalletKeyError("bad").to_dict()["error"] == "WalletKeyError"

    @pytest.mark.parametrize(
        "exc",
        [
            ValidationException("x"),
            ConfigException("x"),
            InvalidIdentityTokenError("github"),
            InsufficientIdentitiesError(1, 2),
            ProofGenerationError(),
            ProofVerificationError(),
            ZkLoginNotInitializedError(),
            ZkLoginAlreadyInitializedError("mock", "plonk"),
            WalletKeyError("x"),
            RecordNotFoundError("demo"),
        ],
    )
    def test_hierarchy(self, exc):
        assert isinstance(exc, ZkLoginException)


# ============================================================================
# Specific Exceptions
# ============================================================================


class TestValidationException:
    def test_field_and_value(self):
        exc = ValidationException("bad threshold", field="threshold", value=0)
        assert exc.details == {"field": "threshold", "value": "0"}
        assert exc.value == 0


class TestConfigException:
    def test_missing_vars(self):
        exc = ConfigException("missing", missing_vars=["wasm_url"])
        assert exc.missing_vars == ["wasm_url"]
        assert exc.details == {"missing_vars": ["wasm_url"]}

    def test_no_missing_vars(self):
        assert ConfigException("x").missing_vars == []


class TestIdentityErrors:
    def test_invalid_token_message(self):
        exc = InvalidIdentityTokenError("google", "malformed JWT")
        assert exc.message == "Invalid google token: malformed JWT"
        assert exc.details == {"provider": "google", "reason": "malformed JWT"}

    def test_invalid_token_default_reason(self):
        assert InvalidIdentityTokenError("passkey").reason == "token validation failed"

    def test_insufficient_identities(self):
        exc = InsufficientIdentitiesError(provided=1, required=2)
        assert exc.provided == 1
        assert exc.required == 2
        assert "provided 1, required 2" in exc.message


class TestProofErrors:
    def test_generation(self):
        exc = ProofGenerationError("boom")
        assert isinstance(exc, ProofError)
        assert exc.message == "Proof generation failed: boom"

    def test_verification_default(self):
        exc = ProofVerificationError()
        assert isinstance(exc, ProofError)
        assert exc.reason == "invalid proof"


class TestLifecycleErrors:
    def test_not_initialized(self):
        assert "init_zklogin" in ZkLoginNotInitializedError().message

    def test_already_initialized(self):
        exc = ZkLoginAlreadyInitializedError("mock", "plonk")
        assert exc.details == {"current": "mock", "requested": "plonk"}

    def test_record_not_found(self):
        exc = RecordNotFoundError("live")
        assert exc.namespace == "live"
        assert "live" in exc.message
