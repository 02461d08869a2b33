"""Global test fixtures for the zklogin test suite."""

from __future__ import annotations

import os
from typing import Any

import pytest

from zklogin.api.state import reset_state
from zklogin.core.config import ZkLoginConfig, clear_config_cache
from zklogin.identity import (
    GitHubIdentity,
    GoogleIdentity,
    PasskeyAssertion,
    PasskeyIdentity,
    TwitterIdentity,
    build_unsigned_id_token,
)

# ============================================================================
# State Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_global_state():
    """Every test starts with no process-wide pipeline and fresh settings."""
    reset_state()
    clear_config_cache()
    yield
    reset_state()
    clear_config_cache()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all ZKLOGIN_ environment variables."""
    for key in list(os.environ.keys()):
        if key.startswith("ZKLOGIN_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def mock_config() -> ZkLoginConfig:
    return ZkLoginConfig(proving_system="mock")


# ============================================================================
# Identity Fixtures
# ============================================================================


def _google_token(sub: Any = "u1", **claims: Any) -> str:
    """Build an unsigned Google-style ID token carrying ``sub``."""
    payload = {"iss": "https://accounts.google.com", "email": "user@example.com", **claims}
    if sub is not None:
        payload["sub"] = sub
    return build_unsigned_id_token(payload)


def _passkey(credential_id: str) -> PasskeyIdentity:
    return PasskeyIdentity(
        assertion=PasskeyAssertion(
            credential_id=credential_id,
            client_data_json='{"type":"webauthn.get"}',
            authenticator_data="auth_data",
            signature="sig_data",
        )
    )


@pytest.fixture
def make_google_token():
    """Factory: ``make_google_token(sub, **claims)`` -> unsigned ID token."""
    return _google_token


@pytest.fixture
def make_passkey():
    """Factory: ``make_passkey(credential_id)`` -> PasskeyIdentity."""
    return _passkey


@pytest.fixture
def google_u1() -> GoogleIdentity:
    return GoogleIdentity(id_token=_google_token("u1"))


@pytest.fixture
def github_t1() -> GitHubIdentity:
    return GitHubIdentity(access_token="t1")


@pytest.fixture
def twitter_t2() -> TwitterIdentity:
    return TwitterIdentity(access_token="t2")


@pytest.fixture
def passkey_c1() -> PasskeyIdentity:
    return _passkey("c1")


@pytest.fixture
def scenario_identities(google_u1, github_t1, passkey_c1) -> list:
    """Google(sub=u1), GitHub(token=t1), Passkey(credentialId=c1)."""
    return [google_u1, github_t1, passkey_c1]
