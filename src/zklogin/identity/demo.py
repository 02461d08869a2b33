"""Deterministic demo identities.

Demo mode registers and recovers wallets without real sign-in: the same four
identities are produced on every run, so a demo wallet can be recovered
across restarts. Never use these for anything holding value.
"""

from __future__ import annotations

import json
from typing import Any

from jwt.utils import base64url_encode

from .models import (
    GitHubIdentity,
    GoogleIdentity,
    IdentityProof,
    PasskeyAssertion,
    PasskeyIdentity,
    Provider,
    TwitterIdentity,
)

DEMO_GOOGLE_CLAIMS: dict[str, Any] = {
    "sub": "google-user-123",
    "email": "demo@example.com",
    "name": "Demo User",
    "iat": 1640000000,
    "exp": 2640000000,
}


def build_unsigned_id_token(claims: dict[str, Any], signature: str = "mock-signature-for-demo") -> str:
    """Assemble a ``header.payload.signature`` token without signing it."""
    header = base64url_encode(json.dumps({"alg": "RS256", "typ": "JWT"}).encode()).decode()
    payload = base64url_encode(json.dumps(claims).encode()).decode()
    return f"{header}.{payload}.{signature}"


DEMO_IDENTITIES: dict[Provider, IdentityProof] = {
    Provider.GOOGLE: GoogleIdentity(id_token=build_unsigned_id_token(DEMO_GOOGLE_CLAIMS)),
    Provider.GITHUB: GitHubIdentity(access_token="github-user-abc"),
    Provider.TWITTER: TwitterIdentity(access_token="twitter-user-xyz"),
    Provider.PASSKEY: PasskeyIdentity(
        assertion=PasskeyAssertion(
            credential_id="passkey-device-001",
            client_data_json="mock-client-data",
            authenticator_data="mock-auth-data",
            signature="mock-signature",
        )
    ),
}


def demo_identities(*providers: str) -> list[IdentityProof]:
    """Return demo identities for ``providers`` (all four when empty), in the order given."""
    if not providers:
        return list(DEMO_IDENTITIES.values())
    return [DEMO_IDENTITIES[Provider(p)] for p in providers]
