"""Identity layer for zklogin - heterogeneous proofs reduced to stable claims.

Key concepts:
- **IdentityProof**: a Google ID token, GitHub/Twitter access token, or
  WebAuthn passkey assertion. Transient; never persisted.
- **IdentityClaim**: ``(provider, stable_id)``, stable across sessions for the
  same account, never containing a raw access token.
"""

from zklogin.identity.adapters import extract_identity_claim, extract_identity_claims
from zklogin.identity.demo import DEMO_IDENTITIES, build_unsigned_id_token, demo_identities
from zklogin.identity.models import (
    GitHubIdentity,
    GoogleIdentity,
    IdentityClaim,
    IdentityProof,
    PasskeyAssertion,
    PasskeyIdentity,
    Provider,
    TwitterIdentity,
    identity_from_dict,
)

__all__ = [
    "DEMO_IDENTITIES",
    "GitHubIdentity",
    "GoogleIdentity",
    "IdentityClaim",
    "IdentityProof",
    "PasskeyAssertion",
    "PasskeyIdentity",
    "Provider",
    "TwitterIdentity",
    "build_unsigned_id_token",
    "demo_identities",
    "extract_identity_claim",
    "extract_identity_claims",
    "identity_from_dict",
]
