# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Provider adapters: reduce identity proofs to :class:`IdentityClaim`.

- Google: ``stable_id`` is the ID token's ``sub`` claim. Only the payload
  segment is decoded; signature checks belong to the sign-in integration
  that obtained the token.
- GitHub / Twitter: ``stable_id = SHA256(provider ":" access_token)``. Mixing
  in the provider keeps identical token values under different providers
  apart.
- Passkey: ``stable_id`` is the credential ID verbatim.
"""

from __future__ import annotations

import binascii
import json
import logging
from collections.abc import Iterable

from jwt.utils import base64url_decode

from ..core.exceptions import InvalidIdentityTokenError
from ..crypto.hashing import sha256_hex
from .models import (
    GitHubIdentity,
    GoogleIdentity,
    IdentityClaim,
    IdentityProof,
    PasskeyIdentity,
    Provider,
    TwitterIdentity,
)

logger = logging.getLogger(__name__)


def extract_identity_claim(identity: IdentityProof) -> IdentityClaim:
    """Extract the stable claim from a single identity proof.

    Raises:
        InvalidIdentityTokenError: If the proof is malformed or incomplete.
    """
    match identity:
        case GoogleIdentity():
            return _extract_google_claim(identity)
        case GitHubIdentity() | TwitterIdentity():
            return _extract_access_token_claim(identity.provider, identity.access_token)
        case PasskeyIdentity():
            return _extract_passkey_claim(identity)
        case _:
            provider = getattr(identity, "provider", "unknown")
            raise InvalidIdentityTokenError(str(provider), "unsupported identity type")


def extract_identity_claims(identities: Iterable[IdentityProof]) -> list[IdentityClaim]:
    """Extract claims for a batch of proofs, preserving order.

    The whole batch fails on the first invalid proof.
    """
    claims = [extract_identity_claim(identity) for identity in identities]
    logger.debug(f"Extracted {len(claims)} identity claims: {[c.provider for c in claims]}")
    return claims


def _extract_google_claim(identity: GoogleIdentity) -> IdentityClaim:
    token = identity.id_token
    # JWT format: header.payload.signature
    if not isinstance(token, str) or len(token.split(".")) != 3:
        raise InvalidIdentityTokenError(Provider.GOOGLE, "malformed JWT - expected 3 parts")

    try:
        payload = json.loads(base64url_decode(token.split(".")[1]))
    except (binascii.Error, ValueError) as e:
        raise InvalidIdentityTokenError(Provider.GOOGLE, f"token decode failed: {e}") from e

    if not isinstance(payload, dict):
        raise InvalidIdentityTokenError(Provider.GOOGLE, "payload is not a JSON object")

    sub = payload.get("sub")
    if not isinstance(sub, str) or not sub:
        raise InvalidIdentityTokenError(Provider.GOOGLE, "missing or invalid sub claim")

    return IdentityClaim(provider=Provider.GOOGLE.value, stable_id=sub)


def _extract_access_token_claim(provider: Provider, access_token: str) -> IdentityClaim:
    if not isinstance(access_token, str) or not access_token:
        raise InvalidIdentityTokenError(provider, "missing or invalid accessToken")

    return IdentityClaim(
        provider=provider.value,
        stable_id=sha256_hex(f"{provider.value}:{access_token}"),
    )


def _extract_passkey_claim(identity: PasskeyIdentity) -> IdentityClaim:
    credential_id = identity.assertion.credential_id
    if not isinstance(credential_id, str) or not credential_id:
        raise InvalidIdentityTokenError(Provider.PASSKEY, "missing or invalid credentialId")

    return IdentityClaim(provider=Provider.PASSKEY.value, stable_id=credential_id)
