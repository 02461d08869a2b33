"""Salted hash commitments over identity claims.

    C_i = SHA256(provider ":" stable_id ":" salt)

A commitment reveals nothing about ``stable_id`` without the salt. The salt is
32 CSPRNG bytes generated once per registration and stored next to the
commitments by the surrounding application.
"""

from __future__ import annotations

import hmac
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from ..core.exceptions import ValidationException
from ..crypto.hashing import random_hex, sha256_hex
from ..identity.models import IdentityClaim

SALT_BYTES = 32


@dataclass(frozen=True)
class Commitment:
    """A claim bound to its salted commitment hash."""

    claim: IdentityClaim
    commitment: str

    def to_dict(self) -> dict[str, Any]:
        return {"claim": self.claim.to_dict(), "commitment": self.commitment}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Commitment:
        if not isinstance(data, dict) or not isinstance(data.get("commitment"), str):
            raise ValidationException("Malformed commitment", field="commitment")
        return cls(claim=IdentityClaim.from_dict(data.get("claim") or {}), commitment=data["commitment"])


def compute_commitment(claim: IdentityClaim, salt: str) -> str:
    """Commitment hash for ``claim`` under ``salt``. Pure and deterministic."""
    return sha256_hex(f"{claim.provider}:{claim.stable_id}:{salt}")


def generate_commitments(claims: Iterable[IdentityClaim], salt: str) -> list[Commitment]:
    """Commit to every claim, preserving input order."""
    return [Commitment(claim=claim, commitment=compute_commitment(claim, salt)) for claim in claims]


def create_random_salt() -> str:
    """Fresh 32-byte salt from the OS CSPRNG, hex-encoded (64 chars)."""
    return random_hex(SALT_BYTES)


def validate_commitment(claim: IdentityClaim, salt: str, expected_commitment: str) -> bool:
    """Recompute the commitment for ``claim`` and compare in constant time."""
    actual = compute_commitment(claim, salt)
    return hmac.compare_digest(actual.encode(), expected_commitment.encode())


def find_matching_commitment(
    claim: IdentityClaim, salt: str, commitments: Sequence[Commitment]
) -> Commitment | None:
    """Return the stored commitment that ``claim`` opens, if any."""
    for stored in commitments:
        if validate_commitment(claim, salt, stored.commitment):
            return stored
    return None
