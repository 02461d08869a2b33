"""Commitment engine: salted SHA-256 commitments over identity claims."""

from zklogin.commitments.engine import (
    SALT_BYTES,
    Commitment,
    compute_commitment,
    create_random_salt,
    find_matching_commitment,
    generate_commitments,
    validate_commitment,
)

__all__ = [
    "SALT_BYTES",
    "Commitment",
    "compute_commitment",
    "create_random_salt",
    "find_matching_commitment",
    "generate_commitments",
    "validate_commitment",
]
