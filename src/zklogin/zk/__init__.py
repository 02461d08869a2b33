"""Proof engine seam for zklogin.

Importing this package registers the mock backend under ``"mock"``.
"""

from zklogin.zk.backend import (
    ProofResult,
    PublicInputs,
    Witness,
    ZKBackend,
    ZkProof,
    ZKProver,
    ZKVerifier,
    available_backends,
    create_backend,
    register_backend,
    unregister_backend,
)
from zklogin.zk.mock import (
    KEY_DERIVATION_DOMAIN,
    PROOF_DOMAIN,
    MockZKBackend,
    expected_public_signals,
    key_derivation_seed,
)

__all__ = [
    # Types
    "ProofResult",
    "PublicInputs",
    "Witness",
    "ZkProof",
    # Interfaces
    "ZKBackend",
    "ZKProver",
    "ZKVerifier",
    # Registry
    "available_backends",
    "create_backend",
    "register_backend",
    "unregister_backend",
    # Mock
    "KEY_DERIVATION_DOMAIN",
    "PROOF_DOMAIN",
    "MockZKBackend",
    "expected_public_signals",
    "key_derivation_seed",
]
