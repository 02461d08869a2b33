# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""zklogin - seedless wallets from a threshold of identity proofs.

A wallet (secp256k1 key + EVM-style address) is derived from K-of-N
heterogeneous identity proofs: Google ID tokens, GitHub/Twitter access tokens
and WebAuthn passkey assertions. No seed phrase and no raw identity secret is
ever persisted.

Pipeline:
  identity proofs
    -> claims       (provider-scoped stable IDs)
    -> commitments  (SHA-256 under a per-registration salt)
    -> proof        (swappable prover; public inputs = commitments + threshold)
    -> key          (HKDF-SHA256 onto secp256k1, keccak address)

Entry points: ``init_zklogin``, ``register_wallet``, ``zk_login``,
``create_signer_from_proof``. CLI: ``zklogin``.
"""

__version__ = "0.1.0"

from .api import (
    RegisterWalletResult,
    SignerResult,
    ZkLoginResult,
    ZkLoginService,
    create_signer_from_proof,
    init_zklogin,
    is_initialized,
    register_wallet,
    zk_login,
)
from .commitments import Commitment, compute_commitment, create_random_salt, generate_commitments, validate_commitment
from .core.config import ZkLoginConfig
from .core.exceptions import (
    InsufficientIdentitiesError,
    InvalidIdentityTokenError,
    ProofGenerationError,
    ProofVerificationError,
    ZkLoginException,
    ZkLoginNotInitializedError,
)
from .identity import (
    GitHubIdentity,
    GoogleIdentity,
    IdentityClaim,
    PasskeyAssertion,
    PasskeyIdentity,
    TwitterIdentity,
    extract_identity_claim,
)

__all__ = [
    # API
    "RegisterWalletResult",
    "SignerResult",
    "ZkLoginConfig",
    "ZkLoginResult",
    "ZkLoginService",
    "create_signer_from_proof",
    "init_zklogin",
    "is_initialized",
    "register_wallet",
    "zk_login",
    # Identities
    "GitHubIdentity",
    "GoogleIdentity",
    "IdentityClaim",
    "PasskeyAssertion",
    "PasskeyIdentity",
    "TwitterIdentity",
    "extract_identity_claim",
    # Commitments
    "Commitment",
    "compute_commitment",
    "create_random_salt",
    "generate_commitments",
    "validate_commitment",
    # Errors
    "InsufficientIdentitiesError",
    "InvalidIdentityTokenError",
    "ProofGenerationError",
    "ProofVerificationError",
    "ZkLoginException",
    "ZkLoginNotInitializedError",
]
