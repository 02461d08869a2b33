# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""ZkLoginService - K-of-N wallet registration and recovery.

Composes the identity, commitment, proof and key-derivation layers:

    identities -> claims -> commitments(salt) -> proof -> zk_output -> key -> wallet

Typical workflow::

    service = ZkLoginService(ZkLoginConfig(proving_system="mock"))

    # Register with three identities, any two of which recover the wallet
    registration = service.register_wallet([google, github, passkey], threshold=2)

    # Later: recover with a subset
    login = service.zk_login(
        [google, passkey],
        registration.commitments,
        registration.salt,
        threshold=2,
    )
    assert login.wallet.address == registration.address

Every operation is a single synchronous pass over immutable inputs; the only
side effect is drawing the registration salt from the OS CSPRNG. A service
instance holds no mutable state and is safe to share between threads.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from ..commitments.engine import (
    Commitment,
    create_random_salt,
    find_matching_commitment,
    generate_commitments,
)
from ..core.config import ZkLoginConfig
from ..core.exceptions import InsufficientIdentitiesError, ProofVerificationError
from ..core.logging import correlation_context
from ..crypto.key_derivation import derive_wallet_key
from ..crypto.wallet import ZkWallet, create_wallet_from_private_key
from ..identity.adapters import extract_identity_claims
from ..identity.models import IdentityProof
from ..zk import PublicInputs, Witness, ZKBackend, ZkProof, create_backend

logger = logging.getLogger(__name__)


# =============================================================================
# Results
# =============================================================================


@dataclass(frozen=True)
class RegisterWalletResult:
    """Outcome of a registration.

    ``commitments`` and ``salt`` must be persisted by the caller; they are
    required (in this exact order) for every later login.
    """

    commitments: list[Commitment]
    salt: str = field(repr=False)
    address: str
    private_key: str | None = field(default=None, repr=False)

    @property
    def commitment_hashes(self) -> list[str]:
        return [c.commitment for c in self.commitments]

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "commitments": [c.to_dict() for c in self.commitments],
            "salt": self.salt,
            "address": self.address,
        }
        if self.private_key is not None:
            data["privateKey"] = self.private_key
        return data


@dataclass(frozen=True)
class ZkLoginResult:
    """Outcome of a successful login."""

    proof: ZkProof
    public_signals: tuple[str, ...]
    wallet: ZkWallet
    private_key: str | None = field(default=None, repr=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "proof": self.proof.to_dict(),
            "publicSignals": list(self.public_signals),
            "address": self.wallet.address,
        }
        if self.private_key is not None:
            data["privateKey"] = self.private_key
        return data


@dataclass(frozen=True)
class SignerResult:
    """A wallet rebuilt from a prior proof."""

    wallet: ZkWallet
    private_key: str | None = field(default=None, repr=False)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"address": self.wallet.address}
        if self.private_key is not None:
            data["privateKey"] = self.private_key
        return data


# =============================================================================
# Service
# =============================================================================


class ZkLoginService:
    """Threshold identity-to-wallet pipeline bound to one proving backend."""

    def __init__(self, config: ZkLoginConfig | None = None, backend: ZKBackend | None = None) -> None:
        self.config = config or ZkLoginConfig()
        self.backend = backend or create_backend(self.config)

    # -- registration -------------------------------------------------------

    def register_wallet(
        self,
        identities: Sequence[IdentityProof],
        threshold: int,
        expose_private_key: bool = False,
    ) -> RegisterWalletResult:
        """Commit to ``identities`` under a fresh salt and derive the wallet.

        Args:
            identities: Identity proofs to register (N).
            threshold: Number of identities later required to log in (K).
            expose_private_key: Include the private key in the result.

        Raises:
            InvalidIdentityTokenError: If any identity is malformed.
            ValidationException: If ``threshold`` < 1.
            ProofGenerationError: If the prover fails.
        """
        with correlation_context():
            claims = extract_identity_claims(identities)
            if threshold > len(claims):
                logger.warning(
                    f"Threshold {threshold} exceeds the {len(claims)} registered identities; "
                    "this wallet cannot be recovered"
                )

            salt = create_random_salt()
            commitments = generate_commitments(claims, salt)

            public_inputs = PublicInputs(commitments=tuple(c.commitment for c in commitments), threshold=threshold)
            witness = Witness(identity_claims=tuple(claims), salt=salt)

            result = self.backend.generate_proof(witness, public_inputs)
            key = derive_wallet_key(result.zk_output, public_inputs.commitments)

            logger.info(
                f"Registered wallet {key.address} with {len(claims)} identities "
                f"(threshold {threshold}, providers {[c.provider for c in claims]})",
                extra={
                    "extra_data": {
                        "address": key.address,
                        "threshold": threshold,
                        "providers": [c.provider for c in claims],
                    }
                },
            )
            return RegisterWalletResult(
                commitments=commitments,
                salt=salt,
                address=key.address,
                private_key=key.private_key if expose_private_key else None,
            )

    # -- login --------------------------------------------------------------

    def zk_login(
        self,
        identities: Sequence[IdentityProof],
        commitments: Sequence[Commitment],
        salt: str,
        threshold: int,
        expose_private_key: bool = False,
    ) -> ZkLoginResult:
        """Recover the wallet from a threshold subset of registered identities.

        Every presented identity must open one of the stored commitments; a
        single unmatched identity rejects the whole login even if the rest
        would satisfy the threshold. The threshold counts distinct commitments
        opened, so repeating one identity does not count twice.

        Args:
            identities: Identity proofs presented now (>= threshold).
            commitments: Stored commitments, in registration order.
            salt: Stored registration salt.
            threshold: Stored threshold.
            expose_private_key: Include the private key in the result.

        Raises:
            InvalidIdentityTokenError: If any identity is malformed.
            InsufficientIdentitiesError: Too few identities, or one does not match.
            ProofVerificationError: If the proof does not verify.
        """
        with correlation_context():
            claims = extract_identity_claims(identities)

            if len(claims) < threshold:
                raise InsufficientIdentitiesError(provided=len(claims), required=threshold)

            matched: set[str] = set()
            for claim in claims:
                stored = find_matching_commitment(claim, salt, commitments)
                if stored is None:
                    logger.info(f"Rejected login: {claim.provider} identity matches no stored commitment")
                    raise InsufficientIdentitiesError(provided=0, required=threshold)
                matched.add(stored.commitment)

            # The same identity presented twice opens only one commitment
            if len(matched) < threshold:
                raise InsufficientIdentitiesError(provided=len(matched), required=threshold)

            # Stored order, not the order identities were presented in
            public_inputs = PublicInputs(commitments=tuple(c.commitment for c in commitments), threshold=threshold)
            witness = Witness(identity_claims=tuple(claims), salt=salt)

            result = self.backend.generate_proof(witness, public_inputs)
            if not self.backend.verify_proof(result.proof, public_inputs):
                raise ProofVerificationError(f"{self.backend.name} proof verification failed")

            key = derive_wallet_key(result.zk_output, public_inputs.commitments)
            wallet = create_wallet_from_private_key(key.private_key)

            logger.info(
                f"Recovered wallet {wallet.address} with {len(matched)} of {len(commitments)} identities",
                extra={"extra_data": {"address": wallet.address, "matched": len(matched), "threshold": threshold}},
            )
            return ZkLoginResult(
                proof=result.proof,
                public_signals=result.proof.public_signals,
                wallet=wallet,
                private_key=key.private_key if expose_private_key else None,
            )

    # -- signer reconstruction ----------------------------------------------

    def create_signer_from_proof(
        self,
        proof: ZkProof,
        commitments: Sequence[Commitment],
        expose_private_key: bool = False,
    ) -> SignerResult:
        """Rebuild the wallet from a previously issued proof and its commitments.

        The threshold is read from the proof's public signals; the proof must
        verify against ``commitments`` at that threshold.

        Note:
            The browser client rebuilt signers at a fixed threshold of 1 and
            never checked the proof. For any wallet registered with K > 1 this
            method returns the registered address, which differs from what
            that client produced.

        Raises:
            ProofVerificationError: If the proof does not belong to ``commitments``.
        """
        if len(proof.public_signals) != 2:
            raise ProofVerificationError("expected 2 public signals")
        try:
            threshold = int(proof.public_signals[1])
        except ValueError as e:
            raise ProofVerificationError("malformed threshold signal") from e
        if threshold < 1:
            raise ProofVerificationError("malformed threshold signal")

        public_inputs = PublicInputs(commitments=tuple(c.commitment for c in commitments), threshold=threshold)
        if not self.backend.verify_proof(proof, public_inputs):
            raise ProofVerificationError("proof does not match the supplied commitments")

        key = derive_wallet_key(self.backend.key_derivation_seed(public_inputs), public_inputs.commitments)
        wallet = create_wallet_from_private_key(key.private_key)
        return SignerResult(wallet=wallet, private_key=key.private_key if expose_private_key else None)
