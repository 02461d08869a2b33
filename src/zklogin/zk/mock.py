"""Mock proving backend.

SECURITY WARNING:
This backend hashes the witness into the "proof"; it is NOT zero-knowledge and
NOT sound. It only preserves the public-input / public-output contract of a
real prover so the rest of the pipeline can be exercised end to end:

    proof          = SHA256(json({witness, publicInputs, domain: PROOF_DOMAIN}))
    zk_output      = SHA256(json({publicInputs, domain: KEY_DERIVATION_DOMAIN}))
    public_signals = [SHA256(json(commitments)), str(threshold)]
"""

from __future__ import annotations

import logging

from ..core.exceptions import ProofGenerationError, ProofVerificationError
from ..crypto.hashing import canonical_json, sha256_hex
from .backend import ProofResult, PublicInputs, Witness, ZKBackend, ZkProof, register_backend

logger = logging.getLogger(__name__)

PROOF_DOMAIN = "zklogin-mock-proof-v1"
KEY_DERIVATION_DOMAIN = "zklogin-key-derivation-v1"


def key_derivation_seed(public_inputs: PublicInputs) -> str:
    """Key-derivation seed for ``public_inputs``; independent of any witness."""
    return sha256_hex(canonical_json({"publicInputs": public_inputs.to_dict(), "domain": KEY_DERIVATION_DOMAIN}))


def expected_public_signals(public_inputs: PublicInputs) -> tuple[str, str]:
    commitments_hash = sha256_hex(canonical_json(list(public_inputs.commitments)))
    return commitments_hash, str(public_inputs.threshold)


class MockZKBackend(ZKBackend):
    """Hash-based stand-in for a real prover/verifier pair."""

    name = "mock"

    def generate_proof(self, witness: Witness, public_inputs: PublicInputs) -> ProofResult:
        try:
            proof_hash = sha256_hex(
                canonical_json(
                    {
                        "witness": witness.to_dict(),
                        "publicInputs": public_inputs.to_dict(),
                        "domain": PROOF_DOMAIN,
                    }
                )
            )
            zk_output = self.key_derivation_seed(public_inputs)
            public_signals = expected_public_signals(public_inputs)
        except (TypeError, ValueError) as e:
            raise ProofGenerationError(f"Failed to generate mock proof: {e}") from e

        logger.debug(
            f"Generated mock proof over {len(public_inputs.commitments)} commitments "
            f"(threshold {public_inputs.threshold})"
        )
        return ProofResult(proof=ZkProof(proof=proof_hash, public_signals=public_signals), zk_output=zk_output)

    def verify_proof(self, proof: ZkProof, public_inputs: PublicInputs) -> bool:
        # A real verifier checks the proof itself; the mock can only check
        # that the public signals match the public inputs.
        try:
            expected = expected_public_signals(public_inputs)
        except (TypeError, ValueError) as e:
            raise ProofVerificationError(f"Failed to verify mock proof: {e}") from e

        if len(proof.public_signals) != 2:
            return False
        return tuple(proof.public_signals) == expected

    def key_derivation_seed(self, public_inputs: PublicInputs) -> str:
        return key_derivation_seed(public_inputs)


register_backend(MockZKBackend.name, lambda config: MockZKBackend())
