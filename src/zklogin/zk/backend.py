"""Zero-knowledge proof abstraction layer.

Defines the prover/verifier contract the zklogin pipeline depends on:

- The prover sees the private :class:`Witness` (claims + salt) and the
  :class:`PublicInputs` (ordered commitments + threshold).
- The verifier sees only the :class:`ZkProof` and the public inputs; it never
  receives the witness.
- ``ProofResult.zk_output`` (the key-derivation seed) MUST be a function of the
  public inputs alone. That is what makes address recovery independent of
  which identity subset was presented.

Implementations:
- MockZKBackend: hash-based placeholder (NOT zero-knowledge)
- Future: a PLONK backend registered under ``"plonk"``

Backends are looked up by proving-system name through a small registry so a
real prover can be plugged in without touching claim extraction, commitments
or key derivation::

    register_backend("plonk", lambda config: PlonkBackend(config.wasm_url, config.zkey_url))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ..core.config import ZkLoginConfig
from ..core.exceptions import ConfigException, ValidationException
from ..identity.models import IdentityClaim

# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class PublicInputs:
    """Public inputs visible to both prover and verifier.

    Attributes:
        commitments: Commitment hashes in registration order. The order is part
            of the derivation input and must never be re-sorted.
        threshold: Minimum number of matching identities (K of K-of-N).
    """

    commitments: tuple[str, ...]
    threshold: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "commitments", tuple(self.commitments))
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int) or self.threshold < 1:
            raise ValidationException("threshold must be an integer >= 1", field="threshold", value=self.threshold)

    def to_dict(self) -> dict[str, Any]:
        return {"commitments": list(self.commitments), "threshold": self.threshold}


@dataclass(frozen=True)
class Witness:
    """Private prover input. Exists only for the duration of one proof call."""

    identity_claims: tuple[IdentityClaim, ...]
    salt: str = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "identity_claims", tuple(self.identity_claims))

    def to_dict(self) -> dict[str, Any]:
        return {
            "identityClaims": [claim.to_dict() for claim in self.identity_claims],
            "salt": self.salt,
        }


@dataclass(frozen=True)
class ZkProof:
    """A proof plus the public signals it commits to."""

    proof: str
    public_signals: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "public_signals", tuple(self.public_signals))

    def to_dict(self) -> dict[str, Any]:
        return {"proof": self.proof, "publicSignals": list(self.public_signals)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ZkProof:
        try:
            return cls(proof=str(data["proof"]), public_signals=tuple(str(s) for s in data["publicSignals"]))
        except (KeyError, TypeError) as e:
            raise ValidationException(f"Malformed proof: {e}", field="proof") from e


@dataclass(frozen=True)
class ProofResult:
    """Prover output.

    Attributes:
        proof: The proof and its public signals.
        zk_output: Hex key-derivation seed, derived from public inputs only.
    """

    proof: ZkProof
    zk_output: str = field(repr=False)


# =============================================================================
# Abstract Interfaces
# =============================================================================


class ZKProver(ABC):
    """Produces proofs from a private witness and public inputs."""

    @abstractmethod
    def generate_proof(self, witness: Witness, public_inputs: PublicInputs) -> ProofResult:
        """Generate a proof.

        Raises:
            ProofGenerationError: If proving fails.
        """


class ZKVerifier(ABC):
    """Checks proofs against public inputs without the witness."""

    @abstractmethod
    def verify_proof(self, proof: ZkProof, public_inputs: PublicInputs) -> bool:
        """Return True if ``proof`` is valid for ``public_inputs``.

        Raises:
            ProofVerificationError: If verification cannot be carried out.
        """


class ZKBackend(ZKProver, ZKVerifier):
    """A prover/verifier pair for one proving system."""

    name: str = "abstract"

    @abstractmethod
    def key_derivation_seed(self, public_inputs: PublicInputs) -> str:
        """Recompute ``ProofResult.zk_output`` from public inputs alone.

        Used to rebuild a signer from a previously issued proof.
        """


# =============================================================================
# Backend Registry
# =============================================================================

BackendFactory = Callable[[ZkLoginConfig], ZKBackend]

_BACKENDS: dict[str, BackendFactory] = {}


def register_backend(name: str, factory: BackendFactory) -> None:
    """Register (or replace) the backend factory for a proving system."""
    _BACKENDS[name] = factory


def unregister_backend(name: str) -> None:
    _BACKENDS.pop(name, None)


def available_backends() -> list[str]:
    return sorted(_BACKENDS)


def create_backend(config: ZkLoginConfig) -> ZKBackend:
    """Instantiate the backend for ``config.proving_system``.

    Raises:
        ConfigException: If no backend is registered for the proving system.
    """
    factory = _BACKENDS.get(config.proving_system)
    if factory is None:
        raise ConfigException(
            f"No proving backend registered for {config.proving_system!r}; "
            f"available: {', '.join(available_backends()) or 'none'}"
        )
    return factory(config)
