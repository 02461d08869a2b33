"""Public entry points for zklogin.

Module-level functions run on the process-wide pipeline configured by
:func:`init_zklogin`; each raises :class:`ZkLoginNotInitializedError` when
called before initialization.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..commitments.engine import Commitment
from ..identity.models import IdentityProof
from ..zk import ZkProof
from .service import RegisterWalletResult, SignerResult, ZkLoginResult, ZkLoginService
from .state import get_service, get_zklogin_config, init_zklogin, is_initialized, reset_state


def register_wallet(
    identities: Sequence[IdentityProof],
    threshold: int,
    expose_private_key: bool = False,
) -> RegisterWalletResult:
    """Register a wallet on the process-wide pipeline. See :meth:`ZkLoginService.register_wallet`."""
    return get_service().register_wallet(identities, threshold, expose_private_key)


def zk_login(
    identities: Sequence[IdentityProof],
    commitments: Sequence[Commitment],
    salt: str,
    threshold: int,
    expose_private_key: bool = False,
) -> ZkLoginResult:
    """Recover a wallet on the process-wide pipeline. See :meth:`ZkLoginService.zk_login`."""
    return get_service().zk_login(identities, commitments, salt, threshold, expose_private_key)


def create_signer_from_proof(
    proof: ZkProof,
    commitments: Sequence[Commitment],
    expose_private_key: bool = False,
) -> SignerResult:
    """Rebuild a wallet from a prior proof. See :meth:`ZkLoginService.create_signer_from_proof`."""
    return get_service().create_signer_from_proof(proof, commitments, expose_private_key)


__all__ = [
    "RegisterWalletResult",
    "SignerResult",
    "ZkLoginResult",
    "ZkLoginService",
    "create_signer_from_proof",
    "get_service",
    "get_zklogin_config",
    "init_zklogin",
    "is_initialized",
    "register_wallet",
    "reset_state",
    "zk_login",
]
