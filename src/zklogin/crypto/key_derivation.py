# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Wallet key derivation from the proof engine's key-derivation seed.

The derivation is a pure function of ``(zk_output, commitments)``. Because the
proof engine computes ``zk_output`` from public inputs only, any identity
subset that satisfies the threshold lands on the same key:

    commitments_hash = SHA256(json(commitments))
    salt             = SHA256(json({"commitmentsHash": commitments_hash}))
    okm              = HKDF-SHA256(ikm=zk_output, salt=salt,
                                   info="veworld-zklogin-derivation-v1", L=32)
    scalar           = int(okm) reduced onto [1, n-1] of secp256k1
    address          = "0x" + keccak256(uncompressed_pubkey[1:])[-20:]

The reduction (``mod n`` with a fallback to 1) is not a bias-free rejection
sampler. It is kept for compatibility with existing wallets and should be
reviewed before any non-demo use.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from ..core.exceptions import WalletKeyError
from .hashing import canonical_json, keccak256, sha256_hex

logger = logging.getLogger(__name__)

SECP256K1_ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
DERIVATION_INFO = b"veworld-zklogin-derivation-v1"
KEY_LENGTH = 32


@dataclass(frozen=True)
class DerivedKey:
    """A derived secp256k1 private key and its EVM-style address.

    Owned by the caller; never cached by the pipeline.
    """

    private_key: str = field(repr=False)
    address: str


def normalize_scalar(scalar: int) -> int:
    """Map an arbitrary 256-bit integer onto a valid non-zero secp256k1 scalar."""
    if scalar == 0 or scalar >= SECP256K1_ORDER:
        scalar %= SECP256K1_ORDER
        if scalar == 0:
            scalar = 1
    return scalar


def parse_private_key(private_key: str) -> int:
    """Parse a 64-character hex private key into a scalar.

    Raises:
        WalletKeyError: If the key is not 32 bytes of hex or is out of range.
    """
    if not isinstance(private_key, str) or len(private_key) != 64:
        raise WalletKeyError("expected 64 hex characters")
    try:
        scalar = int(private_key, 16)
    except ValueError as e:
        raise WalletKeyError("not a hex string") from e
    if not 0 < scalar < SECP256K1_ORDER:
        raise WalletKeyError("scalar outside [1, n-1]")
    return scalar


def public_key_bytes(scalar: int) -> bytes:
    """Uncompressed secp256k1 public key for ``scalar`` without the 0x04 prefix."""
    private_key = ec.derive_private_key(scalar, ec.SECP256K1())
    point = private_key.public_key().public_bytes(Encoding.X962, PublicFormat.UncompressedPoint)
    return point[1:]


def address_from_scalar(scalar: int) -> str:
    return "0x" + keccak256(public_key_bytes(scalar))[-20:].hex()


def address_from_private_key(private_key: str) -> str:
    """EVM-style address for a hex-encoded private key."""
    return address_from_scalar(parse_private_key(private_key))


def derivation_salt(commitments: Sequence[str]) -> bytes:
    """HKDF salt bound to the ordered commitment list."""
    commitments_hash = sha256_hex(canonical_json(list(commitments)))
    return bytes.fromhex(sha256_hex(canonical_json({"commitmentsHash": commitments_hash})))


def derive_wallet_key(zk_output: str, commitments: Sequence[str]) -> DerivedKey:
    """Derive the wallet key from a key-derivation seed and ordered commitments.

    Args:
        zk_output: Hex-encoded key-derivation seed from the proof engine.
        commitments: Commitment hashes in registration order.

    Returns:
        DerivedKey with a 64-hex private key and a 0x-prefixed address.

    Raises:
        WalletKeyError: If ``zk_output`` is not valid hex.
    """
    try:
        ikm = bytes.fromhex(zk_output)
    except (TypeError, ValueError) as e:
        raise WalletKeyError("key derivation seed is not hex") from e

    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=derivation_salt(commitments),
        info=DERIVATION_INFO,
    )
    okm = hkdf.derive(ikm)

    scalar = normalize_scalar(int.from_bytes(okm, "big"))
    address = address_from_scalar(scalar)
    logger.debug(f"Derived wallet address {address} from {len(commitments)} commitments")

    return DerivedKey(private_key=f"{scalar:064x}", address=address)
