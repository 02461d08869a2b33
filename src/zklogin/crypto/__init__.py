"""Cryptographic primitives for zklogin.

- Domain hashing and canonical JSON serialization
- HKDF-SHA256 key derivation onto secp256k1 with EVM-style addresses
- Wallet objects with stub signing
"""

from zklogin.crypto.hashing import (
    canonical_json,
    keccak256,
    random_hex,
    sha256_hex,
)
from zklogin.crypto.key_derivation import (
    SECP256K1_ORDER,
    DerivedKey,
    address_from_private_key,
    derive_wallet_key,
    normalize_scalar,
)
from zklogin.crypto.wallet import (
    ZkWallet,
    create_wallet_from_private_key,
)

__all__ = [
    # Hashing
    "canonical_json",
    "keccak256",
    "random_hex",
    "sha256_hex",
    # Key derivation
    "SECP256K1_ORDER",
    "DerivedKey",
    "address_from_private_key",
    "derive_wallet_key",
    "normalize_scalar",
    # Wallet
    "ZkWallet",
    "create_wallet_from_private_key",
]
