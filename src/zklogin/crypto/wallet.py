"""Wallet objects built from a derived private key.

SECURITY WARNING:
``sign_message`` and ``sign_transaction`` are deterministic stand-ins
(SHA-256 of the message hash and private key), NOT secp256k1 ECDSA
signatures. Replace them with real EIP-191 / EIP-155 signing before moving
any value.
"""

from __future__ import annotations

import hashlib
from typing import Any

from .hashing import canonical_json, sha256_hex
from .key_derivation import address_from_private_key

EIP191_PREFIX = "\x19Ethereum Signed Message:\n"
MOCK_RECOVERY_BYTE = "1b"


class ZkWallet:
    """A wallet exposing its address and (stub) signing operations."""

    def __init__(self, private_key: str) -> None:
        self._address = address_from_private_key(private_key)
        self._private_key = private_key

    @property
    def address(self) -> str:
        return self._address

    def __repr__(self) -> str:
        return f"ZkWallet(address={self._address!r})"

    async def sign_message(self, message: str) -> str:
        """Return a mock signature over an EIP-191 prefixed message."""
        # Length counted in UTF-16 code units to match browser-issued signatures
        length = len(message.encode("utf-16-le")) // 2
        message_hash = hashlib.sha256(f"{EIP191_PREFIX}{length}{message}".encode()).hexdigest()
        return self._mock_signature(message_hash)

    async def sign_transaction(self, tx: dict[str, Any]) -> str:
        """Return a mock signature over the canonical JSON of ``tx``."""
        tx_hash = sha256_hex(canonical_json(tx))
        return self._mock_signature(tx_hash)

    def _mock_signature(self, digest_hex: str) -> str:
        return sha256_hex(digest_hex + self._private_key) + MOCK_RECOVERY_BYTE


def create_wallet_from_private_key(private_key: str) -> ZkWallet:
    """Build a :class:`ZkWallet` from a 64-hex private key.

    Raises:
        WalletKeyError: If the key is not a valid secp256k1 scalar.
    """
    return ZkWallet(private_key)
