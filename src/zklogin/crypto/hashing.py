"""Hashing and canonical serialization helpers.

All domain hashes in zklogin are SHA-256 over UTF-8 text and are carried around
as lower-case hex strings. Structured inputs are serialized with
:func:`canonical_json`: compact separators, insertion order and raw UTF-8, which
matches ``JSON.stringify`` byte for byte so derived addresses stay compatible
with wallets registered by the browser client.
"""

from __future__ import annotations

import hashlib
import json
import secrets
from typing import Any

from Crypto.Hash import keccak


def canonical_json(value: Any) -> str:
    """Serialize ``value`` to compact JSON, keeping key insertion order."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def sha256_hex(text: str) -> str:
    """SHA-256 of the UTF-8 encoding of ``text``, hex-encoded."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def keccak256(data: bytes) -> bytes:
    """Keccak-256 (the pre-standard SHA-3 padding used by Ethereum)."""
    return keccak.new(digest_bits=256, data=data).digest()


def random_hex(num_bytes: int) -> str:
    """Hex-encode ``num_bytes`` bytes from the OS CSPRNG."""
    return secrets.token_hex(num_bytes)
