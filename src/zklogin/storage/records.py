"""Stored wallet records.

The pipeline never reads or writes storage itself; applications persist what
registration returns and feed it back into login. A record is kept per
namespace (e.g. ``"demo"`` and ``"live"``) so demo wallets never mix with real
ones.

Storage is pluggable: the in-memory backend suits tests, the JSON file
backend backs the CLI.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from ..api.service import RegisterWalletResult
from ..commitments.engine import Commitment
from ..core.exceptions import RecordNotFoundError, ValidationException

logger = logging.getLogger(__name__)


@dataclass
class StoredWalletRecord:
    """Everything needed to log back into a registered wallet.

    Attributes:
        address: Registered wallet address.
        threshold: Identities required to log in.
        salt: Registration salt (hex).
        commitments: Commitments in registration order.
        private_key: Only present when the user chose to expose it.
        timestamp: UNIX time of registration.
    """

    address: str
    threshold: int
    salt: str = field(repr=False)
    commitments: list[Commitment] = field(default_factory=list)
    private_key: str | None = field(default=None, repr=False)
    timestamp: float = field(default_factory=time.time)

    @classmethod
    def from_registration(cls, result: RegisterWalletResult, threshold: int) -> StoredWalletRecord:
        return cls(
            address=result.address,
            threshold=threshold,
            salt=result.salt,
            commitments=list(result.commitments),
            private_key=result.private_key,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "address": self.address,
            "threshold": self.threshold,
            "salt": self.salt,
            "commitments": [c.to_dict() for c in self.commitments],
            "timestamp": self.timestamp,
        }
        if self.private_key is not None:
            data["privateKey"] = self.private_key
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StoredWalletRecord:
        try:
            return cls(
                address=data["address"],
                threshold=int(data["threshold"]),
                salt=data["salt"],
                commitments=[Commitment.from_dict(c) for c in data.get("commitments", [])],
                private_key=data.get("privateKey"),
                timestamp=data.get("timestamp", time.time()),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationException(f"Malformed wallet record: {e}", field="record") from e


# ---------------------------------------------------------------------------
# Storage protocol
# ---------------------------------------------------------------------------


class WalletRecordStore(Protocol):
    """Abstract storage backend for wallet records, one per namespace."""

    def save(self, namespace: str, record: StoredWalletRecord) -> None: ...
    def load(self, namespace: str) -> StoredWalletRecord | None: ...
    def delete(self, namespace: str) -> bool: ...
    def namespaces(self) -> list[str]: ...


def require_record(store: WalletRecordStore, namespace: str) -> StoredWalletRecord:
    """Load a record or raise :class:`RecordNotFoundError`."""
    record = store.load(namespace)
    if record is None:
        raise RecordNotFoundError(namespace)
    return record


# ---------------------------------------------------------------------------
# In-memory store (default / tests)
# ---------------------------------------------------------------------------


class InMemoryWalletRecordStore:
    """Simple in-memory implementation of :class:`WalletRecordStore`."""

    def __init__(self) -> None:
        self._records: dict[str, StoredWalletRecord] = {}

    def save(self, namespace: str, record: StoredWalletRecord) -> None:
        self._records[namespace] = record

    def load(self, namespace: str) -> StoredWalletRecord | None:
        return self._records.get(namespace)

    def delete(self, namespace: str) -> bool:
        return self._records.pop(namespace, None) is not None

    def namespaces(self) -> list[str]:
        return sorted(self._records)


# ---------------------------------------------------------------------------
# JSON file store
# ---------------------------------------------------------------------------


class JsonFileWalletRecordStore:
    """File-based record storage: ``{namespace: record}`` in one JSON file.

    The file holds salts (and optionally private keys). It is only ever
    replaced whole by an 0600 temp file, and a file that cannot be parsed is
    never overwritten: a lost salt makes its wallet unrecoverable.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._records: dict[str, StoredWalletRecord] = {}
        self._load()

    def _load(self) -> None:
        """Read the record file.

        Raises:
            ValidationException: If the file exists but cannot be read or parsed.
        """
        if not self.path.exists():
            self._records = {}
            return

        try:
            with open(self.path) as f:
                data = json.load(f)
            self._records = {ns: StoredWalletRecord.from_dict(r) for ns, r in data.get("wallets", {}).items()}
        except (OSError, json.JSONDecodeError, AttributeError, ValidationException) as e:
            logger.error(f"Failed to load wallet records from {self.path}: {e}")
            raise ValidationException(
                f"Wallet record file {self.path} is unreadable; refusing to overwrite it",
                field="store_path",
                value=self.path,
            ) from e
        logger.debug(f"Loaded {len(self._records)} wallet records from {self.path}")

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

        data = {"wallets": {ns: r.to_dict() for ns, r in self._records.items()}}
        # mkstemp creates the file 0600 before anything is written to it
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved {len(self._records)} wallet records to {self.path}")

    def save(self, namespace: str, record: StoredWalletRecord) -> None:
        self._records[namespace] = record
        self._save()

    def load(self, namespace: str) -> StoredWalletRecord | None:
        return self._records.get(namespace)

    def delete(self, namespace: str) -> bool:
        if self._records.pop(namespace, None) is None:
            return False
        self._save()
        return True

    def namespaces(self) -> list[str]:
        return sorted(self._records)
