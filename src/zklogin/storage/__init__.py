"""Wallet record persistence for applications built on zklogin."""

from zklogin.storage.records import (
    InMemoryWalletRecordStore,
    JsonFileWalletRecordStore,
    StoredWalletRecord,
    WalletRecordStore,
    require_record,
)

__all__ = [
    "InMemoryWalletRecordStore",
    "JsonFileWalletRecordStore",
    "StoredWalletRecord",
    "WalletRecordStore",
    "require_record",
]
