"""Tests for zklogin.storage.records."""

from __future__ import annotations

import json
import stat

import pytest

from zklogin.api import ZkLoginService
from zklogin.core.exceptions import RecordNotFoundError, ValidationException
from zklogin.storage import (
    InMemoryWalletRecordStore,
    JsonFileWalletRecordStore,
    StoredWalletRecord,
    require_record,
)


@pytest.fixture
def record(mock_config, scenario_identities) -> StoredWalletRecord:
    result = ZkLoginService(mock_config).register_wallet(scenario_identities, threshold=2)
    return StoredWalletRecord.from_registration(result, threshold=2)


class TestStoredWalletRecord:
    """Tests for the record model."""

    def test_from_registration(self, record):
        assert record.threshold == 2
        assert len(record.commitments) == 3
        assert record.private_key is None
        assert record.timestamp > 0

    def test_to_dict_camel_case(self, record):
        data = record.to_dict()
        assert set(data) == {"address", "threshold", "salt", "commitments", "timestamp"}
        assert data["commitments"][0]["claim"]["provider"] == "google"

    def test_from_dict(self, record):
        assert StoredWalletRecord.from_dict(record.to_dict()) == record

    def test_private_key_round_trip(self, record):
        record.private_key = "11" * 32
        data = record.to_dict()
        assert data["privateKey"] == "11" * 32
        assert StoredWalletRecord.from_dict(data).private_key == "11" * 32

    def test_salt_hidden_from_repr(self, record):
        assert record.salt not in repr(record)

    @pytest.mark.parametrize("data", [{}, {"address": "0x", "threshold": "two", "salt": "s"}])
    def test_malformed(self, data):
        with pytest.raises(ValidationException):
            StoredWalletRecord.from_dict(data)


class TestInMemoryStore:
    """Tests for InMemoryWalletRecordStore."""

    def test_save_load(self, record):
        store = InMemoryWalletRecordStore()
        store.save("demo", record)
        assert store.load("demo") is record
        assert store.load("live") is None
        assert store.namespaces() == ["demo"]

    def test_delete(self, record):
        store = InMemoryWalletRecordStore()
        store.save("demo", record)
        assert store.delete("demo") is True
        assert store.delete("demo") is False

    def test_require_record(self, record):
        store = InMemoryWalletRecordStore()
        with pytest.raises(RecordNotFoundError) as exc_info:
            require_record(store, "live")
        assert exc_info.value.namespace == "live"
        store.save("live", record)
        assert require_record(store, "live") is record


class TestJsonFileStore:
    """Tests for JsonFileWalletRecordStore."""

    def test_persists_across_instances(self, tmp_path, record):
        path = tmp_path / "wallets.json"
        JsonFileWalletRecordStore(path).save("demo", record)

        loaded = JsonFileWalletRecordStore(path).load("demo")
        assert loaded == record

    def test_file_layout(self, tmp_path, record):
        path = tmp_path / "wallets.json"
        JsonFileWalletRecordStore(path).save("live", record)
        data = json.loads(path.read_text())
        assert data["wallets"]["live"]["address"] == record.address

    def test_owner_only_permissions(self, tmp_path, record):
        path = tmp_path / "nested" / "wallets.json"
        JsonFileWalletRecordStore(path).save("demo", record)
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_namespaces_isolated(self, tmp_path, record):
        store = JsonFileWalletRecordStore(tmp_path / "wallets.json")
        store.save("demo", record)
        assert store.load("live") is None
        assert store.namespaces() == ["demo"]

    def test_delete_persists(self, tmp_path, record):
        path = tmp_path / "wallets.json"
        store = JsonFileWalletRecordStore(path)
        store.save("demo", record)
        assert store.delete("demo") is True
        assert store.delete("demo") is False
        assert JsonFileWalletRecordStore(path).load("demo") is None

    def test_missing_file(self, tmp_path):
        store = JsonFileWalletRecordStore(tmp_path / "absent.json")
        assert store.namespaces() == []

    def test_corrupt_file_refused(self, tmp_path, caplog):
        path = tmp_path / "wallets.json"
        path.write_text("{not json")
        with pytest.raises(ValidationException, match="refusing to overwrite"):
            JsonFileWalletRecordStore(path)
        assert "Failed to load wallet records" in caplog.text
        assert path.read_text() == "{not json"

    @pytest.mark.parametrize("content", ["", "[]", '{"wallets": []}', '{"wallets": {"demo": "x"}}'])
    def test_malformed_file_refused(self, tmp_path, content):
        path = tmp_path / "wallets.json"
        path.write_text(content)
        with pytest.raises(ValidationException):
            JsonFileWalletRecordStore(path)

    def test_truncated_file_keeps_other_namespaces(self, tmp_path, record):
        """A damaged file is never replaced by one holding only the new record."""
        path = tmp_path / "wallets.json"
        JsonFileWalletRecordStore(path).save("live", record)
        original = path.read_text()
        path.write_text(original[: len(original) // 2])

        with pytest.raises(ValidationException):
            JsonFileWalletRecordStore(path).save("demo", record)
        assert path.read_text() == original[: len(original) // 2]

    def test_no_temp_files_left(self, tmp_path, record):
        store = JsonFileWalletRecordStore(tmp_path / "wallets.json")
        store.save("demo", record)
        store.save("live", record)
        store.delete("demo")
        assert [p.name for p in tmp_path.iterdir()] == ["wallets.json"]

    def test_failed_write_keeps_previous_file(self, tmp_path, record, monkeypatch):
        path = tmp_path / "wallets.json"
        store = JsonFileWalletRecordStore(path)
        store.save("live", record)
        before = path.read_text()

        def fail_dump(*args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr("zklogin.storage.records.json.dump", fail_dump)
        with pytest.raises(OSError, match="disk full"):
            store.save("demo", record)
        assert path.read_text() == before
        assert [p.name for p in tmp_path.iterdir()] == ["wallets.json"]

    def test_replaced_file_owner_only(self, tmp_path, record):
        path = tmp_path / "wallets.json"
        path.write_text('{"wallets": {}}')
        path.chmod(0o644)
        JsonFileWalletRecordStore(path).save("demo", record)
        assert stat.S_IMODE(path.stat().st_mode) == 0o600
