"""
Unit tests for JsonAccountStore.

Tests document format, atomic replace and read-back validation.

Usage:
    pytest tests/unit/infrastructure/test_json_account_store.py
"""

import json
import os
import stat

import pytest

from trousseau.domain.exceptions import PersistenceError
from trousseau.domain.services.i_secret_key_codec import ISecretKeyCodec
from trousseau.domain.value_objects.account_keypair import (
    AccountKeypair,
    AccountRecord,
)
from trousseau.infrastructure.persistence.json_account_store import (
    JsonAccountStore,
)


def _record(count: int) -> AccountRecord:
    return AccountRecord.from_accounts(
        [AccountKeypair.generate() for _ in range(count)]
    )


class HexSecretKeyCodec(ISecretKeyCodec):
    """Alternate storage format used to check codec injection."""

    def encode(self, secret_key: bytes) -> str:
        return secret_key.hex()

    def decode(self, value) -> bytes:
        return bytes.fromhex(value)


class TestJsonAccountStore:
    """Unit tests for JsonAccountStore."""

    # ================================================================
    # Document format
    # ================================================================

    def test_save_writes_json_array(self, account_store, accounts_path):
        """Test document is an array of publicKey/secretKey objects."""
        record = _record(3)

        account_store.save(record)

        document = json.loads(accounts_path.read_text(encoding="utf-8"))
        assert isinstance(document, list)
        assert len(document) == 3
        for entry, account in zip(document, record):
            assert set(entry) == {"publicKey", "secretKey"}
            assert entry["publicKey"] == account.public_key
            assert entry["secretKey"] == list(account.secret_key)

    def test_save_empty_record(self, account_store, accounts_path):
        """Test empty record writes an empty JSON array."""
        account_store.save(AccountRecord())

        assert json.loads(accounts_path.read_text()) == []

    def test_document_is_indented(self, account_store, accounts_path):
        """Test file is pretty-printed with two spaces."""
        account_store.save(_record(1))

        text = accounts_path.read_text()
        assert text.startswith("[\n  {\n    \"publicKey\"")

    def test_save_overwrites_previous_content(self, account_store, accounts_path):
        """Test new record replaces the old file entirely."""
        account_store.save(_record(5))
        second = _record(2)

        account_store.save(second)

        document = json.loads(accounts_path.read_text())
        assert [e["publicKey"] for e in document] == second.public_keys()

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permissions")
    def test_file_is_owner_only(self, account_store, accounts_path):
        """Test key file is not readable by group or others."""
        account_store.save(_record(1))

        mode = stat.S_IMODE(accounts_path.stat().st_mode)
        assert mode & 0o077 == 0

    def test_path_expands_home(self, monkeypatch, tmp_path):
        """Test ~ in the path is expanded."""
        monkeypatch.setenv("HOME", str(tmp_path))

        store = JsonAccountStore("~/keys.json")

        assert store.path == tmp_path / "keys.json"

    # ================================================================
    # Read-back
    # ================================================================

    def test_load_round_trip(self, account_store):
        """Test saved record loads back identical."""
        record = _record(4)
        account_store.save(record)

        loaded = account_store.load()

        assert loaded == record

    def test_custom_codec(self, accounts_path):
        """Test injected codec controls the secret key format."""
        store = JsonAccountStore(accounts_path, codec=HexSecretKeyCodec())
        record = _record(2)

        store.save(record)

        document = json.loads(accounts_path.read_text())
        assert document[0]["secretKey"] == record[0].secret_key.hex()
        assert store.load() == record

    def test_load_missing_file(self, tmp_path):
        """Test missing file raises PersistenceError."""
        store = JsonAccountStore(tmp_path / "nope.json")

        with pytest.raises(PersistenceError, match="Failed to read"):
            store.load()

    def test_load_invalid_json(self, account_store, accounts_path):
        """Test non-JSON content raises PersistenceError."""
        accounts_path.write_text("not json")

        with pytest.raises(PersistenceError, match="not valid JSON"):
            account_store.load()

    def test_load_non_array(self, account_store, accounts_path):
        """Test JSON object at top level is rejected."""
        accounts_path.write_text(json.dumps({"publicKey": "x"}))

        with pytest.raises(PersistenceError, match="JSON array"):
            account_store.load()

    def test_load_missing_field(self, account_store, accounts_path):
        """Test entry without secretKey is rejected with its index."""
        account = AccountKeypair.generate()
        accounts_path.write_text(json.dumps([{"publicKey": account.public_key}]))

        with pytest.raises(PersistenceError, match="missing field") as exc_info:
            account_store.load()

        assert exc_info.value.details["index"] == 0

    @pytest.mark.parametrize(
        "secret_key",
        [[1] * 63, [256] + [0] * 63, ["a"] * 64, "00" * 64, [True] * 64],
    )
    def test_load_bad_secret_key(self, account_store, accounts_path, secret_key):
        """Test secret keys of wrong shape are rejected."""
        account = AccountKeypair.generate()
        accounts_path.write_text(
            json.dumps([{"publicKey": account.public_key, "secretKey": secret_key}])
        )

        with pytest.raises(PersistenceError, match="malformed"):
            account_store.load()

    def test_load_mismatched_keys(self, account_store, accounts_path):
        """Test secret key of another account is rejected."""
        first, second = AccountKeypair.generate(), AccountKeypair.generate()
        accounts_path.write_text(
            json.dumps(
                [
                    {
                        "publicKey": first.public_key,
                        "secretKey": list(second.secret_key),
                    }
                ]
            )
        )

        with pytest.raises(PersistenceError, match="does not belong"):
            account_store.load()

    def test_load_padded_public_key(self, account_store, accounts_path):
        """Test publicKey with trailing whitespace is rejected."""
        account = AccountKeypair.generate()
        accounts_path.write_text(
            json.dumps(
                [
                    {
                        "publicKey": account.public_key + "\n",
                        "secretKey": list(account.secret_key),
                    }
                ]
            )
        )

        with pytest.raises(PersistenceError, match="non-base58"):
            account_store.load()

    # ================================================================
    # Write failures
    # ================================================================

    def test_missing_directory(self, tmp_path):
        """Test write into a missing directory raises PersistenceError."""
        target = tmp_path / "missing" / "accounts.json"
        store = JsonAccountStore(target)

        with pytest.raises(PersistenceError, match="Failed to write"):
            store.save(_record(1))

        assert not target.exists()

    def test_failed_replace_leaves_no_files(self, monkeypatch, tmp_path):
        """Test failing final rename removes the temp file and keeps old data."""
        target = tmp_path / "accounts.json"
        target.write_text("[]")
        store = JsonAccountStore(target)

        def broken_replace(src, dst):
            raise PermissionError("read-only")

        monkeypatch.setattr(os, "replace", broken_replace)

        with pytest.raises(PersistenceError) as exc_info:
            store.save(_record(2))

        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert exc_info.value.details["accounts"] == 2
        assert sorted(p.name for p in tmp_path.iterdir()) == ["accounts.json"]
        assert target.read_text() == "[]"

    def test_failed_write_leaves_no_files(self, monkeypatch, tmp_path):
        """Test failing fsync removes the temp file."""
        store = JsonAccountStore(tmp_path / "accounts.json")

        def broken_fsync(fd):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(os, "fsync", broken_fsync)

        with pytest.raises(PersistenceError, match="No space left"):
            store.save(_record(1))

        assert list(tmp_path.iterdir()) == []
