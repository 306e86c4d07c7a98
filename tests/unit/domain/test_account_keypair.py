"""
Unit tests for AccountKeypair and AccountRecord value objects.

Usage:
    pytest tests/unit/domain/test_account_keypair.py
"""

import base58
import pytest
from solders.keypair import Keypair

from trousseau.domain.value_objects.account_keypair import (
    AccountKeypair,
    AccountRecord,
)


class TestAccountKeypair:
    """Unit tests for AccountKeypair value object."""

    def test_generate_key_lengths(self):
        """Test generated keypair has 32-byte public and 64-byte secret key."""
        account = AccountKeypair.generate()

        assert len(account.public_key_bytes) == 32
        assert len(account.secret_key) == 64
        assert account.secret_key[32:] == account.public_key_bytes

    def test_public_key_base58_round_trip(self):
        """Test public key decodes to 32 bytes and re-encodes unchanged."""
        account = AccountKeypair.generate()

        decoded = base58.b58decode(account.public_key)

        assert len(decoded) == 32
        assert base58.b58encode(decoded).decode() == account.public_key

    def test_from_keypair_matches_solders(self):
        """Test conversion from solders Keypair keeps both halves."""
        keypair = Keypair()

        account = AccountKeypair.from_keypair(keypair)

        assert account.public_key == str(keypair.pubkey())
        assert account.secret_key == bytes(keypair)

    def test_to_keypair_restores_identity(self):
        """Test rebuilt solders Keypair has the same public key."""
        keypair = Keypair()
        account = AccountKeypair.from_keypair(keypair)

        restored = account.to_keypair()

        assert restored.pubkey() == keypair.pubkey()
        assert bytes(restored) == bytes(keypair)

    def test_secret_key_values_are_bytes(self):
        """Test secret key integer list is 64 values in byte range."""
        values = AccountKeypair.generate().secret_key_values

        assert len(values) == 64
        assert all(isinstance(v, int) and 0 <= v <= 255 for v in values)

    def test_repr_hides_secret_key(self):
        """Test secret key bytes do not leak through repr."""
        account = AccountKeypair.generate()

        assert "secret_key" not in repr(account)
        assert account.public_key in repr(account)

    def test_reject_short_secret_key(self):
        """Test secret key of wrong length is rejected."""
        account = AccountKeypair.generate()

        with pytest.raises(ValueError, match="64 bytes"):
            AccountKeypair(public_key=account.public_key, secret_key=b"\x00" * 32)

    def test_reject_mismatched_public_key(self):
        """Test secret key belonging to another public key is rejected."""
        first = AccountKeypair.generate()
        second = AccountKeypair.generate()

        with pytest.raises(ValueError, match="does not belong"):
            AccountKeypair(public_key=first.public_key, secret_key=second.secret_key)

    def test_reject_invalid_public_key(self):
        """Test non-base58 public key is rejected."""
        account = AccountKeypair.generate()

        with pytest.raises(ValueError):
            AccountKeypair(public_key="0OIl", secret_key=account.secret_key)

    @pytest.mark.parametrize("suffix", [" ", "\n", "\t"])
    def test_reject_padded_public_key(self, suffix):
        """Test trailing whitespace on the public key is rejected."""
        account = AccountKeypair.generate()

        with pytest.raises(ValueError, match="non-base58"):
            AccountKeypair(
                public_key=account.public_key + suffix,
                secret_key=account.secret_key,
            )


class TestAccountRecord:
    """Unit tests for AccountRecord value object."""

    def test_empty_record(self):
        """Test empty record is valid."""
        record = AccountRecord()

        assert len(record) == 0
        assert record.public_keys() == []

    def test_record_preserves_order(self):
        """Test entries keep the order they were given in."""
        accounts = [AccountKeypair.generate() for _ in range(5)]

        record = AccountRecord.from_accounts(accounts)

        assert len(record) == 5
        assert record.public_keys() == [a.public_key for a in accounts]
        assert record[0] == accounts[0]
        assert list(record) == accounts

    def test_record_is_immutable(self):
        """Test record stores a tuple, detached from the input list."""
        accounts = [AccountKeypair.generate()]
        record = AccountRecord.from_accounts(accounts)

        accounts.append(AccountKeypair.generate())

        assert isinstance(record.accounts, tuple)
        assert len(record) == 1
