"""
AccountKeypair value object - One generated Solana identity.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

import base58
from solders.keypair import Keypair

from trousseau.domain.value_objects.address import PUBLIC_KEY_LENGTH

SECRET_KEY_LENGTH = 64


@dataclass(frozen=True)
class AccountKeypair:
    """
    Public/secret key pair of a Solana account.

    Business rules:
    - public_key is base58 text of the 32-byte ed25519 public key
    - secret_key is 64 bytes: 32-byte private seed followed by the public key
    - Public half embedded in secret_key must match public_key
    - Secret bytes never appear in repr()
    """

    public_key: str
    secret_key: bytes = field(repr=False)

    def __post_init__(self):
        """Validate key material on creation."""
        if not isinstance(self.secret_key, (bytes, bytearray)):
            raise ValueError("Secret key must be bytes")

        if len(self.secret_key) != SECRET_KEY_LENGTH:
            raise ValueError(
                f"Secret key must be {SECRET_KEY_LENGTH} bytes, "
                f"got {len(self.secret_key)}"
            )

        try:
            public_bytes = base58.b58decode(self.public_key)
        except ValueError as e:
            raise ValueError(f"Public key is not valid base58: {e}") from e

        if base58.b58encode(public_bytes).decode("ascii") != self.public_key:
            raise ValueError("Public key contains non-base58 characters")

        if len(public_bytes) != PUBLIC_KEY_LENGTH:
            raise ValueError(
                f"Public key must decode to {PUBLIC_KEY_LENGTH} bytes, "
                f"got {len(public_bytes)}"
            )

        if bytes(self.secret_key[PUBLIC_KEY_LENGTH:]) != public_bytes:
            raise ValueError("Secret key does not belong to public key")

        object.__setattr__(self, "secret_key", bytes(self.secret_key))

    @classmethod
    def generate(cls) -> "AccountKeypair":
        """Generate a fresh keypair from the OS random source."""
        return cls.from_keypair(Keypair())

    @classmethod
    def from_keypair(cls, keypair: Keypair) -> "AccountKeypair":
        """Build from a solders Keypair."""
        return cls(public_key=str(keypair.pubkey()), secret_key=bytes(keypair))

    def to_keypair(self) -> Keypair:
        """Rebuild the solders Keypair."""
        return Keypair.from_bytes(self.secret_key)

    @property
    def public_key_bytes(self) -> bytes:
        """Raw 32-byte public key."""
        return base58.b58decode(self.public_key)

    @property
    def secret_key_values(self) -> List[int]:
        """Secret key as a list of integers 0..255."""
        return list(self.secret_key)


@dataclass(frozen=True)
class AccountRecord:
    """
    Ordered collection of generated keypairs.

    Entries keep generation order. An empty record is valid.
    """

    accounts: Tuple[AccountKeypair, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "accounts", tuple(self.accounts))

    @classmethod
    def from_accounts(cls, accounts: Sequence[AccountKeypair]) -> "AccountRecord":
        return cls(tuple(accounts))

    def public_keys(self) -> List[str]:
        """Return public keys in generation order."""
        return [account.public_key for account in self.accounts]

    def __len__(self) -> int:
        return len(self.accounts)

    def __iter__(self) -> Iterator[AccountKeypair]:
        return iter(self.accounts)

    def __getitem__(self, index: int) -> AccountKeypair:
        return self.accounts[index]
