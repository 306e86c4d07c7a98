"""
SolanaAddress value object - Validated base58 public key.
"""

from dataclasses import dataclass

import base58
from solders.pubkey import Pubkey

from trousseau.domain.exceptions import InvalidAddressError

PUBLIC_KEY_LENGTH = 32


@dataclass(frozen=True)
class SolanaAddress:
    """
    Value object representing a Solana account address.

    Business rules:
    - Text is base58 encoded
    - Decodes to exactly 32 bytes (ed25519 public key)
    - Validation happens on creation, before any network call
    """

    value: str

    def __post_init__(self):
        """Validate address on creation."""
        if not isinstance(self.value, str):
            raise InvalidAddressError(self.value, "address must be a string")

        if not self.value:
            raise InvalidAddressError(self.value, "address is empty")

        try:
            decoded = base58.b58decode(self.value)
        except ValueError as e:
            raise InvalidAddressError(self.value, f"not valid base58 ({e})") from e

        # b58decode strips trailing whitespace before decoding
        if base58.b58encode(decoded).decode("ascii") != self.value:
            raise InvalidAddressError(self.value, "contains non-base58 characters")

        if len(decoded) != PUBLIC_KEY_LENGTH:
            raise InvalidAddressError(
                self.value,
                f"decodes to {len(decoded)} bytes, expected {PUBLIC_KEY_LENGTH}",
            )

    @classmethod
    def parse(cls, raw: str) -> "SolanaAddress":
        """
        Parse and validate an address string.

        Args:
            raw: Base58 address text

        Returns:
            SolanaAddress

        Raises:
            InvalidAddressError: If raw does not decode to 32 bytes
        """
        return cls(raw)

    def to_bytes(self) -> bytes:
        """Return the 32 raw public key bytes."""
        return base58.b58decode(self.value)

    def to_pubkey(self) -> Pubkey:
        """Return solders Pubkey for this address."""
        return Pubkey.from_bytes(self.to_bytes())

    def __str__(self) -> str:
        return self.value
