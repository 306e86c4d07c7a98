"""
Plain secret key codec.

Stores secret keys as a list of byte values, the format Solana CLI keypair
files use. Provides no encryption at rest.
"""

from typing import Any, List

from trousseau.domain.services.i_secret_key_codec import ISecretKeyCodec
from trousseau.domain.value_objects.account_keypair import SECRET_KEY_LENGTH


class PlainSecretKeyCodec(ISecretKeyCodec):
    """Secret key <-> list of integers 0..255."""

    def encode(self, secret_key: bytes) -> List[int]:
        return list(secret_key)

    def decode(self, value: Any) -> bytes:
        if not isinstance(value, list):
            raise ValueError("Secret key must be a list of integers")

        if len(value) != SECRET_KEY_LENGTH:
            raise ValueError(
                f"Secret key must have {SECRET_KEY_LENGTH} values, got {len(value)}"
            )

        for item in value:
            if not isinstance(item, int) or isinstance(item, bool):
                raise ValueError(f"Secret key value is not an integer: {item!r}")
            if not 0 <= item <= 255:
                raise ValueError(f"Secret key value out of byte range: {item}")

        return bytes(value)
