"""
Secret key codec interface.

Storage format of secret key material is pluggable so an encrypting codec can
replace the plain byte array without touching key generation.
"""

from abc import ABC, abstractmethod
from typing import Any


class ISecretKeyCodec(ABC):
    """Converts 64-byte secret keys to and from a JSON-compatible value."""

    @abstractmethod
    def encode(self, secret_key: bytes) -> Any:
        """Encode raw secret key bytes for serialization."""

    @abstractmethod
    def decode(self, value: Any) -> bytes:
        """
        Decode a serialized secret key.

        Raises:
            ValueError: If value is not a valid encoded secret key
        """
