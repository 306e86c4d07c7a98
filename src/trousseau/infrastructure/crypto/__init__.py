"""Secret key codecs."""

from trousseau.infrastructure.crypto.plain_secret_key_codec import (
    PlainSecretKeyCodec,
)

__all__ = ["PlainSecretKeyCodec"]
