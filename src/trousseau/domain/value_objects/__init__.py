"""Domain value objects."""

from trousseau.domain.value_objects.account_keypair import (
    SECRET_KEY_LENGTH,
    AccountKeypair,
    AccountRecord,
)
from trousseau.domain.value_objects.address import (
    PUBLIC_KEY_LENGTH,
    SolanaAddress,
)
from trousseau.domain.value_objects.balance_reading import (
    LAMPORTS_PER_SOL,
    MAX_LAMPORTS,
    BalanceReading,
)
from trousseau.domain.value_objects.commitment import (
    DEFAULT_COMMITMENT,
    Commitment,
)

__all__ = [
    "AccountKeypair",
    "AccountRecord",
    "BalanceReading",
    "Commitment",
    "SolanaAddress",
    "DEFAULT_COMMITMENT",
    "LAMPORTS_PER_SOL",
    "MAX_LAMPORTS",
    "PUBLIC_KEY_LENGTH",
    "SECRET_KEY_LENGTH",
]
