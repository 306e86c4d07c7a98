"""Domain service interfaces."""

from trousseau.domain.services.i_account_store import IAccountStore
from trousseau.domain.services.i_balance_provider import IBalanceProvider
from trousseau.domain.services.i_secret_key_codec import ISecretKeyCodec

__all__ = [
    "IAccountStore",
    "IBalanceProvider",
    "ISecretKeyCodec",
]
