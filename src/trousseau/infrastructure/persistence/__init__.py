"""Account persistence."""

from trousseau.infrastructure.persistence.json_account_store import (
    JsonAccountStore,
)

__all__ = ["JsonAccountStore"]
