"""
Account store interface.
"""

from abc import ABC, abstractmethod

from trousseau.domain.value_objects.account_keypair import AccountRecord


class IAccountStore(ABC):
    """Durable storage for generated account records."""

    @abstractmethod
    def save(self, record: AccountRecord) -> None:
        """
        Persist record, replacing any previous content atomically.

        Raises:
            PersistenceError: If the write cannot complete
        """

    @abstractmethod
    def load(self) -> AccountRecord:
        """
        Read back a previously saved record.

        Raises:
            PersistenceError: If the file is missing, unreadable or malformed
        """
