"""
Generate Accounts use case.

Creates a batch of fresh Solana keypairs and persists them as one record.
"""

from typing import Callable, Optional

from solders.keypair import Keypair

from trousseau.domain.exceptions import InvalidCountError, PersistenceError
from trousseau.domain.services.i_account_store import IAccountStore
from trousseau.domain.value_objects.account_keypair import (
    AccountKeypair,
    AccountRecord,
)
from trousseau.infrastructure.monitoring.system_reporter import SystemReporter


class GenerateAccounts:
    """
    Generate and save Solana account keypairs.

    Business rules:
    - Count must be a non-negative integer; zero writes an empty record
    - Each keypair comes from the OS random source, independently
    - Record is written once, atomically, after all keys exist
    - Write failures are raised, never retried
    """

    def __init__(
        self,
        account_store: IAccountStore,
        keypair_factory: Callable[[], Keypair] = Keypair,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            account_store: Destination for the generated record
            keypair_factory: Source of new keypairs (default: solders Keypair)
            reporter: Optional logger
        """
        self.account_store = account_store
        self.keypair_factory = keypair_factory
        self.reporter = reporter

    def execute(self, count: int) -> AccountRecord:
        """
        Execute account generation.

        Args:
            count: Number of accounts to generate

        Returns:
            AccountRecord with exactly ``count`` entries

        Raises:
            InvalidCountError: If count is not a non-negative int
            PersistenceError: If the record cannot be written
        """
        if not isinstance(count, int) or isinstance(count, bool) or count < 0:
            raise InvalidCountError(count)

        accounts = []
        for index in range(count):
            account = AccountKeypair.from_keypair(self.keypair_factory())
            accounts.append(account)
            self._debug(f"Key {index + 1} generated, public key: {account.public_key}")

        record = AccountRecord.from_accounts(accounts)

        try:
            self.account_store.save(record)
        except PersistenceError as e:
            self._error(f"Failed to save accounts: {e.message}")
            raise

        self._info(f"Generated {count} accounts")
        return record

    def _debug(self, msg: str) -> None:
        if self.reporter:
            self.reporter.debug(msg, context="GenerateAccounts")

    def _info(self, msg: str) -> None:
        if self.reporter:
            self.reporter.info(msg, context="GenerateAccounts")

    def _error(self, msg: str) -> None:
        if self.reporter:
            self.reporter.error(msg, context="GenerateAccounts")
