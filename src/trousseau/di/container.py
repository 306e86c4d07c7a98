"""
Dependency Injection Container for Trousseau.

Builds use cases from settings. Infrastructure is created lazily so a
command that only generates keys never opens an HTTP client.
"""

from pathlib import Path
from typing import Optional, Union

from trousseau.application.use_cases.generate_accounts import GenerateAccounts
from trousseau.application.use_cases.get_balance import GetBalance
from trousseau.config.settings import TrousseauConfig, get_settings
from trousseau.domain.services.i_balance_provider import IBalanceProvider
from trousseau.domain.services.i_secret_key_codec import ISecretKeyCodec
from trousseau.infrastructure.blockchain.solana_rpc_client import SolanaRPCClient
from trousseau.infrastructure.crypto.plain_secret_key_codec import (
    PlainSecretKeyCodec,
)
from trousseau.infrastructure.monitoring.system_reporter import SystemReporter
from trousseau.infrastructure.persistence.json_account_store import (
    JsonAccountStore,
)


class Container:
    """Service container holding settings and shared instances."""

    def __init__(self, settings: Optional[TrousseauConfig] = None):
        self.settings = settings or get_settings()
        self._reporter: Optional[SystemReporter] = None
        self._rpc_client: Optional[IBalanceProvider] = None
        self._secret_key_codec: ISecretKeyCodec = PlainSecretKeyCodec()

    # ================================================================
    # Infrastructure
    # ================================================================

    @property
    def reporter(self) -> SystemReporter:
        if self._reporter is None:
            self._reporter = SystemReporter.from_level_name(
                name="trousseau",
                level_name=self.settings.log_level,
                log_dir=self.settings.log_dir,
            )
        return self._reporter

    @property
    def rpc_client(self) -> IBalanceProvider:
        if self._rpc_client is None:
            self._rpc_client = SolanaRPCClient(
                rpc_url=self.settings.solana_rpc_url,
                commitment=self.settings.commitment,
                timeout=self.settings.rpc_timeout,
            )
        return self._rpc_client

    def set_rpc_client(self, client: IBalanceProvider) -> None:
        """Replace the balance provider (for testing)."""
        self._rpc_client = client

    def set_secret_key_codec(self, codec: ISecretKeyCodec) -> None:
        """Replace the secret key storage format."""
        self._secret_key_codec = codec

    def account_store(
        self, path: Optional[Union[str, Path]] = None
    ) -> JsonAccountStore:
        return JsonAccountStore(
            path or self.settings.accounts_file,
            codec=self._secret_key_codec,
        )

    # ================================================================
    # Use cases
    # ================================================================

    def generate_accounts(
        self, path: Optional[Union[str, Path]] = None
    ) -> GenerateAccounts:
        return GenerateAccounts(
            account_store=self.account_store(path),
            reporter=self.reporter,
        )

    def get_balance(self) -> GetBalance:
        return GetBalance(
            balance_provider=self.rpc_client,
            commitment=self.settings.commitment,
            reporter=self.reporter,
        )

    def close(self) -> None:
        """Release HTTP and logging resources."""
        if isinstance(self._rpc_client, SolanaRPCClient):
            self._rpc_client.close()
        if self._reporter is not None:
            self._reporter.close()
