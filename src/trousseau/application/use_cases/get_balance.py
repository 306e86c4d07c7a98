"""
Get Balance use case.

Looks up the SOL balance of one address.
"""

from typing import Optional

from trousseau.domain.exceptions import InvalidInputError, NetworkError
from trousseau.domain.services.i_balance_provider import IBalanceProvider
from trousseau.domain.value_objects.address import SolanaAddress
from trousseau.domain.value_objects.balance_reading import BalanceReading
from trousseau.domain.value_objects.commitment import (
    DEFAULT_COMMITMENT,
    Commitment,
)
from trousseau.infrastructure.monitoring.system_reporter import SystemReporter


class GetBalance:
    """
    Get an address balance in lamports and SOL.

    Business rules:
    - Address is validated before any network call
    - Exactly one RPC request per call, no retry
    - Failures propagate; no default reading is returned
    """

    def __init__(
        self,
        balance_provider: IBalanceProvider,
        commitment: Commitment = DEFAULT_COMMITMENT,
        reporter: Optional[SystemReporter] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            balance_provider: RPC-backed balance source
            commitment: Commitment level requested from the cluster
            reporter: Optional logger
        """
        self.balance_provider = balance_provider
        self.commitment = Commitment(commitment)
        self.reporter = reporter

    def execute(
        self,
        address: str,
        timeout: Optional[float] = None,
    ) -> BalanceReading:
        """
        Execute balance lookup.

        Args:
            address: Base58 wallet address
            timeout: Optional per-call deadline in seconds

        Returns:
            BalanceReading

        Raises:
            InvalidAddressError: If address is not a 32-byte base58 key
            InvalidInputError: If timeout is not positive
            NetworkError: If the RPC call fails or returns garbage
        """
        wallet = SolanaAddress.parse(address)

        if timeout is not None and timeout <= 0:
            raise InvalidInputError(
                f"Timeout must be positive, got {timeout}",
                details={"timeout": timeout},
            )

        if self.reporter:
            self.reporter.debug(
                f"Querying balance of {wallet} ({self.commitment.value})",
                context="GetBalance",
            )

        try:
            lamports = self.balance_provider.get_balance(
                str(wallet),
                commitment=self.commitment,
                timeout=timeout,
            )
        except NetworkError as e:
            if self.reporter:
                self.reporter.error(
                    f"Balance query for {wallet} failed: {e.message}",
                    context="GetBalance",
                )
            raise

        reading = BalanceReading.from_lamports(str(wallet), lamports)

        if self.reporter:
            self.reporter.info(
                f"{wallet} balance: {reading.lamports} lamports",
                context="GetBalance",
            )

        return reading
