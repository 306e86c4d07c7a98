"""
Balance provider interface.

Defines the single blockchain read the balance lookup needs.
"""

from abc import ABC, abstractmethod
from typing import Optional

from trousseau.domain.value_objects.commitment import Commitment


class IBalanceProvider(ABC):
    """Abstract source of account balances in lamports."""

    @abstractmethod
    def get_balance(
        self,
        address: str,
        commitment: Optional[Commitment] = None,
        timeout: Optional[float] = None,
    ) -> int:
        """
        Get account balance.

        Args:
            address: Base58 account address (already validated)
            commitment: Commitment level, provider default when None
            timeout: Per-call deadline in seconds, provider default when None

        Returns:
            Balance in lamports

        Raises:
            NetworkError: If the call fails or the response is malformed
        """
