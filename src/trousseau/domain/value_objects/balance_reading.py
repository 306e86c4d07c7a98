"""
BalanceReading value object - SOL balance of one address.
"""

from dataclasses import dataclass
from decimal import Decimal

LAMPORTS_PER_SOL = 1_000_000_000
MAX_LAMPORTS = 2**64 - 1


@dataclass(frozen=True)
class BalanceReading:
    """
    Balance of an address at the time of the query.

    Business rules:
    - lamports is an unsigned 64-bit integer
    - sol is lamports / LAMPORTS_PER_SOL, float for display only
    - Never persisted
    """

    address: str
    lamports: int

    def __post_init__(self):
        """Validate balance on creation."""
        if not isinstance(self.lamports, int) or isinstance(self.lamports, bool):
            raise ValueError(f"Lamports must be an integer, got {self.lamports!r}")

        if not 0 <= self.lamports <= MAX_LAMPORTS:
            raise ValueError(
                f"Lamports out of u64 range: {self.lamports}"
            )

    @classmethod
    def from_lamports(cls, address: str, lamports: int) -> "BalanceReading":
        return cls(address=str(address), lamports=lamports)

    @property
    def sol(self) -> float:
        """Balance in SOL (display precision)."""
        return self.lamports / LAMPORTS_PER_SOL

    @property
    def sol_decimal(self) -> Decimal:
        """Balance in SOL without float rounding."""
        return Decimal(self.lamports) / Decimal(LAMPORTS_PER_SOL)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "address": self.address,
            "lamports": self.lamports,
            "sol": self.sol,
        }
