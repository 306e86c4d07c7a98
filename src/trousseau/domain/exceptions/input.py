"""
Input validation exceptions.

Raised before any network or file I/O takes place.
"""

from trousseau.domain.exceptions.base import TrousseauException


class InvalidInputError(TrousseauException):
    """Caller supplied a malformed value."""


class InvalidAddressError(InvalidInputError):
    """Address is not a base58-encoded 32-byte public key."""

    def __init__(self, address: object, reason: str):
        """
        Initialize invalid address error.

        Args:
            address: Rejected address value
            reason: Why it was rejected
        """
        super().__init__(
            f"Invalid Solana address {address!r}: {reason}",
            details={"address": repr(address), "reason": reason},
        )
        self.address = address
        self.reason = reason


class InvalidCountError(InvalidInputError):
    """Account count is not a non-negative integer."""

    def __init__(self, count: object):
        super().__init__(
            f"Account count must be a non-negative integer, got {count!r}",
            details={"count": repr(count)},
        )
        self.count = count
