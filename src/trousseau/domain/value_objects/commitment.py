"""
Commitment levels for Solana state queries.
"""

from enum import Enum


class Commitment(str, Enum):
    """
    Degree of cluster finality requested when reading state.

    PROCESSED is the node's latest view, CONFIRMED has a supermajority vote,
    FINALIZED is rooted.
    """

    PROCESSED = "processed"
    CONFIRMED = "confirmed"
    FINALIZED = "finalized"


DEFAULT_COMMITMENT = Commitment.CONFIRMED
