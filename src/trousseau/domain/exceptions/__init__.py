"""
Domain exceptions package.
"""

# Base exceptions
from trousseau.domain.exceptions.base import TrousseauException

# Blockchain exceptions
from trousseau.domain.exceptions.blockchain import NetworkError, RPCResponseError

# Input exceptions
from trousseau.domain.exceptions.input import (
    InvalidAddressError,
    InvalidCountError,
    InvalidInputError,
)

# Persistence exceptions
from trousseau.domain.exceptions.persistence import PersistenceError

__all__ = [
    # Base
    "TrousseauException",
    # Input
    "InvalidInputError",
    "InvalidAddressError",
    "InvalidCountError",
    # Blockchain
    "NetworkError",
    "RPCResponseError",
    # Persistence
    "PersistenceError",
]
