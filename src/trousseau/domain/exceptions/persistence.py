"""
Account file persistence exceptions.
"""

from trousseau.domain.exceptions.base import TrousseauException


class PersistenceError(TrousseauException):
    """Account file could not be written, read, or parsed."""
