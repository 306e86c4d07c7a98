"""
Base domain exceptions.
"""

from typing import Optional


class TrousseauException(Exception):
    """Base exception for all Trousseau errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
