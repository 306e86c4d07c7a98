"""
Blockchain RPC exceptions.
"""

from typing import Optional

from trousseau.domain.exceptions.base import TrousseauException


class NetworkError(TrousseauException):
    """RPC endpoint unreachable, timed out, or answered with an HTTP error."""


class RPCResponseError(NetworkError):
    """RPC endpoint answered, but with an error or a malformed payload."""

    def __init__(
        self,
        message: str,
        details: Optional[dict] = None,
        rpc_error: Optional[dict] = None,
    ):
        """
        Initialize RPC response error.

        Args:
            message: Error message
            details: Structured context
            rpc_error: JSON-RPC error object, when the node returned one
        """
        super().__init__(message, details)
        self.rpc_error = rpc_error
