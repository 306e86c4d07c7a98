"""
Solana JSON-RPC client.

Synchronous, single-shot calls over httpx. No retries: every transport
failure or malformed response is surfaced to the caller as NetworkError.
"""

import itertools
from typing import Any, Optional

import httpx

from trousseau.domain.exceptions import NetworkError, RPCResponseError
from trousseau.domain.services.i_balance_provider import IBalanceProvider
from trousseau.domain.value_objects.balance_reading import MAX_LAMPORTS
from trousseau.domain.value_objects.commitment import (
    DEFAULT_COMMITMENT,
    Commitment,
)

DEVNET_RPC_URL = "https://api.devnet.solana.com"


class SolanaRPCClient(IBalanceProvider):
    """
    Solana RPC client.

    Endpoint, commitment and timeout are explicit constructor arguments so
    tests can point the client at a mock transport.
    """

    def __init__(
        self,
        rpc_url: str = DEVNET_RPC_URL,
        commitment: Commitment = DEFAULT_COMMITMENT,
        timeout: float = 10.0,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize Solana RPC client.

        Args:
            rpc_url: JSON-RPC endpoint URL
            commitment: Default commitment for state queries
            timeout: Default per-request timeout in seconds
            http_client: Optional preconfigured httpx client (owned by caller)
        """
        self.rpc_url = rpc_url
        self.commitment = Commitment(commitment)
        self.timeout = timeout
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client()
        self._request_ids = itertools.count(1)

    # ================================================================
    # Lifecycle
    # ================================================================

    def close(self) -> None:
        """Close underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SolanaRPCClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ================================================================
    # JSON-RPC
    # ================================================================

    def call_rpc(
        self,
        method: str,
        params: Optional[list] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Call a JSON-RPC method once.

        Args:
            method: RPC method name
            params: Optional method parameters
            timeout: Per-call timeout in seconds (default: client timeout)

        Returns:
            The ``result`` member of the response

        Raises:
            NetworkError: On connection failure, timeout or HTTP error status
            RPCResponseError: On JSON-RPC error or malformed payload
        """
        effective_timeout = self.timeout if timeout is None else timeout
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._request_ids),
            "method": method,
            "params": params or [],
        }

        try:
            response = self._client.post(
                self.rpc_url,
                json=payload,
                timeout=effective_timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise NetworkError(
                f"RPC timeout after {effective_timeout}s: {method}",
                details={"method": method, "timeout": effective_timeout},
            ) from e
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"RPC HTTP error {e.response.status_code}: {method}",
                details={
                    "method": method,
                    "status_code": e.response.status_code,
                },
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(
                f"RPC connection error: {e}",
                details={"method": method, "url": self.rpc_url},
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise RPCResponseError(
                f"RPC response is not valid JSON: {method}",
                details={"method": method},
            ) from e

        if not isinstance(data, dict):
            raise RPCResponseError(
                f"RPC response is not a JSON object: {method}",
                details={"method": method},
            )

        if "error" in data:
            error = data["error"]
            raise RPCResponseError(
                f"RPC error: {error}",
                details={"method": method, "error": error},
                rpc_error=error if isinstance(error, dict) else None,
            )

        if "result" not in data:
            raise RPCResponseError(
                f"RPC response has no result: {method}",
                details={"method": method},
            )

        return data["result"]

    # ================================================================
    # IBalanceProvider
    # ================================================================

    def get_balance(
        self,
        address: str,
        commitment: Optional[Commitment] = None,
        timeout: Optional[float] = None,
    ) -> int:
        """
        Get account balance.

        Args:
            address: Base58 public key
            commitment: Commitment level (default: client commitment)
            timeout: Per-call timeout in seconds

        Returns:
            Balance in lamports
        """
        level = Commitment(commitment) if commitment else self.commitment
        result = self.call_rpc(
            "getBalance",
            [address, {"commitment": level.value}],
            timeout=timeout,
        )
        return self._parse_lamports(result)

    @staticmethod
    def _parse_lamports(result: Any) -> int:
        """Extract ``value`` from a getBalance result."""
        value = result.get("value") if isinstance(result, dict) else None

        if not isinstance(value, int) or isinstance(value, bool):
            raise RPCResponseError(
                f"getBalance result has no integer value: {result!r}",
                details={"method": "getBalance"},
            )

        if not 0 <= value <= MAX_LAMPORTS:
            raise RPCResponseError(
                f"getBalance value out of u64 range: {value}",
                details={"method": "getBalance"},
            )

        return value
