"""Blockchain infrastructure."""

from trousseau.infrastructure.blockchain.solana_rpc_client import (
    DEVNET_RPC_URL,
    SolanaRPCClient,
)

__all__ = ["DEVNET_RPC_URL", "SolanaRPCClient"]
