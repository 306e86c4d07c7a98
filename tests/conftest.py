"""
Test fixtures and configuration.
"""

import json
import os
from typing import Callable

import httpx
import pytest
from solders.keypair import Keypair

from trousseau.config.settings import reset_settings
from trousseau.infrastructure.blockchain.solana_rpc_client import SolanaRPCClient
from trousseau.infrastructure.persistence.json_account_store import (
    JsonAccountStore,
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host TROUSSEAU_* variables and cached settings out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("TROUSSEAU_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def wallet_address() -> str:
    """Valid base58 address of a freshly generated keypair."""
    return str(Keypair().pubkey())


@pytest.fixture
def accounts_path(tmp_path):
    return tmp_path / "accounts.json"


@pytest.fixture
def account_store(accounts_path) -> JsonAccountStore:
    return JsonAccountStore(accounts_path)


class RecordingHandler:
    """httpx MockTransport handler that records requests."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]):
        self.respond = respond
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def payloads(self):
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def rpc_factory():
    """
    Build SolanaRPCClient backed by httpx.MockTransport.

    Returns (client, handler) for a given respond callable.
    """
    clients = []

    def factory(respond, **kwargs):
        handler = RecordingHandler(respond)
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        client = SolanaRPCClient(
            rpc_url="http://rpc.test",
            http_client=http_client,
            **kwargs,
        )
        clients.append(http_client)
        return client, handler

    yield factory

    for http_client in clients:
        http_client.close()


def _balance_response(lamports, slot: int = 1234) -> Callable:
    def respond(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "id": body["id"],
                "result": {
                    "context": {"apiVersion": "2.0.0", "slot": slot},
                    "value": lamports,
                },
            },
        )

    return respond


@pytest.fixture
def balance_response():
    """Factory for respond callables returning a getBalance result."""
    return _balance_response
