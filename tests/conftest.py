"""Pytest fixtures for viacoin client tests."""
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from viacoin import ClientConfig, HttpxTransport, ViacoinClient

BLOCK_HASH = "000000000019d6689c085ae165831e934ff763ae46a2a6c172b3f1b60a8ce26f"
TX_HASH = "4a5e1e4baab89f3a32518a88c31bc87f618f76673e2cc77ab2127b7afdeda33b"

BLOCK_HEADER = {
    "hash": BLOCK_HASH,
    "confirmations": 449162,
    "height": 0,
    "version": 1,
    "versionHex": "00000001",
    "merkleroot": TX_HASH,
    "time": 1231006505,
    "mediantime": 1231006505,
    "nonce": 2083236893,
    "bits": "1d00ffff",
    "difficulty": 1,
    "chainwork": "0000000000000000000000000000000000000000000000000000000100010001",
    "nextblockhash": "00000000839a8e6886ab5951d76f411475428afc90947ee320161bbf18eb6048",
    "tx": [TX_HASH],
}

RAW_TRANSACTION_ERROR = {
    "code": -5,  # RPC_INVALID_ADDRESS_OR_KEY
    "message": "The genesis block coinbase is not considered an ordinary transaction and cannot be retrieved",
}


def rpc_success(result: Any, status_code: int = 200) -> httpx.Response:
    """Build an httpx.Response that looks like a JSON-RPC success."""
    return httpx.Response(
        status_code,
        json={"result": result, "error": None, "id": "0"},
    )


def rpc_error(error: dict[str, Any], status_code: int = 200) -> httpx.Response:
    """Build an httpx.Response that looks like a JSON-RPC error."""
    return httpx.Response(
        status_code,
        json={"result": None, "error": error, "id": "0"},
    )


class RecordingHandler:
    """MockTransport handler replaying queued responses and recording requests."""

    def __init__(self, responses: list[httpx.Response | Exception]) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def make_transport() -> Generator[Callable[..., tuple[HttpxTransport, RecordingHandler]], None, None]:
    """Factory for HttpxTransports served by httpx.MockTransport."""
    created: list[HttpxTransport] = []

    def _make(
        responses: list[httpx.Response | Exception],
        config: ClientConfig | None = None,
    ) -> tuple[HttpxTransport, RecordingHandler]:
        handler = RecordingHandler(responses)
        transport = HttpxTransport(
            config,
            client=httpx.Client(transport=httpx.MockTransport(handler)),
        )
        created.append(transport)
        return transport, handler

    yield _make

    for transport in created:
        transport.close()


@pytest.fixture
def viacoind() -> ViacoinClient:
    """Client with default configuration."""
    return ViacoinClient()
