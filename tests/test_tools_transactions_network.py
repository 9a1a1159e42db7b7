import functools
import json

import pytest

from solana_mcp.config import SolanaConfig
from solana_mcp.mcp import TOOLS
from solana_mcp.registry import ToolRegistry
from solana_mcp.solana_rpc import SolanaRpcError
from solana_mcp.tools.network import format_epoch_progress, get_network_stats, network_label
from solana_mcp.tools.transactions import get_transaction_history

from conftest import WALLET


def _signature(n, **overrides):
    entry = {
        "signature": f"sig{n}",
        "slot": 1000 - n,
        "blockTime": 1_700_000_000 - n,
        "err": None,
        "memo": None,
        "confirmationStatus": "finalized",
    }
    entry.update(overrides)
    return entry


class SignatureClient:
    def __init__(self, available):
        self.available = available
        self.limits = []

    async def get_signatures_for_address(self, key, *, limit=None):
        self.limits.append(limit)
        return self.available[:limit]


def _history_registry(client):
    contract = next(contract for contract, _ in TOOLS if contract.name == "get_transaction_history")
    registry = ToolRegistry()
    registry.register(contract, functools.partial(get_transaction_history, client=client))
    return registry


@pytest.mark.asyncio
async def test_history_mapping_keeps_node_order():
    client = SignatureClient([_signature(1), _signature(2, err={"InstructionError": [0, "Custom"]}, memo="hi")])
    result = await get_transaction_history(WALLET, 5, client=client)
    payload = json.loads(result.text)
    assert set(payload) == {"address", "transactions", "count"}
    assert payload["count"] == 2
    assert [tx["signature"] for tx in payload["transactions"]] == ["sig1", "sig2"]
    assert payload["transactions"][1] == {
        "signature": "sig2",
        "slot": 998,
        "blockTime": 1_699_999_998,
        "err": {"InstructionError": [0, "Custom"]},
        "memo": "hi",
    }
    assert client.limits == [5]


@pytest.mark.asyncio
async def test_history_default_limit_is_ten():
    client = SignatureClient([_signature(n) for n in range(30)])
    result = await _history_registry(client).dispatch("get_transaction_history", {"address": WALLET})
    assert not result.is_error
    assert client.limits == [10]
    assert json.loads(result.text)["count"] == 10


@pytest.mark.asyncio
@pytest.mark.parametrize("limit", [0, 101, 1000, -1])
async def test_history_out_of_bounds_skips_client(limit):
    client = SignatureClient([_signature(1)])
    result = await _history_registry(client).dispatch(
        "get_transaction_history", {"address": WALLET, "limit": limit}
    )
    assert result.is_error
    assert client.limits == []


@pytest.mark.asyncio
async def test_history_fewer_than_limit():
    client = SignatureClient([_signature(1), _signature(2)])
    result = await _history_registry(client).dispatch(
        "get_transaction_history", {"address": WALLET, "limit": 100}
    )
    assert json.loads(result.text)["count"] == 2


@pytest.mark.asyncio
async def test_history_rpc_error():
    class StubClient:
        async def get_signatures_for_address(self, key, *, limit=None):
            raise SolanaRpcError("failed to get signatures")

    result = await get_transaction_history(WALLET, client=StubClient())
    assert result.is_error
    assert result.text == "Error getting transaction history: failed to get signatures"


class NetworkClient:
    async def get_slot(self):
        return 250_000_123

    async def get_block_time(self, slot):
        assert slot == 250_000_123
        return 1_700_000_000

    async def get_epoch_info(self):
        return {"epoch": 578, "slotIndex": 108_000, "slotsInEpoch": 432_000, "absoluteSlot": 250_000_123}


@pytest.mark.asyncio
async def test_network_stats_mapping():
    config = SolanaConfig(rpc_url="https://api.mainnet-beta.solana.com")
    result = await get_network_stats(client=NetworkClient(), config=config)
    assert not result.is_error
    assert json.loads(result.text) == {
        "currentSlot": 250_000_123,
        "blockTime": 1_700_000_000,
        "epoch": 578,
        "epochProgress": "25.00%",
        "network": "mainnet-beta",
    }


@pytest.mark.asyncio
async def test_network_stats_error():
    class StubClient:
        async def get_slot(self):
            raise SolanaRpcError("Node unhealthy")

    result = await get_network_stats(client=StubClient())
    assert result.is_error
    assert result.text == "Error getting network stats: Node unhealthy"


@pytest.mark.parametrize(
    "url, label",
    [
        ("https://api.mainnet-beta.solana.com", "mainnet-beta"),
        ("https://my-mainnet.helius-rpc.com/?api-key=x", "mainnet-beta"),
        ("https://api.devnet.solana.com", "devnet"),
        ("https://api.testnet.solana.com", "testnet"),
        ("http://localhost:8899", "testnet"),
    ],
)
def test_network_label(url, label):
    assert network_label(url) == label


def test_epoch_progress_two_decimals():
    assert format_epoch_progress(1, 3) == "33.33%"
    assert format_epoch_progress(0, 432_000) == "0.00%"
