"""Minimal sanity checks for the Solana MCP tools against a live endpoint."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from solana_mcp.mcp import call_tool  # noqa: E402
from solana_mcp.solana_rpc import default_client  # noqa: E402

# Defaults to a well-known public account; override via env.
SAMPLE_ADDRESS = os.getenv("SOLANA_SAMPLE_ADDRESS", "vines1vzrYbzLMRdu58ou5XTby4qAqVRLmqo36NKPTg")
# USDC mint on mainnet-beta.
SAMPLE_MINT = os.getenv("SOLANA_SAMPLE_MINT", "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")


async def main() -> None:
    try:
        print("Network stats:", (await call_tool("get_network_stats")).text)
        print("Balance:", (await call_tool("get_balance", {"address": SAMPLE_ADDRESS})).text)
        print("Account info:", (await call_tool("get_account_info", {"address": SAMPLE_ADDRESS})).text)
        print("Token accounts:", (await call_tool("get_token_accounts", {"address": SAMPLE_ADDRESS})).text)
        history = await call_tool("get_transaction_history", {"address": SAMPLE_ADDRESS, "limit": 3})
        print("Transaction history (limit 3):", history.text)
        print("Token info:", (await call_tool("get_token_info", {"mintAddress": SAMPLE_MINT})).text)
    finally:
        await default_client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
