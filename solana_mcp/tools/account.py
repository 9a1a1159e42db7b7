"""Account-related tools."""

from __future__ import annotations

import logging

from solana_mcp.config import SolanaConfig, default_config
from solana_mcp.envelope import InvocationResult, error_result, operation_error, text_result
from solana_mcp.solana_rpc import PublicKey, SolanaRpcError, default_client

logger = logging.getLogger(__name__)

LAMPORTS_PER_SOL = 1_000_000_000


def lamports_to_sol(lamports: int) -> float:
    return lamports / LAMPORTS_PER_SOL


async def get_balance(
    address: str,
    *,
    client=default_client,
    config: SolanaConfig = default_config,
) -> InvocationResult:
    """
    Return the SOL balance of a wallet.

    Args:
        address: Base58 wallet address.
        client: Solana RPC client (override for testing).
        config: Configuration providing the reported endpoint.
    """
    try:
        public_key = PublicKey.from_string(address)
        lamports = await client.get_balance(public_key)
    except SolanaRpcError as exc:
        return operation_error("getting balance", exc)
    except Exception as exc:
        logger.exception("Unexpected error fetching balance for %s", address)
        return operation_error("getting balance", exc)

    return text_result(
        {
            "address": address,
            "balance": lamports_to_sol(lamports),
            "balanceLamports": lamports,
            "rpcEndpoint": config.rpc_url,
        }
    )


async def get_account_info(address: str, *, client=default_client) -> InvocationResult:
    """
    Summarize an account: owner program, executable flag, rent epoch, data size
    and lamports. Missing accounts are reported as an error result.
    """
    try:
        public_key = PublicKey.from_string(address)
        account = await client.get_account_info(public_key)
    except SolanaRpcError as exc:
        return operation_error("getting account info", exc)
    except Exception as exc:
        logger.exception("Unexpected error fetching account info for %s", address)
        return operation_error("getting account info", exc)

    if account is None:
        return error_result(f"Account {address} not found")

    return text_result(
        {
            "address": address,
            "lamports": account["lamports"],
            "owner": str(account["owner"]),
            "executable": account["executable"],
            "rentEpoch": account["rentEpoch"],
            "dataLength": len(account["data"]),
        }
    )
