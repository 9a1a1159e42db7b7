"""Cluster-wide tools."""

from __future__ import annotations

import logging
from typing import Any, Dict

from solana_mcp.config import SolanaConfig, default_config
from solana_mcp.envelope import InvocationResult, operation_error, text_result
from solana_mcp.solana_rpc import SolanaRpcError, default_client

logger = logging.getLogger(__name__)


def network_label(rpc_url: str) -> str:
    if "mainnet" in rpc_url:
        return "mainnet-beta"
    if "devnet" in rpc_url:
        return "devnet"
    return "testnet"


def format_epoch_progress(slot_index: int, slots_in_epoch: int) -> str:
    return f"{slot_index / slots_in_epoch * 100:.2f}%"


async def get_network_stats(
    *,
    client=default_client,
    config: SolanaConfig = default_config,
) -> InvocationResult:
    """Report the current slot, its block time, epoch and epoch progress."""
    try:
        slot = await client.get_slot()
        block_time = await client.get_block_time(slot)
        epoch_info: Dict[str, Any] = await client.get_epoch_info()
        progress = format_epoch_progress(epoch_info["slotIndex"], epoch_info["slotsInEpoch"])
    except SolanaRpcError as exc:
        return operation_error("getting network stats", exc)
    except Exception as exc:
        logger.exception("Unexpected error fetching network stats")
        return operation_error("getting network stats", exc)

    return text_result(
        {
            "currentSlot": slot,
            "blockTime": block_time,
            "epoch": epoch_info["epoch"],
            "epochProgress": progress,
            "network": network_label(config.rpc_url),
        }
    )
