"""Transaction history tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from solana_mcp.config import DEFAULT_HISTORY_LIMIT
from solana_mcp.envelope import InvocationResult, operation_error, text_result
from solana_mcp.solana_rpc import PublicKey, SolanaRpcError, default_client

logger = logging.getLogger(__name__)


def _shape_signature(entry: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "signature": entry.get("signature"),
        "slot": entry.get("slot"),
        "blockTime": entry.get("blockTime"),
        "err": entry.get("err"),
        "memo": entry.get("memo"),
    }


async def get_transaction_history(
    address: str,
    limit: int = DEFAULT_HISTORY_LIMIT,
    *,
    client=default_client,
) -> InvocationResult:
    """
    Return up to ``limit`` recent transaction signatures for an address.

    Order is kept as the node returns it (newest first). ``limit`` bounds are
    enforced by the tool contract before this runs.
    """
    try:
        public_key = PublicKey.from_string(address)
        signatures = await client.get_signatures_for_address(public_key, limit=limit)
    except SolanaRpcError as exc:
        return operation_error("getting transaction history", exc)
    except Exception as exc:
        logger.exception("Unexpected error fetching signatures for %s", address)
        return operation_error("getting transaction history", exc)

    transactions: List[Dict[str, Any]] = [_shape_signature(entry) for entry in signatures]
    return text_result({"address": address, "transactions": transactions, "count": len(transactions)})
