"""
Tool catalogue shared by every transport.

Maps tool names to their contracts and handlers. The stdio server and the HTTP
gateway both list and call tools through this module, so validation, logging
and metrics behave the same on either channel.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Mapping, Optional, Tuple

from solana_mcp.config import DEFAULT_HISTORY_LIMIT, MAX_HISTORY_LIMIT
from solana_mcp.envelope import InvocationResult
from solana_mcp.metrics import default_metrics
from solana_mcp.registry import INTEGER, STRING, FieldSpec, ToolContract, ToolHandler, ToolRegistry
from solana_mcp.tools import (
    get_account_info,
    get_balance,
    get_network_stats,
    get_token_accounts,
    get_token_info,
    get_transaction_history,
)

__all__ = ["TOOLS", "build_registry", "call_tool", "list_tools", "default_registry"]

logger = logging.getLogger(__name__)


def _address_field(description: str, name: str = "address") -> FieldSpec:
    return FieldSpec(name=name, kind=STRING, description=description)


TOOLS: Tuple[Tuple[ToolContract, ToolHandler], ...] = (
    (
        ToolContract(
            name="get_balance",
            description="Return the SOL balance of a wallet in SOL and lamports.",
            fields=(_address_field("Solana wallet address"),),
        ),
        get_balance,
    ),
    (
        ToolContract(
            name="get_account_info",
            description="Return owner program, executable flag, rent epoch, data size and lamports of an account.",
            fields=(_address_field("Solana account address"),),
        ),
        get_account_info,
    ),
    (
        ToolContract(
            name="get_token_accounts",
            description="List SPL token accounts owned by a wallet with mint and raw balance.",
            fields=(_address_field("Solana wallet address"),),
        ),
        get_token_accounts,
    ),
    (
        ToolContract(
            name="get_transaction_history",
            description="Return recent transaction signatures for an address, newest first.",
            fields=(
                _address_field("Solana wallet address"),
                FieldSpec(
                    name="limit",
                    kind=INTEGER,
                    description="Number of transactions to fetch",
                    required=False,
                    default=DEFAULT_HISTORY_LIMIT,
                    bounds=(1, MAX_HISTORY_LIMIT),
                ),
            ),
        ),
        get_transaction_history,
    ),
    (
        ToolContract(
            name="get_token_info",
            description="Return parsed mint information (supply, decimals, authorities) for a token.",
            fields=(_address_field("Token mint address", name="mintAddress"),),
        ),
        get_token_info,
    ),
    (
        ToolContract(
            name="get_network_stats",
            description="Return current slot, block time, epoch progress and cluster name.",
        ),
        get_network_stats,
    ),
)


def build_registry(tools=TOOLS) -> ToolRegistry:
    """Register every tool; a duplicate name raises RegistrationError."""
    registry = ToolRegistry()
    for contract, handler in tools:
        registry.register(contract, handler)
    return registry


default_registry = build_registry()


def list_tools(registry: ToolRegistry = default_registry) -> List[Dict[str, Any]]:
    """Return a simple list of available tools."""
    return [
        {
            "name": contract.name,
            "description": contract.description,
            "inputSchema": contract.input_schema(),
        }
        for contract in registry.contracts()
    ]


def _log_tool_result(tool_name: str, result: InvocationResult, request_id: Optional[str] = None) -> None:
    if result.is_error:
        logger.warning(
            "tool=%s outcome=error error=%s request_id=%s",
            tool_name,
            result.text,
            request_id,
            extra={"tool": tool_name, "request_id": request_id, "error": result.text},
        )
    else:
        logger.info(
            "tool=%s outcome=success request_id=%s",
            tool_name,
            request_id,
            extra={"tool": tool_name, "request_id": request_id},
        )


async def call_tool(
    tool_name: str,
    arguments: Optional[Mapping[str, Any]] = None,
    *,
    registry: ToolRegistry = default_registry,
    request_id: Optional[str] = None,
) -> InvocationResult:
    """Dispatch to a tool by name, recording the outcome."""
    start = time.perf_counter()
    result = await registry.dispatch(tool_name, arguments)
    duration_ms = (time.perf_counter() - start) * 1000
    _log_tool_result(tool_name, result, request_id)
    if tool_name in registry:
        default_metrics.record_tool(tool_name, success=not result.is_error, duration_ms=duration_ms)
    return result
