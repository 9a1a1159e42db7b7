"""SPL token tools."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from solana_mcp.envelope import InvocationResult, error_result, operation_error, text_result
from solana_mcp.solana_rpc import TOKEN_PROGRAM_ID, PublicKey, SolanaRpcError, default_client

logger = logging.getLogger(__name__)

# Fixed offsets of the classic SPL token account layout.
MINT_OFFSET = 0
MINT_LENGTH = 32
AMOUNT_OFFSET = 64
AMOUNT_LENGTH = 8


class TokenAccountLayoutError(ValueError):
    """Raised when token account data is too short for the fixed layout."""


def decode_token_account(data: bytes) -> Tuple[str, str]:
    """
    Return ``(mint_hex, amount)`` from raw token account data.

    The amount is the little-endian u64 at offset 64, rendered as a decimal
    string so that values above 2**53 survive JSON consumers.
    """
    required = AMOUNT_OFFSET + AMOUNT_LENGTH
    if len(data) < required:
        raise TokenAccountLayoutError(
            f"token account data is {len(data)} bytes, expected at least {required}"
        )
    mint = data[MINT_OFFSET : MINT_OFFSET + MINT_LENGTH].hex()
    amount = int.from_bytes(data[AMOUNT_OFFSET:required], "little")
    return mint, str(amount)


def _shape_token_accounts(entries: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    accounts: List[Dict[str, str]] = []
    for entry in entries:
        mint, balance = decode_token_account(entry["account"]["data"])
        accounts.append({"account": str(entry["pubkey"]), "mint": mint, "balance": balance})
    return accounts


async def get_token_accounts(address: str, *, client=default_client) -> InvocationResult:
    """List every SPL token account owned by a wallet with its mint and raw balance."""
    try:
        owner = PublicKey.from_string(address)
        entries = await client.get_token_accounts_by_owner(owner, program_id=TOKEN_PROGRAM_ID)
        accounts = _shape_token_accounts(entries)
    except (SolanaRpcError, TokenAccountLayoutError) as exc:
        return operation_error("getting token accounts", exc)
    except Exception as exc:
        logger.exception("Unexpected error fetching token accounts for %s", address)
        return operation_error("getting token accounts", exc)

    return text_result({"address": address, "tokenAccounts": accounts, "count": len(accounts)})


async def get_token_info(mintAddress: str, *, client=default_client) -> InvocationResult:  # noqa: N803
    """Return the parsed mint info (supply, decimals, authorities) of a token."""
    try:
        mint_key = PublicKey.from_string(mintAddress)
        reply = await client.get_parsed_account_info(mint_key)
    except SolanaRpcError as exc:
        return operation_error("getting token info", exc)
    except Exception as exc:
        logger.exception("Unexpected error fetching token info for %s", mintAddress)
        return operation_error("getting token info", exc)

    account = reply.get("value") if isinstance(reply, dict) else None
    if not account:
        return error_result(f"Token {mintAddress} not found")

    data = account.get("data")
    if not isinstance(data, dict) or "parsed" not in data:
        return error_result(f"Invalid token account: {mintAddress}")

    parsed = data["parsed"]
    info = parsed.get("info") if isinstance(parsed, dict) else None
    return text_result({"mintAddress": mintAddress, "info": info})
