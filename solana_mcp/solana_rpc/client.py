"""
Thin JSON-RPC client for the read-only Solana RPC methods the tools need.

All methods are read-only. Transport failures and JSON-RPC error replies are
mapped to internal exceptions that the tool layer turns into user-facing
messages.
"""

from __future__ import annotations

import base64
import itertools
import logging
from typing import Any, Dict, List, Optional

import httpx

from solana_mcp.config import SolanaConfig, default_config
from solana_mcp.solana_rpc.errors import NodeUnreachableError, SolanaRpcError
from solana_mcp.solana_rpc.pubkey import TOKEN_PROGRAM_ID, PublicKey

logger = logging.getLogger(__name__)


def _decode_account_data(data: Any) -> bytes:
    """Decode the ``[payload, "base64"]`` pair the node returns for binary accounts."""
    if isinstance(data, list) and len(data) == 2 and data[1] == "base64":
        try:
            return base64.b64decode(data[0])
        except (TypeError, ValueError) as exc:
            raise SolanaRpcError("Malformed account data in RPC response.") from exc
    if isinstance(data, str):
        return base64.b64decode(data)
    raise SolanaRpcError("Unexpected account data encoding in RPC response.")


def _binary_account(value: Dict[str, Any]) -> Dict[str, Any]:
    account = dict(value)
    account["data"] = _decode_account_data(value.get("data"))
    return account


class SolanaRpcClient:
    """Async client for the limited Solana JSON-RPC surface."""

    def __init__(
        self,
        config: SolanaConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None
        self._ids = itertools.count(1)

    @property
    def rpc_url(self) -> str:
        return self.config.rpc_url

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _process_response(self, response: httpx.Response, method: str) -> Any:
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and isinstance(body.get("error"), dict):
            error = body["error"]
            message = error.get("message") or "Solana RPC error."
            raise SolanaRpcError(
                str(message),
                code=error.get("code"),
                status_code=response.status_code,
                data=error.get("data"),
            )

        if response.status_code >= 400:
            raise SolanaRpcError(
                f"{response.status_code} error from RPC endpoint for {method}",
                status_code=response.status_code,
            )

        if not isinstance(body, dict) or "result" not in body:
            raise SolanaRpcError(
                "Unexpected response from RPC endpoint.", status_code=response.status_code
            )
        return body["result"]

    async def _call(self, method: str, params: Optional[List[Any]] = None) -> Any:
        client = await self._get_client()
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params or [],
        }
        try:
            response = await client.post(self.config.rpc_url, json=payload)
        except httpx.RequestError as exc:
            logger.warning("Solana RPC unreachable for method %s", method)
            raise NodeUnreachableError(f"RPC endpoint unreachable: {exc}") from exc
        return self._process_response(response, method)

    def _commitment(self) -> Dict[str, Any]:
        return {"commitment": self.config.commitment}

    async def get_balance(self, key: PublicKey) -> int:
        """Return the lamport balance of an account."""
        result = await self._call("getBalance", [str(key), self._commitment()])
        return int(result["value"])

    async def get_account_info(self, key: PublicKey) -> Optional[Dict[str, Any]]:
        """Return the raw account (``data`` decoded to bytes) or None if absent."""
        result = await self._call(
            "getAccountInfo", [str(key), {**self._commitment(), "encoding": "base64"}]
        )
        value = result.get("value")
        if value is None:
            return None
        return _binary_account(value)

    async def get_token_accounts_by_owner(
        self, owner: PublicKey, *, program_id: PublicKey = TOKEN_PROGRAM_ID
    ) -> List[Dict[str, Any]]:
        """List ``{pubkey, account}`` entries owned by ``owner`` under ``program_id``."""
        result = await self._call(
            "getTokenAccountsByOwner",
            [
                str(owner),
                {"programId": str(program_id)},
                {**self._commitment(), "encoding": "base64"},
            ],
        )
        entries: List[Dict[str, Any]] = []
        for item in result.get("value") or []:
            entries.append({"pubkey": item["pubkey"], "account": _binary_account(item["account"])})
        return entries

    async def get_signatures_for_address(
        self, key: PublicKey, *, limit: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """Most recent confirmed signatures touching ``key``, newest first."""
        options: Dict[str, Any] = self._commitment()
        if limit is not None:
            options["limit"] = limit
        result = await self._call("getSignaturesForAddress", [str(key), options])
        return list(result or [])

    async def get_parsed_account_info(self, key: PublicKey) -> Dict[str, Any]:
        """
        Fetch an account with ``jsonParsed`` encoding.

        ``value.data`` is a dict with a ``parsed`` entry when the node knows
        the owning program, otherwise the raw ``[payload, encoding]`` pair.
        """
        result = await self._call(
            "getAccountInfo", [str(key), {**self._commitment(), "encoding": "jsonParsed"}]
        )
        return {"context": result.get("context"), "value": result.get("value")}

    async def get_slot(self) -> int:
        return int(await self._call("getSlot", [self._commitment()]))

    async def get_block_time(self, slot: int) -> Optional[int]:
        result = await self._call("getBlockTime", [slot])
        return None if result is None else int(result)

    async def get_epoch_info(self) -> Dict[str, Any]:
        return await self._call("getEpochInfo", [self._commitment()])


default_client = SolanaRpcClient()
