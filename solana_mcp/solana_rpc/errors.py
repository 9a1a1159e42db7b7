"""Exceptions raised by the Solana RPC layer."""

from __future__ import annotations

from typing import Any, Optional


class SolanaRpcError(Exception):
    """Base exception for Solana RPC errors."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[int] = None,
        status_code: Optional[int] = None,
        data: Any = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code
        self.data = data


class InvalidAddressError(SolanaRpcError):
    """Raised when an address is not a valid base58 public key."""


class NodeUnreachableError(SolanaRpcError):
    """Raised when the RPC endpoint cannot be reached."""
