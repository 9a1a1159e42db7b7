"""JSON-RPC client wrappers for the Solana RPC API."""

from .errors import InvalidAddressError, NodeUnreachableError, SolanaRpcError
from .pubkey import TOKEN_PROGRAM_ID, PublicKey, is_valid_solana_address
from .client import SolanaRpcClient, default_client

__all__ = [
    "SolanaRpcClient",
    "SolanaRpcError",
    "InvalidAddressError",
    "NodeUnreachableError",
    "PublicKey",
    "TOKEN_PROGRAM_ID",
    "is_valid_solana_address",
    "default_client",
]
