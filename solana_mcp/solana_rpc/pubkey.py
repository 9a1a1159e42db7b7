"""Base58 public key decoding for Solana addresses."""

from __future__ import annotations

import re
from dataclasses import dataclass

import base58

from solana_mcp.solana_rpc.errors import InvalidAddressError

PUBLIC_KEY_LENGTH = 32
# Base58 text of a 32-byte key is at most 44 characters.
MAX_BASE58_LENGTH = 44
BASE58_REGEX = re.compile(r"[1-9A-HJ-NP-Za-km-z]+")


@dataclass(frozen=True, slots=True)
class PublicKey:
    """A decoded 32-byte Solana public key."""

    raw: bytes

    @classmethod
    def from_string(cls, value: str) -> "PublicKey":
        if not isinstance(value, str) or len(value) > MAX_BASE58_LENGTH:
            raise InvalidAddressError("Invalid public key input")
        # b58decode tolerates surrounding whitespace; the key text may not.
        if not BASE58_REGEX.fullmatch(value):
            raise InvalidAddressError("Invalid public key input")
        try:
            decoded = base58.b58decode(value)
        except ValueError as exc:
            raise InvalidAddressError("Invalid public key input") from exc
        if len(decoded) != PUBLIC_KEY_LENGTH:
            raise InvalidAddressError("Invalid public key input")
        return cls(decoded)

    def __str__(self) -> str:
        return base58.b58encode(self.raw).decode("ascii")


def is_valid_solana_address(address: object) -> bool:
    """Format check that never raises."""
    try:
        PublicKey.from_string(address)  # type: ignore[arg-type]
    except InvalidAddressError:
        return False
    return True


# SPL Token program; every classic token account is owned by it.
TOKEN_PROGRAM_ID = PublicKey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
