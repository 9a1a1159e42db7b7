"""
Configuration helpers for the Solana MCP server.

This module centralizes RPC endpoint selection, default timeouts and logging
settings. Everything is read from the environment once, at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

MAINNET_BETA_URL = "https://api.mainnet-beta.solana.com"
RPC_URL_ENV_VAR = "SOLANA_RPC_URL"
TIMEOUT_ENV_VAR = "SOLANA_RPC_TIMEOUT"

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_COMMITMENT = "confirmed"

# Transaction history bounds
DEFAULT_HISTORY_LIMIT = 10
MAX_HISTORY_LIMIT = 100

LOG_LEVEL = os.getenv("SOLANA_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("SOLANA_MCP_LOG_FORMAT", "json")  # json or plain


def load_rpc_url() -> str:
    """Return the RPC endpoint override, or the public mainnet-beta endpoint."""
    raw_url = os.getenv(RPC_URL_ENV_VAR)
    if raw_url and raw_url.strip():
        return raw_url.strip()
    return MAINNET_BETA_URL


def _load_timeout() -> float:
    raw_timeout = os.getenv(TIMEOUT_ENV_VAR)
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return DEFAULT_TIMEOUT_SECONDS
    return DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True, slots=True)
class SolanaConfig:
    """Runtime configuration for Solana RPC access."""

    rpc_url: str = MAINNET_BETA_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    commitment: str = DEFAULT_COMMITMENT
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


def load_config() -> SolanaConfig:
    return SolanaConfig(rpc_url=load_rpc_url(), timeout=_load_timeout())


default_config = load_config()
