import dataclasses

from solana_mcp.config import (
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_TIMEOUT_SECONDS,
    MAINNET_BETA_URL,
    MAX_HISTORY_LIMIT,
    SolanaConfig,
    _load_timeout,
    load_config,
    load_rpc_url,
)
from solana_mcp.mcp import build_registry


def test_rpc_url_defaults_to_mainnet_beta(monkeypatch):
    monkeypatch.delenv("SOLANA_RPC_URL", raising=False)
    assert load_rpc_url() == MAINNET_BETA_URL


def test_rpc_url_override(monkeypatch):
    monkeypatch.setenv("SOLANA_RPC_URL", " https://api.devnet.solana.com ")
    assert load_rpc_url() == "https://api.devnet.solana.com"


def test_blank_rpc_url_falls_back(monkeypatch):
    monkeypatch.setenv("SOLANA_RPC_URL", "   ")
    assert load_rpc_url() == MAINNET_BETA_URL


def test_load_timeout_invalid_env(monkeypatch):
    monkeypatch.setenv("SOLANA_RPC_TIMEOUT", "not-a-number")
    assert _load_timeout() == DEFAULT_TIMEOUT_SECONDS


def test_load_timeout_valid_env(monkeypatch):
    monkeypatch.setenv("SOLANA_RPC_TIMEOUT", "5.5")
    assert _load_timeout() == 5.5


def test_load_config_reads_environment(monkeypatch):
    monkeypatch.setenv("SOLANA_RPC_URL", "http://localhost:8899")
    monkeypatch.setenv("SOLANA_RPC_TIMEOUT", "2")
    cfg = load_config()
    assert cfg.rpc_url == "http://localhost:8899"
    assert cfg.timeout == 2.0
    assert cfg.commitment == "confirmed"


def test_config_is_immutable():
    cfg = SolanaConfig()
    try:
        cfg.rpc_url = "http://elsewhere"  # type: ignore[misc]
    except AttributeError:
        pass
    else:
        raise AssertionError("SolanaConfig should be frozen")


def test_history_limits_drive_the_tool_contract():
    contract = build_registry().get("get_transaction_history").contract
    limit = contract.input_schema()["properties"]["limit"]
    assert limit["default"] == DEFAULT_HISTORY_LIMIT
    assert (limit["minimum"], limit["maximum"]) == (1, MAX_HISTORY_LIMIT)
    assert {f.name for f in dataclasses.fields(SolanaConfig)} == {
        "rpc_url",
        "timeout",
        "commitment",
        "log_level",
        "log_format",
    }
