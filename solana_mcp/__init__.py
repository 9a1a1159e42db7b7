"""
Read-only Solana MCP server package.

This package exposes LLM-friendly tools backed by a small, read-only subset of
the Solana JSON-RPC API. See DESIGN.md for full details.
"""

__all__ = ["config"]
