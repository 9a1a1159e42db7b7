"""Run the Solana MCP server over stdio."""

from __future__ import annotations

import asyncio

from solana_mcp.logging_config import configure_logging
from solana_mcp.stdio import serve


def main() -> None:
    configure_logging()
    asyncio.run(serve())


if __name__ == "__main__":
    main()
