"""Logging setup shared by the stdio and HTTP entry points."""

from __future__ import annotations

import json
import logging
import sys

from solana_mcp.config import SolanaConfig, default_config

_EXTRA_FIELDS = ("tool", "request_id", "error")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in _EXTRA_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(config: SolanaConfig = default_config) -> None:
    """
    Route all log output to stderr.

    stdout carries the MCP data channel when running over stdio, so nothing
    else may be written there.
    """
    handler = logging.StreamHandler(sys.stderr)
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, handlers=[handler], force=True)
