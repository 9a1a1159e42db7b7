"""LLM-facing tool implementations."""

from .account import get_account_info, get_balance
from .tokens import get_token_accounts, get_token_info
from .transactions import get_transaction_history
from .network import get_network_stats

__all__ = [
    "get_balance",
    "get_account_info",
    "get_token_accounts",
    "get_transaction_history",
    "get_token_info",
    "get_network_stats",
]
