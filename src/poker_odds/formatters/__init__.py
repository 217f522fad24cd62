"""Output formatting for terminal and tables."""

from poker_odds.formatters.text import TextFormatter
from poker_odds.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
