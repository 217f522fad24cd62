"""Data models for poker odds."""

from poker_odds.models.card import Card, Rank, Suit, RANK_VALUES, parse_cards
from poker_odds.models.result import (
    HandRank, HandResult, DrawType, DrawInfo, HandAnalysis, SimulationResult
)

__all__ = [
    "Card", "Rank", "Suit", "RANK_VALUES", "parse_cards",
    "HandRank", "HandResult", "DrawType", "DrawInfo",
    "HandAnalysis", "SimulationResult",
]
