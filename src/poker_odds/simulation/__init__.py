"""Hand evaluation and odds simulation."""

from poker_odds.simulation.deck import Deck
from poker_odds.simulation.evaluator import HandEvaluator, combinations
from poker_odds.simulation.odds import OddsCalculator

evaluate_hand = HandEvaluator.evaluate
calculate_odds = OddsCalculator.calculate_odds
analyze_hand = OddsCalculator.analyze_hand

__all__ = [
    "Deck", "HandEvaluator", "OddsCalculator", "combinations",
    "evaluate_hand", "calculate_odds", "analyze_hand",
]
