"""Hand evaluation: best five-card hand out of five to seven cards."""

from typing import Dict, Iterable, List, Sequence, Tuple, TypeVar

from poker_odds.models.card import Card
from poker_odds.models.result import HandRank, HandResult

T = TypeVar("T")

HAND_NAMES: Dict[str, Dict[HandRank, str]] = {
    "en": {
        HandRank.HIGH_CARD: "High Card",
        HandRank.PAIR: "Pair",
        HandRank.TWO_PAIR: "Two Pair",
        HandRank.THREE_OF_A_KIND: "Three of a Kind",
        HandRank.STRAIGHT: "Straight",
        HandRank.FLUSH: "Flush",
        HandRank.FULL_HOUSE: "Full House",
        HandRank.FOUR_OF_A_KIND: "Four of a Kind",
        HandRank.STRAIGHT_FLUSH: "Straight Flush",
        HandRank.ROYAL_FLUSH: "Royal Flush",
    },
    "he": {
        HandRank.HIGH_CARD: "קלף גבוה",
        HandRank.PAIR: "זוג",
        HandRank.TWO_PAIR: "שני זוגות",
        HandRank.THREE_OF_A_KIND: "שלישייה",
        HandRank.STRAIGHT: "רצף",
        HandRank.FLUSH: "צבע",
        HandRank.FULL_HOUSE: "בית מלא",
        HandRank.FOUR_OF_A_KIND: "רביעייה",
        HandRank.STRAIGHT_FLUSH: "רצף צבע",
        HandRank.ROYAL_FLUSH: "רויאל פלאש",
    },
    "zh": {
        HandRank.HIGH_CARD: "高牌",
        HandRank.PAIR: "一对",
        HandRank.TWO_PAIR: "两对",
        HandRank.THREE_OF_A_KIND: "三条",
        HandRank.STRAIGHT: "顺子",
        HandRank.FLUSH: "同花",
        HandRank.FULL_HOUSE: "葫芦",
        HandRank.FOUR_OF_A_KIND: "四条",
        HandRank.STRAIGHT_FLUSH: "同花顺",
        HandRank.ROYAL_FLUSH: "皇家同花顺",
    },
}


def combinations(items: Sequence[T], k: int) -> List[List[T]]:
    """Every k-card subset of items, in input order, fully materialized."""
    if k < 1 or k > len(items):
        return []
    if k == 1:
        return [[item] for item in items]
    if k == len(items):
        return [list(items)]

    result = []
    for i in range(len(items) - k + 1):
        head = items[i]
        for tail in combinations(items[i + 1:], k - 1):
            result.append([head] + tail)
    return result


class HandEvaluator:
    """Evaluates poker hands."""

    @staticmethod
    def evaluate(cards: Iterable[Card], locale: str = "en") -> HandResult:
        """Evaluate a poker hand.

        Six and seven card hands are scored as the best of all their
        five-card subsets. Input is trusted: duplicate cards and sizes above
        seven are not checked.

        Args:
            cards: Cards to evaluate (normally 5-7).
            locale: Language for the hand name.

        Returns:
            The ranked hand. Fewer than five cards always rank as high card.
        """
        cards = list(cards)

        if len(cards) < 5:
            high = max((c.value for c in cards), default=0)
            return HandEvaluator._result(HandRank.HIGH_CARD, high, locale)

        if len(cards) == 5:
            return HandEvaluator._evaluate_five(cards, locale)

        best = None
        for combo in combinations(cards, 5):
            result = HandEvaluator._evaluate_five(combo, locale)
            if best is None or result > best:
                best = result
        return best

    @staticmethod
    def _evaluate_five(cards: List[Card], locale: str) -> HandResult:
        """Evaluate exactly 5 cards."""
        values = sorted((c.value for c in cards), reverse=True)

        is_flush = len({c.suit for c in cards}) == 1
        is_straight, high_card = HandEvaluator._check_straight(values)

        if is_flush and is_straight and values[0] == 14 and values[1] == 13:
            return HandEvaluator._result(HandRank.ROYAL_FLUSH, high_card, locale)

        if is_flush and is_straight:
            return HandEvaluator._result(HandRank.STRAIGHT_FLUSH, high_card, locale)

        # Count rank frequencies
        rank_counts: Dict[int, int] = {}
        for v in values:
            rank_counts[v] = rank_counts.get(v, 0) + 1
        counts = sorted(rank_counts.values(), reverse=True)

        if counts[0] == 4:
            rank = HandRank.FOUR_OF_A_KIND
        elif counts[0] == 3 and counts[1] == 2:
            rank = HandRank.FULL_HOUSE
        elif is_flush:
            return HandEvaluator._result(HandRank.FLUSH, values[0], locale)
        elif is_straight:
            return HandEvaluator._result(HandRank.STRAIGHT, high_card, locale)
        elif counts[0] == 3:
            rank = HandRank.THREE_OF_A_KIND
        elif counts[0] == 2 and counts[1] == 2:
            rank = HandRank.TWO_PAIR
        elif counts[0] == 2:
            rank = HandRank.PAIR
        else:
            rank = HandRank.HIGH_CARD

        return HandEvaluator._result(rank, HandEvaluator._kicker_value(rank_counts), locale)

    @staticmethod
    def _check_straight(values: List[int]) -> Tuple[bool, int]:
        """Check if five descending values form a straight.

        Returns:
            Tuple of (is_straight, high_card). The wheel plays 5-high.
        """
        if all(values[i] - values[i + 1] == 1 for i in range(len(values) - 1)):
            return True, values[0]

        if values == [14, 5, 4, 3, 2]:
            return True, 5

        return False, 0

    @staticmethod
    def _kicker_value(rank_counts: Dict[int, int]) -> int:
        """Fold ranks into one base-15 number, grouped ranks first."""
        ordered = sorted(rank_counts, key=lambda v: (-rank_counts[v], -v))
        value = 0
        for v in ordered:
            value = value * 15 + v
        return value

    @staticmethod
    def _result(rank: HandRank, value: int, locale: str) -> HandResult:
        return HandResult(rank, value, HandEvaluator.get_rank_name(rank, locale))

    @staticmethod
    def compare(hand1: HandResult, hand2: HandResult) -> int:
        """Compare two evaluated hands.

        Returns:
            1 if hand1 wins, -1 if hand2 wins, 0 if tie.
        """
        if hand1 > hand2:
            return 1
        if hand1 < hand2:
            return -1
        return 0

    @staticmethod
    def get_rank_name(rank: HandRank, locale: str = "en") -> str:
        """Get a human-readable name for a hand rank."""
        names = HAND_NAMES.get(locale, HAND_NAMES["en"])
        return names[rank]
