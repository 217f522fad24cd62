"""Plain text formatting for terminal output."""

from typing import Iterable, List

from poker_odds.models.card import Card
from poker_odds.models.result import DrawInfo, DrawType, HandResult, SimulationResult

DRAW_LABELS = {
    "en": {DrawType.FLUSH: "Flush draw ({outs} outs)",
           DrawType.STRAIGHT: "Straight draw ({outs} outs)"},
    "he": {DrawType.FLUSH: "draw לצבע ({outs} קלפים)",
           DrawType.STRAIGHT: "draw לרצף ({outs} קלפים)"},
    "zh": {DrawType.FLUSH: "同花听牌（{outs} 张出牌）",
           DrawType.STRAIGHT: "顺子听牌（{outs} 张出牌）"},
}


class TextFormatter:
    """Format evaluation and simulation results as plain text."""

    def __init__(self, locale: str = "en"):
        self.locale = locale if locale in DRAW_LABELS else "en"

    def format_cards(self, cards: Iterable[Card]) -> str:
        cards = list(cards)
        if not cards:
            return "-"
        return " ".join(str(c) for c in cards)

    def format_hand_result(self, result: HandResult) -> str:
        return f"{result.name} (rank {int(result.rank)}, value {result.value})"

    def format_draw(self, draw: DrawInfo) -> str:
        return DRAW_LABELS[self.locale][draw.type].format(outs=draw.outs)

    def format_draws(self, draws: List[DrawInfo]) -> str:
        if not draws:
            return "-"
        return ", ".join(self.format_draw(d) for d in draws)

    def format_odds(self, result: SimulationResult) -> str:
        """One-line summary of a simulation run."""
        return (f"Win {result.win_rate:.1f}%  |  "
                f"W/T/L {result.wins}/{result.ties}/{result.losses}  |  "
                f"{result.simulations} simulations")
