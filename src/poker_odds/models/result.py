"""Evaluation and simulation result models."""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum, IntEnum
from typing import Dict, List, Optional

from poker_odds.models.card import Suit


class HandRank(IntEnum):
    """Hand rankings from worst to best."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10


@dataclass(frozen=True, order=True)
class HandResult:
    """A ranked hand.

    Hands compare by tier first, then by the tie-break value. The display
    name never takes part in comparison.
    """
    rank: HandRank
    value: int
    name: str = field(default="", compare=False)


class DrawType(str, Enum):
    """Incomplete hands that one more card can complete."""
    FLUSH = "flush"
    STRAIGHT = "straight"


@dataclass(frozen=True)
class DrawInfo:
    type: DrawType
    outs: int
    suit: Optional[Suit] = None


@dataclass
class HandAnalysis:
    """Current best hand and open draws for the known cards."""
    current_hand: HandResult
    draws: List[DrawInfo] = field(default_factory=list)


def _one_decimal(percent: float) -> float:
    """Round to one decimal with halves going up, as percentages are displayed."""
    return float(Decimal(percent).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class SimulationResult:
    """Aggregate outcome of a Monte Carlo run."""
    wins: int
    ties: int
    simulations: int

    @property
    def losses(self) -> int:
        return self.simulations - self.wins - self.ties

    @property
    def win_rate(self) -> float:
        """Win percentage with ties counted as half a win, one decimal."""
        return _one_decimal((self.wins + self.ties / 2) / self.simulations * 100)

    @property
    def tie_rate(self) -> float:
        return _one_decimal(self.ties / self.simulations * 100)

    @property
    def loss_rate(self) -> float:
        return _one_decimal(self.losses / self.simulations * 100)

    def to_dict(self) -> Dict[str, float]:
        return {
            "win_rate": self.win_rate,
            "wins": self.wins,
            "ties": self.ties,
            "losses": self.losses,
            "simulations": self.simulations,
        }
