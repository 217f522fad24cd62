"""Card, Rank, and Suit models."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Union


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "h": cls.HEARTS, "Hearts": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "Diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "c": cls.CLUBS, "Clubs": cls.CLUBS, "♣": cls.CLUBS,
            "s": cls.SPADES, "Spades": cls.SPADES, "♠": cls.SPADES,
        }
        if s in mapping:
            return mapping[s]
        for key in (s.lower(), s.capitalize()):
            if key in mapping:
                return mapping[key]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}[self.value]


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def numeric_value(self) -> int:
        return RANK_VALUES[self]

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        for r in cls:
            if r.value == c.upper():
                return r
        if c == "10":
            return cls.TEN
        raise ValueError(f"Unknown rank: {c}")


RANK_VALUES = {
    Rank.TWO: 2, Rank.THREE: 3, Rank.FOUR: 4, Rank.FIVE: 5, Rank.SIX: 6,
    Rank.SEVEN: 7, Rank.EIGHT: 8, Rank.NINE: 9, Rank.TEN: 10,
    Rank.JACK: 11, Rank.QUEEN: 12, Rank.KING: 13, Rank.ACE: 14,
}

# One card token: rank (10 or a single symbol) followed by a suit letter or symbol
CARD_PATTERN = re.compile(r"(10|[2-9TJQKAtjqka])([hdcsHDCS♥♦♣♠])")


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    rank: Rank
    suit: Suit

    @property
    def value(self) -> int:
        return RANK_VALUES[self.rank]

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '2c', '10♠'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    def __repr__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.symbol}"

    def to_short(self) -> str:
        """Return short string like 'Ah'."""
        return f"{self.rank.value}{self.suit.value}"


def parse_cards(text: Union[str, Iterable[str]]) -> List[Card]:
    """Parse user-supplied cards and reject malformed or repeated input.

    Accepts a single string ("AsKd", "As Kd", "10h,Jh") or an iterable of
    card labels.

    Raises:
        ValueError: On unknown symbols, stray characters or duplicate cards.
    """
    if isinstance(text, str):
        compact = re.sub(r"[\s,]+", "", text)
        tokens = []
        pos = 0
        while pos < len(compact):
            match = CARD_PATTERN.match(compact, pos)
            if not match:
                raise ValueError(f"Cannot parse card at '{compact[pos:]}'")
            tokens.append(match.group(0))
            pos = match.end()
    else:
        tokens = list(text)

    cards: List[Card] = []
    for token in tokens:
        card = Card.parse(token)
        if card in cards:
            raise ValueError(f"Duplicate card: {card.to_short()}")
        cards.append(card)
    return cards
