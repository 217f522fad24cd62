"""Deck management for the odds simulation."""

import random
from typing import Iterable, List, Optional

from poker_odds.models.card import Card, Rank, Suit


class Deck:
    """The 52-card deck minus any cards already known to the table."""

    def __init__(self, exclude: Iterable[Card] = ()):
        """Build the deck without the excluded cards.

        Args:
            exclude: Cards that are already dealt (hole or community cards).
        """
        excluded = set(exclude)
        self.cards: List[Card] = []
        for suit in Suit:
            for rank in Rank:
                card = Card(rank, suit)
                if card not in excluded:
                    self.cards.append(card)

    def shuffle(self, rng: Optional[random.Random] = None):
        """Shuffle the deck in place.

        Args:
            rng: Random source to draw from; the module-level generator
                is used when omitted.
        """
        (rng or random).shuffle(self.cards)

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > len(self.cards):
            raise ValueError(f"Not enough cards in deck. Need {count}, have {len(self.cards)}")

        dealt = self.cards[:count]
        del self.cards[:count]
        return dealt

    @property
    def remaining(self) -> int:
        """Get the number of remaining cards."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
