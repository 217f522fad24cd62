"""Tests for card models and card parsing."""

import dataclasses

import pytest

from poker_odds.models.card import Card, Rank, Suit, parse_cards


class TestCard:
    """Tests for the Card model."""

    def test_parse_short_form(self):
        card = Card.parse("Ah")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.HEARTS
        assert card.value == 14

    def test_parse_ten_forms(self):
        assert Card.parse("Ts") == Card.parse("10s")
        assert Card.parse("10♠") == Card(Rank.TEN, Suit.SPADES)

    def test_equality_and_hash(self):
        """Cards are equal iff rank and suit match."""
        assert Card(Rank.KING, Suit.CLUBS) == Card.parse("Kc")
        assert Card(Rank.KING, Suit.CLUBS) != Card.parse("Kd")
        assert len({Card.parse("Kc"), Card.parse("Kc"), Card.parse("Kd")}) == 2

    def test_card_is_immutable(self):
        card = Card.parse("2c")
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.rank = Rank.ACE

    def test_string_forms(self):
        card = Card.parse("As")
        assert str(card) == "A♠"
        assert repr(card) == "As"
        assert card.to_short() == "As"

    def test_rank_values(self):
        assert Rank.TWO.numeric_value == 2
        assert Rank.TEN.numeric_value == 10
        assert Rank.ACE.numeric_value == 14

    def test_suit_names_any_case(self):
        assert Suit.from_symbol("hearts") == Suit.HEARTS
        assert Suit.from_symbol("SPADES") == Suit.SPADES
        assert Suit.from_symbol("Diamonds") == Suit.DIAMONDS
        assert Suit.from_symbol("C") == Suit.CLUBS

    def test_unknown_symbols(self):
        with pytest.raises(ValueError):
            Card.parse("1h")
        with pytest.raises(ValueError):
            Card.parse("Ax")


class TestParseCards:
    """Tests for parsing user card input."""

    def test_compact_string(self):
        assert parse_cards("AsKd") == [Card.parse("As"), Card.parse("Kd")]

    def test_separated_string(self):
        assert parse_cards("As Kd, 10h") == [
            Card.parse("As"), Card.parse("Kd"), Card.parse("Th"),
        ]

    def test_symbols_and_lowercase(self):
        assert parse_cards("A♠ k♦") == [Card.parse("As"), Card.parse("Kd")]

    def test_label_list(self):
        assert parse_cards(["Qh", "Jh"]) == [Card.parse("Qh"), Card.parse("Jh")]

    def test_empty_string(self):
        assert parse_cards("") == []

    def test_duplicate_rejected(self):
        with pytest.raises(ValueError, match="Duplicate card"):
            parse_cards("AsKdAs")

    def test_garbage_rejected(self):
        with pytest.raises(ValueError):
            parse_cards("AsXx")
        with pytest.raises(ValueError):
            parse_cards("Ah1")
