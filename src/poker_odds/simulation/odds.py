"""Monte Carlo odds calculation and current-hand analysis."""

import logging
import random
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Sequence, Tuple

from poker_odds.models.card import Card
from poker_odds.models.result import (
    DrawInfo, DrawType, HandAnalysis, HandResult, SimulationResult
)
from poker_odds.simulation.deck import Deck
from poker_odds.simulation.evaluator import HandEvaluator

logger = logging.getLogger(__name__)

BOARD_SIZE = 5
FLUSH_DRAW_OUTS = 9
STRAIGHT_DRAW_OUTS = 8


def _run_trials(args) -> Tuple[int, int]:
    """Worker entry point: run a chunk of trials, return (wins, ties)."""
    player_cards, community_cards, num_opponents, trials, seed = args
    rng = random.Random(seed)
    wins = ties = 0
    for _ in range(trials):
        outcome = OddsCalculator.simulate_hand(player_cards, community_cards,
                                               num_opponents, rng)
        if outcome == "win":
            wins += 1
        elif outcome == "tie":
            ties += 1
    return wins, ties


class OddsCalculator:
    """Estimates win/tie/loss rates by completing unknown cards at random."""

    @staticmethod
    def calculate_odds(
        player_cards: Sequence[Card],
        community_cards: Sequence[Card],
        num_opponents: int,
        num_simulations: int = 10000,
        seed: Optional[int] = None,
        workers: int = 1,
    ) -> SimulationResult:
        """Run the Monte Carlo simulation.

        Args:
            player_cards: The player's two hole cards.
            community_cards: Known community cards (0-5).
            num_opponents: Opponents holding two random cards each.
            num_simulations: Number of trials.
            seed: Seed for reproducible runs.
            workers: Worker processes; trials are split into one chunk each.

        Returns:
            Aggregate tallies over all trials.

        Raises:
            ValueError: If the inputs cannot form a legal deal. No trial is
                run in that case.
        """
        player_cards = list(player_cards)
        community_cards = list(community_cards)
        OddsCalculator._validate(player_cards, community_cards)

        if num_opponents < 0:
            raise ValueError(f"Number of opponents cannot be negative: {num_opponents}")
        if num_simulations < 1:
            raise ValueError(f"Number of simulations must be positive: {num_simulations}")

        needed = BOARD_SIZE - len(community_cards) + 2 * num_opponents
        available = 52 - len(player_cards) - len(community_cards)
        if needed > available:
            raise ValueError(
                f"Not enough cards for {num_opponents} opponents. "
                f"Need {needed}, have {available}"
            )

        workers = max(1, min(workers, num_simulations))
        logger.debug("Simulating %d trials vs %d opponents (workers=%d, seed=%s)",
                     num_simulations, num_opponents, workers, seed)

        if workers == 1:
            wins, ties = _run_trials(
                (player_cards, community_cards, num_opponents, num_simulations, seed)
            )
        else:
            chunk = num_simulations // workers
            args_list = []
            for i in range(workers):
                trials = chunk if i < workers - 1 else num_simulations - chunk * (workers - 1)
                chunk_seed = None if seed is None else seed + i + 1
                args_list.append(
                    (player_cards, community_cards, num_opponents, trials, chunk_seed)
                )
            wins = ties = 0
            with ProcessPoolExecutor(max_workers=workers) as ex:
                for w, t in ex.map(_run_trials, args_list):
                    wins += w
                    ties += t

        result = SimulationResult(wins=wins, ties=ties, simulations=num_simulations)
        logger.debug("Simulation done: %d wins, %d ties, %d losses (%.1f%%)",
                     result.wins, result.ties, result.losses, result.win_rate)
        return result

    @staticmethod
    def simulate_hand(
        player_cards: List[Card],
        community_cards: List[Card],
        num_opponents: int,
        rng: Optional[random.Random] = None,
    ) -> str:
        """Play out one random deal.

        Returns:
            "win", "tie" or "loss" for the player.
        """
        deck = Deck(player_cards + community_cards)
        deck.shuffle(rng)

        board = community_cards + deck.deal(BOARD_SIZE - len(community_cards))
        player_hand = HandEvaluator.evaluate(player_cards + board)

        best_opponent: Optional[HandResult] = None
        for _ in range(num_opponents):
            opponent_hand = HandEvaluator.evaluate(deck.deal(2) + board)
            if best_opponent is None or opponent_hand > best_opponent:
                best_opponent = opponent_hand

        if best_opponent is None or player_hand > best_opponent:
            return "win"
        if player_hand == best_opponent:
            return "tie"
        return "loss"

    @staticmethod
    def analyze_hand(
        player_cards: Sequence[Card],
        community_cards: Sequence[Card],
        locale: str = "en",
    ) -> HandAnalysis:
        """Evaluate the known cards as they stand and list open draws."""
        player_cards = list(player_cards)
        community_cards = list(community_cards)
        OddsCalculator._validate(player_cards, community_cards)

        all_cards = player_cards + community_cards
        return HandAnalysis(
            current_hand=HandEvaluator.evaluate(all_cards, locale),
            draws=OddsCalculator.detect_draws(all_cards, len(community_cards)),
        )

    @staticmethod
    def detect_draws(cards: Sequence[Card], num_community: int) -> List[DrawInfo]:
        """Detect flush and straight draws.

        The straight check only looks for four consecutive distinct ranks
        and reports the first such run; gutshots are not detected and
        open-ended and one-way draws both count 8 outs.
        """
        if num_community >= BOARD_SIZE:
            return []

        draws: List[DrawInfo] = []

        suit_counts = {}
        for card in cards:
            suit_counts[card.suit] = suit_counts.get(card.suit, 0) + 1
        for suit, count in suit_counts.items():
            if count == 4:
                draws.append(DrawInfo(DrawType.FLUSH, FLUSH_DRAW_OUTS, suit))

        values = sorted({c.value for c in cards}, reverse=True)
        for i in range(len(values) - 3):
            window = values[i:i + 4]
            if all(window[j - 1] - window[j] == 1 for j in range(1, 4)):
                draws.append(DrawInfo(DrawType.STRAIGHT, STRAIGHT_DRAW_OUTS))
                break

        return draws

    @staticmethod
    def _validate(player_cards: List[Card], community_cards: List[Card]) -> None:
        if len(player_cards) != 2:
            raise ValueError(f"Player must have exactly 2 cards, got {len(player_cards)}")
        if len(community_cards) > BOARD_SIZE:
            raise ValueError(
                f"At most {BOARD_SIZE} community cards allowed, got {len(community_cards)}"
            )
        known = player_cards + community_cards
        if len(set(known)) != len(known):
            raise ValueError("Duplicate card among player and community cards")
