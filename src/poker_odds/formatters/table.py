"""Rich table formatting for terminal output."""

from typing import List

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from poker_odds.models.card import Card
from poker_odds.models.result import HandAnalysis, HandResult, SimulationResult
from poker_odds.formatters.text import TextFormatter


def win_rate_style(win_rate: float) -> str:
    """Colour for a win percentage."""
    if win_rate >= 70:
        return "green"
    if win_rate >= 40:
        return "yellow"
    return "red"


class TableFormatter:
    """Format odds results as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None, locale: str = "en"):
        self.console = console or Console()
        self.text = TextFormatter(locale)

    def print_odds(self, result: SimulationResult, analysis: HandAnalysis,
                   player_cards: List[Card], community_cards: List[Card],
                   num_opponents: int) -> None:
        """Print simulation results alongside the current hand."""
        table = Table(title="Hand Odds")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        style = win_rate_style(result.win_rate)
        table.add_row("Hand", self.text.format_cards(player_cards))
        table.add_row("Board", self.text.format_cards(community_cards))
        table.add_row("Opponents", str(num_opponents))
        table.add_row("", "")
        table.add_row("Win rate", f"[bold {style}]{result.win_rate:.1f}%[/bold {style}]")
        table.add_row("Wins", str(result.wins))
        table.add_row("Ties", f"{result.ties} ({result.tie_rate:.1f}%)")
        table.add_row("Losses", f"{result.losses} ({result.loss_rate:.1f}%)")
        table.add_row("Simulations", str(result.simulations))
        table.add_row("", "")
        table.add_row("Current hand", analysis.current_hand.name)
        if analysis.draws:
            table.add_row("Draws", self.text.format_draws(analysis.draws))

        self.console.print(table)

    def print_analysis(self, analysis: HandAnalysis, player_cards: List[Card],
                       community_cards: List[Card]) -> None:
        """Print the current hand and open draws."""
        lines = [
            f"Hand:  {self.text.format_cards(player_cards)}",
            f"Board: {self.text.format_cards(community_cards)}",
            "",
            f"[bold]{analysis.current_hand.name}[/bold]",
            f"Draws: {self.text.format_draws(analysis.draws)}",
        ]
        self.console.print(Panel("\n".join(lines), title="Hand Analysis",
                                 border_style="cyan"))

    def print_evaluation(self, cards: List[Card], result: HandResult) -> None:
        """Print the evaluation of a fixed set of cards."""
        table = Table(title="Hand Evaluation")
        table.add_column("Cards", style="cyan")
        table.add_column("Hand", style="green")
        table.add_column("Rank", justify="right")
        table.add_column("Value", justify="right")
        table.add_row(self.text.format_cards(cards), result.name,
                      str(int(result.rank)), str(result.value))
        self.console.print(table)
