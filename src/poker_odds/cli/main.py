"""Poker Odds CLI — Typer-based command line interface."""

import json
import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from poker_odds import config

app = typer.Typer(
    name="poker-odds",
    help="Texas Hold'em hand strength and odds calculator",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _parse(text: str, label: str) -> List:
    from poker_odds.models.card import parse_cards
    try:
        return parse_cards(text)
    except ValueError as e:
        console.print(f"[red]Invalid {label}:[/red] {e}")
        raise typer.Exit(1)


def choose_simulations(num_community: int) -> int:
    """Fewer trials are needed once the whole board is known."""
    if num_community >= 5:
        return config.RIVER_SIMULATIONS
    return config.DEFAULT_SIMULATIONS


@app.command()
def odds(
    hand: str = typer.Argument(..., help="Your two hole cards, e.g. 'AsKs'"),
    board: str = typer.Option("", "--board", "-b",
                              help="Known community cards, e.g. 'Qs Js 2d'"),
    players: int = typer.Option(config.DEFAULT_PLAYERS, "--players", "-p",
                                min=config.MIN_PLAYERS, max=config.MAX_PLAYERS,
                                help="Players at the table, including you"),
    simulations: Optional[int] = typer.Option(None, "--simulations", "-n", min=1,
                                              help="Number of trials (default depends on the board)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducible runs"),
    workers: int = typer.Option(config.WORKERS, "--workers", "-w", min=1,
                                help="Worker processes"),
    locale: str = typer.Option(config.LOCALE, "--locale", help="Language for hand names (en, he, zh)"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    plain: bool = typer.Option(False, "--plain", help="Print a one-line summary instead of a table"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Estimate your chance of winning against random opponents."""
    from poker_odds.simulation import OddsCalculator
    from poker_odds.formatters.table import TableFormatter

    _setup_logging(verbose)
    player_cards = _parse(hand, "hand")
    community_cards = _parse(board, "board")
    num_opponents = players - 1
    if simulations is None:
        simulations = choose_simulations(len(community_cards))

    try:
        result = OddsCalculator.calculate_odds(
            player_cards, community_cards, num_opponents, simulations,
            seed=seed, workers=workers,
        )
        analysis = OddsCalculator.analyze_hand(player_cards, community_cards, locale)
    except ValueError as e:
        console.print(f"[red]Unable to compute odds:[/red] {e}")
        raise typer.Exit(1)

    if as_json:
        payload = result.to_dict()
        payload["current_hand"] = analysis.current_hand.name
        payload["draws"] = [
            {"type": d.type.value, "outs": d.outs,
             "suit": d.suit.value if d.suit else None} for d in analysis.draws
        ]
        typer.echo(json.dumps(payload, ensure_ascii=False))
        return

    if plain:
        from poker_odds.formatters.text import TextFormatter
        text = TextFormatter(locale)
        typer.echo(text.format_odds(result))
        typer.echo(f"{analysis.current_hand.name}  |  {text.format_draws(analysis.draws)}")
        return

    fmt = TableFormatter(console, locale=locale)
    fmt.print_odds(result, analysis, player_cards, community_cards, num_opponents)


@app.command()
def evaluate(
    cards: str = typer.Argument(..., help="Five to seven cards, e.g. 'AhKhQhJhTh'"),
    locale: str = typer.Option(config.LOCALE, "--locale", help="Language for hand names (en, he, zh)"),
    plain: bool = typer.Option(False, "--plain", help="Print a one-line result instead of a table"),
):
    """Rank a set of 5-7 cards."""
    from poker_odds.simulation import HandEvaluator
    from poker_odds.formatters.table import TableFormatter

    parsed = _parse(cards, "cards")
    if not 5 <= len(parsed) <= 7:
        console.print(f"[red]Expected 5 to 7 cards, got {len(parsed)}.[/red]")
        raise typer.Exit(1)

    result = HandEvaluator.evaluate(parsed, locale)
    if plain:
        from poker_odds.formatters.text import TextFormatter
        typer.echo(TextFormatter(locale).format_hand_result(result))
        return
    TableFormatter(console, locale=locale).print_evaluation(parsed, result)


@app.command()
def analyze(
    hand: str = typer.Argument(..., help="Your two hole cards, e.g. 'AsKs'"),
    board: str = typer.Option("", "--board", "-b",
                              help="Known community cards, e.g. 'Qs Js 2d'"),
    locale: str = typer.Option(config.LOCALE, "--locale", help="Language for hand names (en, he, zh)"),
):
    """Show your current hand and open draws."""
    from poker_odds.simulation import OddsCalculator
    from poker_odds.formatters.table import TableFormatter

    player_cards = _parse(hand, "hand")
    community_cards = _parse(board, "board")

    try:
        analysis = OddsCalculator.analyze_hand(player_cards, community_cards, locale)
    except ValueError as e:
        console.print(f"[red]Unable to analyze hand:[/red] {e}")
        raise typer.Exit(1)

    TableFormatter(console, locale=locale).print_analysis(analysis, player_cards, community_cards)


if __name__ == "__main__":
    app()
