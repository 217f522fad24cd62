"""Tests for text and table formatting."""

from rich.console import Console

from poker_odds.formatters.table import TableFormatter, win_rate_style
from poker_odds.formatters.text import TextFormatter
from poker_odds.models.card import parse_cards
from poker_odds.models.result import DrawInfo, DrawType, SimulationResult
from poker_odds.simulation import analyze_hand, evaluate_hand


class TestTextFormatter:
    """Tests for plain text output."""

    def test_format_cards(self):
        fmt = TextFormatter()
        assert fmt.format_cards(parse_cards("AsTh")) == "A♠ T♥"
        assert fmt.format_cards([]) == "-"

    def test_format_draws(self):
        draws = [DrawInfo(DrawType.FLUSH, 9), DrawInfo(DrawType.STRAIGHT, 8)]
        assert TextFormatter("en").format_draws(draws) == \
            "Flush draw (9 outs), Straight draw (8 outs)"
        assert TextFormatter("he").format_draw(draws[0]) == "draw לצבע (9 קלפים)"
        assert TextFormatter().format_draws([]) == "-"

    def test_unknown_locale(self):
        assert TextFormatter("fr").locale == "en"

    def test_format_odds(self):
        text = TextFormatter().format_odds(SimulationResult(wins=5, ties=0, simulations=10))
        assert "Win 50.0%" in text
        assert "W/T/L 5/0/5" in text

    def test_format_hand_result(self):
        result = evaluate_hand(parse_cards("Ah2d3c4s5h"))
        assert TextFormatter().format_hand_result(result) == "Straight (rank 5, value 5)"


class TestTableFormatter:
    """Tests for Rich output."""

    def _console(self):
        return Console(record=True, width=120)

    def test_win_rate_style(self):
        assert win_rate_style(85.0) == "green"
        assert win_rate_style(70.0) == "green"
        assert win_rate_style(45.5) == "yellow"
        assert win_rate_style(12.0) == "red"

    def test_print_odds(self):
        console = self._console()
        player, board = parse_cards("AhKh"), parse_cards("Qh7h2c")
        analysis = analyze_hand(player, board)
        result = SimulationResult(wins=60, ties=2, simulations=100)
        TableFormatter(console).print_odds(result, analysis, player, board, 3)
        output = console.export_text()
        assert "61.0%" in output
        assert "Flush draw (9 outs)" in output
        assert "High Card" in output

    def test_print_analysis(self):
        console = self._console()
        player, board = parse_cards("9c8d"), parse_cards("7h6s2c")
        TableFormatter(console).print_analysis(analyze_hand(player, board), player, board)
        output = console.export_text()
        assert "Straight draw (8 outs)" in output

    def test_print_evaluation(self):
        console = self._console()
        cards = parse_cards("AsKsQsJsTs")
        TableFormatter(console).print_evaluation(cards, evaluate_hand(cards))
        assert "Royal Flush" in console.export_text()
