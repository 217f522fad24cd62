"""Texas Hold'em hand evaluation and Monte Carlo odds."""

__version__ = "0.1.0"
