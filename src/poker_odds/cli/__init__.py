"""Command line interface for poker-odds."""
