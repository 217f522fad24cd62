"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Simulation trial counts.
# A complete board leaves only opponent cards unknown, so fewer trials suffice.
DEFAULT_SIMULATIONS = int(os.getenv("POKER_ODDS_SIMULATIONS", "5000"))
RIVER_SIMULATIONS = int(os.getenv("POKER_ODDS_RIVER_SIMULATIONS", "1000"))

# Worker processes for the simulation (1 = run in-process)
WORKERS = int(os.getenv("POKER_ODDS_WORKERS", "1"))

# Table size, counting the player
DEFAULT_PLAYERS = int(os.getenv("POKER_ODDS_PLAYERS", "4"))
MIN_PLAYERS = 2
MAX_PLAYERS = 10

# Display language for hand and draw names: en, he or zh
LOCALE = os.getenv("POKER_ODDS_LOCALE", "en")

LOG_LEVEL = os.getenv("POKER_ODDS_LOG_LEVEL", "WARNING").upper()
