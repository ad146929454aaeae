"""
Central configuration for the Quake 3 log statistics engine.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DATA_FOLDER = PROJECT_ROOT / "data"
OUTPUT_FOLDER = DATA_FOLDER / "processed"
ASSETS_FOLDER = DATA_FOLDER / "raw"

# --- Log File Configuration ---
DEFAULT_LOG_FILE = ASSETS_FOLDER / "games.log"
LOG_ENCODING = "utf-8"
LINE_SEPARATOR = "\n"
MAX_LOG_SIZE = 50_000_000  # Maximum log size in characters (~50MB)

# Exported statistics file pattern
STATISTICS_PATTERN = "game_statistics_*.csv"

# --- Line Markers ---
# Matched by plain substring containment, never as regex.
INIT_GAME_IDENTIFIER = "InitGame"
SHUTDOWN_GAME_IDENTIFIER = "ShutdownGame"
KILL_LOG_IDENTIFIER = "Kill"
CLIENT_CONNECT_IDENTIFIER = "ClientConnect"
ITEM_IDENTIFIER = "Item:"
WORLD_IDENTIFIER = "<world>"

# --- Kill Line Grammar ---
# 21:42 Kill: 1022 2 22: <world> killed Isgalamido by MOD_TRIGGER_HURT
KILL_TOKEN = f"{KILL_LOG_IDENTIFIER}:"
FIELD_SEPARATOR = ":"
KILLED_SEPARATOR = " killed "
CAUSE_SEPARATOR = " by "

# --- Statistics ---
# The original service reported one more game than it parsed; kept for compatibility.
TOTAL_GAMES_OFFSET = 1
