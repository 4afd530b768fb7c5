"""
Configuration constants for friendnet.

All paths, settings, and tunable parameters are defined here.
Environment overrides are read from the process environment and an
optional .env file at the project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of friendnet/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Data directory (bundled example networks)
DATA_DIR = PROJECT_ROOT / "data"

# Small network shipped with the project
SAMPLE_GRAPH_PATH = DATA_DIR / "sample_network.txt"

# Graph file used when the CLI prompt is left blank
DEFAULT_GRAPH_PATH = os.environ.get("FRIENDNET_GRAPH_PATH") or None

# Encoding for text graph files
FILE_ENCODING = "utf-8"

# Suffix that selects the msgpack snapshot reader
MSGPACK_SUFFIX = ".msgpack"

# =============================================================================
# Console Configuration
# =============================================================================

# ANSI clear-screen between menu pages (set FRIENDNET_CLEAR_SCREEN=0 to disable)
CLEAR_SCREEN = os.environ.get("FRIENDNET_CLEAR_SCREEN", "1") not in ("0", "false", "no")

# Escape sequence: cursor home + erase display
CLEAR_SCREEN_SEQUENCE = "\033[H\033[2J"

# Banner line drawn around menu pages
MENU_RULE = "═" * 39

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
# WARNING keeps the interactive screens free of load chatter
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which bundled data files exist."""
    return {
        "sample_network": SAMPLE_GRAPH_PATH.exists(),
    }


def get_missing_data_files() -> list[str]:
    """Return list of missing data file names."""
    status = validate_data_files()
    return [name for name, exists in status.items() if not exists]
