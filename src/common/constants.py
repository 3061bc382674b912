"""Shared constants for the clippings application.

For environment-based configuration use the env module:
    from common.env import env
    path = env.clippings_path()
"""

from pathlib import Path

# Data directories
DATA_DIR = Path("./data")
DEFAULT_OUTPUT_PATH = DATA_DIR / "highlights.json"

# Name the Kindle gives its export in the documents folder
DEFAULT_CLIPPINGS_FILE = Path("My Clippings.txt")
