"""Environment configuration for the clippings tools.

All environment variable access goes through this module. A ``.env`` file in
the working directory is loaded on import.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import DEFAULT_CLIPPINGS_FILE, DEFAULT_OUTPUT_PATH

load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def clippings_path() -> Path:
        """Get the clippings file to parse.

        Returns:
            Path from CLIPPINGS_PATH, defaults to 'My Clippings.txt'
        """
        return Path(os.getenv("CLIPPINGS_PATH", str(DEFAULT_CLIPPINGS_FILE)))

    @staticmethod
    def output_path() -> Path:
        """Get the JSON export destination.

        Returns:
            Path from CLIPPINGS_OUTPUT, defaults to ./data/highlights.json
        """
        return Path(os.getenv("CLIPPINGS_OUTPUT", str(DEFAULT_OUTPUT_PATH)))

    @staticmethod
    def log_level() -> str:
        """Get the default logging level.

        Returns:
            Upper-cased LOG_LEVEL, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton instance for convenient access
env = Environment()
