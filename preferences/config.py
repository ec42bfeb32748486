"""
Preference configuration for TicTacToe.
Where the display preference lives and which values it may take.
"""

import os
from pathlib import Path


class PreferenceConfig:
    """
    Configuration class for stored preferences.
    Change these values based on your setup!
    """

    # ==================== STORAGE SETTINGS ====================
    # Key the theme is stored under
    STORAGE_KEY = "tic-tac-toe-theme"

    # Environment variable that overrides the preference file location
    STORAGE_PATH_ENV = "TICTACTOE_PREFS"

    # Default preference file (JSON object of key -> string)
    DEFAULT_STORAGE_PATH = Path.home() / ".tictactoe" / "preferences.json"

    # ==================== THEME SETTINGS ====================
    # Recognised themes, in the order they are offered to the user
    THEMES = ["dark", "light", "retro", "ocean", "sunset", "forest"]

    # Used when nothing valid is stored
    DEFAULT_THEME = "dark"

    @classmethod
    def storage_path(cls) -> Path:
        """Preference file path, honouring the environment override."""
        override = os.getenv(cls.STORAGE_PATH_ENV)
        return Path(override).expanduser() if override else cls.DEFAULT_STORAGE_PATH
