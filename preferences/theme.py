"""Display themes."""

from enum import Enum
from typing import Optional

from .config import PreferenceConfig


class Theme(Enum):
    """Recognised display themes."""
    DARK = "dark"
    LIGHT = "light"
    RETRO = "retro"
    OCEAN = "ocean"
    SUNSET = "sunset"
    FOREST = "forest"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["Theme"]:
        """Theme for a stored name, or None if the name isn't recognised."""
        if name not in PreferenceConfig.THEMES:
            return None
        return cls(name)

    @classmethod
    def default(cls) -> "Theme":
        return cls(PreferenceConfig.DEFAULT_THEME)
