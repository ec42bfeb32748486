"""
Preference store for TicTacToe.
Loads and saves the display theme with a validated default.
"""

from typing import Optional, Union

from .config import PreferenceConfig
from .storage import KeyValueStorage, JsonFileStorage
from .theme import Theme


class PreferenceStore:
    """
    Reads and writes the theme preference.

    Neither load() nor save() raises: an unreachable medium, a failed read,
    or a value outside the allow-list all fall back to the default theme,
    and writes that can't happen are dropped.
    """

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        key: str = PreferenceConfig.STORAGE_KEY,
    ):
        """
        Args:
            storage: Backend to use. Defaults to the JSON preference file
                at PreferenceConfig.storage_path().
            key: Key the theme is stored under.
        """
        self.storage = storage if storage is not None else JsonFileStorage(
            PreferenceConfig.storage_path()
        )
        self.key = key

    def load(self) -> Theme:
        """Stored theme, or the default theme."""
        if not self.storage.is_available():
            return Theme.default()

        result = self.storage.get(self.key)
        if not result.ok:
            return Theme.default()

        return Theme.from_name(result.value) or Theme.default()

    def save(self, option: Union[Theme, str]) -> bool:
        """
        Store a theme.

        Args:
            option: A Theme or its name.

        Returns:
            True if the value was written.
        """
        name = option.value if isinstance(option, Theme) else option
        if Theme.from_name(name) is None:
            return False

        if not self.storage.is_available():
            return False

        return self.storage.set(self.key, name).ok
