"""
Preferences module for TicTacToe.
Handles the persisted display theme.
"""

from .config import PreferenceConfig
from .theme import Theme
from .storage import KeyValueStorage, StorageResult, MemoryStorage, JsonFileStorage
from .preference_store import PreferenceStore
