"""Configuration utilities for WoofAreYou.

This module centralizes user preferences and small helpers related to
application configuration.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "woofareyou"  # pragma: no mutate
DATA_PATH_ENV_VAR = "WOOFAREYOU_DATA_PATH"  # pragma: no mutate
DEFAULT_PET_BOOK_FILENAME = "petbook.json"  # pragma: no mutate

DEFAULT_WINDOW_WIDTH = 740
DEFAULT_WINDOW_HEIGHT = 600


@dataclass(frozen=True, slots=True)
class GuiSettings:
    """Window geometry remembered between sessions.

    `x` and `y` are None until the window has been placed once.
    """

    width: float = DEFAULT_WINDOW_WIDTH
    height: float = DEFAULT_WINDOW_HEIGHT
    x: int | None = None
    y: int | None = None


def get_pet_book_path() -> Path:
    """Get the pet book file path.

    Returns:
        The value of the `WOOFAREYOU_DATA_PATH` environment variable when set,
        otherwise ``petbook.json`` in the platform's user data directory.
    """
    if path := os.environ.get(DATA_PATH_ENV_VAR):
        return Path(path)
    return Path(user_data_dir(APP_NAME, appauthor=False)) / DEFAULT_PET_BOOK_FILENAME


@dataclass(frozen=True, slots=True)
class UserPrefs:
    """User preferences: window geometry and where the pet book lives."""

    gui_settings: GuiSettings = field(default_factory=GuiSettings)
    pet_book_file_path: Path = field(default_factory=get_pet_book_path)


def default_user_prefs() -> UserPrefs:
    """Build the preferences used when the user has none saved."""
    return UserPrefs()
