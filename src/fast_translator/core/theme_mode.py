"""Theme mode values persisted between runs."""

from enum import Enum


class ThemeMode(Enum):
    """Binary light/dark theme choice."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "ThemeMode":
        return ThemeMode.DARK if self is ThemeMode.LIGHT else ThemeMode.LIGHT
