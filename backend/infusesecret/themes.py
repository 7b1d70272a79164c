"""Message themes: the fixed set a message is created with, plus the
presentational catalogue the viewing page draws from."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Theme(str, enum.Enum):
    ROMANTIC = "romantic"
    FRIENDSHIP = "friendship"
    MOTIVATION = "motivation"
    GENERAL = "general"

    @classmethod
    def parse(cls, value: object) -> Theme | None:
        """Return the matching theme, or None for anything outside the set."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


THEME_VALUES: tuple[str, ...] = tuple(t.value for t in Theme)


@dataclass(frozen=True, slots=True)
class ThemeTemplate:
    """How a theme looks on the viewing page."""

    icon: str  # icon name in the frontend's icon set
    pattern: str  # emoji shown on the locked screen
    emojis: tuple[str, ...]  # pool for falling-icon particles


THEME_TEMPLATES: dict[Theme, ThemeTemplate] = {
    Theme.ROMANTIC: ThemeTemplate(
        icon="heart",
        pattern="🌹",
        emojis=("🌹", "💕", "❤️", "💖", "💝", "💗"),
    ),
    Theme.FRIENDSHIP: ThemeTemplate(
        icon="users",
        pattern="🌟",
        emojis=("⭐", "🌟", "✨", "💫", "🎉", "🎊"),
    ),
    Theme.MOTIVATION: ThemeTemplate(
        icon="zap",
        pattern="⚡",
        emojis=("⚡", "💪", "🔥", "🚀", "💯", "🏆"),
    ),
    Theme.GENERAL: ThemeTemplate(
        icon="gift",
        pattern="🎁",
        emojis=("🎁", "🎈", "🎉", "🎊", "✨", "💝"),
    ),
}


def template_for(theme: str | Theme) -> ThemeTemplate:
    """Template for a theme; unknown values fall back to the general theme."""
    parsed = Theme.parse(theme)
    return THEME_TEMPLATES[parsed or Theme.GENERAL]
