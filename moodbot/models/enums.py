from __future__ import annotations

from enum import Enum

__all__ = (
    "MoodType",
    "Theme",
)


class MoodType(Enum):
    VERY_HAPPY = "very-happy"
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SAD = "sad"
    ANXIOUS = "anxious"
    TIRED = "tired"


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"
