"""
General purpose enumerations.
"""
from enum import Enum, Flag, IntEnum, auto, unique

__all__ = [
    "Section",
    "Countdown",
    "GameMode",
    "CurveType",
    "HitObjectType",
]


class Section(Enum):
    """Enumeration for .osu file sections."""

    GENERAL = auto()
    EDITOR = auto()
    METADATA = auto()
    DIFFICULTY = auto()
    EVENTS = auto()
    TIMING_POINTS = auto()
    COLOURS = auto()
    HIT_OBJECTS = auto()


@unique
class Countdown(IntEnum):
    """Enumeration for the speed of the countdown before the first hit object."""

    NONE = 0
    NORMAL = 1
    HALF = 2
    DOUBLE = 3

    def __str__(self) -> str:
        return f"{self.name.capitalize()} ({self.value})"


@unique
class GameMode(IntEnum):
    """Enumeration for the game mode a beatmap is made for."""

    STANDARD = 0
    TAIKO = 1
    CATCH = 2
    MANIA = 3

    def __str__(self) -> str:
        return f"{self.name.capitalize()} ({self.value})"


@unique
class CurveType(Enum):
    """Enumeration for the slider curve type, keyed by the letter used in the file."""

    LINEAR = "L"
    PERFECT = "P"
    BEZIER = "B"
    CATMULL = "C"

    def __str__(self) -> str:
        return self.name.capitalize()


class HitObjectType(Flag):
    """
    Flag enumeration for the hit object type bitmask.

    The three ``COMBO_SKIP`` bits form a number telling how many combo colours to skip. They are not used here.
    """

    CIRCLE = 1
    SLIDER = 2
    NEW_COMBO = 4
    SPINNER = 8
    COMBO_SKIP_1 = 16
    COMBO_SKIP_2 = 32
    COMBO_SKIP_4 = 64
    HOLD = 128
