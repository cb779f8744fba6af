"""
Classes that represent hit objects and their sample metadata.
"""
import math

from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple

from .base import AbstractDataclass
from .enums import CurveType, HitObjectType
from ..utils import LenientInt, clamp

__all__ = [
    "PLAYFIELD_WIDTH",
    "PLAYFIELD_HEIGHT",
    "CurvePoint",
    "EdgeSet",
    "Extras",
    "HitObject",
    "Circle",
    "Slider",
    "Spinner",
    "HoldNote",
]

PLAYFIELD_WIDTH = 512
PLAYFIELD_HEIGHT = 384


class CurvePoint(NamedTuple):
    """A slider control point, in osu! pixels."""

    x: LenientInt
    y: LenientInt


class EdgeSet(NamedTuple):
    """Sample set pair played on a slider edge."""

    sample_set: LenientInt
    addition_set: LenientInt


@dataclass(frozen=True)
class Extras:
    """Per-object sample overrides. Zero means "inherit from the timing point"."""

    sample_set: int = 0
    addition_set: int = 0
    custom_index: int = 0
    sample_volume: float = 0
    filename: str | None = None


@dataclass(frozen=True)
class HitObject(AbstractDataclass):
    """
    An abstract base class for hit objects.

    ``type`` holds the type code of the concrete class, plus 4 when the object starts a new combo.
    """

    TYPE_CODE: ClassVar[HitObjectType]

    x: float
    y: float
    time: float
    type: int
    hit_sound: LenientInt
    extras: Extras | None = field(default=None, kw_only=True)

    @property
    def new_combo(self) -> bool:
        """Whether this object starts a new combo."""
        return bool(self.type & HitObjectType.NEW_COMBO.value)


@dataclass(frozen=True)
class Circle(HitObject):
    """A hit circle."""

    TYPE_CODE = HitObjectType.CIRCLE


@dataclass(frozen=True)
class Slider(HitObject):
    """
    A slider.

    The slider head at (``x``, ``y``) is not part of ``curve_points``. A control point that appears twice in a row
    marks the end of one curve segment and the start of the next.
    """

    TYPE_CODE = HitObjectType.SLIDER

    curve_type: CurveType
    curve_points: tuple[CurvePoint, ...]
    repeat: LenientInt
    pixel_length: float
    edge_hit_sounds: tuple[LenientInt, ...] = ()
    edge_sets: tuple[EdgeSet, ...] = ()

    @property
    def edge_additions(self) -> list[LenientInt]:
        """Sample set of every edge, in edge order."""
        return [edge.sample_set for edge in self.edge_sets]

    def curve_segments(self) -> list[list[CurvePoint]]:
        """
        Split the control points into curve segments.

        The slider head is prepended to the first segment. Each repeated point ends a segment and also starts the
        next one, e.g. A,B,C,D,D,E,F,F,G gives [A,B,C,D], [D,E,F] and [F,G].

        :returns: The list of segments, each a list of control points.
        """
        segments: list[list[CurvePoint]] = [[CurvePoint(self.x, self.y)]]
        prev: CurvePoint | None = None
        # the head never closes a segment, even when the first control point repeats it
        for point in self.curve_points:
            if point == prev:
                segments.append([point])
            else:
                segments[-1].append(point)
            prev = point
        return segments


@dataclass(frozen=True)
class Spinner(HitObject):
    """A spinner."""

    TYPE_CODE = HitObjectType.SPINNER

    end_time: LenientInt


@dataclass(frozen=True)
class HoldNote(HitObject):
    """An osu!mania hold note. The column is encoded in ``x``."""

    TYPE_CODE = HitObjectType.HOLD

    end_time: LenientInt

    def column(self, column_count: int | float) -> int:
        """
        Compute the column of the note.

        :param column_count: Number of columns, i.e. the beatmap's circle size. Fractional counts are truncated.
        :returns: The 0-based column index.
        """
        column_count = int(column_count)
        if column_count <= 0:
            raise ValueError(f"column count must be positive (got {column_count})")
        index = math.floor(self.x / (PLAYFIELD_WIDTH / column_count))
        return clamp(index, 0, column_count - 1)
