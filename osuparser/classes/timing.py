"""
Classes that represent timing-related entities.
"""
from dataclasses import dataclass

from ..utils import LenientInt

__all__ = [
    "TimingPoint",
]


@dataclass(frozen=True)
class TimingPoint:
    """
    An immutable class that represents a timing point.

    A timing point is active from its offset until the next timing point starts. The first timing point of a beatmap
    is active from time 0, regardless of its offset.
    """

    offset: LenientInt
    """Start time of the timing point, in milliseconds."""
    beat_duration: float
    """
    Length of a beat in milliseconds when positive. When negative, a percentage scalar of the most recent positive
    beat duration (e.g. -50 doubles the slider velocity).
    """
    meter: LenientInt = 4
    sample_set: LenientInt = 0
    sample_index: LenientInt = 0
    volume: LenientInt = 100
    inherited: bool = False
    """The inherited flag as written in the file. See also :attr:`is_tempo_point`."""
    kiai: bool = False

    @property
    def is_tempo_point(self) -> bool:
        """Whether the beat duration is absolute, i.e. this point defines a new tempo."""
        return self.beat_duration > 0

    @property
    def bpm(self) -> float | None:
        """Tempo in beats per minute, or `None` for points that only scale the slider velocity."""
        if not self.is_tempo_point:
            return None
        return 60000 / self.beat_duration

    @property
    def velocity_multiplier(self) -> float:
        """Slider velocity multiplier applied by this point."""
        if self.beat_duration < 0:
            return -100 / self.beat_duration
        return 1.0
