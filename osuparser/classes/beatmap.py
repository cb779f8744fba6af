"""
Classes that encapsulate beatmap metadata and the beatmap itself.
"""
from dataclasses import dataclass, field, fields

from .enums import Countdown, GameMode
from .hitobjects import HitObject
from .timing import TimingPoint
from ..utils import LenientInt, or_default

__all__ = [
    "General",
    "Metadata",
    "Difficulty",
    "Beatmap",
]


@dataclass(frozen=True)
class General:
    """
    A class that contains the general settings of a beatmap.

    Any field holding a falsy value (including NaN) after initialization is reset to its default, so an explicit
    zero or empty string cannot be told apart from a missing one.
    """

    audio_filename: str = ""
    audio_lead_in: LenientInt = 0
    preview_time: LenientInt = 0
    countdown: Countdown = Countdown.NONE
    sample_set: str = "Normal"
    stack_leniency: float = 0
    mode: GameMode = GameMode.STANDARD
    letterbox_in_breaks: bool = False
    story_fire_in_front: bool = False
    epilepsy_warning: bool = False
    widescreen_storyboard: bool = False
    special_style: bool = False
    use_skin_sprites: bool = False
    skin_preference: str = "Default"
    countdown_offset: LenientInt = 0
    background: str | None = None

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, or_default(getattr(self, f.name), f.default))


@dataclass(frozen=True)
class Metadata:
    """A class that contains the song and beatmap identification."""

    title: str = ""
    title_unicode: str | None = None
    artist: str = ""
    artist_unicode: str | None = None
    creator: str = ""
    version: str = ""
    """Name of the difficulty."""
    source: str | None = None
    tags: tuple[str, ...] = ()
    beatmap_id: LenientInt = 0
    beatmap_set_id: LenientInt = 0


@dataclass(frozen=True)
class Difficulty:
    """A class that contains the difficulty settings of a beatmap."""

    hp_drain_rate: float = 0
    circle_size: float = 0
    """Size of hit objects, or the number of columns in osu!mania."""
    overall_difficulty: float = 0
    approach_rate: float = 0
    slider_multiplier: float = 0
    slider_tick_rate: float = 0


@dataclass(frozen=True)
class Beatmap:
    """A class that contains a whole parsed beatmap."""

    general: General = field(default_factory=General)
    metadata: Metadata = field(default_factory=Metadata)
    difficulty: Difficulty = field(default_factory=Difficulty)
    timing_points: tuple[TimingPoint, ...] = ()
    hit_objects: tuple[HitObject, ...] = ()
    format_version: int | None = None

    @property
    def background(self) -> str | None:
        """Background image file name."""
        return self.general.background

    @property
    def display_title(self) -> str:
        """Title to display, preferring the Unicode one."""
        return self.metadata.title_unicode or self.metadata.title

    @property
    def display_artist(self) -> str:
        """Artist to display, preferring the Unicode one."""
        return self.metadata.artist_unicode or self.metadata.artist
