"""
Parser for the osu! beatmap file format (.osu).
"""
import dataclasses
import logging
import re

from collections.abc import Callable
from typing import Any

from .base import Parser
from .hitobjects import parse_hit_object
from ..classes.base import BeatmapParseError
from ..classes.beatmap import (
    Beatmap,
    Difficulty,
    General,
    Metadata,
)
from ..classes.enums import (
    Countdown,
    GameMode,
    Section,
)
from ..classes.hitobjects import HitObject
from ..classes.timing import TimingPoint
from ..utils import (
    parse_float,
    parse_int,
)

__all__ = [
    "OsuParser",
    "split_key_value",
    "parse_background",
    "parse_timing_point",
]

FieldConverter = Callable[[str, bool], Any]

COMMENT_PREFIX = "//"
BOM = "\ufeff"
FORMAT_VERSION_REGEX = re.compile(r"^osu file format v(\d+)")
BACKGROUND_PREFIX = "0,0"
BACKGROUND_SUFFIX = ",0,0"
TIMING_POINT_FIELD_COUNT = 8
SECTION_HEADERS = {
    "[General]": Section.GENERAL,
    "[Editor]": Section.EDITOR,
    "[Metadata]": Section.METADATA,
    "[Difficulty]": Section.DIFFICULTY,
    "[Events]": Section.EVENTS,
    "[TimingPoints]": Section.TIMING_POINTS,
    "[Colours]": Section.COLOURS,
    "[HitObjects]": Section.HIT_OBJECTS,
}

logger = logging.getLogger(__name__)


def _as_str(value: str, strict: bool) -> str:
    return value


def _as_int(value: str, strict: bool) -> int | float:
    return parse_int(value, strict=strict)


def _as_float(value: str, strict: bool) -> float:
    return parse_float(value, strict=strict)


def _as_bool(value: str, strict: bool) -> bool:
    return value == "1"


def _as_tags(value: str, strict: bool) -> tuple[str, ...]:
    return tuple(value.split())


def _as_countdown(value: str, strict: bool) -> Countdown:
    return Countdown(parse_int(value, strict=strict))


def _as_game_mode(value: str, strict: bool) -> GameMode:
    return GameMode(parse_int(value, strict=strict))


# fmt: off
GENERAL_FIELDS: dict[str, tuple[str, FieldConverter]] = {
    "AudioFilename"       : ("audio_filename", _as_str),
    "AudioLeadIn"         : ("audio_lead_in", _as_int),
    "PreviewTime"         : ("preview_time", _as_int),
    "Countdown"           : ("countdown", _as_countdown),
    "SampleSet"           : ("sample_set", _as_str),
    "StackLeniency"       : ("stack_leniency", _as_float),
    "Mode"                : ("mode", _as_game_mode),
    "LetterboxInBreaks"   : ("letterbox_in_breaks", _as_bool),
    "StoryFireInFront"    : ("story_fire_in_front", _as_bool),
    "SkinPreference"      : ("skin_preference", _as_str),
    "EpilepsyWarning"     : ("epilepsy_warning", _as_bool),
    "CountdownOffset"     : ("countdown_offset", _as_int),
    "WidescreenStoryboard": ("widescreen_storyboard", _as_bool),
    "SpecialStyle"        : ("special_style", _as_bool),
    "UseSkinSprites"      : ("use_skin_sprites", _as_bool),
}
METADATA_FIELDS: dict[str, tuple[str, FieldConverter]] = {
    "Title"        : ("title", _as_str),
    "TitleUnicode" : ("title_unicode", _as_str),
    "Artist"       : ("artist", _as_str),
    "ArtistUnicode": ("artist_unicode", _as_str),
    "Creator"      : ("creator", _as_str),
    "Version"      : ("version", _as_str),
    "Source"       : ("source", _as_str),
    "Tags"         : ("tags", _as_tags),
    "BeatmapID"    : ("beatmap_id", _as_int),
    "BeatmapSetID" : ("beatmap_set_id", _as_int),
}
DIFFICULTY_FIELDS: dict[str, tuple[str, FieldConverter]] = {
    "HPDrainRate"      : ("hp_drain_rate", _as_float),
    "CircleSize"       : ("circle_size", _as_float),
    "OverallDifficulty": ("overall_difficulty", _as_float),
    "ApproachRate"     : ("approach_rate", _as_float),
    "SliderMultiplier" : ("slider_multiplier", _as_float),
    "SliderTickRate"   : ("slider_tick_rate", _as_float),
}
# fmt: on


def split_key_value(line: str) -> tuple[str, str]:
    """
    Split a ``Key:Value`` line on its first colon.

    :returns: The key and the rest of the line, both stripped of surrounding whitespace.
    :raises ValueError: if the line has no colon.
    """
    if ":" not in line:
        raise ValueError("expected a key-value pair")
    key, value = line.split(":", 1)
    return key.strip(), value.strip()


def parse_background(line: str) -> str | None:
    """
    Extract the background image from a line of the [Events] section.

    Only lines of the form ``0,0,"filename",0,0`` declare a background.

    :returns: The file name without quotes, or `None` if the line is any other event.
    """
    if not (line.startswith(BACKGROUND_PREFIX) and line.endswith(BACKGROUND_SUFFIX)):
        return None
    return line.split(",")[2].strip('"')


def parse_timing_point(line: str, *, strict: bool = False) -> TimingPoint:
    """
    Parse a line of the [TimingPoints] section.

    The line looks like ``offset,beatDuration,meter,sampleSet,sampleIndex,volume,inherited,kiai``.

    :param line: The line to parse.
    :param strict: Whether malformed numbers raise instead of becoming NaN.
    :raises ValueError: if the line has fewer than 8 fields.
    """
    fields = line.split(",")
    if len(fields) < TIMING_POINT_FIELD_COUNT:
        raise ValueError(f"expected {TIMING_POINT_FIELD_COUNT} timing point fields (got {len(fields)})")

    return TimingPoint(
        offset=parse_int(fields[0], strict=strict),
        beat_duration=parse_float(fields[1], strict=strict),
        meter=parse_int(fields[2], strict=strict),
        sample_set=parse_int(fields[3], strict=strict),
        sample_index=parse_int(fields[4], strict=strict),
        volume=parse_int(fields[5], strict=strict),
        inherited=fields[6].strip() == "1",
        kiai=fields[7].strip() == "1",
    )


@dataclasses.dataclass
class _BeatmapAccumulator:
    section: Section = Section.GENERAL
    started: bool = False
    format_version: int | None = None

    general: dict[str, Any] = dataclasses.field(default_factory=dict)
    metadata: dict[str, Any] = dataclasses.field(default_factory=dict)
    difficulty: dict[str, Any] = dataclasses.field(default_factory=dict)
    timing_points: list[TimingPoint] = dataclasses.field(default_factory=list)
    hit_objects: list[HitObject] = dataclasses.field(default_factory=list)

    def build(self) -> Beatmap:
        return Beatmap(
            general=General(**self.general),
            metadata=Metadata(**self.metadata),
            difficulty=Difficulty(**self.difficulty),
            timing_points=tuple(self.timing_points),
            hit_objects=tuple(self.hit_objects),
            format_version=self.format_version,
        )


@dataclasses.dataclass(eq=False)
class OsuParser(Parser):
    """
    Parser for .osu files.

    By default the parser is lenient: a malformed number becomes NaN, and a line that cannot be parsed at all is
    logged and skipped.
    """

    strict: bool = False
    """Raise on malformed numbers, and abort the whole parse on the first line that fails."""
    hold_notes_as_spinners: bool = False
    """Decode osu!mania hold notes as spinners."""

    def parse(self, text: str) -> Beatmap:
        """
        Parse the full text of a .osu file.

        :raises BeatmapParseError: if the parser is strict and a line cannot be parsed.
        """
        acc = _BeatmapAccumulator()
        lines = text.lstrip(BOM).replace("\r", "").split("\n")
        for line_no, line in enumerate(lines, 1):
            line = line.rstrip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue
            try:
                self._handle_line(acc, line)
            except ValueError as e:
                if self.strict:
                    raise BeatmapParseError(str(e), line_no, line) from e
                logger.warning(f'skipping line {line_no} ({e}): "{line}"')

        return acc.build()

    def _handle_line(self, acc: _BeatmapAccumulator, line: str) -> None:
        if not acc.started:
            acc.started = True
            match = FORMAT_VERSION_REGEX.match(line)
            if match is not None:
                acc.format_version = int(match.group(1))
                return

        if line.startswith("["):
            self._handle_section_header(acc, line)
            return

        match acc.section:
            case Section.GENERAL:
                self._handle_key_value(acc.general, GENERAL_FIELDS, line)
            case Section.METADATA:
                self._handle_key_value(acc.metadata, METADATA_FIELDS, line)
            case Section.DIFFICULTY:
                self._handle_key_value(acc.difficulty, DIFFICULTY_FIELDS, line)
            case Section.EVENTS:
                self._handle_event(acc, line)
            case Section.TIMING_POINTS:
                acc.timing_points.append(parse_timing_point(line, strict=self.strict))
            case Section.HIT_OBJECTS:
                acc.hit_objects.append(
                    parse_hit_object(line, strict=self.strict, hold_notes_as_spinners=self.hold_notes_as_spinners)
                )
            case Section.EDITOR | Section.COLOURS:
                pass

    def _handle_section_header(self, acc: _BeatmapAccumulator, line: str) -> None:
        for header, section in SECTION_HEADERS.items():
            if line.startswith(header):
                acc.section = section
                return
        logger.warning(f'unrecognized section header "{line}", staying in {acc.section.name}')

    def _handle_key_value(self, dest: dict[str, Any], field_map: dict[str, tuple[str, FieldConverter]], line: str):
        key, value = split_key_value(line)
        if key not in field_map:
            logger.debug(f'ignoring unknown key "{key}"')
            return
        name, convert = field_map[key]
        dest[name] = convert(value, self.strict)

    def _handle_event(self, acc: _BeatmapAccumulator, line: str) -> None:
        background = parse_background(line)
        if background is None:
            logger.debug(f'ignoring event "{line}"')
            return
        acc.general["background"] = background
