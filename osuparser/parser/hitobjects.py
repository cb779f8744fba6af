"""
Decoders for the [HitObjects] section.

Every decoder takes a single line of the section. Missing required fields and malformed values raise
:class:`ValueError`; whether that aborts the whole parse is up to the caller.
"""
import dataclasses
import logging

from collections.abc import Callable

from ..classes.enums import CurveType, HitObjectType
from ..classes.hitobjects import (
    Circle,
    CurvePoint,
    EdgeSet,
    Extras,
    HitObject,
    HoldNote,
    Slider,
    Spinner,
)
from ..utils import (
    LenientInt,
    is_nan,
    or_default,
    parse_float,
    parse_int,
    remove_whitespace,
)

__all__ = [
    "parse_extras",
    "parse_curve",
    "parse_circle",
    "parse_slider",
    "parse_spinner",
    "parse_hold_note",
    "parse_hit_object",
]

HitObjectDecoder = Callable[..., HitObject]

logger = logging.getLogger(__name__)


def _split_line(line: str) -> list[str]:
    return remove_whitespace(line).split(",")


def _get_field(tokens: list[str], index: int, name: str) -> str:
    try:
        return tokens[index]
    except IndexError as e:
        raise ValueError(f"missing {name} field (expected at position {index + 1}, got {len(tokens)} fields)") from e


def _get_optional_field(tokens: list[str], index: int) -> str | None:
    if index < len(tokens):
        return tokens[index]
    return None


def _parse_common_fields(tokens: list[str], strict: bool) -> dict[str, LenientInt]:
    return {
        "x": parse_float(_get_field(tokens, 0, "x"), strict=strict),
        "y": parse_float(_get_field(tokens, 1, "y"), strict=strict),
        "time": parse_float(_get_field(tokens, 2, "time"), strict=strict),
        "hit_sound": parse_int(_get_field(tokens, 4, "hit sound"), strict=strict),
    }


def parse_extras(s: str | None) -> Extras | None:
    """
    Parse the sample override field of a hit object.

    The field looks like ``sampleSet:additionSet:customIndex:sampleVolume:filename``. Numeric parts that are missing
    or not numbers become 0, and a missing or empty filename becomes `None`.

    :param s: The field, or `None` if the line has no such field.
    :returns: The parsed overrides, or `None` if there was no field to parse.
    """
    if s is None:
        return None

    parts = s.split(":")
    return Extras(
        sample_set=or_default(parse_int(_get_optional_field(parts, 0)), 0),
        addition_set=or_default(parse_int(_get_optional_field(parts, 1)), 0),
        custom_index=or_default(parse_int(_get_optional_field(parts, 2)), 0),
        sample_volume=or_default(parse_float(_get_optional_field(parts, 3)), 0),
        filename=or_default((_get_optional_field(parts, 4) or "").strip(), None),
    )


def parse_curve(s: str, *, strict: bool = False) -> tuple[CurveType, tuple[CurvePoint, ...]]:
    """
    Parse the curve field of a slider, e.g. ``B|380:120|332:96|332:96|304:124``.

    Only the description of the curve is decoded. Repeated points are kept as they are, since they mark the
    boundaries between curve segments.

    :param s: The curve field.
    :param strict: Whether malformed coordinates raise instead of becoming NaN.
    :returns: The curve type and the control points, excluding the slider head.
    :raises ValueError: if the curve type is missing or unknown.
    """
    if not s:
        raise ValueError("empty curve field")
    tag = s[0]
    try:
        curve_type = CurveType(tag)
    except ValueError as e:
        raise ValueError(f"invalid curve type (got {tag!r})") from e

    points: list[CurvePoint] = []
    for point in s[2:].split("|"):
        if not point:
            continue
        x, _, y = point.partition(":")
        points.append(CurvePoint(parse_int(x, strict=strict), parse_int(y, strict=strict)))
    return curve_type, tuple(points)


def _parse_edge_hit_sounds(s: str | None, strict: bool) -> tuple[LenientInt, ...]:
    if not s:
        return ()
    return tuple(parse_int(sound, strict=strict) for sound in s.split("|"))


def _parse_edge_sets(s: str | None, strict: bool) -> tuple[EdgeSet, ...]:
    if not s:
        return ()
    edge_sets = []
    for edge in s.split("|"):
        sample_set, _, addition_set = edge.partition(":")
        edge_sets.append(EdgeSet(parse_int(sample_set, strict=strict), parse_int(addition_set, strict=strict)))
    return tuple(edge_sets)


def _parse_end_time(tokens: list[str], strict: bool) -> tuple[LenientInt, str | None]:
    # osu!mania writes hold notes as `endTime:extras`, without a comma in between
    end_time, sep, extras = _get_field(tokens, 5, "end time").partition(":")
    if not sep:
        extras = _get_optional_field(tokens, 6)
    return parse_int(end_time, strict=strict), extras


def parse_circle(line: str, *, strict: bool = False) -> Circle:
    """Parse a hit circle, ``x,y,time,type,hitSound,extras``."""
    tokens = _split_line(line)
    return Circle(
        **_parse_common_fields(tokens, strict),
        type=Circle.TYPE_CODE.value,
        extras=parse_extras(_get_optional_field(tokens, 5)),
    )


def parse_slider(line: str, *, strict: bool = False) -> Slider:
    """
    Parse a slider.

    The line looks like ``x,y,time,type,hitSound,curve,repeat,pixelLength,edgeHitSounds,edgeSets,extras``. The last
    three fields are optional.
    """
    tokens = _split_line(line)
    curve_type, curve_points = parse_curve(_get_field(tokens, 5, "curve"), strict=strict)
    return Slider(
        **_parse_common_fields(tokens, strict),
        type=Slider.TYPE_CODE.value,
        curve_type=curve_type,
        curve_points=curve_points,
        repeat=parse_int(_get_field(tokens, 6, "repeat"), strict=strict),
        pixel_length=parse_float(_get_field(tokens, 7, "pixel length"), strict=strict),
        edge_hit_sounds=_parse_edge_hit_sounds(_get_optional_field(tokens, 8), strict),
        edge_sets=_parse_edge_sets(_get_optional_field(tokens, 9), strict),
        extras=parse_extras(_get_optional_field(tokens, 10)),
    )


def parse_spinner(line: str, *, strict: bool = False) -> Spinner:
    """Parse a spinner, ``x,y,time,type,hitSound,endTime,extras``."""
    tokens = _split_line(line)
    end_time, extras = _parse_end_time(tokens, strict)
    return Spinner(
        **_parse_common_fields(tokens, strict),
        type=Spinner.TYPE_CODE.value,
        end_time=end_time,
        extras=parse_extras(extras),
    )


def parse_hold_note(line: str, *, strict: bool = False) -> HoldNote:
    """Parse an osu!mania hold note, ``x,y,time,type,hitSound,endTime:extras``."""
    tokens = _split_line(line)
    end_time, extras = _parse_end_time(tokens, strict)
    return HoldNote(
        **_parse_common_fields(tokens, strict),
        type=HoldNote.TYPE_CODE.value,
        end_time=end_time,
        extras=parse_extras(extras),
    )


# Highest priority first. Combo skip bits (16, 32, 64) are ignored.
# fmt: off
HIT_OBJECT_DECODERS: list[tuple[HitObjectType, HitObjectDecoder]] = [
    (HitObjectType.HOLD   , parse_hold_note),
    (HitObjectType.SPINNER, parse_spinner),
    (HitObjectType.SLIDER , parse_slider),
    (HitObjectType.CIRCLE , parse_circle),
]
# fmt: on


def parse_hit_object(line: str, *, strict: bool = False, hold_notes_as_spinners: bool = False) -> HitObject:
    """
    Parse a line of the [HitObjects] section into the matching hit object class.

    The type bitmask decides the class. When several type bits are set, hold note wins over spinner, which wins over
    slider, which wins over circle. If the new combo bit is set, 4 is added to the type of the resulting object.

    :param line: The line to parse.
    :param strict: Whether malformed numbers raise instead of becoming NaN.
    :param hold_notes_as_spinners: Decode hold notes as spinners, like older readers of the format do.
    :returns: A :class:`Circle`, :class:`Slider`, :class:`Spinner` or :class:`HoldNote`.
    :raises ValueError: if the type is unknown or a required field is missing or malformed.
    """
    tokens = _split_line(line)
    type_str = _get_field(tokens, 3, "type")
    type_ = parse_int(type_str, strict=strict)
    if is_nan(type_):
        raise ValueError(f"type should be an int (got {type_str!r})")

    for type_code, decoder in HIT_OBJECT_DECODERS:
        if type_ & type_code.value:
            break
    else:
        raise ValueError(f"unknown hit object type (got {type_})")

    if type_code == HitObjectType.HOLD and hold_notes_as_spinners:
        logger.debug(f"decoding hold note at {tokens[2]} as a spinner")
        decoder = parse_spinner

    hit_object = decoder(line, strict=strict)
    if type_ & HitObjectType.NEW_COMBO.value:
        hit_object = dataclasses.replace(hit_object, type=hit_object.type + HitObjectType.NEW_COMBO.value)
    return hit_object
