"""
Reader for osu! beatmap files.
"""
from .classes import Beatmap
from .parser import OsuParser

__all__ = [
    "Beatmap",
    "OsuParser",
    "parse_beatmap",
]


def parse_beatmap(text: str, *, strict: bool = False, hold_notes_as_spinners: bool = False) -> Beatmap:
    """Parse the full text of a .osu file with a one-off :class:`OsuParser`."""
    return OsuParser(strict=strict, hold_notes_as_spinners=hold_notes_as_spinners).parse(text)
