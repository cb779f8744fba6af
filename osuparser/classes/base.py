"""
Base, generic classes supporting other more specialized classes.
"""
from abc import ABC
from dataclasses import dataclass

__all__ = [
    "AbstractDataclass",
    "BeatmapParseError",
]


@dataclass(frozen=True)
class AbstractDataclass(ABC):
    """An abstract base class for dataclasses."""

    def __new__(cls, *args, **kwargs):
        if cls == AbstractDataclass or cls.__bases__[0] == AbstractDataclass:
            raise TypeError("Cannot instantiate abstract class.")
        return super().__new__(cls)


class BeatmapParseError(ValueError):
    """Raised by a strict parser when a line cannot be parsed."""

    line_no: int
    line: str

    def __init__(self, message: str, line_no: int, line: str):
        super().__init__(f"{message} at line {line_no}: {line!r}")
        self.line_no = line_no
        self.line = line
