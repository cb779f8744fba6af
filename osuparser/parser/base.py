"""
Abstract base classes for parsers.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import TextIO

from ..classes.beatmap import Beatmap

__all__ = [
    "Parser",
]


class Parser(ABC):
    """
    An abstract base class for parsers that read a specific format.
    """

    _file_path: Path | None = None

    @abstractmethod
    def parse(self, text: str) -> Beatmap:
        """Parse the full text of a file, producing a beatmap."""
        pass

    def parse_file(self, f: TextIO) -> Beatmap:
        """Read an opened text file and parse its contents."""
        name = getattr(f, "name", None)
        if isinstance(name, str):
            self._file_path = Path(name).resolve()
        return self.parse(f.read())

    @property
    def file_path(self) -> Path | None:
        """Path to the last file parsed with :meth:`parse_file`, if known."""
        return self._file_path
