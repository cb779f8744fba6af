from .base import (
    Parser,
)

from .osu import (
    OsuParser,
)
