from .base import (
    BeatmapParseError,
)

from .beatmap import (
    Beatmap,
    Difficulty,
    General,
    Metadata,
)

from .enums import (
    Countdown,
    CurveType,
    GameMode,
    HitObjectType,
    Section,
)

from .hitobjects import (
    Circle,
    CurvePoint,
    EdgeSet,
    Extras,
    HitObject,
    HoldNote,
    Slider,
    Spinner,
)

from .timing import (
    TimingPoint
)
