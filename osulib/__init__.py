from .beatmap import Beatmap, MinimalBeatmap
from .colour import Colour, Colours
from .curve import Bezier, CatmullRom, Curve, Linear, Perfect
from .decoder import BeatmapDecoder, Section
from .errors import (
    DecodeError,
    InvalidDataError,
    InvalidInputError,
    OsuLibError,
    ParseError,
    ReadError,
)
from .events import Background, Break, Event, EventType, Video
from .game_mode import GameMode
from .general import Countdown, General, OverlayPosition
from .hit_object import HitCircle, HitObject, HitObjectKind, HitSample, Slider, Spinner
from .hit_sound import HitSound
from .position import Position
from .sample_set import SampleSet
from .sections import Difficulty, Editor, Metadata
from .timing_point import Effects, InheritedTimingPoint, TimingPoint, UninheritedTimingPoint
from .visitor import Visitor

__version__ = "0.1.0"

__all__ = [
    "Background",
    "Beatmap",
    "BeatmapDecoder",
    "Bezier",
    "Break",
    "CatmullRom",
    "Colour",
    "Colours",
    "Countdown",
    "Curve",
    "DecodeError",
    "Difficulty",
    "Editor",
    "Effects",
    "Event",
    "EventType",
    "GameMode",
    "General",
    "HitCircle",
    "HitObject",
    "HitObjectKind",
    "HitSample",
    "HitSound",
    "InheritedTimingPoint",
    "InvalidDataError",
    "InvalidInputError",
    "Linear",
    "Metadata",
    "MinimalBeatmap",
    "OsuLibError",
    "OverlayPosition",
    "ParseError",
    "Perfect",
    "Position",
    "ReadError",
    "SampleSet",
    "Section",
    "Slider",
    "Spinner",
    "TimingPoint",
    "UninheritedTimingPoint",
    "Video",
    "Visitor",
]
