from __future__ import annotations

from datetime import timedelta
from typing import List

from .utils import KeyValueSection, as_str, parse_float, parse_int, parse_ms


def _bookmarks(field: str, raw: str) -> List[timedelta]:
    if not raw:
        return []
    return [parse_ms(field, e.strip()) for e in raw.split(",")]


def _tags(field: str, raw: str) -> List[str]:
    # space delimited list
    return raw.split()


class Editor(KeyValueSection):
    """The ``[Editor]`` section of a beatmap.

    Parameters
    ----------
    bookmarks : list[timedelta]
        The times of the editor bookmarks.
    distance_spacing : float
        Distance snap multiplier.
    beat_divisor : int
        Beat snap divisor.
    grid_size : int
        Grid size.
    timeline_zoom : float
        Scale factor for the object timeline.
    """

    _fields = {
        "Bookmarks": ("bookmarks", _bookmarks),
        "DistanceSpacing": ("distance_spacing", parse_float),
        "BeatDivisor": ("beat_divisor", parse_int),
        "GridSize": ("grid_size", parse_int),
        "TimelineZoom": ("timeline_zoom", parse_float),
    }

    def __init__(
        self,
        bookmarks: List[timedelta] | None = None,
        distance_spacing: float = 1.0,
        beat_divisor: int = 4,
        grid_size: int = 4,
        timeline_zoom: float = 1.0,
    ) -> None:
        self.bookmarks = [] if bookmarks is None else bookmarks
        self.distance_spacing = distance_spacing
        self.beat_divisor = beat_divisor
        self.grid_size = grid_size
        self.timeline_zoom = timeline_zoom


class Metadata(KeyValueSection):
    """The ``[Metadata]`` section of a beatmap.

    Parameters
    ----------
    title : str
        The romanised song title.
    title_unicode : str
        The song title.
    artist : str
        The romanised song artist.
    artist_unicode : str
        The song artist.
    creator : str
        The beatmap creator.
    version : str
        The difficulty name.
    source : str
        The original media the song was produced for.
    tags : list[str]
        Search terms.
    beatmap_id : int or None
        The difficulty id.
    beatmap_set_id : int or None
        The beatmap set id.
    """

    _fields = {
        "Title": ("title", as_str),
        "TitleUnicode": ("title_unicode", as_str),
        "Artist": ("artist", as_str),
        "ArtistUnicode": ("artist_unicode", as_str),
        "Creator": ("creator", as_str),
        "Version": ("version", as_str),
        "Source": ("source", as_str),
        "Tags": ("tags", _tags),
        "BeatmapID": ("beatmap_id", parse_int),
        "BeatmapSetID": ("beatmap_set_id", parse_int),
    }

    def __init__(
        self,
        title: str = "",
        title_unicode: str = "",
        artist: str = "",
        artist_unicode: str = "",
        creator: str = "",
        version: str = "",
        source: str = "",
        tags: List[str] | None = None,
        beatmap_id: int | None = None,
        beatmap_set_id: int | None = None,
    ) -> None:
        self.title = title
        self.title_unicode = title_unicode
        self.artist = artist
        self.artist_unicode = artist_unicode
        self.creator = creator
        self.version = version
        self.source = source
        self.tags = [] if tags is None else tags
        self.beatmap_id = beatmap_id
        self.beatmap_set_id = beatmap_set_id


class Difficulty(KeyValueSection):
    """The ``[Difficulty]`` section of a beatmap.

    Parameters
    ----------
    hp_drain_rate : float
        HP setting (0-10).
    circle_size : float
        CS setting (0-10).
    overall_difficulty : float
        OD setting (0-10).
    approach_rate : float
        AR setting (0-10).
    slider_multiplier : float
        Base slider velocity in hundreds of osu! pixels per beat.
    slider_tick_rate : float
        Amount of slider ticks per beat.
    """

    _fields = {
        "HPDrainRate": ("hp_drain_rate", parse_float),
        "CircleSize": ("circle_size", parse_float),
        "OverallDifficulty": ("overall_difficulty", parse_float),
        "ApproachRate": ("approach_rate", parse_float),
        "SliderMultiplier": ("slider_multiplier", parse_float),
        "SliderTickRate": ("slider_tick_rate", parse_float),
    }

    def __init__(
        self,
        hp_drain_rate: float = 5.0,
        circle_size: float = 5.0,
        overall_difficulty: float = 5.0,
        approach_rate: float = 5.0,
        slider_multiplier: float = 1.4,  # taken from wiki
        slider_tick_rate: float = 1.0,  # taken from wiki
    ) -> None:
        self.hp_drain_rate = hp_drain_rate
        self.circle_size = circle_size
        self.overall_difficulty = overall_difficulty
        self.approach_rate = approach_rate
        self.slider_multiplier = slider_multiplier
        self.slider_tick_rate = slider_tick_rate
