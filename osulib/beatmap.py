from __future__ import annotations

import os
from typing import IO, Iterator, List, Tuple

from .colour import Colour, Colours
from .decoder import BeatmapDecoder
from .events import Background, Break, Event, EventType, Video
from .general import General
from .hit_object import HitObject
from .sections import Difficulty, Editor, Metadata
from .timing_point import TimingPoint
from .utils import Record
from .visitor import Visitor


class Beatmap(Record, Visitor):
    """A fully decoded beatmap.

    Parameters
    ----------
    format_version : int or None
        The ``osu file format v<N>`` version, ``None`` if the file has no
        version header.
    general : General
        The ``[General]`` section.
    editor : Editor
        The ``[Editor]`` section.
    metadata : Metadata
        The ``[Metadata]`` section.
    difficulty : Difficulty
        The ``[Difficulty]`` section.
    events : list[Event]
        The backgrounds, videos and breaks in file order.
    timing_points : list[TimingPoint]
        The timing points in file order.
    colours : Colours
        The ``[Colours]`` section.
    hit_objects : list[HitObject]
        The hit objects in file order.

    Notes
    -----
    A ``Beatmap`` is a :class:`~osulib.visitor.Visitor`; decoding into one
    with a decoder that skips some sections leaves those at their defaults.
    """

    def __init__(
        self,
        format_version: int | None = None,
        general: General | None = None,
        editor: Editor | None = None,
        metadata: Metadata | None = None,
        difficulty: Difficulty | None = None,
        events: List[Event] | None = None,
        timing_points: List[TimingPoint] | None = None,
        colours: Colours | None = None,
        hit_objects: List[HitObject] | None = None,
    ) -> None:
        self.format_version = format_version
        self.general = General() if general is None else general
        self.editor = Editor() if editor is None else editor
        self.metadata = Metadata() if metadata is None else metadata
        self.difficulty = Difficulty() if difficulty is None else difficulty
        self.events = [] if events is None else events
        self.timing_points = [] if timing_points is None else timing_points
        self.colours = Colours() if colours is None else colours
        self.hit_objects = [] if hit_objects is None else hit_objects

    def visit_file_format_version(self, version: int) -> None:
        self.format_version = version

    def visit_general(self, general: General) -> None:
        self.general = general

    def visit_editor(self, editor: Editor) -> None:
        self.editor = editor

    def visit_metadata(self, metadata: Metadata) -> None:
        self.metadata = metadata

    def visit_difficulty(self, difficulty: Difficulty) -> None:
        self.difficulty = difficulty

    def visit_events(self, events: Iterator[Event]) -> None:
        self.events = list(events)

    def visit_timing_points(self, timing_points: Iterator[TimingPoint]) -> None:
        self.timing_points = list(timing_points)

    def visit_colours(self, colours: Colours) -> None:
        self.colours = colours

    def visit_hit_objects(self, hit_objects: Iterator[HitObject]) -> None:
        self.hit_objects = list(hit_objects)

    @property
    def display_name(self) -> str:
        """The name of the map as it appears in game."""
        metadata = self.metadata
        return f"{metadata.artist} - {metadata.title} [{metadata.version}]"

    @property
    def breaks(self) -> list[Break]:
        """The breaks of this beatmap."""
        return [e for e in self.events if e.event_type is EventType.Break]

    @property
    def backgrounds(self) -> list[Background]:
        """The backgrounds of this beatmap."""
        return [e for e in self.events if e.event_type is EventType.Background]

    @property
    def videos(self) -> list[Video]:
        """The videos of this beatmap."""
        return [e for e in self.events if e.event_type is EventType.Video]

    def active_combo_colours(self) -> List[Tuple[int, Colour]]:
        """The combo colours in use, see :meth:`Colours.active_combo_colours`."""
        return list(self.colours.active_combo_colours())

    def __repr__(self) -> str:
        return f"<{type(self).__qualname__}: {self.display_name}>"

    @classmethod
    def from_path(cls, path: str | os.PathLike[str]) -> "Beatmap":
        """Read in a ``Beatmap`` object from a file on disk.

        Parameters
        ----------
        path : str or pathlib.Path
            The path to the file to read from.

        Returns
        -------
        beatmap : Beatmap
            The parsed beatmap object.

        Raises
        ------
        ReadError
            Raised when the file cannot be read.
        DecodeError
            Raised when the file cannot be parsed as a ``.osu`` file.
        """
        return BeatmapDecoder().decode_path(cls(), path)

    @classmethod
    def from_file(cls, file: IO[str]) -> "Beatmap":
        """Read in a ``Beatmap`` object from an open file object.

        Parameters
        ----------
        file : file-like
            The file object to read from.

        Returns
        -------
        beatmap : Beatmap
            The parsed beatmap object.

        Raises
        ------
        ReadError
            Raised when the file cannot be read.
        DecodeError
            Raised when the file cannot be parsed as a ``.osu`` file.
        """
        return BeatmapDecoder().decode_file(cls(), file)

    @classmethod
    def parse(cls, data: str) -> "Beatmap":
        """Parse a ``Beatmap`` from text in the ``.osu`` format.

        Parameters
        ----------
        data : str
            The data to parse.

        Returns
        -------
        beatmap : Beatmap
            The parsed beatmap object.

        Raises
        ------
        DecodeError
            Raised when the data cannot be parsed in the ``.osu`` format.
        """
        return BeatmapDecoder().parse(cls(), data)


class MinimalBeatmap(Record, Visitor):
    """The sections of a beatmap needed to list and preview it.

    Use with :meth:`BeatmapDecoder.minimal` so that the editor, colours and
    hit objects sections are never parsed.
    """

    def __init__(
        self,
        general: General | None = None,
        metadata: Metadata | None = None,
        difficulty: Difficulty | None = None,
        events: List[Event] | None = None,
        timing_points: List[TimingPoint] | None = None,
    ) -> None:
        self.general = General() if general is None else general
        self.metadata = Metadata() if metadata is None else metadata
        self.difficulty = Difficulty() if difficulty is None else difficulty
        self.events = [] if events is None else events
        self.timing_points = [] if timing_points is None else timing_points

    def visit_general(self, general: General) -> None:
        self.general = general

    def visit_metadata(self, metadata: Metadata) -> None:
        self.metadata = metadata

    def visit_difficulty(self, difficulty: Difficulty) -> None:
        self.difficulty = difficulty

    def visit_events(self, events: Iterator[Event]) -> None:
        self.events = list(events)

    def visit_timing_points(self, timing_points: Iterator[TimingPoint]) -> None:
        self.timing_points = list(timing_points)
