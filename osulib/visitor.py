from __future__ import annotations

import os
from typing import TYPE_CHECKING, Iterator, TypeVar

from .colour import Colours
from .events import Event
from .general import General
from .hit_object import HitObject
from .sections import Difficulty, Editor, Metadata
from .timing_point import TimingPoint

if TYPE_CHECKING:
    from .decoder import BeatmapDecoder


V = TypeVar("V", bound="Visitor")


class Visitor:
    """Receives the decoded sections of a beatmap.

    :meth:`BeatmapDecoder.decode <osulib.decoder.BeatmapDecoder.decode>`
    calls each ``visit_*`` method at most once, after the whole input has
    been read, and only for the sections selected on the decoder. Every
    method is a no-op here so subclasses only override what they need.

    List sections are passed as single pass iterators in file order.
    """

    @classmethod
    def open(
        cls: type[V],
        path: str | os.PathLike[str],
        decoder: BeatmapDecoder | None = None,
    ) -> V:
        """Decode the ``.osu`` file at ``path`` into a new visitor.

        Parameters
        ----------
        path : str or pathlib.Path
            The path to the file to read from.
        decoder : BeatmapDecoder, optional
            The sections to decode. Defaults to all sections.

        Returns
        -------
        visitor : Visitor
            A default constructed instance of ``cls`` which has visited the
            decoded sections.
        """
        from .decoder import BeatmapDecoder

        if decoder is None:
            decoder = BeatmapDecoder()
        return decoder.decode_path(cls(), path)

    def visit_file_format_version(self, version: int) -> None:
        pass

    def visit_general(self, general: General) -> None:
        pass

    def visit_editor(self, editor: Editor) -> None:
        pass

    def visit_metadata(self, metadata: Metadata) -> None:
        pass

    def visit_difficulty(self, difficulty: Difficulty) -> None:
        pass

    def visit_events(self, events: Iterator[Event]) -> None:
        pass

    def visit_timing_points(self, timing_points: Iterator[TimingPoint]) -> None:
        pass

    def visit_colours(self, colours: Colours) -> None:
        pass

    def visit_hit_objects(self, hit_objects: Iterator[HitObject]) -> None:
        pass
