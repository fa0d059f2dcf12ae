from __future__ import annotations

import os
import re
import logging
from enum import IntFlag
from functools import reduce
from typing import IO, TYPE_CHECKING, Any, Callable, Dict, Iterable, Iterator, List, TypeVar

from .colour import Colours
from .errors import DecodeError, InvalidDataError, ReadError
from .events import Event
from .general import General
from .hit_object import HitObject
from .sections import Difficulty, Editor, Metadata
from .timing_point import TimingPoint

if TYPE_CHECKING:
    from .visitor import Visitor

V = TypeVar("V", bound="Visitor")

log = logging.getLogger(__name__)


class Section(IntFlag):
    """The independently decodable sections of a beatmap."""

    NONE = 0
    GENERAL = 1 << 0
    EDITOR = 1 << 1
    METADATA = 1 << 2
    DIFFICULTY = 1 << 3
    EVENTS = 1 << 4
    TIMING_POINTS = 1 << 5
    COLOURS = 1 << 6
    HIT_OBJECTS = 1 << 7

    MINIMAL = GENERAL | METADATA | DIFFICULTY | EVENTS | TIMING_POINTS
    ALL = (
        GENERAL
        | EDITOR
        | METADATA
        | DIFFICULTY
        | EVENTS
        | TIMING_POINTS
        | COLOURS
        | HIT_OBJECTS
    )


#: The section names recognized in ``[...]`` headers.
SECTION_NAMES: Dict[str, Section] = {
    "General": Section.GENERAL,
    "Editor": Section.EDITOR,
    "Metadata": Section.METADATA,
    "Difficulty": Section.DIFFICULTY,
    "Events": Section.EVENTS,
    "TimingPoints": Section.TIMING_POINTS,
    "Colours": Section.COLOURS,
    "HitObjects": Section.HIT_OBJECTS,
}

_version_prefix = "osu file format v"
_version_regex = re.compile(r"^osu file format v(\d+)$")


class BeatmapDecoder:
    """Decodes ``.osu`` files into a :class:`~osulib.visitor.Visitor`.

    A decoder is an immutable set of :class:`Section` flags that controls
    which sections are parsed at all. Sections that are not selected are
    skipped without being parsed, so selecting fewer sections makes decoding
    cheaper but never changes the values of the selected ones.

    Parameters
    ----------
    sections : Section, optional
        The sections to decode. Defaults to :data:`Section.ALL`.

    Examples
    --------
    >>> BeatmapDecoder.empty().general().metadata() == BeatmapDecoder(
    ...     Section.GENERAL | Section.METADATA,
    ... )
    True
    """

    __slots__ = ("_sections",)

    def __init__(self, sections: Section = Section.ALL) -> None:
        object.__setattr__(self, "_sections", Section(sections))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__qualname__} is immutable")

    @property
    def sections(self) -> Section:
        return self._sections

    @classmethod
    def empty(cls) -> "BeatmapDecoder":
        """A decoder that selects no section."""
        return cls(Section.NONE)

    @classmethod
    def minimal(cls) -> "BeatmapDecoder":
        """A decoder for the general, metadata, difficulty, events and timing
        points sections.
        """
        return cls(Section.MINIMAL)

    @classmethod
    def all(cls) -> "BeatmapDecoder":
        """A decoder that selects every section."""
        return cls(Section.ALL)

    def include(self, *sections: Section) -> "BeatmapDecoder":
        """Return a new decoder which also selects ``sections``."""
        return type(self)(reduce(lambda a, b: a | b, sections, self._sections))

    def general(self) -> "BeatmapDecoder":
        return self.include(Section.GENERAL)

    def editor(self) -> "BeatmapDecoder":
        return self.include(Section.EDITOR)

    def metadata(self) -> "BeatmapDecoder":
        return self.include(Section.METADATA)

    def difficulty(self) -> "BeatmapDecoder":
        return self.include(Section.DIFFICULTY)

    def events(self) -> "BeatmapDecoder":
        return self.include(Section.EVENTS)

    def timing_points(self) -> "BeatmapDecoder":
        return self.include(Section.TIMING_POINTS)

    def colours(self) -> "BeatmapDecoder":
        return self.include(Section.COLOURS)

    def hit_objects(self) -> "BeatmapDecoder":
        return self.include(Section.HIT_OBJECTS)

    def __or__(self, other: object) -> "BeatmapDecoder":
        if isinstance(other, BeatmapDecoder):
            return self.include(other._sections)
        if isinstance(other, Section):
            return self.include(other)
        return NotImplemented

    __ror__ = __or__

    def __contains__(self, section: Section) -> bool:
        return (self._sections & section) == section

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BeatmapDecoder):
            return NotImplemented
        return self._sections == other._sections

    def __hash__(self) -> int:
        return hash(self._sections)

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}({self._sections!r})"

    def decode(self, visitor: V, lines: Iterable[str]) -> V:
        """Decode a stream of ``.osu`` lines into ``visitor``.

        Parameters
        ----------
        visitor : Visitor
            The visitor to deliver the decoded sections to.
        lines : iterable[str]
            The lines of the file, with or without their line endings.

        Returns
        -------
        visitor : Visitor
            The ``visitor`` that was passed in.

        Raises
        ------
        ReadError
            Raised when iterating ``lines`` fails.
        DecodeError
            Raised when the version header, a hit object, a timing point or
            the value of a known key is malformed. Nothing is delivered to
            ``visitor`` for the sections in this case.

        Notes
        -----
        Malformed lines in the ``[Events]`` section are dropped. Unknown
        sections and unknown keys are ignored.
        """
        general = General() if Section.GENERAL in self else None
        editor = Editor() if Section.EDITOR in self else None
        metadata = Metadata() if Section.METADATA in self else None
        difficulty = Difficulty() if Section.DIFFICULTY in self else None
        events: List[Event] | None = [] if Section.EVENTS in self else None
        timing_points: List[TimingPoint] | None = (
            [] if Section.TIMING_POINTS in self else None
        )
        colours = Colours() if Section.COLOURS in self else None
        hit_objects: List[HitObject] | None = (
            [] if Section.HIT_OBJECTS in self else None
        )

        parsers: Dict[str, Callable[[str], None]] = {}
        if general is not None:
            parsers["General"] = general.parse_line
        if editor is not None:
            parsers["Editor"] = editor.parse_line
        if metadata is not None:
            parsers["Metadata"] = metadata.parse_line
        if difficulty is not None:
            parsers["Difficulty"] = difficulty.parse_line
        if events is not None:
            parsers["Events"] = _event_appender(events)
        if timing_points is not None:
            parsers["TimingPoints"] = _appender(timing_points, TimingPoint.parse)
        if colours is not None:
            parsers["Colours"] = colours.parse_line
        if hit_objects is not None:
            parsers["HitObjects"] = _appender(hit_objects, HitObject.parse)

        section: str | None = None
        seen_version = False
        for lineno, line in enumerate(_read_lines(lines), start=1):
            # some (presumably manually edited) beatmaps have whitespace at the
            # beginning or end of lines. This can cause logic relying on tokens
            # occurring at specific indices to fail, so we get rid of it.
            line = line.strip()
            if lineno == 1:
                # Remove BOM if present
                line = line.removeprefix("\ufeff")

            if not seen_version and line.startswith(_version_prefix):
                match = _version_regex.match(line)
                if match is None:
                    raise InvalidDataError(
                        f"invalid osu file format specifier: {line!r}",
                    )
                visitor.visit_file_format_version(int(match.group(1)))
                seen_version = True
                continue

            if not line or line.startswith("//"):
                # filter out empty lines and comments
                continue

            if line[0] == "[" and line[-1] == "]":
                section = line[1:-1]
                if section not in SECTION_NAMES:
                    log.debug("line %d: ignoring unknown section %r", lineno, section)
                continue

            if section is None:
                continue

            parser = parsers.get(section)
            if parser is not None:
                parser(line)

        if general is not None:
            visitor.visit_general(general)
        if editor is not None:
            visitor.visit_editor(editor)
        if metadata is not None:
            visitor.visit_metadata(metadata)
        if difficulty is not None:
            visitor.visit_difficulty(difficulty)
        if events is not None:
            visitor.visit_events(iter(events))
        if timing_points is not None:
            visitor.visit_timing_points(iter(timing_points))
        if colours is not None:
            visitor.visit_colours(colours)
        if hit_objects is not None:
            visitor.visit_hit_objects(iter(hit_objects))

        log.debug(
            "decoded %s into %s",
            self._sections,
            type(visitor).__qualname__,
        )
        return visitor

    def parse(self, visitor: V, data: str) -> V:
        """Decode the text of a whole ``.osu`` file into ``visitor``."""
        return self.decode(visitor, data.splitlines())

    def decode_file(self, visitor: V, file: IO[str]) -> V:
        """Decode an open text file object into ``visitor``."""
        return self.decode(visitor, file)

    def decode_path(self, visitor: V, path: str | os.PathLike[str]) -> V:
        """Decode the ``.osu`` file at ``path`` into ``visitor``.

        Raises
        ------
        ReadError
            Raised when the file cannot be opened or read.
        DecodeError
            Raised when the file is malformed.
        """
        try:
            file = open(path, encoding="utf-8-sig")
        except OSError as e:
            raise ReadError(f"failed to open {os.fspath(path)!r}: {e}") from e

        with file:
            return self.decode_file(visitor, file)


def _read_lines(lines: Iterable[str]) -> Iterator[str]:
    it = iter(lines)
    while True:
        try:
            line = next(it)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            raise ReadError(f"failed to read beatmap: {e}") from e
        yield line


def _appender(
    target: List[Any],
    parse: Callable[[str], Any],
) -> Callable[[str], None]:
    def append(line: str) -> None:
        target.append(parse(line))

    return append


def _event_appender(target: List[Event]) -> Callable[[str], None]:
    def append(line: str) -> None:
        try:
            event = Event.parse(line)
        except DecodeError as e:
            log.debug("dropping event %r: %s", line, e)
            return
        target.append(event)

    return append
