from __future__ import annotations

from datetime import timedelta
from enum import IntEnum
from typing import ClassVar, Sequence

from .errors import InvalidDataError, InvalidInputError
from .position import Position
from .utils import Record, _get, parse_float, parse_ms


class EventType(IntEnum):
    Background = 0
    Video = 1
    Break = 2

    @classmethod
    def _missing_(cls, value):
        return {
            "Background": EventType.Background,
            "Video": EventType.Video,
            "Break": EventType.Break,
        }.get(value)

    @classmethod
    def parse(cls, data: str) -> "EventType":
        # the type is written either as its integer value or its name;
        # _missing_ maps the names
        event_type: int | str = int(data) if data.isdecimal() else data
        try:
            return cls(event_type)
        except ValueError:
            raise InvalidInputError(f"invalid event type: {data!r}") from None


class Event(Record):
    """Base class for the events of the ``[Events]`` section.

    An event line is a comma separated list whose first token is the event
    type. Only backgrounds, videos and breaks are decoded; storyboard lines
    fail to parse with :class:`InvalidInputError`.
    """

    event_type: ClassVar[EventType]

    @property
    def is_background(self) -> bool:
        return self.event_type is EventType.Background

    @property
    def is_video(self) -> bool:
        return self.event_type is EventType.Video

    @property
    def is_break(self) -> bool:
        return self.event_type is EventType.Break

    @classmethod
    def parse(cls, data: str) -> "Event":
        """Parse an event from a line of the ``[Events]`` section.

        Parameters
        ----------
        data : str
            The line to parse.

        Returns
        -------
        event : Event
            The parsed event, a :class:`Background`, :class:`Video` or
            :class:`Break`.

        Raises
        ------
        DecodeError
            Raised when ``data`` does not describe a known event.
        """
        event_type, *event_params = (part.strip() for part in data.split(","))

        parser = {
            EventType.Background: Background._parse,
            EventType.Video: Video._parse,
            EventType.Break: Break._parse,
        }
        return parser[EventType.parse(event_type)](event_params)


class Background(Event):
    """The background image of a beatmap.

    Parameters
    ----------
    filename : str
        Location of the background image relative to the beatmap directory.
    offset : Position
        Offset in osu! pixels from the centre of the screen.
    """

    event_type = EventType.Background

    def __init__(self, filename: str, offset: Position = Position(0, 0)) -> None:
        self.filename = filename
        self.offset = offset

    @classmethod
    def _parse(cls, event_params: Sequence[str]) -> "Background":
        # the start time of a background is always 0 and is not used
        if not event_params:
            raise InvalidDataError("expected start_time parameter for Background")
        if len(event_params) < 2:
            raise InvalidDataError("expected filename parameter for Background")

        filename = event_params[1].strip('"')
        # the offset is optional and defaults to 0,0
        x_offset = parse_float("Background x_offset", _get(event_params, 2, "0"))
        y_offset = parse_float("Background y_offset", _get(event_params, 3, "0"))
        return cls(filename, Position(x_offset, y_offset))


class Video(Event):
    """A background video.

    Parameters
    ----------
    start_time : timedelta
        When the video starts.
    filename : str
        Location of the video relative to the beatmap directory.
    offset : Position
        Offset in osu! pixels from the centre of the screen.
    """

    event_type = EventType.Video

    def __init__(
        self,
        start_time: timedelta,
        filename: str,
        offset: Position = Position(0, 0),
    ) -> None:
        self.start_time = start_time
        self.filename = filename
        self.offset = offset

    @classmethod
    def _parse(cls, event_params: Sequence[str]) -> "Video":
        if len(event_params) < 4:
            raise InvalidDataError(
                "expected start_time, filename, x_offset and y_offset"
                f" parameters for Video, got {list(event_params)!r}",
            )

        start_time, filename, x_offset, y_offset, *_ = event_params
        return cls(
            parse_ms("Video start_time", start_time),
            filename.strip('"'),
            Position(
                parse_float("Video x_offset", x_offset),
                parse_float("Video y_offset", y_offset),
            ),
        )


class Break(Event):
    """A break period.

    Parameters
    ----------
    start_time : timedelta
        When the break starts.
    end_time : timedelta
        When the break ends.
    """

    event_type = EventType.Break

    def __init__(self, start_time: timedelta, end_time: timedelta) -> None:
        self.start_time = start_time
        self.end_time = end_time

    @classmethod
    def _parse(cls, event_params: Sequence[str]) -> "Break":
        if len(event_params) < 2:
            raise InvalidDataError(
                "expected start_time and end_time parameters for Break",
            )

        start_time, end_time, *_ = event_params
        return cls(
            parse_ms("Break start_time", start_time),
            parse_ms("Break end_time", end_time),
        )
