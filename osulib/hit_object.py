from __future__ import annotations

from datetime import timedelta
from enum import IntFlag
from typing import Iterator, List, Optional, Sequence, Tuple

from .curve import Curve
from .errors import InvalidDataError, InvalidInputError
from .hit_sound import HitSound
from .position import Position
from .sample_set import SampleSet
from .utils import Record, next_token, parse_float, parse_int, parse_ms, parse_u8

EdgeSet = Tuple[Optional[SampleSet], Optional[SampleSet]]


class HitObjectType(IntFlag):
    """The bits of the ``type`` field of a hit object."""

    HIT_CIRCLE = 1 << 0
    SLIDER = 1 << 1
    NEW_COMBO = 1 << 2
    SPINNER = 1 << 3
    COLOUR_HAX_1 = 1 << 4
    COLOUR_HAX_2 = 1 << 5
    COLOUR_HAX_3 = 1 << 6
    COLOUR_HAX = COLOUR_HAX_1 | COLOUR_HAX_2 | COLOUR_HAX_3
    MANIA_HOLD_NOTE = 1 << 7


class HitSample(Record):
    """Information about which samples are played when an object is hit.

    Parameters
    ----------
    normal_set : SampleSet or None
        Sample set of the normal sound.
    addition_set : SampleSet or None
        Sample set of the whistle, finish and clap sounds.
    index : int or None
        Index of the sample, ``None`` to use the timing point's index.
    volume : int or None
        Volume of the sample, ``None`` to use the timing point's volume.
    filename : str or None
        Custom filename of the addition sound.

    Notes
    -----
    In the file every field uses ``0`` to mean "not set", so a real index or
    volume of ``0`` cannot be told apart from a missing one.
    """

    def __init__(
        self,
        normal_set: SampleSet | None = None,
        addition_set: SampleSet | None = None,
        index: int | None = None,
        volume: int | None = None,
        filename: str | None = None,
    ) -> None:
        self.normal_set = normal_set
        self.addition_set = addition_set
        self.index = index
        self.volume = volume
        self.filename = filename

    @classmethod
    def parse(cls, data: str) -> "HitSample":
        """Parse a ``normalSet:additionSet:index:volume:filename`` field.

        Raises
        ------
        InvalidDataError
            Raised when one of the five fields is missing.
        ParseError
            Raised when a numeric field is not an integer.
        InvalidInputError
            Raised when a sample set is not a known sample set.
        """
        context = "hit sample"
        parts = iter(data.split(":"))
        normal_set = next_token(parts, "normal set", context)
        addition_set = next_token(parts, "addition set", context)
        index = next_token(parts, "index", context)
        volume = next_token(parts, "volume", context)
        filename = next_token(parts, "filename", context)

        return cls(
            normal_set=_sample_set_or_none("normal_set", normal_set),
            addition_set=_sample_set_or_none("addition_set", addition_set),
            index=None if index == "0" else parse_int("index", index),
            volume=None if volume == "0" else parse_int("volume", volume),
            # an empty filename is written by most editors when there is none
            filename=None if filename in ("0", "") else filename,
        )


def _sample_set_or_none(field: str, data: str) -> SampleSet | None:
    if data == "0":
        return None
    return SampleSet.from_value(parse_int(field, data))


class HitObjectKind(Record):
    """The kind specific part of a hit object."""

    @property
    def is_hit_circle(self) -> bool:
        return isinstance(self, HitCircle)

    @property
    def is_slider(self) -> bool:
        return isinstance(self, Slider)

    @property
    def is_spinner(self) -> bool:
        return isinstance(self, Spinner)


class HitCircle(HitObjectKind):
    """A circle. Circles have no extra parameters."""


class Spinner(HitObjectKind):
    """A spinner.

    Parameters
    ----------
    end_time : timedelta
        When this spinner ends in the map.
    """

    def __init__(self, end_time: timedelta) -> None:
        self.end_time = end_time

    @classmethod
    def _parse(cls, parts: Iterator[str]) -> "Spinner":
        end_time_raw = next_token(parts, "end time", "spinner")
        return cls(parse_ms("end_time", end_time_raw))


class Slider(HitObjectKind):
    """A slider.

    Parameters
    ----------
    curve : Curve
        The anchor points of the slider.
    slides : int
        The number of times the player has to follow the curve back and
        forth, i.e. the repeat count plus one.
    length : float
        The visual length of the slider in osu! pixels.
    edge_sounds : list[HitSound]
        The hit sounds played on each edge. The first is played at the head
        of the slider and the last at its end.
    edge_sets : list[tuple[SampleSet or None, SampleSet or None]]
        The ``(normal, addition)`` sample sets of each edge.
    """

    def __init__(
        self,
        curve: Curve,
        slides: int,
        length: float,
        edge_sounds: Sequence[HitSound] = (),
        edge_sets: Sequence[EdgeSet] = (),
    ) -> None:
        self.curve = curve
        self.slides = slides
        self.length = length
        self.edge_sounds: List[HitSound] = list(edge_sounds)
        self.edge_sets: List[EdgeSet] = list(edge_sets)

    @classmethod
    def _parse(cls, parts: Iterator[str]) -> "Slider":
        context = "slider"
        curve = Curve.parse(next_token(parts, "curve", context))
        slides = parse_int("slides", next_token(parts, "slides", context))
        length = parse_float("length", next_token(parts, "length", context))

        # both edge lists are optional, missing or empty fields give an
        # empty list
        edge_sounds: List[HitSound] = []
        raw_edge_sounds = next(parts, "").strip()
        if raw_edge_sounds:
            edge_sounds = [
                HitSound.parse(edge_sound.strip(), "edge_sound")
                for edge_sound in raw_edge_sounds.split("|")
            ]

        edge_sets: List[EdgeSet] = []
        raw_edge_sets = next(parts, "").strip()
        if raw_edge_sets:
            for edge_set in raw_edge_sets.split("|"):
                normal, sep, addition = edge_set.strip().partition(":")
                if not sep:
                    raise InvalidDataError(
                        f"expected edge sets in the form normal:addition,"
                        f" got {edge_set!r}",
                    )
                edge_sets.append(
                    (
                        SampleSet.parse_optional("edge_set", normal),
                        SampleSet.parse_optional("edge_set", addition),
                    ),
                )

        return cls(curve, slides, length, edge_sounds, edge_sets)


class HitObject(Record):
    """A hit object of the ``[HitObjects]`` section.

    Parameters
    ----------
    position : Position
        Where this object appears on the screen.
    time : timedelta
        When this object is to be hit.
    new_combo : bool
        Whether this object is the start of a new combo.
    colour_hax : int
        How many combo colours to skip if this object is the start of a new
        combo.
    hit_sound : HitSound
        The hit sound played when this object is hit.
    kind : HitObjectKind
        The :class:`HitCircle`, :class:`Slider` or :class:`Spinner` specific
        data.
    hit_sample : HitSample
        Which samples are played when this object is hit.
    """

    def __init__(
        self,
        position: Position,
        time: timedelta,
        new_combo: bool,
        colour_hax: int,
        hit_sound: HitSound,
        kind: HitObjectKind,
        hit_sample: HitSample | None = None,
    ) -> None:
        self.position = position
        self.time = time
        self.new_combo = new_combo
        self.colour_hax = colour_hax
        self.hit_sound = hit_sound
        self.kind = kind
        self.hit_sample = HitSample() if hit_sample is None else hit_sample

    @property
    def is_hit_circle(self) -> bool:
        return self.kind.is_hit_circle

    @property
    def is_slider(self) -> bool:
        return self.kind.is_slider

    @property
    def is_spinner(self) -> bool:
        return self.kind.is_spinner

    @classmethod
    def parse(cls, data: str) -> "HitObject":
        """Parse a hit object from a line in a ``.osu`` file.

        Parameters
        ----------
        data : str
            The line to parse.

        Returns
        -------
        hit_object : HitObject
            The parsed hit object.

        Raises
        ------
        InvalidDataError
            Raised when a required field is missing.
        ParseError
            Raised when a field is not a number.
        InvalidInputError
            Raised when the type has none of the circle, slider or spinner
            bits set, or when a sample set or curve kind is unknown.
        """
        context = "hit object"
        parts = iter(data.split(","))

        x = parse_float("x", next_token(parts, "x", context))
        y = parse_float("y", next_token(parts, "y", context))
        time = parse_ms("time", next_token(parts, "time", context))
        type_code = HitObjectType(
            parse_u8("type", next_token(parts, "type", context)),
        )
        hit_sound = HitSound.parse(next_token(parts, "hit sound", context))

        # new combo info is in second bit (0-indexed)
        new_combo = bool(type_code & HitObjectType.NEW_COMBO)
        # 3 bit int for combo skip is held in 4th, 5th, and 6th bits
        colour_hax = (type_code & HitObjectType.COLOUR_HAX) >> 4

        kind: HitObjectKind
        if type_code & HitObjectType.HIT_CIRCLE:
            kind = HitCircle()
        elif type_code & HitObjectType.SLIDER:
            kind = Slider._parse(parts)
        elif type_code & HitObjectType.SPINNER:
            kind = Spinner._parse(parts)
        else:
            # osu!mania hold notes are not supported
            raise InvalidInputError(f"invalid hit object type: {int(type_code)!r}")

        raw_hit_sample = next(parts, None)
        hit_sample = (
            HitSample() if raw_hit_sample is None
            else HitSample.parse(raw_hit_sample.strip())
        )

        return cls(
            Position(x, y),
            time,
            new_combo,
            int(colour_hax),
            hit_sound,
            kind,
            hit_sample,
        )
