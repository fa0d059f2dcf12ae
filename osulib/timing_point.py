from __future__ import annotations

from datetime import timedelta
from enum import IntFlag

from .sample_set import SampleSet
from .utils import Record, next_token, parse_float, parse_float_ms, parse_int, parse_u8

#: Inherited timing points store their slider velocity as
#: ``beat_length / INHERITED_BEAT_LENGTH_DIVISOR``.
INHERITED_BEAT_LENGTH_DIVISOR = -25.0


class Effects(IntFlag):
    """Bit flags that give a timing point extra effects.

    Bits other than the two known effects are discarded when parsing.
    """

    NONE = 0
    KIAI = 1 << 0
    OMIT_FIRST_BAR_LINE = 1 << 3


class TimingPoint(Record):
    """A timing point assigns properties to an offset into a beatmap.

    ``TimingPoint`` is never instantiated directly: a line of the
    ``[TimingPoints]`` section parses to either an
    :class:`UninheritedTimingPoint` or an :class:`InheritedTimingPoint`.

    Parameters
    ----------
    time : timedelta
        When this timing point takes effect.
    sample_set : SampleSet or None
        The default sample set for hit objects, ``None`` to use the beatmap
        default.
    sample_index : int or None
        The custom sample index for hit objects, ``None`` to use osu!'s
        default hit sounds.
    volume : int
        The volume percentage for hit objects.
    effects : Effects
        The extra effects of this timing point.
    """

    def __init__(
        self,
        time: timedelta,
        sample_set: SampleSet | None,
        sample_index: int | None,
        volume: int,
        effects: Effects,
    ) -> None:
        self.time = time
        self.sample_set = sample_set
        self.sample_index = sample_index
        self.volume = volume
        self.effects = effects

    @property
    def inherited(self) -> bool:
        return isinstance(self, InheritedTimingPoint)

    @property
    def uninherited(self) -> bool:
        return isinstance(self, UninheritedTimingPoint)

    @property
    def kiai_mode(self) -> bool:
        """Whether or not kiai time effects are active."""
        return bool(self.effects & Effects.KIAI)

    @classmethod
    def parse(cls, data: str) -> "TimingPoint":
        """Parse a timing point from a line in a ``.osu`` file.

        All eight fields are required regardless of the variant:
        ``time,beatLength,meter,sampleSet,sampleIndex,volume,uninherited,effects``.

        Parameters
        ----------
        data : str
            The line to parse.

        Returns
        -------
        timing_point : UninheritedTimingPoint or InheritedTimingPoint
            The parsed timing point. The ``uninherited`` field picks the
            variant: ``1`` is uninherited, anything else is inherited.

        Raises
        ------
        InvalidDataError
            Raised when a field is missing.
        ParseError
            Raised when a field is not a number.
        InvalidInputError
            Raised when the sample set is not a known sample set.
        """
        context = "timing point"
        parts = iter(data.split(","))

        time = parse_float_ms("time", next_token(parts, "time", context))
        beat_length = parse_float(
            "beat_length",
            next_token(parts, "beat length", context),
        )
        meter = parse_int("meter", next_token(parts, "meter", context))
        sample_set = SampleSet.parse_optional(
            "sample_set",
            next_token(parts, "sample set", context),
        )
        sample_index: int | None = parse_int(
            "sample_index",
            next_token(parts, "sample index", context),
        )
        if sample_index == 0:
            sample_index = None
        volume = parse_int("volume", next_token(parts, "volume", context))
        uninherited = parse_u8(
            "uninherited",
            next_token(parts, "uninherited", context),
        ) == 1
        effects = Effects(
            parse_u8("effects", next_token(parts, "effects", context))
            & (Effects.KIAI | Effects.OMIT_FIRST_BAR_LINE),
        )

        if uninherited:
            return UninheritedTimingPoint(
                time,
                beat_length,
                meter,
                sample_set,
                sample_index,
                volume,
                effects,
            )

        return InheritedTimingPoint(
            time,
            beat_length / INHERITED_BEAT_LENGTH_DIVISOR,
            sample_set,
            sample_index,
            volume,
            effects,
        )


class UninheritedTimingPoint(TimingPoint):
    """A timing point that starts a new timing section.

    Parameters
    ----------
    time : timedelta
        When this timing point takes effect.
    beat_length : float
        The duration of a beat in milliseconds.
    meter : int
        The number of beats per measure.
    sample_set : SampleSet or None
        The default sample set for hit objects.
    sample_index : int or None
        The custom sample index for hit objects.
    volume : int
        The volume percentage for hit objects.
    effects : Effects
        The extra effects of this timing point.
    """

    def __init__(
        self,
        time: timedelta,
        beat_length: float,
        meter: int,
        sample_set: SampleSet | None,
        sample_index: int | None,
        volume: int,
        effects: Effects,
    ) -> None:
        super().__init__(time, sample_set, sample_index, volume, effects)
        self.beat_length = beat_length
        self.meter = meter

    @property
    def slider_velocity(self) -> float:
        return 1.0

    @property
    def bpm(self) -> float | None:
        """The beats per minute of this timing section.

        ``None`` when the beat length is not positive.
        """
        if self.beat_length <= 0:
            return None
        return 60000 / self.beat_length


class InheritedTimingPoint(TimingPoint):
    """A timing point that changes the slider velocity, volume or sample set
    of the current timing section without changing its timing.

    Parameters
    ----------
    time : timedelta
        When this timing point takes effect.
    slider_velocity : float
        The slider velocity multiplier, derived from the beat length field
        in the file.
    sample_set : SampleSet or None
        The default sample set for hit objects.
    sample_index : int or None
        The custom sample index for hit objects.
    volume : int
        The volume percentage for hit objects.
    effects : Effects
        The extra effects of this timing point.
    """

    def __init__(
        self,
        time: timedelta,
        slider_velocity: float,
        sample_set: SampleSet | None,
        sample_index: int | None,
        volume: int,
        effects: Effects,
    ) -> None:
        super().__init__(time, sample_set, sample_index, volume, effects)
        self.slider_velocity = slider_velocity
