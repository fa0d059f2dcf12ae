from __future__ import annotations

from typing import Iterator, List, NamedTuple, Tuple

from .errors import InvalidDataError
from .utils import KeyValueSection, parse_u8

#: The number of combo colour slots in the ``[Colours]`` section.
COMBO_COLOUR_SLOTS = 8


class Colour(NamedTuple):
    """An RGB colour with 8 bit channels."""

    r: int
    g: int
    b: int

    @classmethod
    def parse(cls, data: str, field: str = "colour") -> "Colour":
        """Parse a colour from an ``r,g,b`` value.

        Raises
        ------
        InvalidDataError
            Raised when ``data`` does not have exactly three channels.
        ParseError
            Raised when a channel is not an integer in [0, 255].
        """
        rgb = [part.strip() for part in data.split(",")]
        if len(rgb) != 3:
            raise InvalidDataError(
                f"invalid colour value for {field!r}: expected 3 channels,"
                f" got {data!r}",
            )
        r, g, b = (parse_u8(field, channel) for channel in rgb)
        return cls(r, g, b)


def _colour(field: str, raw: str) -> Colour:
    return Colour.parse(raw, field)


class Colours(KeyValueSection):
    """The ``[Colours]`` section of a beatmap.

    Parameters
    ----------
    combo_colours : list[Colour or None]
        The eight combo colour slots, ``Combo1`` is slot 0.
    slider_track_override : Colour or None
        The slider body colour.
    slider_border : Colour or None
        The slider border colour.

    Notes
    -----
    Only the slots up to the first unset one are used by the game, see
    :meth:`active_combo_colours`.
    """

    _fields = {
        "SliderTrackOverride": ("slider_track_override", _colour),
        "SliderBorder": ("slider_border", _colour),
    }

    def __init__(
        self,
        combo_colours: List[Colour | None] | None = None,
        slider_track_override: Colour | None = None,
        slider_border: Colour | None = None,
    ) -> None:
        if combo_colours is None:
            combo_colours = [None] * COMBO_COLOUR_SLOTS
        elif len(combo_colours) != COMBO_COLOUR_SLOTS:
            raise ValueError(
                f"expected {COMBO_COLOUR_SLOTS} combo colour slots,"
                f" got {len(combo_colours)}",
            )
        self.combo_colours = list(combo_colours)
        self.slider_track_override = slider_track_override
        self.slider_border = slider_border

    def parse_line(self, line: str) -> None:
        key, sep, value = line.partition(":")
        key = key.strip()
        slot = _combo_slot(key)
        if sep and slot is not None:
            self.combo_colours[slot] = Colour.parse(value.strip(), key)
            return
        super().parse_line(line)

    def active_combo_colours(self) -> Iterator[Tuple[int, Colour]]:
        """The combo colours in use, with their slot index.

        Iteration stops at the first unset slot, so ``Combo3`` is unreachable
        when ``Combo2`` is missing.
        """
        for index, colour in enumerate(self.combo_colours):
            if colour is None:
                return
            yield index, colour


def _combo_slot(key: str) -> int | None:
    # only Combo1 through Combo8 are valid, anything else is ignored
    if len(key) != 6 or not key.startswith("Combo"):
        return None
    index = key[5]
    if index not in "12345678":
        return None
    return int(index) - 1
