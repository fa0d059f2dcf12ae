from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    """A position on the osu! screen.

    Parameters
    ----------
    x : float
        The x coordinate in osu! pixels.
    y : float
        The y coordinate in osu! pixels.

    Notes
    -----
    The visible region of the osu! standard playfield is [0, 512] by [0, 384].
    Positions may fall outside of this range for slider curve control points.
    Background and video offsets are also stored as positions, measured from
    the centre of the screen.
    """

    x: float
    y: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = tuple.__hash__
