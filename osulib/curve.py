from __future__ import annotations

from typing import ClassVar, Dict, List, Sequence

import numpy as np
import numpy.typing as npt

from .errors import InvalidDataError, InvalidInputError
from .position import Position
from .utils import Record, parse_float


class Curve(Record):
    """The anchor points of a slider.

    Parameters
    ----------
    points : list[Position]
        The anchor points, not including the slider's own position.

    Notes
    -----
    A curve is written as ``<kind>|x:y|x:y|...`` where ``kind`` is one of
    ``B`` (:class:`Bezier`), ``C`` (:class:`CatmullRom`), ``L``
    (:class:`Linear`) or ``P`` (:class:`Perfect`). A curve with no points is
    accepted.
    """

    kind: ClassVar[str]
    _kinds: ClassVar[Dict[str, type["Curve"]]] = {}

    def __init__(self, points: Sequence[Position]) -> None:
        self.points: List[Position] = list(points)

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        Curve._kinds[cls.kind] = cls

    @classmethod
    def from_kind_and_points(cls, kind: str, points: Sequence[Position]) -> "Curve":
        try:
            subcls = cls._kinds[kind]
        except KeyError:
            raise InvalidInputError(f"unknown curve kind: {kind!r}") from None
        return subcls(points)

    @classmethod
    def parse(cls, data: str) -> "Curve":
        """Parse a curve from the ``curveType|curvePoints`` field of a slider.

        Parameters
        ----------
        data : str
            The field to parse.

        Returns
        -------
        curve : Curve
            The concrete subclass for the curve kind.

        Raises
        ------
        InvalidDataError
            Raised when a point is not in the form ``x:y``.
        ParseError
            Raised when a coordinate is not a number.
        InvalidInputError
            Raised when the curve kind is unknown.
        """
        kind, _, raw_points = data.strip().partition("|")

        points = []
        if raw_points:
            for point in raw_points.split("|"):
                x_str, sep, y_str = point.strip().partition(":")
                if not sep:
                    raise InvalidDataError(
                        f"expected points in the form x:y, got {point!r}",
                    )
                points.append(
                    Position(parse_float("x", x_str), parse_float("y", y_str)),
                )

        return cls.from_kind_and_points(kind, points)

    def as_array(self) -> npt.NDArray[np.float64]:
        """The anchor points as an ``(n, 2)`` array."""
        return np.array(self.points, dtype=np.float64).reshape(-1, 2)


class Bezier(Curve):
    """Bezier curves of arbitrary degree.

    Multiple bezier curves are joined into one slider by repeating their
    points of intersection.
    """

    kind = "B"


class CatmullRom(Curve):
    """Catmull curves, an interpolating alternative to bezier curves."""

    kind = "C"


class Linear(Curve):
    """A straight path between all of the points."""

    kind = "L"


class Perfect(Curve):
    """A perfect circle through three points, including the slider's own
    position.
    """

    kind = "P"
