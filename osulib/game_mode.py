from __future__ import annotations

from enum import IntEnum, unique

from .errors import InvalidInputError
from .utils import parse_int


@unique
class GameMode(IntEnum):
    """The game mode a beatmap is played in.

    Values match the ``Mode`` key of the ``[General]`` section.
    """

    standard = 0
    taiko = 1
    ctb = 2
    mania = 3

    @classmethod
    def parse(cls, data: str) -> "GameMode":
        """Parse a game mode from its integer token.

        Raises
        ------
        ParseError
            Raised when ``data`` is not an integer.
        InvalidInputError
            Raised when ``data`` is not in the range [0, 3].
        """
        value = parse_int("mode", data)
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputError(f"invalid mode value: {value!r}") from None
