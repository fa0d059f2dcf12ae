from __future__ import annotations

from enum import IntEnum, unique

from .errors import InvalidInputError
from .utils import parse_int


@unique
class SampleSet(IntEnum):
    """A set of hit sound samples.

    The ``[General]`` section names the set (``Normal``, ``Soft``,
    ``Drum``) while timing points, hit samples and slider edge sets use the
    integer value. In those integer fields ``0`` means "use the default" and
    is never a member of this enumeration.
    """

    Normal = 1
    Soft = 2
    Drum = 3

    @classmethod
    def from_name(cls, name: str) -> "SampleSet":
        try:
            return cls[name]
        except KeyError:
            raise InvalidInputError(f"invalid sample set value: {name!r}") from None

    @classmethod
    def from_value(cls, value: int) -> "SampleSet":
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputError(f"invalid sample set value: {value!r}") from None

    @classmethod
    def parse_optional(cls, field: str, data: str) -> "SampleSet | None":
        """Parse an integer sample set token where ``0`` means no override."""
        value = parse_int(field, data)
        if value == 0:
            return None
        return cls.from_value(value)
