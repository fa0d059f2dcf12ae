from __future__ import annotations

from datetime import timedelta
from typing import Any, Callable, ClassVar, Iterator, Mapping, Sequence, cast

from .errors import InvalidDataError, ParseError


class no_default:
    """Sentinel type; this should not be instantiated.

    This type is used so functions can tell the difference between no argument
    passed and an explicit value passed even if ``None`` is a valid value.

    Notes
    -----
    This is implemented as a type to make functions which use this as a default
    argument serializable.
    """

    def __new__(cls) -> "no_default":  # pragma: no cover - construction forbidden
        raise TypeError("cannot create instances of sentinel type")


NoDefaultType = type[no_default]


class Record:
    """Base class for plain value objects.

    Two records are equal when they have the same type and the same
    attributes. The ``repr`` lists every attribute, which is also the
    uniform text rendering of all decoded values.
    """

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    # records are mutable while a section is being decoded
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in vars(self).items())
        return f"{type(self).__qualname__}({fields})"


def next_token(parts: Iterator[str], field: str, context: str) -> str:
    """Pull the next comma separated token for ``field``.

    Raises
    ------
    InvalidDataError
        Raised when the line has run out of tokens.
    """
    try:
        return next(parts).strip()
    except StopIteration:
        raise InvalidDataError(f"expected {field} while parsing {context}") from None


def _get(cs: Sequence[str], ix: int, default: str | NoDefaultType = no_default) -> str:
    try:
        return cs[ix]
    except IndexError:
        if default is no_default:
            raise
        return cast(str, default)


def parse_int(field: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ParseError(f"{field} should be an int, got {raw!r}") from None


def parse_float(field: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ParseError(f"{field} should be a float, got {raw!r}") from None


def parse_u8(field: str, raw: str) -> int:
    """Parse a token that must fit in an unsigned byte (bit flag fields)."""
    value = parse_int(field, raw)
    if not 0 <= value <= 0xFF:
        raise ParseError(f"{field} should be in the range [0, 255], got {raw!r}")
    return value


def parse_bool(field: str, raw: str) -> bool:
    # cast to int then to bool because '0' is still True; any non zero
    # integer is accepted as true.
    return bool(parse_int(field, raw))


def _ms(field: str, raw: str, value: float) -> timedelta:
    try:
        return timedelta(milliseconds=value)
    except (OverflowError, ValueError):
        # out of timedelta range, or nan/inf
        raise ParseError(
            f"{field} should be a time in milliseconds, got {raw!r}",
        ) from None


def parse_ms(field: str, raw: str) -> timedelta:
    return _ms(field, raw, parse_int(field, raw))


def parse_float_ms(field: str, raw: str) -> timedelta:
    """Parse a time token that may have a fractional number of milliseconds."""
    return _ms(field, raw, parse_float(field, raw))


def split_key_value(line: str) -> tuple[str, str] | None:
    """Split a ``Key: Value`` line on the first ``:``.

    Returns
    -------
    pair : tuple[str, str] or None
        The stripped key and value, or ``None`` if the line has no ``:``.
    """
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return key.strip(), value.strip()


def as_str(field: str, raw: str) -> str:
    return raw


class KeyValueSection(Record):
    """A section made of ``Key: Value`` lines.

    Subclasses define ``_fields``, an exact-match table from the key in the
    file to the attribute it sets and the converter used to parse the value.
    Converters are called as ``converter(key, value)``.
    """

    _fields: ClassVar[Mapping[str, tuple[str, Callable[[str, str], Any]]]] = {}

    def parse_line(self, line: str) -> None:
        """Apply one ``Key: Value`` line to this section.

        Lines without a ``:`` and unknown keys are ignored.

        Raises
        ------
        DecodeError
            Raised when the value of a known key cannot be parsed.
        """
        pair = split_key_value(line)
        if pair is None:
            return

        key, value = pair
        try:
            attribute, converter = self._fields[key]
        except KeyError:
            return

        setattr(self, attribute, converter(key, value))
