from __future__ import annotations


class OsuLibError(Exception):
    """Base class for every error raised by osulib."""


class ReadError(OsuLibError, OSError):
    """Raised when the underlying line source fails while being read."""


class DecodeError(OsuLibError, ValueError):
    """Base class for errors caused by the content of a ``.osu`` file.

    This subclasses :class:`ValueError` so callers can catch decoding
    failures the same way they catch any other malformed value.
    """


class InvalidDataError(DecodeError):
    """Raised when a line is missing an expected token or has the wrong
    shape.
    """


class ParseError(DecodeError):
    """Raised when a token cannot be converted to its numeric type."""


class InvalidInputError(DecodeError):
    """Raised when a token parses but is not a member of its enumeration."""
