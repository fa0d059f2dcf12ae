from __future__ import annotations

from enum import IntFlag

from .utils import parse_u8


class HitSound(IntFlag):
    """Hit sound bit flags.

    Bits outside of the four known sounds are discarded when parsing.
    """

    NONE = 0
    NORMAL = 1 << 0
    WHISTLE = 1 << 1
    FINISH = 1 << 2
    CLAP = 1 << 3

    @classmethod
    def parse(cls, data: str, field: str = "hit_sound") -> "HitSound":
        return cls(parse_u8(field, data) & 0b1111)
