from __future__ import annotations

from datetime import timedelta
from enum import IntEnum, unique

from .errors import InvalidInputError
from .game_mode import GameMode
from .sample_set import SampleSet
from .utils import KeyValueSection, as_str, parse_bool, parse_float, parse_int, parse_ms


@unique
class Countdown(IntEnum):
    """Speed of the countdown before the first hit object."""

    Normal = 1
    Half = 2
    Double = 3

    @classmethod
    def parse(cls, data: str) -> "Countdown | None":
        """Parse the ``Countdown`` value.

        ``0`` disables the countdown and parses as ``None``. This is looser
        than the other enumerated keys, which reject every value that is not
        a member.

        Raises
        ------
        ParseError
            Raised when ``data`` is not an integer.
        InvalidInputError
            Raised when ``data`` is not in the range [0, 3].
        """
        value = parse_int("countdown", data)
        if value == 0:
            return None
        try:
            return cls(value)
        except ValueError:
            raise InvalidInputError(f"invalid countdown value: {value!r}") from None


@unique
class OverlayPosition(IntEnum):
    """Draw order of hit circle overlays compared to hit numbers."""

    Below = 0
    Above = 1

    @classmethod
    def parse(cls, data: str) -> "OverlayPosition | None":
        """Parse the ``OverlayPosition`` value.

        ``NoChange`` means "use the skin setting" and parses as ``None``.

        Raises
        ------
        InvalidInputError
            Raised when ``data`` is not ``NoChange``, ``Below`` or ``Above``.
        """
        if data == "NoChange":
            return None
        try:
            return cls[data]
        except KeyError:
            raise InvalidInputError(
                f"invalid overlay position value: {data!r}",
            ) from None


def _countdown(field: str, raw: str) -> Countdown | None:
    return Countdown.parse(raw)


def _overlay_position(field: str, raw: str) -> OverlayPosition | None:
    return OverlayPosition.parse(raw)


def _sample_set(field: str, raw: str) -> SampleSet:
    return SampleSet.from_name(raw)


def _mode(field: str, raw: str) -> GameMode:
    return GameMode.parse(raw)


class General(KeyValueSection):
    """The ``[General]`` section of a beatmap.

    Parameters
    ----------
    audio_filename : str
        Location of the audio file relative to the beatmap directory.
    audio_lead_in : timedelta
        Silence before the audio starts playing.
    preview_time : timedelta or None
        When the audio preview should start.
    countdown : Countdown or None
        Speed of the countdown before the first hit object, ``None`` if there
        is no countdown.
    sample_set : SampleSet
        Sample set used when timing points do not override it.
    stack_leniency : float
        Multiplier for the threshold in time where hit objects placed close
        together stack.
    mode : GameMode
        The game mode.
    letterbox_in_breaks : bool
        Whether breaks have a letterboxing effect.
    use_skin_sprites : bool
        Whether the storyboard can use the user's skin images.
    overlay_position : OverlayPosition or None
        Draw order of hit circle overlays, ``None`` to use the skin setting.
    skin_preference : str or None
        Preferred skin to use during gameplay.
    epilepsy_warning : bool
        Whether a warning about flashing colours is shown.
    countdown_offset : int
        Time in beats that the countdown starts before the first hit object.
    special_style : bool
        Whether the "N+1" osu!mania key layout is used.
    widescreen_storyboard : bool
        Whether the storyboard allows widescreen viewing.
    samples_match_playback_rate : bool
        Whether sound samples change rate with speed changing mods.
    """

    _fields = {
        "AudioFilename": ("audio_filename", as_str),
        "AudioLeadIn": ("audio_lead_in", parse_ms),
        "PreviewTime": ("preview_time", parse_ms),
        "Countdown": ("countdown", _countdown),
        "SampleSet": ("sample_set", _sample_set),
        "StackLeniency": ("stack_leniency", parse_float),
        "Mode": ("mode", _mode),
        "LetterboxInBreaks": ("letterbox_in_breaks", parse_bool),
        "UseSkinSprites": ("use_skin_sprites", parse_bool),
        "OverlayPosition": ("overlay_position", _overlay_position),
        "SkinPreference": ("skin_preference", as_str),
        "EpilepsyWarning": ("epilepsy_warning", parse_bool),
        "CountdownOffset": ("countdown_offset", parse_int),
        "SpecialStyle": ("special_style", parse_bool),
        "WidescreenStoryboard": ("widescreen_storyboard", parse_bool),
        "SamplesMatchPlaybackRate": ("samples_match_playback_rate", parse_bool),
    }

    def __init__(
        self,
        audio_filename: str = "",
        audio_lead_in: timedelta = timedelta(),
        preview_time: timedelta | None = None,
        countdown: Countdown | None = None,
        sample_set: SampleSet = SampleSet.Normal,
        stack_leniency: float = 0.7,
        mode: GameMode = GameMode.standard,
        letterbox_in_breaks: bool = False,
        use_skin_sprites: bool = False,
        overlay_position: OverlayPosition | None = None,
        skin_preference: str | None = None,
        epilepsy_warning: bool = False,
        countdown_offset: int = 0,
        special_style: bool = False,
        widescreen_storyboard: bool = False,
        samples_match_playback_rate: bool = True,
    ) -> None:
        self.audio_filename = audio_filename
        self.audio_lead_in = audio_lead_in
        self.preview_time = preview_time
        self.countdown = countdown
        self.sample_set = sample_set
        self.stack_leniency = stack_leniency
        self.mode = mode
        self.letterbox_in_breaks = letterbox_in_breaks
        self.use_skin_sprites = use_skin_sprites
        self.overlay_position = overlay_position
        self.skin_preference = skin_preference
        self.epilepsy_warning = epilepsy_warning
        self.countdown_offset = countdown_offset
        self.special_style = special_style
        self.widescreen_storyboard = widescreen_storyboard
        self.samples_match_playback_rate = samples_match_playback_rate
