from datetime import timedelta

import pytest

from osulib import (
    Effects,
    InheritedTimingPoint,
    InvalidDataError,
    InvalidInputError,
    ParseError,
    SampleSet,
    TimingPoint,
    UninheritedTimingPoint,
)


def test_uninherited():
    timing_point = TimingPoint.parse("10000,333.33,4,2,0,60,1,1")

    assert timing_point == UninheritedTimingPoint(
        time=timedelta(milliseconds=10000),
        beat_length=333.33,
        meter=4,
        sample_set=SampleSet.Soft,
        sample_index=None,
        volume=60,
        effects=Effects.KIAI,
    )
    assert timing_point.uninherited
    assert not timing_point.inherited
    assert timing_point.slider_velocity == 1.0
    assert timing_point.kiai_mode
    assert timing_point.bpm == pytest.approx(180.0018)


def test_inherited_slider_velocity_divisor():
    timing_point = TimingPoint.parse("10000,-50,4,2,0,60,0,0")

    assert isinstance(timing_point, InheritedTimingPoint)
    # the divisor is -25.0, not the -100 used by the game itself
    assert timing_point.slider_velocity == -50 / -25.0 == 2.0
    assert not hasattr(timing_point, "beat_length")
    assert not hasattr(timing_point, "meter")
    assert timing_point.effects == Effects.NONE


def test_selector_only_one_is_uninherited():
    assert TimingPoint.parse("0,-100,4,0,0,100,2,0").inherited


def test_sample_overrides():
    timing_point = TimingPoint.parse("500,-100,4,3,7,80,0,8")

    assert timing_point.sample_set is SampleSet.Drum
    assert timing_point.sample_index == 7
    assert timing_point.volume == 80
    assert timing_point.effects == Effects.OMIT_FIRST_BAR_LINE
    assert not timing_point.kiai_mode


def test_unknown_effect_bits_are_discarded():
    timing_point = TimingPoint.parse("500,300,4,0,0,80,1,255")

    assert timing_point.effects == Effects.KIAI | Effects.OMIT_FIRST_BAR_LINE
    assert timing_point.sample_set is None


def test_fractional_time():
    timing_point = TimingPoint.parse("12.5,300,4,0,0,80,1,0")

    assert timing_point.time == timedelta(milliseconds=12.5)


@pytest.mark.parametrize(
    "line",
    [
        "10000",
        "10000,333.33,4,2,0,60",
        "10000,333.33,4,2,0,60,1",
    ],
)
def test_missing_fields(line):
    with pytest.raises(InvalidDataError):
        TimingPoint.parse(line)


@pytest.mark.parametrize(
    "line",
    [
        "abc,333.33,4,2,0,60,1,1",
        "10000,fast,4,2,0,60,1,1",
        "10000,333.33,4.5,2,0,60,1,1",
        "10000,333.33,4,2,0,60,1,256",
        "nan,333.33,4,2,0,60,1,1",
        "inf,333.33,4,2,0,60,1,1",
        "1e300,333.33,4,2,0,60,1,1",
    ],
)
def test_bad_values(line):
    with pytest.raises(ParseError):
        TimingPoint.parse(line)


def test_invalid_sample_set():
    with pytest.raises(InvalidInputError):
        TimingPoint.parse("10000,333.33,4,4,0,60,1,1")
