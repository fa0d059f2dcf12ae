from datetime import timedelta

import numpy as np
import pytest

from osulib import (
    Bezier,
    Curve,
    HitCircle,
    HitObject,
    HitSample,
    HitSound,
    InvalidDataError,
    InvalidInputError,
    Linear,
    ParseError,
    Perfect,
    Position,
    SampleSet,
    Slider,
    Spinner,
)


def test_hit_circle():
    hit_object = HitObject.parse("256,192,1000,5,0,0:0:0:0:")

    assert hit_object == HitObject(
        position=Position(256, 192),
        time=timedelta(milliseconds=1000),
        new_combo=True,
        colour_hax=0,
        hit_sound=HitSound.NONE,
        kind=HitCircle(),
        hit_sample=HitSample(),
    )
    assert hit_object.is_hit_circle
    assert not hit_object.is_slider
    assert not hit_object.is_spinner


def test_hit_circle_plain():
    hit_object = HitObject.parse("256,192,1000,1,0,0:0:0:0:")

    assert hit_object.position == Position(256, 192)
    assert hit_object.time == timedelta(milliseconds=1000)
    assert not hit_object.new_combo
    assert hit_object.colour_hax == 0
    assert hit_object.hit_sound == HitSound.NONE
    assert hit_object.kind == HitCircle()


def test_hit_circle_without_hit_sample():
    hit_object = HitObject.parse("64,32,500,1,2")

    assert hit_object.hit_sound == HitSound.WHISTLE
    assert hit_object.hit_sample == HitSample()
    assert not hit_object.new_combo


def test_hit_sample():
    hit_object = HitObject.parse("300,100,2000,1,4,1:2:3:40:clap.wav")

    assert hit_object.hit_sound == HitSound.FINISH
    assert hit_object.hit_sample == HitSample(
        normal_set=SampleSet.Normal,
        addition_set=SampleSet.Soft,
        index=3,
        volume=40,
        filename="clap.wav",
    )


def test_hit_sample_zero_means_unset():
    sample = HitSample.parse("0:0:0:0:0")

    assert sample.normal_set is None
    assert sample.addition_set is None
    assert sample.index is None
    assert sample.volume is None
    assert sample.filename is None


def test_hit_sample_missing_field():
    with pytest.raises(InvalidDataError):
        HitSample.parse("0:0:0:0")


def test_colour_hax():
    # new combo, skip 5 colours
    hit_object = HitObject.parse("0,0,0,85,0")

    assert hit_object.new_combo
    assert hit_object.colour_hax == 5
    assert hit_object.is_hit_circle


def test_circle_bit_takes_precedence():
    hit_object = HitObject.parse("0,0,0,11,0")

    assert hit_object.is_hit_circle


def test_fractional_position():
    hit_object = HitObject.parse("10.5,20.25,0,1,0")

    assert hit_object.position == Position(10.5, 20.25)


def test_slider():
    hit_object = HitObject.parse(
        "100,100,1333,2,2,B|200:200|300:100,2,140,2|0|8,1:2|0:0|2:0,0:0:0:0:",
    )

    assert hit_object.is_slider
    assert hit_object.hit_sound == HitSound.WHISTLE
    assert hit_object.kind == Slider(
        curve=Bezier([Position(200, 200), Position(300, 100)]),
        slides=2,
        length=140.0,
        edge_sounds=[HitSound.WHISTLE, HitSound.NONE, HitSound.CLAP],
        edge_sets=[
            (SampleSet.Normal, SampleSet.Soft),
            (None, None),
            (SampleSet.Soft, None),
        ],
    )


def test_slider_without_edges():
    hit_object = HitObject.parse("0,0,0,2,0,L|10:10,1,10")

    assert hit_object.kind == Slider(Linear([Position(10, 10)]), 1, 10.0)
    assert hit_object.kind.edge_sounds == []
    assert hit_object.kind.edge_sets == []
    assert hit_object.hit_sample == HitSample()


def test_slider_edge_sounds_without_edge_sets():
    hit_object = HitObject.parse("0,0,0,2,0,L|10:10,1,10,2|0")

    assert hit_object.kind.edge_sounds == [HitSound.WHISTLE, HitSound.NONE]
    assert hit_object.kind.edge_sets == []


def test_slider_edge_sets_without_edge_sounds():
    hit_object = HitObject.parse("0,0,0,2,0,L|10:10,1,10,,1:2|0:0")

    assert hit_object.kind.edge_sounds == []
    assert hit_object.kind.edge_sets == [
        (SampleSet.Normal, SampleSet.Soft),
        (None, None),
    ]


def test_slider_malformed_edge_set():
    with pytest.raises(InvalidDataError):
        HitObject.parse("0,0,0,2,0,L|10:10,1,10,2|0,1-2")


def test_slider_missing_length():
    with pytest.raises(InvalidDataError):
        HitObject.parse("0,0,0,2,0,L|10:10,1")


def test_spinner():
    hit_object = HitObject.parse("256,192,3000,12,0,4000,0:0:0:0:")

    assert hit_object.is_spinner
    assert hit_object.new_combo
    assert hit_object.kind == Spinner(end_time=timedelta(milliseconds=4000))


def test_spinner_missing_end_time():
    with pytest.raises(InvalidDataError):
        HitObject.parse("256,192,3000,8,0")


def test_hold_note_is_not_supported():
    with pytest.raises(InvalidInputError):
        HitObject.parse("64,192,1000,128,0,1500:0:0:0:0:")


@pytest.mark.parametrize(
    "line",
    [
        "abc,192,1000,1,0",
        "256,192,soon,1,0",
        "256,192,1000,256,0",
        "256,192,1000,1,-1",
        "256,192,99999999999999999999,1,0",
        "256,192,3000,8,0,99999999999999999999",
    ],
)
def test_malformed_fields(line):
    with pytest.raises(ParseError):
        HitObject.parse(line)


def test_missing_fields():
    with pytest.raises(InvalidDataError):
        HitObject.parse("256,192,1000")


def test_curve():
    curve = Curve.parse("B|100:100|200:200")

    assert isinstance(curve, Bezier)
    assert curve.points == [Position(100, 100), Position(200, 200)]


def test_curve_without_points():
    assert Curve.parse("P") == Perfect([])
    assert Curve.parse("B|") == Bezier([])


def test_curve_unknown_kind():
    with pytest.raises(InvalidInputError):
        Curve.parse("X|100:100")


def test_curve_malformed_point():
    with pytest.raises(InvalidDataError):
        Curve.parse("L|100")

    with pytest.raises(ParseError):
        Curve.parse("L|100:far")


def test_curve_as_array():
    curve = Curve.parse("C|1:2|3:4|5:6")

    np.testing.assert_array_equal(
        curve.as_array(),
        np.array([[1, 2], [3, 4], [5, 6]], dtype=np.float64),
    )
    assert Curve.parse("L").as_array().shape == (0, 2)
