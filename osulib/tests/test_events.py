from datetime import timedelta

import pytest

from osulib import (
    Background,
    Break,
    Event,
    EventType,
    InvalidDataError,
    InvalidInputError,
    ParseError,
    Position,
    Video,
)


def test_background():
    event = Event.parse('0,0,"bg.jpg",0,0')

    assert event == Background("bg.jpg", Position(0, 0))
    assert event.is_background
    assert event.event_type is EventType.Background


def test_background_offset_is_optional():
    assert Event.parse('0,0,"bg.jpg"') == Background("bg.jpg")


def test_background_named_type():
    assert Event.parse('Background,0,"bg.jpg",10,-20') == Background(
        "bg.jpg",
        Position(10, -20),
    )


def test_background_and_video_offsets_can_be_floats():
    background = Event.parse('0,0,"bg.png",226.704,240.5')
    video = Event.parse('Video,100,"vid.mp4",226.704,240.5')

    assert background.offset == Position(226.704, 240.5)
    assert video.offset == Position(226.704, 240.5)


def test_video():
    for line in ('Video,500,"video.mp4",0,0', '1,500,"video.mp4",0,0'):
        event = Event.parse(line)

        assert event == Video(
            start_time=timedelta(milliseconds=500),
            filename="video.mp4",
            offset=Position(0, 0),
        )
        assert event.is_video


def test_video_requires_offset():
    with pytest.raises(InvalidDataError):
        Event.parse('Video,500,"video.mp4"')


def test_break():
    for line in ("2,12000,15000", "Break,12000,15000", "2 , 12000 , 15000"):
        event = Event.parse(line)

        assert event == Break(
            timedelta(milliseconds=12000),
            timedelta(milliseconds=15000),
        )
        assert event.is_break


def test_break_missing_end():
    with pytest.raises(InvalidDataError):
        Event.parse("2,12000")


def test_break_bad_time():
    with pytest.raises(ParseError):
        Event.parse("2,12000,later")


def test_break_time_out_of_range():
    with pytest.raises(ParseError):
        Event.parse("2,0,99999999999999999999")

    with pytest.raises(ParseError):
        Event.parse("Video,99999999999999999999,\"video.mp4\",0,0")


@pytest.mark.parametrize(
    "line",
    [
        'Sprite,Background,Centre,"sb/star.png",320,240',
        '4,0,1,"bg.jpg",320,264',
        '3,100,163,162,255',
    ],
)
def test_storyboard_events_are_not_supported(line):
    with pytest.raises(InvalidInputError):
        Event.parse(line)
