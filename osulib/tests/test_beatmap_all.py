import pytest
from pathlib import Path
from osulib import Beatmap, BeatmapDecoder, MinimalBeatmap

data_dir = Path(__file__).resolve().parent.parent / "example_data" / "beatmaps"


@pytest.mark.parametrize("beatmap_path", sorted(data_dir.glob("*.osu")))
def test_load_example_beatmap(beatmap_path: "str | Path") -> None:
    Beatmap.from_path(beatmap_path)


@pytest.mark.parametrize("beatmap_path", sorted(data_dir.glob("*.osu")))
def test_load_example_beatmap_minimal(beatmap_path: "str | Path") -> None:
    full = Beatmap.from_path(beatmap_path)
    minimal = MinimalBeatmap.open(beatmap_path, BeatmapDecoder.minimal())

    assert minimal.general == full.general
    assert minimal.metadata == full.metadata
    assert minimal.difficulty == full.difficulty
    assert minimal.events == full.events
    assert minimal.timing_points == full.timing_points
