"""Tests for the .osu section state machine."""

import io
import logging
import math

import pytest

from osuparser import parse_beatmap
from osuparser.classes import (
    BeatmapParseError,
    Circle,
    Countdown,
    GameMode,
    Slider,
    Spinner,
)
from osuparser.parser.osu import OsuParser, parse_background, split_key_value


def test_parse_sample(sample_text):
    beatmap = OsuParser().parse(sample_text)

    assert beatmap.format_version == 14

    general = beatmap.general
    assert general.audio_filename == "audio.mp3"
    assert general.preview_time == 45000
    assert general.sample_set == "Soft"
    assert general.stack_leniency == pytest.approx(0.7)
    assert general.mode == GameMode.STANDARD
    assert general.countdown == Countdown.NONE
    assert general.letterbox_in_breaks
    assert general.widescreen_storyboard
    assert general.skin_preference == "Default"
    assert general.background == "background.jpg"

    metadata = beatmap.metadata
    assert metadata.title == "Example Song"
    assert metadata.title_unicode == "Example Song (Unicode)"
    assert metadata.artist_unicode is None
    assert metadata.source == "Some Game"
    assert metadata.tags == ("tag1", "tag2", "tag3")
    assert metadata.beatmap_id == 123456
    assert metadata.beatmap_set_id == 65432

    difficulty = beatmap.difficulty
    assert difficulty.circle_size == 4
    assert difficulty.slider_multiplier == pytest.approx(1.8)
    assert difficulty.slider_tick_rate == 1

    assert [tp.offset for tp in beatmap.timing_points] == [66, 5000]
    assert [type(obj) for obj in beatmap.hit_objects] == [Circle, Slider, Spinner]
    assert beatmap.hit_objects[0].type == 5


def test_display_fallback(sample_text):
    beatmap = parse_beatmap(sample_text)
    assert beatmap.background == "background.jpg"
    assert beatmap.display_title == "Example Song (Unicode)"
    assert beatmap.display_artist == "Example Artist"


def test_idempotence(sample_text):
    assert parse_beatmap(sample_text) == parse_beatmap(sample_text)


def test_crlf_line_endings(sample_text):
    assert parse_beatmap(sample_text.replace("\n", "\r\n")) == parse_beatmap(sample_text)


def test_bom_is_ignored(sample_text):
    assert parse_beatmap("\ufeff" + sample_text).format_version == 14


def test_editor_and_colours_are_isolated(sample_text):
    noisy = sample_text.replace(
        "[Editor]\n", "[Editor]\nAudioFilename: other.mp3\n0,0,\"other.jpg\",0,0\n256,192,1,1,0\n"
    ).replace("[Colours]\n", "[Colours]\nTitle:Wrong\n5000,500,4,2,1,60,1,0\n")
    assert parse_beatmap(noisy) == parse_beatmap(sample_text)


def test_background_extraction():
    text = '[Events]\nVideo,0,"bg.mp4"\n0,0,"background.jpg",0,0\n'
    assert parse_beatmap(text).general.background == "background.jpg"
    assert parse_background('Video,0,"bg.mp4"') is None


def test_no_background():
    assert parse_beatmap("[Events]\n2,100,200\n").background is None


def test_unknown_key_is_ignored():
    text = "[General]\nAudioFilename: a.mp3\nSomeFutureKey: 7\nPreviewTime: 1234\n"
    general = parse_beatmap(text).general
    assert general.audio_filename == "a.mp3"
    assert general.preview_time == 1234


def test_value_keeps_colons():
    assert split_key_value("Title:Re:Zero") == ("Title", "Re:Zero")
    assert parse_beatmap("[Metadata]\nTitle:Re:Zero\n").metadata.title == "Re:Zero"


def test_unknown_header_keeps_section(caplog):
    text = "[Metadata]\nTitle:A\n[Mystery]\nArtist:B\n"
    with caplog.at_level(logging.WARNING):
        metadata = parse_beatmap(text).metadata
    assert metadata.artist == "B"
    assert "[Mystery]" in caplog.text


def test_general_header_switches_back():
    text = "[Metadata]\nTitle:A\n[General]\nAudioFilename: x.mp3\n"
    assert parse_beatmap(text).general.audio_filename == "x.mp3"


def test_comments_and_blank_lines_are_skipped():
    text = "[TimingPoints]\n// a comment\n\n   \n0,500,4,1,0,100,1,0\n"
    assert len(parse_beatmap(text).timing_points) == 1


def test_falsy_defaults():
    text = "[General]\nSampleSet:\nAudioLeadIn: soon\nSkinPreference:\n"
    general = parse_beatmap(text).general
    assert general.sample_set == "Normal"
    assert general.audio_lead_in == 0
    assert general.skin_preference == "Default"


def test_difficulty_nan_is_kept():
    difficulty = parse_beatmap("[Difficulty]\nApproachRate:high\n").difficulty
    assert math.isnan(difficulty.approach_rate)


def test_invalid_mode_is_skipped(caplog):
    with caplog.at_level(logging.WARNING):
        general = parse_beatmap("[General]\nMode: 9\n").general
    assert general.mode == GameMode.STANDARD
    assert "line 2" in caplog.text


def test_malformed_lines_are_skipped(caplog):
    text = "[TimingPoints]\n0,500,4\n1000,500,4,1,0,100,1,0\n[HitObjects]\n1,2\n256,192,1000,1,0\n"
    with caplog.at_level(logging.WARNING):
        beatmap = parse_beatmap(text)
    assert [tp.offset for tp in beatmap.timing_points] == [1000]
    assert len(beatmap.hit_objects) == 1
    assert "skipping line 2" in caplog.text
    assert "skipping line 5" in caplog.text


def test_strict_mode_raises():
    text = "[TimingPoints]\n1000,500,4,1,0,100,1,0\n0,500,4\n"
    with pytest.raises(BeatmapParseError) as excinfo:
        OsuParser(strict=True).parse(text)
    assert excinfo.value.line_no == 3
    assert excinfo.value.line == "0,500,4"


def test_strict_mode_rejects_malformed_numbers():
    with pytest.raises(BeatmapParseError):
        parse_beatmap("[Difficulty]\nApproachRate:high\n", strict=True)


def test_hold_notes():
    text = "[General]\nMode: 3\n[HitObjects]\n64,192,1000,128,0,1500:0:0:0:0:\n"
    assert parse_beatmap(text).hit_objects[0].type == 128
    assert parse_beatmap(text, hold_notes_as_spinners=True).hit_objects[0].type == 8


def test_no_format_version():
    assert parse_beatmap("[General]\nAudioFilename: a.mp3\n").format_version is None


def test_parse_file(tmp_path, sample_text):
    path = tmp_path / "map.osu"
    path.write_text(sample_text, encoding="utf-8")
    parser = OsuParser()
    with path.open("r", encoding="utf-8") as f:
        beatmap = parser.parse_file(f)
    assert parser.file_path == path.resolve()
    assert beatmap.metadata.version == "Insane"


def test_parse_file_without_name(sample_text):
    parser = OsuParser()
    beatmap = parser.parse_file(io.StringIO(sample_text))
    assert parser.file_path is None
    assert len(beatmap.hit_objects) == 3


def test_file_path_follows_last_parse_file(tmp_path, sample_text):
    first = tmp_path / "first.osu"
    second = tmp_path / "second.osu"
    first.write_text(sample_text, encoding="utf-8")
    second.write_text(sample_text, encoding="utf-8")
    parser = OsuParser()
    for path in (first, second):
        with path.open("r", encoding="utf-8") as f:
            parser.parse_file(f)
    assert parser.file_path == second.resolve()
    parser.parse(sample_text)
    assert parser.file_path == second.resolve()
