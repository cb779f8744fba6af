"""Tests for timing point parsing."""

import math

import pytest

from osuparser.parser.osu import parse_timing_point


def test_timing_point_fields():
    tp = parse_timing_point("5000,333.333,4,2,1,60,1,0")
    assert tp.offset == 5000
    assert tp.beat_duration == pytest.approx(333.333)
    assert tp.meter == 4
    assert tp.sample_set == 2
    assert tp.sample_index == 1
    assert tp.volume == 60
    assert tp.inherited is True
    assert tp.kiai is False


def test_tempo_point_helpers():
    tp = parse_timing_point("0,500,4,1,0,100,1,0")
    assert tp.is_tempo_point
    assert tp.bpm == pytest.approx(120)
    assert tp.velocity_multiplier == 1.0


def test_velocity_point_helpers():
    tp = parse_timing_point("1000,-50,4,1,0,100,0,1")
    assert not tp.is_tempo_point
    assert tp.bpm is None
    assert tp.velocity_multiplier == pytest.approx(2.0)
    assert tp.kiai is True


def test_flags_are_trimmed():
    tp = parse_timing_point("0,500,4,1,0,100, 1 , 1 ")
    assert tp.inherited
    assert tp.kiai


def test_too_few_fields():
    with pytest.raises(ValueError, match="expected 8"):
        parse_timing_point("0,500,4,1,0,100")


def test_malformed_number_is_nan():
    tp = parse_timing_point("0,fast,4,1,0,100,1,0")
    assert math.isnan(tp.beat_duration)
    assert tp.bpm is None


def test_malformed_number_strict():
    with pytest.raises(ValueError):
        parse_timing_point("0,fast,4,1,0,100,1,0", strict=True)
