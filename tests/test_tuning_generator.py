import logging
import math

import pytest

from modules.ratmath import gcd
from tuning_generator import (
    PYTHAGOREAN_COMMA, SYNTONIC_COMMA, SCALES, comma_angle, equal_scale, just_scale,
    make_scale, pythagorean_scale,
)

TWO_PI = 2 * math.pi


def _fields(n):
    return (n.num, n.den, n.ratio, n.note, n.octave, n.semitones, n.ord)


# ─────────────────────────── Pythagorean ───────────────────────────

def test_pythagorean_circle_range():
    notes = pythagorean_scale(-6, 6)
    assert len(notes) == 13
    assert [n.ord for n in notes] == list(range(-6, 7))


def test_pythagorean_unison_and_fifth():
    notes = {n.ord: n for n in pythagorean_scale(-6, 6)}
    assert _fields(notes[0]) == (1, 1, 1.0, 0, 0, 0, 0)
    assert notes[0].angle == 0.0
    assert _fields(notes[1]) == (3, 2, 1.5, 7, 0, 7, 1)
    assert notes[1].angle == pytest.approx(math.log2(1.5) * TWO_PI)
    assert notes[1].angle == pytest.approx(3.6755, abs=1e-4)


@pytest.mark.parametrize("i,expected", [
    (-1, (4, 3, 4 / 3, 5, -1, -7, -1)),
    (2, (9, 8, 9 / 8, 2, 0, 2, 2)),
    (-6, (1024, 729, 1024 / 729, 6, -1, -6, -6)),
    (12, (531441, 524288, 531441 / 524288, 0, 1, 12, 12)),
])
def test_pythagorean_entries(i, expected):
    assert _fields(pythagorean_scale(i, i)[0]) == expected


def test_pythagorean_never_skips():
    for lo, hi in [(0, 24), (-30, 30), (5, 5)]:
        assert len(pythagorean_scale(lo, hi)) == hi - lo + 1


# ─────────────────────────── Just intonation ───────────────────────────

JUST_CIRCLE = [
    # i, num, den, note, octave, ord
    (0, 1, 1, 0, 0, 0),
    (1, 5, 4, 4, 0, 4),
    (2, 6, 5, 3, 0, 9),
    (3, 3, 2, 7, 0, 1),
    (4, 15, 8, 11, 0, 5),
    (5, 9, 5, 10, 0, 10),
    (6, 9, 8, 2, 0, 2),
    (7, 45, 32, 6, 0, 6),
    (8, 27, 20, 5, 0, 11),
    (9, 27, 16, 9, 0, 3),
    (10, 135, 128, 1, 0, 7),
    (11, 81, 80, 0, 1, 12),
    # i=12 (81/64, pitch class 4 already placed once) is skipped
    (13, 405, 256, 8, 0, 8),
]


def test_just_circle_sequence():
    notes = just_scale(0, 13, octave_limit=0, key=0)
    assert [(n.num, n.den, n.note, n.octave, n.ord) for n in notes] == \
        [row[1:] for row in JUST_CIRCLE]
    for n in notes:
        assert n.semitones == n.note + 12 * n.octave


def test_just_key_admitted_at_every_depth_others_discarded(caplog):
    lo, hi = 0, 13
    with caplog.at_level(logging.DEBUG, logger="tuning_generator"):
        notes = just_scale(lo, hi, octave_limit=0, key=0)
    admitted = len(notes)
    assert "13 notes, 1 skipped" in caplog.text
    assert admitted + 1 == hi - lo + 1
    assert [n.octave for n in notes if n.note == 0] == [0, 1]
    assert all(n.octave == 0 for n in notes if n.note != 0)


def test_just_key_exemption_follows_key():
    notes = just_scale(0, 13, octave_limit=0, key=4)
    assert len(notes) == 13
    assert [n.octave for n in notes if n.note == 0] == [0]
    fours = [n for n in notes if n.note == 4]
    assert [(n.num, n.den, n.octave, n.semitones, n.ord) for n in fours] == \
        [(5, 4, 0, 4, 4), (81, 64, 1, 16, 16)]


def test_just_key_octaves_climb_without_gaps():
    notes = just_scale(0, 120, octave_limit=0, key=0)
    assert [n.octave for n in notes if n.note == 0] == list(range(sum(n.note == 0 for n in notes)))
    assert all(n.octave == 0 for n in notes if n.note != 0)


def test_just_descending_entries():
    notes = just_scale(-3, 0)
    assert [(n.num, n.den, n.note, n.octave) for n in notes] == [
        (4, 3, 5, 0), (5, 3, 9, 0), (8, 5, 8, 0), (1, 1, 0, 0),
    ]
    assert notes[2].ord == 8


def test_just_negative_register_moves_down():
    notes = just_scale(-80, 0, octave_limit=2)
    assert all(n.octave <= 0 for n in notes)
    assert all(abs(n.octave) <= 2 or n.note == 0 for n in notes)
    assert min(n.octave for n in notes if n.note == 0) < -2


def test_just_octave_limit_bounds_everything_but_key():
    for limit in range(0, 4):
        for n in just_scale(-60, 60, octave_limit=limit, key=7):
            assert abs(n.octave) <= limit or n.note == 7


def test_just_negative_limit_keeps_only_the_key():
    notes = just_scale(0, 13, octave_limit=-1, key=0)
    assert [n.note for n in notes] == [0, 0]
    assert [n.octave for n in notes] == [0, 1]


def test_just_key_outside_pitch_classes_exempts_nothing():
    notes = just_scale(0, 13, octave_limit=0, key=12)
    assert len(notes) == 12
    assert all(n.octave == 0 for n in notes)
    assert [(n.num, n.den) for n in notes] == [(num, den) for i, num, den, *_ in JUST_CIRCLE if i != 11]


# ─────────────────────────── Equal temperament ───────────────────────────

def test_equal_octave_is_exactly_two():
    notes = {n.ord: n for n in equal_scale(0, 24)}
    assert _fields(notes[12]) == (2.0, 1, 2.0, 0, 1, 12, 12)
    assert notes[12].angle == 0.0
    assert notes[24].angle == 0.0
    assert notes[24].ratio == 2.0
    assert notes[0].ratio == 1.0


def test_equal_fifth():
    n = equal_scale(1, 1)[0]
    assert n.note == 7
    assert n.ratio == 2.0 ** (7 / 12)
    assert n.den == 1
    assert n.angle == pytest.approx(7 / 12 * TWO_PI)


def test_equal_negative_octave_closing_index():
    n = equal_scale(-12, -12)[0]
    assert (n.ratio, n.note, n.octave, n.semitones) == (2.0, 0, -1, -12)


def test_equal_ratios_in_range():
    for n in equal_scale(-30, 30):
        assert 1.0 <= n.ratio <= 2.0


# ─────────────────────────── Shared properties ───────────────────────────

@pytest.mark.parametrize("build", [
    lambda: pythagorean_scale(-30, 30),
    lambda: just_scale(-60, 60, octave_limit=3),
    lambda: just_scale(0, 25),
])
def test_reduced_ratios_in_octave_with_round_trip_angle(build):
    for n in build():
        assert gcd(n.num, n.den) == 1
        assert 1.0 <= n.ratio <= 2.0
        assert n.ratio == n.num / n.den
        assert math.log2(n.num / n.den) * TWO_PI == pytest.approx(n.angle, abs=1e-9)


@pytest.mark.parametrize("system,kwargs", [
    ("pythagorean", {}), ("just", {"octave_limit": 1, "key": 0}),
    ("just", {"octave_limit": 0, "key": 5}), ("ET", {}),
])
def test_repeated_calls_are_identical(system, kwargs):
    first = make_scale(system, -20, 30, **kwargs)
    second = make_scale(system, -20, 30, **kwargs)
    assert first == second
    assert first is not second


@pytest.mark.parametrize("system", sorted(SCALES))
def test_empty_range(system):
    assert make_scale(system, 5, 4) == []


@pytest.mark.parametrize("system", sorted(SCALES))
def test_non_integer_bounds_rejected(system):
    with pytest.raises(TypeError):
        make_scale(system, 0.5, 4)


def test_unknown_system():
    with pytest.raises(ValueError, match="meantone"):
        make_scale("meantone", 0, 12)


def test_comma_angles():
    assert comma_angle(PYTHAGOREAN_COMMA) == pytest.approx(math.log2(531441 / 524288) * TWO_PI)
    assert comma_angle(SYNTONIC_COMMA) == pytest.approx(math.log2(81 / 80) * TWO_PI)
    # the pythagorean comma is what the 12th fifth overshoots the octave by
    assert pythagorean_scale(12, 12)[0].angle == pytest.approx(comma_angle(PYTHAGOREAN_COMMA))
