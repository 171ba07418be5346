from __future__ import annotations
import logging
import math
from typing import Callable, Dict, List

from modules.notes import Note
from modules.ratmath import floor_mod, normalize_ratio

log = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi

PYTHAGOREAN_COMMA = (531441, 524288)
SYNTONIC_COMMA = (81, 80)

def ratio_to_angle(ratio: float) -> float:
    return math.log2(ratio) * TWO_PI

def comma_angle(comma) -> float:
    num, den = comma
    return ratio_to_angle(num / den)

def _check_range(lo: int, hi: int) -> None:
    for v in (lo, hi):
        if isinstance(v, bool) or not isinstance(v, int):
            raise TypeError(f"Index bounds must be integers, got {v!r}")

def pythagorean_scale(lo: int, hi: int) -> List[Note]:
    """One note per fifth in [lo, hi]: powers of 3/2 folded into one octave."""
    _check_range(lo, hi)
    out: List[Note] = []
    for i in range(lo, hi + 1):
        power = abs(i)
        if i >= 0:
            num, den = 3 ** power, 2 ** power   # ascending fifths
        else:
            num, den = 2 ** power, 3 ** power   # descending fifths
        num, den, ratio = normalize_ratio(num, den)
        note = floor_mod(i * 7, 12)
        octave = i // 12
        out.append(Note(num=num, den=den, ratio=ratio, angle=ratio_to_angle(ratio),
                        note=note, octave=octave, semitones=note + 12 * octave, ord=i))
    log.debug("pythagorean [%d, %d]: %d notes", lo, hi, len(out))
    return out

def just_scale(lo: int, hi: int, octave_limit: int = 1, key: int = 0) -> List[Note]:
    """
    5-limit just intonation along the sequence 1, 5/4, 6/5, 3/2, 15/8, 9/5, ...

    Each pitch class is pushed one octave further from 0 every time it is
    admitted again. A pitch class already beyond ``octave_limit`` is skipped
    (and its register left untouched) unless it is the ``key`` pitch class,
    which is always admitted.
    """
    _check_range(lo, hi)
    placed = [0] * 12
    out: List[Note] = []
    skipped = 0
    for i in range(lo, hi + 1):
        # exponent of 3:  ... -1 -1 -1 0 |0| 0 1 1 1 2 ...
        exp3 = (i + 1) // 3
        # exponent of 5:  ... 1 -1 0 1 -1 |0| 1 -1 0 1 ...
        exp5 = i - 3 * exp3
        num, den = 1, 1
        if exp3 > 0: num *= 3 ** exp3
        if exp3 < 0: den *= 3 ** -exp3
        if exp5 > 0: num *= 5 ** exp5
        if exp5 < 0: den *= 5 ** -exp5
        num, den, ratio = normalize_ratio(num, den)

        # semitone steps alternate +4 -1 +4 going up, -4 -1 -4 going down
        interval = 4 * (i // 3 + (i + 2) // 3) - (i + 1) // 3
        fifth = floor_mod(interval * 7, 12)
        note = floor_mod(interval, 12)

        octave = placed[note]
        if abs(octave) > octave_limit and note != key:
            skipped += 1
            continue
        placed[note] += -1 if i < 0 else 1

        out.append(Note(num=num, den=den, ratio=ratio, angle=ratio_to_angle(ratio),
                        note=note, octave=octave, semitones=note + 12 * octave,
                        ord=fifth + 12 * octave))
    log.debug("just [%d, %d] limit=%d key=%d: %d notes, %d skipped",
              lo, hi, octave_limit, key, len(out), skipped)
    return out

def equal_scale(lo: int, hi: int) -> List[Note]:
    _check_range(lo, hi)
    out: List[Note] = []
    for i in range(lo, hi + 1):
        note = floor_mod(i * 7, 12)
        # octave-closing fifth is exactly 2, not 2 ** (12/12) by accident of rounding
        num = 2.0 if (i != 0 and floor_mod(i, 12) == 0) else 2.0 ** (note / 12)
        octave = i // 12
        out.append(Note(num=num, den=1, ratio=num, angle=note / 12 * TWO_PI,
                        note=note, octave=octave, semitones=note + 12 * octave, ord=i))
    log.debug("ET [%d, %d]: %d notes", lo, hi, len(out))
    return out

SCALES: Dict[str, Callable[..., List[Note]]] = {
    "pythagorean": pythagorean_scale,
    "just": just_scale,
    "ET": equal_scale,
}

def make_scale(system: str, lo: int, hi: int, **kwargs) -> List[Note]:
    try:
        fn = SCALES[system]
    except KeyError:
        raise ValueError(f"Unknown tuning system {system!r}; expected one of {sorted(SCALES)}") from None
    return fn(lo, hi, **kwargs)
