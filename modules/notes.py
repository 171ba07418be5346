# modules/notes.py
from __future__ import annotations
import math
from dataclasses import dataclass, asdict
from typing import Iterable, List, Union

@dataclass(frozen=True)
class Note:
    num: Union[int, float]   # exact integer for pythagorean/just, 2**(k/12) for ET
    den: int
    ratio: float
    angle: float             # radians, log2(ratio) * 2pi
    note: int                # pitch class 0..11
    octave: int
    semitones: int           # note + 12 * octave
    ord: int

    @property
    def cents(self) -> float:
        return 1200.0 * math.log2(self.ratio)

    def to_dict(self): return asdict(self)

def by_ord(notes: Iterable[Note]) -> List[Note]:
    """Closed circular layout order."""
    return sorted(notes, key=lambda n: n.ord)

def by_semitones(notes: Iterable[Note]) -> List[Note]:
    """Monotonically expanding (spiral) layout order."""
    return sorted(notes, key=lambda n: n.semitones)
