# modules/layout.py
from __future__ import annotations
import numpy as np
from typing import Dict, List, Sequence, Tuple

from modules.config import ViewUI
from modules.notes import Note, by_ord, by_semitones
from tuning_generator import comma_angle

ORIGIN_ANGLE = np.pi / 2   # unison points straight up; ratios advance clockwise

def sort_for_view(notes: Sequence[Note], ui: ViewUI) -> List[Note]:
    if ui.sort_key == "ord":
        return by_ord(notes)
    if ui.sort_key == "semitones":
        return by_semitones(notes)
    raise ValueError(f"Unknown sort key {ui.sort_key!r}")

def project(notes: Sequence[Note], ui: ViewUI) -> Dict[str, np.ndarray]:
    """
    Polar and cartesian coordinates of each note, in the given order.
    Closed circle: note_offset = 0 so every note sits on `radius`.
    Spiral: each semitone moves the point `note_offset` further out.
    """
    angle = np.array([n.angle for n in notes], dtype=float)
    semis = np.array([n.semitones for n in notes], dtype=float)
    theta = ORIGIN_ANGLE - angle
    r = ui.radius + semis * ui.note_offset
    return dict(theta=theta, r=r, x=r * np.cos(theta), y=r * np.sin(theta))

def segments(n: int) -> List[Tuple[int, int]]:
    """Index pairs joining consecutive points."""
    return [(i, i + 1) for i in range(n - 1)]

def grid_radii(n: int) -> np.ndarray:
    return np.arange(n, dtype=float) / n * 2.0 * np.pi

def grid_circles(n: int, radius: float, increment: float) -> np.ndarray:
    return radius + increment * np.arange(n, dtype=float)

def comma_sector(comma) -> Tuple[float, float]:
    """(start, end) screen angles of the sector spanned by a comma from unison."""
    return float(ORIGIN_ANGLE - comma_angle(comma)), float(ORIGIN_ANGLE)

def layout_table(notes: Sequence[Note], ui: ViewUI) -> List[dict]:
    ordered = sort_for_view(notes, ui)
    pts = project(ordered, ui)
    rows = []
    for k, n in enumerate(ordered):
        row = n.to_dict()
        row["cents"] = n.cents
        row.update(theta=float(pts["theta"][k]), r=float(pts["r"][k]),
                   x=float(pts["x"][k]), y=float(pts["y"][k]))
        rows.append(row)
    return rows
