# modules/labels.py
from __future__ import annotations
from typing import List

from modules.notes import Note
from modules.ratmath import floor_mod

NOTES_ENGLISH = ["C", "*", "D", "*", "E", "F", "*", "G", "*", "A", "*", "B"]
NOTES_LATIN = ["Do", "*", "Re", "*", "Mi", "Fa", "*", "Sol", "*", "La", "*", "Si"]

INTERVALS_ENGLISH = ["P1", "m2", "M2", "m3", "M3", "P4", "A4", "P5", "m6", "M6", "m7", "M7", "P8"]
INTERVALS_LATIN = ["1ª G", "2ª m", "2ª M", "3ª m", "3ª M", "4ª G", "4ª E", "5ª G",
                   "6ª m", "6ª M", "7ª m", "7ª M", "8ª G"]

NOTE_TABLES = {"english": NOTES_ENGLISH, "latin": NOTES_LATIN}
INTERVAL_TABLES = {"english": INTERVALS_ENGLISH, "latin": INTERVALS_LATIN}

SHARP = "♯"
FLAT = "♭"
SUBSCRIPTS = "₀₁₂₃₄₅₆₇₈₉"

def note_name(n: Note, names: List[str] = NOTES_ENGLISH) -> str:
    name = names[n.note]
    if name != "*":
        return name
    # altered note: sharp going up the fifths, flat going down
    if n.ord >= 0:
        return names[n.note - 1] + SHARP
    return names[n.note + 1] + FLAT

def semitones_to_interval(semitones: int) -> int:
    """Index into the interval tables; whole octaves above unison read as P8."""
    if semitones == 0:
        return 0
    interval = floor_mod(semitones, 12)
    return interval if interval > 0 else 12

def octave_subscript(number: int) -> str:
    return "".join(SUBSCRIPTS[int(ch)] if ch.isdigit() else "₋" for ch in str(number))

def label_for(n: Note, label_format: str = "note", note_names: str = "english",
              interval_names: str = "english", show_octave: bool = False) -> str:
    if label_format == "note":
        text = note_name(n, NOTE_TABLES[note_names])
    elif label_format == "semitones":
        text = str(n.semitones)
    elif label_format == "interval":
        text = INTERVAL_TABLES[interval_names][semitones_to_interval(n.semitones)]
    else:
        raise ValueError(f"Unknown label format {label_format!r}")
    if show_octave:
        text += octave_subscript(n.octave)
    return text

def labels(notes: List[Note], view: str, system: str, **label_opts) -> List[str]:
    """Labels for already-sorted notes; '' where the view leaves a point unlabeled."""
    out = []
    for i, n in enumerate(notes):
        # the closed ET circle starts and ends on the same point
        if view == "circle" and system == "ET" and i == 0:
            out.append("")
            continue
        out.append(label_for(n, **label_opts))
    return out
