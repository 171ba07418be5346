# modules/config.py
from __future__ import annotations
from dataclasses import dataclass, asdict, replace
from typing import Dict, Optional, Tuple

VIEW_CIRCLE = "circle"
VIEW_SPIRAL = "spiral"

SCALE_PYTHAGOREAN = "pythagorean"
SCALE_JUST = "just"
SCALE_ET = "ET"

@dataclass
class ViewUI:
    name: str
    radius: float
    note_offset: float   # radial step per semitone, 0 for a closed circle
    sort_key: str        # "ord" or "semitones"
    def to_dict(self): return asdict(self)

@dataclass
class LabelUI:
    label_format: str = "note"        # note | semitones | interval
    note_names: str = "english"       # english | latin
    interval_names: str = "english"
    show_octave: bool = False
    def to_dict(self): return asdict(self)

@dataclass
class ScaleRequest:
    system: str
    lo: int
    hi: int
    octave_limit: int = 1
    key: int = 0

    def kwargs(self) -> Dict[str, int]:
        if self.system == SCALE_JUST:
            return {"octave_limit": self.octave_limit, "key": self.key}
        return {}

    def to_dict(self): return asdict(self)

VIEWS: Dict[str, ViewUI] = {
    VIEW_CIRCLE: ViewUI(VIEW_CIRCLE, radius=240.0, note_offset=0.0, sort_key="ord"),
    VIEW_SPIRAL: ViewUI(VIEW_SPIRAL, radius=50.0, note_offset=8.0, sort_key="semitones"),
}

PRESETS: Dict[Tuple[str, str], ScaleRequest] = {
    (VIEW_CIRCLE, SCALE_PYTHAGOREAN): ScaleRequest(SCALE_PYTHAGOREAN, -6, 6),
    (VIEW_CIRCLE, SCALE_JUST):        ScaleRequest(SCALE_JUST, 0, 13, octave_limit=0),
    (VIEW_CIRCLE, SCALE_ET):          ScaleRequest(SCALE_ET, -6, 6),
    (VIEW_SPIRAL, SCALE_PYTHAGOREAN): ScaleRequest(SCALE_PYTHAGOREAN, 0, 24),
    (VIEW_SPIRAL, SCALE_JUST):        ScaleRequest(SCALE_JUST, 0, 25),
    (VIEW_SPIRAL, SCALE_ET):          ScaleRequest(SCALE_ET, 0, 24),
}

def view_ui(view: str) -> ViewUI:
    if view not in VIEWS:
        raise ValueError(f"Unknown view {view!r}; expected one of {sorted(VIEWS)}")
    return replace(VIEWS[view])

def preset(view: str, system: str) -> ScaleRequest:
    view_ui(view)
    if (view, system) not in PRESETS:
        raise ValueError(f"Unknown tuning system {system!r}")
    return replace(PRESETS[(view, system)])

def comma_for(view: str, system: str) -> Optional[str]:
    """Comma sector shown by the spiral view: pythagorean or syntonic, else None."""
    if view != VIEW_SPIRAL:
        return None
    return {SCALE_PYTHAGOREAN: "pythagorean", SCALE_JUST: "syntonic"}.get(system)
