# app.py
from __future__ import annotations
import json, logging, os
import streamlit as st
from tuning_generator import make_scale, PYTHAGOREAN_COMMA, SYNTONIC_COMMA
from modules.config import LabelUI, ScaleRequest, VIEWS, comma_for, preset, view_ui
from modules.labels import labels
from modules.layout import comma_sector, grid_circles, grid_radii, layout_table, segments, sort_for_view

def _init_logging():
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=os.environ.get("TUNING_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

_init_logging()
log = logging.getLogger("app")

# ─────────────────────────── Streamlit UI ───────────────────────────
st.set_page_config(page_title="Circle of Fifths — Tuning Explorer", layout="wide")
st.title("Circle of Fifths — Tuning Explorer")

with st.sidebar:
    st.header("View")
    view = st.radio("Layout", list(VIEWS), index=0)
    system = st.radio("Tuning", ["pythagorean", "just", "ET"], index=0,
                      format_func=lambda s: {"pythagorean": "Pythagorean", "just": "Just", "ET": "Equal"}[s])
    req = preset(view, system)

    st.subheader("Index range (fifths)")
    lo = int(st.number_input("From", -60, 60, req.lo, step=1))
    hi = int(st.number_input("To", -60, 60, req.hi, step=1))
    if system == "just":
        octave_limit = int(st.number_input("Octave limit", 0, 6, req.octave_limit, step=1))
        key = int(st.number_input("Key pitch class", 0, 11, req.key, step=1))
    else:
        octave_limit, key = req.octave_limit, req.key
    req = ScaleRequest(system, lo, hi, octave_limit=octave_limit, key=key)

    st.header("Labels")
    label_ui = LabelUI(
        label_format=st.selectbox("Label", ["note", "semitones", "interval"]),
        note_names=st.selectbox("Note names", ["english", "latin"]),
        interval_names=st.selectbox("Interval names", ["english", "latin"]),
        show_octave=st.checkbox("Show octave", False),
    )

# ─────────────────────────── Main flow ───────────────────────────
ui = view_ui(view)
try:
    notes = make_scale(req.system, req.lo, req.hi, **req.kwargs())
except ValueError as e:
    log.warning("generation failed for %s: %s", req.to_dict(), e)
    st.error(f"Cannot build scale: {e}")
    st.stop()

if not notes:
    st.info("Empty index range: nothing to show.")
    st.stop()

ordered = sort_for_view(notes, ui)
rows = layout_table(ordered, ui)
for row, text in zip(rows, labels(ordered, view, system, **label_ui.to_dict())):
    row["label"] = text

skipped = (req.hi - req.lo + 1) - len(notes)
st.subheader(f"{len(notes)} notes" + (f" ({skipped} skipped by octave limit)" if skipped else ""))
st.dataframe(rows, width="stretch")

comma = comma_for(view, system)
if comma:
    a0, a1 = comma_sector(PYTHAGOREAN_COMMA if comma == "pythagorean" else SYNTONIC_COMMA)
    st.markdown(f"**{comma.capitalize()} comma sector:** {a0:.5f} → {a1:.5f} rad")

geometry = dict(
    view=ui.to_dict(),
    segments=segments(len(rows)),
    grid_radii=grid_radii(48 if view == "spiral" else 12).tolist(),
    grid_circles=grid_circles(3, ui.radius, ui.note_offset * 12).tolist() if view == "spiral" else [],
)

st.download_button(
    "⬇️ Export scale JSON",
    file_name=f"{system}_{view}_{req.lo}_{req.hi}.json",
    mime="application/json",
    data=json.dumps({"request": req.to_dict(), "labels": label_ui.to_dict(),
                     "notes": rows, "geometry": geometry}, indent=2, ensure_ascii=False),
)
