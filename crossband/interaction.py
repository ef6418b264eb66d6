from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from crossband.nearest import locate_nearest
from crossband.series import PointSeries, require_finite_x


@dataclass(frozen=True)
class ProbeState:
    """Probe selection owned by the interaction layer and passed in by value."""

    selected_x: int | None = None
    pointer_x: float | None = None


def probe_at(series: PointSeries, state: ProbeState, query_x: float | None) -> ProbeState:
    """Snap a data-space pointer position to the nearest sample.

    ``query_x`` is ``None`` when the pointer left the plot area, which clears
    the selection.
    """
    if query_x is None:
        return dataclasses.replace(state, selected_x=None, pointer_x=None)
    pointer = require_finite_x(query_x, label="query_x")
    nearest = locate_nearest(series, pointer)
    return dataclasses.replace(
        state,
        selected_x=None if nearest is None else nearest.x,
        pointer_x=pointer,
    )


def release_probe(state: ProbeState) -> ProbeState:
    return dataclasses.replace(state, selected_x=None, pointer_x=None)


def cutoff_for(state: ProbeState) -> float | None:
    return None if state.selected_x is None else float(state.selected_x)
