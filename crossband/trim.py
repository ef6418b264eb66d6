from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from crossband.segments import PARALLEL_EPSILON, BandRun, Segment, SegmentPoint
from crossband.series import require_finite_x


@dataclass(frozen=True)
class TrimmedSegment(BandRun):
    """A segment cut back to the visible cutoff; ``index`` is the source segment's."""

    index: int
    points: tuple[SegmentPoint, ...]
    is_first_above: bool


def trim_segments(segments: Sequence[Segment], cutoff_x: float | None = None) -> tuple[TrimmedSegment, ...]:
    """Keep only the part of the partition strictly before ``cutoff_x``.

    With no cutoff every segment is passed through whole. A segment the cutoff
    falls inside ends at an interpolated point exactly at the cutoff. Pieces
    left with fewer than two points have no area and are dropped.
    """
    if cutoff_x is None:
        return tuple(_trimmed(seg, seg.points) for seg in segments)

    cutoff = require_finite_x(cutoff_x, label="cutoff_x")
    out: list[TrimmedSegment] = []
    for seg in segments:
        if not seg.points:
            continue
        if cutoff <= seg.first_x:
            continue
        if cutoff >= seg.last_x:
            out.append(_trimmed(seg, seg.points))
            continue
        points = _points_before(seg.points, cutoff)
        if points is not None:
            out.append(_trimmed(seg, points))
    return tuple(out)


def _points_before(points: tuple[SegmentPoint, ...], cutoff: float) -> tuple[SegmentPoint, ...] | None:
    for i, p in enumerate(points):
        if p.x == cutoff:
            prefix = points[: i + 1]
            return prefix if len(prefix) >= 2 else None

    upper = next((i for i, p in enumerate(points) if p.x > cutoff), None)
    if upper is None or upper < 1:
        return None
    a = points[upper - 1]
    b = points[upper]
    span = max(b.x - a.x, PARALLEL_EPSILON)
    t = (cutoff - a.x) / span
    edge = SegmentPoint(
        x=cutoff,
        y1=a.y1 + t * (b.y1 - a.y1),
        y2=a.y2 + t * (b.y2 - a.y2),
    )
    prefix = points[:upper] + (edge,)
    return prefix if len(prefix) >= 2 else None


def _trimmed(seg: Segment, points: tuple[SegmentPoint, ...]) -> TrimmedSegment:
    return TrimmedSegment(index=seg.index, points=points, is_first_above=seg.is_first_above)
