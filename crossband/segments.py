from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from crossband.series import PointSeries, Sample


PARALLEL_EPSILON = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class SegmentPoint:
    x: float
    y1: float
    y2: float

    @property
    def low(self) -> float:
        return min(self.y1, self.y2)

    @property
    def high(self) -> float:
        return max(self.y1, self.y2)


class BandRun:
    """Shared accessors for anything carrying an ordered run of segment points."""

    points: tuple[SegmentPoint, ...]

    @property
    def first_x(self) -> float:
        return self.points[0].x

    @property
    def last_x(self) -> float:
        return self.points[-1].x

    def band_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(x, low, high)`` arrays bounding the filled band."""
        x = np.asarray([p.x for p in self.points], dtype=np.float64)
        y1 = np.asarray([p.y1 for p in self.points], dtype=np.float64)
        y2 = np.asarray([p.y2 for p in self.points], dtype=np.float64)
        return x, np.minimum(y1, y2), np.maximum(y1, y2)


@dataclass(frozen=True)
class Segment(BandRun):
    """Maximal run of the domain where one series stays on the same side of the other.

    ``index`` is the segment's position in the partition it was built in and
    serves as its identity for render diffing.
    """

    index: int
    points: tuple[SegmentPoint, ...]
    is_first_above: bool


def build_segments(series: PointSeries) -> tuple[Segment, ...]:
    """Partition ``series`` into same-sign segments split at exact crossings.

    Adjacent segments share their boundary point: the crossing that closes one
    segment opens the next, so a renderer can switch fill color on that seam.
    """
    if len(series) == 0:
        return ()
    if len(series) == 1:
        only = series[0]
        return (Segment(index=0, points=(_segment_point(only),), is_first_above=only.is_first_above),)

    segments: list[Segment] = []
    current: list[SegmentPoint] = [_segment_point(series[0])]
    current_above = series[0].is_first_above

    for a, b in zip(series.samples, series.samples[1:]):
        if a.is_first_above == b.is_first_above:
            current.append(_segment_point(b))
            continue

        cross = crossing_point(a, b)
        current.append(cross)
        segments.append(Segment(index=len(segments), points=tuple(current), is_first_above=current_above))
        current = [cross, _segment_point(b)]
        current_above = b.is_first_above

    segments.append(Segment(index=len(segments), points=tuple(current), is_first_above=current_above))
    return tuple(segments)


def crossing_point(a: Sample, b: Sample) -> SegmentPoint:
    """Linear intersection of the two series between samples ``a`` and ``b``."""
    dy1 = b.y1 - a.y1
    dy2 = b.y2 - a.y2
    denom = dy1 - dy2
    if abs(denom) < PARALLEL_EPSILON:
        # Parallel or coincident in this interval; split at the midpoint.
        t = 0.5
    else:
        t = (a.y2 - a.y1) / denom
    t = max(0.0, min(1.0, t))
    x = float(a.x) + t * float(b.x - a.x)
    y = a.y1 + t * dy1
    return SegmentPoint(x=x, y1=y, y2=y)


def _segment_point(sample: Sample) -> SegmentPoint:
    return SegmentPoint(x=float(sample.x), y1=sample.y1, y2=sample.y2)
