from __future__ import annotations

from dataclasses import dataclass
import logging
import threading
from typing import Iterable

import numpy as np

from crossband.interaction import ProbeState, cutoff_for
from crossband.readout import ProbeReadout, build_readout
from crossband.sample_data import random_samples
from crossband.segments import Segment, build_segments
from crossband.series import PointSeries, Sample, build_series
from crossband.theme import DEFAULT_THEME, BandTheme
from crossband.trim import TrimmedSegment, trim_segments

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BandSnapshot:
    series: PointSeries
    segments: tuple[Segment, ...]


@dataclass(frozen=True)
class BandView:
    """Everything a renderer needs for one frame."""

    series: PointSeries
    segments: tuple[TrimmedSegment, ...]
    selected: Sample | None
    readout: ProbeReadout | None


def build_snapshot(samples: Iterable[Sample]) -> BandSnapshot:
    series = build_series(samples)
    return BandSnapshot(series=series, segments=build_segments(series))


def compose_view(snapshot: BandSnapshot, state: ProbeState, theme: BandTheme = DEFAULT_THEME) -> BandView:
    selected = None if state.selected_x is None else snapshot.series.find(state.selected_x)
    cutoff = cutoff_for(state) if selected is not None else None
    return BandView(
        series=snapshot.series,
        segments=trim_segments(snapshot.segments, cutoff),
        selected=selected,
        readout=None if selected is None else build_readout(selected, theme),
    )


class BandChartModel:
    """Holds the current data and its full segment partition.

    Data edits rebuild the partition once and publish the new snapshot after it
    is complete; probing only trims the published partition.
    """

    def __init__(self, samples: Iterable[Sample] = (), *, theme: BandTheme = DEFAULT_THEME) -> None:
        self._lock = threading.Lock()
        self._theme = theme
        self._snapshot = build_snapshot(samples)

    @property
    def snapshot(self) -> BandSnapshot:
        return self._snapshot

    @property
    def series(self) -> PointSeries:
        return self._snapshot.series

    @property
    def segments(self) -> tuple[Segment, ...]:
        return self._snapshot.segments

    @property
    def theme(self) -> BandTheme:
        return self._theme

    def set_samples(self, samples: Iterable[Sample]) -> BandSnapshot:
        snapshot = build_snapshot(samples)
        with self._lock:
            self._snapshot = snapshot
        LOGGER.debug(
            "band partition rebuilt: %d samples, %d segments",
            len(snapshot.series),
            len(snapshot.segments),
        )
        return snapshot

    def append_sample(
        self,
        y1: float | None = None,
        y2: float | None = None,
        *,
        rng: np.random.Generator | None = None,
    ) -> BandSnapshot:
        """Append one sample after the current last x; missing y values are drawn from [0, 100]."""
        if y1 is None or y2 is None:
            gen = rng if rng is not None else np.random.default_rng()
            y1 = float(gen.uniform(0.0, 100.0)) if y1 is None else y1
            y2 = float(gen.uniform(0.0, 100.0)) if y2 is None else y2
        with self._lock:
            current = self._snapshot.series
            last = current.last
            # An empty series starts at x=1, as if a sample sat at x=0.
            sample = Sample(x=(0 if last is None else last.x) + 1, y1=y1, y2=y2)
            snapshot = build_snapshot(current.samples + (sample,))
            self._snapshot = snapshot
        LOGGER.debug("appended sample x=%d", sample.x)
        return snapshot

    def remove_last(self) -> BandSnapshot:
        with self._lock:
            current = self._snapshot.series
            if len(current) == 0:
                return self._snapshot
            snapshot = build_snapshot(current.samples[:-1])
            self._snapshot = snapshot
        LOGGER.debug("removed last sample, %d remain", len(snapshot.series))
        return snapshot

    def randomize(self, count: int | None = None, *, rng: np.random.Generator | None = None) -> BandSnapshot:
        n = len(self._snapshot.series) if count is None else count
        return self.set_samples(random_samples(n, rng=rng))

    def view(self, state: ProbeState) -> BandView:
        return compose_view(self._snapshot, state, self._theme)
