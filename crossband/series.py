from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
import numbers
from typing import Iterable, Iterator

import numpy as np

from crossband.errors import BandDataError

LOGGER = logging.getLogger(__name__)
# Largest magnitude at which every integer x survives the float64 arrays and crossing math.
MAX_EXACT_X = 2**53


@dataclass(frozen=True)
class Sample:
    """One x position with the two y-values being compared."""

    x: int
    y1: float
    y2: float

    def __post_init__(self) -> None:
        if isinstance(self.x, bool) or not isinstance(self.x, numbers.Integral):
            raise BandDataError(f"sample x must be an integer, got {self.x!r}")
        object.__setattr__(self, "x", int(self.x))
        if abs(self.x) > MAX_EXACT_X:
            raise BandDataError(f"sample x={self.x} is outside the exact float range (|x| <= 2**53)")
        for name in ("y1", "y2"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise BandDataError(f"sample {name} must be a real number, got {value!r}")
            value = float(value)
            if not math.isfinite(value):
                raise BandDataError(f"sample {name} must be finite at x={self.x}")
            object.__setattr__(self, name, value)

    @property
    def diff(self) -> float:
        return self.y1 - self.y2

    @property
    def is_first_above(self) -> bool:
        return self.y1 >= self.y2


@dataclass(frozen=True)
class PointSeries:
    samples: tuple[Sample, ...] = ()
    xs: np.ndarray = field(init=False, repr=False, compare=False)
    y1s: np.ndarray = field(init=False, repr=False, compare=False)
    y2s: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "samples", tuple(self.samples))
        xs = np.asarray([s.x for s in self.samples], dtype=np.float64)
        y1s = np.asarray([s.y1 for s in self.samples], dtype=np.float64)
        y2s = np.asarray([s.y2 for s in self.samples], dtype=np.float64)
        for arr in (xs, y1s, y2s):
            arr.setflags(write=False)
        object.__setattr__(self, "xs", xs)
        object.__setattr__(self, "y1s", y1s)
        object.__setattr__(self, "y2s", y2s)

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    def __getitem__(self, index: int) -> Sample:
        return self.samples[index]

    @property
    def first(self) -> Sample | None:
        return self.samples[0] if self.samples else None

    @property
    def last(self) -> Sample | None:
        return self.samples[-1] if self.samples else None

    def find(self, x: int) -> Sample | None:
        for sample in self.samples:
            if sample.x == x:
                return sample
        return None


def build_series(samples: Iterable[Sample]) -> PointSeries:
    ordered = sorted(samples, key=lambda s: s.x)
    for a, b in zip(ordered, ordered[1:]):
        if a.x == b.x:
            # Callers own deduplication; order among equal x is left as given.
            LOGGER.warning("duplicate sample x=%d in series input", a.x)
    return PointSeries(samples=tuple(ordered))


def require_finite_x(value: object, *, label: str) -> float:
    """Coerce a data-space x position, failing fast on non-numeric or non-finite input."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{label} must be a real number, got {type(value).__name__}")
    out = float(value)
    if not math.isfinite(out):
        raise BandDataError(f"{label} must be finite, got {out!r}")
    return out
