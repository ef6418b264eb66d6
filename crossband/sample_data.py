from __future__ import annotations

import numpy as np

from crossband.series import PointSeries, Sample, build_series


SAMPLE_PAIRS: tuple[tuple[float, float], ...] = (
    (34, 20),
    (42, 23),
    (39, 30),
    (50, 36),
    (58, 45),
    (62, 53),
    (65, 60),
    (60, 66),
    (55, 70),
    (49, 72),
    (44, 71),
    (40, 68),
    (38, 62),
    (36, 55),
    (35, 48),
    (37, 43),
    (41, 40),
    (47, 39),
    (52, 38),
    (58, 37),
)


def sample_series() -> PointSeries:
    return build_series(Sample(x=i, y1=y1, y2=y2) for i, (y1, y2) in enumerate(SAMPLE_PAIRS))


def random_samples(count: int = 20, *, rng: np.random.Generator | None = None) -> list[Sample]:
    """Draw ``count`` samples at x = 0..count-1 with both y values uniform in [0, 100]."""
    n = max(int(count), 0)
    gen = rng if rng is not None else np.random.default_rng()
    values = gen.uniform(0.0, 100.0, size=(n, 2))
    return [Sample(x=i, y1=float(values[i, 0]), y2=float(values[i, 1])) for i in range(n)]
