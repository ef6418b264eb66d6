from __future__ import annotations

import numpy as np

from crossband.series import PointSeries, Sample, require_finite_x


def locate_nearest(series: PointSeries, query_x: float) -> Sample | None:
    """Return the sample closest to ``query_x``; on a tie the smaller x wins."""
    query = require_finite_x(query_x, label="query_x")
    if len(series) == 0:
        return None
    # argmin reports the first minimum, which is the smaller x in an ascending series.
    idx = int(np.argmin(np.abs(series.xs - query)))
    return series[idx]
