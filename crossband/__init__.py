from crossband.adapters import normalize_pairs
from crossband.errors import BandDataError
from crossband.interaction import ProbeState, cutoff_for, probe_at, release_probe
from crossband.model import BandChartModel, BandSnapshot, BandView, build_snapshot, compose_view
from crossband.nearest import locate_nearest
from crossband.readout import ProbeReadout, build_readout, format_diff, segment_fill
from crossband.sample_data import SAMPLE_PAIRS, random_samples, sample_series
from crossband.segments import Segment, SegmentPoint, build_segments, crossing_point
from crossband.series import PointSeries, Sample, build_series
from crossband.theme import DEFAULT_THEME, BandTheme, load_band_theme, validate_band_theme
from crossband.trim import TrimmedSegment, trim_segments

__all__ = [
    "BandChartModel",
    "BandDataError",
    "BandSnapshot",
    "BandTheme",
    "BandView",
    "DEFAULT_THEME",
    "PointSeries",
    "ProbeReadout",
    "ProbeState",
    "SAMPLE_PAIRS",
    "Sample",
    "Segment",
    "SegmentPoint",
    "TrimmedSegment",
    "build_readout",
    "build_segments",
    "build_series",
    "build_snapshot",
    "compose_view",
    "crossing_point",
    "cutoff_for",
    "format_diff",
    "load_band_theme",
    "locate_nearest",
    "normalize_pairs",
    "probe_at",
    "random_samples",
    "release_probe",
    "sample_series",
    "segment_fill",
    "trim_segments",
    "validate_band_theme",
]
