from __future__ import annotations

import math
import unittest

from crossband import BandDataError, Sample, build_segments, build_series, sample_series, trim_segments


def _segments(*rows: tuple[int, float, float]):
    return build_segments(build_series(Sample(x=x, y1=y1, y2=y2) for x, y1, y2 in rows))


class SegmentTrimmerTests(unittest.TestCase):
    def test_no_cutoff_passes_every_segment_through(self) -> None:
        segs = build_segments(sample_series())
        trimmed = trim_segments(segs)
        self.assertEqual(len(trimmed), len(segs))
        for seg, out in zip(segs, trimmed):
            self.assertEqual(out.index, seg.index)
            self.assertEqual(out.points, seg.points)
            self.assertEqual(out.is_first_above, seg.is_first_above)

    def test_cutoff_at_or_after_domain_matches_no_cutoff(self) -> None:
        segs = build_segments(sample_series())
        self.assertEqual(trim_segments(segs, 19.0), trim_segments(segs, None))
        self.assertEqual(trim_segments(segs, 250), trim_segments(segs))

    def test_cutoff_at_or_before_domain_is_empty(self) -> None:
        segs = build_segments(sample_series())
        self.assertEqual(trim_segments(segs, 0.0), ())
        self.assertEqual(trim_segments(segs, -3.5), ())

    def test_cutoff_on_sample_before_crossing_drops_next_segment(self) -> None:
        segs = _segments((5, 62.0, 53.0), (6, 65.0, 60.0), (7, 60.0, 66.0))
        trimmed = trim_segments(segs, 6.0)
        self.assertEqual(len(trimmed), 1)
        self.assertEqual(trimmed[0].index, 0)
        self.assertTrue(trimmed[0].is_first_above)
        self.assertEqual([p.x for p in trimmed[0].points], [5.0, 6.0])

    def test_cutoff_on_first_sample_of_two_sample_run_is_empty(self) -> None:
        segs = _segments((6, 65.0, 60.0), (7, 60.0, 66.0))
        self.assertEqual(len(segs), 2)
        self.assertEqual(trim_segments(segs, 6.0), ())

    def test_cutoff_inside_segment_interpolates_edge(self) -> None:
        segs = _segments((0, 10.0, 0.0), (2, 20.0, 4.0), (4, 30.0, 8.0))
        trimmed = trim_segments(segs, 3.0)
        self.assertEqual(len(trimmed), 1)
        edge = trimmed[0].points[-1]
        self.assertEqual(edge.x, 3.0)
        self.assertAlmostEqual(edge.y1, 25.0)
        self.assertAlmostEqual(edge.y2, 6.0)
        self.assertEqual([p.x for p in trimmed[0].points], [0.0, 2.0, 3.0])

    def test_cutoff_between_crossing_and_next_sample(self) -> None:
        segs = _segments((6, 65.0, 60.0), (7, 60.0, 66.0), (8, 55.0, 70.0))
        trimmed = trim_segments(segs, 6.9)
        self.assertEqual([t.index for t in trimmed], [0, 1])
        tail = trimmed[1]
        self.assertFalse(tail.is_first_above)
        self.assertAlmostEqual(tail.points[0].x, 6.0 + 5.0 / 11.0, places=9)
        self.assertEqual(tail.last_x, 6.9)
        self.assertAlmostEqual(tail.points[-1].y1, 60.5, places=9)
        self.assertAlmostEqual(tail.points[-1].y2, 65.4, places=9)

    def test_single_point_segment_is_dropped_or_kept_whole(self) -> None:
        segs = _segments((4, 1.0, 2.0))
        self.assertEqual(trim_segments(segs, 4.0), ())
        self.assertEqual(len(trim_segments(segs, 5.0)), 1)

    def test_trim_never_mutates_source_partition(self) -> None:
        segs = build_segments(sample_series())
        before = [seg.points for seg in segs]
        trim_segments(segs, 10.25)
        self.assertEqual([seg.points for seg in segs], before)

    def test_non_finite_cutoff_fails_fast(self) -> None:
        segs = build_segments(sample_series())
        with self.assertRaises(BandDataError):
            trim_segments(segs, math.nan)
        with self.assertRaises(BandDataError):
            trim_segments(segs, math.inf)

    def test_non_numeric_cutoff_is_rejected(self) -> None:
        segs = build_segments(sample_series())
        with self.assertRaises(TypeError):
            trim_segments(segs, "6")  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            trim_segments(segs, True)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
