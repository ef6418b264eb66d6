from __future__ import annotations

from dataclasses import dataclass

from crossband.segments import Segment
from crossband.series import Sample
from crossband.theme import DEFAULT_THEME, BandTheme, hex_to_rgba
from crossband.trim import TrimmedSegment


RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class ProbeReadout:
    x: int
    y1: float
    y2: float
    diff: float
    is_first_above: bool
    label: str
    color: RGBA


def format_diff(diff: float, *, decimals: int = 1) -> str:
    text = f"{diff:+.{decimals}f}"
    # Negative zero renders as "-0.0"; a non-negative difference keeps the plus sign.
    if diff >= 0 and text.startswith("-"):
        text = "+" + text[1:]
    return text


def build_readout(sample: Sample, theme: BandTheme = DEFAULT_THEME) -> ProbeReadout:
    diff = sample.diff
    accent = theme.accent_positive if diff >= 0 else theme.accent_negative
    return ProbeReadout(
        x=sample.x,
        y1=sample.y1,
        y2=sample.y2,
        diff=diff,
        is_first_above=sample.is_first_above,
        label=format_diff(diff, decimals=theme.label_decimals),
        color=hex_to_rgba(accent),
    )


def segment_fill(segment: Segment | TrimmedSegment, theme: BandTheme = DEFAULT_THEME) -> RGBA:
    return hex_to_rgba(theme.fill_first_above if segment.is_first_above else theme.fill_first_below)
