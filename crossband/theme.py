from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
import re
import tomllib
from typing import Any, Mapping

from crossband.errors import BandDataError

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")
_COLOR_TOKENS = (
    "first_line",
    "second_line",
    "fill_first_above",
    "fill_first_below",
    "accent_positive",
    "accent_negative",
    "rule",
)


@dataclass(frozen=True)
class BandTheme:
    """Color and label tokens for a two-line band chart."""

    first_line: str = "#3E95FF"
    second_line: str = "#FFAA46"
    fill_first_above: str = "#34C7592E"
    fill_first_below: str = "#FF3B302E"
    accent_positive: str = "#34C759"
    accent_negative: str = "#FF3B30"
    rule: str = "#D0DAE859"
    label_decimals: int = 1


DEFAULT_THEME = BandTheme()


def validate_band_theme(overrides: Mapping[str, Any] | None = None) -> BandTheme:
    """Merge ``overrides`` into the default tokens, rejecting unknown or malformed values."""
    raw: dict[str, Any] = asdict(DEFAULT_THEME)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise BandDataError(f"Unknown theme token: {key}")
            raw[key] = value

    for key in _COLOR_TOKENS:
        if not isinstance(raw[key], str) or not _HEX_COLOR.match(raw[key]):
            raise BandDataError(f"Token `{key}` must be a hex color (#RRGGBB or #RRGGBBAA)")

    decimals = raw["label_decimals"]
    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= 6:
        raise BandDataError("Token `label_decimals` must be an integer in [0, 6]")

    return BandTheme(**{key: raw[key] for key in _COLOR_TOKENS}, label_decimals=decimals)


def load_band_theme(path: str | Path) -> BandTheme:
    theme_path = Path(path)
    if not theme_path.exists():
        raise FileNotFoundError(f"theme file not found: {theme_path}")
    with theme_path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("theme", {})
    if not isinstance(table, dict):
        raise BandDataError("`theme` must be a TOML table")
    return validate_band_theme(table)


def hex_to_rgba(value: str) -> tuple[int, int, int, int]:
    if not _HEX_COLOR.match(value):
        raise BandDataError(f"not a hex color: {value!r}")
    r, g, b = (int(value[i : i + 2], 16) for i in (1, 3, 5))
    a = int(value[7:9], 16) if len(value) == 9 else 255
    return (r, g, b, a)
