"""
State Scores - Color Bands

Maps an integer score to one of a fixed set of fill colours.
Thresholds are exclusive: a score of exactly 20, 10 or 0 falls into the
next band down.
"""
from typing import NamedTuple, Optional


class ColorBand(NamedTuple):
    name: str
    threshold: Optional[int]  # exclusive lower bound; None = catch-all
    color: str


DEEP = ColorBand("deep", 20, "#006400")
STRONG = ColorBand("strong", 10, "#228B22")
POSITIVE = ColorBand("positive", 0, "#7FFF00")
NEGATIVE = ColorBand("negative", None, "#FF6347")

# Highest threshold first
BANDS = (DEEP, STRONG, POSITIVE, NEGATIVE)


def band_for(score: int) -> ColorBand:
    for band in BANDS[:-1]:
        if score > band.threshold:
            return band
    return BANDS[-1]


def color_for(score: int) -> str:
    """Hex fill colour for a score."""
    return band_for(score).color
