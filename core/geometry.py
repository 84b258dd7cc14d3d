"""
State Scores - Geometry

Converts dataset rings (longitude-first, GeoJSON order) into the
latitude-first pairs the map works with, and projects them into scene
coordinates for drawing.
"""
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import MAP_SCALE

Point = Tuple[float, float]
Ring = Sequence[Sequence[float]]


def to_lat_lng(ring: Ring) -> List[Point]:
    """
    Swap each (x, y) pair of a ring into (y, x).

    Point order and ring closure are preserved. Degenerate rings (fewer
    than three points, self-intersecting) are passed through as-is.
    """
    return [(point[1], point[0]) for point in ring]


def normalize_region(region) -> List[List[Point]]:
    """Latitude-first rings for every part of a region."""
    return [to_lat_lng(ring) for ring in region.rings]


def project_ring(ring: Ring, scale: float = MAP_SCALE) -> np.ndarray:
    """
    Project a latitude-first ring into scene coordinates.

    Equirectangular: x grows with longitude, y is flipped so north is up.
    Returns an (N, 2) float array; an empty ring gives shape (0, 2).
    """
    points = np.asarray(ring, dtype=np.float64).reshape(-1, 2)
    scene = np.empty_like(points)
    scene[:, 0] = points[:, 1] * scale
    scene[:, 1] = -points[:, 0] * scale
    return scene


def scene_bounds(rings: Iterable[np.ndarray]) -> Optional[Tuple[float, float, float, float]]:
    """(min_x, min_y, max_x, max_y) over projected rings, or None if empty."""
    arrays = [r for r in rings if len(r)]
    if not arrays:
        return None
    stacked = np.vstack(arrays)
    min_x, min_y = stacked.min(axis=0)
    max_x, max_y = stacked.max(axis=0)
    return (float(min_x), float(min_y), float(max_x), float(max_y))
