"""
State Scores - Dataset Loading

Reads a GeoJSON FeatureCollection of US states into Region records.
Each feature needs properties.name and a Polygon or MultiPolygon geometry;
properties.score is optional and defaults to 0.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from .errors import InvalidDataset

log = logging.getLogger(__name__)

Ring = Tuple[Tuple[float, float], ...]


@dataclass(frozen=True)
class Region:
    """
    One map region. Rings are longitude-first, as stored in the dataset,
    and implicitly closed. Only outer rings are kept.
    """
    name: str
    rings: Tuple[Ring, ...]
    initial_score: Optional[int] = None

    @property
    def polygon(self) -> Ring:
        return self.rings[0]


def _is_score(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _ring(raw, where):
    try:
        return tuple((float(p[0]), float(p[1])) for p in raw)
    except (TypeError, ValueError, IndexError, KeyError) as e:
        raise InvalidDataset(f"{where}: bad coordinates ({e})") from e


def _outer_rings(geometry, where):
    if not isinstance(geometry, dict):
        raise InvalidDataset(f"{where}: missing geometry")

    kind = geometry.get("type")
    coords = geometry.get("coordinates")
    if not isinstance(coords, list) or not coords:
        raise InvalidDataset(f"{where}: geometry has no coordinates")

    if kind == "Polygon":
        return (_ring(coords[0], where),)
    if kind == "MultiPolygon":
        rings = []
        for polygon in coords:
            if not isinstance(polygon, list) or not polygon:
                raise InvalidDataset(f"{where}: empty polygon in MultiPolygon")
            rings.append(_ring(polygon[0], where))
        return tuple(rings)

    raise InvalidDataset(f"{where}: unsupported geometry type {kind!r}")


def parse_states_data(collection) -> List[Region]:
    """Turn a decoded FeatureCollection into a list of Regions, in order."""
    if not isinstance(collection, dict) or collection.get("type") != "FeatureCollection":
        raise InvalidDataset("Dataset is not a GeoJSON FeatureCollection")

    features = collection.get("features")
    if not isinstance(features, list):
        raise InvalidDataset("FeatureCollection has no features list")

    regions = []
    for index, feature in enumerate(features):
        where = f"feature {index}"
        if not isinstance(feature, dict):
            raise InvalidDataset(f"{where}: not an object")

        properties = feature.get("properties")
        if properties is None:
            properties = {}
        elif not isinstance(properties, dict):
            raise InvalidDataset(f"{where}: properties must be an object")
        name = properties.get("name")
        if isinstance(name, str) and name:
            where = f"feature {index} ({name})"

        score = properties.get("score")
        if score is not None and not _is_score(score):
            raise InvalidDataset(f"{where}: score must be an integer, got {score!r}")

        # Name validity (empty, duplicate) is checked by the ledger.
        regions.append(Region(
            name=name,
            rings=_outer_rings(feature.get("geometry"), where),
            initial_score=score,
        ))

    return regions


def load_states_data(path) -> List[Region]:
    """Read and parse a GeoJSON dataset file."""
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            collection = json.load(f)
    except OSError as e:
        raise InvalidDataset(f"Cannot read dataset {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise InvalidDataset(f"Dataset {path} is not valid JSON: {e}") from e

    regions = parse_states_data(collection)
    log.info("Loaded %d regions from %s", len(regions), path)
    return regions
