"""
State Scores - Configuration

Module-level constants for the map and panels, plus runtime settings read
from the environment.
"""
import os
from dataclasses import dataclass
from pathlib import Path

# Paths
ROOT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DATA_PATH = ROOT_DIR / "data" / "states_sample.geojson"

# Window
WINDOW_TITLE = "State Scores"
WINDOW_SIZE = (1200, 800)

# Map
MAP_CENTER = (37.8, -96.0)  # lat, lng - center of the US
MAP_SCALE = 10.0  # scene units per degree
ZOOM_STEP = 1.15

# Shape styling
STROKE_COLOR = "white"
STROKE_WIDTH = 2
FILL_OPACITY = 0.7
BACKGROUND_COLOR = "#2b2b2b"

# Panel text
HOVER_PLACEHOLDER = "State : score"
SELECTION_PLACEHOLDER = "Click on a state to see details"
SUMMARY_TITLE = "State Scores"
SHOW_SCORES_LABEL = "Show Scores"
HIDE_SCORES_LABEL = "Hide Scores"
VOTE_UP_LABEL = "Vote Up"
VOTE_DOWN_LABEL = "Vote Down"

# Environment variables
ENV_DATA = "STATESCORES_DATA"
ENV_STRICT = "STATESCORES_STRICT"
ENV_LOG_LEVEL = "STATESCORES_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings for one session."""
    data_path: Path = DEFAULT_DATA_PATH
    strict: bool = False  # raise on UnknownRegion instead of logging it
    log_level: str = "INFO"


def load_settings(environ=None) -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    if environ is None:
        environ = os.environ

    data_path = environ.get(ENV_DATA)
    strict = environ.get(ENV_STRICT, "").strip().lower() in _TRUTHY
    log_level = environ.get(ENV_LOG_LEVEL, "").strip().upper() or "INFO"

    return Settings(
        data_path=Path(data_path) if data_path else DEFAULT_DATA_PATH,
        strict=strict,
        log_level=log_level,
    )
