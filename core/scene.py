"""
State Scores - Scene Composition

Builds everything the UI needs to draw from the ledger, the interaction
state and the normalized geometry. Scores shown in the hover and
selection panels are always read live from the ledger.
"""
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from . import config
from .colors import color_for
from .events import Event
from .ledger import ScoreLedger
from .state import InteractionState


@dataclass(frozen=True)
class Shape:
    """One drawable region."""
    name: str
    rings: Tuple[Tuple[Tuple[float, float], ...], ...]  # latitude-first
    score: int
    fill_color: str
    stroke_color: str = config.STROKE_COLOR
    stroke_width: int = config.STROKE_WIDTH
    fill_opacity: float = config.FILL_OPACITY


@dataclass(frozen=True)
class SelectionPanel:
    name: str
    score: int
    up: Event
    down: Event

    @property
    def title(self):
        return self.name

    @property
    def score_text(self):
        return f"Score: {self.score}"


@dataclass(frozen=True)
class Scene:
    shapes: Tuple[Shape, ...]
    hover_text: str
    selection: Optional[SelectionPanel]
    summary: Optional[Tuple[Tuple[str, int], ...]]
    toggle_label: str

    def shape(self, name: str) -> Shape:
        for shape in self.shapes:
            if shape.name == name:
                return shape
        raise KeyError(name)


def hover_text(ledger: ScoreLedger, state: InteractionState) -> str:
    if state.hovered is None:
        return config.HOVER_PLACEHOLDER
    return f"{state.hovered}: {ledger.get(state.hovered)}"


def compose(ledger: ScoreLedger, state: InteractionState,
            geometry: Mapping[str, Sequence]) -> Scene:
    """Compose the renderable scene. Shapes follow ledger (dataset) order."""
    shapes = []
    for name, score in ledger.items():
        rings = tuple(tuple(ring) for ring in geometry.get(name, ()))
        shapes.append(Shape(
            name=name,
            rings=rings,
            score=score,
            fill_color=color_for(score),
        ))

    selection = None
    if state.selected is not None:
        selection = SelectionPanel(
            name=state.selected,
            score=ledger.get(state.selected),
            up=Event.adjust(state.selected, 1),
            down=Event.adjust(state.selected, -1),
        )

    return Scene(
        shapes=tuple(shapes),
        hover_text=hover_text(ledger, state),
        selection=selection,
        summary=ledger.items() if state.panel_expanded else None,
        toggle_label=config.HIDE_SCORES_LABEL if state.panel_expanded else config.SHOW_SCORES_LABEL,
    )
