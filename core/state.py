from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class InteractionState:
    """
    Holds the interaction state of the map.
    Independent of UI or Rendering backend.

    `hovered` is a reference only; readers look up the live score.
    """
    selected: Optional[str] = None
    hovered: Optional[str] = None
    panel_expanded: bool = False

    def with_selected(self, name: str) -> "InteractionState":
        return replace(self, selected=name)

    def with_hovered(self, name: Optional[str]) -> "InteractionState":
        return replace(self, hovered=name)

    def with_panel_toggled(self) -> "InteractionState":
        return replace(self, panel_expanded=not self.panel_expanded)
