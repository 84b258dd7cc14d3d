"""
State Scores - Events and Reducer

Every user interaction is an Event. `reduce` is the single transition
function: it takes the current ledger and interaction state plus one event
and returns the next ledger and state. Nothing else changes either one.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .errors import UnknownRegion
from .ledger import ScoreLedger
from .state import InteractionState


class EventType(Enum):
    PICK = "pick"
    HOVER_ENTER = "hover_enter"
    HOVER_LEAVE = "hover_leave"
    TOGGLE_PANEL = "toggle_panel"
    ADJUST = "adjust"


@dataclass(frozen=True)
class Event:
    type: EventType
    name: Optional[str] = None
    delta: int = 0

    @classmethod
    def pick(cls, name):
        return cls(EventType.PICK, name)

    @classmethod
    def hover_enter(cls, name):
        return cls(EventType.HOVER_ENTER, name)

    @classmethod
    def hover_leave(cls):
        return cls(EventType.HOVER_LEAVE)

    @classmethod
    def toggle_panel(cls):
        return cls(EventType.TOGGLE_PANEL)

    @classmethod
    def adjust(cls, name, delta):
        return cls(EventType.ADJUST, name, delta)


def _require_known(ledger, name):
    if name not in ledger:
        raise UnknownRegion(name)


def reduce(ledger: ScoreLedger, state: InteractionState,
           event: Event) -> Tuple[ScoreLedger, InteractionState]:
    """
    Apply one event. Raises UnknownRegion if the event names a region
    that is not in the ledger; inputs are never modified.
    """
    kind = event.type

    if kind is EventType.PICK:
        _require_known(ledger, event.name)
        return ledger, state.with_selected(event.name)

    if kind is EventType.HOVER_ENTER:
        _require_known(ledger, event.name)
        return ledger, state.with_hovered(event.name)

    if kind is EventType.HOVER_LEAVE:
        return ledger, state.with_hovered(None)

    if kind is EventType.TOGGLE_PANEL:
        return ledger, state.with_panel_toggled()

    if kind is EventType.ADJUST:
        return ledger.adjust(event.name, event.delta), state

    raise ValueError(f"Unhandled event type: {kind!r}")


def replay(ledger: ScoreLedger, state: InteractionState,
           events: Iterable[Event]) -> Tuple[ScoreLedger, InteractionState]:
    """Apply events in order."""
    for event in events:
        ledger, state = reduce(ledger, state, event)
    return ledger, state
