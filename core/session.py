"""
State Scores - Session

Owns the ledger, the interaction state and the normalized geometry for the
life of one map session. UI code holds a reference to a Session, feeds it
events through `dispatch` and reads back a composed Scene.
"""
import logging
from typing import Callable, List, Optional

from .errors import UnknownRegion
from .events import Event, reduce
from .geometry import normalize_region
from .ledger import ScoreLedger
from .scene import Scene, compose
from .state import InteractionState

log = logging.getLogger(__name__)


class Session:
    """
    Explicit owner of all mutable map state.

    In strict mode an UnknownRegion from `dispatch` propagates to the
    caller. Otherwise it is logged and the event is dropped, leaving the
    state exactly as it was.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.regions = ()
        self.geometry = {}
        self.ledger: Optional[ScoreLedger] = None
        self.state: Optional[InteractionState] = None
        self._listeners: List[Callable[["Session"], None]] = []

    @property
    def active(self) -> bool:
        return self.ledger is not None

    def initialize(self, regions) -> "Session":
        """Seed the ledger and normalize geometry. Raises InvalidDataset."""
        regions = tuple(regions)
        ledger = ScoreLedger.initialize(regions)

        self.regions = regions
        self.geometry = {r.name: normalize_region(r) for r in regions}
        self.ledger = ledger
        self.state = InteractionState()
        log.info("Session initialized with %d regions", len(ledger))
        return self

    def teardown(self):
        """Discard all state. Listeners are dropped too."""
        self.regions = ()
        self.geometry = {}
        self.ledger = None
        self.state = None
        self._listeners.clear()
        log.info("Session torn down")

    def subscribe(self, listener: Callable[["Session"], None]):
        """Call `listener(session)` after every applied event."""
        self._listeners.append(listener)

    def dispatch(self, event: Event) -> bool:
        """Apply an event. Returns False if it was dropped."""
        if not self.active:
            raise RuntimeError("Session is not initialized")

        try:
            self.ledger, self.state = reduce(self.ledger, self.state, event)
        except UnknownRegion:
            if self.strict:
                raise
            log.error("Ignoring %s for unknown region %r", event.type.value, event.name)
            return False

        log.debug("Applied %s", event)
        for listener in list(self._listeners):
            listener(self)
        return True

    def score(self, name: str) -> int:
        return self.ledger.get(name)

    def scene(self) -> Scene:
        if not self.active:
            raise RuntimeError("Session is not initialized")
        return compose(self.ledger, self.state, self.geometry)
