"""
Tests for the interaction reducer.
"""

import itertools
import unittest

from core.data import Region
from core.errors import UnknownRegion
from core.events import Event, EventType, reduce, replay
from core.ledger import ScoreLedger
from core.state import InteractionState

RING = ((-100.0, 40.0), (-99.0, 41.0), (-98.0, 40.0))


def make_ledger():
    return ScoreLedger.initialize([
        Region("Texas", (RING,), 5),
        Region("Ohio", (RING,), -2),
    ])


class TestInitialState(unittest.TestCase):

    def test_defaults(self):
        state = InteractionState()
        self.assertIsNone(state.selected)
        self.assertIsNone(state.hovered)
        self.assertFalse(state.panel_expanded)


class TestReduce(unittest.TestCase):

    def setUp(self):
        self.ledger = make_ledger()
        self.state = InteractionState()

    def test_pick_sets_selection(self):
        _, state = reduce(self.ledger, self.state, Event.pick("Texas"))
        self.assertEqual(state.selected, "Texas")

    def test_second_pick_replaces_selection(self):
        _, state = replay(self.ledger, self.state, [Event.pick("Texas"), Event.pick("Ohio")])
        self.assertEqual(state.selected, "Ohio")

    def test_hover_does_not_touch_selection(self):
        _, state = replay(self.ledger, self.state, [
            Event.pick("Texas"),
            Event.hover_enter("Ohio"),
            Event.hover_leave(),
        ])
        self.assertEqual(state.selected, "Texas")
        self.assertIsNone(state.hovered)

    def test_hover_enter_sets_hovered(self):
        _, state = reduce(self.ledger, self.state, Event.hover_enter("Ohio"))
        self.assertEqual(state.hovered, "Ohio")

    def test_toggle_is_involution(self):
        _, once = reduce(self.ledger, self.state, Event.toggle_panel())
        _, twice = reduce(self.ledger, once, Event.toggle_panel())
        self.assertTrue(once.panel_expanded)
        self.assertEqual(twice, self.state)

    def test_each_event_touches_one_field(self):
        start = InteractionState(selected="Ohio", hovered="Texas", panel_expanded=True)
        _, state = reduce(self.ledger, start, Event.toggle_panel())
        self.assertEqual((state.selected, state.hovered), ("Ohio", "Texas"))
        _, state = reduce(self.ledger, start, Event.hover_leave())
        self.assertEqual((state.selected, state.panel_expanded), ("Ohio", True))

    def test_adjust_changes_ledger_only(self):
        start = InteractionState(selected="Texas")
        ledger, state = reduce(self.ledger, start, Event.adjust("Texas", 1))
        self.assertEqual(ledger.get("Texas"), 6)
        self.assertIs(state, start)

    def test_unknown_names_raise(self):
        for event in (Event.pick("Atlantis"), Event.hover_enter("Atlantis"),
                      Event.adjust("Atlantis", 1)):
            with self.subTest(event=event.type):
                with self.assertRaises(UnknownRegion):
                    reduce(self.ledger, self.state, event)

    def test_inputs_not_modified(self):
        reduce(self.ledger, self.state, Event.pick("Texas"))
        reduce(self.ledger, self.state, Event.adjust("Texas", 3))
        self.assertIsNone(self.state.selected)
        self.assertEqual(self.ledger.get("Texas"), 5)

    def test_all_combinations_reachable(self):
        reached = set()
        events = [Event.pick("Texas"), Event.hover_enter("Ohio"),
                  Event.hover_leave(), Event.toggle_panel()]
        for sequence in itertools.product(events, repeat=3):
            _, state = replay(self.ledger, InteractionState(), sequence)
            reached.add((state.selected is not None, state.hovered is not None,
                         state.panel_expanded))
        self.assertEqual(len(reached), 8)

    def test_replay_is_deterministic(self):
        events = [Event.pick("Ohio"), Event.adjust("Ohio", 4), Event.toggle_panel(),
                  Event.hover_enter("Texas"), Event.adjust("Ohio", -1)]
        first = replay(self.ledger, self.state, events)
        second = replay(self.ledger, self.state, events)
        self.assertEqual(first, second)
        self.assertEqual(first[0].get("Ohio"), 1)


class TestEvent(unittest.TestCase):

    def test_constructors(self):
        self.assertEqual(Event.pick("Ohio").type, EventType.PICK)
        self.assertEqual(Event.adjust("Ohio", -1), Event(EventType.ADJUST, "Ohio", -1))
        self.assertIsNone(Event.hover_leave().name)


if __name__ == "__main__":
    unittest.main(verbosity=2)
