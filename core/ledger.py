"""
State Scores - Score Ledger

Immutable mapping from region name to integer score. Every adjustment
returns a new ledger; the one it was called on is left untouched.
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, Iterator, Tuple

from .errors import InvalidDataset, UnknownRegion


class ScoreLedger:
    """Scores keyed by region name, in dataset order."""

    __slots__ = ("_scores",)

    def __init__(self, scores=None):
        self._scores = MappingProxyType(dict(scores or {}))

    @classmethod
    def initialize(cls, regions: Iterable) -> "ScoreLedger":
        """
        Seed a ledger from regions.

        Each region contributes one entry, its initial score or 0.
        Raises InvalidDataset on an empty or duplicate name.
        """
        scores = {}
        for region in regions:
            name = region.name
            if not isinstance(name, str) or not name:
                raise InvalidDataset(f"Region name must be a non-empty string, got {name!r}")
            if name in scores:
                raise InvalidDataset(f"Duplicate region name: {name!r}")
            initial = region.initial_score
            scores[name] = 0 if initial is None else initial
        return cls(scores)

    def get(self, name: str) -> int:
        try:
            return self._scores[name]
        except KeyError:
            raise UnknownRegion(name) from None

    def adjust(self, name: str, delta: int) -> "ScoreLedger":
        """Return a new ledger with score[name] += delta."""
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise TypeError(f"delta must be an int, got {type(delta).__name__}")
        scores = dict(self._scores)
        scores[name] = self.get(name) + delta
        return ScoreLedger(scores)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._scores)

    def items(self) -> Tuple[Tuple[str, int], ...]:
        return tuple(self._scores.items())

    def __contains__(self, name) -> bool:
        return name in self._scores

    def __iter__(self) -> Iterator[str]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __eq__(self, other):
        if isinstance(other, ScoreLedger):
            return dict(self._scores) == dict(other._scores)
        if isinstance(other, Mapping):
            return dict(self._scores) == dict(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"ScoreLedger({dict(self._scores)!r})"
