"""
State Scores - Error Types

Everything the core raises derives from StateScoresError.
"""


class StateScoresError(Exception):
    """Base class for State Scores errors."""


class InvalidDataset(StateScoresError, ValueError):
    """The dataset is malformed: bad file, bad feature, empty or duplicate name."""


class UnknownRegion(StateScoresError, KeyError):
    """A region name that is not part of the loaded dataset."""

    def __init__(self, name):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"Unknown region: {self.name!r}"
