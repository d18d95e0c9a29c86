"""
Exceptions raised while setting up a simulation.
"""


class MaydayError(Exception):
    """Base class for simulation setup failures."""


class InvalidConfiguration(MaydayError):
    """An unknown or out-of-range configuration value."""


class PlacementInfeasible(MaydayError):
    """Airports could not be placed with the requested separation."""

    def __init__(self, placed: int, requested: int, attempts: int):
        self.placed = placed
        self.requested = requested
        self.attempts = attempts
        super().__init__(
            f"placed {placed} of {requested} airports; no valid position "
            f"found after {attempts} attempts"
        )
