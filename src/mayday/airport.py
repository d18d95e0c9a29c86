"""
Airport placement module.

Places named airports on the simulation plane, either at fixed coordinates or
at random positions that keep a minimum separation from each other.
"""

import random
import string
from dataclasses import dataclass
from typing import List, Optional

from .aircraft import Position
from .airspace import Airspace
from .config import MAX_AIRPORTS, AirportLayout, SimulationConfig
from .errors import PlacementInfeasible
from .utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Airport:
    """Fixed ground station on the plane."""
    name: str  # IATA-style code, e.g. "YYZ"
    position: Position

    def get_state(self) -> dict:
        return {
            'name': self.name,
            'position': {
                'x': self.position.x,
                'y': self.position.y
            }
        }


# Hard-coded airports for the deterministic layouts
FIXED_LAYOUTS = {
    AirportLayout.SINGLE: [("YYZ", 0.0, 0.0)],
}


class AirportPlacer:
    """
    Finds airport positions by rejection sampling.

    Candidates are drawn uniformly inside the airspace and rejected while they
    sit within ``min_separation`` of an airport that was already accepted.
    Each airport gets ``max_attempts`` draws before placement is abandoned.
    """

    def __init__(
        self,
        airspace: Airspace,
        min_separation: float = 200.0,
        max_attempts: int = 1000,
        rng: Optional[random.Random] = None
    ):
        self.airspace = airspace
        self.min_separation = min_separation
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else random.Random()

    def place(self, count: int) -> List[Position]:
        """
        Find ``count`` mutually separated positions.

        Raises:
            PlacementInfeasible: if an airport cannot be placed within the
                attempt budget
        """
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")

        placed: List[Position] = []
        while len(placed) < count:
            placed.append(self._place_one(placed, count))
        return placed

    def _place_one(self, placed: List[Position], count: int) -> Position:
        for _ in range(self.max_attempts):
            candidate = self.airspace.random_position(self.rng)
            if all(candidate.distance_to(p) > self.min_separation for p in placed):
                return candidate

        logger.warning(
            "Gave up placing airport %d of %d after %d attempts (separation %.1f)",
            len(placed) + 1, count, self.max_attempts, self.min_separation
        )
        raise PlacementInfeasible(len(placed), count, self.max_attempts)

    def generate(self, count: int) -> List[Airport]:
        """Place ``count`` airports and give each a unique three-letter name."""
        if count > MAX_AIRPORTS:
            raise ValueError(f"count must be <= {MAX_AIRPORTS} (distinct three-letter codes), got {count}")

        positions = self.place(count)
        codes = self.rng.sample(range(MAX_AIRPORTS), len(positions))
        return [Airport(_airport_code(code), position) for code, position in zip(codes, positions)]


def _airport_code(index: int) -> str:
    letters = []
    for _ in range(3):
        index, digit = divmod(index, 26)
        letters.append(string.ascii_uppercase[digit])
    return "".join(reversed(letters))


def fixed_layout(layout: AirportLayout) -> List[Airport]:
    """Build the hard-coded airports for a deterministic layout."""
    return [Airport(name, Position(x, y)) for name, x, y in FIXED_LAYOUTS[layout]]


def build_airports(config: SimulationConfig, rng: random.Random) -> List[Airport]:
    """Create the airports for the configured layout."""
    if config.layout in FIXED_LAYOUTS:
        airports = fixed_layout(config.layout)
    else:
        placer = AirportPlacer(
            Airspace(config.width, config.height),
            min_separation=config.min_separation,
            max_attempts=config.max_placement_attempts,
            rng=rng
        )
        airports = placer.generate(config.airport_count)

    for airport in airports:
        logger.info("Airport %s at (%.1f, %.1f)", airport.name, airport.position.x, airport.position.y)
    return airports
