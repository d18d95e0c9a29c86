"""
Traffic module.

Spawns aircraft on a density-controlled cadence and moves them along their
headings on a fixed update cadence.
"""

import math
import random
import string
from typing import List, Optional, Sequence

from .aircraft import Aircraft, Velocity
from .airport import Airport
from .airspace import Airspace
from .config import TrafficDensity
from .timer import Timer, TimerMode
from .utils.logging import get_logger

logger = get_logger(__name__)

# Knots to plane units per second
UNIT = 1 / 30


class TrafficSpawner:
    """
    Creates one aircraft each time the spawn timer runs out.

    The timer is reset to zero after a spawn, so a long frame that covers
    several spawn intervals still produces a single aircraft.
    """

    # Spawn parameter ranges (inclusive)
    ALTITUDE_RANGE = (40000, 100000)  # feet
    SPEED_RANGE = (200, 500)  # knots
    HEADING_RANGE = (0, 360)  # degrees
    FLIGHT_NUMBER_RANGE = (1, 999)

    def __init__(
        self,
        density: TrafficDensity,
        airspace: Airspace,
        rng: Optional[random.Random] = None,
        region_fraction: float = 0.5
    ):
        self.density = density
        self.airspace = airspace
        self.rng = rng if rng is not None else random.Random()
        self.region_fraction = region_fraction
        self.timer = Timer(density.spawn_interval, TimerMode.ONCE)

    def tick(self, delta: float, airports: Sequence[Airport]) -> Optional[Aircraft]:
        """
        Advance the spawn timer and spawn an aircraft if it has run out.

        Args:
            delta: Seconds since the previous tick
            airports: Airports currently placed, used to pick a target

        Returns:
            The new aircraft, or None if the timer has not finished
        """
        self.timer.tick(delta)
        if not self.timer.finished:
            return None

        aircraft = self.spawn(airports)
        self.timer.reset()
        return aircraft

    def spawn(self, airports: Sequence[Airport]) -> Aircraft:
        """Create an aircraft with randomized identity and flight parameters."""
        rng = self.rng
        callsign = self._generate_callsign()
        altitude = rng.randint(*self.ALTITUDE_RANGE)
        velocity = Velocity(
            speed=rng.randint(*self.SPEED_RANGE),
            heading=rng.randint(*self.HEADING_RANGE)
        )
        target = rng.choice(airports).name if airports else None
        position = self.airspace.random_position(rng, self.region_fraction)

        aircraft = Aircraft(
            callsign=callsign,
            altitude=altitude,
            velocity=velocity,
            position=position,
            target=target
        )
        logger.info("Spawned %r", aircraft)
        return aircraft

    def _generate_callsign(self) -> str:
        letters = "".join(self.rng.choice(string.ascii_uppercase) for _ in range(2))
        return f"{letters}{self.rng.randint(*self.FLIGHT_NUMBER_RANGE)}"


class KinematicsUpdater:
    """
    Moves every aircraft along its heading once per update interval.

    Heading is in degrees with 0 pointing along +X and 90 along +Y. The
    distance flown is based on the real time accumulated since the previous
    update, not on the nominal interval, capped at the aircraft's own time in
    the simulation.
    """

    def __init__(self, interval: float = 1.0):
        self.timer = Timer(interval, TimerMode.ONCE)
        self.time_since_update = 0.0

    def tick(self, delta: float, aircraft_list: List[Aircraft]) -> bool:
        """
        Advance the update timer and move aircraft if it has run out.

        Returns:
            True if positions were updated during this tick
        """
        self.time_since_update += delta
        for aircraft in aircraft_list:
            aircraft.time_in_simulation += delta

        self.timer.tick(delta)
        if not self.timer.finished:
            return False

        for aircraft in aircraft_list:
            self.fly(aircraft, min(self.time_since_update, aircraft.time_in_simulation))
        logger.debug("Moved %d aircraft over %.3fs", len(aircraft_list), self.time_since_update)
        self.time_since_update = 0.0
        self.timer.reset()
        return True

    @staticmethod
    def advance(aircraft_list: List[Aircraft], elapsed: float):
        """Move each aircraft by ``elapsed`` seconds of flight."""
        for aircraft in aircraft_list:
            KinematicsUpdater.fly(aircraft, elapsed)

    @staticmethod
    def fly(aircraft: Aircraft, elapsed: float):
        heading_rad = math.radians(aircraft.velocity.heading)
        distance = UNIT * aircraft.velocity.speed * elapsed
        aircraft.move_by(
            distance * math.cos(heading_rad),
            distance * math.sin(heading_rad)
        )
