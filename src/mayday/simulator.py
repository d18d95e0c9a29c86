"""
Main airspace simulator.

Owns the airports, the aircraft and the components that spawn and move them.
"""

import random
from typing import List, Optional

from .aircraft import Aircraft
from .airport import Airport, build_airports
from .airspace import Airspace
from .config import SimulationConfig
from .traffic import KinematicsUpdater, TrafficSpawner
from .utils.logging import get_logger

logger = get_logger(__name__)


class Simulator:
    """
    Frame-driven airspace simulator.

    Call ``setup()`` once to place airports, then ``step(delta)`` once per
    frame with the seconds elapsed since the previous frame.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """
        Initialize simulator.

        Args:
            config: Simulation settings (defaults used if None)
        """
        self.config = config or SimulationConfig()
        self.rng = random.Random(self.config.seed)
        self.airspace = Airspace(self.config.width, self.config.height)

        self.airports: List[Airport] = []
        self.aircraft: List[Aircraft] = []
        self.current_time = 0.0

        self.spawner = TrafficSpawner(
            self.config.density,
            self.airspace,
            rng=self.rng,
            region_fraction=self.config.spawn_region_fraction
        )
        self.updater = KinematicsUpdater(self.config.update_interval)

    def setup(self):
        """
        Place the configured airport layout.

        Raises:
            PlacementInfeasible: if the random layout cannot be placed
        """
        self.airports = build_airports(self.config, self.rng)
        logger.info(
            "Layout %s ready with %d airports, traffic density %s (every %.0fs)",
            self.config.layout.value, len(self.airports),
            self.config.density.value, self.config.density.spawn_interval
        )

    def add_aircraft(self, aircraft: Aircraft):
        """Add an aircraft to the simulation."""
        self.aircraft.append(aircraft)

    def get_aircraft(self, callsign: str) -> Optional[Aircraft]:
        """Get aircraft by callsign."""
        for ac in self.aircraft:
            if ac.callsign == callsign:
                return ac
        return None

    def step(self, delta: float):
        """Execute one frame: spawn first, then move."""
        aircraft = self.spawner.tick(delta, self.airports)
        if aircraft is not None:
            self.add_aircraft(aircraft)

        self.updater.tick(delta, self.aircraft)

        self.current_time += delta

    def run(self, duration: float, frame_time: float = 1 / 60):
        """
        Run simulation for specified duration with a fixed frame time.

        Args:
            duration: Simulation duration in seconds
            frame_time: Seconds per frame
        """
        steps = int(round(duration / frame_time))
        frames_per_minute = max(1, int(round(60 / frame_time)))

        for i in range(steps):
            self.step(frame_time)

            if (i + 1) % frames_per_minute == 0:
                logger.info("Simulation time: %.0fs (%.1f min), Aircraft: %d",
                            self.current_time, self.current_time / 60, len(self.aircraft))

        logger.info("Simulation completed: %.1fs (%.1f min)", duration, duration / 60)

    def snapshot(self) -> dict:
        """Get a copy of all airports and aircraft for presentation."""
        return {
            'current_time': self.current_time,
            'airports': [airport.get_state() for airport in self.airports],
            'aircraft': [ac.get_state() for ac in self.aircraft]
        }

    def get_status(self) -> dict:
        """Get current simulation status."""
        return {
            'current_time': self.current_time,
            'num_airports': len(self.airports),
            'num_aircraft': len(self.aircraft),
            'density': self.config.density.value,
            'next_spawn_in': self.spawner.timer.remaining
        }

    def reset(self):
        """Reset simulation to initial state, keeping the airports."""
        self.aircraft.clear()
        self.current_time = 0.0
        self.spawner.timer.reset()
        self.updater = KinematicsUpdater(self.config.update_interval)
