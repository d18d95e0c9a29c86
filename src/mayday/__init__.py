"""
Mayday

A small real-time airspace simulation of airports and spawning traffic.
"""

__version__ = "0.1.0"

from .aircraft import Aircraft, Position, Velocity
from .airport import Airport, AirportPlacer
from .airspace import Airspace
from .config import AirportLayout, SimulationConfig, TrafficDensity
from .errors import InvalidConfiguration, MaydayError, PlacementInfeasible
from .simulator import Simulator
from .timer import Timer, TimerMode
from .traffic import KinematicsUpdater, TrafficSpawner

__all__ = [
    "Aircraft",
    "Position",
    "Velocity",
    "Airport",
    "AirportPlacer",
    "Airspace",
    "AirportLayout",
    "SimulationConfig",
    "TrafficDensity",
    "InvalidConfiguration",
    "MaydayError",
    "PlacementInfeasible",
    "Simulator",
    "Timer",
    "TimerMode",
    "KinematicsUpdater",
    "TrafficSpawner",
]
