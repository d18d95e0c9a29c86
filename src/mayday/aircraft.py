"""
Aircraft module.

Defines positions on the simulation plane and the aircraft that fly across it.
"""

import math
from dataclasses import dataclass
from typing import Optional


@dataclass
class Position:
    """2D position on the simulation plane (origin at the centre)."""
    x: float
    y: float

    def distance_to(self, other: 'Position') -> float:
        """Calculate Euclidean distance to another position."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


@dataclass
class Velocity:
    """Aircraft velocity vector."""
    speed: float  # knots
    heading: float  # degrees (0 = +X axis, 90 = +Y axis)


class Aircraft:
    """
    A simulated aircraft flying a constant heading and speed.

    Attributes:
        callsign: Display identifier (e.g., "QF27"), not guaranteed unique
        altitude: Cruise altitude in feet
        velocity: Speed and heading, fixed at spawn
        target: Name of the airport the aircraft is bound for
        position: Current position, moved by the kinematics updater
    """

    def __init__(
        self,
        callsign: str,
        altitude: float,
        velocity: Velocity,
        position: Position,
        target: Optional[str] = None
    ):
        self.callsign = callsign
        self.altitude = altitude
        self.velocity = velocity
        self.position = position
        self.target = target

        self.time_in_simulation = 0.0  # seconds

    def move_by(self, dx: float, dy: float):
        """Translate the aircraft on the plane."""
        self.position.x += dx
        self.position.y += dy

    def get_state(self) -> dict:
        """Get current aircraft state as dictionary."""
        return {
            'callsign': self.callsign,
            'altitude': self.altitude,
            'speed': self.velocity.speed,
            'heading': self.velocity.heading,
            'target': self.target,
            'position': {
                'x': self.position.x,
                'y': self.position.y
            }
        }

    def __repr__(self):
        return (f"Aircraft({self.callsign}, pos=({self.position.x:.1f}, {self.position.y:.1f}), "
                f"alt={self.altitude:.0f}ft, spd={self.velocity.speed:.0f}kt, "
                f"hdg={self.velocity.heading:.0f}°, dest={self.target})")
