"""
Airspace module.

Defines the bounded simulation plane that airports and aircraft live on.
"""

import random
from dataclasses import dataclass

from .aircraft import Position


@dataclass(frozen=True)
class Airspace:
    """
    Rectangular plane centred on the origin.

    Attributes:
        width: Extent along the X axis
        height: Extent along the Y axis
    """
    width: float
    height: float

    @property
    def x_min(self) -> float:
        return -self.width / 2

    @property
    def x_max(self) -> float:
        return self.width / 2

    @property
    def y_min(self) -> float:
        return -self.height / 2

    @property
    def y_max(self) -> float:
        return self.height / 2

    def contains(self, position: Position) -> bool:
        """Check if position is within the airspace boundaries."""
        return (self.x_min <= position.x <= self.x_max and
                self.y_min <= position.y <= self.y_max)

    def random_position(self, rng: random.Random, fraction: float = 1.0) -> Position:
        """
        Draw a uniform random point inside a centred sub-region.

        Args:
            rng: Random source to draw from
            fraction: Share of width and height covered by the sub-region
        """
        half_width = self.width * fraction / 2
        half_height = self.height * fraction / 2
        return Position(
            x=rng.uniform(-half_width, half_width),
            y=rng.uniform(-half_height, half_height)
        )
