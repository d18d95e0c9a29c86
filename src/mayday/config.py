"""
Simulation configuration.

Traffic density, airport layout and the numeric settings of a run.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type

from .errors import InvalidConfiguration


class TrafficDensity(Enum):
    """How often new traffic enters the airspace."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def spawn_interval(self) -> float:
        """Seconds between spawns."""
        return _SPAWN_INTERVALS[self]


_SPAWN_INTERVALS = {
    TrafficDensity.LOW: 15.0,
    TrafficDensity.MEDIUM: 10.0,
    TrafficDensity.HIGH: 5.0,
}


# One airport per distinct three-letter code
MAX_AIRPORTS = 26 ** 3


class AirportLayout(Enum):
    """Airport arrangement used at startup."""
    SINGLE = "single"  # one fixed airport at the origin
    RANDOM = "random"  # airport_count airports placed by rejection sampling


def _parse(enum_cls: Type[Enum], value, kind: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise InvalidConfiguration(f"unknown {kind} {value!r} (expected one of: {choices})") from None


@dataclass(frozen=True)
class SimulationConfig:
    density: TrafficDensity = TrafficDensity.MEDIUM
    layout: AirportLayout = AirportLayout.SINGLE

    # Simulation plane, matches the original 1500x900 window
    width: float = 1500.0
    height: float = 900.0

    # Airport placement
    airport_count: int = 3
    min_separation: float = 200.0
    max_placement_attempts: int = 1000  # draws per airport

    # Traffic
    spawn_region_fraction: float = 0.5
    update_interval: float = 1.0  # seconds between position updates

    seed: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "density", _parse(TrafficDensity, self.density, "density"))
        object.__setattr__(self, "layout", _parse(AirportLayout, self.layout, "layout"))

        if self.width <= 0 or self.height <= 0:
            raise InvalidConfiguration(f"airspace must have positive size, got {self.width}x{self.height}")
        if not 0 <= self.airport_count <= MAX_AIRPORTS:
            raise InvalidConfiguration(
                f"airport_count must be in [0, {MAX_AIRPORTS}], got {self.airport_count}"
            )
        if self.min_separation < 0:
            raise InvalidConfiguration(f"min_separation must be >= 0, got {self.min_separation}")
        if self.max_placement_attempts < 1:
            raise InvalidConfiguration(
                f"max_placement_attempts must be >= 1, got {self.max_placement_attempts}"
            )
        if not 0 < self.spawn_region_fraction <= 1:
            raise InvalidConfiguration(
                f"spawn_region_fraction must be in (0, 1], got {self.spawn_region_fraction}"
            )
        if self.update_interval <= 0:
            raise InvalidConfiguration(f"update_interval must be > 0, got {self.update_interval}")

    @classmethod
    def from_names(cls, density: str, layout: str, **overrides) -> 'SimulationConfig':
        """Build a config from user-facing density and layout names."""
        return cls(density=density, layout=layout, **overrides)
