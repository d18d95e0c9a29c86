"""
Command line entry point.

Runs the simulation headless and prints the final snapshot as JSON on stdout.
Log output goes to stderr.
"""

import json
import click

from mayday.config import AirportLayout, SimulationConfig, TrafficDensity
from mayday.errors import MaydayError
from mayday.simulator import Simulator
from mayday.utils.logging import set_level


@click.group()
def main() -> None:
    """Mayday airspace simulation CLI."""
    pass


@main.command()
@click.option("--density", type=click.Choice([item.value for item in TrafficDensity], case_sensitive=False),
              default=TrafficDensity.HIGH.value, show_default=True)
@click.option("--layout", type=click.Choice([item.value for item in AirportLayout], case_sensitive=False),
              default=AirportLayout.RANDOM.value, show_default=True)
@click.option("--airports", type=int, default=3, show_default=True, help="Airports for the random layout.")
@click.option("--seconds", type=float, default=60.0, show_default=True)
@click.option("--fps", type=int, default=60, show_default=True)
@click.option("--initial-traffic", type=int, default=0, show_default=True, help="Aircraft spawned before the first frame.")
@click.option("--seed", type=int, default=None)
@click.option("--log-level", default="WARNING", show_default=True)
def simulate(density: str, layout: str, airports: int, seconds: float, fps: int, initial_traffic: int,
             seed: int, log_level: str) -> None:
    """Run the simulation headless and print the final snapshot."""
    try:
        set_level(log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level")
    if fps <= 0:
        raise click.BadParameter("must be positive", param_hint="--fps")

    try:
        cfg = SimulationConfig.from_names(density, layout, airport_count=airports, seed=seed)
        sim = Simulator(cfg)
        sim.setup()
    except MaydayError as exc:
        raise click.ClickException(str(exc))

    for _ in range(initial_traffic):
        sim.add_aircraft(sim.spawner.spawn(sim.airports))
    sim.run(seconds, frame_time=1 / fps)
    click.echo(json.dumps(sim.snapshot(), indent=2))
