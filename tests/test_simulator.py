import pytest

from mayday.config import AirportLayout, SimulationConfig, TrafficDensity
from mayday.errors import InvalidConfiguration, PlacementInfeasible
from mayday.simulator import Simulator
from mayday.traffic import KinematicsUpdater


def make_sim(**kwargs):
    kwargs.setdefault("density", TrafficDensity.HIGH)
    kwargs.setdefault("seed", 7)
    sim = Simulator(SimulationConfig(**kwargs))
    sim.setup()
    return sim


def test_setup_single_layout():
    sim = make_sim()
    assert [a.name for a in sim.airports] == ["YYZ"]
    assert sim.aircraft == []


def test_step_spawns_on_density_cadence():
    sim = make_sim()
    for _ in range(10):
        sim.step(0.5)
    assert len(sim.aircraft) == 1
    assert sim.aircraft[0].target == "YYZ"
    assert sim.current_time == 5.0

    for _ in range(10):
        sim.step(0.5)
    assert len(sim.aircraft) == 2


def test_spawned_aircraft_moves_in_same_frame():
    sim = make_sim()
    sim.step(5.0)

    reference = make_sim()
    expected = reference.spawner.spawn(reference.airports)
    KinematicsUpdater.advance([expected], 5.0)

    aircraft = sim.aircraft[0]
    assert aircraft.callsign == expected.callsign
    assert aircraft.position.x == pytest.approx(expected.position.x)
    assert aircraft.position.y == pytest.approx(expected.position.y)


def test_same_seed_same_run():
    a = make_sim(layout=AirportLayout.RANDOM, seed=21)
    b = make_sim(layout=AirportLayout.RANDOM, seed=21)
    a.run(30, frame_time=0.25)
    b.run(30, frame_time=0.25)
    assert a.snapshot() == b.snapshot()
    assert len(a.snapshot()["aircraft"]) == 6


def test_snapshot_is_a_copy():
    sim = make_sim()
    sim.step(5.0)
    snap = sim.snapshot()
    snap["aircraft"][0]["position"]["x"] = 1e9
    assert sim.aircraft[0].position.x != 1e9


def test_random_layout_infeasible():
    sim = Simulator(SimulationConfig(layout=AirportLayout.RANDOM, width=300, height=300,
                                     airport_count=10, max_placement_attempts=20, seed=1))
    with pytest.raises(PlacementInfeasible):
        sim.setup()


def test_get_aircraft_and_reset():
    sim = make_sim()
    sim.step(5.0)
    callsign = sim.aircraft[0].callsign
    assert sim.get_aircraft(callsign) is sim.aircraft[0]
    assert sim.get_aircraft("nope") is None

    sim.reset()
    assert sim.aircraft == []
    assert sim.current_time == 0.0
    assert sim.get_status()["next_spawn_in"] == 5.0
    assert sim.get_status()["num_airports"] == 1


def test_config_from_names():
    cfg = SimulationConfig.from_names("HIGH", "Random", airport_count=2)
    assert cfg.density is TrafficDensity.HIGH
    assert cfg.layout is AirportLayout.RANDOM
    assert cfg.airport_count == 2


@pytest.mark.parametrize("density, layout", [("extreme", "single"), ("low", "hexagon")])
def test_unknown_names_are_fatal(density, layout):
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.from_names(density, layout)


@pytest.mark.parametrize("field, value", [
    ("width", 0),
    ("airport_count", -1),
    ("spawn_region_fraction", 1.5),
    ("update_interval", 0),
    ("max_placement_attempts", 0),
])
def test_invalid_values_are_fatal(field, value):
    with pytest.raises(InvalidConfiguration):
        SimulationConfig(**{field: value})


def test_aircraft_spawned_mid_interval_moves_for_current_frame_only():
    sim = make_sim()
    for _ in range(9):
        sim.step(0.5)
    assert sim.aircraft == []
    sim.step(0.5)

    reference = make_sim()
    expected = reference.spawner.spawn(reference.airports)
    KinematicsUpdater.advance([expected], 0.5)

    aircraft = sim.aircraft[0]
    assert aircraft.callsign == expected.callsign
    assert aircraft.position.x == pytest.approx(expected.position.x)
    assert aircraft.position.y == pytest.approx(expected.position.y)
