import math

import pytest

from brain import Bool, Decisions, HsvColor, Memory, Vector2
from core.config import SimulationConfig
from core.entities import Creature
from core.physiology import Metabolism
from core.sensors import gather_perception, perception_checksum
from core.tiles import TileGrid, TileType
from core.world import World


def small_config(**overrides):
    values = dict(creatures=2, width_tiles=4, height_tiles=3, tile_size=10.0, hidden_layers=(4,))
    values.update(overrides)
    return SimulationConfig(**values)


def decide(force=(0.0, 0.0), reproduce=False, hue=0.5):
    return Decisions(
        force=Vector2(*force),
        reproduction_will=Bool(reproduce),
        color=HsvColor(hue=hue),
        memory=Memory.zeros(),
    )


def test_tile_tints_follow_grid_position():
    grid = TileGrid(width=4, height=2, size=10.0)
    origin = grid.tile_at((0.0, 0.0)).color
    assert origin.hue == pytest.approx(-2 * math.pi / 3)  # pure blue
    assert origin.value == pytest.approx(1.0)
    corner = grid.tile_at((35.0, 15.0))
    assert (corner.x, corner.y) == (3, 1)


def test_tile_lookup_clamps_outside_grid():
    grid = TileGrid(width=4, height=2, size=10.0)
    assert grid.index_of((-5.0, 100.0)) == (0, 1)
    assert grid.index_of((1e9, -1e9)) == (3, 0)


def test_populate_spawns_inside_bounds():
    world = World(small_config(creatures=5))
    world.populate()
    assert [c.id for c in world.creatures] == [0, 1, 2, 3, 4]
    for creature in world.creatures:
        assert 0.0 <= creature.pos[0] <= world.bounds[0]
        assert 0.0 <= creature.pos[1] <= world.bounds[1]
        assert creature.brain.state == "FRESH"


def test_apply_moves_colors_and_charges_energy():
    world = World(small_config())
    world.populate()
    creature = world.creatures[0]
    creature.pos = (20.0, 15.0)
    start_energy = creature.energy

    world.apply(creature, decide(force=(1.0, 0.0), hue=-1.0))

    assert creature.velocity[0] > 0.0
    assert creature.pos[0] > 20.0
    assert creature.color.hue == -1.0
    assert creature.energy < start_energy


def test_apply_clamps_to_bounds_and_stops_blocked_axis():
    world = World(small_config())
    world.populate()
    creature = world.creatures[0]
    creature.pos = (world.bounds[0] - 0.01, 5.0)
    creature.velocity = (50.0, 0.0)

    world.apply(creature, decide(force=(1.0, 0.0)))

    assert creature.pos[0] == world.bounds[0]
    assert creature.velocity[0] == 0.0


def test_reproduce_splits_energy_and_reuses_gene():
    world = World(small_config(reproduction_energy=50.0))
    world.populate()
    parent = world.creatures[0]
    parent.metabolism.energy = 80.0

    born = world.reproduce({parent.id: decide(reproduce=True), world.creatures[1].id: decide()})

    assert len(born) == 1
    child = born[0]
    assert child.id == 2
    assert child.gene == parent.gene
    assert child.brain is not parent.brain
    assert child.generation == 1
    assert parent.energy == pytest.approx(40.0)
    assert child.energy == pytest.approx(40.0)
    assert world.births == 1


def test_reproduce_requires_energy_and_room():
    world = World(small_config(reproduction_energy=500.0))
    world.populate()
    assert world.reproduce({c.id: decide(reproduce=True) for c in world.creatures}) == []

    full = World(small_config(creatures=2, max_creatures=2, reproduction_energy=1.0))
    full.populate()
    assert full.reproduce({c.id: decide(reproduce=True) for c in full.creatures}) == []


def test_remove_dead_counts_deaths():
    world = World(small_config())
    world.populate()
    world.creatures[0].metabolism.energy = 0.0
    dead = world.remove_dead()
    assert [c.id for c in dead] == [0]
    assert [c.id for c in world.creatures] == [1]
    assert world.deaths == 1
    with pytest.raises(KeyError):
        world.creature(0)


def test_metabolism_costs_and_floor():
    metabolism = Metabolism(energy=1.0, basal_cost=1.0, force_cost=2.0)
    metabolism.tick(force_magnitude=1.0, dt=0.1)
    assert metabolism.energy == pytest.approx(0.7)
    metabolism.tick(force_magnitude=10.0, dt=1.0)
    assert metabolism.energy == 0.0
    assert not metabolism.alive


def test_gather_perception_reads_body_and_tile():
    world = World(small_config())
    world.populate()
    creature = world.creatures[0]
    creature.velocity = (0.5, -0.25)

    perception = gather_perception(creature, world.tiles)

    assert perception.body.energy.value == creature.energy
    assert perception.body.mass.value == creature.mass
    assert perception.environment.velocity == Vector2(0.5, -0.25)
    assert perception.environment.tile_color == world.tiles.tile_at(creature.pos).color
    assert perception.memory == Memory.zeros()
    assert perception_checksum(perception) == perception_checksum(gather_perception(creature, world.tiles))


def test_creature_builds_its_own_brain():
    world = World(small_config())
    world.populate()
    gene = world.creatures[0].gene
    a = Creature(id=10, pos=(0.0, 0.0), gene=gene)
    b = Creature(id=11, pos=(0.0, 0.0), gene=gene)
    assert a.brain is not b.brain
    assert a.brain.gene is gene


@pytest.mark.parametrize(
    "overrides",
    [{"creatures": -1}, {"creatures": 100, "max_creatures": 10}, {"dt": 0.0}, {"hidden_layers": (0,)}, {"force_cost": -1.0}],
)
def test_config_rejects_invalid_values(overrides):
    with pytest.raises(ValueError):
        small_config(**overrides)


def test_config_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError):
        SimulationConfig.from_dict({"creaturez": 3})
    config = SimulationConfig.from_dict({"hidden_layers": [5, 2]})
    assert config.hidden_layers == (5, 2)
    assert config.to_dict()["hidden_layers"] == [5, 2]


def test_tiles_start_neutral():
    grid = TileGrid(3, 2, 10.0)
    assert {tile.ttype for tile in grid.tiles} == {TileType.NEUTRAL}


def test_default_config_lets_creatures_reproduce():
    config = SimulationConfig()
    assert config.reproduction_energy <= config.initial_energy
