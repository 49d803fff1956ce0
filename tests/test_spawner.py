import pytest

from glide import new_world
from glide.spawner import Spawner


def test_hazard_spawns_when_cooldown_lapses(config, scripted):
    world = new_world(config, scripted([0.5]))
    world.orb_cooldown = 1e9
    Spawner().update(world, 0.01)
    assert len(world.hazards) == 1
    assert world.spawn_cooldown == pytest.approx(0.8)


def test_hazard_cadence_at_difficulty_zero(config, scripted):
    world = new_world(config, scripted([0.5]))
    world.orb_cooldown = 1e9
    spawner = Spawner()
    for _ in range(160):
        spawner.update(world, 0.01)
    # one at t=0.01, then every 0.8s
    assert len(world.hazards) == 2


def test_hazard_interval_at_full_difficulty(config, scripted):
    world = new_world(config, scripted([0.5]))
    world.difficulty = 1.0
    world.orb_cooldown = 1e9
    Spawner().update(world, 0.01)
    assert world.spawn_cooldown == pytest.approx(0.25)


def test_at_most_one_hazard_per_tick(config, scripted):
    world = new_world(config, scripted([0.5]))
    world.spawn_cooldown = -10.0
    world.orb_cooldown = 1e9
    Spawner().update(world, 0.03)
    assert len(world.hazards) == 1


def test_pickup_created_when_draw_succeeds(config, scripted):
    world = new_world(config, scripted([0.1]))
    world.spawn_cooldown = 1e9
    world.orb_cooldown = 0.0
    Spawner().update(world, 0.01)
    assert len(world.pickups) == 1
    assert world.orb_cooldown == pytest.approx(2.8)


def test_failed_pickup_draw_still_resets_cooldown(config, scripted):
    world = new_world(config, scripted([0.9]))
    world.spawn_cooldown = 1e9
    world.orb_cooldown = 0.0
    Spawner().update(world, 0.01)
    assert world.pickups == []
    assert world.orb_cooldown == pytest.approx(2.8)


def test_new_entities_inherit_current_world_speed(config, scripted):
    world = new_world(config, scripted([0.5]))
    world.orb_cooldown = 1e9
    world.speed = 400.0
    Spawner().update(world, 0.01)
    assert world.hazards[0].speed == pytest.approx(400.0 * 1.05)
