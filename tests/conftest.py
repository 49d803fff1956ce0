from __future__ import annotations

import itertools
from typing import Iterable

import pytest

from glide import GameConfig, World, new_world


class ScriptedRandom:
    """Deterministic stand-in for random.Random that replays unit floats."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = itertools.cycle(list(values))
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._values)


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def quiet_world(config: GameConfig) -> World:
    """A world whose spawner will not fire during a test."""
    world = new_world(config, ScriptedRandom([0.5]))
    world.spawn_cooldown = 1e9
    world.orb_cooldown = 1e9
    return world
