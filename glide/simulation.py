"""The fixed-order world step."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .collision import CollisionEngine
from .input import ControlState
from .scoring import accrue, tick_grace
from .spawner import Spawner
from .world import World

logger = logging.getLogger(__name__)

_spawner = Spawner()
_collisions = CollisionEngine()


@dataclass(frozen=True)
class StepResult:
    terminated: bool
    dt: float


def sanitize_dt(dt: float, max_step: float) -> float:
    """Clamp a raw delta into ``[0, max_step]``; NaN and infinities become 0."""
    if not math.isfinite(dt):
        logger.warning("ignoring non-finite frame delta %r", dt)
        return 0.0
    return max(0.0, min(max_step, dt))


def step(world: World, dt: float, control: ControlState) -> StepResult:
    """Advance ``world`` by at most one ``max_step`` worth of time.

    Order matters: the ramp is refreshed before anything spawns or moves, the
    collision pass sees every entity at its new position, and a hazard hit
    ends the step before grace decay, pruning or scoring happen.
    """
    dt = sanitize_dt(dt, world.config.difficulty.max_step)
    if world.terminated or dt == 0.0:
        return StepResult(terminated=world.terminated, dt=0.0)

    world.elapsed += dt
    world.difficulty = max(world.difficulty, world.ramp.difficulty(world.elapsed))
    world.speed = world.ramp.speed(world.difficulty)

    _spawner.update(world, dt)

    world.actor.update(dt, control)
    for hazard in world.hazards:
        hazard.update(dt)
    for pickup in world.pickups:
        pickup.update(dt)

    report = _collisions.check(world)
    if report.hit:
        return StepResult(terminated=True, dt=dt)
    tick_grace(world, dt)

    play_field = world.config.play_field
    world.hazards = [h for h in world.hazards if not h.offscreen(play_field)]
    world.pickups = [p for p in world.pickups if not p.offscreen(play_field)]

    accrue(world, dt)

    for effect in world.effects:
        effect.update(dt)
    world.effects = [e for e in world.effects if not e.done]

    world.shake.update(dt)
    return StepResult(terminated=False, dt=dt)
