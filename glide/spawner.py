"""Cooldown-driven generator for hazards and pickups."""

from __future__ import annotations

import logging

from .entities import Hazard, Pickup
from .geometry import chance
from .world import World

logger = logging.getLogger(__name__)


class Spawner:
    """Ticks the world's spawn cooldowns and creates entities when they lapse.

    At most one hazard and one pickup can appear per tick. Pickups are
    additionally gated by a probability draw; a failed draw still restarts the
    pickup cooldown.
    """

    def update(self, world: World, dt: float) -> None:
        cfg = world.config
        ramp = world.ramp

        world.spawn_cooldown -= dt
        if world.spawn_cooldown <= 0:
            hazard = Hazard.spawn(world.rng, cfg.hazards, cfg.play_field, world.speed)
            world.hazards.append(hazard)
            world.spawn_cooldown = ramp.hazard_interval(world.difficulty)
            logger.debug("hazard spawned at x=%.1f speed=%.1f", hazard.x, hazard.speed)

        world.orb_cooldown -= dt
        if world.orb_cooldown <= 0:
            if chance(world.rng, cfg.spawn.pickup_chance):
                pickup = Pickup.spawn(world.rng, cfg.pickups, cfg.play_field, world.speed)
                world.pickups.append(pickup)
                logger.debug("pickup spawned at x=%.1f speed=%.1f", pickup.x, pickup.speed)
            world.orb_cooldown = ramp.pickup_interval(world.difficulty)
