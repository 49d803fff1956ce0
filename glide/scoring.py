"""Score and multiplier rules.

The multiplier only ever grows, through near-misses, up to a cap; it is reset
solely by building a new world. Score accrues continuously with survival time
and jumps when orbs are collected.
"""

from __future__ import annotations

from .world import World


def accrue(world: World, dt: float) -> None:
    cfg = world.config.scoring
    rate = cfg.base_rate + cfg.difficulty_rate * world.difficulty
    world.score = max(0.0, world.score + rate * dt * world.multiplier)


def award_pickup(world: World) -> float:
    """Add the multiplied pickup bonus and return it."""
    bonus = world.config.scoring.pickup_bonus * world.multiplier
    world.score = max(0.0, world.score + bonus)
    return bonus


def try_near_miss(world: World) -> bool:
    """Bump the multiplier unless a previous near-miss is still in its grace window."""
    cfg = world.config.scoring
    if world.near_miss_grace > 0:
        return False
    world.multiplier = max(1.0, min(cfg.multiplier_cap, world.multiplier + cfg.multiplier_step))
    world.near_miss_grace = cfg.near_miss_grace
    return True


def tick_grace(world: World, dt: float) -> None:
    world.near_miss_grace -= dt
