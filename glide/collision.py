"""Per-step overlap and near-miss evaluation against the actor."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .entities import EffectRing, FloatingText, Hazard
from .geometry import Rect, rects_overlap
from .scoring import award_pickup, try_near_miss
from .world import Cue, World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollisionReport:
    """Outcome of one collision pass."""

    hit: bool = False
    pickups_collected: int = 0
    near_miss: bool = False


def is_near_miss(actor_box: Rect, hazard_box: Rect, vertical: float, inner: float, outer: float) -> bool:
    """Close vertical pass with the horizontal gap inside the near-miss band.

    The band is asymmetric: it opens ``inner`` units inside the distance at
    which the two boxes would touch and closes ``outer`` units beyond it.
    """
    if abs(hazard_box.centre_y - actor_box.centre_y) >= vertical:
        return False
    gap = abs(hazard_box.centre_x - actor_box.centre_x)
    touching = actor_box.w / 2 + hazard_box.w / 2
    return touching - inner < gap < touching + outer


class CollisionEngine:
    """Runs once per step, after every entity has moved."""

    def check(self, world: World) -> CollisionReport:
        actor_box = world.actor.bounds()
        collected = self._collect_pickups(world, actor_box)

        near_miss = False
        for hazard in world.hazards:
            hazard_box = hazard.bounds()
            if rects_overlap(actor_box, hazard_box):
                self._terminate(world, hazard)
                return CollisionReport(hit=True, pickups_collected=collected, near_miss=near_miss)
            if not near_miss and self._near_miss(world, actor_box, hazard_box):
                near_miss = True

        return CollisionReport(pickups_collected=collected, near_miss=near_miss)

    def _collect_pickups(self, world: World, actor_box: Rect) -> int:
        effects_cfg = world.config.effects
        remaining = []
        collected = 0
        for pickup in world.pickups:
            if not rects_overlap(actor_box, pickup.bounds()):
                remaining.append(pickup)
                continue
            bonus = award_pickup(world)
            collected += 1
            world.effects.append(
                EffectRing.create(pickup.x, pickup.y, world.config.pickups.color, effects_cfg)
            )
            world.effects.append(FloatingText.create(pickup.x, pickup.y - 6, f"+{int(bonus)}", effects_cfg))
            world.cues.append(Cue.PICKUP)
        world.pickups = remaining
        return collected

    def _near_miss(self, world: World, actor_box: Rect, hazard_box: Rect) -> bool:
        cfg = world.config.scoring
        if not is_near_miss(
            actor_box,
            hazard_box,
            cfg.near_miss_vertical,
            cfg.near_miss_inner,
            cfg.near_miss_outer,
        ):
            return False
        if not try_near_miss(world):
            return False

        actor = world.actor
        world.effects.append(
            FloatingText.create(actor.x, actor.y - 20, f"x{world.multiplier:.1f}", world.config.effects)
        )
        world.shake.trigger(*world.config.render.near_miss_shake)
        world.cues.append(Cue.NEAR_MISS)
        logger.debug("near miss, multiplier now %.1f", world.multiplier)
        return True

    def _terminate(self, world: World, hazard: Hazard) -> None:
        world.terminated = True
        world.shake.trigger(*world.config.render.terminate_shake)
        world.cues.append(Cue.TERMINATED)
        logger.info(
            "actor hit hazard at (%.1f, %.1f) after %.2fs, score %d",
            hazard.x,
            hazard.y,
            world.elapsed,
            int(world.score),
        )
