"""World state owned by a single session, plus read-only render snapshots."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .config import GameConfig
from .difficulty import DifficultyRamp
from .entities import Actor, Effect, EffectRing, Hazard, Pickup, ShakePulse
from .geometry import RandomSource


class Cue(Enum):
    """Discrete feedback notifications for an audio sink."""

    PICKUP = "pickup"
    NEAR_MISS = "near_miss"
    TERMINATED = "terminated"


@dataclass
class World:
    """Everything a run owns. Rebuilt from scratch by :func:`new_world`."""

    config: GameConfig
    rng: RandomSource
    ramp: DifficultyRamp
    actor: Actor
    elapsed: float = 0.0
    difficulty: float = 0.0
    speed: float = 0.0
    score: float = 0.0
    multiplier: float = 1.0
    near_miss_grace: float = 0.0
    spawn_cooldown: float = 0.0
    orb_cooldown: float = 0.0
    hazards: list[Hazard] = field(default_factory=list)
    pickups: list[Pickup] = field(default_factory=list)
    effects: list[Effect] = field(default_factory=list)
    shake: ShakePulse = field(default_factory=ShakePulse)
    cues: list[Cue] = field(default_factory=list)
    terminated: bool = False

    def snapshot(self) -> "Snapshot":
        return Snapshot.of(self)


def new_world(config: Optional[GameConfig] = None, rng: Optional[RandomSource] = None) -> World:
    config = config or GameConfig()
    ramp = DifficultyRamp(config.difficulty, config.spawn)
    return World(
        config=config,
        rng=rng if rng is not None else random.Random(),
        ramp=ramp,
        actor=Actor(config.actor, config.play_field),
        speed=ramp.speed(0.0),
        spawn_cooldown=config.spawn.initial_hazard_cooldown,
        orb_cooldown=config.spawn.initial_pickup_cooldown,
    )


@dataclass(frozen=True)
class EntityView:
    """Immutable drawing description of one entity."""

    kind: str  # actor | hazard | pickup | ring | text
    x: float
    y: float
    width: float
    height: float
    alpha: float
    color: tuple[int, int, int]
    scale: float = 1.0
    text: str = ""


@dataclass(frozen=True)
class Snapshot:
    """What a renderer may see after a step."""

    actor: EntityView
    trail: tuple[tuple[float, float], ...]
    hazards: tuple[EntityView, ...]
    pickups: tuple[EntityView, ...]
    effects: tuple[EntityView, ...]
    score: float
    multiplier: float
    difficulty: float
    elapsed: float
    shake_magnitude: float
    shake_time: float
    terminated: bool

    @classmethod
    def of(cls, world: World) -> "Snapshot":
        cfg = world.config
        actor = world.actor
        hover = math.sin(actor.t * cfg.render.hover_speed) * cfg.render.hover_amplitude
        actor_view = EntityView(
            kind="actor",
            x=actor.x,
            y=actor.y + hover,
            width=actor.width,
            height=actor.height,
            alpha=1.0,
            color=cfg.render.actor_color,
        )
        hazards = tuple(
            EntityView(
                kind="hazard",
                x=h.x,
                y=h.y,
                width=h.width,
                height=h.height,
                alpha=h.alpha,
                color=cfg.hazards.color,
            )
            for h in world.hazards
        )
        pickups = tuple(
            EntityView(
                kind="pickup",
                x=p.x,
                y=p.y,
                width=p.radius * 2,
                height=p.radius * 2,
                alpha=p.alpha,
                color=cfg.pickups.color,
                scale=1 + cfg.pickups.pulse_amplitude * math.sin(p.pulse),
            )
            for p in world.pickups
        )
        effects = tuple(_effect_view(effect) for effect in world.effects)
        return cls(
            actor=actor_view,
            trail=tuple(actor.trail),
            hazards=hazards,
            pickups=pickups,
            effects=effects,
            score=world.score,
            multiplier=world.multiplier,
            difficulty=world.difficulty,
            elapsed=world.elapsed,
            shake_magnitude=world.shake.magnitude,
            shake_time=world.shake.time,
            terminated=world.terminated,
        )


def _effect_view(effect: Effect) -> EntityView:
    alpha = max(0.0, effect.alpha)
    if isinstance(effect, EffectRing):
        radius = min(effect.radius, effect.max_radius)
        return EntityView(
            kind="ring",
            x=effect.x,
            y=effect.y,
            width=radius * 2,
            height=radius * 2,
            alpha=alpha,
            color=effect.color,
        )
    return EntityView(
        kind="text",
        x=effect.x,
        y=effect.y,
        width=0.0,
        height=0.0,
        alpha=alpha,
        color=effect.color,
        text=effect.text,
    )
