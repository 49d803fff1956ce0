"""Actor, hazards, pickups and cosmetic effects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .config import ActorConfig, EffectConfig, FieldConfig, HazardConfig, PickupConfig
from .geometry import RandomSource, Rect, clamp, uniform
from .input import ControlState


class Actor:
    """The glider at the bottom of the lane."""

    def __init__(self, config: ActorConfig, play_field: FieldConfig) -> None:
        self.cfg = config
        self.field_width = play_field.width
        self.width = config.width
        self.height = config.height
        margin = max(config.bottom_margin, play_field.height * config.bottom_margin_ratio)
        self.x = play_field.width / 2
        self.y = play_field.height - margin
        self.speed = 0.0
        self.t = 0.0
        self.trail: list[tuple[float, float]] = []
        self._trail_timer = 0.0

    @property
    def min_x(self) -> float:
        return self.width * self.cfg.edge_padding

    @property
    def max_x(self) -> float:
        return self.field_width - self.width * self.cfg.edge_padding

    def update(self, dt: float, control: ControlState) -> None:
        self.t += dt
        if control.pointer_active:
            # Pointer/touch mode places the actor directly; momentum is discarded.
            self.x = clamp(control.pointer_x * self.field_width, self.min_x, self.max_x)
            self.speed = 0.0
        else:
            direction = control.direction
            if direction != 0:
                self.speed += direction * self.cfg.acceleration * dt
            elif abs(self.speed) < self.cfg.friction * dt:
                self.speed = 0.0
            else:
                self.speed -= math.copysign(self.cfg.friction * dt, self.speed)
            self.speed = clamp(self.speed, -self.cfg.max_speed, self.cfg.max_speed)
            self.x = clamp(self.x + self.speed * dt, self.min_x, self.max_x)

        self._trail_timer -= dt
        if self._trail_timer <= 0:
            self.trail.insert(0, (self.x, self.y))
            del self.trail[self.cfg.trail_length:]
            self._trail_timer = self.cfg.trail_interval

    def bounds(self) -> Rect:
        scale = self.cfg.hitbox_scale
        return Rect.centred(self.x, self.y, self.width * scale, self.height * scale)


@dataclass
class Hazard:
    """A falling block; touching one ends the run."""

    x: float
    y: float
    width: float
    height: float
    speed: float  # frozen at spawn time
    fade_rate: float = 4.0
    alpha: float = 0.0

    @classmethod
    def spawn(
        cls,
        rng: RandomSource,
        config: HazardConfig,
        play_field: FieldConfig,
        world_speed: float,
    ) -> "Hazard":
        width = uniform(rng, config.min_width, config.max_width)
        height = uniform(rng, config.min_height, config.max_height)
        x = uniform(rng, width / 2, play_field.width - width / 2)
        y = -height - uniform(rng, 0.0, config.max_entry_offset)
        speed = uniform(
            rng,
            world_speed * config.min_speed_factor,
            world_speed * config.max_speed_factor,
        )
        return cls(x=x, y=y, width=width, height=height, speed=speed, fade_rate=config.fade_rate)

    def update(self, dt: float) -> None:
        self.y += self.speed * dt
        self.alpha = min(1.0, self.alpha + dt * self.fade_rate)

    def offscreen(self, play_field: FieldConfig) -> bool:
        return self.y - self.height > play_field.height + play_field.offscreen_margin

    def bounds(self) -> Rect:
        return Rect.centred(self.x, self.y, self.width, self.height)


@dataclass
class Pickup:
    """A collectible orb worth a multiplied bonus."""

    x: float
    y: float
    radius: float
    speed: float
    pulse: float
    fade_rate: float = 4.0
    pulse_rate: float = 4.5
    alpha: float = 0.0

    @classmethod
    def spawn(
        cls,
        rng: RandomSource,
        config: PickupConfig,
        play_field: FieldConfig,
        world_speed: float,
    ) -> "Pickup":
        r = config.radius
        x = uniform(rng, r + config.edge_padding, play_field.width - r - config.edge_padding)
        y = -r - uniform(rng, config.min_entry_offset, config.max_entry_offset)
        speed = uniform(
            rng,
            world_speed * config.min_speed_factor,
            world_speed * config.max_speed_factor,
        )
        pulse = uniform(rng, 0.0, math.tau)
        return cls(
            x=x,
            y=y,
            radius=r,
            speed=speed,
            pulse=pulse,
            fade_rate=config.fade_rate,
            pulse_rate=config.pulse_rate,
        )

    def update(self, dt: float) -> None:
        self.y += self.speed * dt
        self.alpha = min(1.0, self.alpha + dt * self.fade_rate)
        self.pulse += dt * self.pulse_rate

    def offscreen(self, play_field: FieldConfig) -> bool:
        return self.y - self.radius > play_field.height + play_field.offscreen_margin

    def bounds(self) -> Rect:
        return Rect.centred(self.x, self.y, self.radius * 2, self.radius * 2)


@dataclass
class EffectRing:
    """Expanding ring shown where an orb was collected."""

    x: float
    y: float
    color: tuple[int, int, int]
    radius: float
    max_radius: float
    alpha: float
    growth: float
    fade: float

    @classmethod
    def create(cls, x: float, y: float, color: tuple[int, int, int], config: EffectConfig) -> "EffectRing":
        return cls(
            x=x,
            y=y,
            color=color,
            radius=config.ring_start_radius,
            max_radius=config.ring_max_radius,
            alpha=config.ring_alpha,
            growth=config.ring_growth,
            fade=config.ring_fade,
        )

    def update(self, dt: float) -> None:
        self.radius += self.growth * dt
        self.alpha -= self.fade * dt

    @property
    def done(self) -> bool:
        return self.alpha <= 0 or self.radius >= self.max_radius


@dataclass
class FloatingText:
    """Short label drifting upwards, e.g. ``+30`` or ``x1.3``."""

    x: float
    y: float
    text: str
    color: tuple[int, int, int]
    rise_speed: float
    fade: float
    alpha: float = 1.0

    @classmethod
    def create(cls, x: float, y: float, text: str, config: EffectConfig) -> "FloatingText":
        return cls(
            x=x,
            y=y,
            text=text,
            color=config.text_color,
            rise_speed=config.text_rise_speed,
            fade=config.text_fade,
        )

    def update(self, dt: float) -> None:
        self.y -= self.rise_speed * dt
        self.alpha -= self.fade * dt

    @property
    def done(self) -> bool:
        return self.alpha <= 0


Effect = Union[EffectRing, FloatingText]


@dataclass
class ShakePulse:
    """Camera-shake request; the renderer turns it into a jitter offset."""

    magnitude: float = 0.0
    time: float = 0.0

    def trigger(self, magnitude: float, duration: float) -> None:
        self.magnitude = max(self.magnitude, magnitude)
        self.time = max(self.time, duration)

    def update(self, dt: float) -> None:
        if self.time > 0:
            self.time -= dt
            if self.time <= 0:
                self.time = 0.0
                self.magnitude = 0.0
