"""Small math helpers shared by the simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class RandomSource(Protocol):
    """Anything with a :meth:`random.Random.random`-style method.

    Every draw in the simulation goes through ``random()`` so tests can feed a
    scripted sequence of unit floats and predict spawn geometry exactly.
    """

    def random(self) -> float:
        """Return a float in [0, 1)."""


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def uniform(rng: RandomSource, minimum: float, maximum: float) -> float:
    """Sample from ``[minimum, maximum)``."""
    return minimum + rng.random() * (maximum - minimum)


def chance(rng: RandomSource, probability: float) -> bool:
    return rng.random() < probability


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box anchored at its top-left corner."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def centred(cls, cx: float, cy: float, w: float, h: float) -> "Rect":
        return cls(cx - w * 0.5, cy - h * 0.5, w, h)

    @property
    def centre_x(self) -> float:
        return self.x + self.w * 0.5

    @property
    def centre_y(self) -> float:
        return self.y + self.h * 0.5


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Strict overlap test; boxes that only share an edge do not collide."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y
