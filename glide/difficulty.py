"""Difficulty ramp: elapsed time drives fall speed and spawn cadence."""

from __future__ import annotations

from .config import DifficultyConfig, SpawnConfig
from .geometry import clamp


class DifficultyRamp:
    """Pure functions of elapsed survival time.

    ``difficulty`` climbs linearly from 0 to 1 over ``ramp_seconds`` and then
    holds. Speed and spawn intervals are derived from it, so entities spawned
    later in a run inherit faster base speeds while those already falling keep
    the speed they were created with.
    """

    def __init__(self, config: DifficultyConfig, spawn: SpawnConfig) -> None:
        self.cfg = config
        self.spawn = spawn

    def difficulty(self, elapsed: float) -> float:
        return clamp(elapsed / self.cfg.ramp_seconds, 0.0, 1.0)

    def speed(self, difficulty: float) -> float:
        return self.cfg.base_speed + self.cfg.speed_range * difficulty

    def hazard_interval(self, difficulty: float) -> float:
        cfg = self.spawn
        return clamp(cfg.hazard_base - cfg.hazard_slope * difficulty, cfg.hazard_min, cfg.hazard_max)

    def pickup_interval(self, difficulty: float) -> float:
        cfg = self.spawn
        return clamp(cfg.pickup_base - cfg.pickup_slope * difficulty, cfg.pickup_min, cfg.pickup_max)
