"""Session control: start, pause, resume and timestamp-driven stepping."""

from __future__ import annotations

import logging
import math
from typing import Optional

from .config import GameConfig
from .geometry import RandomSource
from .input import ControlState
from .simulation import StepResult, step
from .world import Cue, Snapshot, World, new_world

logger = logging.getLogger(__name__)


class Session:
    """Owns exactly one :class:`World` and drives it one frame at a time."""

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[RandomSource] = None) -> None:
        self.config = config or GameConfig()
        self.rng = rng
        self.world: World = new_world(self.config, self.rng)
        self.running = False
        self._last_ts: Optional[float] = None

    def start(self) -> None:
        """Discard the current world and begin a fresh run."""
        self.world = new_world(self.config, self.rng)
        self._last_ts = None
        self.running = True
        logger.info("session started")

    def stop(self) -> None:
        """Freeze stepping without touching world state."""
        if self.running:
            logger.info("session paused at %.2fs, score %d", self.world.elapsed, self.final_score)
        self.running = False

    def resume(self) -> None:
        if self.world.terminated:
            return
        self._last_ts = None
        self.running = True

    def is_terminated(self) -> bool:
        return self.world.terminated

    @property
    def final_score(self) -> int:
        return int(self.world.score)

    def step(self, dt: float, control: Optional[ControlState] = None) -> StepResult:
        if not self.running:
            return StepResult(terminated=self.world.terminated, dt=0.0)
        result = step(self.world, dt, control or ControlState())
        if result.terminated:
            self.running = False
            logger.info("session over: score %d after %.2fs", self.final_score, self.world.elapsed)
        return result

    def advance(self, timestamp_ms: float, control: Optional[ControlState] = None) -> StepResult:
        """Step using a clock timestamp in milliseconds.

        The first frame after :meth:`start` or :meth:`resume` only records the
        baseline, so a long pause never turns into one huge step. A non-finite
        timestamp is dropped and leaves the baseline untouched.
        """
        if not math.isfinite(timestamp_ms):
            logger.warning("ignoring non-finite timestamp %r", timestamp_ms)
            return StepResult(terminated=self.world.terminated, dt=0.0)
        if self._last_ts is None:
            self._last_ts = timestamp_ms
        dt = (timestamp_ms - self._last_ts) / 1000.0
        self._last_ts = timestamp_ms
        return self.step(dt, control)

    def snapshot(self) -> Snapshot:
        return self.world.snapshot()

    def drain_cues(self) -> list[Cue]:
        cues = self.world.cues
        self.world.cues = []
        return cues
