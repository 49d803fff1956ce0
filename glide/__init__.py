"""Glide arcade dodger package."""

from .config import GameConfig
from .input import ControlState, KeyboardPointerInput
from .session import Session
from .simulation import StepResult, step
from .storage import ScoreStore
from .world import Cue, Snapshot, World, new_world

__all__ = [
    "GameConfig",
    "ControlState",
    "KeyboardPointerInput",
    "Session",
    "StepResult",
    "step",
    "ScoreStore",
    "Cue",
    "Snapshot",
    "World",
    "new_world",
]
