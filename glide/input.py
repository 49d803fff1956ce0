"""Input abstractions for the Glide game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import pygame


@dataclass(frozen=True)
class ControlState:
    """Normalised player intent for one simulation step."""

    left: bool = False
    right: bool = False
    pointer_active: bool = False  # pointer/touch held; overrides left/right
    pointer_x: float = 0.0  # 0 (left wall) .. 1 (right wall)

    @property
    def direction(self) -> int:
        return (1 if self.right else 0) - (1 if self.left else 0)


class InputProvider(Protocol):
    """Interface for supplying player input to the game loop."""

    def poll(self) -> ControlState:
        """Return a ControlState representing the latest player intent."""

    def handle_event(self, event: pygame.event.Event) -> None:
        """Consume a pygame event the game loop did not handle itself."""

    def reset(self) -> None:
        """Drop any held state when a new run starts."""


class KeyboardPointerInput(InputProvider):
    """Arrow keys or A/D steer; holding the mouse button or a finger drags directly."""

    def __init__(self, play_area: pygame.Rect) -> None:
        self.play_area = play_area
        self._pointer_down = False
        self._pointer_x = 0.5

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._pointer_down = True
            self._track(event.pos[0])
        elif event.type == pygame.MOUSEMOTION and self._pointer_down:
            self._track(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._pointer_down = False
        elif event.type == pygame.FINGERDOWN:
            self._pointer_down = True
            self._pointer_x = max(0.0, min(1.0, event.x))
        elif event.type == pygame.FINGERMOTION and self._pointer_down:
            self._pointer_x = max(0.0, min(1.0, event.x))
        elif event.type == pygame.FINGERUP:
            self._pointer_down = False

    def _track(self, screen_x: int) -> None:
        width = max(1, self.play_area.width)
        self._pointer_x = max(0.0, min(1.0, (screen_x - self.play_area.left) / width))

    def poll(self) -> ControlState:
        pressed = pygame.key.get_pressed()
        left = bool(pressed[pygame.K_a] or pressed[pygame.K_LEFT])
        right = bool(pressed[pygame.K_d] or pressed[pygame.K_RIGHT])
        return ControlState(
            left=left,
            right=right,
            pointer_active=self._pointer_down,
            pointer_x=self._pointer_x,
        )

    def reset(self) -> None:
        """Forget any held pointer."""
        self._pointer_down = False
        self._pointer_x = 0.5
