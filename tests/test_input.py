import pygame

from glide.input import InputProvider, KeyboardPointerInput


def make_input() -> KeyboardPointerInput:
    return KeyboardPointerInput(pygame.Rect(100, 0, 400, 700))


def test_mouse_drag_tracks_normalised_position():
    provider = make_input()
    provider.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(300, 50)))
    assert provider._pointer_down
    assert provider._pointer_x == 0.5
    provider.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(600, 50), buttons=(1, 0, 0)))
    assert provider._pointer_x == 1.0


def test_reset_drops_held_pointer():
    provider: InputProvider = make_input()
    provider.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.2, y=0.5, finger_id=0, touch_id=0))
    provider.reset()
    assert not provider._pointer_down  # type: ignore[attr-defined]
    assert provider._pointer_x == 0.5  # type: ignore[attr-defined]
