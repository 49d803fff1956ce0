"""Pygame shell: window, renderer and the start/pause/game-over flow."""

from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from .audio import CuePlayer
from .config import GameConfig, RenderingConfig
from .input import InputProvider, KeyboardPointerInput
from .session import Session
from .storage import MAX_NAME_LENGTH, ScoreEntry, ScoreStore, clean_name
from .world import EntityView, Snapshot

logger = logging.getLogger(__name__)


class Renderer:
    """Draws snapshots onto a logical field surface, then scales to the window."""

    def __init__(self, surface: pygame.Surface, config: GameConfig) -> None:
        self.surface = surface
        self.cfg: RenderingConfig = config.render
        self.field_size = (int(config.play_field.width), int(config.play_field.height))
        self.canvas = pygame.Surface(self.field_size)
        self.font, self.large_font, self.small_font = self._load_fonts()
        self._jitter = random.Random()

    def _load_fonts(self) -> tuple[pygame.font.Font, pygame.font.Font, pygame.font.Font]:
        return (
            pygame.font.SysFont("arial", 18, bold=True),
            pygame.font.SysFont("arial", 30, bold=True),
            pygame.font.SysFont("arial", 12, bold=True),
        )

    def draw(self, snapshot: Snapshot, best: int) -> None:
        self.canvas.fill(self.cfg.background_color)
        self._draw_lanes()
        for pickup in snapshot.pickups:
            self._draw_pickup(pickup)
        for hazard in snapshot.hazards:
            self._draw_hazard(hazard)
        self._draw_actor(snapshot.actor, snapshot.trail)
        for effect in snapshot.effects:
            self._draw_effect(effect)

        offset = self._shake_offset(snapshot)
        scaled = pygame.transform.smoothscale(self.canvas, self.surface.get_size())
        self.surface.fill(self.cfg.background_color)
        self.surface.blit(scaled, offset)
        self._draw_hud(snapshot, best)

    def _shake_offset(self, snapshot: Snapshot) -> tuple[int, int]:
        if snapshot.shake_time <= 0 or snapshot.shake_magnitude <= 0:
            return (0, 0)
        m = snapshot.shake_magnitude * snapshot.shake_time
        return (
            int((self._jitter.random() - 0.5) * m),
            int((self._jitter.random() - 0.5) * m),
        )

    def _draw_lanes(self) -> None:
        width, height = self.field_size
        step = width / self.cfg.lanes
        for i in range(self.cfg.lanes + 1):
            x = int(i * step)
            pygame.draw.line(self.canvas, self.cfg.lane_color, (x, 0), (x, height), 1)

    def _blit_alpha(self, layer: pygame.Surface, alpha: float, pos: tuple[int, int]) -> None:
        layer.set_alpha(max(0, min(255, int(alpha * 255))))
        self.canvas.blit(layer, pos)

    def _draw_pickup(self, view: EntityView) -> None:
        radius = max(1, int(view.width * 0.5 * view.scale))
        layer = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(layer, view.color, (radius, radius), radius)
        self._blit_alpha(layer, view.alpha, (int(view.x - radius), int(view.y - radius)))

    def _draw_hazard(self, view: EntityView) -> None:
        w, h = max(1, int(view.width)), max(1, int(view.height))
        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.rect(layer, view.color, layer.get_rect(), border_radius=6)
        self._blit_alpha(layer, view.alpha, (int(view.x - w / 2), int(view.y - h / 2)))

    def _triangle(self, x: float, y: float, w: float, h: float) -> list[tuple[float, float]]:
        return [(x, y - h * 0.5), (x + w * 0.6, y + h * 0.6), (x - w * 0.6, y + h * 0.6)]

    def _draw_actor(self, view: EntityView, trail: tuple[tuple[float, float], ...]) -> None:
        if trail:
            layer = pygame.Surface(self.field_size, pygame.SRCALPHA)
            count = len(trail)
            for i in range(count - 1, -1, -1):
                tx, ty = trail[i]
                alpha = (i + 1) / (count + 1) * self.cfg.trail_alpha
                color = (*view.color, int(alpha * 255))
                pygame.draw.polygon(layer, color, self._triangle(tx, ty, view.width, view.height))
            self.canvas.blit(layer, (0, 0))
        points = self._triangle(view.x, view.y, view.width, view.height)
        pygame.draw.polygon(self.canvas, view.color, points)
        pygame.draw.polygon(self.canvas, self.cfg.actor_outline, points, 2)

    def _draw_effect(self, view: EntityView) -> None:
        if view.kind == "ring":
            radius = max(1, int(view.width * 0.5))
            layer = pygame.Surface((radius * 2 + 4, radius * 2 + 4), pygame.SRCALPHA)
            pygame.draw.circle(layer, view.color, (radius + 2, radius + 2), radius, 2)
            self._blit_alpha(layer, view.alpha, (int(view.x - radius - 2), int(view.y - radius - 2)))
        else:
            label = self.small_font.render(view.text, True, view.color)
            rect = label.get_rect(center=(int(view.x), int(view.y)))
            self._blit_alpha(label, view.alpha, rect.topleft)

    def _draw_hud(self, snapshot: Snapshot, best: int) -> None:
        score = int(snapshot.score)
        lines = (
            f"Score {score}",
            f"Best {max(best, score)}",
            f"x{snapshot.multiplier:.1f}",
        )
        x = 12
        for text in lines:
            label = self.font.render(text, True, self.cfg.ui_color)
            self.surface.blit(label, (x, 10))
            x += label.get_width() + 18

    def draw_overlay(self, title: str, lines: list[str]) -> None:
        width, height = self.surface.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.surface.blit(overlay, (0, 0))

        heading = self.large_font.render(title, True, self.cfg.overlay_text_color)
        self.surface.blit(heading, heading.get_rect(center=(width // 2, height // 3)))
        for idx, text in enumerate(lines):
            label = self.font.render(text, True, self.cfg.overlay_text_color)
            self.surface.blit(label, label.get_rect(center=(width // 2, height // 3 + 50 + idx * 28)))


class NameEntry:
    """Game-over prompt: edit the player name, then record the score.

    While the prompt is open every key edits the name; Enter records the
    score and Escape drops it. Once it closes, C clears the leaderboard.
    """

    def __init__(self, store: Optional[ScoreStore], name: Optional[str]) -> None:
        self.store = store
        self.text = (name or "")[:MAX_NAME_LENGTH]
        self.score = 0
        self.active = False
        self.saved: Optional[ScoreEntry] = None

    def open(self, score: int) -> None:
        self.score = score
        self.saved = None
        self.active = True

    def close(self) -> None:
        self.active = False

    def handle_key(self, event: pygame.event.Event) -> bool:
        """Return True when the prompt consumed the key."""
        if self.active:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                self._submit()
            elif event.key == pygame.K_ESCAPE:
                self.active = False
                logger.info("score %d discarded", self.score)
            elif event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            else:
                char = getattr(event, "unicode", "")
                if char and char.isprintable() and len(self.text) < MAX_NAME_LENGTH:
                    self.text += char
            return True
        if event.key == pygame.K_c and self.store is not None:
            self.store.clear()
            logger.info("leaderboard cleared")
            return True
        return False

    def _submit(self) -> None:
        self.active = False
        self.text = clean_name(self.text)
        if self.store is not None:
            self.saved = self.store.add_score(self.text, self.score)
        logger.info("final score %d recorded for %s", self.score, self.text)


class GlideGame:
    """High-level game orchestration."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        store: Optional[ScoreStore] = None,
        player_name: Optional[str] = None,
        input_provider: Optional[InputProvider] = None,
        seed: Optional[int] = None,
        mute: bool = False,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.config = config or GameConfig()
        self.screen = pygame.display.set_mode(self.config.window_size)
        pygame.display.set_caption("Glide")
        self.clock = pygame.time.Clock()

        self.store = store
        self.player_name = player_name or (store.last_name if store else None)
        sound_enabled = not mute and (store.sound_enabled if store else True)
        self.audio = CuePlayer(self.config.audio, enabled=sound_enabled)
        self.session = Session(self.config, random.Random(seed))
        self.renderer = Renderer(self.screen, self.config)
        self.input_provider = input_provider or KeyboardPointerInput(self.screen.get_rect())

        self.running = True
        self.waiting_for_start = True
        self.paused = False
        self.recorded = False
        self.name_entry = NameEntry(store, self.player_name)

    def restart(self) -> None:
        self.input_provider.reset()
        self.name_entry.close()
        self.session.start()
        self.waiting_for_start = False
        self.paused = False
        self.recorded = False

    def run(self) -> None:
        while self.running:
            self.clock.tick(self.config.target_fps)
            self._handle_events(pygame.event.get())

            if not self.waiting_for_start and not self.paused:
                self.session.advance(pygame.time.get_ticks(), self.input_provider.poll())
                self.audio.play(self.session.drain_cues())
                if self.session.is_terminated() and not self.recorded:
                    self._open_name_entry()

            self.renderer.draw(self.session.snapshot(), self._best())
            if self.waiting_for_start:
                self.renderer.draw_overlay("Glide", ["Space to start", "Arrows/A-D or drag to steer"])
            elif self.session.is_terminated():
                self._draw_game_over()
            elif self.paused:
                self.renderer.draw_overlay("Paused", ["P to resume", "R to restart"])
            pygame.display.flip()

        pygame.quit()

    def _best(self) -> int:
        return self.store.best() if self.store else 0

    def _open_name_entry(self) -> None:
        self.recorded = True
        self.name_entry.open(self.session.final_score)

    def _draw_game_over(self) -> None:
        entry = self.name_entry
        lines = [f"Score {self.session.final_score}"]
        if entry.active:
            lines += [f"Name: {entry.text}_", "Enter to save, Esc to skip"]
        else:
            lines.append("Space or R to retry")
            if self.store is not None:
                lines.append("C to clear scores")
                for rank, row in enumerate(self.store.entries[:5], start=1):
                    lines.append(f"{rank}. {row.name}  {row.score}")
        self.renderer.draw_overlay("Game over", lines)

    def _toggle_pause(self) -> None:
        if self.waiting_for_start or self.session.is_terminated():
            return
        if self.paused:
            self.session.resume()
            self.paused = False
        else:
            self.session.stop()
            self.paused = True

    def _toggle_sound(self) -> None:
        enabled = self.audio.toggle()
        if self.store is not None:
            self.store.set_sound(enabled)
        self.restart()

    def _handle_events(self, events: list[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if self.session.is_terminated() and self.name_entry.handle_key(event):
                    self.player_name = self.name_entry.text
                elif event.key == pygame.K_q:
                    self.running = False
                elif event.key in (pygame.K_p, pygame.K_ESCAPE):
                    self._toggle_pause()
                elif event.key == pygame.K_m:
                    self._toggle_sound()
                elif event.key == pygame.K_r:
                    self.restart()
                elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
                    if self.waiting_for_start or self.session.is_terminated():
                        self.restart()
            else:
                self.input_provider.handle_event(event)
