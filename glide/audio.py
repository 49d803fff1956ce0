"""Synthesised feedback tones for pickup, near-miss and game-over cues."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pygame

from .config import AudioConfig
from .world import Cue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tone:
    frequency: float
    waveform: str  # sine | triangle | square | sawtooth
    duration_ms: int
    volume: float


CUE_TONES: dict[Cue, Tone] = {
    Cue.PICKUP: Tone(640.0, "sine", 100, 0.035),
    Cue.NEAR_MISS: Tone(880.0, "triangle", 60, 0.03),
    Cue.TERMINATED: Tone(220.0, "sawtooth", 200, 0.05),
}
TOGGLE_TONE = Tone(660.0, "square", 80, 0.03)


def synthesize(tone: Tone, sample_rate: int) -> np.ndarray:
    """Return mono int16 samples for ``tone``."""
    count = max(1, int(sample_rate * tone.duration_ms / 1000))
    t = np.arange(count, dtype=np.float64) / sample_rate
    phase = (t * tone.frequency) % 1.0
    if tone.waveform == "sine":
        wave = np.sin(2 * np.pi * phase)
    elif tone.waveform == "triangle":
        wave = 4.0 * np.abs(phase - 0.5) - 1.0
    elif tone.waveform == "square":
        wave = np.where(phase < 0.5, 1.0, -1.0)
    elif tone.waveform == "sawtooth":
        wave = 2.0 * phase - 1.0
    else:
        raise ValueError(f"unknown waveform {tone.waveform!r}")
    return (wave * tone.volume * 32767).astype(np.int16)


class CuePlayer:
    """Plays cue tones through pygame.mixer; silent when disabled or unavailable."""

    def __init__(self, config: AudioConfig, enabled: bool = True) -> None:
        self.cfg = config
        self.enabled = enabled and config.enabled
        self._sounds: dict[Tone, pygame.mixer.Sound] = {}
        self._available = False
        self._init_mixer()

    def _init_mixer(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=self.cfg.sample_rate, size=-16, channels=1)
        except pygame.error as exc:
            logger.warning("audio disabled: %s", exc)
            return
        self._available = True

    def _sound(self, tone: Tone) -> Optional[pygame.mixer.Sound]:
        if not self._available:
            return None
        sound = self._sounds.get(tone)
        if sound is None:
            frequency, _, channels = pygame.mixer.get_init()
            samples = synthesize(tone, frequency)
            if channels > 1:
                samples = np.repeat(samples[:, None], channels, axis=1)
            sound = pygame.sndarray.make_sound(np.ascontiguousarray(samples))
            self._sounds[tone] = sound
        return sound

    def play_tone(self, tone: Tone) -> None:
        if not self.enabled:
            return
        sound = self._sound(tone)
        if sound is not None:
            sound.play()

    def play(self, cues: list[Cue]) -> None:
        for cue in cues:
            self.play_tone(CUE_TONES[cue])

    def toggle(self) -> bool:
        self.enabled = not self.enabled
        if self.enabled:
            self.play_tone(TOGGLE_TONE)
        return self.enabled
