"""Configuration data structures for the Glide arcade game."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FieldConfig:
    """Logical play-field size, independent of the window resolution."""

    width: float = 390.0
    aspect: float = 9 / 16  # width / height
    offscreen_margin: float = 40.0

    @property
    def height(self) -> float:
        return float(round(self.width / self.aspect))


@dataclass(frozen=True)
class ActorConfig:
    """Movement tuning for the player-controlled glider."""

    width: float = 34.0
    height: float = 38.0
    bottom_margin: float = 110.0
    bottom_margin_ratio: float = 0.14
    max_speed: float = 520.0  # px/s
    acceleration: float = 1800.0
    friction: float = 1400.0
    edge_padding: float = 0.6  # fraction of width kept clear of the walls
    hitbox_scale: float = 0.9  # forgiving bounding box
    trail_interval: float = 0.025
    trail_length: int = 5

    def __post_init__(self) -> None:
        if not 0.0 < self.hitbox_scale <= 1.0:
            raise ValueError(f"hitbox_scale must be in (0, 1], got {self.hitbox_scale}")


@dataclass(frozen=True)
class HazardConfig:
    """Size and speed ranges sampled for each falling block."""

    min_width: float = 34.0
    max_width: float = 90.0
    min_height: float = 18.0
    max_height: float = 30.0
    max_entry_offset: float = 60.0
    min_speed_factor: float = 0.85
    max_speed_factor: float = 1.25
    fade_rate: float = 4.0  # alpha per second
    color: tuple[int, int, int] = (17, 24, 39)


@dataclass(frozen=True)
class PickupConfig:
    """Parameters for collectible orbs."""

    radius: float = 9.0
    edge_padding: float = 6.0
    min_entry_offset: float = 20.0
    max_entry_offset: float = 120.0
    min_speed_factor: float = 0.8
    max_speed_factor: float = 1.1
    fade_rate: float = 4.0
    pulse_rate: float = 4.5
    pulse_amplitude: float = 0.15
    color: tuple[int, int, int] = (37, 99, 235)


@dataclass(frozen=True)
class EffectConfig:
    """Cosmetic feedback timings."""

    ring_start_radius: float = 6.0
    ring_max_radius: float = 40.0
    ring_growth: float = 180.0
    ring_alpha: float = 0.6
    ring_fade: float = 1.2
    text_rise_speed: float = 60.0
    text_fade: float = 1.5
    text_color: tuple[int, int, int] = (17, 24, 39)


@dataclass(frozen=True)
class SpawnConfig:
    """Cooldown curves for hazards and pickups (seconds)."""

    hazard_base: float = 0.8
    hazard_slope: float = 0.55
    hazard_min: float = 0.18
    hazard_max: float = 0.8
    pickup_base: float = 2.8
    pickup_slope: float = 1.5
    pickup_min: float = 0.9
    pickup_max: float = 3.0
    pickup_chance: float = 0.8
    initial_hazard_cooldown: float = 0.0
    initial_pickup_cooldown: float = 1.5

    def __post_init__(self) -> None:
        if not 0.0 <= self.pickup_chance <= 1.0:
            raise ValueError(f"pickup_chance must be in [0, 1], got {self.pickup_chance}")
        if self.hazard_min > self.hazard_max or self.pickup_min > self.pickup_max:
            raise ValueError("spawn interval minimum exceeds maximum")


@dataclass(frozen=True)
class DifficultyConfig:
    """Ramp from an easy start to full speed."""

    ramp_seconds: float = 90.0
    base_speed: float = 150.0
    speed_range: float = 320.0
    max_step: float = 0.033  # largest dt a single step may simulate

    def __post_init__(self) -> None:
        if self.ramp_seconds <= 0:
            raise ValueError(f"ramp_seconds must be positive, got {self.ramp_seconds}")
        if self.max_step <= 0:
            raise ValueError(f"max_step must be positive, got {self.max_step}")


@dataclass(frozen=True)
class ScoringConfig:
    """Score accrual, pickup bonus and near-miss multiplier rules."""

    base_rate: float = 12.0  # points per second at difficulty 0
    difficulty_rate: float = 24.0
    pickup_bonus: float = 30.0
    multiplier_step: float = 0.1
    multiplier_cap: float = 4.0
    near_miss_grace: float = 0.25
    near_miss_vertical: float = 22.0
    near_miss_inner: float = 14.0  # band starts this far inside the touching distance
    near_miss_outer: float = 18.0  # and ends this far outside it

    def __post_init__(self) -> None:
        if self.multiplier_cap < 1.0:
            raise ValueError(f"multiplier_cap must be at least 1, got {self.multiplier_cap}")


@dataclass(frozen=True)
class RenderingConfig:
    """Visual parameters for the pygame renderer."""

    background_color: tuple[int, int, int] = (255, 255, 255)
    lane_color: tuple[int, int, int] = (229, 231, 235)
    actor_color: tuple[int, int, int] = (17, 24, 39)
    actor_outline: tuple[int, int, int] = (229, 231, 235)
    ui_color: tuple[int, int, int] = (17, 24, 39)
    overlay_text_color: tuple[int, int, int] = (245, 245, 245)
    lanes: int = 6
    trail_alpha: float = 0.28
    hover_amplitude: float = 0.9
    hover_speed: float = 9.0
    terminate_shake: tuple[float, float] = (8.0, 0.3)  # magnitude, seconds
    near_miss_shake: tuple[float, float] = (3.0, 0.15)


@dataclass(frozen=True)
class AudioConfig:
    """Tone synthesis settings for cue playback."""

    sample_rate: int = 44100
    enabled: bool = True


@dataclass(frozen=True)
class GameConfig:
    """High-level configuration of the game."""

    window_scale: float = 1.2
    target_fps: int = 60
    play_field: FieldConfig = field(default_factory=FieldConfig)
    actor: ActorConfig = field(default_factory=ActorConfig)
    hazards: HazardConfig = field(default_factory=HazardConfig)
    pickups: PickupConfig = field(default_factory=PickupConfig)
    effects: EffectConfig = field(default_factory=EffectConfig)
    spawn: SpawnConfig = field(default_factory=SpawnConfig)
    difficulty: DifficultyConfig = field(default_factory=DifficultyConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    render: RenderingConfig = field(default_factory=RenderingConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)

    @property
    def window_size(self) -> tuple[int, int]:
        return (
            int(self.play_field.width * self.window_scale),
            int(self.play_field.height * self.window_scale),
        )
