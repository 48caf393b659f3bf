"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Tuple

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_X, PLAYER_SIZE,
    HITBOX_MARGIN_LEFT, HITBOX_MARGIN_TOP, HITBOX_MARGIN_RIGHT, HITBOX_MARGIN_BOTTOM,
    PILLAR_WIDTH, PILLAR_GAP, PILLAR_MAX_GAP_RATIO, PILLAR_MARGIN,
    PILLAR_SPEED, PILLAR_SPACING, GRAVITY, FLAP_IMPULSE, MAX_FALL_VELOCITY,
    PRECISION,
)


class GameState(Enum):
    HOME = "home"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Viewport:
    """The playfield size. Changes when the window is resized."""
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT


@dataclass(frozen=True)
class HitboxMargins:
    """Per-edge insets that shrink the player's box for collision checks."""
    left: float = HITBOX_MARGIN_LEFT
    top: float = HITBOX_MARGIN_TOP
    right: float = HITBOX_MARGIN_RIGHT
    bottom: float = HITBOX_MARGIN_BOTTOM


@dataclass
class Player:
    """The player state. `y` is the top edge of the player's box."""
    x: float = PLAYER_X
    y: float = SCREEN_HEIGHT / 2
    velocity: float = 0.0
    size: float = PLAYER_SIZE

    def hitbox(self, margins: HitboxMargins) -> Tuple[float, float, float, float]:
        """Returns (left, top, right, bottom) of the shrunken collision box."""
        return (
            self.x + margins.left,
            self.y + margins.top,
            self.x + self.size - margins.right,
            self.y + self.size - margins.bottom,
        )


@dataclass
class Obstacle:
    """A pillar pair with a passable gap between `top` and `bottom`."""
    x: float
    top: float
    bottom: float
    width: float = PILLAR_WIDTH
    passed: bool = False

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class AudioSettings:
    music_on: bool = True
    sound_on: bool = True


@dataclass
class GameConfig:
    """Every tunable parameter of the simulation, defaulting to constants.py."""
    gravity: float = GRAVITY
    flap_impulse: float = FLAP_IMPULSE
    max_fall_velocity: float = MAX_FALL_VELOCITY
    precision: int = PRECISION

    player_x: float = PLAYER_X
    player_size: float = PLAYER_SIZE
    hitbox: HitboxMargins = field(default_factory=HitboxMargins)

    pillar_width: float = PILLAR_WIDTH
    pillar_gap: float = PILLAR_GAP
    pillar_max_gap_ratio: float = PILLAR_MAX_GAP_RATIO
    pillar_margin: float = PILLAR_MARGIN
    pillar_speed: float = PILLAR_SPEED
    pillar_spacing: float = PILLAR_SPACING

    def validate(self) -> "GameConfig":
        """Raises ValueError for parameter sets the simulation cannot run with."""
        for name in ("player_size", "pillar_width", "pillar_gap", "pillar_speed",
                     "pillar_spacing", "max_fall_velocity"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if not 0 < self.pillar_max_gap_ratio <= 1:
            raise ValueError("pillar_max_gap_ratio must be in (0, 1]")
        if self.pillar_margin < 0:
            raise ValueError("pillar_margin must not be negative")
        for f in fields(self.hitbox):
            if getattr(self.hitbox, f.name) < 0:
                raise ValueError(f"hitbox margin {f.name} must not be negative")
        if self.hitbox.left + self.hitbox.right >= self.player_size or \
                self.hitbox.top + self.hitbox.bottom >= self.player_size:
            raise ValueError("hitbox margins leave no collision box")
        return self


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one tick, handed to the renderer."""
    state: GameState
    score: int
    player: Player
    obstacles: Tuple[Obstacle, ...]
    viewport: Viewport
    audio: AudioSettings

    def to_dict(self) -> dict:
        """Prepares a minimal state dictionary, e.g. for debug logging."""
        return {
            "state": self.state.value,
            "score": self.score,
            "y": round(self.player.y, 2),
            "v": round(self.player.velocity, 2),
            "obstacles": [
                {"x": round(o.x, 2), "top": round(o.top, 2), "passed": o.passed}
                for o in self.obstacles
            ],
        }
