"""
config.py: Tunable game settings with validation and environment overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

from . import constants

ENV_PREFIX = "SPACE_FLAPPY_"


@dataclass(frozen=True)
class GameConfig:
    """Every knob of the simulation, defaulting to the reference build."""
    field_width: int = constants.FIELD_WIDTH
    field_height: int = constants.FIELD_HEIGHT
    actor_x: float = constants.ACTOR_X
    sprite_size: float = constants.SPRITE_SIZE
    hitbox_scale: float = constants.HITBOX_SCALE

    obstacle_width: float = constants.OBSTACLE_WIDTH
    gap_height: float = constants.GAP_HEIGHT
    scroll_speed: float = constants.SCROLL_SPEED
    spawn_spacing: float = constants.SPAWN_SPACING
    min_height: float = constants.MIN_HEIGHT
    min_margin: float = constants.MIN_MARGIN

    gravity: float = constants.GRAVITY
    jump_impulse: float = constants.JUMP_IMPULSE

    fps: int = constants.FPS
    touch_override: Optional[bool] = None
    log_level: str = "INFO"

    def __post_init__(self):
        self.validate()

    @property
    def hitbox_half(self) -> float:
        return self.sprite_size * self.hitbox_scale / 2

    @property
    def max_gap_top(self) -> float:
        return self.field_height - self.gap_height - self.min_margin

    def validate(self):
        """Raises ValueError if the settings cannot produce a playable field."""
        for name in ("field_width", "field_height", "sprite_size", "obstacle_width",
                     "gap_height", "scroll_speed", "fps"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        for name in ("spawn_spacing", "min_height", "min_margin"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)!r}")
        if not 0 < self.hitbox_scale <= 1:
            raise ValueError(f"hitbox_scale must be in (0, 1], got {self.hitbox_scale!r}")
        if self.min_height > self.max_gap_top:
            raise ValueError(
                f"empty gap range: min_height {self.min_height} exceeds "
                f"field_height - gap_height - min_margin = {self.max_gap_top}")
        if not 0 <= self.actor_x <= self.field_width:
            raise ValueError(f"actor_x {self.actor_x} lies outside the field")

    def with_overrides(self, **changes) -> "GameConfig":
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GameConfig":
        """Builds a config from SPACE_FLAPPY_* variables layered over the defaults."""
        environ = os.environ if environ is None else environ
        changes = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            if f.name == "touch_override":
                key = ENV_PREFIX + "TOUCH"
            raw = environ.get(key)
            if raw is None or raw == "":
                continue
            changes[f.name] = _parse(key, f.name, raw)
        return cls(**changes)


_INT_FIELDS = {"field_width", "field_height", "fps"}
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse(key: str, name: str, raw: str):
    if name == "log_level":
        return raw.upper()
    if name == "touch_override":
        value = raw.strip().lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        raise ValueError(f"{key} must be a boolean, got {raw!r}")
    try:
        return int(raw) if name in _INT_FIELDS else float(raw)
    except ValueError:
        raise ValueError(f"{key} must be numeric, got {raw!r}") from None
