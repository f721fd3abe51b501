"""
Player parameters consumed by the walkable surface and jump analysis.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List

from .constants.player_constants import (
    DEFAULT_PLAYER_RADIUS,
    DEFAULT_PLAYER_HEIGHT,
    DEFAULT_SLOPE_LIMIT,
    DEFAULT_JUMP_HEIGHT,
    DEFAULT_HORIZONTAL_SPEED,
    DEFAULT_GRAVITY,
)


@dataclass(frozen=True)
class PlayerParameters:
    """Read-only description of the player capsule and its jump."""

    radius: float = DEFAULT_PLAYER_RADIUS
    height: float = DEFAULT_PLAYER_HEIGHT
    slope_limit: float = DEFAULT_SLOPE_LIMIT  # degrees
    jump_height: float = DEFAULT_JUMP_HEIGHT
    horizontal_speed: float = DEFAULT_HORIZONTAL_SPEED
    gravity: float = DEFAULT_GRAVITY  # magnitude, always positive

    @property
    def diameter(self) -> float:
        return self.radius * 2.0

    def validate(self) -> List[str]:
        """
        Check the parameters for values the analysis cannot work with.

        Returns:
            List of human-readable problems, empty when the parameters are usable
        """
        problems = []
        values = {
            "radius": self.radius,
            "height": self.height,
            "slope_limit": self.slope_limit,
            "jump_height": self.jump_height,
            "horizontal_speed": self.horizontal_speed,
            "gravity": self.gravity,
        }
        for name, value in values.items():
            if not math.isfinite(value):
                problems.append(f"{name} must be finite (got {value})")
        if problems:
            return problems

        if self.radius <= 0.0:
            problems.append(f"radius must be positive (got {self.radius})")
        if self.height < self.diameter:
            problems.append(
                f"height ({self.height}) must be at least the capsule diameter ({self.diameter})"
            )
        if not 0.0 <= self.slope_limit <= 180.0:
            problems.append(f"slope_limit must lie in [0, 180] degrees (got {self.slope_limit})")
        if self.jump_height < 0.0:
            problems.append(f"jump_height must not be negative (got {self.jump_height})")
        if self.horizontal_speed <= 0.0:
            problems.append(f"horizontal_speed must be positive (got {self.horizontal_speed})")
        if self.gravity <= 0.0:
            problems.append(f"gravity must be positive (got {self.gravity})")
        return problems

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerParameters":
        """Build parameters from a mapping, falling back to defaults for missing keys."""
        defaults = cls()
        return cls(
            radius=float(data.get("radius", defaults.radius)),
            height=float(data.get("height", defaults.height)),
            slope_limit=float(data.get("slope_limit", defaults.slope_limit)),
            jump_height=float(data.get("jump_height", defaults.jump_height)),
            horizontal_speed=float(data.get("horizontal_speed", defaults.horizontal_speed)),
            gravity=float(data.get("gravity", defaults.gravity)),
        )
