"""
Closed-form jump trajectory model.

The player jumps with a fixed apex height and moves horizontally at a
constant speed, so a jump is a parabola in the x-y plane:

    takeoff speed   Vy0 = sqrt(2 g H)
    apex distance   Dx  = (Vy0 / g) * Vx
    concavity       a   = -0.5 g / Vx^2     (y = a (x - b)^2 + c)
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..player import PlayerParameters

Point2 = Tuple[float, float]


@dataclass(frozen=True)
class JumpEnvelope:
    jump_height: float
    horizontal_speed: float
    gravity: float

    @classmethod
    def from_player(cls, player: PlayerParameters) -> "JumpEnvelope":
        return cls(
            jump_height=player.jump_height,
            horizontal_speed=player.horizontal_speed,
            gravity=player.gravity,
        )

    @property
    def takeoff_speed(self) -> float:
        """Initial vertical speed needed to reach the jump height."""
        return math.sqrt(2.0 * self.gravity * self.jump_height)

    @property
    def apex_time(self) -> float:
        return self.takeoff_speed / self.gravity

    @property
    def apex_distance(self) -> float:
        """Horizontal distance covered on the way up to the apex."""
        return self.apex_time * self.horizontal_speed

    @property
    def concavity(self) -> float:
        return -0.5 * self.gravity / (self.horizontal_speed * self.horizontal_speed)

    def height_at(self, apex_x: float, apex_y: float, x: float) -> float:
        """Height of the falling branch of a parabola with its apex at (apex_x, apex_y)."""
        return self.concavity * (x - apex_x) ** 2 + apex_y

    def is_above(self, apex_x: float, apex_y: float, point: Point2) -> bool:
        """Whether a point lies above the jump parabola."""
        return point[1] > self.height_at(apex_x, apex_y, point[0])

    def arc_points(
        self,
        takeoff: Point2,
        direction: int = 1,
        drop: Optional[float] = None,
        samples: int = 32,
    ) -> List[Point2]:
        """
        Sample the trajectory of a jump.

        Args:
            takeoff: Point the jump starts from
            direction: +1 to jump right, -1 to jump left
            drop: How far below the takeoff height to follow the fall (default: jump height)
            samples: Number of points to return

        Returns:
            Trajectory points from takeoff to the end of the fall
        """
        drop = self.jump_height if drop is None else drop
        fall_time = math.sqrt(2.0 * (self.jump_height + drop) / self.gravity)
        total_time = self.apex_time + fall_time
        vy0 = self.takeoff_speed
        vx = self.horizontal_speed * (1 if direction >= 0 else -1)

        points = []
        for i in range(max(2, samples)):
            t = total_time * i / (max(2, samples) - 1)
            points.append(
                (takeoff[0] + vx * t, takeoff[1] + vy0 * t - 0.5 * self.gravity * t * t)
            )
        return points
