"""
Directional capsule sweep interface consumed by the face clipper.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .solids import Solid

Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class SweepHit:
    """One obstruction contact reported by a sweep."""

    point: Vector3  # world-space impact point
    distance: float  # travel distance from the sweep origin
    solid: Optional[Solid] = None


class SweepService(ABC):
    """
    Capsule sweep queries against the scene.

    Implementations return every contact along the sweep, nearest first.
    A capsule that starts inside a solid may report that solid at the world
    origin with distance 0; callers are expected to special-case it.
    """

    @abstractmethod
    def sweep(
        self,
        base: Vector3,
        top: Vector3,
        radius: float,
        direction: Vector3,
        max_distance: float,
        layer_mask: int,
    ) -> List[SweepHit]:
        pass

    @abstractmethod
    def is_participating(self, solid: Solid) -> bool:
        """Whether the solid currently takes part in sweeps."""
        pass

    @abstractmethod
    def set_participating(self, solid: Solid, participating: bool) -> None:
        pass

    def refresh(self) -> None:
        """Drop anything cached about the scene; called before every catalog rebuild."""
        pass
