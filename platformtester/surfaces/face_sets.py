"""
Generation-tagged views into the surface catalog.

Derived sets store catalog indices together with the catalog generation
they were computed against. A rebuild bumps the generation, after which
the set must be recomputed rather than reused.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FaceSet:
    generation: int
    indices: Tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.indices)

    def __contains__(self, index: int) -> bool:
        return index in self.indices

    @property
    def is_empty(self) -> bool:
        return not self.indices


@dataclass(frozen=True)
class AttachmentSet(FaceSet):
    """Faces selected as jump takeoff surfaces."""


@dataclass(frozen=True)
class ReachableSet(FaceSet):
    """Faces reachable by a jump from an attachment set."""
