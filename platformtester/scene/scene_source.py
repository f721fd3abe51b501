"""
Scene enumeration interface.

The catalog rebuild receives its scene explicitly, so analysis can run
against a synthetic list of solids with no global scene state.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

from .solids import Solid


class SceneSource(ABC):
    """Anything that can enumerate the solids of a scene."""

    @abstractmethod
    def solids(self) -> Iterable[Solid]:
        """Return every solid currently in the scene."""
        pass


class StaticScene(SceneSource):
    """A scene backed by a plain list of solids."""

    def __init__(self, solids: Optional[Iterable[Solid]] = None):
        self._solids: List[Solid] = list(solids or [])

    def add(self, solid: Solid) -> Solid:
        self._solids.append(solid)
        return solid

    def remove(self, solid: Solid) -> None:
        self._solids = [s for s in self._solids if s is not solid]

    def find(self, name: str) -> Optional[Solid]:
        for solid in self._solids:
            if solid.name == name:
                return solid
        return None

    def solids(self) -> List[Solid]:
        return list(self._solids)

    def __iter__(self) -> Iterator[Solid]:
        return iter(self.solids())

    def __len__(self) -> int:
        return len(self._solids)
