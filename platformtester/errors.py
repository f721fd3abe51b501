"""Exception types raised at the boundaries of the analysis core."""


class PlatformTesterError(Exception):
    """Base class for all platformtester errors."""


class StaleFaceSetError(PlatformTesterError):
    """A face set was resolved against a catalog that has since been rebuilt."""

    def __init__(self, set_generation: int, catalog_generation: int):
        super().__init__(
            f"face set from generation {set_generation} is stale "
            f"(catalog is at generation {catalog_generation})"
        )
        self.set_generation = set_generation
        self.catalog_generation = catalog_generation


class SceneFormatError(PlatformTesterError):
    """A scene description could not be parsed."""
