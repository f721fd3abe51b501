"""
Centralized constants for walkable surface and jump analysis.
All player and query related defaults should be defined here to avoid duplication.
"""

# === PLAYER DEFAULTS ===
DEFAULT_PLAYER_RADIUS = 0.5  # Capsule radius in world units
DEFAULT_PLAYER_HEIGHT = 2.0  # Total capsule height, including both caps
DEFAULT_SLOPE_LIMIT = 45.0  # Steepest walkable slope in degrees
DEFAULT_JUMP_HEIGHT = 2.0  # Apex height of a standing jump
DEFAULT_HORIZONTAL_SPEED = 5.0  # Units/second
DEFAULT_GRAVITY = 9.81  # Units/second^2, magnitude only

# === SWEEP QUERY ===
# Contacts closer than this to the world origin (squared distance) are the
# "started inside a solid" artifact of capsule sweeps.
DEGENERATE_CONTACT_TOLERANCE_SQ = 0.01
# Penetration depth below which a sweep contact is treated as grazing.
CONTACT_SKIN = 1e-4

# === COLLISION LAYERS ===
MAX_LAYERS = 32
ALL_LAYERS = (1 << MAX_LAYERS) - 1

# === BOX SIDES ===
# Extraction order of the six box sides: +z, +x, +y, -z, -x, -y.
BOX_SIDE_DIRECTIONS = (
    (0.0, 0.0, 1.0),
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, -1.0),
    (-1.0, 0.0, 0.0),
    (0.0, -1.0, 0.0),
)
# Local axis (0=x, 1=y) whose world length is the along-surface extent of each side.
BOX_SIDE_EXTENT_AXES = (0, 1, 0, 0, 1, 0)
# Index offset between a side and the opposite side of the same box.
OPPOSITE_SIDE_OFFSET = 3

__all__ = [
    "DEFAULT_PLAYER_RADIUS",
    "DEFAULT_PLAYER_HEIGHT",
    "DEFAULT_SLOPE_LIMIT",
    "DEFAULT_JUMP_HEIGHT",
    "DEFAULT_HORIZONTAL_SPEED",
    "DEFAULT_GRAVITY",
    "DEGENERATE_CONTACT_TOLERANCE_SQ",
    "CONTACT_SKIN",
    "MAX_LAYERS",
    "ALL_LAYERS",
    "BOX_SIDE_DIRECTIONS",
    "BOX_SIDE_EXTENT_AXES",
    "OPPOSITE_SIDE_OFFSET",
]
