"""Configuration: input ranges, defaults, and environment overrides.

Entry points call ``load_dotenv()`` before importing this module's getters, so
values from a local ``.env`` file are visible here.
"""

import os

SUN_SIZE_RANGE = (0.01, 500.0)
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

DEFAULT_SUN_SIZE_M = 5.0
INITIAL_COORDINATES = (49.273251, -123.103767)
DEFAULT_RING_POINTS = 100

_TRUTHY = {"1", "true", "yes", "on"}


def use_corrected_projection() -> bool:
    """Return True when SOLAR_SYSTEM_CORRECTED_PROJECTION is set to a truthy value.

    The default (unset) keeps the inverted-centre offset formula the
    published rings were drawn with.
    """
    value = os.environ.get("SOLAR_SYSTEM_CORRECTED_PROJECTION", "")
    return value.strip().lower() in _TRUTHY


def get_ring_points() -> int:
    """Return the number of ring segments (SOLAR_SYSTEM_RING_POINTS env var or default).

    Raises:
        ValueError: If the variable is set but is not a positive integer.
    """
    raw = os.environ.get("SOLAR_SYSTEM_RING_POINTS", "").strip()
    if not raw:
        return DEFAULT_RING_POINTS
    points = int(raw)
    if points < 1:
        raise ValueError(f"SOLAR_SYSTEM_RING_POINTS must be positive, got {points}")
    return points
