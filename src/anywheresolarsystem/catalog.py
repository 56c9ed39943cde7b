"""Celestial catalog: the Sun and the eight planets, in rendering order."""

from anywheresolarsystem.models import CelestialBody

# All sizes are in meters
TRUE_SUN_DIAMETER_M = 1_392_700_000

# One astronomical unit
AU_M = 149_600_000_000


def _body(name: str, distance_au: float, diameter_m: float) -> CelestialBody:
    return CelestialBody(
        name=name,
        orbit_distance_m=float(distance_au) * AU_M,
        body_diameter_m=float(diameter_m),
    )


CATALOG: tuple[CelestialBody, ...] = (
    _body("Sun", 0, TRUE_SUN_DIAMETER_M),
    _body("Mercury", 0.38, 4_878_000),
    _body("Venus", 0.72, 12_104_000),
    _body("Earth", 1, 12_756_000),
    _body("Mars", 1.5, 6_794_000),
    _body("Jupiter", 5.2, 142_984_000),
    _body("Saturn", 9.5, 120_536_000),
    _body("Uranus", 19.2, 51_118_000),
    _body("Neptune", 30.1, 49_532_000),
)
