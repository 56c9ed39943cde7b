"""Data model definitions — explicit boundaries between input, compute, and render layers."""

from dataclasses import dataclass
from typing import NamedTuple


class GeoPoint(NamedTuple):
    """A point on Earth's surface in decimal degrees."""

    latitude: float
    longitude: float


class PlanarOffset(NamedTuple):
    """Displacement in meters on a local flat-Earth plane."""

    x_m: float  # East-West
    y_m: float  # North-South


@dataclass(frozen=True)
class CelestialBody:
    """One catalog entry. All sizes are real-world meters."""

    name: str
    orbit_distance_m: float  # 0 for the Sun
    body_diameter_m: float


@dataclass(frozen=True)
class Placemark:
    """A scaled body and its orbit ring, anchored to a geographic centre."""

    name: str
    body_radius_m: float  # Scaled catalog diameter (labelled "body radius" for display)
    orbit_distance_m: float  # Scaled orbit radius
    ring: tuple[GeoPoint, ...]  # points + 1 entries, angle 0 → 2π


@dataclass(frozen=True)
class QueryInput:
    """Raw user input. Not yet validated."""

    sun_size: str | float | None = None  # Sun diameter in meters
    latitude: str | float | None = None
    longitude: str | float | None = None


@dataclass(frozen=True)
class SolarSystemQuery:
    """Validated request parameters. Input to placemark construction."""

    center: GeoPoint
    sun_size_m: float


@dataclass(frozen=True)
class ValidationIssue:
    """A single rejected input field."""

    field: str  # "sun_size", "latitude" or "longitude"
    value: str  # Offending raw value, as text
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a QueryInput. Exactly one of query/issues is populated."""

    query: SolarSystemQuery | None
    issues: tuple[ValidationIssue, ...] = ()

    @property
    def ok(self) -> bool:
        return self.query is not None and not self.issues


@dataclass(frozen=True)
class SolarSystemData:
    """The sole input to renderers. Fully computed state."""

    query: SolarSystemQuery
    ratio: float  # Model meters per real meter
    placemarks: tuple[Placemark, ...]  # Catalog order
    corrected_projection: bool = False  # Which offset formula built the rings
