"""Scale model computation layer — ratio, ring sampling, geo offsets, and placemark assembly."""

import logging
import math

import httpx

from anywheresolarsystem import config
from anywheresolarsystem.catalog import CATALOG, TRUE_SUN_DIAMETER_M
from anywheresolarsystem.models import (
    GeoPoint,
    PlanarOffset,
    Placemark,
    QueryInput,
    SolarSystemData,
    SolarSystemQuery,
    ValidationIssue,
    ValidationResult,
)

logger = logging.getLogger(__name__)

# Meters per degree of latitude (flat-Earth approximation)
METERS_PER_DEGREE = 111111.0

# Below this, cos() of the scaling angle is treated as zero
_DEGENERATE_COS = 1e-12


class QueryValidationError(ValueError):
    """One or more request parameters are missing, malformed, or out of range."""

    def __init__(self, issues: tuple[ValidationIssue, ...]) -> None:
        self.issues = issues
        super().__init__("; ".join(issue.message for issue in issues))


class ProjectionError(ArithmeticError):
    """A planar offset could not be converted to finite geographic degrees."""

    def __init__(
        self, message: str, body: str | None = None, index: int | None = None
    ) -> None:
        self.body = body
        self.index = index
        super().__init__(message)


class GeocodingError(Exception):
    """Geocoder call failure."""


def compute_ratio(requested_sun_size_m: float) -> float:
    """Return the model-to-reality scale factor for a Sun of the given diameter.

    The caller is responsible for keeping the size inside ``config.SUN_SIZE_RANGE``.
    """
    return requested_sun_size_m / TRUE_SUN_DIAMETER_M


def sample_ring(
    orbit_radius_m: float, points: int = config.DEFAULT_RING_POINTS
) -> tuple[PlanarOffset, ...]:
    """Sample a closed circle of the given radius around the origin.

    Args:
        orbit_radius_m: Circle radius in meters. Zero yields a degenerate
            ring where every point is the origin.
        points: Number of segments. The result has ``points + 1`` entries;
            the first (angle 0) and last (angle 2π) are computed separately.

    Returns:
        Planar offsets in angular order.
    """
    if points < 1:
        raise ValueError(f"points must be positive, got {points}")
    ring: list[PlanarOffset] = []
    for n in range(points + 1):
        angle = n / points * 2.0 * math.pi
        ring.append(
            PlanarOffset(orbit_radius_m * math.cos(angle), orbit_radius_m * math.sin(angle))
        )
    return tuple(ring)


def _checked(first: float, second: float) -> GeoPoint:
    if not (math.isfinite(first) and math.isfinite(second)):
        raise ProjectionError(f"Offset produced non-finite coordinates ({first}, {second})")
    return GeoPoint(first, second)


def offset(
    center: tuple[float, float], delta: tuple[float, float]
) -> GeoPoint:
    """Shift a coordinate pair by a planar offset in meters.

    The y component is scaled by the cosine of the pair's *second* value and
    added to the first; x is added to the second unscaled. The placemark
    builder therefore passes the centre as (longitude, latitude) and reads
    the result back in the same order, which makes the cosine act on the
    latitude.

    Raises:
        ProjectionError: When the cosine scale is zero for a non-zero
            displacement, or the result is not finite.
    """
    first, second = center
    x, y = delta
    # Degrees to radians as (deg * pi) / 180, the rounding the published rings use
    cos_factor = math.cos(second * math.pi / 180)
    if y and abs(cos_factor) < _DEGENERATE_COS:
        raise ProjectionError(f"Cannot scale offset at {second} degrees (cos = 0)")
    new_first = first + y / (METERS_PER_DEGREE * cos_factor) if y else first
    return _checked(new_first, second + x / METERS_PER_DEGREE)


def offset_corrected(center: GeoPoint, delta: PlanarOffset) -> GeoPoint:
    """Shift a (latitude, longitude) point by a planar offset, scaling longitude by cos(latitude).

    Raises:
        ProjectionError: At the poles for a non-zero East-West displacement,
            or when the result is not finite.
    """
    lat, lng = center
    x, y = delta
    cos_factor = math.cos(math.radians(lat))
    if x and abs(cos_factor) < _DEGENERATE_COS:
        raise ProjectionError(f"Cannot scale longitude offset at latitude {lat} (cos = 0)")
    new_lng = lng + x / (METERS_PER_DEGREE * cos_factor) if x else lng
    return _checked(lat + y / METERS_PER_DEGREE, new_lng)


def build_placemark(
    center: GeoPoint,
    name: str,
    orbit_distance_m: float,
    body_radius_m: float,
    points: int = config.DEFAULT_RING_POINTS,
    corrected: bool = False,
) -> Placemark:
    """Build one body's placemark from already-scaled distances.

    Args:
        center: Geographic centre of the model (the Sun's position).
        name: Body name.
        orbit_distance_m: Scaled orbit radius in meters.
        body_radius_m: Scaled body size in meters.
        points: Ring segment count.
        corrected: Use ``offset_corrected`` instead of the inverted-centre
            ``offset`` call.

    Returns:
        Placemark whose ring has ``points + 1`` geographic points.

    Raises:
        ProjectionError: With ``body`` and ``index`` set to the failing point.
    """
    logger.debug(
        "Build placemark: %s -> %s orbit radius is %s", tuple(center), name, orbit_distance_m
    )
    inverted = (center.longitude, center.latitude)
    ring: list[GeoPoint] = []
    for index, delta in enumerate(sample_ring(orbit_distance_m, points)):
        try:
            if corrected:
                ring.append(offset_corrected(center, delta))
            else:
                lng, lat = offset(inverted, delta)
                ring.append(GeoPoint(lat, lng))
        except ProjectionError as exc:
            raise ProjectionError(
                f"{name} ring point {index}: {exc}", body=name, index=index
            ) from exc
    return Placemark(
        name=name,
        body_radius_m=body_radius_m,
        orbit_distance_m=orbit_distance_m,
        ring=tuple(ring),
    )


def build_placemarks(
    center: GeoPoint,
    sun_size_m: float,
    points: int = config.DEFAULT_RING_POINTS,
    corrected: bool = False,
) -> tuple[Placemark, ...]:
    """Scale every catalog body to the requested Sun size and anchor it at ``center``.

    Args:
        center: Validated centre point.
        sun_size_m: Validated Sun diameter in meters.
        points: Ring segment count per body.
        corrected: Select the latitude-scaled projector.

    Returns:
        One Placemark per catalog entry, in catalog order.
    """
    ratio = compute_ratio(sun_size_m)
    logger.info("Calculating for sun size of %sm... - ratio: %s", sun_size_m, ratio)
    return tuple(
        build_placemark(
            center,
            body.name,
            orbit_distance_m=body.orbit_distance_m * ratio,
            body_radius_m=body.body_diameter_m * ratio,
            points=points,
            corrected=corrected,
        )
        for body in CATALOG
    )


def _parse_field(
    field: str,
    raw: str | float | None,
    default: float,
    bounds: tuple[float, float],
) -> tuple[float | None, ValidationIssue | None]:
    """Parse one raw value. Missing values take ``default``; bounds are inclusive."""
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default, None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None, ValidationIssue(field, str(raw), f"{field} is not a number: {raw!r}")
    if not math.isfinite(value):
        return None, ValidationIssue(field, str(raw), f"{field} must be finite")
    low, high = bounds
    if not low <= value <= high:
        return None, ValidationIssue(
            field, str(raw), f"{field} out of range: {value} not in [{low}, {high}]"
        )
    return value, None


def validate_query(query: QueryInput) -> ValidationResult:
    """Validate raw request parameters without raising.

    Returns:
        ValidationResult holding either a SolarSystemQuery or every issue found.
    """
    default_lat, default_lng = config.INITIAL_COORDINATES
    sun_size, sun_issue = _parse_field(
        "sun_size", query.sun_size, config.DEFAULT_SUN_SIZE_M, config.SUN_SIZE_RANGE
    )
    lat, lat_issue = _parse_field(
        "latitude", query.latitude, default_lat, config.LATITUDE_RANGE
    )
    lng, lng_issue = _parse_field(
        "longitude", query.longitude, default_lng, config.LONGITUDE_RANGE
    )
    issues = tuple(i for i in (sun_issue, lat_issue, lng_issue) if i is not None)
    if issues:
        for issue in issues:
            logger.warning("Rejected input: %s", issue.message)
        return ValidationResult(query=None, issues=issues)
    assert sun_size is not None and lat is not None and lng is not None
    return ValidationResult(
        query=SolarSystemQuery(center=GeoPoint(lat, lng), sun_size_m=sun_size)
    )


def geocode_place(place: str) -> GeoPoint:
    """Resolve a place name to a GeoPoint with the Nominatim (OpenStreetMap) geocoder.

    Raises:
        GeocodingError: On HTTP failure or when the place cannot be found.
    """
    params = {"q": place, "format": "json", "limit": 1}
    headers = {
        "User-Agent": "AnywhereSolarSystem/1.0 (https://github.com/alexdunae/anywhere-solar-system)"
    }
    try:
        resp = httpx.get(
            "https://nominatim.openstreetmap.org/search",
            params=params,
            headers=headers,
            timeout=10,
        )
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise GeocodingError(f"Geocoder request failed: {exc}") from exc
    results = resp.json()
    if not results:
        raise GeocodingError(f"Place not found: {place}")
    r = results[0]
    return GeoPoint(float(r["lat"]), float(r["lon"]))


def run(
    query: QueryInput,
    points: int | None = None,
    corrected: bool | None = None,
) -> SolarSystemData:
    """Top-level entry point: takes a QueryInput and returns a SolarSystemData.

    Args:
        query: Raw user input.
        points: Ring segment count. Defaults to ``config.get_ring_points()``.
        corrected: Projector selection. Defaults to
            ``config.use_corrected_projection()``.

    Returns:
        Fully computed SolarSystemData.

    Raises:
        QueryValidationError: When any input is malformed or out of range.
        ProjectionError: When a ring point cannot be projected.
    """
    result = validate_query(query)
    if not result.ok:
        raise QueryValidationError(result.issues)
    assert result.query is not None
    if points is None:
        points = config.get_ring_points()
    if corrected is None:
        corrected = config.use_corrected_projection()
    validated = result.query
    placemarks = build_placemarks(
        validated.center, validated.sun_size_m, points=points, corrected=corrected
    )
    return SolarSystemData(
        query=validated,
        ratio=compute_ratio(validated.sun_size_m),
        placemarks=placemarks,
        corrected_projection=corrected,
    )
