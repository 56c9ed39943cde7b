"""Human-readable length formatting for display tables and KML descriptions."""

from anywheresolarsystem.models import Placemark


def m_to_human(m: float) -> str:
    """Format a length in meters as km, m, or mm.

    Examples:
        >>> m_to_human(0)
        '0m'
        >>> m_to_human(1500)
        '1.5km'
        >>> m_to_human(0.0049)
        '4.9mm'
    """
    if m == 0:
        return "0m"
    if m >= 1000:
        return f"{round(m / 1000.0, 2)}km"
    # The Sun often lands on 0.9999999 m, so compare after rounding
    if round(m, 1) < 1:
        return f"{round(m * 1000.0, 1)}mm"
    return f"{round(m * 1.0, 1)}m"


def summary_rows(placemarks: tuple[Placemark, ...]) -> list[tuple[str, str, str]]:
    """Return (body, size, distance from centre) display rows in catalog order."""
    return [
        (p.name, m_to_human(p.body_radius_m), m_to_human(p.orbit_distance_m))
        for p in placemarks
    ]
