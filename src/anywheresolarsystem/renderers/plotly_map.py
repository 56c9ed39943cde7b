"""Plotly interactive map renderer.

Draws every orbit ring as a line on an OpenStreetMap tile layer
(``go.Scattermap``, MapLibre-based, no access token required).
Supports wheel zoom and drag panning.
"""

import math

import numpy as np
import plotly.graph_objects as go

from anywheresolarsystem.formatting import m_to_human
from anywheresolarsystem.models import SolarSystemData

_SUN_COLOR = "#f5b700"
_RING_COLOR = "#d62728"
_MAP_STYLE = "open-street-map"

# Web Mercator ground resolution at zoom 0 on the equator (m/px, 256px tiles)
_METERS_PER_PIXEL_Z0 = 156543.03392


def _fit_zoom(radius_m: float, latitude: float, width_px: int) -> float:
    """Largest zoom at which a circle of ``radius_m`` fits inside ``width_px``."""
    if radius_m <= 0:
        return 18.0
    cos_lat = max(abs(math.cos(math.radians(latitude))), 0.01)
    # 20% margin around the outermost ring
    zoom = math.log2(_METERS_PER_PIXEL_Z0 * cos_lat * width_px / (2.4 * radius_m))
    return float(np.clip(zoom, 0.0, 18.0))


def render_map(data: SolarSystemData, width: int = 800, height: int = 600) -> go.Figure:
    """Render SolarSystemData as a Plotly map figure.

    Args:
        data: Fully computed scale model.
        width: Reference width in pixels, used to fit the zoom level.
        height: Figure height in pixels.

    Returns:
        Plotly Figure with one trace per body plus a centre marker.
    """
    traces: list[go.Scattermap] = []
    for placemark in data.placemarks:
        if placemark.orbit_distance_m == 0:
            continue
        label = (
            f"{placemark.name}: size {m_to_human(placemark.body_radius_m)}, "
            f"distance {m_to_human(placemark.orbit_distance_m)}"
        )
        traces.append(
            go.Scattermap(
                lat=[p.latitude for p in placemark.ring],
                lon=[p.longitude for p in placemark.ring],
                mode="lines",
                line=dict(color=_RING_COLOR, width=1.5),
                name=placemark.name,
                hoverinfo="text",
                text=label,
            )
        )

    center = data.query.center
    sun = data.placemarks[0] if data.placemarks else None
    traces.append(
        go.Scattermap(
            lat=[center.latitude],
            lon=[center.longitude],
            mode="markers",
            marker=dict(size=10, color=_SUN_COLOR),
            name=sun.name if sun else "Centre",
            hoverinfo="text",
            text=f"{sun.name}: size {m_to_human(sun.body_radius_m)}" if sun else "",
        )
    )

    outermost = max((p.orbit_distance_m for p in data.placemarks), default=0.0)
    fig = go.Figure(data=traces)
    fig.update_layout(
        map=dict(
            style=_MAP_STYLE,
            center=dict(lat=center.latitude, lon=center.longitude),
            zoom=_fit_zoom(outermost, center.latitude, width),
        ),
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        height=height,
    )
    return fig
