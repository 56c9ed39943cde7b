"""Matplotlib static PNG renderer."""

import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from anywheresolarsystem.models import SolarSystemData

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(data: SolarSystemData, chart_size: int = 10) -> Figure:
    """Render the orbit rings as a static matplotlib image in lon/lat degrees.

    The x axis is stretched by 1/cos(latitude) so circles stay round.

    Args:
        data: Fully computed scale model.
        chart_size: Output image size in inches.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size))
    fig.patch.set_facecolor("white")

    center = data.query.center
    for placemark in data.placemarks:
        if placemark.orbit_distance_m == 0:
            continue
        lons = np.array([p.longitude for p in placemark.ring])
        lats = np.array([p.latitude for p in placemark.ring])
        ax.plot(lons, lats, color="#d62728", linewidth=0.8)
        # Label at angle 0
        ax.annotate(placemark.name, (lons[0], lats[0]), fontsize=8, color="#333333")

    ax.scatter([center.longitude], [center.latitude], s=40, color="#f5b700", zorder=3)

    cos_lat = max(abs(math.cos(math.radians(center.latitude))), 0.01)
    ax.set_aspect(1 / cos_lat, adjustable="datalim")
    ax.set_xlabel("Longitude (°)")
    ax.set_ylabel("Latitude (°)")
    ax.set_title(f"Sun size {data.query.sun_size_m}m")
    ax.grid(True, linewidth=0.3, alpha=0.5)

    return fig


def save_static_chart(data: SolarSystemData, output_path: Path | None = None) -> Path:
    """Save SolarSystemData as a PNG file.

    Args:
        data: Fully computed scale model.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        q = data.query
        filename = (
            f"solar_system__{q.sun_size_m}m__{q.center.latitude}_{q.center.longitude}.png"
        )
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(data)
    fig.savefig(output_path, facecolor="white")
    plt.close(fig)
    return output_path
