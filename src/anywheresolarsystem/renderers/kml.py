"""KML 2.2 renderer.

Each placemark becomes a ``<LineString>`` whose ``<coordinates>`` are
space-separated ``lon,lat,0`` triplets, ready for Google Earth or a
Google Maps KmlLayer.
"""

from __future__ import annotations

from html import escape

from anywheresolarsystem.models import Placemark, SolarSystemData

_DOCUMENT_NAME = "Anywhere Solar System"
_LINE_COLOR = "ff0000ff"  # aabbggrr


def _coordinates(placemark: Placemark) -> str:
    return " ".join(f"{p.longitude},{p.latitude},0" for p in placemark.ring)


def kml_placemark(placemark: Placemark) -> str:
    """Return the ``<Placemark>`` element for one body."""
    name = escape(placemark.name)
    return f"""    <Placemark>
      <name>{name}</name>
      <description>{name} body radius is {placemark.body_radius_m}m</description>
      <visibility>1</visibility>
      <Style>
        <LineStyle>
          <color>{_LINE_COLOR}</color>
          <width>1</width>
        </LineStyle>
      </Style>
      <LineString>
        <coordinates>
          {_coordinates(placemark)}
        </coordinates>
      </LineString>
    </Placemark>"""


def generate_kml(data: SolarSystemData) -> str:
    """Render SolarSystemData as a KML document string.

    Args:
        data: Fully computed scale model.

    Returns:
        UTF-8 KML text, one Placemark per body in catalog order.
    """
    body = "\n".join(kml_placemark(p) for p in data.placemarks)
    xml = f"""<?xml version="1.0" encoding="UTF-8"?>
<kml xmlns="http://www.opengis.net/kml/2.2">
  <Folder>
    <name>{_DOCUMENT_NAME}</name>
    <visibility>1</visibility>
{body}
  </Folder>
</kml>"""
    return xml.strip()
