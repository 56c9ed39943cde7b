"""Tests for the Nominatim place geocoder (HTTP calls monkeypatched)."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from anywheresolarsystem.compute import GeocodingError, geocode_place
from anywheresolarsystem.models import GeoPoint


class _FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("GET", "https://nominatim.openstreetmap.org/search")
            raise httpx.HTTPStatusError(
                "server error",
                request=request,
                response=httpx.Response(self.status_code, request=request),
            )

    def json(self) -> Any:
        return self._payload


def test_geocode_place_returns_first_result(monkeypatch: pytest.MonkeyPatch) -> None:
    """The first search hit becomes the centre point."""
    captured: dict[str, Any] = {}

    def _fake_get(url, params=None, headers=None, timeout=None):  # type: ignore[no-untyped-def]
        captured.update(url=url, params=params, headers=headers, timeout=timeout)
        return _FakeResponse([{"lat": "59.3293", "lon": "18.0686", "display_name": "Stockholm"}])

    monkeypatch.setattr(httpx, "get", _fake_get)
    assert geocode_place("Stockholm") == GeoPoint(59.3293, 18.0686)
    assert captured["params"] == {"q": "Stockholm", "format": "json", "limit": 1}
    assert "User-Agent" in captured["headers"]
    assert captured["timeout"] == 10


def test_geocode_place_not_found(monkeypatch: pytest.MonkeyPatch) -> None:
    """An empty result list is a GeocodingError."""
    monkeypatch.setattr(httpx, "get", lambda *a, **k: _FakeResponse([]))
    with pytest.raises(GeocodingError, match="Place not found"):
        geocode_place("Nowhere at all")


def test_geocode_place_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """HTTP status failures are wrapped in GeocodingError."""
    monkeypatch.setattr(httpx, "get", lambda *a, **k: _FakeResponse([], status_code=503))
    with pytest.raises(GeocodingError, match="request failed"):
        geocode_place("Stockholm")


def test_geocode_place_connection_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Transport failures are wrapped in GeocodingError."""

    def _fail(*args, **kwargs):  # type: ignore[no-untyped-def]
        raise httpx.ConnectError("unreachable")

    monkeypatch.setattr(httpx, "get", _fail)
    with pytest.raises(GeocodingError):
        geocode_place("Stockholm")
