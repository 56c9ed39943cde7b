"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from anywheresolarsystem import cli
from anywheresolarsystem.compute import GeocodingError
from anywheresolarsystem.models import GeoPoint


def test_cli_prints_summary(capsys: pytest.CaptureFixture[str]) -> None:
    """Without output flags the summary table is printed."""
    assert cli.main(["--sun-size", "1"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].split() == ["Sun", "1.0m", "0m"]
    assert "Neptune" in out


def test_cli_writes_kml(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """--kml writes the KML document."""
    target = tmp_path / "model.kml"
    assert cli.main(["--sun-size", "2", "--kml", str(target)]) == 0
    assert target.read_text(encoding="utf-8").count("<Placemark>") == 9
    assert f"Saved: {target}" in capsys.readouterr().out


def test_cli_writes_png(tmp_path: Path) -> None:
    """--png writes the static chart."""
    target = tmp_path / "model.png"
    assert cli.main(["--points", "10", "--png", str(target)]) == 0
    assert target.exists()


def test_cli_rejects_out_of_range(capsys: pytest.CaptureFixture[str]) -> None:
    """Validation failures exit with status 2."""
    assert cli.main(["--sun-size", "500.01", "--latitude", "95"]) == 2
    err = capsys.readouterr().err
    assert "sun_size out of range" in err
    assert "latitude out of range" in err


def test_cli_projection_failure(capsys: pytest.CaptureFixture[str]) -> None:
    """A pole-centred model exits with status 1 and names the body."""
    assert cli.main(["--latitude", "90", "--longitude", "0"]) == 1
    assert "Mercury" in capsys.readouterr().err


def test_cli_corrected_projection_at_equator(capsys: pytest.CaptureFixture[str]) -> None:
    """--corrected builds the model with the latitude-scaled projector."""
    assert cli.main(["--corrected", "--latitude", "0", "--longitude", "0"]) == 0


def test_cli_place_lookup(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """--place replaces the centre with the geocoded point."""
    looked_up: list[str] = []

    def _fake_geocode(place: str) -> GeoPoint:
        looked_up.append(place)
        return GeoPoint(59.3293, 18.0686)

    monkeypatch.setattr(cli, "geocode_place", _fake_geocode)
    target = tmp_path / "stockholm.kml"
    assert cli.main(["--place", "Stockholm", "--kml", str(target)]) == 0
    assert looked_up == ["Stockholm"]
    assert "18.0686,59.3293,0" in target.read_text(encoding="utf-8")


def test_cli_place_not_found(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Geocoding failures exit with status 1."""

    def _fail(place: str) -> GeoPoint:
        raise GeocodingError(f"Place not found: {place}")

    monkeypatch.setattr(cli, "geocode_place", _fail)
    assert cli.main(["--place", "Atlantis"]) == 1
    assert "Place not found: Atlantis" in capsys.readouterr().err


@pytest.mark.parametrize("points", ["0", "-5", "ten"])
def test_cli_rejects_invalid_points(
    points: str, capsys: pytest.CaptureFixture[str]
) -> None:
    """--points below 1 or non-integer is a usage error with status 2."""
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--points", points])
    assert excinfo.value.code == 2
    assert "--points" in capsys.readouterr().err


def test_cli_rejects_invalid_ring_points_env(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """A malformed SOLAR_SYSTEM_RING_POINTS exits with status 2."""
    monkeypatch.setenv("SOLAR_SYSTEM_RING_POINTS", "many")
    assert cli.main([]) == 2
    assert "error:" in capsys.readouterr().err


def test_cli_points_flag_overrides_invalid_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """An explicit --points wins over a broken environment value."""
    monkeypatch.setenv("SOLAR_SYSTEM_RING_POINTS", "0")
    target = tmp_path / "model.kml"
    assert cli.main(["--points", "4", "--kml", str(target)]) == 0
    assert target.exists()
