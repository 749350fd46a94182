"""Tests for the HTTP API and the CLI."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from geo_bounds import morton
from geo_bounds.bounding_box import compute_bounding_box
from geo_bounds.cli import cli
from geo_bounds.web import create_app


# ── HTTP API ─────────────────────────────────────────────────────────────


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


class TestWeb:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.get_json() == {"status": "ok"}

    def test_geo_bounds(self, client):
        resp = client.get("/geo_bounds?lat=37.7749295&lon=-122.4194155&radius=100")
        assert resp.status_code == 200
        feature = resp.get_json()
        box = compute_bounding_box(37.7749295, -122.4194155, 100)
        assert feature["type"] == "Feature"
        assert feature["bbox"] == [box.west, box.south, box.east, box.north]
        assert feature["geometry"]["coordinates"][0][0] == [box.west, box.south]

    def test_geo_bounds_out_of_range(self, client):
        resp = client.get("/geo_bounds?lat=91&lon=0&radius=1")
        assert resp.status_code == 400
        assert "latitude" in resp.get_json()["error"]

    def test_geo_bounds_missing_param(self, client):
        resp = client.get("/geo_bounds?lat=10&lon=20")
        assert resp.status_code == 400
        assert "radius" in resp.get_json()["error"]

    def test_geo_bounds_not_a_number(self, client):
        resp = client.get("/geo_bounds?lat=abc&lon=20&radius=1")
        assert resp.status_code == 400
        assert "lat" in resp.get_json()["error"]

    @pytest.mark.parametrize("radius", ["inf", "-inf", "nan"])
    def test_geo_bounds_non_finite_radius(self, client, radius):
        resp = client.get(f"/geo_bounds?lat=0&lon=0&radius={radius}")
        assert resp.status_code == 400
        assert "radius" in resp.get_json()["error"]

    def test_morton(self, client):
        resp = client.get("/morton?lat=0&lon=0")
        assert resp.status_code == 200
        assert resp.get_json()["code"] == morton.encode(0, 0)

    def test_morton_out_of_range(self, client):
        resp = client.get("/morton?lat=0&lon=181")
        assert resp.status_code == 400


# ── CLI ──────────────────────────────────────────────────────────────────


class TestCLI:
    def test_bbox_geojson(self):
        runner = CliRunner()
        result = runner.invoke(cli, [
            "bbox", "--lat", "37.7749295", "--lon=-122.4194155", "--radius", "1", "--geojson",
        ])
        assert result.exit_code == 0, result.output
        feature = json.loads(result.output)
        west, south, east, north = feature["bbox"]
        assert south == pytest.approx(37.768570, abs=1e-6)
        assert east == pytest.approx(-122.411370, abs=1e-6)

    def test_bbox_table(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["bbox", "--lat", "0", "--lon", "0", "--radius", "10"])
        assert result.exit_code == 0, result.output
        assert "sw" in result.output
        assert "ne" in result.output

    def test_bbox_out_of_range(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["bbox", "--lat", "91", "--lon", "0", "--radius", "1"])
        assert result.exit_code == 2
        assert "latitude" in result.output

    @pytest.mark.parametrize("radius", ["inf", "nan"])
    def test_bbox_non_finite_radius(self, radius):
        runner = CliRunner()
        result = runner.invoke(cli, ["bbox", "--lat", "0", "--lon", "0", "--radius", radius])
        assert result.exit_code == 2
        assert "radius must be finite" in result.output

    def test_encode_decode(self):
        runner = CliRunner()
        encoded = runner.invoke(cli, ["encode", "--lat", "0", "--lon", "0"])
        assert encoded.exit_code == 0, encoded.output
        code = int(encoded.output.strip())
        assert code == morton.encode(0, 0)

        decoded = runner.invoke(cli, ["decode", str(code)])
        assert decoded.exit_code == 0, decoded.output
        assert decoded.output.split() == ["0.0000000", "0.0000000"]

    def test_decode_rejects_negative(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["decode", "--", "-1"])
        assert result.exit_code == 2

    def test_distance(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["distance", "4", "1"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "1"

    def test_demo_single_center(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["demo", "--center", "san-francisco"])
        assert result.exit_code == 0, result.output
        assert "san-francisco" in result.output

    def test_demo_all_centers(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0, result.output


# ── Config ───────────────────────────────────────────────────────────────


class TestConfig:
    def test_sample_centers_are_frozen(self):
        from dataclasses import FrozenInstanceError

        from geo_bounds.config import SAMPLE_CENTERS

        with pytest.raises(FrozenInstanceError):
            SAMPLE_CENTERS[0].latitude = 0.0

    def test_sample_center_names_unique(self):
        from geo_bounds.config import SAMPLE_CENTERS

        names = [c.name for c in SAMPLE_CENTERS]
        assert len(names) == len(set(names))
