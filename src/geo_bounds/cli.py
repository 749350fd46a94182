"""CLI entrypoint for geo-bounds."""

from __future__ import annotations

import json
import math

import click
from rich.console import Console
from rich.table import Table

from geo_bounds import morton
from geo_bounds.bounding_box import compute_bounding_box
from geo_bounds.config import DEMO_RADII_KM, PORT, SAMPLE_CENTERS, configure_logging
from geo_bounds.geo import OutOfRangeError

console = Console()


def _bad_input(exc: OutOfRangeError) -> click.BadParameter:
    return click.BadParameter(str(exc), param_hint=f"--{exc.field[:3]}")


@click.group()
@click.option("--log-level", default=None, help="Override GEO_BOUNDS_LOG_LEVEL.")
def cli(log_level: str | None):
    """Geo Bounds: bounding boxes and Morton codes for lat/lon points."""
    configure_logging(log_level)


@cli.command()
@click.option("--lat", required=True, type=float, help="Center latitude in degrees.")
@click.option("--lon", required=True, type=float, help="Center longitude in degrees.")
@click.option("--radius", required=True, type=float, help="Radius in kilometers.")
@click.option("--geojson", is_flag=True, help="Print a GeoJSON Feature instead of a table.")
def bbox(lat: float, lon: float, radius: float, geojson: bool):
    """Bounding box around a center point."""
    if not math.isfinite(radius):
        raise click.BadParameter(f"radius must be finite, got {radius}", param_hint="--radius")
    try:
        box = compute_bounding_box(lat, lon, radius)
    except OutOfRangeError as exc:
        raise _bad_input(exc) from exc

    if geojson:
        click.echo(json.dumps(box.to_geojson(), indent=2))
        return

    table = Table(title=f"Bounding box ({lat:.7f}, {lon:.7f}) r={radius:g} km")
    table.add_column("Corner", style="bold")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    table.add_row("sw", f"{box.south:.7f}", f"{box.west:.7f}")
    table.add_row("ne", f"{box.north:.7f}", f"{box.east:.7f}")
    console.print(table)
    if box.crosses_antimeridian:
        console.print("[yellow]box spans the 180th meridian (west > east)[/]")


@cli.command()
@click.option("--lat", required=True, type=float, help="Latitude in degrees.")
@click.option("--lon", required=True, type=float, help="Longitude in degrees.")
def encode(lat: float, lon: float):
    """Morton code for a coordinate."""
    try:
        code = morton.encode(lat, lon)
    except OutOfRangeError as exc:
        raise _bad_input(exc) from exc
    click.echo(code)


@cli.command()
@click.argument("code", type=click.IntRange(0, morton.UINT64_MASK))
def decode(code: int):
    """Coordinate for a Morton code."""
    point = morton.decode(code)
    click.echo(f"{point.latitude:.7f} {point.longitude:.7f}")


@cli.command()
@click.argument("code_a", type=click.IntRange(0, morton.UINT64_MASK))
@click.argument("code_b", type=click.IntRange(0, morton.UINT64_MASK))
def distance(code_a: int, code_b: int):
    """Bit-plane Morton distance between two codes (not a metric distance)."""
    click.echo(morton.distance(code_a, code_b))


def _build_demo_table(name: str, lat: float, lon: float, radius: float) -> Table:
    table = Table(title=f"{name}: radius {radius:8.3f} km")
    table.add_column("Corner", style="bold")
    table.add_column("Latitude", justify="right")
    table.add_column("Longitude", justify="right")
    table.add_column("Morton #", justify="right")
    table.add_column("Distance to center", justify="right")

    center_code = morton.encode(lat, lon)
    box = compute_bounding_box(lat, lon, radius)
    sw_code = morton.encode(box.south, box.west)
    ne_code = morton.encode(box.north, box.east)

    table.add_row("sw", f"{box.south:11.7f}", f"{box.west:12.7f}",
                  str(sw_code), str(morton.distance(sw_code, center_code)))
    table.add_row("center", f"{lat:11.7f}", f"{lon:12.7f}", str(center_code), "")
    table.add_row("ne", f"{box.north:11.7f}", f"{box.east:12.7f}",
                  str(ne_code), str(morton.distance(center_code, ne_code)))
    return table


@cli.command()
@click.option("--center", "centers", multiple=True,
              type=click.Choice([c.name for c in SAMPLE_CENTERS]),
              help="Sample center to show (repeatable). Defaults to all.")
def demo(centers: tuple[str, ...]):
    """Reference table: boxes from 0.01 km to 1000 km around sample centers."""
    for sample in SAMPLE_CENTERS:
        if centers and sample.name not in centers:
            continue
        for radius in DEMO_RADII_KM:
            try:
                table = _build_demo_table(sample.name, sample.latitude, sample.longitude, radius)
            except OutOfRangeError as exc:
                console.print(
                    f"[red]Error for ({sample.latitude:.7f}, {sample.longitude:.7f}) "
                    f"with distance {radius:.7f} km: {exc}[/]"
                )
                continue
            console.print(table)


@cli.command("web")
@click.option("--port", default=None, type=int, help="HTTP port (defaults to PORT).")
def web(port: int | None):
    """Serve the bounding-box HTTP API."""
    from geo_bounds.web import create_app

    create_app().run(host="0.0.0.0", port=port or PORT, debug=False)
