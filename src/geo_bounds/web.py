"""HTTP API serving GeoJSON bounding boxes and Morton codes over Flask.

    GET /geo_bounds?lat=37.7749295&lon=-122.4194155&radius=100
"""

from __future__ import annotations

import logging
import math

from flask import Flask, jsonify, request

from geo_bounds import morton
from geo_bounds.bounding_box import compute_bounding_box
from geo_bounds.config import PORT, configure_logging
from geo_bounds.geo import OutOfRangeError

logger = logging.getLogger(__name__)


class MissingParameterError(ValueError):
    """Raised when a required query parameter is absent, not a number, or not finite."""


def _float_arg(name: str) -> float:
    raw = request.args.get(name)
    if raw is None or raw == "":
        raise MissingParameterError(f"missing query parameter '{name}'")
    try:
        value = float(raw)
    except ValueError:
        raise MissingParameterError(f"query parameter '{name}' is not a number: {raw!r}") from None
    if not math.isfinite(value):
        raise MissingParameterError(f"query parameter '{name}' must be finite: {raw!r}")
    return value


def create_app() -> Flask:
    app = Flask(__name__)

    @app.errorhandler(MissingParameterError)
    @app.errorhandler(OutOfRangeError)
    def bad_request(exc: ValueError):
        logger.warning("Rejected %s: %s", request.full_path, exc)
        return jsonify({"error": str(exc)}), 400

    @app.route("/geo_bounds", methods=["GET"])
    def geo_bounds():
        box = compute_bounding_box(_float_arg("lat"), _float_arg("lon"), _float_arg("radius"))
        return jsonify(box.to_geojson()), 200

    @app.route("/morton", methods=["GET"])
    def morton_code():
        code = morton.encode(_float_arg("lat"), _float_arg("lon"))
        return jsonify({"code": code}), 200

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"}), 200

    return app


if __name__ == "__main__":
    configure_logging()
    create_app().run(host="0.0.0.0", port=PORT, debug=False)
