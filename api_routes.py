"""API routes for Competitor Pulse."""
from __future__ import annotations

import logging

from flask import jsonify

import pulse
from pulse.report import failure_envelope, health_payload, success_envelope

logger = logging.getLogger("competitorpulse")


def register_routes(app):
    """Register all API routes with the Flask app.

    Args:
        app: Flask app instance.
    """

    @app.route("/api/analyze", methods=["GET"])
    def api_analyze():
        """Run a full competitor snapshot and return it as JSON."""
        logger.info("Received request for competitor analysis")
        try:
            data = pulse.analyze()
            logger.info(
                "Generated analysis with %d posts and %d insights",
                data["totalPosts"],
                len(data["insights"]),
            )
            return jsonify(success_envelope(data))
        except Exception as exc:
            logger.error("Analysis error: %s", exc, exc_info=True)
            return jsonify(failure_envelope()), 500

    @app.route("/health", methods=["GET"])
    def health():
        """Liveness probe."""
        return jsonify(health_payload())
