"""Main application module for Competitor Pulse."""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from api_routes import register_routes
from app_utils import configure_logging

load_dotenv(os.getenv("PULSE_DOTENV", ".env"))
configure_logging()

logger = logging.getLogger("competitorpulse")

DEFAULT_PORT = 3001
DEFAULT_HOST = "127.0.0.1"


def create_app() -> Flask:
    flask_app = Flask(__name__)
    # Any origin may read the API; it only exposes GET endpoints.
    CORS(flask_app, origins="*", methods=["GET"], allow_headers=["Content-Type"])
    register_routes(flask_app)
    return flask_app


app = create_app()

__all__ = ["app", "create_app"]
