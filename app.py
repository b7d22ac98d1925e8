import logging
import os

from flask import Flask, current_app

import tmdb_api as tapi
from catalog_core.errors import install_error_handlers
from catalog_core.logging_config import configure_logging
from catalog_core.metrics import metrics_bp
from catalog_core.query_utils import DEFAULT_GENRES
from catalog_core.api import api_bp
from catalog_core.web import web_bp

logger = logging.getLogger(__name__)


def create_app(test_config=None, tmdb=None):
    app = Flask(__name__, static_folder="static", template_folder="templates")

    # Load env config
    app.config["SECRET_KEY"] = os.getenv("SECRET_KEY", "dev-secret")
    app.config["TMDB_BEARER_TOKEN"] = os.getenv("TMDB_BEARER_TOKEN") or os.getenv("TMDB_TOKEN")
    app.config["TMDB_BASE_URL"] = os.getenv("TMDB_BASE_URL", tapi.TMDB_BASE)
    app.config["TMDB_TIMEOUT"] = float(os.getenv("TMDB_TIMEOUT", 15))
    app.config["POPULAR_LIMIT"] = int(os.getenv("POPULAR_LIMIT", 30))
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO")
    app.config["GENRES"] = dict(DEFAULT_GENRES)
    if test_config:
        app.config.update(test_config)

    configure_logging(app.config["LOG_LEVEL"])

    if tmdb is None:
        if not app.config["TMDB_BEARER_TOKEN"]:
            logger.warning("TMDB_BEARER_TOKEN not set; upstream calls will be rejected")
        tmdb = tapi.TMDBClient(
            app.config["TMDB_BEARER_TOKEN"],
            base_url=app.config["TMDB_BASE_URL"],
            timeout=app.config["TMDB_TIMEOUT"],
        )
    app.extensions["tmdb"] = tmdb

    install_error_handlers(app)

    # HEALTH CHECK ENDPOINT
    @app.route("/health")
    def health():
        """
        Basic health endpoint for monitoring.
        Does not call TMDB; only reports whether a token is configured.
        """
        return {"status": "ok", "tmdb_configured": bool(current_app.config["TMDB_BEARER_TOKEN"])}

    # Register blueprints
    app.register_blueprint(metrics_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(web_bp)

    return app


app = create_app()

# Development only
if __name__ == "__main__":
    port = int(os.getenv("PORT", 8000))
    app.run(host="0.0.0.0", port=port, debug=True)
