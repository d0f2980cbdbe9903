"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from nac_tco.app.api.routes import api_bp
from nac_tco.config import Settings, get_settings
from nac_tco.domain.reference_data import get_reference_store
from nac_tco.logging_config import setup_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    logger = setup_logging("nac_tco", settings.log_level, settings.log_format)

    app = Flask(__name__)
    app.extensions["nac_tco.settings"] = settings
    app.extensions["nac_tco.reference_store"] = get_reference_store()

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins_list}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("TCO API ready (reference vendor: %s)", settings.reference_vendor)
    return app
