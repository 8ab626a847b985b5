"""What-If Financial Planner Flask Application Factory."""

import logging
from typing import Optional

from flask import Flask

from whatif.config import get_global_settings


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_name: Configuration name (development, testing, production)

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = get_global_settings()
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["ENV"] = config_name or settings.app_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.config["DEFAULT_INVESTMENT_RETURN_RATE"] = (
        settings.default_investment_return_rate
    )

    logging.basicConfig(level=settings.log_level)

    # Register blueprints
    from whatif.blueprints.health import health_bp
    from whatif.blueprints.what_if import what_if_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(what_if_bp)

    return app
