"""Application factory and blueprint registration."""
from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from loguru import logger

from .config import BaseConfig
from .db.session import db
from .api.health.routes import bp as health_bp
from .api.papers.routes import bp as papers_bp
from .api.topics.routes import bp as topics_bp
from .docs.routes import bp as docs_bp
from .errors import register_error_handlers
from .integrations.supabase_client import supabase_ext
from .log import configure_logging


def create_app(config: BaseConfig | None = None) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config or BaseConfig())
    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    origins = [o.strip() for o in app.config["CORS_ORIGINS"].split(",") if o.strip()]
    CORS(app, resources={r"/api/*": {"origins": origins}})

    # Init extensions
    if app.config["PAPER_REPO_BACKEND"].lower() == "sqlalchemy":
        db.init_app(app)
    supabase_ext.init_app(app)

    # Register blueprints
    app.register_blueprint(health_bp, url_prefix="/api/health")
    app.register_blueprint(topics_bp, url_prefix="/api/topics")
    app.register_blueprint(papers_bp, url_prefix="/api/papers")
    app.register_blueprint(docs_bp)

    # Global error handlers
    register_error_handlers(app)
    logger.info("app created with {} paper store", app.config["PAPER_REPO_BACKEND"])
    return app
