"""
Flask Application Factory - HR Recruiting Dashboard API

Serves aggregated chart data for the HR dashboard:
- JWT session authentication (Authorization header or session cookie)
- Role-based access (HR sees own jobs, ADMIN sees all)
- In-process aggregation over profiles, jobs and applications
"""

import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from flask_migrate import Migrate

from models.database import db

# Initialize Flask-Migrate (bound in create_app)
migrate = Migrate()


def _configure_logging(app):
    level_name = os.environ.get('LOG_LEVEL', 'DEBUG' if app.debug else 'INFO').upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def create_app(config_object=None):
    app = Flask(__name__)
    if config_object is None:
        from config import Config
        config_object = Config
    app.config.from_object(config_object)

    _configure_logging(app)

    CORS(app,
         resources={r"/api/*": {"origins": os.environ.get("CORS_ORIGINS", "*").split(",")}},
         methods=["GET", "OPTIONS"],
         allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
         expose_headers=["X-Request-ID"],
         supports_credentials=False)

    # === MIDDLEWARE ===
    from api.middleware import (
        setup_request_id_middleware,
        setup_request_logging_middleware,
        setup_error_handlers,
    )
    setup_request_id_middleware(app)
    setup_request_logging_middleware(app)
    setup_error_handlers(app)

    db.init_app(app)
    migrate.init_app(app, db)

    with app.app_context():
        # Import all models so metadata is complete for create_all / migrations
        from models import Profile, Job, Application  # noqa: F401

        env = (os.environ.get("ENV") or os.environ.get("FLASK_ENV") or os.environ.get("APP_ENV") or "").lower()
        is_prod = env in {"prod", "production"}
        if app.config.get("TESTING") or not is_prod:
            db.create_all()

    # Register routes
    from routes.auth import auth_bp
    app.register_blueprint(auth_bp, url_prefix='/api/auth')

    from routes.hr_dashboard import hr_dashboard_bp
    app.register_blueprint(hr_dashboard_bp, url_prefix='/api/hr/dashboard')

    @app.route("/api/ping", methods=["GET"])
    def ping():
        """Liveness check - no DB required."""
        return jsonify({"ok": True})

    return app


def run_app():
    """Main entry point for local development."""
    app = create_app()
    app.run(debug=app.config.get("DEBUG", False), host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))


if __name__ == "__main__":
    run_app()
