# app.py

import os
os.environ.setdefault("FLASK_APP", __name__)

import logging

# Flask
from flask import Flask, jsonify

from extensions import db, migrate

# Import Models (registers every table on db.metadata)
import models  # noqa: F401

# SQLite connection pragmas
import config.database  # noqa: F401

# Import Blueprints
from routes.home import home_bp
from routes.catalog import device_types_bp, brands_bp, repairs_bp
from routes.device_models import models_bp
from routes.price_list import price_list_bp
from routes.fixpoints import fixpoints_bp
from routes.quotes import quotes_bp
from routes.stats import stats_bp

from controllers.errors import FixpointError

# Import Configurations
from config.settings import Config, PORT


def register_error_handlers(app):
    @app.errorhandler(FixpointError)
    def handle_fixpoint_error(exc):
        if exc.status_code >= 500:
            app.logger.error("Request failed: %s", exc.message)
        else:
            app.logger.info("Request rejected (%s): %s", exc.status_code, exc.message)
        return jsonify(exc.to_dict()), exc.status_code


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO))

    # Bind database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    with app.app_context():
        db.create_all()
    app.logger.info("Database ready ✅ (%s)", app.config["SQLALCHEMY_DATABASE_URI"])

    register_error_handlers(app)

    # Register Blueprints
    app.register_blueprint(home_bp)
    app.register_blueprint(device_types_bp)
    app.register_blueprint(brands_bp)
    app.register_blueprint(repairs_bp)
    app.register_blueprint(models_bp)
    app.register_blueprint(price_list_bp)
    app.register_blueprint(fixpoints_bp)
    app.register_blueprint(quotes_bp)
    app.register_blueprint(stats_bp)

    return app

if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=PORT)
