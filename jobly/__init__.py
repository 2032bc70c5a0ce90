import logging

from flask import Flask

from config import Config
from .errors import ConfigurationError, register_error_handlers, register_jwt_callbacks
from .extensions import bcrypt, cors, jwt
from .lifecycle import Lifecycle
from .routes.auth_routes import auth_bp
from .routes.job_routes import jobs_bp
from .routes.application_routes import applications_bp


def create_app(config_object=Config, db_file=None):
    app = Flask(__name__)
    app.config.from_object(config_object)
    if db_file is not None:
        app.config["DB_FILE"] = db_file

    configure_logging(app)

    if not app.config.get("JWT_SECRET_KEY"):
        raise ConfigurationError("JWT_SECRET_KEY (or SECRET_KEY) must be set")

    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    # extensions initialization
    jwt.init_app(app)
    bcrypt.init_app(app)
    register_jwt_callbacks(jwt)
    register_error_handlers(app)

    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(jobs_bp, url_prefix="/api")
    app.register_blueprint(applications_bp, url_prefix="/api")

    # database is ready before the first request is served
    Lifecycle(app)

    return app


def configure_logging(app):
    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
