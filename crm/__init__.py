"""Flask application factory.

Creates and configures the Flask app, opens the database engine, wires the
customer query facade → repository → service graph, and registers the API
namespace and error handlers.
"""

import logging
import os

from flask import Flask
from flask_restx import Api

from crm.config.settings import CONFIG_MAP
from crm.domain.exceptions import AppError, ConfigurationError
from crm.extensions import db
from crm.schemas.response import error_response


def create_app(config_name: str | None = None) -> Flask:
    """Build and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', 'production'.
                     Defaults to the FLASK_ENV environment variable.

    Raises:
        ConfigurationError: Unknown environment or no database URL.
        sqlalchemy.exc.OperationalError: The database is unreachable.
    """
    app = Flask(__name__)

    # --- Configuration ---
    config_name = config_name or os.getenv("FLASK_ENV", "development")
    if config_name not in CONFIG_MAP:
        raise ConfigurationError(f"unknown configuration '{config_name}'")
    app.config.from_object(CONFIG_MAP[config_name])
    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        raise ConfigurationError("DATABASE_URL is not set")

    # --- Logging ---
    logging.basicConfig(
        level=str(app.config["LOG_LEVEL"]).upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # --- Extensions ---
    db.init_app(app)

    # --- Dependency graph ---
    _wire_services(app)

    # Opens the pool; an unreachable database fails here.
    with app.app_context():
        db.create_all()

    # --- API ---
    api = Api(
        app,
        title="Customer Management System",
        version="1.0",
        description="CRUD API for customer records",
        doc="/docs",
    )

    from crm.api.customers import ns as customers_ns

    api.add_namespace(customers_ns, path="/")

    # --- Global error handlers ---
    _register_error_handlers(app)

    logging.getLogger(__name__).info("Application ready (config=%s)", config_name)
    return app


def _wire_services(app: Flask) -> None:
    """Build the customer service once and attach it to the app."""
    from crm.repositories.customer_repository import new_customer_repository
    from crm.repositories.queries import CustomerQueries
    from crm.services.customer_service import CustomerService

    queries = CustomerQueries(db.session)
    repository = new_customer_repository(queries)
    app.extensions["customer_service"] = CustomerService(repository)


def _register_error_handlers(app: Flask) -> None:
    """Map application exceptions to JSON responses."""

    @app.errorhandler(AppError)
    def handle_app_error(error: AppError):
        return error_response(error.message, error.error_code, error.status_code)

    @app.errorhandler(404)
    def handle_not_found(_error):
        return error_response("Resource not found", "NOT_FOUND", 404)

    @app.errorhandler(500)
    def handle_internal(_error):
        logging.getLogger(__name__).exception("Unhandled server error")
        return error_response("Internal server error", "INTERNAL_ERROR", 500)
