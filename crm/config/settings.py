"""Application configuration classes.

Supports multiple environments via class inheritance. Values come from the
environment; a ``.env`` file at the project root is loaded first if present.
DATABASE_URL wins over the individual DB_* variables.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

load_dotenv(PROJECT_ROOT / ".env")


def database_url(default: str = "") -> str:
    """Resolve the database URL from the environment.

    Falls back to a PostgreSQL URL assembled from DB_HOST, DB_PORT,
    DB_NAME, DB_USER and DB_PASSWORD when DATABASE_URL is unset, and to
    ``default`` when neither is available.
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    host = os.getenv("DB_HOST")
    name = os.getenv("DB_NAME")
    if not (host and name):
        return default

    user = os.getenv("DB_USER", "")
    password = os.getenv("DB_PASSWORD", "")
    port = os.getenv("DB_PORT", "5432")
    credentials = f"{user}:{password}@" if password else (f"{user}@" if user else "")
    return f"postgresql+psycopg://{credentials}{host}:{port}/{name}"


class BaseConfig:
    """Base configuration shared across all environments."""

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    RESTX_MASK_SWAGGER = False
    # Embed raw storage error text in list failures.
    EXPOSE_ERROR_DETAILS = True

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8080"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class DevelopmentConfig(BaseConfig):
    """Development configuration — SQLite fallback for local testing."""

    DEBUG = True
    SQLALCHEMY_DATABASE_URI = database_url("sqlite:///dev.db")


class TestingConfig(BaseConfig):
    """Testing configuration — in-memory SQLite for fast tests."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"


class ProductionConfig(BaseConfig):
    """Production configuration — requires a database URL."""

    DEBUG = False
    EXPOSE_ERROR_DETAILS = False
    SQLALCHEMY_DATABASE_URI = database_url()


CONFIG_MAP = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
