import os

# Base directory for this backend project
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

default_sqlite_path = os.path.join(BASE_DIR, "splitbook.db")


class Config:
    """Default application settings, overridable through environment variables."""

    # Database configuration
    # Use DATABASE_URL if provided; otherwise default to a local SQLite file
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{default_sqlite_path}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # "sqlalchemy" persists through Flask-SQLAlchemy, "memory" keeps everything in-process
    SPLITBOOK_STORE = os.getenv("SPLITBOOK_STORE", "sqlalchemy")

    # All endpoints are mounted under this path
    API_PREFIX = os.getenv("API_PREFIX", "/api")

    PORT = int(os.getenv("PORT", "4000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # API and Swagger/OpenAPI configuration
    API_TITLE = "Splitbook API"
    API_VERSION = "v1"
    OPENAPI_VERSION = "3.0.3"
    OPENAPI_URL_PREFIX = "/docs"
    OPENAPI_SWAGGER_UI_PATH = ""
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"
