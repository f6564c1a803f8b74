# config.py
"""GTIN Case Code - Flask Application configuration."""

# Python imports
from os import environ, path

# Third-party imports
from dotenv import load_dotenv

# Local imports

# Load environment variables from .env file
basedir = path.abspath(path.dirname(__file__))
load_dotenv(path.join(basedir, ".env"))


class Config:
    """Base config."""

    SECRET_KEY = environ.get("SECRET_KEY")

    # Default persistence location for local dev.
    GTIN_CASE_CODE_FOLDER = environ.get("GTIN_CASE_CODE_FOLDER") or path.join(basedir, "gtin_data")
    GTIN_CASE_CODE_DB_FILE_NAME = environ.get("GTIN_CASE_CODE_DB_FILE_NAME") or "gtin.sqlite"
    GTIN_CASE_CODE_LOG_FILE = (
        environ.get("GTIN_CASE_CODE_LOG_FILE")
        or path.join(GTIN_CASE_CODE_FOLDER, "gtin_case_code.log")
    )

    # Optional server database (MySQL, PostgreSQL, ...) instead of the SQLite file.
    DATABASE_URL = environ.get("DATABASE_URL")

    # Width of the GTIN column; 11 digits gives a 14 digit master case code.
    GTIN_MAX_LENGTH = int(environ.get("GTIN_MAX_LENGTH") or 11)


class ProdConfig(Config):
    """Production System Configuration"""

    FLASK_ENV = "production"
    DEBUG = False
    TESTING = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,  # Test connections before using them
        "pool_recycle": 3600,   # Recycle connections after 1 hour
    }


class DevConfig(Config):
    """Development System Configuration"""

    FLASK_ENV = "development"
    DEBUG = True
    TESTING = True
