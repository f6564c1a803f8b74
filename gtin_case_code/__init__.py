# /__init__.py

# Python Imports
import os
import logging

# Third party imports
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from dotenv import load_dotenv

# Local imports

# Define the application object that hosts configuration and the database
app = Flask(__name__)

##################################
### Load Run Mode
### Configuration based
### on environment
### (Production, Development)
##################################
load_dotenv("./.env", verbose=True)
app.config.from_object(os.environ["APP_MODE"])


##################################
### Logging Setup
##################################
os.makedirs(app.config["GTIN_CASE_CODE_FOLDER"], exist_ok=True)
logging.basicConfig(
    filename=app.config["GTIN_CASE_CODE_LOG_FILE"],
    level=logging.INFO,
    format="%(asctime)s %(levelname)s : %(message)s",
)


##################################
### Database Setup
##################################
def database_uri(config):
    """Server database URL when one is configured, otherwise the local SQLite file."""
    if config.get("DATABASE_URL"):
        return config["DATABASE_URL"]
    return "sqlite:///" + os.path.join(
        config["GTIN_CASE_CODE_FOLDER"], config["GTIN_CASE_CODE_DB_FILE_NAME"]
    )


app.config["SQLALCHEMY_DATABASE_URI"] = database_uri(app.config)
app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

app.logger.info(f"GTIN Case Code Database URI: {app.config['SQLALCHEMY_DATABASE_URI']}")

db = SQLAlchemy(app)

# Initialize schema (idempotent) so local persistence works out of the box.
with app.app_context():
    import gtin_case_code.models  # noqa: F401

    db.create_all()
