import os
import sys
from pathlib import Path

import pytest


# Ensure the project root (repo folder) is importable when running pytest under uv.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _clear_import_cache(prefix: str) -> None:
    for name in list(sys.modules.keys()):
        if name == prefix or name.startswith(prefix + "."):
            del sys.modules[name]


def _clear_module(name: str) -> None:
    if name in sys.modules:
        del sys.modules[name]


@pytest.fixture(scope="session")
def app(tmp_path_factory):
    """Create the Flask app configured to use a temp folder for DB/logs.

    The application is defined as a global in gtin_case_code/__init__.py and reads
    configuration from environment variables at import time.
    """

    data_dir = tmp_path_factory.mktemp("gtin_case_code_data")

    os.environ["APP_MODE"] = "config.DevConfig"
    os.environ["SECRET_KEY"] = "test-secret-key"

    # Force temp persistence so tests never touch the developer's real data.
    os.environ["GTIN_CASE_CODE_FOLDER"] = str(data_dir)
    os.environ["GTIN_CASE_CODE_DB_FILE_NAME"] = "test.sqlite"
    os.environ["GTIN_CASE_CODE_LOG_FILE"] = str(Path(data_dir) / "test.log")
    os.environ["GTIN_MAX_LENGTH"] = "11"
    os.environ.pop("DATABASE_URL", None)

    _clear_import_cache("gtin_case_code")
    # APP_MODE points at the top-level module "config", so ensure it reloads with our env.
    _clear_module("config")
    _clear_module("app")

    import gtin_case_code  # noqa: E402

    return gtin_case_code.app


@pytest.fixture()
def db(app):
    import gtin_case_code  # noqa: E402

    with app.app_context():
        # Every test starts from an empty gtin table.
        gtin_case_code.db.drop_all()
        gtin_case_code.db.create_all()
        yield gtin_case_code.db
        gtin_case_code.db.session.remove()
