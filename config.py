# config.py
import logging
import os
from datetime import timedelta

logger = logging.getLogger(__name__)

PROPERTIES_FILE = "config.properties"
DEFAULT_DATABASE_FILE = "database.db"


def load_properties(path=PROPERTIES_FILE):
    """
    Read `key=value` pairs from a .properties style file.

    If the file does not exist it is created with the default
    `databaseFile=database.db` entry. A missing or unwritable file never
    stops startup; the defaults are returned instead.
    """
    defaults = {"databaseFile": DEFAULT_DATABASE_FILE}

    if not os.path.exists(path):
        try:
            with open(path, "w", encoding="utf-8") as fh:
                fh.write(f"databaseFile={DEFAULT_DATABASE_FILE}\n")
        except OSError as e:
            logger.warning("could not create %s: %s", path, e)
            return dict(defaults)

    properties = dict(defaults)
    try:
        with open(path, encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line[0] in "#!":
                    continue
                key, sep, value = line.partition("=")
                if not sep:
                    key, sep, value = line.partition(":")
                if sep:
                    properties[key.strip()] = value.strip()
    except OSError as e:
        logger.warning("could not read %s: %s", path, e)

    return properties


def database_uri(properties_path=None):
    """SQLite URI for the database file named in config.properties."""
    path = properties_path or os.environ.get("RUNIT_PROPERTIES", PROPERTIES_FILE)
    properties = load_properties(path)
    database_file = properties.get("databaseFile") or DEFAULT_DATABASE_FILE
    return "sqlite:///" + os.path.abspath(database_file)


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-jwt-secret-change-me")

    # None -> resolved from config.properties when the app is created
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT config
    JWT_TOKEN_LOCATION = ["headers"]
    JWT_HEADER_NAME = "Authorization"
    JWT_HEADER_TYPE = "Bearer"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)

    # demo "test" / "pass" account for first runs
    SEED_DEMO_USER = os.environ.get("SEED_DEMO_USER", "1") not in ("0", "false", "no")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SECRET_KEY = "test-secret-key"
    JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-bytes"
    SEED_DEMO_USER = False
