# config/settings.py

import os

from dotenv import load_dotenv

load_dotenv()

def str_to_bool(value):
    truthy = ("true", "1", "yes", "on")
    falsey = ("false", "0", "no", "off")

    val = str(value).strip().lower()

    if val in truthy:
        return True
    elif val in falsey:
        return False
    else:
        raise ValueError(f"Invalid boolean string: '{value}'")

# Database settings
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///fixpoint.db")
DB_BUSY_TIMEOUT = float(os.environ.get("DB_BUSY_TIMEOUT", 5))
SQL_ECHO = str_to_bool(os.environ.get("SQL_ECHO", "False"))

# Application version
APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# HTTP
PORT = int(os.environ.get("PORT", 8080))

def engine_options(url):
    # sqlite3 "timeout" is the busy wait on a locked database; other drivers reject it
    if url.startswith("sqlite"):
        return {"connect_args": {"timeout": DB_BUSY_TIMEOUT}}
    return {}

class Config:
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = SQL_ECHO
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(DATABASE_URL)
    SECRET_KEY = os.environ.get("SECRET_KEY") or os.urandom(24)

    # Additional configuration
    APP_VERSION = APP_VERSION
    LOG_LEVEL = LOG_LEVEL

class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = engine_options("sqlite://")
    SQLALCHEMY_ECHO = False
    LOG_LEVEL = "WARNING"
