import os
from datetime import timedelta

from dotenv import load_dotenv

# Load .env from the working directory so local settings are picked up
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "change-this-jwt-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get("JWT_EXPIRES_HOURS", "12")))

    # file | memory | mongo
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "file")
    STORAGE_PATH = os.environ.get("STORAGE_PATH", os.path.join(os.getcwd(), "instance", "storage"))
    STORAGE_PREFIX = os.environ.get("STORAGE_PREFIX", "projecthub_")

    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017/?directConnection=true")
    MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "projecthub")
    MONGO_COLLECTION = os.environ.get("MONGO_COLLECTION", "storage")

    SEED_DEMO_DATA = _env_bool("SEED_DEMO_DATA", "1")
    # Multiplier on the simulated API latency; 0 turns the delays off.
    LATENCY_SCALE = float(os.environ.get("LATENCY_SCALE", "1.0"))
    SUBMISSION_GRACE_SECONDS = float(os.environ.get("SUBMISSION_GRACE_SECONDS", "1.0"))
    DEFAULT_THEME = os.environ.get("DEFAULT_THEME", "light")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"
