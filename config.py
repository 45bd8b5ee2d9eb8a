import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./test.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Admin tokens
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    TOKEN_TTL_HOURS = int(data.get("TOKEN_TTL_HOURS", 24))

    # Account lockout
    LOCKOUT_THRESHOLD = int(data.get("LOCKOUT_THRESHOLD", 5))
    LOCKOUT_DURATION_HOURS = int(data.get("LOCKOUT_DURATION_HOURS", 2))

    # Rate limiting (per process)
    RATE_WINDOW_MS = int(data.get("RATE_WINDOW_MS", 15 * 60 * 1000))
    RATE_MAX = int(data.get("RATE_MAX", 100))
    LOGIN_RATE_MAX = int(data.get("LOGIN_RATE_MAX", 10))
    PUBLIC_RATE_MAX = int(data.get("PUBLIC_RATE_MAX", 300))

    # Server-side admin sessions
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "admin_session")
    SESSION_TTL_DAYS = int(data.get("SESSION_TTL_DAYS", 7))
    SESSION_COOKIE_SECURE = bool(data.get("SESSION_COOKIE_SECURE", True))

    # Public review API is switched off while the database is not provisioned
    REVIEW_API_ENABLED = bool(data.get("REVIEW_API_ENABLED", True))
