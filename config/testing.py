import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "workforce_test"),
    "connect_timeout": int(os.getenv("DB_CONNECT_TIMEOUT", "5")),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SHIFT_GRACE_MINUTES = 30
LATE_AFTER_MINUTES = 120
GEOLOCATION_TIMEOUT_SECONDS = 1.0
DEFAULT_FENCE_RADIUS_METERS = 50

AUTO_INIT_DB = False
AUTO_SEED_DB = False
