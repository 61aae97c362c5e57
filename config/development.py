import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "warehouse_attendance"),
}

# Warehouse geofence (reference point + allowed radius in metres)
WAREHOUSE_LATITUDE = float(os.getenv("WAREHOUSE_LATITUDE", "-12.0464"))
WAREHOUSE_LONGITUDE = float(os.getenv("WAREHOUSE_LONGITUDE", "-77.0428"))
MAX_RADIUS_METERS = int(os.getenv("MAX_RADIUS_METERS", "100"))

TIMEZONE = os.getenv("TIMEZONE", "America/Lima")

# Base URL printed in the QR code; falls back to the request host when empty.
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL") or None

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
