import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "warehouse_attendance"),
}

WAREHOUSE_LATITUDE = float(os.getenv("WAREHOUSE_LATITUDE", "-12.0464"))
WAREHOUSE_LONGITUDE = float(os.getenv("WAREHOUSE_LONGITUDE", "-77.0428"))
MAX_RADIUS_METERS = int(os.getenv("MAX_RADIUS_METERS", "100"))

TIMEZONE = os.getenv("TIMEZONE", "America/Lima")

PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL") or None

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
