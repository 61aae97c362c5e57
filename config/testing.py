import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "warehouse_attendance_test"),
}

WAREHOUSE_LATITUDE = -12.0464
WAREHOUSE_LONGITUDE = -77.0428
MAX_RADIUS_METERS = 100

TIMEZONE = "America/Lima"

PUBLIC_BASE_URL = "https://asistencia.example.com"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
