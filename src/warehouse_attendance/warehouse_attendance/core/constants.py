"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_METERS = 6_371_000

DNI_LENGTH = 8

DEFAULT_TIMEZONE = "America/Lima"

# Warehouse reference point; overridable through settings modules.
DEFAULT_WAREHOUSE_LATITUDE = -12.0464
DEFAULT_WAREHOUSE_LONGITUDE = -77.0428
DEFAULT_MAX_RADIUS_METERS = 100

MONTH_NAMES = (
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
)
