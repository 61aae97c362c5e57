from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.constants import EARTH_RADIUS_METERS


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in metres between two GPS coordinates.

    Uses the haversine formula on a spherical Earth (radius 6,371 km).
    """

    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a past 1 for antipodal points.
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


@dataclass(frozen=True)
class GeofenceResult:
    in_range: bool
    distance_meters: int


@dataclass(frozen=True)
class Geofence:
    """Circular boundary around the warehouse reference point."""

    latitude: float
    longitude: float
    max_radius_meters: int

    def evaluate(self, latitude: float, longitude: float) -> GeofenceResult:
        # Half-up rounding to whole metres.
        distance = math.floor(haversine_distance(latitude, longitude, self.latitude, self.longitude) + 0.5)
        return GeofenceResult(in_range=distance <= self.max_radius_meters, distance_meters=int(distance))
