"""
In-memory place store built from the same source file as the index.
Used when STORAGE_MODE=local, no search cluster required.
"""
import math
import logging

from app.core.logger import logs
from app.models.places_model import GeoPoint, Place
from app.repos.base_repo import PlaceStore
from app.services.Loader_service import read_places

EARTH_RADIUS_KM = 6371.0088


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


class LocalRepository(PlaceStore):
    """Repository keeping places in a list, in file order."""

    def __init__(self, places: list[Place] | None = None):
        self.places = list(places or [])

    @classmethod
    def from_file(cls, source_path: str) -> "LocalRepository":
        places = [Place.model_validate(doc) for doc in read_places(source_path)]
        logs.log(logging.INFO, f"Local repository loaded {len(places)} places from {source_path}")
        return cls(places)

    async def list_places(self, limit: int, offset: int) -> tuple[list[Place], int]:
        return self.places[offset:offset + limit], len(self.places)

    async def nearest_places(self, lat: float, lon: float, limit: int) -> list[Place]:
        # Only object-form locations; the loader never writes other forms
        located = [p for p in self.places if isinstance(p.location, GeoPoint)]
        located.sort(key=lambda p: haversine_km(lat, lon, p.location.lat, p.location.lon))
        return located[:limit]
