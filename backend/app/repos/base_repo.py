from abc import ABC, abstractmethod
from app.models.places_model import Place

class PlaceStore(ABC):
    """Read side of the places backend, shared by every storage mode."""

    @abstractmethod
    async def list_places(self, limit: int, offset: int) -> tuple[list[Place], int]:
        """Return one window of places in index order and the exact total."""
        pass

    @abstractmethod
    async def nearest_places(self, lat: float, lon: float, limit: int) -> list[Place]:
        """Return up to `limit` places ordered by distance from (lat, lon)."""
        pass
