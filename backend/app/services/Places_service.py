import re
import math
import logging

from app.core.errors import ValidationError
from app.core.logger import logs
from app.models.places_model import Place, PlacePage
from app.repos.base_repo import PlaceStore

PAGE_SIZE = 10
RECOMMEND_LIMIT = 3

# Up to 17 digits keeps the search offset inside a signed 64-bit integer
_INTEGER = re.compile(r"[+-]?[0-9]{1,17}")

class PlacesService:
    def __init__(self, store: PlaceStore):
        self.store = store

    async def get_page(self, raw_page: str | None) -> PlacePage:
        page = raw_page if raw_page else "1"
        if not _INTEGER.fullmatch(page):
            raise ValidationError(f"Invalid 'page' value: '{page}'")
        page_number = int(page)
        if page_number < 1:
            raise ValidationError(f"Invalid 'page' value: '{page}'")

        offset = (page_number - 1) * PAGE_SIZE
        places, total = await self.store.list_places(PAGE_SIZE, offset)

        # total is only known after the fetch
        result = PlacePage(places=places, total=total, page=page_number, page_size=PAGE_SIZE)
        if page_number > result.last_page:
            logs.log(logging.INFO, f"Page {page_number} is past the last page ({result.last_page})")
            raise ValidationError(f"Invalid 'page' value: '{page}'")
        return result

    async def recommend(self, raw_lat: str | None, raw_lon: str | None) -> list[Place]:
        lat = _parse_coordinate(raw_lat, "Invalid latitude value")
        lon = _parse_coordinate(raw_lon, "Invalid longitude value")
        return await self.store.nearest_places(lat, lon, RECOMMEND_LIMIT)


def _parse_coordinate(raw: str | None, message: str) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValidationError(message) from None
    if not math.isfinite(value):
        raise ValidationError(message)
    return value
