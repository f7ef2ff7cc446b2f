from elasticsearch import AsyncElasticsearch, ApiError, TransportError
from pydantic import ValidationError as SchemaError
import logging

from app.core.errors import BackendError
from app.core.logger import logs
from app.models.places_model import Place
from app.repos.base_repo import PlaceStore

INDEX_MAPPINGS = {
    "properties": {
        "id": {"type": "keyword"},
        "name": {"type": "text"},
        "address": {"type": "text"},
        "phone": {"type": "text"},
        "location": {"type": "geo_point"},
    }
}

class PlacesRepository(PlaceStore):
    def __init__(self, client: AsyncElasticsearch, index: str = "places"):
        self.client = client
        self.index = index

    async def list_places(self, limit: int, offset: int) -> tuple[list[Place], int]:
        """
        Match-all window over the index with an exact hit count.
        """
        try:
            response = await self.client.search(
                index=self.index,
                from_=offset,
                size=limit,
                query={"match_all": {}},
                track_total_hits=True,
            )
        except (ApiError, TransportError) as e:
            raise BackendError(f"Error getting response: {e}", "Error fetching places") from e

        body = _body_of(response)
        places = _decode_places(body, "Error fetching places")
        total = _decode_total(body, "Error fetching places")
        logs.log(logging.DEBUG, f"Fetched {len(places)} of {total} places (offset {offset})")
        return places, total

    async def nearest_places(self, lat: float, lon: float, limit: int) -> list[Place]:
        """
        Match-all query sorted by arc distance in km from (lat, lon).
        Documents without a location are skipped instead of failing the sort.
        """
        sort = [
            {
                "_geo_distance": {
                    "location": {"lat": lat, "lon": lon},
                    "order": "asc",
                    "unit": "km",
                    "mode": "min",
                    "distance_type": "arc",
                    "ignore_unmapped": True,
                }
            }
        ]
        try:
            response = await self.client.search(
                index=self.index,
                size=limit,
                query={"match_all": {}},
                sort=sort,
            )
        except (ApiError, TransportError) as e:
            raise BackendError(f"Error getting geo response: {e}", "Error fetching nearest places") from e

        return _decode_places(_body_of(response), "Error fetching nearest places")


def _body_of(response):
    # ObjectApiResponse keeps the decoded JSON on .body
    return getattr(response, "body", response)


def _decode_places(body, public_message: str) -> list[Place]:
    if not isinstance(body, dict):
        raise BackendError("Malformed search response: body is not an object", public_message)
    hits = body.get("hits")
    if not isinstance(hits, dict):
        raise BackendError("Malformed search response: missing 'hits'", public_message)
    hit_list = hits.get("hits")
    if not isinstance(hit_list, list):
        raise BackendError("Malformed search response: missing 'hits.hits'", public_message)

    places = []
    for i, hit in enumerate(hit_list):
        source = hit.get("_source") if isinstance(hit, dict) else None
        if not isinstance(source, dict):
            raise BackendError(f"Malformed search response: hit {i} has no '_source' object", public_message)
        try:
            places.append(Place.model_validate(source))
        except SchemaError as e:
            raise BackendError(f"Malformed search response: hit {i} is not a place: {e}", public_message) from e
    return places


def _decode_total(body, public_message: str) -> int:
    total = body["hits"].get("total")
    if isinstance(total, dict):
        total = total.get("value")
    if not isinstance(total, int) or isinstance(total, bool):
        raise BackendError("Malformed search response: missing 'hits.total.value'", public_message)
    return total
