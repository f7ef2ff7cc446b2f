from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Any, Dict, Union

class GeoPoint(BaseModel):
    lat: float
    lon: float

class Place(BaseModel):
    """
    One indexed point of interest.

    Known fields are typed; anything else stored alongside them is kept
    as an extra attribute so documents round-trip unchanged.
    """
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    # Object form is typed; other geo_point forms ("lat,lon", [lon, lat],
    # geohash, GeoJSON) are carried through as stored
    location: Union[GeoPoint, str, List[float], Dict[str, Any], None] = Field(
        default=None, union_mode="left_to_right"
    )

    def to_document(self) -> Dict[str, Any]:
        # Only fields the document actually carried
        return self.model_dump(exclude_unset=True)

class PlacePage(BaseModel):
    places: List[Place]
    total: int
    page: int
    page_size: int

    @property
    def last_page(self) -> int:
        return (self.total + self.page_size - 1) // self.page_size

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page * self.page_size < self.total

class RecommendationResponse(BaseModel):
    name: str = "Recommendation"
    places: List[Dict[str, Any]]

class TokenResponse(BaseModel):
    token: str

class ErrorResponse(BaseModel):
    error: str
