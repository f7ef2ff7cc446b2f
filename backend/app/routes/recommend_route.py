from fastapi import APIRouter, Depends

from app.core.dependencies import get_places_service
from app.core.security import require_bearer_token
from app.models.places_model import RecommendationResponse
from app.services.Places_service import PlacesService

router = APIRouter()

@router.get("/api/recommend", dependencies=[Depends(require_bearer_token)])
async def recommend_endpoint(
    lat: str | None = None,
    lon: str | None = None,
    service: PlacesService = Depends(get_places_service),
):
    """Three places closest to (lat, lon)."""
    places = await service.recommend(lat, lon)
    return RecommendationResponse(places=[p.to_document() for p in places])
