from fastapi import APIRouter, Depends

from app.core.dependencies import get_token_service
from app.models.places_model import TokenResponse
from app.services.Token_service import TokenService

router = APIRouter()

@router.get("/api/get_token", response_model=TokenResponse)
async def get_token_endpoint(tokens: TokenService = Depends(get_token_service)):
    return TokenResponse(token=tokens.issue_token())
