from fastapi import Depends, Request

from app.core.dependencies import get_token_service
from app.core.errors import AuthError
from app.services.Token_service import TokenService

BEARER_PREFIX = "Bearer "

def bearer_token_from(request: Request) -> str:
    header = request.headers.get("Authorization")
    if not header:
        raise AuthError("Missing token")
    if header.startswith(BEARER_PREFIX):
        header = header[len(BEARER_PREFIX):]
    return header

async def require_bearer_token(
    request: Request, tokens: TokenService = Depends(get_token_service)
) -> dict:
    """
    Route dependency: lets the request through only with a validly signed,
    unexpired token. No scopes or roles are checked.
    """
    token = bearer_token_from(request)
    if not token:
        raise AuthError("Invalid token")
    return tokens.verify_token(token)
