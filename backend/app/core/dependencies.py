from fastapi import Depends, Request

from app.repos.base_repo import PlaceStore
from app.services.Places_service import PlacesService
from app.services.Render_service import HTMLRenderer, JSONRenderer
from app.services.Token_service import TokenService

# --- Dependency Injection Helpers ---
# Shared objects are built once at startup and kept on app.state
def get_store(request: Request) -> PlaceStore:
    return request.app.state.store

def get_places_service(store: PlaceStore = Depends(get_store)) -> PlacesService:
    return PlacesService(store)

def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service

def get_html_renderer(request: Request) -> HTMLRenderer:
    return HTMLRenderer(request.app.state.templates)

def get_json_renderer() -> JSONRenderer:
    return JSONRenderer()
