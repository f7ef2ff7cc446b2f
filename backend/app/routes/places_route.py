from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.core.dependencies import get_places_service, get_html_renderer, get_json_renderer
from app.services.Places_service import PlacesService
from app.services.Render_service import PageRenderer

router = APIRouter()

async def render_listing(
    request: Request, page: str | None, service: PlacesService, renderer: PageRenderer
):
    result = await service.get_page(page)
    return renderer.render(request, result)

@router.get("/", response_class=HTMLResponse)
async def places_page(
    request: Request,
    page: str | None = None,
    service: PlacesService = Depends(get_places_service),
    renderer: PageRenderer = Depends(get_html_renderer),
):
    return await render_listing(request, page, service, renderer)

@router.get("/api/places")
async def places_api(
    request: Request,
    page: str | None = None,
    service: PlacesService = Depends(get_places_service),
    renderer: PageRenderer = Depends(get_json_renderer),
):
    return await render_listing(request, page, service, renderer)
