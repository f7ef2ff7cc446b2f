"""
Output strategies for the paginated listing.

The listing routine is shared; only the way a PlacePage becomes a response
differs between the HTML page and the JSON API.
"""
import logging
from abc import ABC, abstractmethod
from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from app.core.logger import logs
from app.models.places_model import PlacePage

class PageRenderer(ABC):
    @abstractmethod
    def render(self, request: Request, page: PlacePage) -> Response:
        pass


class JSONRenderer(PageRenderer):
    def render(self, request: Request, page: PlacePage) -> Response:
        body = {
            "name": "Places",
            "total": page.total,
            "places": [p.to_document() for p in page.places],
        }
        # Navigation keys are omitted rather than null
        if page.has_prev:
            body["prev_page"] = page.page - 1
        if page.has_next:
            body["next_page"] = page.page + 1
        body["last_page"] = page.last_page
        return JSONResponse(body)


class HTMLRenderer(PageRenderer):
    def __init__(self, templates: Jinja2Templates, template_name: str = "index.html"):
        self.templates = templates
        self.template_name = template_name

    def render(self, request: Request, page: PlacePage) -> Response:
        last_page = page.last_page
        context = {
            "request": request,
            "places": [p.to_document() for p in page.places],
            "total": page.total,
            "page": page.page,
            "prev_page": page.page - 1 if page.has_prev else 0,
            "next_page": page.page + 1 if page.has_next else last_page,
            "last_page": last_page,
        }
        try:
            content = self.templates.get_template(self.template_name).render(context)
        except TemplateError as e:
            logs.log(logging.ERROR, f"Error executing template {self.template_name}: {e}")
            return HTMLResponse(f"Error executing template: {e}")
        return HTMLResponse(content)
