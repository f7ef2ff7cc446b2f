import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.templating import Jinja2Templates

from app.core.config import Settings, settings as default_settings
from app.core.errors import AppError, LoadError, StartupError
from app.core.es_connection import AsyncSearchConnection
from app.core.logger import logs
from app.repos.base_repo import PlaceStore
from app.repos.local_repo import LocalRepository
from app.repos.places_repo import PlacesRepository
from app.routes.auth_route import router as auth_router
from app.routes.places_route import router as places_router
from app.routes.recommend_route import router as recommend_router
from app.services.Loader_service import DataLoader
from app.services.Token_service import TokenService


async def provision_store(app: FastAPI, settings: Settings) -> PlaceStore:
    """Rebuild the backing store from the source file before serving."""
    try:
        if settings.STORAGE_MODE == "local":
            return LocalRepository.from_file(settings.DATA_FILE)

        connection = AsyncSearchConnection(settings)
        app.state.search_connection = connection
        client = connection.get_client()
        loaded = await DataLoader(client, settings.ES_INDEX).provision_and_load(settings.DATA_FILE)
        logs.log(logging.INFO, f"Index '{settings.ES_INDEX}' ready with {loaded} places")
        return PlacesRepository(client, settings.ES_INDEX)
    except (LoadError, RuntimeError, ValueError) as e:
        logs.log(logging.CRITICAL, f"Startup failed: {e}")
        connection = getattr(app.state, "search_connection", None)
        if connection is not None:
            await connection.close()
        raise StartupError(str(e)) from e


def create_app(settings: Settings = default_settings, store: PlaceStore | None = None) -> FastAPI:
    """
    Build the application. Passing a store skips provisioning, which is how
    tests run the routes without a search cluster.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logs.log(logging.INFO, f"Starting Places API (storage: {settings.STORAGE_MODE})")
        if store is None:
            app.state.store = await provision_store(app, settings)
        else:
            app.state.store = store
        yield
        connection = getattr(app.state, "search_connection", None)
        if connection is not None:
            await connection.close()
        logs.log(logging.INFO, "Places API stopped")

    app = FastAPI(title="Places API", lifespan=lifespan)
    app.state.token_service = TokenService(settings.JWT_SECRET_KEY, settings.TOKEN_TTL_HOURS)
    app.state.templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)

    app.include_router(places_router)
    app.include_router(recommend_router)
    app.include_router(auth_router)

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logs.log(level, f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.client_message})

    # --- Health Check ---
    @app.get("/health")
    async def health_check():
        return {"status": "ok", "service": "Places API"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=default_settings.HOST, port=default_settings.PORT)
