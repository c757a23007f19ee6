import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from travelglass.api import (
    routes_collections,
    routes_health,
    routes_landmarks,
    routes_locations,
    routes_scenes,
    routes_sets,
)
from travelglass.core.config import settings
from travelglass.core.logging import configure_logging
from travelglass.models.locations import LocationDatabase
from travelglass.services.model_data import ModelData
from travelglass.services.recommendation_service import RecommendationService
from travelglass.storage.location_data import LOCATION_CATALOG
from travelglass.storage.repository import InMemoryRepository
from travelglass.storage.sql_repository import SqlRepository

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    configure_logging()

    executor = ThreadPoolExecutor(
        max_workers=settings.map_item_workers, thread_name_prefix="map-items"
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        executor.shutdown(wait=False, cancel_futures=True)

    app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    repository = (
        SqlRepository(settings.database_url) if settings.database_url else InMemoryRepository()
    )
    model_data = ModelData(
        repository=repository, featured_landmark_id=settings.featured_landmark_id
    )
    # Seed the repository with the example scenes on first start
    model_data.save()

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_landmarks.router, prefix="/landmarks", tags=["landmarks"])
    app.include_router(routes_collections.router, prefix="/collections", tags=["collections"])
    app.include_router(routes_scenes.router, prefix="/scenes", tags=["scenes"])
    app.include_router(routes_sets.router, prefix="/sets", tags=["sets"])
    app.include_router(routes_locations.router, prefix="/locations", tags=["locations"])

    # Inject shared state for dependencies
    app.state.model_data = model_data
    app.state.location_db = LocationDatabase.from_data(LOCATION_CATALOG)
    app.state.recommendation_service = RecommendationService()
    app.state.settings = settings

    model_data.start_map_item_fetch(executor)
    logger.info("%s started (%s)", settings.app_name, settings.environment)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
