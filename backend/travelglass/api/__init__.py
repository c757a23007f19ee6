from fastapi import HTTPException
from starlette.requests import Request

from travelglass.models.locations import LocationDatabase
from travelglass.services.model_data import ModelData
from travelglass.services.recommendation_service import RecommendationService


def _state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(status_code=500, detail=f"{name} not initialized")
    return value


def get_model_data(request: Request) -> ModelData:
    return _state(request, "model_data")


def get_location_db(request: Request) -> LocationDatabase:
    return _state(request, "location_db")


def get_recommendation_service(request: Request) -> RecommendationService:
    return _state(request, "recommendation_service")
