from fastapi import APIRouter, Depends

from travelglass.api import get_recommendation_service
from travelglass.core.config import settings
from travelglass.services.recommendation_service import RecommendationService

router = APIRouter()


@router.get("/health")
def healthcheck(
    recommendations: RecommendationService = Depends(get_recommendation_service),
) -> dict:
    return {
        "status": "ok",
        "app": settings.app_name,
        "llm_provider": settings.llm_provider,
        "llm_available": recommendations.is_available(),
    }
