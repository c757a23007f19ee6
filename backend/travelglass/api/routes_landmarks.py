from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from travelglass.api import get_model_data, get_recommendation_service
from travelglass.api.streaming import stream_snapshots
from travelglass.models.domain import ORDERED_CONTINENTS, Activity, Landmark
from travelglass.models.schemas import (
    BadgeSchema,
    CollectionSchema,
    ContinentSchema,
    LandmarkSchema,
    MapItemSchema,
)
from travelglass.services.model_data import ModelData
from travelglass.services.recommendation_service import RecommendationService

router = APIRouter()


def _get_landmark(model_data: ModelData, landmark_id: int) -> Landmark:
    landmark = model_data.landmarks_by_id.get(landmark_id)
    if not landmark:
        raise HTTPException(status_code=404, detail="Landmark not found")
    return landmark


def _schema(model_data: ModelData, landmark: Landmark) -> LandmarkSchema:
    return LandmarkSchema.from_domain(landmark, is_favorite=model_data.is_favorite(landmark))


@router.get("", response_model=List[LandmarkSchema])
async def list_landmarks(
    continent: Optional[str] = None,
    q: Optional[str] = None,
    model_data: ModelData = Depends(get_model_data),
) -> List[LandmarkSchema]:
    if continent is not None:
        landmarks = model_data.landmarks_in(continent)
    elif q is not None:
        landmarks = model_data.search_landmarks(q)
    else:
        landmarks = model_data.landmarks
    return [_schema(model_data, l) for l in landmarks]


@router.get("/continents", response_model=List[ContinentSchema])
async def list_continents(model_data: ModelData = Depends(get_model_data)) -> List[ContinentSchema]:
    return [
        ContinentSchema(
            name=continent.value,
            landmarks=[_schema(model_data, l) for l in model_data.landmarks_in(continent)],
        )
        for continent in ORDERED_CONTINENTS
    ]


@router.get("/featured", response_model=LandmarkSchema)
async def featured_landmark(model_data: ModelData = Depends(get_model_data)) -> LandmarkSchema:
    if model_data.featured_landmark is None:
        raise HTTPException(status_code=404, detail="No featured landmark")
    return _schema(model_data, model_data.featured_landmark)


@router.get("/badges", response_model=List[BadgeSchema])
async def earned_badges(model_data: ModelData = Depends(get_model_data)) -> List[BadgeSchema]:
    return [BadgeSchema.from_domain(b) for b in model_data.earned_badges]


@router.get("/map-items", response_model=List[MapItemSchema])
async def map_items(model_data: ModelData = Depends(get_model_data)) -> List[MapItemSchema]:
    return [MapItemSchema.from_domain(i) for i in model_data.map_items_for_landmarks]


@router.get("/{landmark_id}", response_model=LandmarkSchema)
async def get_landmark(landmark_id: int, model_data: ModelData = Depends(get_model_data)) -> LandmarkSchema:
    return _schema(model_data, _get_landmark(model_data, landmark_id))


@router.get("/{landmark_id}/map-item", response_model=MapItemSchema)
async def get_map_item(landmark_id: int, model_data: ModelData = Depends(get_model_data)) -> MapItemSchema:
    _get_landmark(model_data, landmark_id)
    item = model_data.map_items_by_landmark_id.get(landmark_id)
    if not item:
        raise HTTPException(status_code=404, detail="Map item not resolved")
    return MapItemSchema.from_domain(item)


@router.post("/{landmark_id}/favorite", response_model=LandmarkSchema)
async def toggle_favorite(landmark_id: int, model_data: ModelData = Depends(get_model_data)) -> LandmarkSchema:
    landmark = _get_landmark(model_data, landmark_id)
    model_data.toggle_favorite(landmark)
    return _schema(model_data, landmark)


@router.get("/{landmark_id}/collections", response_model=List[CollectionSchema])
async def collections_containing(
    landmark_id: int, model_data: ModelData = Depends(get_model_data)
) -> List[CollectionSchema]:
    landmark = _get_landmark(model_data, landmark_id)
    return [
        CollectionSchema.from_domain(c, model_data.collection_landmarks(c))
        for c in model_data.collections_containing(landmark)
    ]


def _set_activity(model_data: ModelData, landmark_id: int, activity: Activity, completed: bool) -> LandmarkSchema:
    landmark = _get_landmark(model_data, landmark_id)
    if landmark.badge_progress is None:
        raise HTTPException(status_code=404, detail="Landmark has no badge")
    if completed:
        landmark.badge_progress.add(activity)
    else:
        landmark.badge_progress.remove(activity)
    return _schema(model_data, landmark)


@router.put("/{landmark_id}/badge-progress/{activity}", response_model=LandmarkSchema)
async def complete_activity(
    landmark_id: int, activity: Activity, model_data: ModelData = Depends(get_model_data)
) -> LandmarkSchema:
    return _set_activity(model_data, landmark_id, activity, completed=True)


@router.delete("/{landmark_id}/badge-progress/{activity}", response_model=LandmarkSchema)
async def clear_activity(
    landmark_id: int, activity: Activity, model_data: ModelData = Depends(get_model_data)
) -> LandmarkSchema:
    return _set_activity(model_data, landmark_id, activity, completed=False)


@router.get("/{landmark_id}/recommendation")
def landmark_recommendation(
    landmark_id: int,
    model_data: ModelData = Depends(get_model_data),
    recommendations: RecommendationService = Depends(get_recommendation_service),
) -> StreamingResponse:
    landmark = _get_landmark(model_data, landmark_id)
    assistant = recommendations.landmark_assistant(landmark, model_data)
    return stream_snapshots(assistant.stream_recommendation())
