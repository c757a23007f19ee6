import logging
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import StreamingResponse

from travelglass.api import get_location_db, get_model_data, get_recommendation_service
from travelglass.api.streaming import stream_snapshots
from travelglass.models.domain import ScenePhoto, SceneStatus, TravelScene, Visit
from travelglass.models.locations import LocationDatabase
from travelglass.models.schemas import (
    PhotoSchema,
    SceneCreate,
    SceneSchema,
    SceneSetSchema,
    StatusUpdate,
    VisitCreate,
)
from travelglass.services.model_data import ModelData
from travelglass.services.recommendation_service import RecommendationService

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_scene(model_data: ModelData, scene_id: UUID) -> TravelScene:
    scene = model_data.find_scene(scene_id)
    if not scene:
        raise HTTPException(status_code=404, detail="Scene not found")
    return scene


def _schema(model_data: ModelData, scene: TravelScene) -> SceneSchema:
    return SceneSchema.from_domain(scene, sets=model_data.sets_for(scene))


@router.get("", response_model=List[SceneSchema])
async def list_scenes(
    status: Optional[SceneStatus] = None, model_data: ModelData = Depends(get_model_data)
) -> List[SceneSchema]:
    if status is SceneStatus.visited:
        scenes = model_data.visited_scenes
    elif status is SceneStatus.planned:
        scenes = model_data.planned_scenes
    else:
        scenes = model_data.travel_scenes
    return [_schema(model_data, s) for s in scenes]


@router.post("", response_model=SceneSchema, status_code=201)
async def create_scene(
    body: SceneCreate,
    model_data: ModelData = Depends(get_model_data),
    location_db: LocationDatabase = Depends(get_location_db),
) -> SceneSchema:
    country = location_db.find_country(body.country)
    if not country:
        raise HTTPException(status_code=422, detail=f"Unknown country: {body.country}")
    region = location_db.find_region(country, body.region)
    if not region:
        raise HTTPException(status_code=422, detail=f"Unknown region: {body.region}")
    city = location_db.find_city(region, body.city)
    if not city or city.coordinate is None:
        raise HTTPException(status_code=422, detail=f"Unknown city: {body.city}")

    latitude, longitude = city.coordinate
    scene = TravelScene(
        name=body.name or city.name,
        country=country.name,
        latitude=latitude,
        longitude=longitude,
        status=body.status,
        description=body.description,
        notes=body.notes,
        associated_landmark_ids=list(body.associated_landmark_ids),
    )
    if body.status is SceneStatus.visited:
        now = model_data.clock()
        scene.visits.append(Visit(start_date=now, end_date=now))
    else:
        scene.planned_date = body.planned_date
    model_data.add_travel_scene(scene)
    model_data.save()
    logger.info("Created scene %s (%s, %s)", scene.id, scene.name, scene.country)
    return _schema(model_data, scene)


@router.get("/{scene_id}", response_model=SceneSchema)
async def get_scene(scene_id: UUID, model_data: ModelData = Depends(get_model_data)) -> SceneSchema:
    return _schema(model_data, _get_scene(model_data, scene_id))


@router.delete("/{scene_id}", status_code=204)
async def delete_scene(scene_id: UUID, model_data: ModelData = Depends(get_model_data)) -> Response:
    scene = _get_scene(model_data, scene_id)
    model_data.remove_travel_scene(scene)
    model_data.save()
    return Response(status_code=204)


@router.put("/{scene_id}/status", response_model=SceneSchema)
async def update_status(
    scene_id: UUID, body: StatusUpdate, model_data: ModelData = Depends(get_model_data)
) -> SceneSchema:
    scene = _get_scene(model_data, scene_id)
    model_data.update_scene_status(scene, body.status)
    model_data.save()
    return _schema(model_data, scene)


@router.post("/{scene_id}/visits", response_model=SceneSchema, status_code=201)
async def add_visit(
    scene_id: UUID, body: VisitCreate, model_data: ModelData = Depends(get_model_data)
) -> SceneSchema:
    scene = _get_scene(model_data, scene_id)
    model_data.add_visit(scene, Visit(start_date=body.start_date, end_date=body.end_date, notes=body.notes))
    model_data.save()
    return _schema(model_data, scene)


@router.get("/{scene_id}/photos", response_model=List[PhotoSchema])
async def list_photos(scene_id: UUID, model_data: ModelData = Depends(get_model_data)) -> List[PhotoSchema]:
    return [PhotoSchema.from_domain(p) for p in _get_scene(model_data, scene_id).photos]


@router.post("/{scene_id}/photos", response_model=PhotoSchema, status_code=201)
async def add_photo(
    scene_id: UUID,
    request: Request,
    caption: str = "",
    model_data: ModelData = Depends(get_model_data),
) -> PhotoSchema:
    scene = _get_scene(model_data, scene_id)
    data = await request.body()
    if not data:
        raise HTTPException(status_code=422, detail="Photo body is empty")
    photo = ScenePhoto(image_data=data, caption=caption, created_at=model_data.clock())
    model_data.add_photo(scene, photo)
    model_data.save()
    return PhotoSchema.from_domain(photo)


@router.get("/{scene_id}/photos/{photo_id}")
async def download_photo(
    scene_id: UUID, photo_id: UUID, model_data: ModelData = Depends(get_model_data)
) -> Response:
    scene = _get_scene(model_data, scene_id)
    photo = next((p for p in scene.photos if p.id == photo_id), None)
    if not photo:
        raise HTTPException(status_code=404, detail="Photo not found")
    return Response(content=photo.image_data, media_type="application/octet-stream")


@router.delete("/{scene_id}/photos/{photo_id}", status_code=204)
async def delete_photo(
    scene_id: UUID, photo_id: UUID, model_data: ModelData = Depends(get_model_data)
) -> Response:
    scene = _get_scene(model_data, scene_id)
    model_data.remove_photo(scene, photo_id)
    model_data.save()
    return Response(status_code=204)


@router.get("/{scene_id}/sets", response_model=List[SceneSetSchema])
async def sets_for_scene(scene_id: UUID, model_data: ModelData = Depends(get_model_data)) -> List[SceneSetSchema]:
    scene = _get_scene(model_data, scene_id)
    return [SceneSetSchema.from_domain(s) for s in model_data.sets_for(scene)]


@router.get("/{scene_id}/recommendation")
def scene_recommendation(
    scene_id: UUID,
    model_data: ModelData = Depends(get_model_data),
    recommendations: RecommendationService = Depends(get_recommendation_service),
) -> StreamingResponse:
    assistant = recommendations.scene_assistant(_get_scene(model_data, scene_id))
    return stream_snapshots(assistant.stream_recommendation())
