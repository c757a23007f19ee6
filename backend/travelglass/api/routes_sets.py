from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response

from travelglass.api import get_model_data
from travelglass.models.domain import SceneSet, TravelScene
from travelglass.models.schemas import SceneSchema, SceneSetCreate, SceneSetSchema
from travelglass.services.model_data import ModelData

router = APIRouter()


def _get_set(model_data: ModelData, set_id: UUID) -> SceneSet:
    scene_set = model_data.find_scene_set(set_id)
    if not scene_set:
        raise HTTPException(status_code=404, detail="Set not found")
    return scene_set


def _get_scene(model_data: ModelData, scene_id: UUID) -> TravelScene:
    scene = model_data.find_scene(scene_id)
    if not scene:
        raise HTTPException(status_code=404, detail="Scene not found")
    return scene


@router.get("", response_model=List[SceneSetSchema])
async def list_sets(model_data: ModelData = Depends(get_model_data)) -> List[SceneSetSchema]:
    return [SceneSetSchema.from_domain(s) for s in model_data.scene_sets]


@router.post("", response_model=SceneSetSchema, status_code=201)
async def create_set(body: SceneSetCreate, model_data: ModelData = Depends(get_model_data)) -> SceneSetSchema:
    scene_set = SceneSet(
        name=body.name,
        description=body.description,
        color=body.color,
        icon_name=body.icon_name,
    )
    model_data.add_scene_set(scene_set)
    model_data.save()
    return SceneSetSchema.from_domain(scene_set)


@router.get("/{set_id}", response_model=SceneSetSchema)
async def get_set(set_id: UUID, model_data: ModelData = Depends(get_model_data)) -> SceneSetSchema:
    return SceneSetSchema.from_domain(_get_set(model_data, set_id))


@router.delete("/{set_id}", status_code=204)
async def delete_set(set_id: UUID, model_data: ModelData = Depends(get_model_data)) -> Response:
    model_data.remove_scene_set(_get_set(model_data, set_id))
    model_data.save()
    return Response(status_code=204)


@router.get("/{set_id}/scenes", response_model=List[SceneSchema])
async def scenes_in_set(set_id: UUID, model_data: ModelData = Depends(get_model_data)) -> List[SceneSchema]:
    scene_set = _get_set(model_data, set_id)
    return [
        SceneSchema.from_domain(s, sets=model_data.sets_for(s))
        for s in model_data.scenes_for(scene_set)
    ]


@router.put("/{set_id}/scenes/{scene_id}", response_model=SceneSetSchema)
async def add_scene(set_id: UUID, scene_id: UUID, model_data: ModelData = Depends(get_model_data)) -> SceneSetSchema:
    scene_set = _get_set(model_data, set_id)
    model_data.add_scene_to_set(_get_scene(model_data, scene_id), scene_set)
    model_data.save()
    return SceneSetSchema.from_domain(scene_set)


@router.delete("/{set_id}/scenes/{scene_id}", response_model=SceneSetSchema)
async def remove_scene(set_id: UUID, scene_id: UUID, model_data: ModelData = Depends(get_model_data)) -> SceneSetSchema:
    scene_set = _get_set(model_data, set_id)
    model_data.remove_scene_from_set(_get_scene(model_data, scene_id), scene_set)
    model_data.save()
    return SceneSetSchema.from_domain(scene_set)


@router.post("/{set_id}/scenes/{scene_id}/toggle", response_model=SceneSetSchema)
async def toggle_scene(set_id: UUID, scene_id: UUID, model_data: ModelData = Depends(get_model_data)) -> SceneSetSchema:
    scene_set = _get_set(model_data, set_id)
    model_data.toggle_scene_in_set(_get_scene(model_data, scene_id), scene_set)
    model_data.save()
    return SceneSetSchema.from_domain(scene_set)
