from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from travelglass.api import get_model_data
from travelglass.core.errors import ProtectedCollectionError
from travelglass.models.domain import Landmark, LandmarkCollection
from travelglass.models.schemas import CollectionSchema, CollectionUpdate
from travelglass.services.model_data import ModelData

router = APIRouter()


def _get_collection(model_data: ModelData, collection_id: int) -> LandmarkCollection:
    collection = model_data.find_collection(collection_id)
    if not collection:
        raise HTTPException(status_code=404, detail="Collection not found")
    return collection


def _get_landmark(model_data: ModelData, landmark_id: int) -> Landmark:
    landmark = model_data.landmarks_by_id.get(landmark_id)
    if not landmark:
        raise HTTPException(status_code=404, detail="Landmark not found")
    return landmark


def _schema(model_data: ModelData, collection: LandmarkCollection) -> CollectionSchema:
    return CollectionSchema.from_domain(collection, model_data.collection_landmarks(collection))


@router.get("", response_model=List[CollectionSchema])
async def list_collections(model_data: ModelData = Depends(get_model_data)) -> List[CollectionSchema]:
    collections = [model_data.favorites_collection] + model_data.user_collections
    return [_schema(model_data, c) for c in collections]


@router.post("", response_model=CollectionSchema, status_code=201)
async def create_collection(model_data: ModelData = Depends(get_model_data)) -> CollectionSchema:
    return _schema(model_data, model_data.add_user_collection())


@router.get("/{collection_id}", response_model=CollectionSchema)
async def get_collection(collection_id: int, model_data: ModelData = Depends(get_model_data)) -> CollectionSchema:
    return _schema(model_data, _get_collection(model_data, collection_id))


@router.patch("/{collection_id}", response_model=CollectionSchema)
async def update_collection(
    collection_id: int,
    update: CollectionUpdate,
    model_data: ModelData = Depends(get_model_data),
) -> CollectionSchema:
    collection = _get_collection(model_data, collection_id)
    if update.name is not None:
        collection.name = update.name
    if update.description is not None:
        collection.description = update.description
    return _schema(model_data, collection)


@router.delete("/{collection_id}", status_code=204)
async def delete_collection(collection_id: int, model_data: ModelData = Depends(get_model_data)) -> Response:
    collection = _get_collection(model_data, collection_id)
    try:
        model_data.remove_collection(collection)
    except ProtectedCollectionError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return Response(status_code=204)


@router.put("/{collection_id}/landmarks/{landmark_id}", response_model=CollectionSchema)
async def add_landmark(
    collection_id: int, landmark_id: int, model_data: ModelData = Depends(get_model_data)
) -> CollectionSchema:
    collection = _get_collection(model_data, collection_id)
    model_data.add_to_collection(_get_landmark(model_data, landmark_id), collection)
    return _schema(model_data, collection)


@router.delete("/{collection_id}/landmarks/{landmark_id}", response_model=CollectionSchema)
async def remove_landmark(
    collection_id: int, landmark_id: int, model_data: ModelData = Depends(get_model_data)
) -> CollectionSchema:
    collection = _get_collection(model_data, collection_id)
    model_data.remove_from_collection(_get_landmark(model_data, landmark_id), collection)
    return _schema(model_data, collection)
