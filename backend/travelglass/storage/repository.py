from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, List, Optional, Protocol
from uuid import UUID

from travelglass.models.colors import DEFAULT_COLOR_HEX, color_to_hex, hex_to_color
from travelglass.models.domain import (
    SceneSet,
    ScenePhoto,
    SceneStatus,
    TravelScene,
    Visit,
)


@dataclass
class TravelSceneRecord:
    id: UUID
    name: str
    country: str
    description: str
    latitude: float
    longitude: float
    status: str
    visit_date: Optional[datetime]
    planned_date: Optional[datetime]
    notes: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, scene: TravelScene, now: datetime) -> "TravelSceneRecord":
        latest = scene.latest_visit
        return cls(
            id=scene.id,
            name=scene.name,
            country=scene.country,
            description=scene.description,
            latitude=scene.latitude,
            longitude=scene.longitude,
            status=scene.status.value,
            # Only the latest visit start survives a round trip
            visit_date=latest.start_date if latest else None,
            planned_date=scene.planned_date,
            notes=scene.notes,
            created_at=now,
            updated_at=now,
        )

    def to_domain(self, photos: Optional[List[ScenePhoto]] = None) -> TravelScene:
        visits = []
        if self.visit_date is not None:
            visits = [Visit(start_date=self.visit_date, end_date=self.visit_date)]
        return TravelScene(
            id=self.id,
            name=self.name,
            country=self.country,
            description=self.description,
            latitude=self.latitude,
            longitude=self.longitude,
            status=parse_status(self.status),
            visits=visits,
            planned_date=self.planned_date,
            notes=self.notes,
            photos=photos or [],
        )


@dataclass
class SceneSetRecord:
    id: UUID
    name: str
    description: str
    color_hex: str
    icon_name: str
    created_at: datetime
    updated_at: datetime
    scene_ids: List[UUID] = field(default_factory=list)

    @classmethod
    def from_domain(cls, scene_set: SceneSet, now: datetime) -> "SceneSetRecord":
        return cls(
            id=scene_set.id,
            name=scene_set.name,
            description=scene_set.description,
            color_hex=color_to_hex(scene_set.color) or DEFAULT_COLOR_HEX,
            icon_name=scene_set.icon_name,
            created_at=now,
            updated_at=now,
            scene_ids=sorted(scene_set.scene_ids, key=str),
        )

    def to_domain(self) -> SceneSet:
        return SceneSet(
            id=self.id,
            name=self.name,
            description=self.description,
            color=hex_to_color(self.color_hex),
            icon_name=self.icon_name,
            scene_ids=set(self.scene_ids),
        )


@dataclass
class ScenePhotoRecord:
    id: UUID
    scene_id: UUID
    image_data: bytes
    caption: str
    created_at: datetime
    order_index: int = 0

    @classmethod
    def from_domain(cls, photo: ScenePhoto, scene_id: UUID, order_index: int) -> "ScenePhotoRecord":
        return cls(
            id=photo.id,
            scene_id=scene_id,
            image_data=photo.image_data,
            caption=photo.caption,
            created_at=photo.created_at,
            order_index=order_index,
        )

    def to_domain(self) -> ScenePhoto:
        return ScenePhoto(
            id=self.id,
            image_data=self.image_data,
            caption=self.caption,
            created_at=self.created_at,
        )


def parse_status(raw: str) -> SceneStatus:
    for status in SceneStatus:
        if status.value.lower() == (raw or "").lower():
            return status
    return SceneStatus.planned


class TravelRepository(Protocol):
    """
    Durable home of scenes, scene sets and photos.

    `sync` writes a complete snapshot in one transaction: every given record
    is created or updated (keeping its stored `created_at`) and every record
    not given is deleted. The first `sync` marks the store initialized.
    """

    def is_initialized(self) -> bool:
        ...

    def load_scenes(self) -> List[TravelSceneRecord]:
        ...

    def load_scene_sets(self) -> List[SceneSetRecord]:
        ...

    def load_photos(self) -> List[ScenePhotoRecord]:
        ...

    def sync(
        self,
        scenes: List[TravelSceneRecord],
        scene_sets: List[SceneSetRecord],
        photos: List[ScenePhotoRecord],
    ) -> None:
        ...


class InMemoryRepository:
    def __init__(self) -> None:
        self.scenes: Dict[UUID, TravelSceneRecord] = {}
        self.scene_sets: Dict[UUID, SceneSetRecord] = {}
        self.photos: Dict[UUID, ScenePhotoRecord] = {}
        self.initialized = False

    def is_initialized(self) -> bool:
        return self.initialized

    def sync(
        self,
        scenes: List[TravelSceneRecord],
        scene_sets: List[SceneSetRecord],
        photos: List[ScenePhotoRecord],
    ) -> None:
        for record in scenes:
            self.save_scene(record)
        for record in scene_sets:
            self.save_scene_set(record)
        for record in photos:
            self.save_photo(record)

        scene_ids = {r.id for r in scenes}
        set_ids = {r.id for r in scene_sets}
        photo_ids = {r.id for r in photos}
        for scene_id in [i for i in self.scenes if i not in scene_ids]:
            self.delete_scene(scene_id)
        for set_id in [i for i in self.scene_sets if i not in set_ids]:
            self.delete_scene_set(set_id)
        for photo_id in [i for i in self.photos if i not in photo_ids]:
            self.delete_photo(photo_id)
        self.initialized = True

    def load_scenes(self) -> List[TravelSceneRecord]:
        return sorted(self.scenes.values(), key=lambda r: r.updated_at, reverse=True)

    def load_scene_sets(self) -> List[SceneSetRecord]:
        return sorted(self.scene_sets.values(), key=lambda r: r.name)

    def load_photos(self) -> List[ScenePhotoRecord]:
        return sorted(self.photos.values(), key=lambda r: (r.order_index, r.created_at))

    def save_scene(self, record: TravelSceneRecord) -> TravelSceneRecord:
        existing = self.scenes.get(record.id)
        if existing:
            record = replace(record, created_at=existing.created_at)
        self.scenes[record.id] = record
        return record

    def save_scene_set(self, record: SceneSetRecord) -> SceneSetRecord:
        existing = self.scene_sets.get(record.id)
        if existing:
            record = replace(record, created_at=existing.created_at)
        self.scene_sets[record.id] = record
        return record

    def save_photo(self, record: ScenePhotoRecord) -> ScenePhotoRecord:
        self.photos[record.id] = record
        return record

    def delete_scene(self, scene_id: UUID) -> None:
        self.scenes.pop(scene_id, None)
        for photo_id in [p.id for p in self.photos.values() if p.scene_id == scene_id]:
            del self.photos[photo_id]
        for record in self.scene_sets.values():
            if scene_id in record.scene_ids:
                record.scene_ids.remove(scene_id)

    def delete_scene_set(self, set_id: UUID) -> None:
        self.scene_sets.pop(set_id, None)

    def delete_photo(self, photo_id: UUID) -> None:
        self.photos.pop(photo_id, None)
