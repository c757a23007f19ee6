import logging
from dataclasses import asdict, fields
from datetime import datetime, timezone
from typing import Any, Dict, List, Type, TypeVar
from uuid import UUID

from sqlmodel import Session, SQLModel, select

from travelglass.storage.db import get_engine, session_scope
from travelglass.storage.repository import SceneSetRecord, ScenePhotoRecord, TravelSceneRecord
from travelglass.storage.tables import PhotoRow, SceneRow, SceneSetLink, SceneSetRow, StoreMetaRow

logger = logging.getLogger(__name__)

INITIALIZED_KEY = "initialized"

R = TypeVar("R")


def _as_utc(value: Any) -> Any:
    # SQLite hands datetimes back without a timezone
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_record(record_type: Type[R], row: SQLModel, **extra: Any) -> R:
    values = {
        f.name: _as_utc(getattr(row, f.name))
        for f in fields(record_type)
        if f.name not in extra
    }
    return record_type(**values, **extra)


def _upsert(session: Session, existing: Dict[UUID, SQLModel], row_type: Type[SQLModel], values: Dict[str, Any]) -> None:
    row = existing.get(values["id"])
    if row is None:
        session.add(row_type(**values))
        return
    for key, value in values.items():
        if key != "created_at":
            setattr(row, key, value)


class SqlRepository:
    """Repository backed by any SQLAlchemy database URL."""

    def __init__(self, url: str) -> None:
        self.engine = get_engine(url)
        SQLModel.metadata.create_all(self.engine)
        logger.info("Using SQL store at %s", self.engine.url.render_as_string(hide_password=True))

    def is_initialized(self) -> bool:
        with Session(self.engine) as session:
            return session.get(StoreMetaRow, INITIALIZED_KEY) is not None

    def load_scenes(self) -> List[TravelSceneRecord]:
        with Session(self.engine) as session:
            rows = session.exec(select(SceneRow).order_by(SceneRow.updated_at.desc())).all()
            return [_to_record(TravelSceneRecord, row) for row in rows]

    def load_scene_sets(self) -> List[SceneSetRecord]:
        with Session(self.engine) as session:
            members: Dict[UUID, List[UUID]] = {}
            for link in session.exec(select(SceneSetLink)).all():
                members.setdefault(link.scene_set_id, []).append(link.scene_id)
            rows = session.exec(select(SceneSetRow).order_by(SceneSetRow.name)).all()
            return [
                _to_record(SceneSetRecord, row, scene_ids=sorted(members.get(row.id, []), key=str))
                for row in rows
            ]

    def load_photos(self) -> List[ScenePhotoRecord]:
        with Session(self.engine) as session:
            rows = session.exec(
                select(PhotoRow).order_by(PhotoRow.order_index, PhotoRow.created_at)
            ).all()
            return [_to_record(ScenePhotoRecord, row) for row in rows]

    def sync(
        self,
        scenes: List[TravelSceneRecord],
        scene_sets: List[SceneSetRecord],
        photos: List[ScenePhotoRecord],
    ) -> None:
        scene_ids = {r.id for r in scenes}
        set_ids = {r.id for r in scene_sets}
        photo_ids = {r.id for r in photos}

        with session_scope(self.engine) as session:
            existing_scenes = {row.id: row for row in session.exec(select(SceneRow)).all()}
            existing_sets = {row.id: row for row in session.exec(select(SceneSetRow)).all()}
            existing_photos = {row.id: row for row in session.exec(select(PhotoRow)).all()}

            # Children go before parents on delete and after them on insert
            for link in session.exec(select(SceneSetLink)).all():
                session.delete(link)
            for row in existing_photos.values():
                if row.id not in photo_ids:
                    session.delete(row)
            session.flush()
            for row in existing_sets.values():
                if row.id not in set_ids:
                    session.delete(row)
            for row in existing_scenes.values():
                if row.id not in scene_ids:
                    session.delete(row)
            session.flush()

            for record in scenes:
                _upsert(session, existing_scenes, SceneRow, asdict(record))
            for record in scene_sets:
                values = asdict(record)
                values.pop("scene_ids")
                _upsert(session, existing_sets, SceneSetRow, values)
            session.flush()

            for record in photos:
                _upsert(session, existing_photos, PhotoRow, asdict(record))
            for record in scene_sets:
                session.add_all(
                    SceneSetLink(scene_set_id=record.id, scene_id=scene_id)
                    for scene_id in record.scene_ids
                    if scene_id in scene_ids
                )

            if session.get(StoreMetaRow, INITIALIZED_KEY) is None:
                session.add(StoreMetaRow(key=INITIALIZED_KEY, value="1"))
        logger.debug("Synced %d scenes, %d sets and %d photos", len(scenes), len(scene_sets), len(photos))
