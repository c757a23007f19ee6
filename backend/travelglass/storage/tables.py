"""Database tables for travel scenes, scene sets and their photos."""

import datetime
import uuid

import sqlalchemy
import sqlmodel


class SceneRow(sqlmodel.SQLModel, table=True):
    __tablename__ = "travel_scene"  # type: ignore[misc]

    id: uuid.UUID = sqlmodel.Field(primary_key=True)
    name: str = sqlmodel.Field(index=True)
    country: str
    description: str = ""
    latitude: float
    longitude: float
    status: str
    visit_date: datetime.datetime | None = None
    planned_date: datetime.datetime | None = None
    notes: str = ""
    created_at: datetime.datetime
    updated_at: datetime.datetime = sqlmodel.Field(index=True)


class SceneSetRow(sqlmodel.SQLModel, table=True):
    __tablename__ = "scene_set"  # type: ignore[misc]

    id: uuid.UUID = sqlmodel.Field(primary_key=True)
    name: str = sqlmodel.Field(index=True)
    description: str = ""
    color_hex: str = sqlmodel.Field(max_length=7)
    icon_name: str
    created_at: datetime.datetime
    updated_at: datetime.datetime


class SceneSetLink(sqlmodel.SQLModel, table=True):
    """Membership of a scene in a set."""

    __tablename__ = "scene_set_link"  # type: ignore[misc]

    scene_set_id: uuid.UUID = sqlmodel.Field(foreign_key="scene_set.id", primary_key=True)
    scene_id: uuid.UUID = sqlmodel.Field(foreign_key="travel_scene.id", primary_key=True)


class PhotoRow(sqlmodel.SQLModel, table=True):
    __tablename__ = "scene_photo"  # type: ignore[misc]

    id: uuid.UUID = sqlmodel.Field(primary_key=True)
    scene_id: uuid.UUID = sqlmodel.Field(foreign_key="travel_scene.id", index=True)
    image_data: bytes = sqlmodel.Field(sa_column=sqlalchemy.Column(sqlalchemy.LargeBinary, nullable=False))
    caption: str = ""
    created_at: datetime.datetime
    order_index: int = 0


class StoreMetaRow(sqlmodel.SQLModel, table=True):
    """Key/value markers about the store itself."""

    __tablename__ = "store_meta"  # type: ignore[misc]

    key: str = sqlmodel.Field(primary_key=True, max_length=64)
    value: str
