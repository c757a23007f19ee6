from datetime import datetime, timezone
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from travelglass.models.colors import DEFAULT_COLOR_HEX, color_to_hex
from travelglass.models.domain import (
    Badge,
    Landmark,
    LandmarkCollection,
    MapItem,
    SceneSet,
    ScenePhoto,
    SceneStatus,
    TravelScene,
    Visit,
)
from travelglass.models.locations import City, Country, Region


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Naive timestamps from clients are taken to be UTC
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class BadgeSchema(BaseModel):
    id: str
    name: str
    symbol_name: str

    @classmethod
    def from_domain(cls, obj: Badge) -> "BadgeSchema":
        return cls(id=obj.value, name=obj.badge_name, symbol_name=obj.symbol_name)


class LandmarkSchema(BaseModel):
    id: int
    name: str
    continent: str
    description: str
    latitude: float
    longitude: float
    span: float
    place_id: Optional[str] = None
    total_area_km2: Optional[float] = None
    formatted_total_area: str = ""
    formatted_elevation: str = ""
    formatted_location: str = ""
    background_image_name: str
    thumbnail_image_name: str
    badge: Optional[BadgeSchema] = None
    badge_progress: Optional[Dict[str, bool]] = None
    badge_earned: bool = False
    is_favorite: bool = False

    @classmethod
    def from_domain(cls, obj: Landmark, is_favorite: bool = False) -> "LandmarkSchema":
        progress = obj.badge_progress
        return cls(
            id=obj.id,
            name=obj.name,
            continent=obj.continent,
            description=obj.description,
            latitude=obj.latitude,
            longitude=obj.longitude,
            span=obj.span,
            place_id=obj.place_id,
            total_area_km2=obj.total_area_km2,
            formatted_total_area=obj.formatted_total_area,
            formatted_elevation=obj.formatted_elevation,
            formatted_location=obj.formatted_location,
            background_image_name=obj.background_image_name,
            thumbnail_image_name=obj.thumbnail_image_name,
            badge=BadgeSchema.from_domain(obj.badge) if obj.badge else None,
            badge_progress=(
                {a.value: done for a, done in progress.as_dict().items()} if progress else None
            ),
            badge_earned=bool(progress and progress.earned),
            is_favorite=is_favorite,
        )


class MapItemSchema(BaseModel):
    name: str
    latitude: float
    longitude: float
    place_id: Optional[str] = None

    @classmethod
    def from_domain(cls, obj: MapItem) -> "MapItemSchema":
        return cls(
            name=obj.name,
            latitude=obj.latitude,
            longitude=obj.longitude,
            place_id=obj.place_id,
        )


class CollectionSchema(BaseModel):
    id: int
    name: str
    description: str
    is_favorites_collection: bool
    landmark_ids: List[int]
    landmarks: List[LandmarkSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, obj: LandmarkCollection, landmarks: List[Landmark]) -> "CollectionSchema":
        return cls(
            id=obj.id,
            name=obj.name,
            description=obj.description,
            is_favorites_collection=obj.is_favorites_collection,
            landmark_ids=list(obj.landmark_ids),
            landmarks=[LandmarkSchema.from_domain(l) for l in landmarks],
        )


class CollectionUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None


class VisitSchema(BaseModel):
    id: UUID
    start_date: datetime
    end_date: datetime
    notes: str
    duration_in_days: int

    @classmethod
    def from_domain(cls, obj: Visit) -> "VisitSchema":
        return cls(
            id=obj.id,
            start_date=obj.start_date,
            end_date=obj.end_date,
            notes=obj.notes,
            duration_in_days=obj.duration_in_days,
        )


class VisitCreate(BaseModel):
    start_date: datetime
    end_date: datetime
    notes: str = ""

    @field_validator("start_date", "end_date")
    @classmethod
    def to_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @model_validator(mode="after")
    def check_range(self) -> "VisitCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not precede start_date")
        return self


class PhotoSchema(BaseModel):
    id: UUID
    caption: str
    created_at: datetime
    size: int

    @classmethod
    def from_domain(cls, obj: ScenePhoto) -> "PhotoSchema":
        return cls(id=obj.id, caption=obj.caption, created_at=obj.created_at, size=len(obj.image_data))


class SceneSchema(BaseModel):
    id: UUID
    name: str
    country: str
    description: str
    latitude: float
    longitude: float
    status: SceneStatus
    status_symbol: str
    visits: List[VisitSchema]
    latest_visit: Optional[VisitSchema] = None
    total_days_visited: int
    visit_count: int
    planned_date: Optional[datetime] = None
    notes: str
    associated_landmark_ids: List[int]
    photos: List[PhotoSchema]
    set_ids: List[UUID] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, obj: TravelScene, sets: Optional[List[SceneSet]] = None) -> "SceneSchema":
        latest = obj.latest_visit
        return cls(
            id=obj.id,
            name=obj.name,
            country=obj.country,
            description=obj.description,
            latitude=obj.latitude,
            longitude=obj.longitude,
            status=obj.status,
            status_symbol=obj.status.symbol_name,
            visits=[VisitSchema.from_domain(v) for v in obj.visits],
            latest_visit=VisitSchema.from_domain(latest) if latest else None,
            total_days_visited=obj.total_days_visited,
            visit_count=obj.visit_count,
            planned_date=obj.planned_date,
            notes=obj.notes,
            associated_landmark_ids=list(obj.associated_landmark_ids),
            photos=[PhotoSchema.from_domain(p) for p in obj.photos],
            set_ids=[s.id for s in sets or []],
        )


class SceneCreate(BaseModel):
    country: str
    region: str
    city: str
    name: Optional[str] = None
    description: str = ""
    notes: str = ""
    status: SceneStatus = SceneStatus.planned
    planned_date: Optional[datetime] = None
    associated_landmark_ids: List[int] = Field(default_factory=list)

    @field_validator("planned_date")
    @classmethod
    def to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(value)


class StatusUpdate(BaseModel):
    status: SceneStatus


class SceneSetSchema(BaseModel):
    id: UUID
    name: str
    description: str
    color: str
    color_hex: str
    icon_name: str
    scene_ids: List[UUID]

    @classmethod
    def from_domain(cls, obj: SceneSet) -> "SceneSetSchema":
        return cls(
            id=obj.id,
            name=obj.name,
            description=obj.description,
            color=obj.color,
            color_hex=color_to_hex(obj.color) or DEFAULT_COLOR_HEX,
            icon_name=obj.icon_name,
            scene_ids=sorted(obj.scene_ids, key=str),
        )


class SceneSetCreate(BaseModel):
    name: str
    description: str = ""
    color: str = "blue"
    icon_name: str = "folder.fill"


class CitySchema(BaseModel):
    id: UUID
    name: str
    local_name: Optional[str] = None
    display_name: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @classmethod
    def from_domain(cls, obj: City) -> "CitySchema":
        return cls(
            id=obj.id,
            name=obj.name,
            local_name=obj.local_name,
            display_name=obj.display_name,
            latitude=obj.latitude,
            longitude=obj.longitude,
        )


class RegionSchema(BaseModel):
    id: UUID
    name: str
    local_name: Optional[str] = None
    display_name: str
    cities: List[CitySchema]

    @classmethod
    def from_domain(cls, obj: Region) -> "RegionSchema":
        return cls(
            id=obj.id,
            name=obj.name,
            local_name=obj.local_name,
            display_name=obj.display_name,
            cities=[CitySchema.from_domain(c) for c in obj.cities],
        )


class CountrySchema(BaseModel):
    id: UUID
    name: str
    code: str
    local_name: Optional[str] = None
    display_name: str
    region_label: str
    regions: List[RegionSchema]

    @classmethod
    def from_domain(cls, obj: Country) -> "CountrySchema":
        return cls(
            id=obj.id,
            name=obj.name,
            code=obj.code,
            local_name=obj.local_name,
            display_name=obj.display_name,
            region_label=obj.region_label,
            regions=[RegionSchema.from_domain(r) for r in obj.regions],
        )


class ContinentSchema(BaseModel):
    name: str
    landmarks: List[LandmarkSchema]
