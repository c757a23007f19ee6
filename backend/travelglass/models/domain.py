from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Mapping, Optional, Set, Union
from uuid import UUID, uuid4

FAVORITES_COLLECTION_ID = 1001


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Continent(str, Enum):
    africa = "Africa"
    antarctica = "Antarctica"
    asia = "Asia"
    australia_oceania = "Australia/Oceania"
    europe = "Europe"
    north_america = "North America"
    south_america = "South America"


ORDERED_CONTINENTS: List[Continent] = [
    Continent.asia,
    Continent.africa,
    Continent.antarctica,
    Continent.australia_oceania,
    Continent.europe,
    Continent.north_america,
    Continent.south_america,
]


def _format_meters(value: float) -> str:
    return f"{value:,.0f} m"


@dataclass(frozen=True)
class FixedElevation:
    meters: float

    def formatted(self) -> str:
        return _format_meters(self.meters)


@dataclass(frozen=True)
class OpenRangeElevation:
    """Only the upper bound is known, e.g. "up to 3,000 m"."""

    high_meters: float

    def formatted(self) -> str:
        return f"up to {_format_meters(self.high_meters)}"


@dataclass(frozen=True)
class ClosedRangeElevation:
    low_meters: float
    high_meters: float

    def formatted(self) -> str:
        return f"{self.low_meters:,.0f}–{_format_meters(self.high_meters)}"


Elevation = Union[FixedElevation, OpenRangeElevation, ClosedRangeElevation]


class Activity(str, Enum):
    take_photo = "take_photo"
    read_description = "read_description"
    find_nature = "find_nature"
    draw_sketch = "draw_sketch"

    @property
    def description(self) -> str:
        return _ACTIVITY_DESCRIPTIONS[self]


_ACTIVITY_DESCRIPTIONS: Dict[Activity, str] = {
    Activity.take_photo: "Take a photo",
    Activity.read_description: "Read the landmark description",
    Activity.find_nature: "Find a cool piece of nature",
    Activity.draw_sketch: "Draw a sketch of this landmark",
}


class Badge(str, Enum):
    great_barrier_reef = "great_barrier_reef"
    niagara_falls = "niagara_falls"
    sahara_desert = "sahara_desert"
    mount_fuji = "mount_fuji"
    amazon_rainforest = "amazon_rainforest"
    south_shetland_islands = "south_shetland_islands"
    rocky_mountains = "rocky_mountains"

    @property
    def badge_name(self) -> str:
        return _BADGE_NAMES[self]

    @property
    def symbol_name(self) -> str:
        return _BADGE_SYMBOLS[self]


_BADGE_NAMES: Dict[Badge, str] = {
    Badge.great_barrier_reef: "Great Barrier Reef",
    Badge.niagara_falls: "Niagara Falls",
    Badge.sahara_desert: "Sahara Desert",
    Badge.mount_fuji: "Mount Fuji",
    Badge.amazon_rainforest: "Amazon Rainforest",
    Badge.south_shetland_islands: "South Shetland Islands",
    Badge.rocky_mountains: "Rocky Mountains",
}

_BADGE_SYMBOLS: Dict[Badge, str] = {
    Badge.great_barrier_reef: "fish.fill",
    Badge.niagara_falls: "ferry.fill",
    Badge.sahara_desert: "sun.max.fill",
    Badge.mount_fuji: "mountain.2.fill",
    Badge.amazon_rainforest: "bird.fill",
    Badge.south_shetland_islands: "snowflake",
    Badge.rocky_mountains: "tree.fill",
}


class BadgeProgress:
    """
    Completion state of the four badge activities for one landmark. Every
    activity is always tracked; anything not supplied starts incomplete.
    """

    def __init__(self, progress: Optional[Mapping[Activity, bool]] = None) -> None:
        self._progress: Dict[Activity, bool] = {activity: False for activity in Activity}
        for activity, completed in (progress or {}).items():
            if activity in self._progress:
                self._progress[activity] = bool(completed)

    @property
    def activities(self) -> List[Activity]:
        return list(self._progress.keys())

    @property
    def earned(self) -> bool:
        return all(self._progress.values())

    def is_completed(self, activity: Activity) -> bool:
        return self._progress.get(activity, False)

    def add(self, activity: Activity) -> None:
        self._progress[activity] = True

    def remove(self, activity: Activity) -> None:
        self._progress[activity] = False

    def as_dict(self) -> Dict[Activity, bool]:
        return dict(self._progress)


@dataclass(eq=False)
class Landmark:
    id: int
    name: str
    continent: str
    description: str
    latitude: float
    longitude: float
    span: float
    place_id: Optional[str] = None
    total_area_km2: Optional[float] = None
    elevation: Optional[Elevation] = None
    location: Optional[str] = None
    badge: Optional[Badge] = None
    badge_progress: Optional[BadgeProgress] = None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Landmark) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def background_image_name(self) -> str:
        return f"{self.id}"

    @property
    def thumbnail_image_name(self) -> str:
        return f"{self.id}-thumb"

    @property
    def formatted_coordinates(self) -> str:
        return f"{self.latitude:g}\n{self.longitude:g}"

    @property
    def formatted_total_area(self) -> str:
        if self.total_area_km2 is None:
            return ""
        return f"{self.total_area_km2:,.0f} km²"

    @property
    def formatted_elevation(self) -> str:
        if self.elevation is None:
            return ""
        return self.elevation.formatted()

    @property
    def formatted_location(self) -> str:
        return self.location or ""


@dataclass(eq=False)
class LandmarkCollection:
    """
    A named, ordered group of landmark ids. Only the ids are stored; callers
    resolve them against the store's landmark index when they need objects.
    """

    id: int
    name: str
    description: str
    landmark_ids: List[int] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, LandmarkCollection) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def is_favorites_collection(self) -> bool:
        return self.id == FAVORITES_COLLECTION_ID

    def contains(self, landmark: Landmark) -> bool:
        return landmark.id in self.landmark_ids

    def add(self, landmark: Landmark) -> None:
        if landmark.id not in self.landmark_ids:
            self.landmark_ids.append(landmark.id)

    def remove(self, landmark: Landmark) -> None:
        if landmark.id in self.landmark_ids:
            self.landmark_ids.remove(landmark.id)

    def resolve(self, landmarks_by_id: Mapping[int, Landmark]) -> List[Landmark]:
        return [landmarks_by_id[i] for i in self.landmark_ids if i in landmarks_by_id]


@dataclass
class MapItem:
    name: str
    latitude: float
    longitude: float
    place_id: Optional[str] = None


@dataclass
class Visit:
    start_date: datetime
    end_date: datetime
    notes: str = ""
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise ValueError("Visit end date precedes its start date")

    @property
    def duration_in_days(self) -> int:
        # Inclusive: a same-day visit counts as one day
        return (self.end_date - self.start_date).days + 1


@dataclass
class ScenePhoto:
    image_data: bytes
    caption: str = ""
    created_at: datetime = field(default_factory=utc_now)
    id: UUID = field(default_factory=uuid4)


class SceneStatus(str, Enum):
    visited = "Visited"
    planned = "Planned"

    @property
    def symbol_name(self) -> str:
        return "checkmark.circle.fill" if self is SceneStatus.visited else "clock.circle.fill"


@dataclass(eq=False)
class TravelScene:
    name: str
    country: str
    latitude: float
    longitude: float
    status: SceneStatus
    description: str = ""
    visits: List[Visit] = field(default_factory=list)
    planned_date: Optional[datetime] = None
    notes: str = ""
    associated_landmark_ids: List[int] = field(default_factory=list)
    photos: List[ScenePhoto] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TravelScene) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def latest_visit(self) -> Optional[Visit]:
        # max() keeps the first of several visits sharing the latest start date
        if not self.visits:
            return None
        return max(self.visits, key=lambda v: v.start_date)

    @property
    def total_days_visited(self) -> int:
        return sum(v.duration_in_days for v in self.visits)

    @property
    def visit_count(self) -> int:
        return len(self.visits)


@dataclass(eq=False)
class SceneSet:
    name: str
    description: str = ""
    color: str = "blue"
    icon_name: str = "folder.fill"
    scene_ids: Set[UUID] = field(default_factory=set)
    id: UUID = field(default_factory=uuid4)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SceneSet) and other.id == self.id

    def __hash__(self) -> int:
        return hash(self.id)

    def contains(self, scene: TravelScene) -> bool:
        return scene.id in self.scene_ids
