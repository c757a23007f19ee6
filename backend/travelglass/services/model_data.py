"""
The in-memory store behind every endpoint: landmarks, landmark collections,
travel scenes and scene sets, plus the indices derived from them.

The store is not thread-safe. API handlers that touch it are `async def`, so
requests reach it one at a time on the event loop; recommendation streams
only read the landmark or scene they were started for. The one background
job is map-item resolution, whose result is published by replacing
`map_items_by_landmark_id` in a single assignment.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future
from datetime import datetime
from typing import Callable, Dict, List, Optional, Union
from uuid import UUID

from travelglass.core.errors import ProtectedCollectionError, SeedDataError
from travelglass.models.domain import (
    FAVORITES_COLLECTION_ID,
    Badge,
    Continent,
    Landmark,
    LandmarkCollection,
    MapItem,
    SceneSet,
    ScenePhoto,
    SceneStatus,
    TravelScene,
    Visit,
    utc_now,
)
from travelglass.services.map_items import CatalogMapItemResolver, MapItemResolver, fetch_map_items
from travelglass.storage.repository import (
    SceneSetRecord,
    ScenePhotoRecord,
    TravelRepository,
    TravelSceneRecord,
)
from travelglass.storage.seed_data import (
    EXAMPLE_SET_MEMBERSHIP,
    example_collections,
    example_landmarks,
    example_scene_sets,
    example_scenes,
)

logger = logging.getLogger(__name__)

FIRST_USER_COLLECTION_ID = 1002
NEW_COLLECTION_NAME = "New Collection"
NEW_COLLECTION_DESCRIPTION = "Add a description for your collection here…"


class ModelData:
    def __init__(
        self,
        repository: Optional[TravelRepository] = None,
        clock: Optional[Callable[[], datetime]] = None,
        map_item_resolver: Optional[MapItemResolver] = None,
        featured_landmark_id: int = 1016,
        landmarks: Optional[List[Landmark]] = None,
        collections: Optional[List[LandmarkCollection]] = None,
    ) -> None:
        self.repository = repository
        self.clock = clock or utc_now
        self.featured_landmark_id = featured_landmark_id

        self.landmarks: List[Landmark] = []
        self.landmarks_by_continent: Dict[Continent, List[Landmark]] = {}
        self.landmarks_by_id: Dict[int, Landmark] = {}
        self.featured_landmark: Optional[Landmark] = None
        self.map_items_by_landmark_id: Dict[int, MapItem] = {}

        self.favorites_collection: LandmarkCollection
        self.user_collections: List[LandmarkCollection] = []

        self.travel_scenes: List[TravelScene] = []
        self.scene_sets: List[SceneSet] = []

        self.load_landmarks(landmarks)
        self.load_collections(collections)
        self.load_travel_scenes()
        self.load_scene_sets()

        self.map_item_resolver = map_item_resolver or CatalogMapItemResolver(self.landmarks)

    # Landmarks

    def load_landmarks(self, seed: Optional[List[Landmark]] = None) -> None:
        landmarks = list(seed) if seed is not None else example_landmarks()
        by_id: Dict[int, Landmark] = {}
        for landmark in landmarks:
            if landmark.id in by_id:
                raise SeedDataError(f"Duplicate landmark id {landmark.id} in seed data")
            by_id[landmark.id] = landmark

        by_continent: Dict[Continent, List[Landmark]] = {}
        for landmark in landmarks:
            try:
                continent = Continent(landmark.continent)
            except ValueError:
                logger.warning("Landmark %s has unknown continent %r", landmark.id, landmark.continent)
                continue
            by_continent.setdefault(continent, []).append(landmark)

        self.landmarks = landmarks
        self.landmarks_by_id = by_id
        self.landmarks_by_continent = by_continent
        self.featured_landmark = by_id.get(self.featured_landmark_id)

    def landmarks_in(self, continent: Union[Continent, str]) -> List[Landmark]:
        try:
            key = Continent(continent)
        except ValueError:
            return []
        return sorted(self.landmarks_by_continent.get(key, []), key=lambda l: l.name)

    def search_landmarks(self, query: str) -> List[Landmark]:
        needle = query.strip().lower()
        if not needle:
            return list(self.landmarks)
        return [l for l in self.landmarks if needle in l.name.lower()]

    @property
    def earned_badges(self) -> List[Badge]:
        return [
            l.badge
            for l in self.landmarks
            if l.badge is not None and l.badge_progress is not None and l.badge_progress.earned
        ]

    # Map items

    @property
    def map_items_for_landmarks(self) -> List[MapItem]:
        return list(self.map_items_by_landmark_id.values())

    def start_map_item_fetch(self, executor: Executor) -> Future:
        landmarks = list(self.landmarks)
        future = executor.submit(fetch_map_items, landmarks, self.map_item_resolver)
        future.add_done_callback(self._publish_map_items)
        return future

    def _publish_map_items(self, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.warning("Couldn't fetch map items: %s", exc)
            return
        fetched = future.result()
        self.map_items_by_landmark_id = fetched
        logger.info("Resolved %d map items", len(fetched))

    # Collections

    def load_collections(self, seed: Optional[List[LandmarkCollection]] = None) -> None:
        collections = list(seed) if seed is not None else example_collections()
        favorites = next((c for c in collections if c.id == FAVORITES_COLLECTION_ID), None)
        if favorites is None:
            raise SeedDataError("Favorites collection missing from example data.")
        self.favorites_collection = favorites
        self.user_collections = [c for c in collections if c.id != FAVORITES_COLLECTION_ID]

    def collection_landmarks(self, collection: LandmarkCollection) -> List[Landmark]:
        return collection.resolve(self.landmarks_by_id)

    def find_collection(self, collection_id: int) -> Optional[LandmarkCollection]:
        if collection_id == FAVORITES_COLLECTION_ID:
            return self.favorites_collection
        return next((c for c in self.user_collections if c.id == collection_id), None)

    def is_favorite(self, landmark: Landmark) -> bool:
        return self.favorites_collection.contains(landmark)

    def toggle_favorite(self, landmark: Landmark) -> None:
        if self.is_favorite(landmark):
            self.remove_favorite(landmark)
        else:
            self.add_favorite(landmark)

    def add_favorite(self, landmark: Landmark) -> None:
        self.favorites_collection.add(landmark)

    def remove_favorite(self, landmark: Landmark) -> None:
        self.favorites_collection.remove(landmark)

    def add_user_collection(self) -> LandmarkCollection:
        next_id = FIRST_USER_COLLECTION_ID
        if self.user_collections:
            next_id = max(c.id for c in self.user_collections) + 1
        collection = LandmarkCollection(
            id=next_id,
            name=NEW_COLLECTION_NAME,
            description=NEW_COLLECTION_DESCRIPTION,
        )
        self.user_collections.append(collection)
        return collection

    def remove_collection(self, collection: LandmarkCollection) -> None:
        if collection.is_favorites_collection:
            raise ProtectedCollectionError("The Favorites collection cannot be removed")
        if collection in self.user_collections:
            self.user_collections.remove(collection)

    def collection_contains(self, collection: LandmarkCollection, landmark: Landmark) -> bool:
        return collection.contains(landmark)

    def collections_containing(self, landmark: Landmark) -> List[LandmarkCollection]:
        return [c for c in self.user_collections if c.contains(landmark)]

    def add_to_collection(self, landmark: Landmark, collection: LandmarkCollection) -> None:
        collection.add(landmark)

    def remove_from_collection(self, landmark: Landmark, collection: LandmarkCollection) -> None:
        collection.remove(landmark)

    # Travel scenes

    def _store_initialized(self) -> bool:
        return self.repository is not None and self.repository.is_initialized()

    def load_travel_scenes(self) -> None:
        if not self._store_initialized():
            self.travel_scenes = example_scenes(self.clock())
            return

        photos_by_scene: Dict[UUID, List[ScenePhoto]] = {}
        for photo in self.repository.load_photos():
            photos_by_scene.setdefault(photo.scene_id, []).append(photo.to_domain())
        self.travel_scenes = [r.to_domain(photos_by_scene.get(r.id)) for r in self.repository.load_scenes()]
        logger.info("Loaded %d travel scenes from repository", len(self.travel_scenes))

    @property
    def visited_scenes(self) -> List[TravelScene]:
        visited = [s for s in self.travel_scenes if s.status is SceneStatus.visited]
        # Scenes without a visit go last
        return sorted(
            visited,
            key=lambda s: (s.latest_visit is not None, s.latest_visit.start_date if s.latest_visit else 0),
            reverse=True,
        )

    @property
    def planned_scenes(self) -> List[TravelScene]:
        planned = [s for s in self.travel_scenes if s.status is SceneStatus.planned]
        return sorted(
            planned,
            key=lambda s: (s.planned_date is None, s.planned_date if s.planned_date else 0),
        )

    def find_scene(self, scene_id: UUID) -> Optional[TravelScene]:
        return next((s for s in self.travel_scenes if s.id == scene_id), None)

    def add_travel_scene(self, scene: TravelScene) -> None:
        self.travel_scenes.append(scene)

    def remove_travel_scene(self, scene: TravelScene) -> None:
        self.travel_scenes = [s for s in self.travel_scenes if s.id != scene.id]

    def update_scene_status(
        self, scene: TravelScene, status: SceneStatus, now: Optional[datetime] = None
    ) -> None:
        """
        Move a scene between visited and planned.

        Marking a scene visited records a same-day visit at `now` and drops the
        planned date. Marking it planned sets the planned date to `now` and
        discards every recorded visit.
        """
        now = now or self.clock()
        scene.status = status
        if status is SceneStatus.visited:
            scene.visits.append(Visit(start_date=now, end_date=now, notes=""))
            scene.planned_date = None
        else:
            scene.planned_date = now
            scene.visits = []

    def add_visit(self, scene: TravelScene, visit: Visit) -> None:
        scene.visits.append(visit)

    def add_photo(self, scene: TravelScene, photo: ScenePhoto) -> None:
        scene.photos.append(photo)

    def remove_photo(self, scene: TravelScene, photo_id: UUID) -> None:
        scene.photos = [p for p in scene.photos if p.id != photo_id]

    # Scene sets

    def load_scene_sets(self) -> None:
        if self._store_initialized():
            self.scene_sets = [r.to_domain() for r in self.repository.load_scene_sets()]
            return

        self.scene_sets = example_scene_sets()
        scenes_by_name = {s.name: s for s in self.travel_scenes}
        for scene_set in self.scene_sets:
            for scene_name in EXAMPLE_SET_MEMBERSHIP.get(scene_set.name, []):
                scene = scenes_by_name.get(scene_name)
                if scene is not None:
                    scene_set.scene_ids.add(scene.id)

    def find_scene_set(self, set_id: UUID) -> Optional[SceneSet]:
        return next((s for s in self.scene_sets if s.id == set_id), None)

    def add_scene_set(self, scene_set: SceneSet) -> None:
        self.scene_sets.append(scene_set)

    def remove_scene_set(self, scene_set: SceneSet) -> None:
        self.scene_sets = [s for s in self.scene_sets if s.id != scene_set.id]

    def scenes_for(self, scene_set: SceneSet) -> List[TravelScene]:
        return [s for s in self.travel_scenes if s.id in scene_set.scene_ids]

    def sets_for(self, scene: TravelScene) -> List[SceneSet]:
        return [s for s in self.scene_sets if scene.id in s.scene_ids]

    def add_scene_to_set(self, scene: TravelScene, scene_set: SceneSet) -> None:
        scene_set.scene_ids.add(scene.id)

    def remove_scene_from_set(self, scene: TravelScene, scene_set: SceneSet) -> None:
        scene_set.scene_ids.discard(scene.id)

    def toggle_scene_in_set(self, scene: TravelScene, scene_set: SceneSet) -> None:
        if scene.id in scene_set.scene_ids:
            scene_set.scene_ids.discard(scene.id)
        else:
            scene_set.scene_ids.add(scene.id)

    # Persistence

    def save(self) -> None:
        """Write scenes, sets and photos to the repository as one snapshot."""
        if self.repository is None:
            return
        now = self.clock()
        scenes = [TravelSceneRecord.from_domain(s, now) for s in self.travel_scenes]
        photos = [
            ScenePhotoRecord.from_domain(photo, scene.id, index)
            for scene in self.travel_scenes
            for index, photo in enumerate(scene.photos)
        ]
        scene_sets = [SceneSetRecord.from_domain(s, now) for s in self.scene_sets]
        self.repository.sync(scenes, scene_sets, photos)
        logger.debug("Saved %d scenes and %d sets", len(scenes), len(scene_sets))
