from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Protocol

from travelglass.models.domain import Landmark, MapItem

logger = logging.getLogger(__name__)


class MapItemResolver(Protocol):
    def resolve(self, place_id: str) -> Optional[MapItem]:
        ...


class CatalogMapItemResolver:
    """
    Offline resolver that answers from the landmark catalog itself, using each
    landmark's own name and coordinates.
    """

    def __init__(self, landmarks: Iterable[Landmark]) -> None:
        self.items: Dict[str, MapItem] = {
            landmark.place_id: MapItem(
                name=landmark.name,
                latitude=landmark.latitude,
                longitude=landmark.longitude,
                place_id=landmark.place_id,
            )
            for landmark in landmarks
            if landmark.place_id
        }

    def resolve(self, place_id: str) -> Optional[MapItem]:
        return self.items.get(place_id)


def fetch_map_items(landmarks: Iterable[Landmark], resolver: MapItemResolver) -> Dict[int, MapItem]:
    fetched: Dict[int, MapItem] = {}
    for landmark in landmarks:
        if not landmark.place_id:
            continue
        try:
            item = resolver.resolve(landmark.place_id)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Couldn't resolve map item for landmark %s: %s", landmark.id, exc)
            continue
        if item is not None:
            fetched[landmark.id] = item
    return fetched
