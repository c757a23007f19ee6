from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List
from uuid import UUID, uuid4

from travelglass.models.domain import Continent, Landmark, utc_now

if TYPE_CHECKING:
    from travelglass.services.model_data import ModelData

ALL_LANDMARKS_LIMIT = 10
FORMATTED_NAMES_LIMIT = 5


class SearchType(str, Enum):
    by_continent = "by_continent"
    by_name = "by_name"
    nearby = "nearby"
    all = "all"


@dataclass
class Search:
    search_type: SearchType
    query: str
    searched_at: datetime = field(default_factory=utc_now)
    id: UUID = field(default_factory=uuid4)


class FindLandmarksTool:
    """Searches the landmark catalog by continent, name, neighbourhood, or all."""

    name = "findLandmarks"
    description = "Searches for landmarks based on various criteria such as continent, name, or features."

    def __init__(self, model_data: "ModelData"):
        self.model_data = model_data
        self.search_history: List[Search] = []

    def call(self, search_type: SearchType, query: str) -> str:
        self.search_history.append(Search(search_type=search_type, query=query))
        results = self.find_landmarks(search_type, query)
        return self.format_results(results, query)

    def find_landmarks(self, search_type: SearchType, query: str) -> List[Landmark]:
        needle = query.lower()
        landmarks = self.model_data.landmarks

        if search_type is SearchType.by_continent:
            continent = next(
                (
                    c
                    for c in Continent
                    if needle in c.value.lower() or needle in c.name.lower()
                ),
                None,
            )
            return self.model_data.landmarks_in(continent) if continent else []

        if search_type is SearchType.by_name:
            return [l for l in landmarks if needle in l.name.lower()]

        if search_type is SearchType.nearby:
            target = next((l for l in landmarks if needle in l.name.lower()), None)
            if target is None:
                return []
            return [l for l in landmarks if l.continent == target.continent and l.id != target.id]

        return landmarks[:ALL_LANDMARKS_LIMIT]

    @staticmethod
    def format_results(landmarks: List[Landmark], query: str) -> str:
        if not landmarks:
            return f"No landmarks found matching '{query}'."
        names = ", ".join(l.name for l in landmarks[:FORMATTED_NAMES_LIMIT])
        more = ""
        if len(landmarks) > FORMATTED_NAMES_LIMIT:
            more = f" and {len(landmarks) - FORMATTED_NAMES_LIMIT} more"
        return f"Found {len(landmarks)} landmark(s): {names}{more}."
