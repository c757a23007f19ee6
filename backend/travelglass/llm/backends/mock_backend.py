import copy
import logging
from typing import Any, Dict, Iterator

from travelglass.llm.client import RecommendationBackend, RecommendationRequest

logger = logging.getLogger(__name__)


class MockRecommendationBackend(RecommendationBackend):
    """
    A deterministic backend that simulates a streaming model. It personalizes
    the request's example recommendation with the subject's name and emits it
    one field at a time, list fields one item at a time, so every snapshot is
    a superset of the previous one.
    """

    def is_available(self) -> bool:
        return True

    def stream(self, request: RecommendationRequest) -> Iterator[Dict[str, Any]]:
        full = self._build(request)
        snapshot: Dict[str, Any] = {}
        count = 0
        for key, value in full.items():
            if isinstance(value, list):
                snapshot[key] = []
                for item in value:
                    snapshot[key].append(item)
                    count += 1
                    yield copy.deepcopy(snapshot)
            else:
                snapshot[key] = value
                count += 1
                yield copy.deepcopy(snapshot)
        logger.info("Mock recommendation for %s finished after %d snapshots", request.subject, count)

    def _build(self, request: RecommendationRequest) -> Dict[str, Any]:
        data = copy.deepcopy(request.example)
        if "title" in data:
            data["title"] = f"Discover {request.subject}"
        if "description" in data:
            data["description"] = f"{request.subject} is worth the trip. {data['description']}"
        return data
