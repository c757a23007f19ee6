import logging
from typing import TYPE_CHECKING, Generic, Iterator, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from travelglass.core.errors import RecommendationError
from travelglass.llm.client import LLMClient, RecommendationRequest
from travelglass.llm.prompts import (
    landmark_instructions,
    landmark_prompt,
    scene_instructions,
    scene_prompt,
)
from travelglass.llm.recommendations import LandmarkRecommendation, SceneRecommendation
from travelglass.llm.tools.find_landmarks_tool import FindLandmarksTool, SearchType
from travelglass.models.domain import Landmark, TravelScene

if TYPE_CHECKING:
    from travelglass.services.model_data import ModelData

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class _RecommendationAssistant(Generic[R]):
    """
    Holds the latest snapshot of one recommendation while it streams in.
    A caller cancels generation by no longer consuming the iterator.
    """

    recommendation_type: Type[R]

    def __init__(self, client: LLMClient):
        self.client = client
        self.recommendation: Optional[R] = None
        self.error: Optional[Exception] = None

    def build_request(self) -> RecommendationRequest:
        raise NotImplementedError

    @property
    def is_available(self) -> bool:
        return self.client.is_available()

    def reset_recommendation(self) -> None:
        self.recommendation = None

    def stream_recommendation(self) -> Iterator[R]:
        request = self.build_request()
        self.error = None
        try:
            for snapshot in self.client.stream(request):
                self.recommendation = self.recommendation_type.model_validate(snapshot)
                yield self.recommendation
        except ValidationError as exc:
            logger.error("Unusable recommendation snapshot for %s: %s", request.subject, exc)
            self.error = RecommendationError(f"Unusable recommendation for {request.subject}")
            raise self.error from exc
        except RecommendationError as exc:
            self.error = exc
            raise

    def generate_recommendation(self) -> Optional[R]:
        for _ in self.stream_recommendation():
            pass
        return self.recommendation


class LandmarkAIAssistant(_RecommendationAssistant[LandmarkRecommendation]):
    recommendation_type = LandmarkRecommendation

    def __init__(self, landmark: Landmark, model_data: "ModelData", client: LLMClient):
        super().__init__(client)
        self.landmark = landmark
        self.model_data = model_data
        self.search_tool = FindLandmarksTool(model_data)

    def build_request(self) -> RecommendationRequest:
        nearby = self.search_tool.call(SearchType.nearby, self.landmark.name)
        return RecommendationRequest(
            subject=self.landmark.name,
            instructions=landmark_instructions(self.landmark, nearby=nearby),
            prompt=landmark_prompt(self.landmark),
            example=LandmarkRecommendation.example(),
        )


class TravelSceneAIAssistant(_RecommendationAssistant[SceneRecommendation]):
    recommendation_type = SceneRecommendation

    def __init__(self, scene: TravelScene, client: LLMClient):
        super().__init__(client)
        self.scene = scene

    def build_request(self) -> RecommendationRequest:
        return RecommendationRequest(
            subject=f"{self.scene.name}, {self.scene.country}",
            instructions=scene_instructions(self.scene),
            prompt=scene_prompt(self.scene),
            example=SceneRecommendation.example(),
        )
