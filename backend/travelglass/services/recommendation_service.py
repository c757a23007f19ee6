import logging

from travelglass.core.config import settings
from travelglass.llm.assistants import LandmarkAIAssistant, TravelSceneAIAssistant
from travelglass.llm.backends.mock_backend import MockRecommendationBackend
from travelglass.llm.backends.ollama_backend import OllamaRecommendationBackend
from travelglass.llm.client import LLMClient, RecommendationBackend
from travelglass.models.domain import Landmark, TravelScene
from travelglass.services.model_data import ModelData

logger = logging.getLogger(__name__)


class RecommendationService:
    def __init__(self, backend: RecommendationBackend | None = None):
        if backend is None:
            backend = (
                OllamaRecommendationBackend()
                if settings.llm_provider.lower() == "ollama"
                else MockRecommendationBackend()
            )
        self.client = LLMClient(backend=backend)
        logger.info("Recommendations served by %s", type(backend).__name__)

    def landmark_assistant(self, landmark: Landmark, model_data: ModelData) -> LandmarkAIAssistant:
        return LandmarkAIAssistant(landmark=landmark, model_data=model_data, client=self.client)

    def scene_assistant(self, scene: TravelScene) -> TravelSceneAIAssistant:
        return TravelSceneAIAssistant(scene=scene, client=self.client)

    def is_available(self) -> bool:
        return self.client.is_available()
