import json

import pytest
import requests

from travelglass.core.errors import RecommendationError, RecommendationUnavailableError
from travelglass.llm.assistants import LandmarkAIAssistant, TravelSceneAIAssistant
from travelglass.llm.backends import ollama_backend
from travelglass.llm.backends.mock_backend import MockRecommendationBackend
from travelglass.llm.backends.ollama_backend import OllamaRecommendationBackend
from travelglass.llm.client import LLMClient, RecommendationRequest
from travelglass.llm.partial_json import parse_partial_json
from travelglass.llm.prompts import scene_instructions
from travelglass.llm.recommendations import LandmarkRecommendation
from travelglass.llm.tools.find_landmarks_tool import FindLandmarksTool, SearchType


class FailingBackend:
    def __init__(self, exc: Exception):
        self.exc = exc

    def is_available(self) -> bool:
        return False

    def stream(self, request):
        yield {"title": "Half"}
        raise self.exc


class BadShapeBackend:
    def is_available(self) -> bool:
        return True

    def stream(self, request):
        yield {"activities": 5}


class FakeStreamResponse:
    def __init__(self, contents):
        self.lines = [
            json.dumps({"message": {"content": c}, "done": i == len(contents) - 1}).encode()
            for i, c in enumerate(contents)
        ]

    def raise_for_status(self) -> None:
        pass

    def iter_lines(self):
        return iter(self.lines)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def test_mock_stream_grows_monotonically(model_data):
    fuji = model_data.landmarks_by_id[1016]
    assistant = LandmarkAIAssistant(fuji, model_data, LLMClient(MockRecommendationBackend()))

    snapshots = list(assistant.stream_recommendation())

    assert len(snapshots) > 1
    for before, after in zip(snapshots, snapshots[1:]):
        for key, value in before.model_dump(exclude_none=True).items():
            current = getattr(after, key)
            if isinstance(value, list):
                assert current[: len(value)] == value
            else:
                assert current == value
    final = assistant.recommendation
    assert final is snapshots[-1]
    assert final.title == "Discover Mount Fuji"
    assert len(final.nearby_attractions) == 3
    assert assistant.error is None


def test_reset_clears_recommendation(model_data):
    fuji = model_data.landmarks_by_id[1016]
    assistant = LandmarkAIAssistant(fuji, model_data, LLMClient(MockRecommendationBackend()))

    assert assistant.generate_recommendation() is not None
    assistant.reset_recommendation()

    assert assistant.recommendation is None
    assert assistant.is_available


def test_landmark_assistant_searches_nearby_landmarks(model_data):
    fuji = model_data.landmarks_by_id[1016]
    assistant = LandmarkAIAssistant(fuji, model_data, LLMClient(MockRecommendationBackend()))

    request = assistant.build_request()

    assert assistant.search_tool.search_history[-1].search_type is SearchType.nearby
    assert "Wulingyuan" in request.instructions
    assert "Elevation: 3,776 m" in request.instructions
    assert "Region: Honshu, Japan" in request.instructions


def test_scene_assistant_generates_scene_fields(model_data):
    tokyo = next(s for s in model_data.travel_scenes if s.name == "Tokyo")
    assistant = TravelSceneAIAssistant(tokyo, LLMClient(MockRecommendationBackend()))

    result = assistant.generate_recommendation()

    assert result.title == "Discover Tokyo, Japan"
    assert len(result.local_cuisine) == 3
    assert len(result.cultural_insights) == 3


def test_scene_instructions_mention_visit_and_notes(model_data):
    tokyo = next(s for s in model_data.travel_scenes if s.name == "Tokyo")

    text = scene_instructions(tokyo)

    assert "Status: Visited" in text
    assert "Traveler's notes: Love this city!" in text
    assert "Previously visited on April 27, 2024" in text


def test_stopping_early_keeps_last_snapshot(model_data):
    fuji = model_data.landmarks_by_id[1016]
    assistant = LandmarkAIAssistant(fuji, model_data, LLMClient(MockRecommendationBackend()))

    stream = assistant.stream_recommendation()
    first = next(stream)
    stream.close()

    assert assistant.recommendation is first
    assert first.description is None


def test_backend_failure_is_recorded_and_raised(model_data):
    fuji = model_data.landmarks_by_id[1016]
    error = RecommendationError("model crashed")
    assistant = LandmarkAIAssistant(fuji, model_data, LLMClient(FailingBackend(error)))

    with pytest.raises(RecommendationError):
        assistant.generate_recommendation()

    assert assistant.error is error
    assert assistant.recommendation.title == "Half"
    assert not assistant.is_available


def test_malformed_snapshot_becomes_recommendation_error(model_data):
    fuji = model_data.landmarks_by_id[1016]
    assistant = LandmarkAIAssistant(fuji, model_data, LLMClient(BadShapeBackend()))

    with pytest.raises(RecommendationError):
        assistant.generate_recommendation()
    assert isinstance(assistant.error, RecommendationError)


def test_parse_partial_json():
    assert parse_partial_json('{"title": "Disc') == {"title": "Disc"}
    assert parse_partial_json('{"title": "A", "activities": ["x", "y') == {
        "title": "A",
        "activities": ["x", "y"],
    }
    assert parse_partial_json('{"title": "A", "desc') == {"title": "A"}
    assert parse_partial_json('{"title": "A", "description":') == {"title": "A"}
    assert parse_partial_json('{"title": "A",') == {"title": "A"}
    assert parse_partial_json('{"title": "A"}') == {"title": "A"}
    assert parse_partial_json("no json here") is None


def test_ollama_backend_streams_partial_snapshots(monkeypatch):
    contents = ['{"title": "Fu', 'ji", "activities": ["a"', "]}"]
    monkeypatch.setattr(
        ollama_backend.requests, "post", lambda *args, **kwargs: FakeStreamResponse(contents)
    )
    backend = OllamaRecommendationBackend(host="http://ollama.test", model="llama3", timeout=5)
    request = RecommendationRequest(
        subject="Mount Fuji", instructions="", prompt="", example=LandmarkRecommendation.example()
    )

    snapshots = list(backend.stream(request))

    assert snapshots == [{"title": "Fu"}, {"title": "Fuji", "activities": ["a"]}]


def test_ollama_backend_maps_connection_errors(monkeypatch):
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(ollama_backend.requests, "post", refuse)
    backend = OllamaRecommendationBackend(host="http://ollama.test", model="llama3", timeout=5)
    request = RecommendationRequest(subject="x", instructions="", prompt="")

    with pytest.raises(RecommendationUnavailableError):
        list(backend.stream(request))


def test_ollama_backend_rejects_non_json_output(monkeypatch):
    monkeypatch.setattr(
        ollama_backend.requests, "post", lambda *args, **kwargs: FakeStreamResponse(["Sorry, I can't"])
    )
    backend = OllamaRecommendationBackend(host="http://ollama.test", model="llama3", timeout=5)

    with pytest.raises(RecommendationError):
        list(backend.stream(RecommendationRequest(subject="x", instructions="", prompt="")))


def test_find_landmarks_tool(model_data):
    tool = FindLandmarksTool(model_data)

    assert [l.name for l in tool.find_landmarks(SearchType.by_continent, "asia")] == [
        "Mount Everest",
        "Mount Fuji",
        "Wulingyuan",
    ]
    assert tool.find_landmarks(SearchType.by_continent, "atlantis") == []
    assert [l.name for l in tool.find_landmarks(SearchType.nearby, "mount fuji")] == [
        "Wulingyuan",
        "Mount Everest",
    ]
    assert tool.find_landmarks(SearchType.nearby, "nowhere") == []
    assert len(tool.find_landmarks(SearchType.all, "")) == 10

    result = tool.call(SearchType.by_name, "mount")
    assert result.startswith("Found 4 landmark(s): ")
    assert len(tool.search_history) == 1


def test_find_landmarks_tool_formatting(model_data):
    landmarks = model_data.landmarks[:7]

    text = FindLandmarksTool.format_results(landmarks, "all")

    assert text.endswith(" and 2 more.")
    assert text.count(",") == 4
    assert FindLandmarksTool.format_results([], "zzz") == "No landmarks found matching 'zzz'."
