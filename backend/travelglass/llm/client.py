from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Protocol


class RecommendationBackend(Protocol):
    def stream(self, request: "RecommendationRequest") -> Iterator[Dict[str, Any]]:
        ...

    def is_available(self) -> bool:
        ...


@dataclass
class RecommendationRequest:
    subject: str
    instructions: str
    prompt: str
    example: Dict[str, Any] = field(default_factory=dict)


class LLMClient:
    """
    Pluggable LLM client abstraction. Backends yield increasingly complete
    recommendation snapshots as plain dicts; the offline mock backend is the
    default and a real model is plugged in by implementing
    RecommendationBackend.
    """

    def __init__(self, backend: RecommendationBackend):
        self.backend = backend

    def stream(self, request: RecommendationRequest) -> Iterator[Dict[str, Any]]:
        return self.backend.stream(request)

    def is_available(self) -> bool:
        return self.backend.is_available()
