from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

import requests

from travelglass.core.config import settings
from travelglass.core.errors import RecommendationError, RecommendationUnavailableError
from travelglass.llm.client import RecommendationBackend, RecommendationRequest
from travelglass.llm.partial_json import parse_partial_json
from travelglass.llm.prompts import RECOMMENDATION_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


@dataclass
class OllamaRecommendationBackend(RecommendationBackend):
    """
    Recommendation backend using Ollama's streaming chat API.
    The model is asked for a JSON object shaped like the request's example;
    the accumulated output is re-parsed after every chunk and each new partial
    object is yielded as a snapshot.
    """

    host: str = field(default_factory=lambda: settings.ollama_host)
    model: str = field(default_factory=lambda: settings.ollama_model)
    timeout: int = field(default_factory=lambda: settings.ollama_timeout)

    def _build_messages(self, request: RecommendationRequest) -> List[dict]:
        return [
            {"role": "system", "content": RECOMMENDATION_SYSTEM_PROMPT + "\n\n" + request.instructions},
            {
                "role": "user",
                "content": request.prompt + "\n" + json.dumps(request.example, ensure_ascii=False),
            },
        ]

    def is_available(self) -> bool:
        try:
            resp = requests.get(f"{self.host}/api/tags", timeout=5)
            resp.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Ollama is not reachable at %s: %s", self.host, exc)
            return False
        models = [m.get("name", "") for m in resp.json().get("models", [])]
        return any(name == self.model or name.split(":")[0] == self.model for name in models)

    def stream(self, request: RecommendationRequest) -> Iterator[Dict[str, Any]]:
        payload = {
            "model": self.model,
            "messages": self._build_messages(request),
            "stream": True,
            "format": "json",
            # Greedy sampling
            "options": {"temperature": 0},
        }
        try:
            resp = requests.post(
                f"{self.host}/api/chat", json=payload, stream=True, timeout=self.timeout
            )
            resp.raise_for_status()
        except requests.ConnectionError as exc:
            logger.error("Ollama is unavailable: %s", exc)
            raise RecommendationUnavailableError(f"Ollama is unavailable at {self.host}") from exc
        except requests.RequestException as exc:
            logger.error("Ollama request failed: %s", exc)
            raise RecommendationError("Ollama request failed") from exc

        content = ""
        last: Optional[Dict[str, Any]] = None
        with resp:
            try:
                for line in resp.iter_lines():
                    if not line:
                        continue
                    chunk = json.loads(line)
                    if chunk.get("error"):
                        logger.error("Ollama returned an error: %s", chunk["error"])
                        raise RecommendationError(chunk["error"])
                    content += chunk.get("message", {}).get("content", "")
                    snapshot = parse_partial_json(content)
                    if isinstance(snapshot, dict) and snapshot and snapshot != last:
                        last = snapshot
                        yield snapshot
                    if chunk.get("done"):
                        break
            except requests.RequestException as exc:
                logger.error("Ollama stream interrupted: %s", exc)
                raise RecommendationError("Ollama stream interrupted") from exc
            except json.JSONDecodeError as exc:
                logger.error("Invalid stream chunk from Ollama: %s", exc)
                raise RecommendationError("Ollama returned an invalid stream chunk") from exc

        if last is None:
            logger.error("Invalid JSON from model: %s", content)
            raise RecommendationError("LLM returned invalid JSON")
