import itertools
import json
import logging
from typing import Iterator

from fastapi import HTTPException
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from travelglass.core.errors import RecommendationError, RecommendationUnavailableError

logger = logging.getLogger(__name__)

NDJSON_MEDIA_TYPE = "application/x-ndjson"


def stream_snapshots(snapshots: Iterator[BaseModel]) -> StreamingResponse:
    """
    Stream recommendation snapshots as newline-delimited JSON.

    The first snapshot is pulled before the response starts so that an
    unavailable or failing backend still maps to a 503 or 502. Failures after
    that point are reported as a final `{"error": ...}` line.
    """
    try:
        first = next(snapshots, None)
    except RecommendationUnavailableError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
    except RecommendationError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    head = [first] if first is not None else []

    def body() -> Iterator[str]:
        try:
            for snapshot in itertools.chain(head, snapshots):
                yield snapshot.model_dump_json() + "\n"
        except RecommendationError as exc:
            logger.error("Recommendation stream failed: %s", exc)
            yield json.dumps({"error": str(exc)}) + "\n"

    return StreamingResponse(body(), media_type=NDJSON_MEDIA_TYPE)
