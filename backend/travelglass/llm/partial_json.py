import json
from typing import Any, List, Optional

_CLOSERS = {"{": "}", "[": "]"}


def _close(fragment: str) -> Optional[str]:
    """Append whatever quotes and brackets are needed to close `fragment`."""
    stack: List[str] = []
    in_string = False
    escaped = False
    for char in fragment:
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in _CLOSERS:
            stack.append(_CLOSERS[char])
        elif char in "}]":
            if not stack or stack.pop() != char:
                return None

    text = fragment
    if in_string:
        if escaped:
            text = text[:-1]
        text += '"'
    text = text.rstrip()
    if text.endswith(","):
        text = text[:-1]
    if text.endswith(":"):
        return None
    return text + "".join(reversed(stack))


def parse_partial_json(text: str) -> Optional[Any]:
    """
    Best-effort parse of a JSON document that may have been cut off mid-stream.

    The fragment is closed and parsed; if that fails, it is cut back to the
    previous comma and tried again. Returns None when nothing parses.
    """
    start = text.find("{")
    if start < 0:
        return None
    candidate = text[start:].strip()
    try:
        return json.loads(candidate)
    except json.JSONDecodeError:
        pass

    while candidate:
        closed = _close(candidate)
        if closed is not None:
            try:
                return json.loads(closed)
            except json.JSONDecodeError:
                pass
        cut = candidate.rfind(",")
        if cut <= 0:
            break
        candidate = candidate[:cut]
    return None
