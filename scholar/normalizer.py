"""
Response normalizer.

Providers wrap their JSON in prose or markdown fences, so extraction is
deliberately permissive: the candidate object is the span from the first
"{" to the last "}" in the text. This is not a JSON-aware scan. Two
independent objects, or stray braces in surrounding prose, yield a span
that does not parse; that surfaces as a ShapeError and the caller falls
back.
"""

import json
import re
from typing import Any, Dict, Iterable

from scholar.errors import ShapeError

# Greedy on purpose: first "{" through last "}".
_JSON_SPAN_RE = re.compile(r"\{[\s\S]*\}")


def _is_blank(value: Any) -> bool:
    # null and "" count as absent; 0, false and empty containers do not
    return value is None or (isinstance(value, str) and not value.strip())


def extract_json_object(text: str) -> str:
    """
    Return the first-brace-to-last-brace span of text.

    Raises:
        ShapeError: If the text holds no "{...}" span at all.
    """
    match = _JSON_SPAN_RE.search(text or "")
    if not match:
        raise ShapeError("no_json", "no JSON object found in provider output")
    return match.group(0)


def normalize(text: str, required_keys: Iterable[str]) -> Dict[str, Any]:
    """
    Parse provider output into a result object and check its shape.

    The parsed object is returned unmodified: no coercion, no defaults.

    Raises:
        ShapeError: On missing JSON, invalid JSON, a non-object payload or
            any missing required top-level key.
    """
    span = extract_json_object(text)

    try:
        parsed: Any = json.loads(span)
    except json.JSONDecodeError as e:
        raise ShapeError("invalid_json", str(e)) from e

    if not isinstance(parsed, dict):
        raise ShapeError("not_an_object", type(parsed).__name__)

    missing = [key for key in required_keys if _is_blank(parsed.get(key))]
    if missing:
        raise ShapeError("missing_keys", ", ".join(missing))

    return parsed
