"""Response normalization.

Hides the fallback order used to pull a display string out of a loosely
structured agent response body.
"""

from typing import Any

from .errors import NoContentError
from .models import (
    NestedMessageShape,
    NestedResultShape,
    OpaqueShape,
    PlainTextShape,
    RawTextShape,
    ResponseShape,
)


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def classify_response(body: Any) -> ResponseShape:
    """Classify a parsed response body into a known shape.

    Order matters: the first matching rule wins.

    Args:
        body: Parsed JSON body of a successful response

    Returns:
        The shape that determines which field supplies the display text
    """
    if not isinstance(body, dict):
        return OpaqueShape(None)

    raw = body.get("raw_response")
    if _non_empty_str(raw):
        return RawTextShape(raw)

    response = body.get("response")
    if isinstance(response, str):
        return PlainTextShape(response)

    if isinstance(response, dict):
        if _non_empty_str(response.get("result")):
            return NestedResultShape(response["result"])
        if _non_empty_str(response.get("message")):
            return NestedMessageShape(response["message"])

    return OpaqueShape(response)


def normalize_response(body: Any) -> str:
    """Extract the display string from a response body.

    Raises:
        NoContentError: If the extracted text is empty or whitespace
    """
    text = classify_response(body).display_text()
    if not text or not text.strip():
        raise NoContentError()
    return text
