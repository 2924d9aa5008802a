"""Request body sources and their resolution into wire content."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_json

from httpreq.exceptions import SerializationFailedError

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"


class RawBody(BaseModel):
    """Caller-provided content sent as given.

    Accepts bytes, str, an iterable of bytes, or a file-like object (read
    at dispatch time).
    """

    content: Any

    model_config = {"frozen": True}


class JsonBody(BaseModel):
    """Structured value serialized to JSON."""

    value: Any

    model_config = {"frozen": True}


class FormBody(BaseModel):
    """Key/value pairs sent as a URL-encoded form."""

    values: Any

    model_config = {"frozen": True}


BodySource = RawBody | JsonBody | FormBody


class ResolvedBody(BaseModel):
    """Content and content type chosen for a single dispatch."""

    content: Any = None
    content_type: str = ""

    model_config = {"frozen": True}


def select_body(
    raw: RawBody | None,
    structured: JsonBody | None,
    form: FormBody | None,
) -> BodySource | None:
    """Pick the active body: raw, then structured, then form."""
    for source in (raw, structured, form):
        if source is not None:
            return source
    return None


def resolve_body(source: BodySource | None, content_type: str = "") -> ResolvedBody:
    """Encode the selected body source.

    Args:
        source: The active body, or None for an empty request.
        content_type: Caller-supplied content type. Kept for raw bodies and
            bodiless requests, replaced for JSON and form bodies.

    Returns:
        The wire content and the content type to send with it.

    Raises:
        SerializationFailedError: If a structured value cannot be encoded.
    """
    if source is None:
        return ResolvedBody(content_type=content_type)

    if isinstance(source, RawBody):
        content = source.content
        if hasattr(content, "read"):
            content = content.read()
        return ResolvedBody(content=content, content_type=content_type)

    if isinstance(source, JsonBody):
        try:
            encoded = to_json(source.value)
        except (PydanticSerializationError, ValueError) as e:
            raise SerializationFailedError(f"failed to marshal json request: {e}") from e
        return ResolvedBody(content=encoded, content_type=CONTENT_TYPE_JSON)

    return ResolvedBody(content=encode_form(source.values), content_type=CONTENT_TYPE_FORM)


def encode_form(values: Mapping[str, Any]) -> str:
    """URL-encode form values sorted by key.

    A value may be a single string or a sequence of strings; sequences
    repeat the key once per item in their original order.
    """
    pairs: list[tuple[str, str]] = []
    for key in sorted(values):
        value = values[key]
        if isinstance(value, str):
            pairs.append((key, value))
        else:
            pairs.extend((key, item) for item in value)
    return urlencode(pairs)
