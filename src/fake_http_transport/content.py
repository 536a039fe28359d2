"""Content generation for synthesised responses.

Structured values are encoded with pydantic-core, which understands dataclasses,
pydantic models, enums, datetimes, UUIDs, mappings and collections.
"""

from __future__ import annotations

from pydantic_core import to_json

from .exceptions import ContentGenerationError
from .types import ContentSpec, JsonContent, RawContent, RenderedContent


def serialise_json(value: object) -> bytes:
    """Encode a value as canonical JSON bytes.

    Raises:
        ContentGenerationError: If the value (or anything inside it) is not serialisable.
    """
    try:
        return to_json(value)
    except ValueError as exc:
        # PydanticSerializationError is a ValueError; circular references raise a plain one.
        raise ContentGenerationError(type(value).__name__, str(exc)) from exc


def render_content(spec: ContentSpec | None) -> RenderedContent:
    """Turn configured content into the payload of a single response."""
    if spec is None:
        return RenderedContent()
    if isinstance(spec, JsonContent):
        return RenderedContent(data=serialise_json(spec.value), content_type=spec.content_type)
    if isinstance(spec, RawContent):
        return RenderedContent(data=spec.data, content_type=spec.content_type)
    raise ContentGenerationError(type(spec).__name__, "unknown content specification")
