"""Generic JSON-to-component field mapping."""

from collections.abc import Iterable, Mapping
from typing import Any

from wowapi.mapping.models import Component, DefaultPolicy, MappingSpec


def map_fields(spec: MappingSpec, source: Mapping[str, Any] | None) -> Component:
    """Project a decoded JSON object onto a spec's declared fields.

    Each declared field is read from its source name (after renames).
    Present, non-null values are copied verbatim; missing or null ones get
    the spec's default under FILL and are dropped under OMIT. Nested
    structures are not touched.

    Args:
        spec: Mapping spec of the destination type.
        source: Decoded JSON object; None is treated as empty.

    Returns:
        Populated component.

    Raises:
        TypeError: If source is neither a mapping nor None.
    """
    if source is None:
        source = {}
    if not isinstance(source, Mapping):
        msg = f"{spec.name} expects a JSON object, got {type(source).__name__}"
        raise TypeError(msg)

    data: dict[str, Any] = {}
    for field in spec.field_names:
        value = source.get(spec.source_field(field))
        if value is not None:
            data[field] = value
        elif spec.default_policy == DefaultPolicy.FILL:
            data[field] = spec.default_value

    return Component(spec.name, data)


def map_each(
    spec: MappingSpec, sources: Iterable[Mapping[str, Any]] | None
) -> list[Component]:
    """Map every element of a JSON array with the same spec."""
    return [map_fields(spec, source) for source in sources or ()]
