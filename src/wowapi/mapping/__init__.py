"""Field mapping from decoded JSON payloads to domain components."""

from wowapi.mapping.mapper import map_each, map_fields
from wowapi.mapping.models import Component, DefaultPolicy, MappingSpec


__all__ = [
    "Component",
    "DefaultPolicy",
    "MappingSpec",
    "map_each",
    "map_fields",
]
