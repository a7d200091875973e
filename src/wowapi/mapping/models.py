"""Mapping specs and mapped domain objects."""

from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DefaultPolicy(str, Enum):
    """What to do with a declared field the source payload lacks.

    - FILL: Assign the spec's default value (None unless configured)
    - OMIT: Leave the field out so the object mirrors the payload's shape
    """

    FILL = "fill-with-null"
    OMIT = "omit-field"


class MappingSpec(BaseModel):
    """Rule set projecting a decoded JSON object onto one domain type.

    Attributes:
        name: Domain type name, e.g. "Achievement".
        field_names: Declared destination fields, in output order.
        renames: Destination field -> source field for mismatched names.
        default_policy: Policy for fields missing from the source.
        default_value: Value assigned under the FILL policy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    field_names: tuple[str, ...] = Field(min_length=1)
    renames: dict[str, str] = Field(default_factory=dict)
    default_policy: DefaultPolicy = DefaultPolicy.FILL
    default_value: Any = None

    @model_validator(mode="after")
    def check_renames(self) -> "MappingSpec":
        """Ensure renames only target declared fields."""
        undeclared = sorted(set(self.renames) - set(self.field_names))
        if undeclared:
            msg = f"Renames for undeclared fields: {', '.join(undeclared)}"
            raise ValueError(msg)
        return self

    def source_field(self, field: str) -> str:
        """Get the source field name a destination field is read from."""
        return self.renames.get(field, field)


class Component(Mapping[str, Any]):
    """Read-only domain object produced by the field mapper.

    Fields are reachable by key or attribute (``item["name"]`` or
    ``item.name``). Fields omitted under the OMIT policy are absent from
    both. Fields sharing a name with a Mapping method (``items``, ``keys``,
    ``values``, ``get``) are reachable by key only.
    """

    __slots__ = ("_data", "_kind")

    def __init__(self, kind: str, data: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_data", dict(data))

    @property
    def kind(self) -> str:
        """Get the domain type name."""
        return self._kind

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            msg = f"{self._kind} has no field '{name}'"
            raise AttributeError(msg) from None

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{self._kind} is read-only"
        raise AttributeError(msg)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Component):
            return self._kind == other._kind and self._data == other._data
        if isinstance(other, Mapping):
            return self._data == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self._kind}({self._data!r})"

    def replace(self, **updates: Any) -> "Component":
        """Return a copy with some fields replaced.

        Used by builders that reconstruct nested structures after the
        first mapping pass.
        """
        return Component(self._kind, {**self._data, **updates})

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict, recursing into nested components."""
        return {key: _plain(value) for key, value in self._data.items()}


def _plain(value: Any) -> Any:
    if isinstance(value, Component):
        return value.to_dict()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value
