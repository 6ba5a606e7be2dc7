"""Immutable schema definition nodes, the source of every emitted document."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


class _Unset:
    """Marker for a metadata default that was never set (distinct from a JSON null default)."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


@dataclass(frozen=True)
class Metadata:
    """Annotation keywords shared by every node kind."""

    title: str | None = None
    description: str | None = None
    examples: tuple[Any, ...] = ()
    default: Any = UNSET

    @property
    def has_default(self) -> bool:
        return self.default is not UNSET


# Constraint records. ``None`` means "absent": never emitted, never checked.


@dataclass(frozen=True)
class StringConstraints:
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    format: str | None = None


@dataclass(frozen=True)
class IntConstraints:
    minimum: int | None = None
    maximum: int | None = None
    exclusive_minimum: int | None = None
    exclusive_maximum: int | None = None
    multiple_of: int | None = None


@dataclass(frozen=True)
class FloatConstraints:
    minimum: float | None = None
    maximum: float | None = None
    exclusive_minimum: float | None = None
    exclusive_maximum: float | None = None
    multiple_of: float | None = None


@dataclass(frozen=True)
class ArrayConstraints:
    min_items: int | None = None
    max_items: int | None = None
    unique_items: bool = False


# Node kinds.


@dataclass(frozen=True)
class StringNode:
    constraints: StringConstraints = field(default_factory=StringConstraints)
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class IntegerNode:
    constraints: IntConstraints = field(default_factory=IntConstraints)
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class NumberNode:
    constraints: FloatConstraints = field(default_factory=FloatConstraints)
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class BooleanNode:
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class NullNode:
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class ArrayNode:
    """Homogeneous array: every element matches ``items``."""

    items: Definition
    constraints: ArrayConstraints = field(default_factory=ArrayConstraints)
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class ObjectNode:
    """Fixed-shape object. ``properties`` keeps declaration order for stable output."""

    properties: tuple[tuple[str, Definition], ...] = ()
    required: frozenset[str] = frozenset()
    allow_additional: bool = False
    meta: Metadata = field(default_factory=Metadata)

    @property
    def property_names(self) -> list[str]:
        return [name for name, _ in self.properties]


@dataclass(frozen=True)
class DictNode:
    """Open-ended object whose values all match ``values``."""

    values: Definition
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class NullableNode:
    inner: Definition
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class OneOfNode:
    variants: tuple[Definition, ...]
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class AnyOfNode:
    variants: tuple[Definition, ...]
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class EnumNode:
    """String enumeration; ``values`` are the allowed literals in order."""

    values: tuple[str, ...]
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class ConstNode:
    value: Any
    meta: Metadata = field(default_factory=Metadata)


@dataclass(frozen=True)
class TupleNode:
    items: tuple[Definition, ...]
    meta: Metadata = field(default_factory=Metadata)


# The union of all node kinds.
Definition = (
    StringNode
    | IntegerNode
    | NumberNode
    | BooleanNode
    | NullNode
    | ArrayNode
    | ObjectNode
    | DictNode
    | NullableNode
    | OneOfNode
    | AnyOfNode
    | EnumNode
    | ConstNode
    | TupleNode
)


def meta_of(definition: Definition) -> Metadata:
    """Return the metadata slot carried by any node kind."""
    return definition.meta


def with_meta(definition: Definition, meta: Metadata) -> Definition:
    """Return a copy of ``definition`` with its metadata replaced."""
    return replace(definition, meta=meta)


def update_meta(definition: Definition, **changes: Any) -> Definition:
    """Return a copy of ``definition`` with selected metadata fields replaced."""
    return with_meta(definition, replace(definition.meta, **changes))


def update_constraints(
    definition: Definition, node_type: type, **changes: Any
) -> Definition:
    """Replace constraint fields on ``definition`` if it is a ``node_type`` node.

    Other node kinds are returned unchanged.
    """
    if not isinstance(definition, node_type):
        return definition
    return replace(definition, constraints=replace(definition.constraints, **changes))
