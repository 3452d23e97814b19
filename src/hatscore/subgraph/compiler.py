"""Projection → selection-set compiler.

Walks a normalized projection alongside the relation schema and emits the
nested selection text the subgraph accepts, e.g. for a Hat::

    id, prettyId, wearers(first: 1000) { id }, events(orderBy: timestamp,
    orderDirection: desc, first: 5) { id, timestamp }

Compilation happens in two phases: ``build_selection()`` produces a full
``SelectionNode`` tree (this is where ``UnknownRelationError`` is raised) and
``render_selection()`` turns the finished tree into text. Nothing is rendered
for a projection that fails to resolve.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated, Any, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, Field, StrictInt, ValidationError

from ..constants import DEFAULT_PAGE_SIZE
from ..exceptions import InputValidationError
from .projection import ProjectionEntry, RelationField, ScalarField, normalize_props
from .schema import ID_FIELD, ObjectType, is_event_relation, next_type

logger = logging.getLogger(__name__)

# Booleans and numeric strings are rejected.
PageSize = Annotated[StrictInt, Field(gt=0)]


class PaginationFilters(BaseModel):
    """Per-type, per-relation page size overrides.

    Keys mirror ``ObjectType`` values. Relation names that the type does not
    have are ignored.

    Example::

        PaginationFilters.model_validate({"hat": {"wearers": 2}, "claimsHatter": {"claimableHats": 10}})
    """

    model_config = {"extra": "forbid", "populate_by_name": True}

    hat: dict[str, PageSize] = Field(default_factory=dict)
    tree: dict[str, PageSize] = Field(default_factory=dict)
    wearer: dict[str, PageSize] = Field(default_factory=dict)
    event: dict[str, PageSize] = Field(default_factory=dict)
    claims_hatter: dict[str, PageSize] = Field(default_factory=dict, alias="claimsHatter")

    def bound_for(self, object_type: ObjectType, relation: str) -> Optional[int]:
        table = self.claims_hatter if object_type is ObjectType.CLAIMS_HATTER else getattr(self, object_type.value)
        return table.get(relation)


FiltersLike = Union[PaginationFilters, Mapping[str, Mapping[str, int]], None]


def coerce_filters(filters: FiltersLike) -> Optional[PaginationFilters]:
    """Validate a raw filters table.

    Raises:
        InputValidationError: On an unknown object type key or a bound that is
            not a positive integer.
    """
    if filters is None or isinstance(filters, PaginationFilters):
        return filters
    try:
        return PaginationFilters.model_validate(filters)
    except ValidationError as e:
        raise InputValidationError(f"Invalid pagination filters: {e}", errors=e.errors()) from e


@dataclass(frozen=True)
class SelectionNode:
    """One field of a selection set.

    Attributes:
        name: Field name.
        arguments: Ordered ``(name, literal)`` pairs, rendered inside parentheses.
        children: Nested selection; empty for scalars.
    """

    name: str
    arguments: tuple[tuple[str, str], ...] = ()
    children: tuple["SelectionNode", ...] = ()


def _relation_arguments(
    current: ObjectType,
    relation: str,
    filters: Optional[PaginationFilters],
    default_page_size: int,
) -> tuple[tuple[str, str], ...]:
    bound = filters.bound_for(current, relation) if filters is not None else None
    if bound is None:
        bound = default_page_size

    arguments: list[tuple[str, str]] = []
    if is_event_relation(current, relation):
        arguments.append(("orderBy", "timestamp"))
        arguments.append(("orderDirection", "desc"))
    arguments.append(("first", str(bound)))
    return tuple(arguments)


def build_selection(
    object_type: ObjectType,
    entries: Sequence[ProjectionEntry],
    filters: Optional[PaginationFilters] = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> tuple[SelectionNode, ...]:
    """Resolve a normalized projection into a selection tree.

    Args:
        object_type: Type of the object the entries select from.
        entries: Output of ``normalize_props()``.
        filters: Optional page size overrides.
        default_page_size: Bound used when ``filters`` has no entry.

    Returns:
        Selection nodes, id first, then entries in their given order.

    Raises:
        UnknownRelationError: If a relation entry is not in the schema.
    """
    nodes: list[SelectionNode] = [SelectionNode(ID_FIELD)]
    for entry in entries:
        if isinstance(entry, ScalarField):
            nodes.append(SelectionNode(entry.name))
        elif isinstance(entry, RelationField):
            target = next_type(object_type, entry.name)
            nodes.append(
                SelectionNode(
                    entry.name,
                    arguments=_relation_arguments(object_type, entry.name, filters, default_page_size),
                    children=build_selection(target, entry.fields, filters, default_page_size),
                )
            )
        else:
            raise TypeError(f"Unexpected projection entry: {entry!r}")
    return tuple(nodes)


def _render_node(node: SelectionNode) -> str:
    text = node.name
    if node.arguments:
        text += "(" + ", ".join(f"{name}: {value}" for name, value in node.arguments) + ")"
    if node.children:
        text += " { " + render_selection(node.children) + " }"
    return text


def render_selection(nodes: Sequence[SelectionNode]) -> str:
    """Render selection nodes as comma-separated selection text."""
    return ", ".join(_render_node(node) for node in nodes)


def compile_selection(
    object_type: Union[ObjectType, str],
    props: Union[Mapping[str, Any], Sequence[ProjectionEntry]],
    filters: FiltersLike = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> str:
    """Compile a projection config into selection text for ``object_type``.

    Args:
        object_type: Root type, as ``ObjectType`` or its value (e.g. "hat").
        props: Raw projection config, or already normalized entries.
        filters: Optional page size overrides (model or raw mapping).
        default_page_size: Bound for relations without an override.

    Returns:
        Selection text without the enclosing braces.

    Raises:
        UnknownRelationError: If the projection names a relation the schema lacks.
        InputValidationError: If ``props``, ``filters``, the root type or
            ``default_page_size`` are malformed.
    """
    try:
        root = ObjectType(object_type)
    except ValueError as e:
        raise InputValidationError(
            f"Unknown object type {object_type!r}. Available: {[t.value for t in ObjectType]}",
            object_type=object_type,
        ) from e
    if isinstance(default_page_size, bool) or not isinstance(default_page_size, int) or default_page_size < 1:
        raise InputValidationError(
            f"default_page_size must be a positive integer, got {default_page_size!r}",
            default_page_size=default_page_size,
        )

    entries = normalize_props(props) if isinstance(props, Mapping) else tuple(props)
    nodes = build_selection(root, entries, coerce_filters(filters), default_page_size)
    selection = render_selection(nodes)
    logger.debug("Compiled %s selection: %s", root.graphql_name, selection)
    return selection


__all__ = [
    "FiltersLike",
    "PaginationFilters",
    "SelectionNode",
    "build_selection",
    "coerce_filters",
    "compile_selection",
    "render_selection",
]
