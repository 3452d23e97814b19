"""Hats subgraph projections, query compilation and client.

Defines:
- ObjectType / RELATIONS: the static relation schema of the index
- normalize_props(): projection config → ordered tagged entries
- compile_selection(): entries → selection text with pagination bounds
- validate_props(): strict per-type vocabulary check
- HatsSubgraphClient: async facade over a GraphQueryExecutor
"""

from .client import HatsSubgraphClient
from .compiler import (
    PaginationFilters,
    SelectionNode,
    build_selection,
    coerce_filters,
    compile_selection,
    render_selection,
)
from .projection import ProjectionEntry, RelationField, ScalarField, normalize_props
from .schema import (
    EVENT_RELATIONS,
    ID_FIELD,
    RELATIONS,
    SCALAR_FIELDS,
    ObjectType,
    is_event_relation,
    next_type,
)
from .validation import PROPS_MODELS, validate_props

__all__ = [
    "EVENT_RELATIONS",
    "HatsSubgraphClient",
    "ID_FIELD",
    "ObjectType",
    "PROPS_MODELS",
    "PaginationFilters",
    "ProjectionEntry",
    "RELATIONS",
    "RelationField",
    "SCALAR_FIELDS",
    "ScalarField",
    "SelectionNode",
    "build_selection",
    "coerce_filters",
    "compile_selection",
    "is_event_relation",
    "next_type",
    "normalize_props",
    "render_selection",
    "validate_props",
]
