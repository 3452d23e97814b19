"""Static object/relation schema of the Hats subgraph.

Defines:
- ``ObjectType``: the five entity types exposed by the index.
- ``RELATIONS``: object type → {relation name → target object type}.
- ``SCALAR_FIELDS``: object type → selectable scalar field names.
- ``next_type()``: resolve the target type of a relation.
- ``is_event_relation()``: relations that list events newest-first.

This table mirrors the remote index's data model and never changes at
runtime. Adding or removing a relation is an edit to ``RELATIONS`` only.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from ..exceptions import UnknownRelationError


class ObjectType(str, Enum):
    """Entity types of the subgraph.

    Values double as the keys of a pagination filters table.
    """

    HAT = "hat"
    TREE = "tree"
    WEARER = "wearer"
    EVENT = "event"
    CLAIMS_HATTER = "claimsHatter"

    @property
    def graphql_name(self) -> str:
        return _GRAPHQL_NAMES[self]


_GRAPHQL_NAMES: dict[ObjectType, str] = {
    ObjectType.HAT: "Hat",
    ObjectType.TREE: "Tree",
    ObjectType.WEARER: "Wearer",
    ObjectType.EVENT: "HatsEvent",
    ObjectType.CLAIMS_HATTER: "ClaimsHatter",
}

# Selected on every object regardless of the projection.
ID_FIELD = "id"

# ── Relations ───────────────────────────────────────────

RELATIONS: Mapping[ObjectType, Mapping[str, ObjectType]] = MappingProxyType(
    {
        ObjectType.HAT: MappingProxyType(
            {
                "tree": ObjectType.TREE,
                "wearers": ObjectType.WEARER,
                "badStandings": ObjectType.WEARER,
                "admin": ObjectType.HAT,
                "subHats": ObjectType.HAT,
                "linkRequestFromTree": ObjectType.TREE,
                "linkedTrees": ObjectType.TREE,
                "claimableBy": ObjectType.CLAIMS_HATTER,
                "claimableForBy": ObjectType.CLAIMS_HATTER,
                "events": ObjectType.EVENT,
            }
        ),
        ObjectType.TREE: MappingProxyType(
            {
                "hats": ObjectType.HAT,
                "childOfTree": ObjectType.TREE,
                "parentOfTrees": ObjectType.TREE,
                "linkedToHat": ObjectType.HAT,
                "linkRequestFromTree": ObjectType.TREE,
                "requestedLinkToTree": ObjectType.TREE,
                "requestedLinkToHat": ObjectType.HAT,
                "events": ObjectType.EVENT,
            }
        ),
        ObjectType.WEARER: MappingProxyType(
            {
                "currentHats": ObjectType.HAT,
                "mintEvent": ObjectType.EVENT,
                "burnEvent": ObjectType.EVENT,
            }
        ),
        ObjectType.EVENT: MappingProxyType(
            {
                "hat": ObjectType.HAT,
                "tree": ObjectType.TREE,
            }
        ),
        ObjectType.CLAIMS_HATTER: MappingProxyType(
            {
                "claimableHats": ObjectType.HAT,
                "claimableForHats": ObjectType.HAT,
            }
        ),
    }
)

# Event histories; compiled newest-first.
EVENT_RELATIONS: frozenset[tuple[ObjectType, str]] = frozenset(
    {
        (ObjectType.HAT, "events"),
        (ObjectType.TREE, "events"),
    }
)

# ── Scalars ─────────────────────────────────────────────

SCALAR_FIELDS: Mapping[ObjectType, tuple[str, ...]] = MappingProxyType(
    {
        ObjectType.HAT: (
            "prettyId",
            "status",
            "createdAt",
            "details",
            "maxSupply",
            "eligibility",
            "toggle",
            "mutable",
            "imageUri",
            "levelAtLocalTree",
            "currentSupply",
        ),
        ObjectType.TREE: (),
        ObjectType.WEARER: (),
        ObjectType.EVENT: ("timestamp", "blockNumber", "transactionID"),
        ObjectType.CLAIMS_HATTER: (),
    }
)


def next_type(current: ObjectType, relation: str) -> ObjectType:
    """Resolve the object type a relation of ``current`` points at.

    Raises:
        UnknownRelationError: If ``current`` has no relation named ``relation``.
    """
    target = RELATIONS[current].get(relation)
    if target is None:
        raise UnknownRelationError(
            f"{current.graphql_name} has no relation '{relation}'. "
            f"Available: {sorted(RELATIONS[current])}",
            object_type=current.value,
            relation=relation,
        )
    return target


def is_event_relation(current: ObjectType, relation: str) -> bool:
    return (current, relation) in EVENT_RELATIONS


__all__ = [
    "EVENT_RELATIONS",
    "ID_FIELD",
    "ObjectType",
    "RELATIONS",
    "SCALAR_FIELDS",
    "is_event_relation",
    "next_type",
]
