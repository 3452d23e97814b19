"""Strict vocabulary validation for projection configs.

Each object type gets a pydantic model listing the keys a caller may put in
its projection: scalar fields take a boolean, relations take the nested
projection of their target type. Unknown keys are rejected.

The compiler itself only checks relation names; callers that accept
projections from users validate them here first.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, StrictBool, ValidationError

from ..exceptions import InputValidationError
from .schema import ObjectType


class _Props(BaseModel):
    model_config = {"extra": "forbid"}


class HatProps(_Props):
    prettyId: Optional[StrictBool] = None
    status: Optional[StrictBool] = None
    createdAt: Optional[StrictBool] = None
    details: Optional[StrictBool] = None
    maxSupply: Optional[StrictBool] = None
    eligibility: Optional[StrictBool] = None
    toggle: Optional[StrictBool] = None
    mutable: Optional[StrictBool] = None
    imageUri: Optional[StrictBool] = None
    levelAtLocalTree: Optional[StrictBool] = None
    currentSupply: Optional[StrictBool] = None
    tree: Optional[TreeProps] = None
    wearers: Optional[WearerProps] = None
    badStandings: Optional[WearerProps] = None
    admin: Optional[HatProps] = None
    subHats: Optional[HatProps] = None
    linkRequestFromTree: Optional[TreeProps] = None
    linkedTrees: Optional[TreeProps] = None
    claimableBy: Optional[ClaimsHatterProps] = None
    claimableForBy: Optional[ClaimsHatterProps] = None
    events: Optional[EventProps] = None


class TreeProps(_Props):
    hats: Optional[HatProps] = None
    childOfTree: Optional[TreeProps] = None
    parentOfTrees: Optional[TreeProps] = None
    linkedToHat: Optional[HatProps] = None
    linkRequestFromTree: Optional[TreeProps] = None
    requestedLinkToTree: Optional[TreeProps] = None
    requestedLinkToHat: Optional[HatProps] = None
    events: Optional[EventProps] = None


class WearerProps(_Props):
    currentHats: Optional[HatProps] = None
    mintEvent: Optional[EventProps] = None
    burnEvent: Optional[EventProps] = None


class EventProps(_Props):
    timestamp: Optional[StrictBool] = None
    blockNumber: Optional[StrictBool] = None
    transactionID: Optional[StrictBool] = None
    hat: Optional[HatProps] = None
    tree: Optional[TreeProps] = None


class ClaimsHatterProps(_Props):
    claimableHats: Optional[HatProps] = None
    claimableForHats: Optional[HatProps] = None


for _model in (HatProps, TreeProps, WearerProps, EventProps, ClaimsHatterProps):
    _model.model_rebuild()
del _model


PROPS_MODELS: dict[ObjectType, type[_Props]] = {
    ObjectType.HAT: HatProps,
    ObjectType.TREE: TreeProps,
    ObjectType.WEARER: WearerProps,
    ObjectType.EVENT: EventProps,
    ObjectType.CLAIMS_HATTER: ClaimsHatterProps,
}


def validate_props(object_type: ObjectType, props: Mapping[str, Any]) -> None:
    """Check a projection config against the vocabulary of ``object_type``.

    Raises:
        InputValidationError: On an unknown key, a non-boolean scalar value or
            a relation value that is not a nested config.
    """
    try:
        PROPS_MODELS[object_type].model_validate(props)
    except ValidationError as e:
        raise InputValidationError(
            f"Invalid {object_type.graphql_name} props: {e}",
            object_type=object_type.value,
            errors=e.errors(),
        ) from e


__all__ = [
    "ClaimsHatterProps",
    "EventProps",
    "HatProps",
    "PROPS_MODELS",
    "TreeProps",
    "WearerProps",
    "validate_props",
]
