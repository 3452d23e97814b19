"""Projection normalization.

A projection config is a nested mapping of field name to either a boolean
(scalar selection) or another projection config (relation selection)::

    {"prettyId": True, "wearers": {}, "admin": {"prettyId": True}}

``normalize_props()`` turns it into an ordered tuple of ``ScalarField`` and
``RelationField`` entries. Config order is kept. ``False`` entries are
dropped. The id field is not added here; the compiler injects it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from ..exceptions import InputValidationError


@dataclass(frozen=True)
class ScalarField:
    """A selected scalar field."""

    name: str


@dataclass(frozen=True)
class RelationField:
    """A selected relation with its own normalized projection."""

    name: str
    fields: tuple["ProjectionEntry", ...] = ()


ProjectionEntry = Union[ScalarField, RelationField]


def normalize_props(props: Mapping[str, Any]) -> tuple[ProjectionEntry, ...]:
    """Normalize a projection config into ordered tagged entries.

    Args:
        props: Projection config. Values are booleans or nested configs.

    Returns:
        Tuple of entries in config order.

    Raises:
        InputValidationError: If a value is neither a boolean nor a mapping.
    """
    entries: list[ProjectionEntry] = []
    for name, value in props.items():
        if value is True:
            entries.append(ScalarField(name))
        elif value is False:
            continue
        elif isinstance(value, Mapping):
            entries.append(RelationField(name, normalize_props(value)))
        else:
            raise InputValidationError(
                f"Projection value for '{name}' must be a boolean or a nested config, "
                f"got {type(value).__name__}",
                field=name,
            )
    return tuple(entries)


__all__ = ["ProjectionEntry", "RelationField", "ScalarField", "normalize_props"]
