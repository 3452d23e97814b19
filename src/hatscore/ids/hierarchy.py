"""Structural ancestry helpers for hat ids.

Provides:
- ``admin_at_level()``: truncate an id to one of its ancestors.
- ``hat_id_segments()`` / ``local_level()`` / ``is_top_hat()``: inspect an id.
- ``is_well_formed()``: the non-gapped prefix check.
- ``build_child_id()``: compute the id of an admin's n-th child.

These work on the id alone. A hat's level in the global tree (across linked
trees) is only known to the ledger; see ``hatscore.ledger``.
"""

from __future__ import annotations

from ..constants import (
    DOMAIN_HEX_DIGITS,
    HAT_ID_HEX_DIGITS,
    LEVEL_BITS,
    LEVEL_HEX_DIGITS,
    MAX_LEVEL_HATS,
    MAX_LEVELS,
)
from ..exceptions import MaxHatsInLevelReachedError, MaxLevelReachedError
from .codec import hat_id_to_hex

_LEVEL_MASK = (1 << LEVEL_BITS) - 1


def admin_at_level(hat_id: int, level: int) -> int:
    """Return the ancestor of ``hat_id`` that sits at ``level`` of its tree.

    Keeps the domain and the first ``level`` level segments and zero-fills
    the rest. ``level=0`` yields the tree's top hat.

    Raises:
        ValueError: If ``level`` is outside ``0..MAX_LEVELS``.
    """
    if not 0 <= level <= MAX_LEVELS:
        raise ValueError(f"Level must be between 0 and {MAX_LEVELS}, got {level}")
    keep = DOMAIN_HEX_DIGITS + LEVEL_HEX_DIGITS * level
    digits = hat_id_to_hex(hat_id)[2:]
    return int(digits[:keep].ljust(HAT_ID_HEX_DIGITS, "0"), 16)


def hat_id_segments(hat_id: int) -> tuple[int, tuple[int, ...]]:
    """Split a hat id into its domain and its 14 level values."""
    levels = tuple(
        (hat_id >> (LEVEL_BITS * (MAX_LEVELS - position))) & _LEVEL_MASK
        for position in range(1, MAX_LEVELS + 1)
    )
    return hat_id >> (LEVEL_BITS * MAX_LEVELS), levels


def local_level(hat_id: int) -> int:
    """Count the contiguous non-zero level segments from the top (0 for a top hat)."""
    _, levels = hat_id_segments(hat_id)
    depth = 0
    for value in levels:
        if value == 0:
            break
        depth += 1
    return depth


def is_top_hat(hat_id: int) -> bool:
    _, levels = hat_id_segments(hat_id)
    return not any(levels)


def is_well_formed(hat_id: int) -> bool:
    """True when no non-zero level segment follows a zero one."""
    _, levels = hat_id_segments(hat_id)
    depth = local_level(hat_id)
    return not any(levels[depth:])


def build_child_id(admin_id: int, index: int) -> int:
    """Return the id of the ``index``-th child (1-based) of ``admin_id``.

    Raises:
        MaxLevelReachedError: If the admin already sits on level 14.
        MaxHatsInLevelReachedError: If ``index`` is outside ``1..65535``.
    """
    level = local_level(admin_id)
    if level == MAX_LEVELS:
        raise MaxLevelReachedError(
            "The provided admin's hat level is on the maximal level",
            admin=hat_id_to_hex(admin_id),
        )
    if not 1 <= index <= MAX_LEVEL_HATS:
        raise MaxHatsInLevelReachedError(
            f"Maximum amount of hats per level is {MAX_LEVEL_HATS}",
            admin=hat_id_to_hex(admin_id),
            index=index,
        )
    return admin_id | (index << (LEVEL_BITS * (MAX_LEVELS - level - 1)))


__all__ = [
    "admin_at_level",
    "build_child_id",
    "hat_id_segments",
    "is_top_hat",
    "is_well_formed",
    "local_level",
]
