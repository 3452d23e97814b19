"""Hat hierarchy helpers that need ledger state.

Levels across linked trees and child counts live on chain; these helpers ask
a ``HatsReader`` for them and do the id arithmetic locally.
"""

from __future__ import annotations

import logging

from .constants import MAX_LEVEL_HATS, MAX_LEVELS
from .exceptions import MaxHatsInLevelReachedError, MaxLevelReachedError
from .ids import admin_at_level, build_child_id, hat_id_to_hex
from .interfaces import HatsReader

logger = logging.getLogger(__name__)


async def get_admin(reader: HatsReader, hat_id: int) -> int:
    """Return the direct admin of a hat.

    An unlinked top hat (global level 0) is its own admin. Inside a tree the
    admin is found by truncation; a linked top hat's admin sits in another
    tree, so the reader resolves it.
    """
    level = await reader.get_hat_level(hat_id)
    if level == 0:
        return hat_id

    local = await reader.get_local_hat_level(hat_id)
    if local > 0:
        return admin_at_level(hat_id, local - 1)
    return await reader.get_admin_at_level(hat_id, level - 1)


async def get_children_ids(reader: HatsReader, hat_id: int) -> list[int]:
    """Return the ids of every child created under ``hat_id``."""
    num_children = await reader.get_num_children(hat_id)
    return [build_child_id(hat_id, index) for index in range(1, num_children + 1)]


async def predict_child_ids(reader: HatsReader, admin_id: int, count: int) -> list[int]:
    """Return the ids the next ``count`` hats created under ``admin_id`` will get.

    Raises:
        MaxHatsInLevelReachedError: If the admin would exceed 65535 children.
        MaxLevelReachedError: If the admin is on the deepest level.
    """
    if count < 1:
        return []

    num_children = await reader.get_num_children(admin_id)
    if num_children + count > MAX_LEVEL_HATS:
        raise MaxHatsInLevelReachedError(
            f"Maximum amount of hats per level is {MAX_LEVEL_HATS}",
            admin=hat_id_to_hex(admin_id),
            existing=num_children,
            requested=count,
        )

    if await reader.get_local_hat_level(admin_id) == MAX_LEVELS:
        raise MaxLevelReachedError(
            "The provided admin's hat level is on the maximal level",
            admin=hat_id_to_hex(admin_id),
        )

    logger.debug("Predicting %d child ids after %d existing children", count, num_children)
    return [build_child_id(admin_id, num_children + offset) for offset in range(1, count + 1)]


__all__ = ["get_admin", "get_children_ids", "predict_child_ids"]
