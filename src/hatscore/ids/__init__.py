"""Hat id codec and structural hierarchy helpers.

Defines:
- Conversions between integer, hex and dotted hat ids
- Tree domain conversions and top hat derivation
- admin_at_level(): ancestor by truncation
- Segment inspection and child id construction
"""

from .codec import (
    dotted_to_hat_id,
    dotted_to_hex,
    hat_id_to_dotted,
    hat_id_to_hex,
    hat_id_to_tree_id,
    hex_to_hat_id,
    hex_to_tree_id,
    tree_id_from_dotted,
    tree_id_to_hex,
    tree_id_to_top_hat_id,
)
from .hierarchy import (
    admin_at_level,
    build_child_id,
    hat_id_segments,
    is_top_hat,
    is_well_formed,
    local_level,
)

__all__ = [
    "admin_at_level",
    "build_child_id",
    "dotted_to_hat_id",
    "dotted_to_hex",
    "hat_id_segments",
    "hat_id_to_dotted",
    "hat_id_to_hex",
    "hat_id_to_tree_id",
    "hex_to_hat_id",
    "hex_to_tree_id",
    "is_top_hat",
    "is_well_formed",
    "local_level",
    "tree_id_from_dotted",
    "tree_id_to_hex",
    "tree_id_to_top_hat_id",
]
