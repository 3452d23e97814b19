"""Protocol constants for Hats identifiers and the subgraph index.

Provides:
- Hex widths of a hat id and its segments.
- ``MAX_LEVELS`` / ``MAX_LEVEL_HATS``: structural limits of a tree.
- ``DEFAULT_PAGE_SIZE``: pagination bound used for every compiled relation.
- Well-known addresses and the zero id.
"""

from __future__ import annotations

# ── Identifier layout ───────────────────────────────────
# 32-bit domain followed by fourteen 16-bit levels.

HAT_ID_BITS = 256
DOMAIN_BITS = 32
LEVEL_BITS = 16

HAT_ID_HEX_DIGITS = HAT_ID_BITS // 4  # 64
DOMAIN_HEX_DIGITS = DOMAIN_BITS // 4  # 8
LEVEL_HEX_DIGITS = LEVEL_BITS // 4  # 4

MAX_LEVELS = 14
MAX_LEVEL_HATS = 65535
MAX_DOMAIN = 2**DOMAIN_BITS - 1
MAX_HAT_ID = 2**HAT_ID_BITS - 1

# ── Subgraph ────────────────────────────────────────────

DEFAULT_PAGE_SIZE = 1000

# ── Addresses ───────────────────────────────────────────

HATS_V1 = "0x3bc1A0Ad72417f2d411118085256fC53CBdDd137"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
FALLBACK_ADDRESS = "0x0000000000000000000000000000000000004a75"
ZERO_ID = "0x" + "0" * HAT_ID_HEX_DIGITS


__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DOMAIN_BITS",
    "DOMAIN_HEX_DIGITS",
    "FALLBACK_ADDRESS",
    "HATS_V1",
    "HAT_ID_BITS",
    "HAT_ID_HEX_DIGITS",
    "LEVEL_BITS",
    "LEVEL_HEX_DIGITS",
    "MAX_DOMAIN",
    "MAX_HAT_ID",
    "MAX_LEVELS",
    "MAX_LEVEL_HATS",
    "ZERO_ADDRESS",
    "ZERO_ID",
]
