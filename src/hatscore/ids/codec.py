"""Conversions between the three hat id representations.

A hat id is a 256-bit integer made of a 32-bit tree domain followed by
fourteen 16-bit level segments. It crosses boundaries as:

- ``int``: contract call arguments.
- hex: ``"0x"`` + 64 lowercase digits, the subgraph's ``ID`` form.
- dotted: ``"1.2.3"``, the human-readable form (a.k.a. IP notation).

Every function is pure. Ids with a zero level segment followed by non-zero
ones are not rejected here; they are transformed mechanically.
"""

from __future__ import annotations

from ..constants import (
    DOMAIN_HEX_DIGITS,
    HAT_ID_HEX_DIGITS,
    LEVEL_HEX_DIGITS,
    MAX_DOMAIN,
    MAX_LEVEL_HATS,
    MAX_LEVELS,
)
from ..exceptions import MalformedPathError

_EMPTY_LEVEL = "0" * LEVEL_HEX_DIGITS


def hat_id_to_hex(hat_id: int) -> str:
    """Render a hat id as ``0x`` + 64 zero-padded lowercase hex digits."""
    return "0x" + format(hat_id, "x").zfill(HAT_ID_HEX_DIGITS)


def hex_to_hat_id(hat_id: str) -> int:
    """Parse any hex literal (with or without ``0x``) into a hat id."""
    return int(hat_id, 16)


def tree_id_to_hex(tree_id: int) -> str:
    """Render a tree domain as ``0x`` + 8 zero-padded lowercase hex digits."""
    return "0x" + format(tree_id, "x").zfill(DOMAIN_HEX_DIGITS)


def hex_to_tree_id(tree_id: str) -> int:
    return int(tree_id, 16)


def tree_id_to_top_hat_id(tree_id: int) -> int:
    """Return the top hat id of a tree: its domain with every level zeroed."""
    return hex_to_hat_id(tree_id_to_hex(tree_id).ljust(HAT_ID_HEX_DIGITS + 2, "0"))


def hat_id_to_tree_id(hat_id: int) -> int:
    """Return the tree domain carried in the first 8 hex digits of a hat id."""
    return hex_to_tree_id(hat_id_to_hex(hat_id)[2 : 2 + DOMAIN_HEX_DIGITS])


def hat_id_to_dotted(hat_id: int) -> str:
    """Render a hat id as a dotted path.

    The domain is always rendered. Level segments follow until the first
    zero segment; nothing after it is rendered, so an id with a gap loses
    its deeper segments.

    Example::

        >>> hat_id_to_dotted(0x0000000100020001 << 192)
        '1.2.1'
    """
    digits = hat_id_to_hex(hat_id)[2:]
    parts = [str(int(digits[:DOMAIN_HEX_DIGITS], 16))]
    for start in range(DOMAIN_HEX_DIGITS, HAT_ID_HEX_DIGITS, LEVEL_HEX_DIGITS):
        chunk = digits[start : start + LEVEL_HEX_DIGITS]
        if chunk == _EMPTY_LEVEL:
            break
        parts.append(str(int(chunk, 16)))
    return ".".join(parts)


def _parse_token(token: str, limit: int, path: str, position: int) -> int:
    if not (token.isascii() and token.isdigit()):
        raise MalformedPathError(
            f"Segment {position} of hat path {path!r} is not a non-negative integer: {token!r}",
            path=path,
            position=position,
        )
    value = int(token)
    if value > limit:
        raise MalformedPathError(
            f"Segment {position} of hat path {path!r} exceeds {limit}: {value}",
            path=path,
            position=position,
        )
    return value


def dotted_to_hat_id(path: str) -> int:
    """Parse a dotted path (e.g. ``"68.1.2"``) into a hat id.

    Args:
        path: Domain followed by up to 14 ``.``-separated level values.

    Returns:
        The hat id, with unspecified levels zero-filled.

    Raises:
        MalformedPathError: If a token is not a non-negative integer, does not
            fit its segment (32 bits for the domain, 16 bits for levels), or
            the path has more than 15 tokens.
    """
    tokens = path.split(".")
    if len(tokens) > MAX_LEVELS + 1:
        raise MalformedPathError(
            f"Hat path {path!r} has {len(tokens)} segments; at most {MAX_LEVELS + 1} are allowed",
            path=path,
        )

    domain = _parse_token(tokens[0], MAX_DOMAIN, path, 0)
    digits = format(domain, "x").zfill(DOMAIN_HEX_DIGITS)
    for position, token in enumerate(tokens[1:], start=1):
        level = _parse_token(token, MAX_LEVEL_HATS, path, position)
        digits += format(level, "x").zfill(LEVEL_HEX_DIGITS)

    return int(digits.ljust(HAT_ID_HEX_DIGITS, "0"), 16)


def dotted_to_hex(path: str) -> str:
    """Parse a dotted path straight into the 66-character hex form."""
    return hat_id_to_hex(dotted_to_hat_id(path))


def tree_id_from_dotted(path: str) -> int:
    """Return the tree domain named by the first token of a dotted path."""
    return _parse_token(path.split(".", 1)[0], MAX_DOMAIN, path, 0)


__all__ = [
    "dotted_to_hat_id",
    "dotted_to_hex",
    "hat_id_to_dotted",
    "hat_id_to_hex",
    "hat_id_to_tree_id",
    "hex_to_hat_id",
    "hex_to_tree_id",
    "tree_id_from_dotted",
    "tree_id_to_hex",
    "tree_id_to_top_hat_id",
]
