"""Tests for hat id conversions and hierarchy helpers."""

from __future__ import annotations

import pytest

from hatscore import (
    MalformedPathError,
    admin_at_level,
    build_child_id,
    dotted_to_hat_id,
    dotted_to_hex,
    hat_id_segments,
    hat_id_to_dotted,
    hat_id_to_hex,
    hat_id_to_tree_id,
    hex_to_hat_id,
    hex_to_tree_id,
    is_top_hat,
    is_well_formed,
    local_level,
    tree_id_from_dotted,
    tree_id_to_hex,
    tree_id_to_top_hat_id,
)
from hatscore.exceptions import MaxHatsInLevelReachedError, MaxLevelReachedError

TOP_HAT_1 = "0x0000000100000000000000000000000000000000000000000000000000000000"
HAT_1_1 = "0x0000000100010000000000000000000000000000000000000000000000000000"
HAT_1_1_1 = "0x0000000100010001000000000000000000000000000000000000000000000000"
HAT_1_2_3 = "0x0000000100020003000000000000000000000000000000000000000000000000"
ZERO = "0x0000000000000000000000000000000000000000000000000000000000000000"
FULL_DEPTH = "0x0000000100010001000100010001000100010001000100010001000100010001"
GAPPED = "0x0000000100000001000000000000000000000000000000000000000000000000"

HEX_IDS = [TOP_HAT_1, HAT_1_1, HAT_1_1_1, HAT_1_2_3, ZERO, FULL_DEPTH, GAPPED]
WELL_FORMED_IDS = [TOP_HAT_1, HAT_1_1, HAT_1_1_1, HAT_1_2_3, ZERO, FULL_DEPTH]


class TestHexConversion:
    """Tests for integer <-> hex hat ids."""

    @pytest.mark.parametrize("hex_id", HEX_IDS)
    def test_hat_id_to_hex(self, hex_id: str) -> None:
        """Known ids render back to their fixture."""
        assert hat_id_to_hex(int(hex_id, 16)) == hex_id

    @pytest.mark.parametrize("hex_id", HEX_IDS)
    def test_hex_to_hat_id(self, hex_id: str) -> None:
        assert hex_to_hat_id(hex_id) == int(hex_id, 16)

    def test_small_value_is_left_padded(self) -> None:
        """The integer 1 is a 1 in the last digit, not a domain."""
        assert hat_id_to_hex(1) == "0x" + "0" * 63 + "1"

    def test_hex_is_66_lowercase_chars(self) -> None:
        value = hat_id_to_hex(int("ABCDEF", 16) << 200)
        assert len(value) == 66
        assert value == value.lower()

    def test_hex_to_hat_id_accepts_short_literals(self) -> None:
        assert hex_to_hat_id("0x1") == 1
        assert hex_to_hat_id("ff") == 255

    @pytest.mark.parametrize("value", [0, 1, 2**32, 2**200 + 12345, 2**256 - 1])
    def test_round_trip(self, value: int) -> None:
        assert hex_to_hat_id(hat_id_to_hex(value)) == value


class TestTreeDomain:
    """Tests for tree domain conversions."""

    @pytest.mark.parametrize(
        "tree_id,hex_id",
        [(1, "0x00000001"), (12, "0x0000000c"), (1112, "0x00000458"), (0, "0x00000000")],
    )
    def test_tree_id_hex_pairs(self, tree_id: int, hex_id: str) -> None:
        assert tree_id_to_hex(tree_id) == hex_id
        assert hex_to_tree_id(hex_id) == tree_id

    @pytest.mark.parametrize("tree_id", [0, 1, 65536, 2**32 - 1])
    def test_round_trip(self, tree_id: int) -> None:
        assert hex_to_tree_id(tree_id_to_hex(tree_id)) == tree_id

    def test_tree_id_to_top_hat_id(self) -> None:
        assert tree_id_to_top_hat_id(1) == int(TOP_HAT_1, 16)
        assert tree_id_to_top_hat_id(12) == int("0x0000000c" + "0" * 56, 16)
        assert tree_id_to_top_hat_id(0) == 0

    @pytest.mark.parametrize("hex_id", HEX_IDS)
    def test_hat_id_to_tree_id_matches_hex_prefix(self, hex_id: str) -> None:
        """The domain is the first 8 hex digits."""
        hat_id = int(hex_id, 16)
        assert hat_id_to_tree_id(hat_id) == hex_to_tree_id(hat_id_to_hex(hat_id)[:10])

    def test_hat_id_to_tree_id(self) -> None:
        assert hat_id_to_tree_id(dotted_to_hat_id("68.1.2")) == 68
        assert hat_id_to_tree_id(tree_id_to_top_hat_id(1112)) == 1112


class TestDottedNotation:
    """Tests for dotted (IP) notation."""

    def test_top_hat(self) -> None:
        assert hat_id_to_dotted(tree_id_to_top_hat_id(1)) == "1"

    def test_three_levels(self) -> None:
        assert hat_id_to_dotted(int(HAT_1_1_1, 16)) == "1.1.1"

    def test_full_depth(self) -> None:
        assert hat_id_to_dotted(int(FULL_DEPTH, 16)) == ".".join(["1"] * 15)

    def test_zero_id(self) -> None:
        assert hat_id_to_dotted(0) == "0"

    def test_gap_drops_deeper_levels(self) -> None:
        """Rendering stops at the first zero level."""
        assert hat_id_to_dotted(int(GAPPED, 16)) == "1"

    def test_large_segments(self) -> None:
        hat_id = dotted_to_hat_id("4294967295.65535.256")
        assert hat_id_to_dotted(hat_id) == "4294967295.65535.256"

    def test_from_dotted(self) -> None:
        assert dotted_to_hat_id("1.1") == int(HAT_1_1, 16)
        assert dotted_to_hat_id("1") == int(TOP_HAT_1, 16)
        assert dotted_to_hat_id("1.2.3") == int(HAT_1_2_3, 16)

    def test_dotted_to_hex(self) -> None:
        assert dotted_to_hex("1.1") == HAT_1_1

    def test_leading_zeros_are_accepted(self) -> None:
        assert dotted_to_hat_id("01.002") == dotted_to_hat_id("1.2")

    @pytest.mark.parametrize("hex_id", WELL_FORMED_IDS)
    def test_round_trip_well_formed(self, hex_id: str) -> None:
        hat_id = int(hex_id, 16)
        assert dotted_to_hat_id(hat_id_to_dotted(hat_id)) == hat_id

    @pytest.mark.parametrize(
        "path",
        [
            "",
            "1.",
            "1..2",
            "a",
            "1.b",
            "-1",
            "1.-2",
            " 1",
            "1.+2",
            "1.2.0x3",
            "4294967296",
            "1.65536",
            "1²",
            ".".join(["1"] * 16),
        ],
    )
    def test_malformed_paths(self, path: str) -> None:
        with pytest.raises(MalformedPathError):
            dotted_to_hat_id(path)

    def test_malformed_path_error_details(self) -> None:
        with pytest.raises(MalformedPathError, match="exceeds 65535") as exc_info:
            dotted_to_hat_id("1.2.70000")
        assert exc_info.value.code == "MALFORMED_PATH"
        assert exc_info.value.details["position"] == 2

    def test_fifteen_segments_allowed(self) -> None:
        path = ".".join(["1"] * 15)
        assert hat_id_to_hex(dotted_to_hat_id(path)) == FULL_DEPTH

    def test_tree_id_from_dotted(self) -> None:
        assert tree_id_from_dotted("68.1.2") == 68
        assert tree_id_from_dotted("68") == 68
        with pytest.raises(MalformedPathError):
            tree_id_from_dotted("x.1")


class TestAdminAtLevel:
    """Tests for ancestor truncation."""

    def test_truncates_to_level(self) -> None:
        hat_id = dotted_to_hat_id("1.2.3")
        assert admin_at_level(hat_id, 1) == dotted_to_hat_id("1.2")
        assert admin_at_level(hat_id, 2) == hat_id

    def test_level_zero_is_top_hat(self) -> None:
        assert admin_at_level(dotted_to_hat_id("7.4.4.4"), 0) == tree_id_to_top_hat_id(7)

    def test_max_level_keeps_everything(self) -> None:
        hat_id = int(FULL_DEPTH, 16)
        assert admin_at_level(hat_id, 14) == hat_id

    @pytest.mark.parametrize("hex_id", HEX_IDS)
    @pytest.mark.parametrize("level", [0, 1, 5, 14])
    def test_idempotent(self, hex_id: str, level: int) -> None:
        hat_id = int(hex_id, 16)
        once = admin_at_level(hat_id, level)
        assert admin_at_level(once, level) == once

    @pytest.mark.parametrize("level", [-1, 15])
    def test_level_out_of_range(self, level: int) -> None:
        with pytest.raises(ValueError, match="Level must be between"):
            admin_at_level(int(HAT_1_1, 16), level)


class TestHierarchy:
    """Tests for segment inspection and child ids."""

    def test_segments(self) -> None:
        domain, levels = hat_id_segments(dotted_to_hat_id("1.2.3"))
        assert domain == 1
        assert len(levels) == 14
        assert levels[:3] == (2, 3, 0)
        assert not any(levels[2:])

    def test_local_level(self) -> None:
        assert local_level(tree_id_to_top_hat_id(1)) == 0
        assert local_level(dotted_to_hat_id("1.2.3")) == 2
        assert local_level(int(FULL_DEPTH, 16)) == 14
        assert local_level(int(GAPPED, 16)) == 0

    def test_is_top_hat(self) -> None:
        assert is_top_hat(tree_id_to_top_hat_id(5))
        assert not is_top_hat(dotted_to_hat_id("5.1"))
        assert not is_top_hat(int(GAPPED, 16))

    def test_is_well_formed(self) -> None:
        for hex_id in WELL_FORMED_IDS:
            assert is_well_formed(int(hex_id, 16))
        assert not is_well_formed(int(GAPPED, 16))

    def test_build_child_id(self) -> None:
        assert build_child_id(tree_id_to_top_hat_id(1), 1) == dotted_to_hat_id("1.1")
        assert build_child_id(dotted_to_hat_id("1.2"), 5) == dotted_to_hat_id("1.2.5")
        assert build_child_id(dotted_to_hat_id("1.2"), 65535) == dotted_to_hat_id("1.2.65535")

    def test_build_child_id_at_max_level(self) -> None:
        with pytest.raises(MaxLevelReachedError):
            build_child_id(int(FULL_DEPTH, 16), 1)

    @pytest.mark.parametrize("index", [0, 65536])
    def test_build_child_id_index_out_of_range(self, index: int) -> None:
        with pytest.raises(MaxHatsInLevelReachedError):
            build_child_id(tree_id_to_top_hat_id(1), index)
