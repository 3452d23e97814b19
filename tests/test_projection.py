"""Tests for projection normalization."""

from __future__ import annotations

import pytest

from hatscore import InputValidationError, normalize_props
from hatscore.subgraph.projection import RelationField, ScalarField


class TestNormalizeProps:
    """Tests for normalize_props()."""

    def test_empty_config(self) -> None:
        assert normalize_props({}) == ()

    def test_scalars_in_config_order(self) -> None:
        entries = normalize_props({"status": True, "prettyId": True, "details": True})
        assert entries == (ScalarField("status"), ScalarField("prettyId"), ScalarField("details"))

    def test_false_entries_are_dropped(self) -> None:
        entries = normalize_props({"status": False, "prettyId": True, "wearers": False})
        assert entries == (ScalarField("prettyId"),)

    def test_empty_relation(self) -> None:
        assert normalize_props({"wearers": {}}) == (RelationField("wearers", ()),)

    def test_nested_relations(self) -> None:
        """Order is kept at every depth."""
        entries = normalize_props(
            {
                "admin": {"subHats": {"prettyId": True}, "details": True},
                "prettyId": True,
            }
        )
        assert entries == (
            RelationField(
                "admin",
                (
                    RelationField("subHats", (ScalarField("prettyId"),)),
                    ScalarField("details"),
                ),
            ),
            ScalarField("prettyId"),
        )

    def test_id_is_not_injected(self) -> None:
        assert ScalarField("id") not in normalize_props({"prettyId": True})

    @pytest.mark.parametrize("value", [1, 0, "yes", None, ["prettyId"]])
    def test_invalid_values_raise(self, value: object) -> None:
        with pytest.raises(InputValidationError, match="'status'"):
            normalize_props({"status": value})

    def test_invalid_nested_value_raises(self) -> None:
        with pytest.raises(InputValidationError):
            normalize_props({"admin": {"prettyId": "true"}})

    def test_entries_are_hashable(self) -> None:
        entries = normalize_props({"admin": {"prettyId": True}})
        assert len({entries[0], entries[0]}) == 1
