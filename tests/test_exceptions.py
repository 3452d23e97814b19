"""Tests for the error hierarchy and revert translation."""

from __future__ import annotations

import pytest

from hatscore.exceptions import (
    REVERT_MESSAGES,
    ContractRevertError,
    HatNotClaimableError,
    HatsError,
    MalformedPathError,
    MaxLevelReachedError,
    NotAdminError,
    SubgraphError,
    SubgraphHatNotExistError,
    error_from_revert,
    error_registry,
    register_error,
)


class TestHatsError:
    """Tests for the base error."""

    def test_defaults(self) -> None:
        error = HatsError()
        assert error.code == "INTERNAL_ERROR"
        assert str(error) == "An internal error occurred"
        assert error.details == {}

    def test_message_code_and_details(self) -> None:
        error = MalformedPathError("bad path", path="1..2")
        assert error.code == "MALFORMED_PATH"
        assert error.message == "bad path"
        assert error.details == {"path": "1..2"}

    def test_code_override(self) -> None:
        assert HatsError("x", code="CUSTOM").code == "CUSTOM"

    def test_hierarchy(self) -> None:
        assert issubclass(SubgraphHatNotExistError, SubgraphError)
        assert issubclass(NotAdminError, ContractRevertError)
        assert issubclass(ContractRevertError, HatsError)


class TestErrorRegistry:
    """Tests for code → class lookup."""

    def test_builtin_errors_registered(self) -> None:
        assert error_registry.get("MALFORMED_PATH") is MalformedPathError
        assert error_registry.get("NOT_ADMIN") is NotAdminError
        assert error_registry.get("UNKNOWN_RELATION") is not None

    def test_registered_under_own_code(self) -> None:
        registered = error_registry.all()
        assert all(cls.code == code for code, cls in registered.items())

    def test_unknown_code(self) -> None:
        assert error_registry.get("NO_SUCH_CODE") is None

    def test_register_error_decorator(self) -> None:
        @register_error("TEST_CUSTOM_ERROR")
        class CustomError(HatsError):
            code = "TEST_CUSTOM_ERROR"

        assert error_registry.get("TEST_CUSTOM_ERROR") is CustomError


class TestErrorFromRevert:
    """Tests for error_from_revert()."""

    def test_not_admin(self) -> None:
        error = error_from_revert("NotAdmin", ["0xabc", 42])
        assert isinstance(error, NotAdminError)
        assert str(error) == (
            "Error: address 0xabc is attempting to perform an action on 42 "
            "but is not wearing one of its admin hats"
        )
        assert error.details == {"revert": "NotAdmin", "args": ("0xabc", 42)}

    def test_message_without_arguments(self) -> None:
        error = error_from_revert("MaxLevelsReached")
        assert isinstance(error, MaxLevelReachedError)
        assert error.message.startswith("Error: attempting to create a hat with a level 14 hat")

    def test_missing_arguments_are_blank(self) -> None:
        error = error_from_revert("AlreadyWearingHat", ["0xabc"])
        assert error is not None
        assert "to address 0xabc who is already wearing" in error.message

    def test_claims_hatter_revert(self) -> None:
        error = error_from_revert("MultiClaimsHatter_HatNotClaimable", [7])
        assert isinstance(error, HatNotClaimableError)
        assert "attempting to claim hat 7" in error.message

    def test_unknown_revert(self) -> None:
        assert error_from_revert("SomethingElse", [1]) is None

    @pytest.mark.parametrize("name", sorted(REVERT_MESSAGES))
    def test_every_revert_translates(self, name: str) -> None:
        error = error_from_revert(name)
        assert isinstance(error, REVERT_MESSAGES[name][0])
        assert error.message.startswith("Error: ")
