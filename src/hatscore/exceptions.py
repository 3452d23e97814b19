"""Unified exception hierarchy for hatscore.

All errors inherit from HatsError. This module provides:
- Base exception hierarchy with stable error codes
- ErrorRegistry for code → class lookup
- Contract revert translation (``error_from_revert``)

Usage:
    from hatscore.exceptions import (
        HatsError,
        MalformedPathError,
        UnknownRelationError,
        error_from_revert,
    )

Revert translation takes the decoded revert name and arguments produced by a
ledger collaborator and returns a typed error, or None when the name is not a
known Hats revert (the collaborator's own exception should be re-raised then).
"""

from __future__ import annotations

from typing import Any, Callable, Sequence, TypeVar, cast

__all__ = [
    # Base hierarchy
    "HatsError",
    "ConfigurationError",
    "MalformedPathError",
    "UnknownRelationError",
    "InputValidationError",
    "MaxLevelReachedError",
    "MaxHatsInLevelReachedError",
    # Subgraph
    "SubgraphError",
    "SubgraphNotSupportedError",
    "SubgraphHatNotExistError",
    "SubgraphTreeNotExistError",
    "SubgraphWearerNotExistError",
    # Contract reverts
    "ContractRevertError",
    "NotAdminError",
    "NotWearerError",
    "NotAdminOrWearerError",
    "AllHatsWornError",
    "InvalidAdminError",
    "AlreadyWearingError",
    "HatNotExistError",
    "NotActiveError",
    "NotEligibleError",
    "NotToggleError",
    "NotEligibilityError",
    "BatchParamsError",
    "ImmutableHatError",
    "InvalidMaxSupplyError",
    "CircularLinkageError",
    "CrossLinkageError",
    "NoLinkageRequestError",
    "InvalidUnlinkError",
    "ZeroAddressError",
    "StringTooLongError",
    "NotExplicitlyEligibleError",
    "HatNotClaimableError",
    "HatNotClaimableForError",
    # Registry
    "ErrorRegistry",
    "error_registry",
    "register_error",
    "REVERT_MESSAGES",
    "error_from_revert",
]


# ---- Exception Hierarchy ----------------------------------------------------


class HatsError(Exception):
    """Base exception for all hatscore errors.

    Attributes:
        code: Stable error code string (e.g. "MALFORMED_PATH").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(HatsError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"


class MalformedPathError(HatsError):
    """Dotted hat path has a bad token or too many segments."""

    code: str = "MALFORMED_PATH"
    message: str = "Malformed hat path"


class UnknownRelationError(HatsError):
    """Projection references a relation the object type does not have."""

    code: str = "UNKNOWN_RELATION"
    message: str = "Unknown relation"


class InputValidationError(HatsError):
    """Projection config or pagination filters failed validation."""

    code: str = "INPUT_VALIDATION_ERROR"


class MaxLevelReachedError(HatsError):
    """Admin hat already sits on the deepest level."""

    code: str = "MAX_LEVEL_REACHED"


class MaxHatsInLevelReachedError(HatsError):
    """No room for more children under an admin."""

    code: str = "MAX_HATS_IN_LEVEL_REACHED"


class SubgraphError(HatsError):
    """Base for failures reported around the subgraph index."""

    code: str = "SUBGRAPH_ERROR"


class SubgraphNotSupportedError(SubgraphError):
    """No subgraph endpoint configured for a chain."""

    code: str = "SUBGRAPH_NOT_SUPPORTED"


class SubgraphHatNotExistError(SubgraphError):
    code: str = "SUBGRAPH_HAT_NOT_EXIST"


class SubgraphTreeNotExistError(SubgraphError):
    code: str = "SUBGRAPH_TREE_NOT_EXIST"


class SubgraphWearerNotExistError(SubgraphError):
    code: str = "SUBGRAPH_WEARER_NOT_EXIST"


# ---- Contract Reverts -------------------------------------------------------


class ContractRevertError(HatsError):
    """A Hats contract call reverted with a known custom error."""

    code: str = "CONTRACT_REVERT"


class NotAdminError(ContractRevertError):
    code: str = "NOT_ADMIN"


class NotWearerError(ContractRevertError):
    code: str = "NOT_WEARER"


class NotAdminOrWearerError(ContractRevertError):
    code: str = "NOT_ADMIN_OR_WEARER"


class AllHatsWornError(ContractRevertError):
    code: str = "ALL_HATS_WORN"


class InvalidAdminError(ContractRevertError):
    code: str = "INVALID_ADMIN"


class AlreadyWearingError(ContractRevertError):
    code: str = "ALREADY_WEARING"


class HatNotExistError(ContractRevertError):
    code: str = "HAT_NOT_EXIST"


class NotActiveError(ContractRevertError):
    code: str = "NOT_ACTIVE"


class NotEligibleError(ContractRevertError):
    code: str = "NOT_ELIGIBLE"


class NotToggleError(ContractRevertError):
    code: str = "NOT_TOGGLE"


class NotEligibilityError(ContractRevertError):
    code: str = "NOT_ELIGIBILITY"


class BatchParamsError(ContractRevertError):
    code: str = "BATCH_PARAMS"


class ImmutableHatError(ContractRevertError):
    code: str = "IMMUTABLE_HAT"


class InvalidMaxSupplyError(ContractRevertError):
    code: str = "INVALID_MAX_SUPPLY"


class CircularLinkageError(ContractRevertError):
    code: str = "CIRCULAR_LINKAGE"


class CrossLinkageError(ContractRevertError):
    code: str = "CROSS_LINKAGE"


class NoLinkageRequestError(ContractRevertError):
    code: str = "NO_LINKAGE_REQUEST"


class InvalidUnlinkError(ContractRevertError):
    code: str = "INVALID_UNLINK"


class ZeroAddressError(ContractRevertError):
    code: str = "ZERO_ADDRESS"


class StringTooLongError(ContractRevertError):
    code: str = "STRING_TOO_LONG"


class NotExplicitlyEligibleError(ContractRevertError):
    code: str = "NOT_EXPLICITLY_ELIGIBLE"


class HatNotClaimableError(ContractRevertError):
    code: str = "HAT_NOT_CLAIMABLE"


class HatNotClaimableForError(ContractRevertError):
    code: str = "HAT_NOT_CLAIMABLE_FOR"


# ---- Error Registry ---------------------------------------------------------

_E = TypeVar("_E", bound=type[HatsError])


class ErrorRegistry:
    """Registry for mapping stable error codes to error classes."""

    def __init__(self) -> None:
        self._errors: dict[str, type[HatsError]] = {}

    def register(self, code: str, error_cls: type[HatsError]) -> None:
        self._errors[code] = error_cls

    def get(self, code: str) -> type[HatsError] | None:
        return self._errors.get(code)

    def all(self) -> dict[str, type[HatsError]]:
        return dict(self._errors)


error_registry = ErrorRegistry()


def register_error(code: str) -> Callable[[_E], _E]:
    """Decorator to register a custom error type.

    Usage:
        @register_error("MY_CUSTOM_ERROR")
        class MyCustomError(HatsError):
            code = "MY_CUSTOM_ERROR"
    """

    def decorator(cls: _E) -> _E:
        error_registry.register(code, cls)
        return cls

    return cast(Callable[[_E], _E], decorator)


for _cls in (
    HatsError,
    ConfigurationError,
    MalformedPathError,
    UnknownRelationError,
    InputValidationError,
    MaxLevelReachedError,
    MaxHatsInLevelReachedError,
    SubgraphError,
    SubgraphNotSupportedError,
    SubgraphHatNotExistError,
    SubgraphTreeNotExistError,
    SubgraphWearerNotExistError,
    ContractRevertError,
    NotAdminError,
    NotWearerError,
    NotAdminOrWearerError,
    AllHatsWornError,
    InvalidAdminError,
    AlreadyWearingError,
    HatNotExistError,
    NotActiveError,
    NotEligibleError,
    NotToggleError,
    NotEligibilityError,
    BatchParamsError,
    ImmutableHatError,
    InvalidMaxSupplyError,
    CircularLinkageError,
    CrossLinkageError,
    NoLinkageRequestError,
    InvalidUnlinkError,
    ZeroAddressError,
    StringTooLongError,
    NotExplicitlyEligibleError,
    HatNotClaimableError,
    HatNotClaimableForError,
):
    error_registry.register(_cls.code, _cls)
del _cls


# ---- Revert Translation -----------------------------------------------------

# Revert name → (error class, message template). Templates index into the
# decoded revert arguments.
REVERT_MESSAGES: dict[str, tuple[type[HatsError], str]] = {
    "NotAdmin": (
        NotAdminError,
        "address {0} is attempting to perform an action on {1} but is not wearing one of its admin hats",
    ),
    "NotHatWearer": (
        NotWearerError,
        "attempting to perform an action as or for an account that is not a wearer of a given hat",
    ),
    "NotAdminOrWearer": (
        NotAdminOrWearerError,
        "attempting to perform an action that requires being either an admin or wearer of a given hat",
    ),
    "AllHatsWorn": (
        AllHatsWornError,
        "attempting to mint {0} but its maxSupply has been reached",
    ),
    "MaxLevelsReached": (
        MaxLevelReachedError,
        "attempting to create a hat with a level 14 hat as its admin",
    ),
    "InvalidHatId": (
        InvalidAdminError,
        "provided hat id has empty intermediate level(s)",
    ),
    "AlreadyWearingHat": (
        AlreadyWearingError,
        "attempting to mint hat with ID {1} to address {0} who is already wearing the hat",
    ),
    "HatDoesNotExist": (
        HatNotExistError,
        "attempting to mint a non-existant hat with ID {0}",
    ),
    "HatNotActive": (
        NotActiveError,
        "attempting to mint or transfer a hat that is not active",
    ),
    "NotEligible": (
        NotEligibleError,
        "attempting to mint or transfer a hat to an ineligible wearer",
    ),
    "NotHatsToggle": (
        NotToggleError,
        "attempting to set a hat's status from an account that is not that hat's toggle module",
    ),
    "NotHatsEligibility": (
        NotEligibilityError,
        "attempting to check or set a hat wearer's status from an account that is not that hat's eligibility module",
    ),
    "BatchArrayLengthMismatch": (
        BatchParamsError,
        "array arguments to a batch function have mismatching lengths",
    ),
    "Immutable": (
        ImmutableHatError,
        "attempting to mutate or transfer an immutable hat",
    ),
    "NewMaxSupplyTooLow": (
        InvalidMaxSupplyError,
        "attempting to set a hat's max supply below its current supply",
    ),
    "CircularLinkage": (
        CircularLinkageError,
        "attempting to link a tophat to a new admin for which the tophat serves as an admin",
    ),
    "CrossTreeLinkage": (
        CrossLinkageError,
        "attempting to link or relink a tophat to a separate tree",
    ),
    "LinkageNotRequested": (
        NoLinkageRequestError,
        "attempting to link a tophat without a request",
    ),
    "InvalidUnlink": (
        InvalidUnlinkError,
        "attempting to unlink a tophat that does not have a wearer",
    ),
    "ZeroAddress": (
        ZeroAddressError,
        "attempting to change a hat's eligibility or toggle module to the zero address",
    ),
    "StringTooLong": (
        StringTooLongError,
        "attempting to change a hat's details or imageURI to a string with over 7000 bytes (~characters)",
    ),
    "MultiClaimsHatter_ArrayLengthMismatch": (
        BatchParamsError,
        "array arguments to a batch function have mismatching lengths",
    ),
    "MultiClaimsHatter_NotAdminOfHat": (
        NotAdminError,
        "address {0} is attempting to set the claimability of hat {1} but is not wearing one of its admin hats",
    ),
    "MultiClaimsHatter_NotExplicitlyEligible": (
        NotExplicitlyEligibleError,
        "address {0} is not explicitly eligible for hat {1}",
    ),
    "MultiClaimsHatter_HatNotClaimable": (
        HatNotClaimableError,
        "attempting to claim hat {0}, which is not claimable",
    ),
    "MultiClaimsHatter_HatNotClaimableFor": (
        HatNotClaimableForError,
        "attempting to claim hat {0} on behalf of an account, but the hat is not claimable-for",
    ),
}


def error_from_revert(name: str, args: Sequence[Any] = ()) -> HatsError | None:
    """Translate a decoded contract revert into a typed error.

    Args:
        name: Custom error name from the revert data (e.g. "NotAdmin").
        args: Decoded revert arguments, in ABI order.

    Returns:
        An error instance carrying ``revert`` and ``args`` details, or None
        if ``name`` is not a known Hats revert.
    """
    entry = REVERT_MESSAGES.get(name)
    if entry is None:
        return None

    error_cls, template = entry
    padded = list(args) + [""] * max(0, template.count("{") - len(args))
    return error_cls(f"Error: {template.format(*padded)}", revert=name, args=tuple(args))
