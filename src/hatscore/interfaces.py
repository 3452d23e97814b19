"""Collaborator contracts consumed by hatscore.

hatscore does not talk to the network. Callers plug in:
- a ``GraphQueryExecutor`` that posts query text to a subgraph endpoint;
- a ``HatsReader`` that answers read calls against the Hats contract.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class GraphQueryExecutor(Protocol):
    """Executes a GraphQL document against a subgraph endpoint."""

    async def execute(
        self,
        endpoint: str,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        """Return the ``data`` object of the response."""
        ...


@runtime_checkable
class HatsReader(Protocol):
    """Read-only view of the Hats contract state."""

    async def get_hat_level(self, hat_id: int) -> int:
        """Level in the global tree (linked trees included)."""
        ...

    async def get_local_hat_level(self, hat_id: int) -> int:
        """Level within the hat's own tree."""
        ...

    async def get_admin_at_level(self, hat_id: int, level: int) -> int:
        """Ancestor at a global level, following tree links."""
        ...

    async def get_num_children(self, hat_id: int) -> int:
        ...


__all__ = ["GraphQueryExecutor", "HatsReader"]
