"""Async client for the Hats subgraph.

Validates caller projections, compiles them into query text, resolves the
endpoint for a chain and hands the document to a ``GraphQueryExecutor``.
Transport is the executor's business.

Usage:
    client = HatsSubgraphClient(executor)
    hat = await client.get_hat(
        chain_id=10,
        hat_id=0x0000000100020001 << 192,
        props={"prettyId": True, "wearers": {}},
        filters={"hat": {"wearers": 50}},
    )
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..config import SubgraphConfig
from ..exceptions import (
    SubgraphHatNotExistError,
    SubgraphNotSupportedError,
    SubgraphTreeNotExistError,
    SubgraphWearerNotExistError,
)
from ..ids import hat_id_to_hex, tree_id_to_hex
from ..interfaces import GraphQueryExecutor
from ..logging import get_hats_logger, safe_log_value
from . import queries
from .compiler import FiltersLike, coerce_filters, compile_selection
from .schema import ObjectType
from .validation import validate_props

logger = get_hats_logger(__name__)

Props = Mapping[str, Any]


class HatsSubgraphClient:
    """Typed read access to the Hats subgraph.

    Every method validates ``props`` against the root type's vocabulary and
    compiles it with the optional per-relation page size ``filters``.
    """

    def __init__(
        self,
        executor: GraphQueryExecutor,
        config: Optional[SubgraphConfig] = None,
    ):
        """Initialize the client.

        Args:
            executor: Collaborator that posts query text to an endpoint.
            config: Endpoints and default page size (defaults to public endpoints).
        """
        self.executor = executor
        self.config = config or SubgraphConfig()

    def _compile(self, object_type: ObjectType, props: Props, filters: FiltersLike) -> str:
        validate_props(object_type, props)
        return compile_selection(
            object_type,
            props,
            filters=coerce_filters(filters),
            default_page_size=self.config.default_page_size,
        )

    async def _make_request(
        self,
        chain_id: int,
        query: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> dict[str, Any]:
        endpoint = self.config.endpoint_for(chain_id)
        if endpoint is None:
            raise SubgraphNotSupportedError(
                f"No subgraph support for network id {chain_id}",
                chain_id=chain_id,
            )

        logger.debug(
            "Querying %s: %s",
            safe_log_value(endpoint),
            safe_log_value(query),
            chain_id=chain_id,
        )
        return await self.executor.execute(endpoint, query, variables)

    async def get_hat(
        self,
        chain_id: int,
        hat_id: int,
        props: Props,
        filters: FiltersLike = None,
    ) -> dict[str, Any]:
        """Fetch one hat.

        Raises:
            SubgraphHatNotExistError: If the subgraph has no such hat.
        """
        fields = self._compile(ObjectType.HAT, props, filters)
        response = await self._make_request(chain_id, queries.get_hat_query(fields), {"id": hat_id_to_hex(hat_id)})

        hat = response.get("hat")
        if not hat:
            raise SubgraphHatNotExistError(
                f"Hat with an ID of {hat_id_to_hex(hat_id)} does not exist in the subgraph for chain ID {chain_id}",
                chain_id=chain_id,
                hat_id=hat_id_to_hex(hat_id),
            )
        return hat

    async def get_hats_by_ids(
        self,
        chain_id: int,
        hat_ids: Sequence[int],
        props: Props,
        filters: FiltersLike = None,
    ) -> list[dict[str, Any]]:
        """Fetch several hats; every id must exist."""
        fields = self._compile(ObjectType.HAT, props, filters)
        response = await self._make_request(
            chain_id,
            queries.get_hats_by_ids_query(fields),
            {"ids": [hat_id_to_hex(hat_id) for hat_id in hat_ids]},
        )

        hats = response.get("hats")
        if hats is None or len(hats) < len(hat_ids):
            raise SubgraphHatNotExistError(
                f"One or more of the provided hats do not exist in the subgraph for chain ID {chain_id}",
                chain_id=chain_id,
            )
        return hats

    async def get_tree(
        self,
        chain_id: int,
        tree_id: int,
        props: Props,
        filters: FiltersLike = None,
    ) -> dict[str, Any]:
        fields = self._compile(ObjectType.TREE, props, filters)
        response = await self._make_request(chain_id, queries.get_tree_query(fields), {"id": tree_id_to_hex(tree_id)})

        tree = response.get("tree")
        if not tree:
            raise SubgraphTreeNotExistError(
                f"Tree with an ID of {tree_id} does not exist in the subgraph for chain ID {chain_id}",
                chain_id=chain_id,
                tree_id=tree_id,
            )
        return tree

    async def get_trees_by_ids(
        self,
        chain_id: int,
        tree_ids: Sequence[int],
        props: Props,
        filters: FiltersLike = None,
    ) -> list[dict[str, Any]]:
        fields = self._compile(ObjectType.TREE, props, filters)
        response = await self._make_request(
            chain_id,
            queries.get_trees_by_ids_query(fields),
            {"ids": [tree_id_to_hex(tree_id) for tree_id in tree_ids]},
        )

        trees = response.get("trees")
        if trees is None or len(trees) < len(tree_ids):
            raise SubgraphTreeNotExistError(
                f"One or more of the provided trees do not exist in the subgraph for chain ID {chain_id}",
                chain_id=chain_id,
            )
        return trees

    async def get_trees_paginated(
        self,
        chain_id: int,
        props: Props,
        page: int,
        per_page: int,
        filters: FiltersLike = None,
    ) -> list[dict[str, Any]]:
        """Fetch one page of trees. Pages are 0-based."""
        fields = self._compile(ObjectType.TREE, props, filters)
        response = await self._make_request(
            chain_id,
            queries.get_paginated_trees_query(fields),
            {"skip": page * per_page, "first": per_page},
        )
        return response.get("trees") or []

    async def get_wearer(
        self,
        chain_id: int,
        wearer_address: str,
        props: Props,
        filters: FiltersLike = None,
    ) -> dict[str, Any]:
        """Fetch a wearer by address (matched case-insensitively)."""
        fields = self._compile(ObjectType.WEARER, props, filters)
        response = await self._make_request(
            chain_id,
            queries.get_wearer_query(fields),
            {"id": wearer_address.lower()},
        )

        wearer = response.get("wearer")
        if not wearer:
            raise SubgraphWearerNotExistError(
                f"Wearer with an address of {wearer_address} does not exist in the subgraph for chain ID {chain_id}",
                chain_id=chain_id,
                wearer=wearer_address,
            )
        return wearer

    async def get_wearers_of_hat_paginated(
        self,
        chain_id: int,
        hat_id: int,
        props: Props,
        page: int,
        per_page: int,
        filters: FiltersLike = None,
    ) -> list[dict[str, Any]]:
        """Fetch one page (0-based) of a hat's wearers."""
        fields = self._compile(ObjectType.WEARER, props, filters)
        response = await self._make_request(
            chain_id,
            queries.get_paginated_wearers_for_hat_query(fields),
            {"hatId": hat_id_to_hex(hat_id), "first": per_page, "skip": page * per_page},
        )

        hat = response.get("hat")
        if not hat:
            raise SubgraphHatNotExistError(
                f"Hat with an ID of {hat_id_to_hex(hat_id)} does not exist in the subgraph for chain ID {chain_id}",
                chain_id=chain_id,
                hat_id=hat_id_to_hex(hat_id),
            )
        return hat.get("wearers") or []

    async def search_trees_hats_wearers(
        self,
        chain_id: int,
        search: str,
        tree_props: Props,
        hat_props: Props,
        wearer_props: Props,
        filters: FiltersLike = None,
    ) -> dict[str, list[dict[str, Any]]]:
        """Find trees, hats (by id or pretty id) and wearers matching ``search``."""
        query = queries.search_query(
            self._compile(ObjectType.TREE, tree_props, filters),
            self._compile(ObjectType.HAT, hat_props, filters),
            self._compile(ObjectType.WEARER, wearer_props, filters),
        )
        response = await self._make_request(chain_id, query, {"search": search})
        return {
            "trees": response.get("trees") or [],
            "hats": response.get("hats") or [],
            "wearers": response.get("wearers") or [],
        }


__all__ = ["HatsSubgraphClient"]
