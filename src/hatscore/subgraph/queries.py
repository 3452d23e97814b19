"""GraphQL documents for the Hats subgraph.

Each builder wraps compiled selection text in the query used by one client
operation. Variable names match what ``HatsSubgraphClient`` sends.
"""

from __future__ import annotations


def _document(signature: str, body: str) -> str:
    return f"query {signature} {{ {body} }}"


def get_hat_query(fields: str) -> str:
    return _document("getHat($id: ID!)", f"hat(id: $id) {{ {fields} }}")


def get_hats_by_ids_query(fields: str) -> str:
    return _document("getHatsByIds($ids: [ID!]!)", f"hats(where: {{ id_in: $ids }}) {{ {fields} }}")


def get_tree_query(fields: str) -> str:
    return _document("getTree($id: ID!)", f"tree(id: $id) {{ {fields} }}")


def get_trees_by_ids_query(fields: str) -> str:
    return _document("getTreesById($ids: [ID!]!)", f"trees(where: {{ id_in: $ids }}) {{ {fields} }}")


def get_paginated_trees_query(fields: str) -> str:
    return _document(
        "getPaginatedTrees($skip: Int!, $first: Int!)",
        f"trees(skip: $skip, first: $first) {{ {fields} }}",
    )


def get_wearer_query(fields: str) -> str:
    return _document("getCurrentHatsForWearer($id: ID!)", f"wearer(id: $id) {{ {fields} }}")


def get_paginated_wearers_for_hat_query(fields: str) -> str:
    return _document(
        "getPaginatedWearersForHat($hatId: ID!, $first: Int!, $skip: Int!)",
        f"hat(id: $hatId) {{ wearers(skip: $skip, first: $first) {{ {fields} }} }}",
    )


def search_query(tree_fields: str, hat_fields: str, wearer_fields: str) -> str:
    """Look a string up as a tree id, a hat id or pretty id, and a wearer address."""
    return _document(
        "search($search: String!)",
        f"trees(where: {{ id: $search }}) {{ {tree_fields} }} "
        f"hats(where: {{ or: [{{ id: $search }}, {{ prettyId: $search }}] }}) {{ {hat_fields} }} "
        f"wearers(where: {{ id: $search }}) {{ {wearer_fields} }}",
    )


__all__ = [
    "get_hat_query",
    "get_hats_by_ids_query",
    "get_paginated_trees_query",
    "get_paginated_wearers_for_hat_query",
    "get_tree_query",
    "get_trees_by_ids_query",
    "get_wearer_query",
    "search_query",
]
