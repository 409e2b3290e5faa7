from __future__ import annotations

from typing import List, Optional, Sequence


def resolve_to_path(
    predecessors: Sequence[Optional[int]],
    dst_node: int,
) -> List[int]:
    """
    Rebuild the vertex sequence ending at dst_node from a predecessor array.

    Follows predecessor links back until a vertex without a predecessor (the
    source) and returns the vertices in travel order. The caller must make sure
    dst_node is reachable; for an unreachable vertex the result is just
    [dst_node].

    Args:
        predecessors: predecessors[i] is the vertex preceding i, or None.
        dst_node: Destination vertex index.

    Returns:
        Vertex indices from the source to dst_node, inclusive.

    Raises:
        ValueError: If the predecessor links loop back on themselves.
    """
    path = [dst_node]
    node = predecessors[dst_node]
    while node is not None:
        if len(path) > len(predecessors):
            raise ValueError(f"Predecessor chain of vertex {dst_node} contains a cycle.")
        path.append(node)
        node = predecessors[node]
    path.reverse()
    return path
