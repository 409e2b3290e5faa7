from __future__ import annotations

import math
from typing import NamedTuple, Union

#: Represents numeric cost of an edge or path. Edge costs are integers;
#: unreachable distances use the INF sentinel.
Cost = Union[int, float]

#: Distance sentinel for vertices not (yet) reached from the source.
#: A float infinity never overflows when a finite cost is added to it.
INF: float = math.inf


class WeightedEdge(NamedTuple):
    """A directed edge between two vertex indices."""

    src: int
    dst: int
    weight: Cost
