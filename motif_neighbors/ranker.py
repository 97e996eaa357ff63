"""
Brute-force nearest-neighbour ranking.

For a pivot code, every other code in the metric's store is scored with
the metric, the results are ordered by (distance, code) and truncated.
The secondary sort on code makes ties reproducible.

Work per query is O(store size x per-pair metric cost). The datasets this
serves are small and static, so no index structure is kept.
"""

import logging
import numbers
from typing import List

from .errors import DimensionMismatchError, InvalidCountError
from .metrics import DistanceMetric
from .types import Neighbor

logger = logging.getLogger(__name__)

ALL = -1


def validate_count(count: int) -> int:
    """Accept -1 ("all") or any non-negative integer, numpy integers included."""
    if isinstance(count, bool) or not isinstance(count, numbers.Integral):
        raise InvalidCountError(count)
    if count < ALL:
        raise InvalidCountError(count)
    return int(count)


def rank(pivot: str, metric: DistanceMetric, count: int = ALL) -> List[Neighbor]:
    """Return the count nearest neighbours of pivot, nearest first.

    Args:
        pivot: Code of the item to rank against; must be in metric.store
        metric: Bound distance metric
        count: -1 for every candidate, otherwise a cap >= 0

    Raises:
        NotFoundError: pivot is not in the store
        InvalidCountError: count is negative and not -1
        DimensionMismatchError: the store holds vectors of unequal length
    """
    count = validate_count(count)
    store = metric.store
    pivot_vec = store.vector(pivot)

    neighbours: List[Neighbor] = []
    for code in store:
        if code == pivot:
            continue
        try:
            distance = metric.between(pivot_vec, store.vector(code))
        except DimensionMismatchError:
            logger.error(
                "Dimension mismatch ranking %s against %s in %s",
                pivot, code, store.name,
            )
            raise
        neighbours.append(Neighbor(code=code, distance=distance))

    neighbours.sort(key=lambda n: (n.distance, n.code))
    logger.debug(
        "Ranked %d candidates for %s with %s", len(neighbours), pivot, metric
    )

    if count == ALL or count >= len(neighbours):
        return neighbours
    return neighbours[:count]


class NeighborRanker:
    """A metric paired with the ranking loop, for repeated queries."""

    def __init__(self, metric: DistanceMetric):
        self.metric = metric

    @property
    def store(self):
        return self.metric.store

    def rank(self, pivot: str, count: int = ALL) -> List[Neighbor]:
        return rank(pivot, self.metric, count)
