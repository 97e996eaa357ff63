"""
QueryService: the surface the HTTP layer talks to.

Binds the tradition and motif metrics to a Dataset once, then answers:
  - motif_query(code, n)      -> nearest motifs by geographic spread
  - tradition_query(code, n)  -> nearest traditions by shared motifs
  - compare_traditions(a, b)  -> common / only-a / only-b motifs
  - motif_distribution(code)  -> where a motif occurs
plus the static tables the map front end needs.

Results come back as plain dicts with distances already rendered as
strings, ready for JSON encoding.
"""

import logging
import math
from typing import Any, Dict, List

from .dataset import MOTIFS, TRADITIONS, Dataset
from .metrics import DistanceMetric
from .ranker import ALL, NeighborRanker
from .types import Comparison, Neighbor

logger = logging.getLogger(__name__)


def format_distance(distance: float, discrete: bool, precision: int = 5) -> str:
    """Render a distance: integral for discrete metrics, fixed otherwise."""
    if math.isinf(distance):
        return "inf" if distance > 0 else "-inf"
    if discrete:
        return str(int(round(distance)))
    # Avoid "-0.00000" for tiny negative scores
    rendered = f"{distance:.{precision}f}"
    if float(rendered) == 0.0:
        rendered = f"{0.0:.{precision}f}"
    return rendered


class QueryService:
    """Ranking and comparison queries over one immutable Dataset."""

    def __init__(self, dataset: Dataset, precision: int = 5):
        self.dataset = dataset
        self.precision = precision
        self.motif_ranker = NeighborRanker(dataset.metric_for(MOTIFS))
        self.tradition_ranker = NeighborRanker(dataset.metric_for(TRADITIONS))
        self.comparator = dataset.comparator()

    def _render(self, neighbours: List[Neighbor], metric: DistanceMetric) -> List[Dict[str, str]]:
        return [
            {
                "code": n.code,
                "distance": format_distance(n.distance, metric.discrete, self.precision),
            }
            for n in neighbours
        ]

    # ================================================================
    # RANKING
    # ================================================================

    def motif_query(self, code: str, count: int = ALL) -> List[Dict[str, str]]:
        """Motifs with the closest geographic distribution to code."""
        neighbours = self.motif_ranker.rank(code, count)
        rows = self._render(neighbours, self.motif_ranker.metric)
        for row in rows:
            desc = self.dataset.describe(row["code"])
            row["name"] = desc.name
            row["description"] = desc.description
        logger.info("motif query %s n=%d -> %d results", code, count, len(rows))
        return rows

    def tradition_query(self, code: str, count: int = ALL) -> List[Dict[str, str]]:
        """Traditions with the most similar motif inventory to code."""
        neighbours = self.tradition_ranker.rank(code, count)
        rows = self._render(neighbours, self.tradition_ranker.metric)
        logger.info("tradition query %s n=%d -> %d results", code, count, len(rows))
        return rows

    # ================================================================
    # COMPARISON / TABLES
    # ================================================================

    def compare_traditions(self, code_a: str, code_b: str) -> Comparison:
        return self.comparator.compare(code_a, code_b)

    def motif_distribution(self, code: str) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.dataset.distribution(code)]

    def tradition_points(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self.dataset.points]

    def motif_list(self) -> List[List[Any]]:
        return [list(row) for row in self.dataset.motif_list]

    def stats(self) -> dict:
        return self.dataset.stats()
