"""
Distance metrics: pluggable strategies for "how far apart are two items".

A metric is bound once to a VectorStore plus whatever auxiliary tables it
needs (slot weights, slot coordinates), then answers distance(code_a,
code_b) by looking both vectors up in the store. Smaller always means
closer, so every variant can drive the same ranking loop.

Three variants:
  - ManhattanMetric:   raw disagreement count between presence vectors
  - IdfWeightedMetric: negative sum of weights over shared slots
                       (a ranking score, not a true metric)
  - GeoEnvelopeMetric: symmetric Hausdorff distance between the sets of
                       places where two motifs occur
"""

import logging
import numpy as np
from enum import Enum
from typing import Dict, Mapping, Optional, Sequence

from .compare import check_lengths, geo_envelope, manhattan, shared_weight_score
from .store import VectorStore
from .types import TraditionPoint

logger = logging.getLogger(__name__)


class MetricKind(str, Enum):
    MANHATTAN = "manhattan"
    IDF_WEIGHTED = "idf_weighted"
    GEO_ENVELOPE = "geo_envelope"


# ================================================================
# BASE CLASS
# ================================================================

class DistanceMetric:
    """Distance between two codes of one VectorStore."""

    kind: MetricKind
    # Discrete metrics yield whole numbers and are rendered without decimals.
    discrete: bool = False

    def __init__(self, store: VectorStore):
        self.store = store

    def distance(self, code_a: str, code_b: str) -> float:
        """Look both codes up and compare their vectors."""
        return self.between(self.store.vector(code_a), self.store.vector(code_b))

    def between(self, a: np.ndarray, b: np.ndarray) -> float:
        """Compare two raw vectors."""
        raise NotImplementedError

    def __call__(self, code_a: str, code_b: str) -> float:
        return self.distance(code_a, code_b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(store={self.store.name!r}, n={len(self.store)})"


# ================================================================
# VARIANTS
# ================================================================

class ManhattanMetric(DistanceMetric):
    """Sum of absolute differences. Symmetric, zero iff identical."""

    kind = MetricKind.MANHATTAN
    discrete = True

    def between(self, a: np.ndarray, b: np.ndarray) -> float:
        return manhattan(a, b)


class IdfWeightedMetric(DistanceMetric):
    """Negative weighted count of shared motifs.

    weights[i] is the weight of the motif in slot i of the tradition
    vectors. Scores are <= 0 and more negative means more similar, so
    traditions sharing rare motifs rank ahead of those sharing common ones.
    """

    kind = MetricKind.IDF_WEIGHTED

    def __init__(self, store: VectorStore, weights: Sequence[float]):
        super().__init__(store)
        self.weights = np.array(weights, dtype=float)
        self.weights.setflags(write=False)

    def between(self, a: np.ndarray, b: np.ndarray) -> float:
        return shared_weight_score(a, b, self.weights)


class GeoEnvelopeMetric(DistanceMetric):
    """Hausdorff distance (km) between the places two motifs occur in.

    points[i] is the location of the tradition in slot i of the motif
    vectors; a motif's point set is every slot holding 1.
    """

    kind = MetricKind.GEO_ENVELOPE

    def __init__(self, store: VectorStore, points: Sequence[TraditionPoint]):
        super().__init__(store)
        self.coords = np.array(
            [[p.latitude, p.longitude] for p in points], dtype=float
        ).reshape(-1, 2)
        self.coords.setflags(write=False)

    def point_set(self, vec: np.ndarray) -> np.ndarray:
        """(k, 2) coordinates of the slots where vec holds 1."""
        return self.coords[np.asarray(vec) == 1]

    def between(self, a: np.ndarray, b: np.ndarray) -> float:
        check_lengths(a, b)
        check_lengths(a, self.coords, "points")
        return geo_envelope(self.point_set(a), self.point_set(b))


# ================================================================
# CONSTRUCTION
# ================================================================

def motif_weights(vectors: Mapping[str, Sequence[int]]) -> Dict[str, float]:
    """1 / total occurrence count for each motif.

    Motifs that never occur get weight 0.0 so they cannot contribute to
    any shared-motif score.
    """
    weights: Dict[str, float] = {}
    for code, vec in vectors.items():
        total = int(np.sum(vec))
        if total > 0:
            weights[code] = 1.0 / total
        else:
            logger.warning("Motif %s has no occurrences; weight set to 0", code)
            weights[code] = 0.0
    return weights


def slot_weights(
    weights: Mapping[str, float], motif_names: Sequence[str]
) -> np.ndarray:
    """Align per-motif weights with tradition-vector slots.

    Slots whose motif has no weight entry get 0.0.
    """
    missing = [name for name in motif_names if name not in weights]
    if missing:
        logger.warning(
            "%d motif(s) have no weight, e.g. %s", len(missing), missing[0]
        )
    return np.array([weights.get(name, 0.0) for name in motif_names], dtype=float)


def build_metric(
    kind: MetricKind,
    store: VectorStore,
    weights: Optional[Sequence[float]] = None,
    points: Optional[Sequence[TraditionPoint]] = None,
) -> DistanceMetric:
    """Construct a metric variant bound to store and its auxiliary table."""
    kind = MetricKind(kind)
    if kind is MetricKind.MANHATTAN:
        return ManhattanMetric(store)
    if kind is MetricKind.IDF_WEIGHTED:
        if weights is None:
            raise ValueError("IDF_WEIGHTED metric requires slot weights")
        return IdfWeightedMetric(store, weights)
    if kind is MetricKind.GEO_ENVELOPE:
        if points is None:
            raise ValueError("GEO_ENVELOPE metric requires tradition points")
        return GeoEnvelopeMetric(store, points)
    raise ValueError(f"Unknown metric kind: {kind}")
