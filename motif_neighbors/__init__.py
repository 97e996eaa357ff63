"""
motif_neighbors: nearest-neighbour queries over a folklore motif dataset.

Given a motif, find the motifs whose geographic spread is closest; given a
tradition, find the traditions with the most similar motif inventory; and
compare two traditions' inventories motif by motif.
"""

from .types import TraditionPoint, MotifDescription, Neighbor, Comparison
from .errors import (
    MotifQueryError,
    NotFoundError,
    DimensionMismatchError,
    InvalidCountError,
    DatasetError,
)
from .compare import (
    manhattan,
    shared_weight_score,
    great_circle,
    great_circle_matrix,
    geo_envelope,
)
from .store import VectorStore
from .metrics import (
    MetricKind,
    DistanceMetric,
    ManhattanMetric,
    IdfWeightedMetric,
    GeoEnvelopeMetric,
    build_metric,
    motif_weights,
)
from .ranker import rank, NeighborRanker
from .comparator import TraditionComparator
from .dataset import Dataset, load_dataset
from .service import QueryService

__all__ = [
    "TraditionPoint",
    "MotifDescription",
    "Neighbor",
    "Comparison",
    "MotifQueryError",
    "NotFoundError",
    "DimensionMismatchError",
    "InvalidCountError",
    "DatasetError",
    "manhattan",
    "shared_weight_score",
    "great_circle",
    "great_circle_matrix",
    "geo_envelope",
    "VectorStore",
    "MetricKind",
    "DistanceMetric",
    "ManhattanMetric",
    "IdfWeightedMetric",
    "GeoEnvelopeMetric",
    "build_metric",
    "motif_weights",
    "rank",
    "NeighborRanker",
    "TraditionComparator",
    "Dataset",
    "load_dataset",
    "QueryService",
]
