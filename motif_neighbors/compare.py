"""
Comparison operations: the numeric kernels behind every distance metric.

Three ways of comparing two items, all over equal-length vectors:
  - MANHATTAN counts the slots where two presence vectors disagree.
  - SHARED WEIGHT sums the weights of slots where both vectors are set,
    negated so that "more shared" sorts first.
  - GEO ENVELOPE treats each vector as a set of points on the globe and
    measures the symmetric Hausdorff distance between the two sets.
"""

import numpy as np

from .errors import DimensionMismatchError

EARTH_RADIUS_KM = 6371.0


def check_lengths(a: np.ndarray, b: np.ndarray, context: str = "") -> None:
    """Raise DimensionMismatchError unless a and b have equal length."""
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b), context)


def manhattan(a: np.ndarray, b: np.ndarray) -> float:
    """Sum of absolute differences. Zero iff the vectors are identical."""
    check_lengths(a, b)
    diff = np.asarray(a, dtype=np.int64) - np.asarray(b, dtype=np.int64)
    return float(np.abs(diff).sum())


def shared_weight_score(
    a: np.ndarray, b: np.ndarray, weights: np.ndarray
) -> float:
    """Negative sum of weights over slots where both vectors hold 1.

    Always <= 0. Sharing rare (heavily weighted) slots drives the score
    further below zero than sharing common ones.
    """
    check_lengths(a, b)
    check_lengths(a, weights, "weights")
    shared = (np.asarray(a) == 1) & (np.asarray(b) == 1)
    return 0.0 - float(weights[shared].sum())


def great_circle_matrix(points_a: np.ndarray, points_b: np.ndarray) -> np.ndarray:
    """Pairwise haversine distances in km.

    Args:
        points_a: (n, 2) array of (latitude, longitude) in degrees
        points_b: (m, 2) array of (latitude, longitude) in degrees

    Returns:
        (n, m) array where [i, j] is the distance from a[i] to b[j].
    """
    a = np.radians(np.asarray(points_a, dtype=float).reshape(-1, 2))
    b = np.radians(np.asarray(points_b, dtype=float).reshape(-1, 2))
    lat1 = a[:, 0][:, np.newaxis]
    lon1 = a[:, 1][:, np.newaxis]
    lat2 = b[:, 0][np.newaxis, :]
    lon2 = b[:, 1][np.newaxis, :]

    h = (
        np.sin((lat2 - lat1) / 2.0) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2.0) ** 2
    )
    # Rounding can push h a hair outside [0, 1] for antipodal points
    h = np.clip(h, 0.0, 1.0)
    return 2.0 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(h))


def great_circle(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in km between two (lat, lon) points given in degrees."""
    return float(great_circle_matrix([[lat1, lon1]], [[lat2, lon2]])[0, 0])


def directed_envelope(distances: np.ndarray) -> float:
    """max over rows of (min over columns) of a distance matrix.

    A set with no points contributes nothing (0.0). A non-empty set
    measured against an empty one never finds a match (inf).
    """
    n_rows, n_cols = distances.shape
    if n_rows == 0:
        return 0.0
    if n_cols == 0:
        return float("inf")
    return float(distances.min(axis=1).max())


def geo_envelope(points_a: np.ndarray, points_b: np.ndarray) -> float:
    """Symmetric Hausdorff distance between two point sets on the globe."""
    distances = great_circle_matrix(points_a, points_b)
    return max(directed_envelope(distances), directed_envelope(distances.T))
