"""
The static dataset every query runs against.

A Dataset is assembled once at startup, validated, and then shared
read-only by every request. It replaces a pile of module-level globals
with one explicit object that can be built in memory for tests or loaded
from the JSON files the service ships with:

  traditions.json            tradition code -> motif presence vector
  motif_distributions.json   motif code -> tradition presence vector
  motif_vectors.json         motif code -> occurrence counts (optional,
                             weights only; defaults to the distributions)
  new_motif_list.json        rows whose first column is the motif code,
                             parallel to tradition-vector slots
  coords.json                [{Name, Latitude, Longitude}], parallel to
                             motif-vector slots
  new_descriptions.json      family key -> {Name, Description} (optional)
"""

import json
import logging
import numpy as np
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .comparator import TraditionComparator
from .errors import DatasetError, DimensionMismatchError, NotFoundError
from .metrics import (
    GeoEnvelopeMetric,
    IdfWeightedMetric,
    DistanceMetric,
    MetricKind,
    build_metric,
    motif_weights,
    slot_weights,
)
from .store import VectorStore
from .types import MotifDescription, TraditionPoint

logger = logging.getLogger(__name__)

MOTIFS = "motifs"
TRADITIONS = "traditions"

TRADITIONS_FILE = "traditions.json"
DISTRIBUTIONS_FILE = "motif_distributions.json"
MOTIF_VECTORS_FILE = "motif_vectors.json"
MOTIF_LIST_FILE = "new_motif_list.json"
COORDS_FILE = "coords.json"
DESCRIPTIONS_FILE = "new_descriptions.json"

# Metric each dataset selector ranks with
SELECTOR_METRICS = {
    MOTIFS: MetricKind.GEO_ENVELOPE,
    TRADITIONS: MetricKind.IDF_WEIGHTED,
}


def description_key(motif_code: str) -> str:
    """Family key of a motif code: 'B24a_7' -> 'b24a'."""
    return motif_code.split("_")[0].lower()


@dataclass(frozen=True)
class Dataset:
    """Immutable stores and side tables for motif and tradition queries."""

    traditions: VectorStore
    motifs: VectorStore
    motif_names: Tuple[str, ...]
    points: Tuple[TraditionPoint, ...]
    weights: Mapping[str, float]
    descriptions: Mapping[str, MotifDescription] = field(
        default_factory=lambda: MappingProxyType({})
    )
    motif_list: Tuple[Tuple[Any, ...], ...] = ()

    @classmethod
    def build(
        cls,
        traditions: Mapping[str, Sequence[int]],
        motifs: Mapping[str, Sequence[int]],
        motif_names: Sequence[str],
        points: Sequence[TraditionPoint],
        weight_vectors: Optional[Mapping[str, Sequence[int]]] = None,
        descriptions: Optional[Mapping[str, MotifDescription]] = None,
        motif_list: Optional[Sequence[Sequence[Any]]] = None,
    ) -> "Dataset":
        """Validate raw tables and assemble a Dataset.

        Raises:
            DimensionMismatchError: a tradition vector does not match the
                motif list, or a motif vector does not match the points
            DatasetError: a presence vector holds values other than 0/1
        """
        motif_names = tuple(motif_names)
        points = tuple(points)
        _check_presence(traditions, len(motif_names), TRADITIONS)
        _check_presence(motifs, len(points), MOTIFS)

        if weight_vectors is None:
            weight_vectors = motifs
        else:
            _check_counts(weight_vectors)
        weights = motif_weights(weight_vectors)

        if motif_list is None:
            motif_list = [[name] for name in motif_names]

        dataset = cls(
            traditions=VectorStore(traditions, name=TRADITIONS),
            motifs=VectorStore(motifs, name=MOTIFS),
            motif_names=motif_names,
            points=points,
            weights=MappingProxyType(dict(weights)),
            descriptions=MappingProxyType(
                {k.lower(): v for k, v in (descriptions or {}).items()}
            ),
            motif_list=tuple(tuple(row) for row in motif_list),
        )
        logger.info(
            "Dataset ready: %d traditions x %d motif slots, %d motifs x %d places",
            len(dataset.traditions), len(motif_names),
            len(dataset.motifs), len(points),
        )
        return dataset

    # ================================================================
    # METRICS / COMPARATOR
    # ================================================================

    def metric_for(self, selector: str) -> DistanceMetric:
        """The metric bound to a dataset selector ('motifs' or 'traditions')."""
        kind = SELECTOR_METRICS.get(selector)
        if kind is None:
            raise ValueError(f"Unknown dataset selector: {selector!r}")
        if selector == MOTIFS:
            return build_metric(kind, self.motifs, points=self.points)
        return build_metric(
            kind,
            self.traditions,
            weights=slot_weights(self.weights, self.motif_names),
        )

    def tradition_metric(self) -> IdfWeightedMetric:
        return self.metric_for(TRADITIONS)

    def motif_metric(self) -> GeoEnvelopeMetric:
        return self.metric_for(MOTIFS)

    def comparator(self) -> TraditionComparator:
        return TraditionComparator(self.traditions, self.motif_names)

    # ================================================================
    # SIDE TABLES
    # ================================================================

    def describe(self, motif_code: str) -> MotifDescription:
        return self.descriptions.get(description_key(motif_code), MotifDescription())

    def distribution(self, motif_code: str) -> Tuple[TraditionPoint, ...]:
        """Points of the traditions a motif occurs in, in slot order."""
        vec = self.motifs.get(motif_code)
        if vec is None:
            raise NotFoundError(motif_code, MOTIFS)
        return tuple(p for p, present in zip(self.points, vec) if present == 1)

    def stats(self) -> dict:
        return {
            "traditions": self.traditions.stats(),
            "motifs": self.motifs.stats(),
            "motif_slots": len(self.motif_names),
            "places": len(self.points),
        }


def _check_presence(
    vectors: Mapping[str, Sequence[int]], expected: int, name: str
) -> None:
    for code, vec in vectors.items():
        if len(vec) != expected:
            raise DimensionMismatchError(len(vec), expected, f"{name}[{code!r}]")
        try:
            values = np.asarray(vec, dtype=np.int64)
        except (TypeError, ValueError) as e:
            raise DatasetError(f"{name}[{code!r}] is not a flat integer vector") from e
        if values.ndim != 1:
            raise DatasetError(f"{name}[{code!r}] is not a flat integer vector")
        if values.size and not np.isin(values, (0, 1)).all():
            raise DatasetError(f"{name}[{code!r}] holds values other than 0/1")


def _check_counts(vectors: Mapping[str, Sequence[int]]) -> None:
    for code, vec in vectors.items():
        try:
            values = np.asarray(vec, dtype=np.int64)
        except (TypeError, ValueError) as e:
            raise DatasetError(f"weights[{code!r}] is not a flat count vector") from e
        if values.ndim != 1 or (values < 0).any():
            raise DatasetError(f"weights[{code!r}] must hold non-negative counts")


# ================================================================
# JSON LOADING
# ================================================================

def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as e:
        raise DatasetError(f"Missing data file: {path}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"Malformed JSON in {path}: {e}") from e


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _vector_table(raw: Any, path: Path) -> Dict[str, list]:
    if not isinstance(raw, dict):
        raise DatasetError(f"{path} must map codes to integer lists")
    for code, vec in raw.items():
        if not isinstance(vec, list) or not all(_is_int(v) for v in vec):
            raise DatasetError(f"{path}: {code!r} must be a list of integers")
    return raw


def _points(raw: Any, path: Path) -> Tuple[TraditionPoint, ...]:
    if not isinstance(raw, list):
        raise DatasetError(f"{path} must be a list of traditions")
    try:
        return tuple(
            TraditionPoint(
                name=str(row["Name"]),
                latitude=float(row["Latitude"]),
                longitude=float(row["Longitude"]),
            )
            for row in raw
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DatasetError(f"Bad tradition entry in {path}: {e}") from e


def _motif_names(raw: Any, path: Path) -> Tuple[str, ...]:
    if not isinstance(raw, list) or not all(
        isinstance(row, list) and row for row in raw
    ):
        raise DatasetError(f"{path} must be a list of non-empty rows")
    return tuple(str(row[0]) for row in raw)


def _descriptions(raw: Any, path: Path) -> Dict[str, MotifDescription]:
    if not isinstance(raw, dict):
        raise DatasetError(f"{path} must map motif keys to descriptions")
    for key, entry in raw.items():
        if not isinstance(entry, dict):
            raise DatasetError(f"{path}: {key!r} must be an object with Name and Description")
    return {
        key: MotifDescription(
            name=str(entry.get("Name", "")),
            description=str(entry.get("Description", "")),
        )
        for key, entry in raw.items()
    }


def load_dataset(data_dir: Union[str, Path]) -> Dataset:
    """Read and validate the JSON file set under data_dir."""
    data_dir = Path(data_dir)
    logger.info("Loading dataset from %s", data_dir)

    traditions_path = data_dir / TRADITIONS_FILE
    distributions_path = data_dir / DISTRIBUTIONS_FILE
    motif_list_path = data_dir / MOTIF_LIST_FILE
    coords_path = data_dir / COORDS_FILE
    vectors_path = data_dir / MOTIF_VECTORS_FILE
    descriptions_path = data_dir / DESCRIPTIONS_FILE

    traditions = _vector_table(_read_json(traditions_path), traditions_path)
    motifs = _vector_table(_read_json(distributions_path), distributions_path)
    motif_list = _read_json(motif_list_path)
    motif_names = _motif_names(motif_list, motif_list_path)
    points = _points(_read_json(coords_path), coords_path)

    weight_vectors = None
    if vectors_path.exists():
        weight_vectors = _vector_table(_read_json(vectors_path), vectors_path)
    descriptions = None
    if descriptions_path.exists():
        descriptions = _descriptions(_read_json(descriptions_path), descriptions_path)
    else:
        logger.info("No %s; motif descriptions will be empty", DESCRIPTIONS_FILE)

    return Dataset.build(
        traditions=traditions,
        motifs=motifs,
        motif_names=motif_names,
        points=points,
        weight_vectors=weight_vectors,
        descriptions=descriptions,
        motif_list=motif_list,
    )
