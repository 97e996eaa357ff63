"""
Read-only vector store: item code -> fixed-length feature vector.

Built once from a code -> vector mapping and never mutated afterwards.
Vectors are copied into read-only numpy arrays on construction, so a
store can be shared between any number of concurrent readers.

Iteration order is the sorted order of codes, which keeps every ranking
over the store reproducible.
"""

import numpy as np
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple

from .errors import NotFoundError


class VectorStore:
    """Immutable mapping of item codes to integer feature vectors."""

    def __init__(self, vectors: Mapping[str, Sequence[int]], name: str = "store"):
        self.name = name
        self._vectors: Dict[str, np.ndarray] = {}
        for code in sorted(vectors):
            vec = np.array(vectors[code], dtype=np.int64)
            vec.setflags(write=False)
            self._vectors[code] = vec
        self._codes: Tuple[str, ...] = tuple(self._vectors)

    # ================================================================
    # LOOKUP
    # ================================================================

    def get(self, code: str) -> Optional[np.ndarray]:
        """Vector for code, or None when the code is unknown."""
        return self._vectors.get(code)

    def vector(self, code: str) -> np.ndarray:
        """Vector for code. Raises NotFoundError when the code is unknown."""
        vec = self._vectors.get(code)
        if vec is None:
            raise NotFoundError(code, self.name)
        return vec

    def contains(self, code: str) -> bool:
        return code in self._vectors

    def __contains__(self, code: object) -> bool:
        return code in self._vectors

    def __len__(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._codes)

    @property
    def codes(self) -> Tuple[str, ...]:
        return self._codes

    # ================================================================
    # SHAPE
    # ================================================================

    def dimensions(self) -> Dict[int, int]:
        """Histogram of vector lengths: length -> number of vectors."""
        lengths: Dict[int, int] = {}
        for vec in self._vectors.values():
            lengths[len(vec)] = lengths.get(len(vec), 0) + 1
        return lengths

    def stats(self) -> dict:
        """Return store statistics."""
        return {
            "name": self.name,
            "count": len(self._vectors),
            "dimensions": sorted(self.dimensions()),
        }
