"""Set comparison of two traditions' motif inventories."""

from typing import List, Sequence

from .store import VectorStore
from .types import Comparison


class TraditionComparator:
    """Partition motif slots into common / only-A / only-B.

    motif_names[i] names the motif in slot i of every tradition vector.
    That alignment is checked when the dataset is built, not per call.
    """

    def __init__(self, store: VectorStore, motif_names: Sequence[str]):
        self.store = store
        self.motif_names = tuple(motif_names)

    def compare(self, code_a: str, code_b: str) -> Comparison:
        """Motifs both traditions hold, and those each holds alone.

        Raises NotFoundError if either code is unknown.
        """
        vec_a = self.store.vector(code_a)
        vec_b = self.store.vector(code_b)

        common: List[str] = []
        only_a: List[str] = []
        only_b: List[str] = []
        for name, a, b in zip(self.motif_names, vec_a, vec_b):
            if a == 1 and b == 1:
                common.append(name)
            elif a == 1:
                only_a.append(name)
            elif b == 1:
                only_b.append(name)

        return Comparison(
            common=tuple(common), only_a=tuple(only_a), only_b=tuple(only_b)
        )
