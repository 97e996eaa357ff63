"""Shared fixture dataset: four places, five motifs.

    slot  tradition  (lat, lon)
    0     Alpha      (0, 0)
    1     Beta       (0, 1)
    2     Gamma      (0, 90)
    3     Delta      (45, 0)

Motif weights (1 / occurrences): a1=1/2, b2=1/2, c3=1, d4=1/2, e5=1/4.
"""

import json

import pytest

from motif_neighbors import Dataset, MotifDescription, TraditionPoint


POINTS = [
    TraditionPoint("Alpha", 0.0, 0.0),
    TraditionPoint("Beta", 0.0, 1.0),
    TraditionPoint("Gamma", 0.0, 90.0),
    TraditionPoint("Delta", 45.0, 0.0),
]

MOTIF_NAMES = ["a1_1", "b2_1", "c3_1", "d4_1", "e5_1"]

MOTIFS = {
    "a1_1": [1, 1, 0, 0],
    "b2_1": [1, 1, 0, 0],
    "c3_1": [0, 0, 1, 0],
    "d4_1": [1, 0, 0, 1],
    "e5_1": [1, 1, 1, 1],
}

TRADITIONS = {
    "Alpha": [1, 1, 0, 1, 1],
    "Beta": [1, 1, 0, 0, 1],
    "Gamma": [0, 0, 1, 0, 1],
    "Delta": [0, 0, 0, 1, 1],
}

DESCRIPTIONS = {
    "a1": MotifDescription("First motif", "Appears in the west."),
    "c3": MotifDescription("Third motif", "Appears far east."),
}


@pytest.fixture
def dataset():
    return Dataset.build(
        traditions=TRADITIONS,
        motifs=MOTIFS,
        motif_names=MOTIF_NAMES,
        points=POINTS,
        descriptions=DESCRIPTIONS,
    )


@pytest.fixture
def data_dir(tmp_path):
    """The fixture dataset written out as the service's JSON file set."""
    files = {
        "traditions.json": TRADITIONS,
        "motif_distributions.json": MOTIFS,
        "motif_vectors.json": MOTIFS,
        "new_motif_list.json": [[name, f"Motif {name}"] for name in MOTIF_NAMES],
        "coords.json": [p.to_dict() for p in POINTS],
        "new_descriptions.json": {
            key: {"Name": d.name, "Description": d.description}
            for key, d in DESCRIPTIONS.items()
        },
    }
    for name, content in files.items():
        (tmp_path / name).write_text(json.dumps(content), encoding="utf-8")
    return tmp_path
