"""Tests for the query service and distance rendering."""

import pytest

from motif_neighbors import InvalidCountError, MetricKind, NotFoundError, QueryService
from motif_neighbors.service import format_distance


class TestFormatDistance:
    def test_discrete_is_integral(self):
        assert format_distance(3.0, discrete=True) == "3"

    def test_continuous_fixed_precision(self):
        assert format_distance(-1.25, discrete=False) == "-1.25000"
        assert format_distance(1 / 3, discrete=False, precision=2) == "0.33"

    def test_no_negative_zero(self):
        assert format_distance(-0.0, discrete=False) == "0.00000"
        assert format_distance(-1e-9, discrete=False) == "0.00000"

    def test_infinity(self):
        assert format_distance(float("inf"), discrete=False) == "inf"


class TestQueryService:
    def test_tradition_query(self, dataset):
        rows = QueryService(dataset).tradition_query("Alpha", 2)
        assert rows == [
            {"code": "Beta", "distance": "-1.25000"},
            {"code": "Delta", "distance": "-0.75000"},
        ]

    def test_motif_query_carries_descriptions(self, dataset):
        rows = QueryService(dataset).motif_query("b2_1")
        assert [r["code"] for r in rows] == ["a1_1", "d4_1", "e5_1", "c3_1"]
        assert rows[0]["distance"] == "0.00000"
        assert rows[0]["name"] == "First motif"
        assert rows[1]["name"] == ""
        assert rows[3]["description"] == "Appears far east."

    def test_precision(self, dataset):
        rows = QueryService(dataset, precision=1).motif_query("a1_1", 2)
        assert rows[1]["distance"] == "5003.8"

    def test_errors_propagate(self, dataset):
        service = QueryService(dataset)
        with pytest.raises(NotFoundError):
            service.motif_query("zz_9")
        with pytest.raises(InvalidCountError):
            service.tradition_query("Alpha", -5)

    def test_compare(self, dataset):
        result = QueryService(dataset).compare_traditions("Beta", "Delta")
        assert result.common == ("e5_1",)
        assert result.only_a == ("a1_1", "b2_1")
        assert result.only_b == ("d4_1",)

    def test_tables(self, dataset):
        service = QueryService(dataset)
        assert service.motif_distribution("c3_1") == [
            {"Name": "Gamma", "Latitude": 0.0, "Longitude": 90.0}
        ]
        assert len(service.tradition_points()) == 4
        assert service.motif_list()[0] == ["a1_1"]
        assert service.stats()["places"] == 4

    def test_rankers_bound_through_selectors(self, dataset):
        service = QueryService(dataset)
        assert service.motif_ranker.metric.kind is MetricKind.GEO_ENVELOPE
        assert service.tradition_ranker.metric.kind is MetricKind.IDF_WEIGHTED
        assert service.motif_ranker.store is dataset.motifs
        assert service.tradition_ranker.store is dataset.traditions
