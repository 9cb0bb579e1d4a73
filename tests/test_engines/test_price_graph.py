"""Tests for the price graph: insert and copy."""

from datetime import date

import pytest

from pricegraph.engines.prices import PriceGraph
from pricegraph.models.price import Price


class TestInsert:
    def test_empty_graph(self):
        graph = PriceGraph()
        assert len(graph) == 0
        assert list(graph) == []

    def test_insert_writes_forward_and_inverse(self, usd, eur, usd_eur):
        graph = PriceGraph()
        graph.insert(usd_eur)
        assert graph[eur][usd] == 0.9
        assert graph[usd][eur] == pytest.approx(1 / 0.9)
        assert len(graph) == 2

    def test_insert_last_write_wins(self, usd, eur, usd_eur):
        graph = PriceGraph()
        graph.insert(usd_eur)
        graph.insert(Price(date=date(2024, 1, 3), commodity=usd, target=eur, rate=0.95))
        assert graph[eur][usd] == 0.95
        assert graph[usd][eur] == pytest.approx(1 / 0.95)

    def test_reverse_observation_overwrites_inverse(self, usd, eur, usd_eur):
        graph = PriceGraph()
        graph.insert(usd_eur)
        graph.insert(Price(date=date(2024, 1, 3), commodity=eur, target=usd, rate=1.25))
        assert graph[usd][eur] == 1.25
        assert graph[eur][usd] == pytest.approx(0.8)

    def test_rate_lookup(self, sample_graph, usd, eur, gbp):
        assert sample_graph.rate(eur, usd) == 0.9
        assert sample_graph.rate(gbp, usd) is None
        assert sample_graph.rate(usd, usd) is None

    def test_inner_mapping_is_read_only(self, sample_graph, usd, eur):
        with pytest.raises(TypeError):
            sample_graph[eur][usd] = 2.0  # type: ignore[index]

    def test_missing_target_raises_key_error(self, sample_graph, registry):
        with pytest.raises(KeyError):
            sample_graph[registry.get("JPY")]


class TestCopy:
    def test_copy_has_same_content(self, sample_graph):
        copied = sample_graph.copy()
        assert copied is not sample_graph
        assert set(copied) == set(sample_graph)
        for target in sample_graph:
            assert dict(copied[target]) == dict(sample_graph[target])

    def test_insert_into_source_does_not_change_copy(self, sample_graph, usd, eur, chf):
        copied = sample_graph.copy()
        sample_graph.insert(Price(date=date(2024, 2, 1), commodity=usd, target=eur, rate=0.5))
        sample_graph.insert(Price(date=date(2024, 2, 1), commodity=chf, target=eur, rate=1.05))
        assert copied[eur][usd] == 0.9
        assert chf not in copied
        assert chf not in copied[eur]

    def test_insert_into_copy_does_not_change_source(self, sample_graph, usd, eur):
        copied = sample_graph.copy()
        copied.insert(Price(date=date(2024, 2, 1), commodity=usd, target=eur, rate=0.5))
        assert sample_graph[eur][usd] == 0.9
        assert copied[eur][usd] == 0.5

    def test_copy_of_empty_graph(self):
        assert len(PriceGraph().copy()) == 0
