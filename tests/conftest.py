"""Shared test fixtures for PriceGraph."""

from datetime import date

import pytest

from pricegraph.engines.prices import PriceGraph
from pricegraph.models.commodity import Commodity
from pricegraph.models.price import Price
from pricegraph.registry import CommodityRegistry


@pytest.fixture
def registry() -> CommodityRegistry:
    return CommodityRegistry()


@pytest.fixture
def usd(registry: CommodityRegistry) -> Commodity:
    return registry.get("USD")


@pytest.fixture
def eur(registry: CommodityRegistry) -> Commodity:
    return registry.get("EUR")


@pytest.fixture
def gbp(registry: CommodityRegistry) -> Commodity:
    return registry.get("GBP")


@pytest.fixture
def chf(registry: CommodityRegistry) -> Commodity:
    return registry.get("CHF")


@pytest.fixture
def usd_eur(usd: Commodity, eur: Commodity) -> Price:
    """1 USD = 0.9 EUR."""
    return Price(date=date(2024, 1, 2), commodity=usd, target=eur, rate=0.9)


@pytest.fixture
def eur_gbp(eur: Commodity, gbp: Commodity) -> Price:
    """1 EUR = 0.85 GBP."""
    return Price(date=date(2024, 1, 2), commodity=eur, target=gbp, rate=0.85)


@pytest.fixture
def sample_graph(usd_eur: Price, eur_gbp: Price) -> PriceGraph:
    graph = PriceGraph()
    graph.insert(usd_eur)
    graph.insert(eur_gbp)
    return graph
