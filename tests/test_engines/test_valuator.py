"""Tests for portfolio valuation."""

from datetime import date
from decimal import Decimal

import pytest

from pricegraph.engines.prices import normalize
from pricegraph.engines.valuator import Valuator
from pricegraph.exceptions import NoPriceFoundError
from pricegraph.models.enums import MissingPricePolicy
from pricegraph.models.price import Holding


@pytest.fixture
def holdings(usd, eur, gbp, registry) -> list[Holding]:
    return [
        Holding(commodity=usd, amount=Decimal("100")),
        Holding(commodity=eur, amount=Decimal("200")),
        Holding(commodity=registry.get("JPY"), amount=Decimal("5000")),
        Holding(commodity=gbp, amount=Decimal("10")),
    ]


class TestValuator:
    def test_all_priced(self, sample_graph, usd, eur, gbp):
        valuator = Valuator(normalize(sample_graph, gbp))
        report = valuator.valuate(
            [
                Holding(commodity=usd, amount=Decimal("100")),
                Holding(commodity=gbp, amount=Decimal("10")),
            ],
            date(2024, 1, 2),
        )
        assert report.base == gbp
        assert report.valuation_date == date(2024, 1, 2)
        assert len(report.lines) == 2
        assert float(report.lines[0].value) == pytest.approx(76.5)
        assert report.lines[0].rate == pytest.approx(0.765)
        assert float(report.total) == pytest.approx(86.5)
        assert report.warnings == []

    def test_raise_policy(self, sample_graph, gbp, holdings):
        valuator = Valuator(normalize(sample_graph, gbp), MissingPricePolicy.RAISE)
        with pytest.raises(NoPriceFoundError):
            valuator.valuate(holdings)

    def test_skip_policy(self, sample_graph, gbp, holdings):
        valuator = Valuator(normalize(sample_graph, gbp), MissingPricePolicy.SKIP)
        report = valuator.valuate(holdings)
        assert [line.commodity.symbol for line in report.lines] == ["USD", "EUR", "GBP"]
        assert float(report.total) == pytest.approx(76.5 + 170 + 10)
        assert len(report.warnings) == 1
        assert "JPY" in report.warnings[0]

    def test_zero_policy(self, sample_graph, gbp, holdings):
        valuator = Valuator(normalize(sample_graph, gbp), MissingPricePolicy.ZERO)
        report = valuator.valuate(holdings)
        assert len(report.lines) == 4
        jpy_line = report.lines[2]
        assert jpy_line.commodity.symbol == "JPY"
        assert jpy_line.value == Decimal("0")
        assert float(report.total) == pytest.approx(256.5)
        assert len(report.warnings) == 1

    def test_empty_holdings(self, sample_graph, gbp):
        report = Valuator(normalize(sample_graph, gbp)).valuate([])
        assert report.lines == []
        assert report.total == Decimal("0")
