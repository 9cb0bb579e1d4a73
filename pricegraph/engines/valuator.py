"""Portfolio valuation against a normalized price set."""

import logging
from datetime import date
from decimal import Decimal

from pricegraph.engines.prices import NormalizedPrices
from pricegraph.exceptions import NoPriceFoundError
from pricegraph.models.enums import MissingPricePolicy
from pricegraph.models.price import Holding
from pricegraph.models.reports import ValuationLine, ValuationReport

logger = logging.getLogger(__name__)


class Valuator:
    """Values holdings in the base commodity of a normalized price set."""

    def __init__(
        self,
        prices: NormalizedPrices,
        on_missing: MissingPricePolicy = MissingPricePolicy.RAISE,
    ) -> None:
        self.prices = prices
        self.on_missing = on_missing

    def valuate(
        self, holdings: list[Holding], valuation_date: date | None = None
    ) -> ValuationReport:
        """Value each holding and sum the results.

        Args:
            holdings: Amounts to value, each in its own commodity.
            valuation_date: Informational date carried into the report.

        Returns:
            ValuationReport with one line per valued holding.

        Raises:
            NoPriceFoundError: a holding has no price and the policy is RAISE.
        """
        report = ValuationReport(base=self.prices.base, valuation_date=valuation_date)

        for holding in holdings:
            try:
                value = self.prices.valuate(holding.commodity, holding.amount)
            except NoPriceFoundError as exc:
                if self.on_missing == MissingPricePolicy.RAISE:
                    raise
                logger.warning("%s (policy=%s)", exc, self.on_missing.value)
                report.warnings.append(str(exc))
                if self.on_missing == MissingPricePolicy.SKIP:
                    continue
                report.lines.append(
                    ValuationLine(
                        commodity=holding.commodity,
                        amount=holding.amount,
                        rate=0.0,
                        value=Decimal("0"),
                    )
                )
                continue

            report.lines.append(
                ValuationLine(
                    commodity=holding.commodity,
                    amount=holding.amount,
                    rate=self.prices[holding.commodity],
                    value=value,
                )
            )
            report.total += value

        return report
