"""Base adapter interface for price ingestion."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from pricegraph.exceptions import InvalidCommodityError, PriceImportError
from pricegraph.models.price import Price
from pricegraph.registry import CommodityRegistry


@dataclass
class ImportResult:
    """Bundles the output from an adapter's parse method."""

    source: str
    prices: list[Price] = field(default_factory=list)


class BaseAdapter(ABC):
    """Abstract base class for all price file adapters."""

    def __init__(self, registry: CommodityRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CommodityRegistry()

    @abstractmethod
    def parse(self, file_path: Path) -> ImportResult:
        """Parse a file and return an ImportResult with typed models."""
        ...

    def validate(self, data: ImportResult) -> list[str]:
        """Validate parsed data. Returns a list of validation error messages."""
        errors: list[str] = []
        if not data.prices:
            errors.append(f"{data.source}: no price observations found")
        for i, price in enumerate(data.prices):
            if price.commodity == price.target:
                errors.append(
                    f"{data.source} record {i}: {price.commodity} is priced in itself"
                )
        return errors

    def _build_price(self, source: str, index: int, record: dict) -> Price:
        """Build a Price from a raw record with date/commodity/target/rate keys."""
        missing = [
            k for k in ("date", "commodity", "target", "rate") if record.get(k) in (None, "")
        ]
        if missing:
            raise PriceImportError(
                source, f"record {index} is missing {', '.join(missing)}"
            )
        rate = record["rate"]
        if isinstance(rate, bool) or not isinstance(rate, (int, float, str)):
            raise PriceImportError(
                source, f"record {index}: rate must be a number, got {rate!r}"
            )
        try:
            return Price(
                date=date.fromisoformat(str(record["date"]).strip()),
                commodity=self.registry.get(str(record["commodity"])),
                target=self.registry.get(str(record["target"])),
                rate=float(rate),
            )
        except (ValueError, OverflowError, ValidationError, InvalidCommodityError) as exc:
            raise PriceImportError(source, f"record {index}: {exc}") from exc
