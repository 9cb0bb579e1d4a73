"""JSON adapter for price observation files."""

import json
from pathlib import Path

from pricegraph.exceptions import PriceImportError
from pricegraph.ingestion.base import BaseAdapter, ImportResult


class JsonPriceAdapter(BaseAdapter):
    """Imports a JSON list of {date, commodity, target, rate} records.

    A top-level object with a "prices" key holding that list is also accepted.
    """

    def parse(self, file_path: Path) -> ImportResult:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        source = file_path.name
        try:
            raw = json.loads(file_path.read_text())
        except json.JSONDecodeError as exc:
            raise PriceImportError(source, f"invalid JSON: {exc}") from exc

        if isinstance(raw, dict):
            raw = raw.get("prices", [])
        if not isinstance(raw, list):
            raise PriceImportError(source, "expected a list of price records")

        result = ImportResult(source=source)
        for i, record in enumerate(raw):
            if not isinstance(record, dict):
                raise PriceImportError(source, f"record {i} is not an object")
            result.prices.append(self._build_price(source, i, record))
        return result
