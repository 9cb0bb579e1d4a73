"""CSV adapter for price observation files."""

import csv
from pathlib import Path

from pricegraph.exceptions import PriceImportError
from pricegraph.ingestion.base import BaseAdapter, ImportResult

_REQUIRED_COLUMNS = {"date", "commodity", "rate", "target"}


class CsvPriceAdapter(BaseAdapter):
    """Imports CSV files with a `date,commodity,rate,target` header.

    Column order is free; extra columns are ignored. Blank lines and lines
    starting with "#" are skipped.
    """

    def parse(self, file_path: Path) -> ImportResult:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        source = file_path.name
        result = ImportResult(source=source)

        with file_path.open(newline="") as f:
            lines = (line for line in f if line.strip() and not line.lstrip().startswith("#"))
            reader = csv.DictReader(lines)
            header = {name.strip().lower() for name in (reader.fieldnames or [])}
            missing = _REQUIRED_COLUMNS - header
            if missing:
                raise PriceImportError(
                    source, f"missing columns: {', '.join(sorted(missing))}"
                )
            for i, row in enumerate(reader):
                record = {
                    k.strip().lower(): (v or "").strip()
                    for k, v in row.items()
                    if k is not None
                }
                result.prices.append(self._build_price(source, i, record))

        return result
