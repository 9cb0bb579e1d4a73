"""Data access layer for PriceGraph."""

import sqlite3
from datetime import date
from uuid import uuid4

from pricegraph.models.price import Price
from pricegraph.registry import CommodityRegistry


class PriceRepository:
    """CRUD operations for price observations."""

    def __init__(self, conn: sqlite3.Connection, registry: CommodityRegistry | None = None):
        self.conn = conn
        self.registry = registry if registry is not None else CommodityRegistry()

    # --- Import batches ---

    def create_import_batch(self, source: str, file_path: str, record_count: int = 0) -> str:
        """Create an import batch record. Returns the batch ID."""
        batch_id = str(uuid4())
        self.conn.execute(
            """INSERT INTO import_batches
               (id, source, file_path, record_count, status)
               VALUES (?, ?, ?, ?, 'completed')""",
            (batch_id, source, file_path, record_count),
        )
        self.conn.commit()
        return batch_id

    def get_import_batches(self) -> list[dict]:
        cursor = self.conn.execute("SELECT * FROM import_batches ORDER BY imported_at")
        columns = [desc[0] for desc in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]

    # --- Prices ---

    def save_price(self, price: Price, batch_id: str | None = None) -> str:
        """Insert a price observation. Returns the record ID."""
        record_id = str(uuid4())
        self.conn.execute(
            """INSERT INTO prices
               (id, batch_id, price_date, commodity, target, rate)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (
                record_id,
                batch_id,
                price.date.isoformat(),
                price.commodity.symbol,
                price.target.symbol,
                repr(price.rate),
            ),
        )
        self.conn.commit()
        return record_id

    def get_prices(self, until: date | None = None) -> list[Price]:
        """Retrieve price observations ordered by date, then insertion order.

        Args:
            until: If given, only observations dated on or before this day.
        """
        if until is not None:
            cursor = self.conn.execute(
                """SELECT price_date, commodity, target, rate FROM prices
                   WHERE price_date <= ? ORDER BY price_date, seq""",
                (until.isoformat(),),
            )
        else:
            cursor = self.conn.execute(
                "SELECT price_date, commodity, target, rate FROM prices ORDER BY price_date, seq"
            )
        return [
            Price(
                date=date.fromisoformat(price_date),
                commodity=self.registry.get(commodity),
                target=self.registry.get(target),
                rate=float(rate),
            )
            for price_date, commodity, target, rate in cursor.fetchall()
        ]

    def get_latest_price(self, day: date, commodity: str, target: str) -> Price | None:
        """Most recently stored observation for the pair on `day`, in either orientation."""
        cursor = self.conn.execute(
            """SELECT price_date, commodity, target, rate FROM prices
               WHERE price_date = ?
                 AND ((commodity = ? AND target = ?) OR (commodity = ? AND target = ?))
               ORDER BY seq DESC LIMIT 1""",
            (day.isoformat(), commodity, target, target, commodity),
        )
        row = cursor.fetchone()
        if row is None:
            return None
        price_date, stored_commodity, stored_target, rate = row
        return Price(
            date=date.fromisoformat(price_date),
            commodity=self.registry.get(stored_commodity),
            target=self.registry.get(stored_target),
            rate=float(rate),
        )

    def check_price_duplicate(self, price: Price) -> bool:
        """True if storing `price` would not change the pair's rate on that day.

        Only the latest stored observation for the pair counts, so a price
        corrected and then corrected back is stored again.
        """
        latest = self.get_latest_price(
            price.date, price.commodity.symbol, price.target.symbol
        )
        return latest is not None and latest == price
