"""Typer CLI interface for PriceGraph."""

import logging
import os
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

import typer

from pricegraph.exceptions import InvalidCommodityError, NoPriceFoundError, PriceImportError
from pricegraph.models.enums import MissingPricePolicy
from pricegraph.models.price import Holding

logger = logging.getLogger(__name__)

PRICE_FILE_SUFFIXES = {".json", ".csv"}

_BASE_HELP = "Base commodity (default: $PRICEGRAPH_BASE)"
_DATE_HELP = "Valuation date YYYY-MM-DD (default: today)"
_DB_HELP = "Path to the SQLite database file (default: $PRICEGRAPH_DB)"

app = typer.Typer(
    name="pricegraph",
    help="PriceGraph: value commodity holdings from a graph of exchange rates.",
)


def _default_db() -> Path:
    env_db = os.environ.get("PRICEGRAPH_DB")
    if env_db:
        return Path(env_db)
    return Path.home() / ".pricegraph" / "prices.db"


def _resolve_base(base: str | None) -> str:
    base = base or os.environ.get("PRICEGRAPH_BASE")
    if not base:
        typer.echo("Error: no base commodity. Use --base or set PRICEGRAPH_BASE.", err=True)
        raise typer.Exit(code=2)
    return base


def _parse_date(value: str | None) -> date:
    if value is None:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"Invalid date '{value}', expected YYYY-MM-DD") from None


def _parse_holding(value: str, registry) -> Holding:
    """Parse a SYMBOL=AMOUNT holding."""
    symbol, sep, amount = value.partition("=")
    if not sep:
        raise typer.BadParameter(f"Invalid holding '{value}', expected SYMBOL=AMOUNT")
    try:
        return Holding(commodity=registry.get(symbol), amount=Decimal(amount.strip()))
    except InvalidOperation:
        raise typer.BadParameter(f"Invalid amount in holding '{value}'") from None
    except InvalidCommodityError as exc:
        raise typer.BadParameter(str(exc)) from None


def _open_repository(db: Path | None):
    from pricegraph.db.repository import PriceRepository
    from pricegraph.db.schema import create_schema

    conn = create_schema(db or _default_db())
    return conn, PriceRepository(conn)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """PriceGraph: value commodity holdings from a graph of exchange rates."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command(name="import")
def import_cmd(
    path: Path = typer.Argument(..., help="Price file (.json, .csv) or a directory of them"),
    db: Path | None = typer.Option(None, "--db", help=_DB_HELP),
) -> None:
    """Import price observations into the PriceGraph database.

    An observation is skipped with a warning when the latest stored price
    for the same date and pair already has that rate.
    """
    from pricegraph.ingestion import get_adapter

    if not path.exists():
        typer.echo(f"Error: {path} does not exist", err=True)
        raise typer.Exit(code=1)

    if path.is_dir():
        files = sorted(
            f for f in path.iterdir() if f.is_file() and f.suffix.lower() in PRICE_FILE_SUFFIXES
        )
    else:
        files = [path]
    if not files:
        typer.echo(f"No .json or .csv files found in {path}", err=True)
        raise typer.Exit(code=1)

    conn, repo = _open_repository(db)
    imported = 0
    failed = 0
    try:
        for file_path in files:
            try:
                adapter = get_adapter(file_path.suffix, repo.registry)
                result = adapter.parse(file_path)
            except (ValueError, PriceImportError) as exc:
                typer.echo(f"  {file_path.name}: ERROR {exc}", err=True)
                failed += 1
                continue

            errors = adapter.validate(result)
            if errors:
                typer.echo(f"  {file_path.name}: ERROR " + "; ".join(errors), err=True)
                failed += 1
                continue

            batch_id = repo.create_import_batch(
                source=result.source,
                file_path=str(file_path),
                record_count=len(result.prices),
            )
            saved = 0
            for price in result.prices:
                if repo.check_price_duplicate(price):
                    typer.echo(
                        f"Warning: Duplicate price skipped: {price.date} "
                        f"{price.commodity} {price.rate!r} {price.target}",
                        err=True,
                    )
                    continue
                repo.save_price(price, batch_id)
                saved += 1
            logger.info("Imported %d price(s) from %s", saved, file_path)
            typer.echo(f"  {file_path.name}: {saved} price(s) imported")
            imported += saved
    finally:
        conn.close()

    typer.echo(f"Imported {imported} price(s) from {len(files) - failed} of {len(files)} file(s)")
    if failed:
        raise typer.Exit(code=1)


@app.command()
def prices(
    base: str | None = typer.Option(None, "--base", "-b", help=_BASE_HELP),
    on: str | None = typer.Option(None, "--date", "-d", help=_DATE_HELP),
    db: Path | None = typer.Option(None, "--db", help=_DB_HELP),
) -> None:
    """Show the price of every commodity reachable from the base commodity."""
    from pricegraph.engines.history import PriceHistory
    from pricegraph.reports.prices_report import NormalizedPricesReportGenerator

    base_symbol = _resolve_base(base)
    valuation_date = _parse_date(on)

    conn, repo = _open_repository(db)
    try:
        history = PriceHistory(repo.get_prices(until=valuation_date))
        try:
            base_commodity = repo.registry.get(base_symbol)
        except InvalidCommodityError as exc:
            raise typer.BadParameter(str(exc)) from None
        normalized = history.normalized_at(valuation_date, base_commodity)
    finally:
        conn.close()

    typer.echo(NormalizedPricesReportGenerator().render(normalized, valuation_date))


@app.command()
def valuate(
    holdings: list[str] = typer.Option(
        ..., "--holding", "-H", help="Holding as SYMBOL=AMOUNT (repeatable)"
    ),
    base: str | None = typer.Option(None, "--base", "-b", help=_BASE_HELP),
    on: str | None = typer.Option(None, "--date", "-d", help=_DATE_HELP),
    on_missing: MissingPricePolicy = typer.Option(
        MissingPricePolicy.RAISE,
        "--on-missing",
        help="What to do with holdings that have no price: raise, skip or zero",
    ),
    db: Path | None = typer.Option(None, "--db", help=_DB_HELP),
) -> None:
    """Value holdings in the base commodity as of a date."""
    from pricegraph.engines.history import PriceHistory
    from pricegraph.engines.valuator import Valuator
    from pricegraph.reports.valuation_report import ValuationReportGenerator

    base_symbol = _resolve_base(base)
    valuation_date = _parse_date(on)

    conn, repo = _open_repository(db)
    try:
        parsed = [_parse_holding(h, repo.registry) for h in holdings]
        history = PriceHistory(repo.get_prices(until=valuation_date))
        try:
            base_commodity = repo.registry.get(base_symbol)
        except InvalidCommodityError as exc:
            raise typer.BadParameter(str(exc)) from None
        normalized = history.normalized_at(valuation_date, base_commodity)
    finally:
        conn.close()

    valuator = Valuator(normalized, on_missing=on_missing)
    try:
        report = valuator.valuate(parsed, valuation_date)
    except NoPriceFoundError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(ValuationReportGenerator().render(report))
