"""
Print a sales summary for a directory of CSV files.

Usage:
    python -m sales_engine --data-dir ./data --top 5

Logging level and format come from SALES_ENGINE_LOG_LEVEL and
SALES_ENGINE_LOG_JSON unless --log-level is given.
"""
import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from sales_engine.config import VALID_LOG_LEVELS, ConfigurationError, config
from sales_engine.engine import SalesEngine
from sales_engine.exceptions import SalesEngineError, ValidationError
from sales_engine.models import InvoiceStatus
from sales_engine.observability import add_log_context, clear_log_context, get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize merchant sales data")
    parser.add_argument("--data-dir", type=Path, help="Directory holding the six CSV files")
    parser.add_argument("--top", type=int, help="Number of top revenue earners to list")
    parser.add_argument("--log-level", type=str.upper, choices=sorted(VALID_LOG_LEVELS))
    return parser


def print_summary(engine: SalesEngine, top: Optional[int] = None) -> None:
    sa = engine.analyst

    print(f"Merchants: {len(engine.merchants)}  Items: {len(engine.items)}  Invoices: {len(engine.invoices)}")
    print(
        f"Items per merchant: {sa.average_items_per_merchant()} "
        f"(std dev {sa.average_items_per_merchant_standard_deviation()})"
    )
    print(f"Average item price: {sa.average_item_price()}")

    print("Invoice status:")
    for status in InvoiceStatus:
        print(f"  {status.value:>8}: {sa.invoice_status(status)}%")

    print("Top revenue earners:")
    for merchant in sa.top_revenue_earners(top):
        print(f"  {merchant.id:>10}  {merchant.name:<30} {sa.revenue_by_merchant(merchant.id):>12}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging(level=args.log_level)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    data_config = replace(config.data, data_dir=args.data_dir) if args.data_dir else config.data
    add_log_context(data_dir=str(data_config.data_dir))
    try:
        engine = SalesEngine.from_csv(data_config=data_config)
        print_summary(engine, args.top)
    except (SalesEngineError, ValidationError) as e:
        logger.error(f"Summary failed: {e}")
        return 1
    finally:
        clear_log_context()

    return 0


if __name__ == "__main__":
    sys.exit(main())
