"""SalesAnalyst revenue and best-seller methods.

Only successfully transacted invoices count towards revenue and quantities
sold. Methods that touch every merchant build their grouping dicts once per
call; nothing is kept between calls.
"""
from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Any, Dict, Iterator, List, Optional

from sales_engine.analytics.stats import total
from sales_engine.models import InvoiceItem, Item, Merchant
from sales_engine.observability import get_logger, timed
from sales_engine.validators import validate_date, validate_limit

logger = get_logger(__name__)


class RevenueMixin:

    def _invoice_totals(self) -> Dict[int, Decimal]:
        """Line item totals grouped by invoice_id."""
        totals: Dict[int, Decimal] = defaultdict(Decimal)
        for line in self.invoice_items.all():
            totals[line.invoice_id] += line.total
        return totals

    def _paid_line_items(self, merchant_id: int) -> Iterator[InvoiceItem]:
        paid = self._successful_invoice_ids()
        for invoice in self.invoices.find_all_by_merchant_id(merchant_id):
            if invoice.id in paid:
                yield from self.invoice_items.find_all_by_invoice_id(invoice.id)

    # ── Per merchant ──

    def revenue_by_merchant(self, merchant_id: int) -> Decimal:
        """Total of the merchant's successfully transacted invoices."""
        return total(line.total for line in self._paid_line_items(merchant_id))

    def merchants_items_and_quantities_sold(self, merchant_id: int) -> Dict[Item, int]:
        """Quantity sold per item over the merchant's paid invoices."""
        sold: Dict[Item, int] = {}
        for line in self._paid_line_items(merchant_id):
            item = self.items.find_by_id(line.item_id)
            if item is None:
                continue
            sold[item] = sold.get(item, 0) + line.quantity
        return sold

    def most_sold_items_for_merchant(self, merchant_id: int) -> List[Item]:
        """Items sharing the highest quantity sold."""
        sold = self.merchants_items_and_quantities_sold(merchant_id)
        if not sold:
            return []
        top = max(sold.values())
        return [item for item, quantity in sold.items() if quantity == top]

    def items_and_dollar_amount_sold_for(self, merchant_id: int) -> Dict[Item, Decimal]:
        """Revenue per item over the merchant's paid invoices."""
        revenue: Dict[Item, Decimal] = {}
        for line in self._paid_line_items(merchant_id):
            item = self.items.find_by_id(line.item_id)
            if item is None:
                continue
            revenue[item] = revenue.get(item, Decimal("0")) + line.total
        return revenue

    def best_item_for_merchant(self, merchant_id: int) -> Optional[Item]:
        """Item with the highest revenue; first seen wins ties, None without sales."""
        revenue = self.items_and_dollar_amount_sold_for(merchant_id)
        if not revenue:
            return None
        return max(revenue, key=revenue.get)

    # ── Across merchants ──

    @timed()
    def top_revenue_earners(self, count: Optional[int] = None) -> List[Merchant]:
        """
        Merchants ranked by revenue, highest first.

        Args:
            count: Number of merchants to return (default from config, 20).
                   More than the number of merchants returns all of them.

        Raises:
            ValidationError: If count is negative or not an integer
        """
        if count is None:
            count = self.analytics_config.top_earners_default
        count = validate_limit(count, "count")

        paid = self._successful_invoice_ids()
        totals = self._invoice_totals()
        revenue: Dict[int, Decimal] = defaultdict(Decimal)
        for invoice in self.invoices.all():
            if invoice.id in paid:
                revenue[invoice.merchant_id] += totals.get(invoice.id, Decimal("0"))

        # sorted() is stable, so equal revenues keep merchant order
        ranked = sorted(self.merchants.all(), key=lambda m: revenue.get(m.id, Decimal("0")), reverse=True)
        logger.debug(f"Ranked {len(ranked)} merchants by revenue")
        return ranked[:count]

    def total_revenue_by_date(self, day: Any) -> Decimal:
        """
        Revenue of paid invoices created on a calendar date.

        Args:
            day: date, datetime (time ignored) or YYYY-MM-DD string

        Raises:
            ValidationError: If day cannot be read as a date
        """
        target = validate_date(day, "date")
        paid = self._successful_invoice_ids()
        totals = self._invoice_totals()
        return total(
            totals.get(invoice.id, Decimal("0"))
            for invoice in self.invoices.all()
            if invoice.id in paid
            and invoice.created_at is not None
            and invoice.created_at.date() == target
        )
